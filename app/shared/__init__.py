# -*- coding: utf-8 -*-
"""
backend/app/shared/__init__.py

Infraestructura compartida: configuración, base de datos y eventos.

No inicializa settings ni engine en import-time; cada subpaquete se
importa explícitamente:
    from app.shared.config import get_settings
    from app.shared.events import EventManager
"""
