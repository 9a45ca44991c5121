# -*- coding: utf-8 -*-
"""
backend/app/__init__.py

Inicializador del paquete principal 'app' del backend de checkout.

Permite que los módulos internos puedan importarse como 'app.*'
cuando la carpeta 'backend' se incluye en PYTHONPATH.
"""

# Fin del archivo backend/app/__init__.py
