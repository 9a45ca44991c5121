# -*- coding: utf-8 -*-
"""
backend/app/main.py

Punto de entrada principal del backend de checkout.

Ajustes clave:
- Uso de app.core.settings como fachada de configuración.
- Logging centralizado (plain / json) según settings.
- Creación de tablas en desarrollo y pruebas (en producción las crea el DBA).
- CORS según CORS_ORIGINS.
- Health principal /health delegado al paquete app.routes (health_routes.py)

Fecha: 17/11/2025
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de cualquier import que lea settings
# En DEV: override=True para que .env mande sobre variables del entorno
# En PROD: override=False para respetar variables del entorno
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_ENVIRONMENT = os.getenv("PYTHON_ENV", "development").strip().strip('"').strip("'").lower()
_override_env = _ENVIRONMENT == "development"
load_dotenv(dotenv_path=_ENV_PATH, override=_override_env)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.settings import get_settings
from app.core.logging import setup_logging
from app.core.db import Base, engine
from app.routes import router as app_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    settings = get_settings()
    setup_logging(level=settings.log_level, fmt=settings.log_format)

    if not settings.is_prod:
        # Registra los modelos en Base.metadata antes de create_all
        from app.modules.payments import models as _payments_models  # noqa: F401

        Base.metadata.create_all(bind=engine)
        logger.info("[startup] Tablas verificadas (create_all)")

    logger.info(f"[startup] {settings.app_name} v{settings.app_version} ({settings.python_env})")

    yield

    # ────────── SHUTDOWN ──────────
    engine.dispose()
    logger.info("[shutdown] Engine liberado")


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(app_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run("app.main:app", host=_settings.app_host, port=_settings.app_port)

# Fin del archivo backend/app/main.py
