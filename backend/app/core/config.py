# backend/app/core/config.py
"""
Este archivo contiene la configuración de la aplicación.
"""

from pydantic_settings import BaseSettings
from typing import Optional
from pathlib import Path
import os

# Apunta al directorio 'backend/'
BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    """
    Configuración de la aplicación usando Pydantic BaseSettings.
    Variables sensibles desde .env, defaults seguros para el resto.
    """
    # Configuración general del proyecto
    BASE_DIR: Path = BASE_DIR
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "GameStore API"
    PROJECT_VERSION: str = "0.1.0"

    # Configuración de la base de datos
    POSTGRES_SERVER: str = os.getenv("POSTGRES_SERVER", "postgres")
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "user")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "password")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "gamestore_db")
    POSTGRES_PORT: str = os.getenv("POSTGRES_PORT", "5432")

    # URL completa opcional (tests locales, despliegues con URL gestionada)
    DATABASE_URI: Optional[str] = None

    @property
    def DATABASE_URL(self) -> str:
        """URL de conexión a la base de datos asíncrona."""
        if self.DATABASE_URI:
            return self.DATABASE_URI
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # Admin Token - REQUERIDO del .env (sensible). Protege el alta inicial del administrador.
    ADMIN_TOKEN: str

    # Cuenta de administrador creada por /setup/admin si no se indica otra
    DEFAULT_ADMIN_EMAIL: str = "admin@gamestore.com"
    DEFAULT_ADMIN_PASSWORD: str = "admin123"

    # Logging - Defaults seguros
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # App Info - Del .env con defaults
    APP_NAME: str = "GameStore"
    APP_ENVIRONMENT: str = "development"

    # Server - Del .env con defaults
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Tienda
    LOW_STOCK_THRESHOLD: int = 5  # Usado si no existe el ajuste 'low_stock_threshold'
    CURRENCY_SYMBOL: str = "€"

    # Imágenes subidas desde el panel
    IMAGE_DEFAULT_WIDTH: int = 400
    IMAGE_DEFAULT_HEIGHT: int = 400
    IMAGE_MAX_DIMENSION: int = 4096

    # Discord - Opcional. Webhook al que se avisa de cada nueva solicitud de compra
    discord_webhook_url: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = False

# Instancia global de la configuración
settings = Settings()
