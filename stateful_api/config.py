"""
Configuración mínima leída de variables de entorno.

Todos los valores tienen un default, así que ambos servicios arrancan
sin configuración alguna en el puerto local fijo 8080.  No hay archivos
de configuración ni estado persistido entre reinicios.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Parámetros de los servicios."""

    project_name: str = os.getenv("PROJECT_NAME", "Stateful API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    host: str = os.getenv("STATEFUL_API_HOST", "127.0.0.1")
    port: int = int(os.getenv("STATEFUL_API_PORT", "8080"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None


# Instancia única; las variables de entorno deben existir antes de importar.
settings = Settings()
