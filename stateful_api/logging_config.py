"""
Configuración básica de logging.

``setup_logging`` agrega un handler de consola (y opcionalmente uno de
archivo) al logger raíz una sola vez.  Los módulos usan
``logging.getLogger(__name__)``.
"""

import logging
from pathlib import Path
from typing import Optional


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configura el logger raíz si todavía no tiene handlers.

    Parameters
    ----------
    level : str
        Nombre del nivel (``"DEBUG"``, ``"INFO"``...), sin importar
        mayúsculas.
    logfile : Optional[str]
        Ruta de un archivo de log adicional.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
