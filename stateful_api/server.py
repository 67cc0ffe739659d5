"""
Puntos de entrada de los dos servicios.

Cada servicio es un proceso independiente servido por Uvicorn::

    courses-server --port 8080
    counter-server --port 8080

o bien ``python -m stateful_api courses`` / ``python -m stateful_api counter``.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

import uvicorn
from fastapi import FastAPI

from .config import settings
from .counter import create_counter_app
from .courses import create_courses_app
from .database import SeedDataError
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def _parse_args(description: str, argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--host", type=str, default=settings.host, help="Interfaz a escuchar")
    parser.add_argument("--port", type=int, default=settings.port, help="Puerto local")
    parser.add_argument("--log-level", type=str, default=settings.log_level, help="Nivel de log")
    return parser.parse_args(argv)


def _serve(build_app: Callable[[], FastAPI], description: str, argv: Optional[List[str]]) -> int:
    args = _parse_args(description, argv)
    setup_logging(args.log_level, settings.log_file)

    try:
        app = build_app()
    except SeedDataError:
        logger.critical("No se pudieron cargar los datos iniciales", exc_info=True)
        return 1

    config = uvicorn.Config(
        app=app,
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
        reload=False,
    )
    server = uvicorn.Server(config)
    logger.info("%s escuchando en http://%s:%d", description, args.host, args.port)

    try:
        server.run()
        return 0
    except KeyboardInterrupt:
        return 130
    except (OSError, RuntimeError) as e:
        logger.error("Error del servidor: %s", e)
        return 1


def run_courses(argv: Optional[List[str]] = None) -> int:
    """Servicio de cursos (``GET``/``POST /courses``)."""
    return _serve(create_courses_app, "API de cursos", argv)


def run_counter(argv: Optional[List[str]] = None) -> int:
    """Servicio del contador (``/count``)."""
    return _serve(create_counter_app, "Contador", argv)


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    services = {"courses": run_courses, "counter": run_counter}
    if not argv or argv[0] not in services:
        print("uso: python -m stateful_api {courses,counter} [--host H] [--port P]", file=sys.stderr)
        return 2
    return services[argv[0]](argv[1:])


def courses_entry() -> None:
    sys.exit(run_courses())


def counter_entry() -> None:
    sys.exit(run_counter())
