import logging
import threading
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse

from .config import Settings, settings as default_settings
from .errors import register_exception_handlers

logger = logging.getLogger(__name__)

COUNT_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


class CounterHandler:
    """Handler con estado: un entero compartido por todas las peticiones.

    El incremento y la lectura del nuevo valor ocurren dentro del mismo
    lock, así ninguna petición ve un conteo repetido o atrasado.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counter = 0

    def increment(self) -> int:
        with self._lock:
            self._counter += 1
            count = self._counter
        return count

    @property
    def value(self) -> int:
        with self._lock:
            return self._counter


def get_counter(request: Request) -> CounterHandler:
    return request.app.state.counter


def create_counter_app(
    handler: Optional[CounterHandler] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Construye la app del contador con un único ``CounterHandler``."""
    settings = settings or default_settings
    app = FastAPI(
        title=f"{settings.project_name} - Contador",
        description="Cuenta cuántas veces se llamó al endpoint /count.",
        version=settings.api_version,
    )
    app.state.counter = handler if handler is not None else CounterHandler()
    register_exception_handlers(app)

    @app.api_route("/count", methods=COUNT_METHODS, response_class=PlainTextResponse)
    def contar(counter: CounterHandler = Depends(get_counter)):
        """Incrementa el contador y devuelve el nuevo valor en texto plano."""
        count = counter.increment()
        logger.debug("/count llamado, valor=%d", count)
        return f"This endpoint was called {count} times\n"

    return app
