import logging
import threading
from typing import Iterable, List, Optional

from pydantic import TypeAdapter, ValidationError

from .models import Course, CourseBase

logger = logging.getLogger(__name__)

# Datos iniciales del "almacén" en memoria
SEED_COURSES_JSON = """
[
    {"id": 1, "name": "Golang", "price": 100, "instructor": "John Doe"},
    {"id": 2, "name": "Python", "price": 200, "instructor": "Jane Smith"},
    {"id": 3, "name": "Java", "price": 150, "instructor": "Bob Johnson"}
]
"""

_courses_adapter = TypeAdapter(List[Course])


class SeedDataError(RuntimeError):
    """Los datos iniciales no se pudieron interpretar."""


def load_seed(raw: str = SEED_COURSES_JSON) -> List[Course]:
    """Interpreta el JSON de datos iniciales.

    Cualquier error de formato es fatal para el proceso: se lanza
    ``SeedDataError`` y el punto de entrada termina.
    """
    try:
        return _courses_adapter.validate_json(raw)
    except ValidationError as e:
        raise SeedDataError(f"Datos iniciales inválidos: {e}") from e


class CourseStore:
    """Lista ordenada de cursos protegida por un lock.

    Toda lectura o escritura de la lista pasa por ``_lock``; ``create``
    calcula el siguiente id y agrega el curso en una sola sección
    crítica, así dos peticiones concurrentes nunca reciben el mismo id.
    """

    def __init__(self, initial: Optional[Iterable[Course]] = None):
        self._courses: List[Course] = list(initial or [])
        self._lock = threading.Lock()

    @classmethod
    def from_seed(cls, raw: str = SEED_COURSES_JSON) -> "CourseStore":
        return cls(load_seed(raw))

    def __len__(self) -> int:
        with self._lock:
            return len(self._courses)

    def _next_id(self) -> int:
        # Requiere tener _lock tomado.
        highest_id = -1
        for course in self._courses:
            if course.id > highest_id:
                highest_id = course.id
        return highest_id + 1

    def next_id(self) -> int:
        with self._lock:
            return self._next_id()

    def list(self) -> List[Course]:
        """Copia de los cursos en orden de inserción."""
        with self._lock:
            return list(self._courses)

    def create(self, data: CourseBase) -> Course:
        """Asigna el siguiente id, agrega el curso y lo devuelve."""
        fields = data.model_dump(include={"name", "price", "instructor"})
        with self._lock:
            nuevo = Course(id=self._next_id(), **fields)
            self._courses.append(nuevo)
        logger.info("Curso creado id=%s name=%r", nuevo.id, nuevo.name)
        return nuevo
