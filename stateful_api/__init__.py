"""
Dos servicios HTTP mínimos con estado compartido en memoria.

- ``courses``: CRUD (listar/crear) de cursos sobre un ``CourseStore``.
- ``counter``: ``CounterHandler`` que cuenta las llamadas a ``/count``.

Ambos protegen su estado con un lock y reciben ese estado al construir
la app, sin variables globales.
"""

from .counter import CounterHandler, create_counter_app  # noqa: F401
from .courses import create_courses_app  # noqa: F401
from .database import CourseStore, SeedDataError  # noqa: F401
