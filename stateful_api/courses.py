import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request, status

from .config import Settings, settings as default_settings
from .database import CourseStore
from .errors import register_exception_handlers
from .models import Course, CourseCreate

logger = logging.getLogger(__name__)

ID_NOT_ALLOWED = "Course ID is auto-generated and should not be provided."


# ---------------- Dependencias ----------------

def get_store(request: Request) -> CourseStore:
    """Devuelve el almacén inyectado al construir la app."""
    return request.app.state.store


# ---------------- FastAPI ----------------

def create_courses_app(
    store: Optional[CourseStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Construye la API de cursos sobre un ``CourseStore``.

    Si no se pasa un almacén se crea uno con los datos iniciales; un
    error en esos datos se propaga como ``SeedDataError``.
    """
    settings = settings or default_settings
    app = FastAPI(
        title=f"{settings.project_name} - Cursos",
        description="CRUD en memoria de cursos, seguro ante peticiones concurrentes.",
        version=settings.api_version,
    )
    app.state.store = store if store is not None else CourseStore.from_seed()
    register_exception_handlers(app)

    # ---------------- Endpoints CRUD básicos ----------------

    @app.get("/courses", response_model=List[Course])
    def listar_cursos(store: CourseStore = Depends(get_store)):
        """Lista todos los cursos en orden de creación."""
        return store.list()

    @app.post("/courses", response_model=Course, status_code=status.HTTP_201_CREATED)
    def crear_curso(curso: CourseCreate, store: CourseStore = Depends(get_store)):
        """Crea un nuevo curso con un ID autogenerado."""
        if curso.id:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ID_NOT_ALLOWED)
        return store.create(curso)

    logger.info("API de cursos lista con %d cursos iniciales", len(app.state.store))
    return app
