from pydantic import BaseModel, ConfigDict
from typing import Optional


class CourseBase(BaseModel):
    # Sin coerción: "100", true o 1.0 como precio son error del cliente.
    model_config = ConfigDict(strict=True)

    name: str = ""
    price: int = 0
    instructor: str = ""


class CourseCreate(CourseBase):
    # Ausente, null o 0 significan "sin id"; el servidor lo asigna.
    id: Optional[int] = None


class Course(CourseBase):
    id: int
