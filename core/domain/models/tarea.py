from dataclasses import dataclass
from datetime import date
from enum import Enum
from uuid import UUID


class Prioridad(Enum):
    ALTA = "alta"
    MEDIA = "media"
    BAJA = "baja"


class Categoria(Enum):
    PERSONAL = "personal"
    TRABAJO = "trabajo"
    ESTUDIO = "estudio"


@dataclass(frozen=True, slots=True)
class Tarea:
    id: UUID
    titulo: str
    prioridad: Prioridad
    completada: bool = False
    fecha_limite: date | None = None
    categoria: Categoria | None = None
    etiquetas: tuple[str, ...] | None = None
