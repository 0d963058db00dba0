from dataclasses import dataclass
from datetime import date

from core.domain.models.tarea import Categoria, Prioridad, Tarea
from core.domain.ports.lista_tareas_store import ListaTareasStore


@dataclass(slots=True)
class CrearTareaCommand:
    titulo: str
    prioridad: Prioridad = Prioridad.MEDIA
    fecha_limite: date | None = None
    categoria: Categoria | None = None
    etiquetas: list[str] | None = None


class CrearTareaUseCase:
    def __init__(self, store: ListaTareasStore) -> None:
        self._store = store

    def execute(self, cmd: CrearTareaCommand) -> Tarea:
        if not cmd.titulo.strip():
            raise ValueError("El título de la tarea no puede estar vacío")

        return self._store.agregar(
            titulo=cmd.titulo,
            prioridad=cmd.prioridad,
            fecha_limite=cmd.fecha_limite,
            categoria=cmd.categoria,
            etiquetas=cmd.etiquetas,
        )
