from dataclasses import dataclass
from uuid import UUID

from core.domain.models.tarea import Tarea
from core.domain.ports.lista_tareas_store import ListaTareasStore


@dataclass(slots=True)
class AlternarTareaCommand:
    id: UUID


class AlternarTareaUseCase:
    def __init__(self, store: ListaTareasStore) -> None:
        self._store = store

    def execute(self, cmd: AlternarTareaCommand) -> Tarea | None:
        # Un id desconocido no es un error: la lista queda intacta.
        return self._store.alternar_completada(cmd.id)
