from core.domain.models.tarea import Tarea
from core.domain.ports.lista_tareas_store import ListaTareasStore


class ListarTareasUseCase:
    def __init__(self, store: ListaTareasStore) -> None:
        self._store = store

    def execute(self) -> tuple[Tarea, ...]:
        return self._store.list()
