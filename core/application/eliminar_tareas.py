from dataclasses import dataclass, field

from core.domain.models.tarea import Tarea
from core.domain.ports.lista_tareas_store import ListaTareasStore


class ConfirmacionRequeridaError(ValueError):
    """El borrado es destructivo y no se confirmó."""


@dataclass(slots=True)
class EliminarTareasCommand:
    posiciones: list[int] = field(default_factory=list)
    confirmada: bool = False


class EliminarTareasUseCase:
    def __init__(self, store: ListaTareasStore) -> None:
        self._store = store

    def execute(self, cmd: EliminarTareasCommand) -> list[Tarea]:
        if not cmd.confirmada:
            raise ConfirmacionRequeridaError(
                "Confirma la eliminación de las tareas seleccionadas"
            )
        return self._store.eliminar_posiciones(cmd.posiciones)
