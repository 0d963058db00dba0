from functools import lru_cache

from core.application.alternar_tarea import AlternarTareaUseCase
from core.application.crear_tarea import CrearTareaUseCase
from core.application.eliminar_tareas import EliminarTareasUseCase
from core.application.listar_tareas import ListarTareasUseCase
from core.domain.ports.lista_tareas_store import ListaTareasStore
from infrastructure.memoria.lista_tareas_store import InMemoryListaTareasStore


@lru_cache(maxsize=1)
def get_lista_tareas_store() -> ListaTareasStore:
    # Una sola lista por proceso: el estado vive solo en memoria.
    return InMemoryListaTareasStore()


def get_crear_tarea_use_case(store: ListaTareasStore | None = None) -> CrearTareaUseCase:
    return CrearTareaUseCase(store=store if store is not None else get_lista_tareas_store())


def get_alternar_tarea_use_case(
    store: ListaTareasStore | None = None,
) -> AlternarTareaUseCase:
    return AlternarTareaUseCase(store=store if store is not None else get_lista_tareas_store())


def get_eliminar_tareas_use_case(
    store: ListaTareasStore | None = None,
) -> EliminarTareasUseCase:
    return EliminarTareasUseCase(store=store if store is not None else get_lista_tareas_store())


def get_listar_tareas_use_case(
    store: ListaTareasStore | None = None,
) -> ListarTareasUseCase:
    return ListarTareasUseCase(store=store if store is not None else get_lista_tareas_store())
