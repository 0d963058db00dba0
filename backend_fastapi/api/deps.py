from fastapi import Depends

from core.application.alternar_tarea import AlternarTareaUseCase
from core.application.crear_tarea import CrearTareaUseCase
from core.application.eliminar_tareas import EliminarTareasUseCase
from core.application.listar_tareas import ListarTareasUseCase
from core.domain.ports.lista_tareas_store import ListaTareasStore
from infrastructure.container import (
    get_alternar_tarea_use_case,
    get_crear_tarea_use_case,
    get_eliminar_tareas_use_case,
    get_lista_tareas_store,
    get_listar_tareas_use_case,
)


def lista_tareas_store() -> ListaTareasStore:
    return get_lista_tareas_store()


def crear_tarea_use_case(
    store: ListaTareasStore = Depends(lista_tareas_store),
) -> CrearTareaUseCase:
    return get_crear_tarea_use_case(store)


def alternar_tarea_use_case(
    store: ListaTareasStore = Depends(lista_tareas_store),
) -> AlternarTareaUseCase:
    return get_alternar_tarea_use_case(store)


def eliminar_tareas_use_case(
    store: ListaTareasStore = Depends(lista_tareas_store),
) -> EliminarTareasUseCase:
    return get_eliminar_tareas_use_case(store)


def listar_tareas_use_case(
    store: ListaTareasStore = Depends(lista_tareas_store),
) -> ListarTareasUseCase:
    return get_listar_tareas_use_case(store)
