from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from core.domain.models.tarea import Tarea

from backend_fastapi.api.deps import (
    alternar_tarea_use_case,
    crear_tarea_use_case,
    eliminar_tareas_use_case,
    listar_tareas_use_case,
)
from core.application.alternar_tarea import AlternarTareaCommand, AlternarTareaUseCase
from core.application.crear_tarea import CrearTareaCommand, CrearTareaUseCase
from core.application.eliminar_tareas import (
    ConfirmacionRequeridaError,
    EliminarTareasCommand,
    EliminarTareasUseCase,
)
from core.application.listar_tareas import ListarTareasUseCase

router = APIRouter(prefix="/tareas", tags=["tareas"])


@router.get(
    "",
    response_model=list[Tarea],
    summary="Listar todas las tareas",
)
def listar_tareas(
    use_case: ListarTareasUseCase = Depends(listar_tareas_use_case),
) -> list[Tarea]:
    """
    Obtiene la lista de tareas en orden de inserción.
    """
    return list(use_case.execute())


@router.post(
    "",
    response_model=list[Tarea],
    status_code=status.HTTP_201_CREATED,
    summary="Agregar una nueva tarea",
)
def crear_tarea(
    cmd: CrearTareaCommand,
    use_case: CrearTareaUseCase = Depends(crear_tarea_use_case),
    listar: ListarTareasUseCase = Depends(listar_tareas_use_case),
) -> list[Tarea]:
    """
    Agrega una tarea al final de la lista y devuelve la lista actualizada.

    - **titulo**: Título de la tarea (no vacío).
    - **prioridad**: alta, media o baja (por defecto media).
    - **fecha_limite**: Fecha límite opcional.
    - **categoria**: personal, trabajo o estudio (opcional).
    - **etiquetas**: Lista opcional de etiquetas.
    """
    try:
        use_case.execute(cmd)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return list(listar.execute())


@router.patch(
    "/{tarea_id}/completada",
    response_model=list[Tarea],
    summary="Alternar el estado completado de una tarea",
)
def alternar_tarea(
    tarea_id: UUID,
    use_case: AlternarTareaUseCase = Depends(alternar_tarea_use_case),
    listar: ListarTareasUseCase = Depends(listar_tareas_use_case),
) -> list[Tarea]:
    """
    Marca o desmarca una tarea como completada.

    - **tarea_id**: UUID de la tarea. Si no existe, la lista no cambia.
    """
    use_case.execute(AlternarTareaCommand(id=tarea_id))
    return list(listar.execute())


@router.post(
    "/eliminar",
    response_model=list[Tarea],
    summary="Eliminar las tareas seleccionadas",
)
def eliminar_tareas(
    cmd: EliminarTareasCommand,
    use_case: EliminarTareasUseCase = Depends(eliminar_tareas_use_case),
    listar: ListarTareasUseCase = Depends(listar_tareas_use_case),
) -> list[Tarea]:
    """
    Elimina las tareas en las posiciones seleccionadas.

    - **posiciones**: Posiciones (desde 0) en la lista actual. Las que estén
      fuera de rango se ignoran.
    - **confirmada**: Debe ser `true`; sin confirmación no se borra nada.
    """
    try:
        use_case.execute(cmd)
    except ConfirmacionRequeridaError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return list(listar.execute())
