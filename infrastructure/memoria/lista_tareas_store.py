import dataclasses
import logging
from collections.abc import Callable, Iterable
from datetime import date
from uuid import UUID, uuid4

from core.domain.models.tarea import Categoria, Prioridad, Tarea
from core.domain.ports.lista_tareas_store import ListaTareasStore, Observador

logger = logging.getLogger(__name__)


class InMemoryListaTareasStore(ListaTareasStore):
    """
    Store en memoria de la lista de tareas.

    - El orden de inserción es el orden de visualización.
    - Las tareas son inmutables; alternar `completada` reemplaza el registro
      en la misma posición conservando su `id`.
    - Las operaciones sin efecto (id desconocido, posiciones fuera de rango)
      no fallan ni notifican; solo dejan traza en DEBUG.
    """

    def __init__(self) -> None:
        self._tareas: list[Tarea] = []
        self._observadores: list[Observador] = []

    def __len__(self) -> int:
        return len(self._tareas)

    # ── Lectura ──────────────────────────────────────────────────────────────

    def get(self, tarea_id: UUID) -> Tarea | None:
        for tarea in self._tareas:
            if tarea.id == tarea_id:
                return tarea
        return None

    # ── Mutaciones ───────────────────────────────────────────────────────────

    def agregar(
        self,
        titulo: str,
        prioridad: Prioridad,
        fecha_limite: date | None = None,
        categoria: Categoria | None = None,
        etiquetas: Iterable[str] | None = None,
    ) -> Tarea:
        tarea = Tarea(
            id=uuid4(),
            titulo=titulo,
            prioridad=prioridad,
            fecha_limite=fecha_limite,
            categoria=categoria,
            etiquetas=tuple(etiquetas) if etiquetas is not None else None,
        )
        self._tareas.append(tarea)
        logger.info(f"➕ Tarea {tarea.id} agregada en posición {len(self._tareas) - 1}")
        self._notificar()
        return tarea

    def alternar_completada(self, tarea_id: UUID) -> Tarea | None:
        for indice, tarea in enumerate(self._tareas):
            if tarea.id == tarea_id:
                actualizada = dataclasses.replace(tarea, completada=not tarea.completada)
                self._tareas[indice] = actualizada
                logger.info(
                    f"✔ Tarea {tarea_id} marcada como "
                    f"{'completada' if actualizada.completada else 'pendiente'}"
                )
                self._notificar()
                return actualizada

        logger.debug(f"Tarea {tarea_id} no encontrada; nada que alternar")
        return None

    def eliminar_posiciones(self, posiciones: Iterable[int]) -> list[Tarea]:
        """
        Elimina las tareas en las posiciones indicadas en una sola operación.

        Las posiciones se deduplican y se procesan de mayor a menor: cada
        `pop` solo desplaza elementos posteriores, que ya fueron procesados.
        Las posiciones fuera de [0, len - 1] se ignoran.

        Returns:
            Las tareas eliminadas, en su orden original de visualización.
        """
        solicitadas = set(posiciones)
        validas = sorted(
            (p for p in solicitadas if 0 <= p < len(self._tareas)), reverse=True
        )

        ignoradas = solicitadas.difference(validas)
        if ignoradas:
            logger.debug(
                f"Posiciones fuera de rango ignoradas: {sorted(ignoradas)} "
                f"(longitud {len(self._tareas)})"
            )

        if not validas:
            return []

        eliminadas = [self._tareas.pop(posicion) for posicion in validas]
        eliminadas.reverse()
        logger.info(f"🗑 {len(eliminadas)} tarea(s) eliminada(s) en posiciones {validas[::-1]}")
        self._notificar()
        return eliminadas

    # ── Observadores ─────────────────────────────────────────────────────────

    def suscribir(self, observador: Observador) -> Callable[[], None]:
        self._observadores.append(observador)

        def cancelar() -> None:
            if observador in self._observadores:
                self._observadores.remove(observador)

        return cancelar

    def _notificar(self) -> None:
        """
        Avisa a todos los observadores aunque alguno falle; el primer error
        se relanza cuando ya todos recibieron la instantánea.
        """
        instantanea = self.list()
        primer_error: Exception | None = None
        for observador in tuple(self._observadores):
            try:
                observador(instantanea)
            except Exception as e:
                logger.error(f"✗ Observador {observador!r} falló: {e}")
                if primer_error is None:
                    primer_error = e
        if primer_error is not None:
            raise primer_error

    # Último: a partir de aquí `list` en el cuerpo de la clase es este método.
    def list(self) -> tuple[Tarea, ...]:
        return tuple(self._tareas)
