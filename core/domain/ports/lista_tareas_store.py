from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from datetime import date
from uuid import UUID

from core.domain.models.tarea import Categoria, Prioridad, Tarea

Observador = Callable[[tuple[Tarea, ...]], None]


class ListaTareasStore(ABC):
    """
    Dueño único de la secuencia ordenada de tareas.

    Ninguna otra capa muta las tareas: las lecturas devuelven instantáneas
    inmutables y cada mutación notifica a los observadores suscritos.
    """

    @abstractmethod
    def get(self, tarea_id: UUID) -> Tarea | None:
        raise NotImplementedError

    @abstractmethod
    def agregar(
        self,
        titulo: str,
        prioridad: Prioridad,
        fecha_limite: date | None = None,
        categoria: Categoria | None = None,
        etiquetas: Iterable[str] | None = None,
    ) -> Tarea:
        raise NotImplementedError

    @abstractmethod
    def alternar_completada(self, tarea_id: UUID) -> Tarea | None:
        raise NotImplementedError

    @abstractmethod
    def eliminar_posiciones(self, posiciones: Iterable[int]) -> list[Tarea]:
        raise NotImplementedError

    @abstractmethod
    def suscribir(self, observador: Observador) -> Callable[[], None]:
        raise NotImplementedError

    # Último: a partir de aquí `list` en el cuerpo de la clase es este método.
    @abstractmethod
    def list(self) -> tuple[Tarea, ...]:
        raise NotImplementedError
