"""
Tests de las rutas /tareas.
Cada test usa un store nuevo inyectado con dependency_overrides; el singleton
del contenedor se reinicia y lleva una tarea propia para que cualquier fuga
hacia él sea visible.
"""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from backend_fastapi.api.deps import lista_tareas_store
from backend_fastapi.main import app
from core.domain.models.tarea import Prioridad
from infrastructure.container import get_lista_tareas_store
from infrastructure.memoria.lista_tareas_store import InMemoryListaTareasStore


class TestTareasApi:
    """Suite de tests para la API de tareas."""

    @pytest.fixture
    def global_store(self):
        get_lista_tareas_store.cache_clear()
        store = get_lista_tareas_store()
        store.agregar("global", Prioridad.MEDIA)
        yield store
        get_lista_tareas_store.cache_clear()

    @pytest.fixture
    def store(self):
        return InMemoryListaTareasStore()

    @pytest.fixture
    def client(self, store, global_store):
        app.dependency_overrides[lista_tareas_store] = lambda: store
        yield TestClient(app)
        app.dependency_overrides.clear()
        # Ninguna ruta debe haber tocado el singleton.
        assert [t.titulo for t in global_store.list()] == ["global"]

    @pytest.fixture
    def client_abc(self, client, store):
        for titulo in "ABC":
            client.post("/tareas", json={"titulo": titulo})
        assert len(store) == 3
        return client

    def test_listar_vacia(self, client, store):
        response = client.get("/tareas")

        assert response.status_code == 200
        assert response.json() == []
        assert len(store) == 0

    def test_listar_refleja_store_inyectado(self, client, store):
        tarea = store.agregar("Directa", Prioridad.BAJA)

        [recibida] = client.get("/tareas").json()

        assert recibida["id"] == str(tarea.id)
        assert recibida["prioridad"] == "baja"

    def test_crear_tarea_devuelve_lista_actualizada(self, client, store):
        """Test: POST agrega al final y devuelve la lista para re-renderizar."""
        response = client.post(
            "/tareas",
            json={
                "titulo": "Comprar pan",
                "prioridad": "alta",
                "fecha_limite": "2024-03-28",
                "categoria": "personal",
                "etiquetas": ["casa"],
            },
        )

        assert response.status_code == 201
        [tarea] = response.json()
        assert tarea["titulo"] == "Comprar pan"
        assert tarea["prioridad"] == "alta"
        assert tarea["fecha_limite"] == "2024-03-28"
        assert tarea["categoria"] == "personal"
        assert tarea["etiquetas"] == ["casa"]
        assert tarea["completada"] is False
        assert len(store) == 1
        assert tarea["id"] == str(store.list()[0].id)

    def test_crear_tarea_defaults(self, client, store):
        [tarea] = client.post("/tareas", json={"titulo": "Leer"}).json()

        assert tarea["prioridad"] == "media"
        assert tarea["fecha_limite"] is None
        assert tarea["categoria"] is None
        assert tarea["etiquetas"] is None
        assert store.list()[0].prioridad is Prioridad.MEDIA

    def test_crear_tarea_titulo_vacio_devuelve_422(self, client, store):
        store.agregar("Existente", Prioridad.MEDIA)

        response = client.post("/tareas", json={"titulo": "  "})

        assert response.status_code == 422
        assert len(store) == 1

    def test_crear_tarea_prioridad_invalida_devuelve_422(self, client, store):
        response = client.post("/tareas", json={"titulo": "x", "prioridad": "urgente"})

        assert response.status_code == 422
        assert len(store) == 0

    def test_alternar_tarea(self, client_abc, store):
        tarea_id = store.list()[1].id

        response = client_abc.patch(f"/tareas/{tarea_id}/completada")

        assert response.status_code == 200
        assert [t["completada"] for t in response.json()] == [False, True, False]
        assert store.get(tarea_id).completada is True

    def test_alternar_tarea_inexistente_no_cambia_lista(self, client_abc, store):
        antes = store.list()

        response = client_abc.patch(f"/tareas/{uuid4()}/completada")

        assert response.status_code == 200
        assert [t["titulo"] for t in response.json()] == ["A", "B", "C"]
        assert store.list() == antes

    def test_eliminar_tareas_confirmadas(self, client_abc, store):
        response = client_abc.post(
            "/tareas/eliminar", json={"posiciones": [2, 0, 9], "confirmada": True}
        )

        assert response.status_code == 200
        assert [t["titulo"] for t in response.json()] == ["B"]
        assert [t.titulo for t in store.list()] == ["B"]

    def test_eliminar_sin_confirmar_devuelve_409(self, client_abc, store):
        response = client_abc.post("/tareas/eliminar", json={"posiciones": [0]})

        assert response.status_code == 409
        assert len(store) == 3
