"""
Integration tests for the exercise library endpoint.
"""
import pytest
from fastapi.testclient import TestClient

from api.deps import get_exercises_repo
from application.exceptions import WorkoutFetchError
from backend.core.exercise_images import get_exercise_image
from tests.fakes import FakeExercisesRepository


@pytest.fixture
def client(override_deps):
    app, override = override_deps
    override(get_exercises_repo, FakeExercisesRepository())
    return TestClient(app)


class FailingExercisesRepository:
    def list(self, *, muscle_group=None, search=None):
        raise WorkoutFetchError("Failed to fetch exercises: connection reset")


@pytest.mark.integration
class TestListExercises:

    def test_lists_all_sorted_by_name(self, client):
        response = client.get("/exercises")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 5
        names = [e["name"] for e in data["exercises"]]
        assert names == sorted(names)

    def test_filter_by_muscle_group(self, client):
        data = client.get("/exercises", params={"muscle_group": "peito"}).json()

        assert data["total"] == 2
        assert {e["id"] for e in data["exercises"]} == {"ex-supino", "ex-crucifixo"}

    def test_search(self, client):
        data = client.get("/exercises", params={"search": "agach"}).json()

        assert [e["name"] for e in data["exercises"]] == ["Agachamento Livre"]

    def test_image_url_from_name(self, client):
        data = client.get("/exercises", params={"search": "Supino"}).json()

        assert data["exercises"][0]["image_url"] == get_exercise_image("Supino Reto")

    def test_empty_search_rejected(self, client):
        response = client.get("/exercises", params={"search": ""})
        assert response.status_code == 422

    def test_fetch_error_returns_502(self, override_deps):
        app, override = override_deps
        override(get_exercises_repo, FailingExercisesRepository())

        response = TestClient(app).get("/exercises")

        assert response.status_code == 502
