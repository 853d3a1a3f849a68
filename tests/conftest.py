"""
Test Fixtures and Helpers for Fake Repositories.

This module provides pytest fixtures for overriding FastAPI dependencies
with fake repository implementations.

Usage:
    from tests.conftest import override_dependency, reset_overrides

    def test_something():
        app = create_app()
        override_dependency(app, get_workout_repo, FakeWorkoutRepository())
        # Test code here...
        reset_overrides(app)
"""

from typing import Any, Callable

from fastapi import FastAPI
import pytest

from api import deps
from tests.fakes import FakeExercisesRepository, FakeWorkoutRepository


RepoGetter = Callable[..., Any]


def reset_overrides(app: FastAPI) -> None:
    """Reset all FastAPI dependency overrides on `app`."""
    app.dependency_overrides.clear()


def override_dependency(app: FastAPI, getter: RepoGetter, implementation: Any) -> None:
    """
    Override a FastAPI dependency with a fake implementation.

    Args:
        app: Application under test
        getter: The dependency getter function (e.g., get_workout_repo)
        implementation: The fake instance
    """
    app.dependency_overrides[getter] = lambda: implementation


async def mock_user() -> str:
    return "test_user"


@pytest.fixture
def fake_workout_repo() -> FakeWorkoutRepository:
    return FakeWorkoutRepository()


@pytest.fixture
def fake_exercises_repo() -> FakeExercisesRepository:
    return FakeExercisesRepository()


@pytest.fixture
def override_deps():
    """
    Provide a FastAPI app plus an override helper; overrides are cleared after.

    Usage:
        def test_something(override_deps):
            app, override = override_deps
            override(deps.get_workout_repo, FakeWorkoutRepository())
    """
    from backend.main import create_app

    app = create_app()
    app.dependency_overrides[deps.get_current_user] = mock_user

    def _override(getter: RepoGetter, implementation: Any) -> Any:
        override_dependency(app, getter, implementation)
        return implementation

    yield app, _override

    reset_overrides(app)
