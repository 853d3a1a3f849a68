"""
Unit tests for api/deps.py dependency providers.

These tests verify that the dependency providers are properly wired and
return the correct types. Uses mocks for external dependencies.
"""

import pytest
from unittest.mock import Mock, patch
from fastapi import HTTPException

from api import deps
from application.use_cases import SaveWorkoutUseCase
from backend.core.dashboard_service import DashboardService
from infrastructure import SupabaseExercisesRepository, SupabaseWorkoutRepository
from tests.fakes import FakeWorkoutRepository

# All tests in this module are pure logic tests with mocks - mark as unit
pytestmark = pytest.mark.unit


class TestDepsExports:

    def test_all_exports_resolve(self):
        for name in deps.__all__:
            assert callable(getattr(deps, name)), name

    def test_api_package_reexports(self):
        from api import get_current_user, get_dashboard_service, get_workout_repo
        assert get_current_user is deps.get_current_user
        assert get_dashboard_service is deps.get_dashboard_service
        assert get_workout_repo is deps.get_workout_repo


class TestSupabaseClientProviders:

    def test_required_client_raises_503_when_not_configured(self):
        with patch.object(deps, "get_supabase_client", return_value=None):
            with pytest.raises(HTTPException) as exc_info:
                deps.get_supabase_client_required()
        assert exc_info.value.status_code == 503

    def test_required_client_returns_client(self):
        client = Mock()
        with patch.object(deps, "get_supabase_client", return_value=client):
            assert deps.get_supabase_client_required() is client

    def test_client_none_without_credentials(self):
        settings = Mock(supabase_url=None, supabase_key=None)
        deps.get_supabase_client.cache_clear()
        with patch.object(deps, "_get_settings", return_value=settings):
            assert deps.get_supabase_client() is None
        deps.get_supabase_client.cache_clear()


class TestRepositoryProviders:

    def test_get_workout_repo(self):
        client = Mock()
        repo = deps.get_workout_repo(client=client)
        assert isinstance(repo, SupabaseWorkoutRepository)
        assert repo._client is client

    def test_get_exercises_repo(self):
        repo = deps.get_exercises_repo(client=Mock())
        assert isinstance(repo, SupabaseExercisesRepository)

    def test_get_dashboard_service(self):
        service = deps.get_dashboard_service(workout_repo=FakeWorkoutRepository())
        assert isinstance(service, DashboardService)

    def test_get_save_workout_use_case(self):
        repo = FakeWorkoutRepository()
        use_case = deps.get_save_workout_use_case(workout_repo=repo)
        assert isinstance(use_case, SaveWorkoutUseCase)
        assert use_case._workout_repo is repo
