"""
FastAPI Dependency Providers for the fitness dashboard API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository and use case providers create new instances per-request
- Auth providers wrap the Supabase JWT / API key logic in backend.auth

Usage in routers:
    from api.deps import get_dashboard_service, get_current_user

    @router.get("/dashboard")
    def dashboard(
        user_id: str = Depends(get_current_user),
        service: DashboardService = Depends(get_dashboard_service),
    ):
        return service.get_dashboard(user_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_workout_repo] = lambda: FakeWorkoutRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    WorkoutRepository,
    ExercisesRepository,
)

# Concrete implementations
from infrastructure import (
    SupabaseWorkoutRepository,
    SupabaseExercisesRepository,
)

from application.use_cases import SaveWorkoutUseCase
from backend.core.dashboard_service import DashboardService
from backend.settings import Settings, get_settings as _get_settings

# Auth from existing module (wrap to maintain single source of truth)
from backend.auth import (
    get_current_user as _get_current_user,
)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.

    Returns:
        Client: Supabase client instance

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_workout_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutRepository:
    """
    Get WorkoutRepository implementation.

    Returns a SupabaseWorkoutRepository instance with injected client.
    The return type is the Protocol to enable easy mocking.

    Args:
        client: Supabase client (injected)

    Returns:
        WorkoutRepository: Repository for workout persistence
    """
    return SupabaseWorkoutRepository(client)


def get_exercises_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ExercisesRepository:
    """
    Get ExercisesRepository implementation.

    Args:
        client: Supabase client (injected)

    Returns:
        ExercisesRepository: Repository for the exercise library
    """
    return SupabaseExercisesRepository(client)


# =============================================================================
# Service Providers
# =============================================================================


def get_dashboard_service(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> DashboardService:
    """
    Get DashboardService with injected repository.

    Uses the default clock (current time in the configured stats timezone).

    Args:
        workout_repo: Workout repository (injected)

    Returns:
        DashboardService: Service for dashboard and progress statistics
    """
    return DashboardService(workout_repo)


def get_save_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> SaveWorkoutUseCase:
    """
    Get SaveWorkoutUseCase with injected repository.

    Args:
        workout_repo: Workout repository (injected)

    Returns:
        SaveWorkoutUseCase: Use case for creating and editing workouts
    """
    return SaveWorkoutUseCase(workout_repo)


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
) -> str:
    """
    Get the current authenticated user ID.

    Wraps backend.auth.get_current_user for dependency injection.
    Supports:
    - Supabase Auth JWT (HS256)
    - API key authentication

    Args:
        authorization: Bearer token header
        x_api_key: API key header

    Returns:
        str: User ID from authentication

    Raises:
        HTTPException: 401 if authentication fails
    """
    return await _get_current_user(
        authorization=authorization,
        x_api_key=x_api_key,
    )


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_workout_repo",
    "get_exercises_repo",
    # Services
    "get_dashboard_service",
    "get_save_workout_use_case",
    # Authentication
    "get_current_user",
]
