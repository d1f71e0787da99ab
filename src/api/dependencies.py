"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request

from src.adapters.repository.memory import InMemoryUserRepository
from src.domain.registration import RegistrationService


def get_user_repository(request: Request) -> InMemoryUserRepository:
    """
    Get the user store from app state.

    The store is created by create_app() and stored in app.state.
    """
    return request.app.state.repository


def get_registration_service(request: Request) -> RegistrationService:
    """Create registration service bound to the app's user store."""
    return RegistrationService(repository=get_user_repository(request))
