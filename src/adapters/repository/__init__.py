"""Repository adapters - User store implementations."""

from .memory import FIXTURE_USER, InMemoryUserRepository

__all__ = ["FIXTURE_USER", "InMemoryUserRepository"]
