"""
In-memory repository adapter - Implements UserRepository protocol.

Users live in a plain list for the lifetime of the process. There is no
locking: a duplicate check and the following create are not atomic, so
concurrent registrations of the same email can both succeed. This store
is meant for demos and tests, not production.
"""

import logging
import uuid
from datetime import datetime, timezone

from src.domain.ports import NewUser, User

logger = logging.getLogger(__name__)

# Fixture account seeded at startup so the duplicate path is reachable.
FIXTURE_USER = User(
    id="1",
    first_name="Test",
    last_name="User",
    email="test@gmail.com",
    password="Password123!",
    created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
)


class InMemoryUserRepository:
    """
    Implements UserRepository protocol with a Python list.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._users: list[User] = []

    def init(self, seed: bool = True) -> None:
        """
        Reset the store, optionally seeding the fixture account.

        Args:
            seed: Insert FIXTURE_USER after clearing
        """
        self.clear()
        if seed:
            self._users.append(FIXTURE_USER)
            logger.info("Seeded fixture user %s", FIXTURE_USER.email)

    def clear(self) -> None:
        """Remove every user."""
        self._users = []

    def find_by_email(self, email: str) -> User | None:
        """Case-insensitive exact match on email."""
        email = email.lower()
        for user in self._users:
            if user.email.lower() == email:
                return user
        return None

    def create(self, new_user: NewUser) -> User:
        """Append a new user with a fresh id and UTC creation time."""
        user = User(
            id=uuid.uuid4().hex,
            first_name=new_user.first_name,
            last_name=new_user.last_name,
            email=new_user.email,
            password=new_user.password,
            created_at=datetime.now(timezone.utc),
        )
        self._users.append(user)
        return user

    def get_all(self) -> list[User]:
        """Return a copy of all users in insertion order."""
        return list(self._users)
