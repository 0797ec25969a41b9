"""In-memory repository for User entities."""

from dataclasses import replace

from fallible.domain.common.value_objects.ids import UserId
from fallible.domain.identity.entities.user import User

SEED_USERS = (
    ("admin@example.com", "Admin", True),
    ("existing@example.com", "Existing User", True),
    ("inactive@example.com", "Inactive User", False),
)


class InMemoryUserRepository:
    """
    Dictionary-backed user storage.

    Ids are assigned sequentially on first save. Stored users are copies, so
    callers can't change stored state without going through save().
    """

    def __init__(self, *, seed: bool = True) -> None:
        self._users: dict[int, User] = {}
        self._next_id = 1
        if seed:
            for email, name, is_active in SEED_USERS:
                self.save(User(id=UserId(0), email=email, name=name, is_active=is_active))

    def find_by_id(self, user_id: UserId) -> User | None:
        user = self._users.get(user_id.value)
        return replace(user) if user is not None else None

    def find_by_email(self, email: str) -> User | None:
        normalized = email.strip().lower()
        for user in self._users.values():
            if user.email == normalized:
                return replace(user)
        return None

    def save(self, user: User) -> User:
        """Store a user, assigning an id to new ones."""
        if user.id.value == 0:
            user = replace(user, id=UserId(self._next_id))
            self._next_id += 1
        self._users[user.id.value] = replace(user)
        return user
