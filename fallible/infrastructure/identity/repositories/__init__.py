from fallible.infrastructure.identity.repositories.user_repository import InMemoryUserRepository

__all__ = ["InMemoryUserRepository"]
