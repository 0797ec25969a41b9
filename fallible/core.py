from dependency_injector import containers, providers

from fallible.application.identity.services.user_service import UserService
from fallible.infrastructure.identity.repositories.user_repository import InMemoryUserRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Repositories
    user_repository = providers.Singleton(InMemoryUserRepository)

    # Services
    user_service = providers.Factory(UserService, user_repository=user_repository)


container = Container()
