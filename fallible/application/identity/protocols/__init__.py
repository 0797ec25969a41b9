from fallible.application.identity.protocols.user_repository import UserRepositoryProtocol

__all__ = ["UserRepositoryProtocol"]
