from fallible.application.identity.services.user_service import UserService

__all__ = ["UserService"]
