"""
Console walk-through of the outcome types.

Runs a handful of user scenarios against a fresh in-memory service and
prints what each one produced:

    python -m fallible.demo
"""

from collections.abc import Callable

from fallible.application.common.result import ValueOutcome
from fallible.application.identity.services.user_service import UserService
from fallible.domain.common.errors import DetailedError, Error
from fallible.domain.identity.entities.user import User
from fallible.infrastructure.identity.repositories.user_repository import InMemoryUserRepository

Echo = Callable[[str], None]


def _print_errors(echo: Echo, errors: tuple[Error, ...]) -> None:
    for error in errors:
        echo(f"  [{error.code}] {error.message} (status {error.status_code})")
        if isinstance(error, DetailedError):
            for detail in error.details:
                echo(f"    - {detail}")


def _report(echo: Echo, outcome: ValueOutcome[User], describe: Callable[[User], str]) -> None:
    def report_failure(errors: tuple[Error, ...]) -> None:
        echo("FAIL")
        _print_errors(echo, errors)

    outcome.on_success(lambda user: echo(f"OK   {describe(user)}"))
    outcome.on_failure(report_failure)


def run_demo(service: UserService, echo: Echo = print) -> None:
    """Run every scenario against ``service``."""
    echo("Creating users")
    for email, name in (("user@example.com", "Ivan"), ("", "Anna")):
        outcome = service.create_user(email, name)
        _report(echo, outcome, lambda user: f"created user {user.id}: {user.email}")

    echo("Fetching active users")
    for user_id in (1, 3, 999):
        outcome = service.get_active_user(user_id)
        _report(echo, outcome, lambda user: f"active user: {user.email}")

    echo("Registering users")
    for email in ("existing@example.com", "new@example.com"):
        outcome = service.register_user(email, "Someone")
        _report(echo, outcome, lambda user: f"registered {user.email}")


def main() -> None:
    run_demo(UserService(InMemoryUserRepository()))


if __name__ == "__main__":
    main()
