"""Tests for the console demo."""

import pytest

from fallible.application.identity.services.user_service import UserService
from fallible.demo import main, run_demo


def test_run_demo_reports_every_scenario(user_service: UserService) -> None:
    lines: list[str] = []
    run_demo(user_service, echo=lines.append)

    assert lines == [
        "Creating users",
        "OK   created user 4: user@example.com",
        "FAIL",
        "  [ValidationFailed] Email cannot be empty (status 422)",
        "    - Email field is required",
        "Fetching active users",
        "OK   active user: admin@example.com",
        "FAIL",
        "  [Forbidden] Access denied (status 403)",
        "FAIL",
        "  [NotFound] User with id '999' not found (status 404)",
        "Registering users",
        "FAIL",
        "  [Conflict] User with this email already exists (status 409)",
        "OK   registered new@example.com",
    ]


def test_main_prints_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    main()
    out = capsys.readouterr().out
    assert "OK   registered new@example.com" in out
    assert "[NotFound]" in out
