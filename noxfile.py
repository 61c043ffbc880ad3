import os
from pathlib import Path
import nox

# Reuse existing virtualenvs for faster runs
nox.options.reuse_existing_virtualenvs = True
# Default sessions when running "nox"
nox.options.sessions = ["lint", "tests"]

# Environment variables to propagate
PASSED_ENV_VARS = [
    "DATABASE_URL",
    "ENVIRONMENT",
    "LOG_LEVEL",
    "LECTURE_CODE_MAX_ATTEMPTS",
]


def _set_env(session):
    """
    Propagate configuration environment variables into the session.
    Also ensure the project root is on PYTHONPATH.
    """
    session.env["PYTHONPATH"] = str(Path.cwd())
    for var in PASSED_ENV_VARS:
        if var in os.environ:
            session.env[var] = os.environ[var]


@nox.session(name="lint")
def lint(session):
    """
    Code formatting, linting, and type-checks:
      - isort
      - black
      - flake8
      - mypy
    """
    _set_env(session)
    session.install("isort", "black", "flake8", "mypy")
    session.run("isort", "--check", "app/", "tests/")
    session.run("black", "--check", "app/", "tests/")
    session.run("flake8", "app/", "tests/")
    session.run("mypy", "app/")


@nox.session(name="tests")
def tests(session):
    """
    Run the unit and integration suites against in-memory SQLite.
    Pass positional args to target specific tests.
    Usage:
      nox -s tests                       # everything under tests/
      nox -s tests -- -m unit            # services and core helpers only
      nox -s tests -- tests/unit/test_services/test_lectures.py
    """
    _set_env(session)
    session.install("-e", ".[test]")
    targets = session.posargs or ["tests"]
    session.run(
        "pytest",
        *targets,
        "-vv",
        "--tb=short",
        "--cov=app",
        "--cov-report=term-missing",
        "--cov-fail-under=80",
    )
