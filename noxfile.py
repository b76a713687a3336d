"""Nox sessions orchestrating logenv unit suites."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import nox


PYTHON_VERSIONS = ["3.11", "3.12"]
PROJECT_ROOT = Path(__file__).parent

nox.options.sessions = [
    "tests(unit_logenv)",
]


def _install_test_requirements(session: nox.Session) -> None:
    """Install the package and core testing toolchain inside the session environment."""

    session.install("-e", ".[test]")


def _normalize_pythonpath(existing: str | None) -> str:
    parts = [str(PROJECT_ROOT)]
    if existing:
        parts.append(existing)
    return ":".join(part for part in parts if part)


def _build_env(session: nox.Session) -> dict[str, str]:
    env = dict(session.env)
    env["PYTHONPATH"] = _normalize_pythonpath(env.get("PYTHONPATH"))
    return env


def _run_suite(session: nox.Session, suite: str, targets: Iterable[str]) -> None:
    _install_test_requirements(session)

    env = _build_env(session)

    session.log("Running %s suite with coverage", suite)
    session.run(
        "coverage",
        "run",
        f"--context={suite}",
        "--source=logenv",
        "-m",
        "pytest",
        *targets,
        *session.posargs,
        env=env,
    )
    session.run("coverage", "report", "-m", env=env)


@nox.session(python=PYTHON_VERSIONS, reuse_venv=True, name="tests(unit_logenv)")
def tests_unit_logenv(session: nox.Session) -> None:
    """Execute the logenv unit suite with coverage."""

    targets = ["tests/unit/logenv"]
    _run_suite(session, "logenv", targets)
