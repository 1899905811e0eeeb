"""Fixtures for end-to-end CLI tests.

Every test gets a CliRunner with no daygrid settings in the environment, so
pages use the built-in defaults unless a test passes its own ``env``.
"""

import pytest
from click.testing import CliRunner

from daygrid.config import MIN_WEEKS_ENV, WEEK_START_ENV
from daygrid.entrypoints.cli.main import daygrid
from tests.helpers.log_demo import log_demo

# pylint: disable=redefined-outer-name


@pytest.fixture
def registered_log_demo():
    """Make `daygrid log-demo` available for one test."""
    daygrid.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        daygrid.commands.pop("log-demo", None)
        # click-extra also lists commands in its help sections
        for section in getattr(daygrid, "_sections", []):
            getattr(section, "commands", {}).pop("log-demo", None)
        default_section = getattr(daygrid, "_default_section", None)
        if default_section is not None:
            default_section.commands.pop("log-demo", None)


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch):
    """A CliRunner that does not see the caller's page or logger settings."""
    for name in (WEEK_START_ENV, MIN_WEEKS_ENV, "DAYGRID_LOGGER_LEVELS"):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside a temporary working directory."""
    with runner.isolated_filesystem():
        yield
