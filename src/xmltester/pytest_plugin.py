"""
pytest fixtures for xmltester.

Registered through the ``pytest11`` entry point, so installing the package is
enough to make ``xml_tester`` available in any test suite. Override
``xml_tester_settings`` in a ``conftest.py`` to configure a suite in code
instead of through ``xmltester.toml``.
"""

import logging

import pytest

from .config.loader import ConfigManager, resolve_config_file
from .config.models import TesterSettings
from .core.reporter import Reporter
from .core.tester import XmlTester

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session")
def xml_tester_settings() -> TesterSettings:
    """
    Tester settings shared by the whole session.

    Loaded from the resolved configuration file when one exists, otherwise
    the defaults.
    """
    config_path = resolve_config_file()
    if not config_path.exists():
        logger.debug("No xmltester configuration at %s, using defaults", config_path)
        return TesterSettings()
    return ConfigManager(config_path).get_settings()


@pytest.fixture
def xml_tester(xml_tester_settings: TesterSettings) -> XmlTester:
    """A fresh XmlTester per test; changes to its settings do not leak."""
    return XmlTester(xml_tester_settings.model_copy(deep=True), Reporter(strict=True))
