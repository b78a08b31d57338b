"""
Configuration file for pytest.

This file ensures that the src directory is in the Python path
so that tests can import modules from the package, and provides the stub
schema and reporter fixtures shared by the test modules.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add the src directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))

from xmltester.core.reporter import Reporter  # noqa: E402
from xmltester.core.tester import XmlTester  # noqa: E402
from tests.utils import StubSchema  # noqa: E402


@pytest.fixture
def stub_schema() -> StubSchema:
    return StubSchema()


@pytest.fixture
def lenient_reporter() -> Reporter:
    """Reporter that records failures instead of raising them."""
    return Reporter(strict=False)


@pytest.fixture
def tester(lenient_reporter: Reporter) -> XmlTester:
    """Tester with default namespace urn:x and a non-strict reporter."""
    t = XmlTester(reporter=lenient_reporter)
    t.set_default_namespace("urn:x")
    return t


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """setup_logging() stops propagation; undo it so caplog keeps working."""
    yield
    package_logger = logging.getLogger("xmltester")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
