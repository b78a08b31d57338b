"""Tests for the assertion reporter."""
import lxml.etree as ET
import pytest

from xmltester.core.document import is_node
from xmltester.core.reporter import AssertionFailure, AssertionKind, Reporter


def test_records_passing_assertions():
    reporter = Reporter()
    assert reporter.ok(1, "truthy")
    assert reporter.is_equal("a", "a", "equal")
    assert reporter.is_callable(len, "callable")
    assert reporter.is_instance("s", str, "instance")

    assert [r.kind for r in reporter.records] == [
        AssertionKind.TRUTHY,
        AssertionKind.EQUAL,
        AssertionKind.CALLABLE,
        AssertionKind.INSTANCE,
    ]
    assert reporter.failures == []
    assert reporter.count() == 4
    assert reporter.count(AssertionKind.EQUAL) == 1


def test_strict_reporter_raises_on_failure():
    reporter = Reporter()
    with pytest.raises(AssertionFailure) as excinfo:
        reporter.is_callable("not callable", "reader element foo")
    assert excinfo.value.record.kind == AssertionKind.CALLABLE
    assert "not ok - reader element foo" in str(excinfo.value)
    assert isinstance(excinfo.value, AssertionError)
    # The failure is still recorded
    assert len(reporter.failures) == 1


def test_lenient_reporter_only_records():
    reporter = Reporter(strict=False)
    assert reporter.ok(False, "nope") is False
    assert reporter.is_equal(1, 2, "numbers") is False
    assert len(reporter.failures) == 2
    assert "expected: 2" in reporter.failures[1].describe()


def test_is_instance_with_predicate():
    reporter = Reporter(strict=False)
    assert reporter.is_instance(ET.Element("a"), is_node, "node")
    assert not reporter.is_instance("<a/>", is_node, "text", description="an lxml element")
    assert reporter.failures[0].expected == "an lxml element"


def test_diag_and_clear():
    reporter = Reporter()
    reporter.ok(True, "x")
    reporter.diag("RETURNED TREE={}")
    assert reporter.diagnostics == ["RETURNED TREE={}"]
    reporter.clear()
    assert reporter.records == []
    assert reporter.diagnostics == []
