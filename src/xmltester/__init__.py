"""Regression-test helpers for schema-driven XML readers and writers.

The module-level functions work on one process-wide :class:`XmlTester`, for
test modules that prefer plain functions::

    from xmltester import set_default_namespace, reader_create, compare_xml

    set_default_namespace("urn:example")
    read = reader_create(schema, "my reader", "Foo")

Use :func:`reset_default_tester` (or the ``xml_tester`` pytest fixture) to get
an isolated context.
"""

from typing import Any, Callable, Optional

from .config.models import CompileOptions, TesterSettings
from .core.comparator import CanonicalText, ComparisonResult, canonicalize
from .core.document import XmlDocument, create_document
from .core.names import pack_type, unpack_type
from .core.reporter import AssertionFailure, Reporter
from .core.schema import Direction, Schema, TemplateForm
from .core.tester import XmlTester
from .errors import CompileFailure, ConfigurationError, TemplateError, UnknownTypeError, XmlTesterError

_default_tester = XmlTester()


def get_default_tester() -> XmlTester:
    return _default_tester


def reset_default_tester(settings: Optional[TesterSettings] = None, reporter: Optional[Reporter] = None) -> XmlTester:
    global _default_tester
    _default_tester = XmlTester(settings, reporter)
    return _default_tester


def set_compile_defaults(**options: Any) -> None:
    _default_tester.set_compile_defaults(**options)


def set_default_namespace(namespace: Optional[str]) -> None:
    _default_tester.set_default_namespace(namespace)


def reader_create(schema: Schema, label: str, type_: str, **options: Any) -> Callable[..., Any]:
    return _default_tester.reader_create(schema, label, type_, **options)


def writer_create(schema: Schema, label: str, type_: str, **options: Any) -> Callable[..., Any]:
    return _default_tester.writer_create(schema, label, type_, **options)


create_reader = reader_create
create_writer = writer_create


def writer_test(writer: Callable[..., Any], data: Any, doc: Optional[XmlDocument] = None) -> Any:
    return _default_tester.writer_test(writer, data, doc)


def reader_error(schema: Schema, type_: str, xml: Any) -> str:
    return _default_tester.reader_error(schema, type_, xml)


def writer_error(schema: Schema, type_: str, data: Any) -> str:
    return _default_tester.writer_error(schema, type_, data)


def templ_xml(schema: Schema, type_: str, **options: Any) -> str:
    return _default_tester.templ_xml(schema, type_, **options)


def templ_python(schema: Schema, type_: str, **options: Any) -> Any:
    return _default_tester.templ_python(schema, type_, **options)


def compare_xml(actual: Any, expected: Optional[str], label: Optional[str] = None) -> ComparisonResult:
    return _default_tester.compare_xml(actual, expected, label)


__all__ = [
    "AssertionFailure",
    "CanonicalText",
    "CompileFailure",
    "CompileOptions",
    "ComparisonResult",
    "ConfigurationError",
    "Direction",
    "Reporter",
    "Schema",
    "TemplateError",
    "TemplateForm",
    "TesterSettings",
    "UnknownTypeError",
    "XmlDocument",
    "XmlTester",
    "XmlTesterError",
    "canonicalize",
    "compare_xml",
    "create_document",
    "create_reader",
    "create_writer",
    "get_default_tester",
    "pack_type",
    "reader_create",
    "reader_error",
    "reset_default_tester",
    "set_compile_defaults",
    "set_default_namespace",
    "templ_python",
    "templ_xml",
    "unpack_type",
    "writer_create",
    "writer_error",
    "writer_test",
]
