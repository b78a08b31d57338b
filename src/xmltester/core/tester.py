"""Test context bundling settings, a reporter and the reader/writer helpers."""

import logging
from pathlib import Path
from typing import Any, Callable, List, Optional, Union

from ..config.loader import ConfigManager, resolve_config_file
from ..config.models import CompileOptions, TesterSettings, READER_BASE_OPTIONS, WRITER_BASE_OPTIONS
from ..errors import CompileFailure
from .comparator import ComparisonResult, XmlInput, compare
from .document import XmlDocument, create_document, is_node
from .failure import attempt
from .names import to_absolute_type
from .reporter import Reporter
from .schema import Direction, Schema, TemplateForm

logger = logging.getLogger(__name__)


class XmlTester:
    """Helpers for testing a schema's readers, writers and templates.

    One instance is meant to be created per test module (or per test through
    the ``xml_tester`` pytest fixture), so the default namespace and compile
    defaults of one suite never leak into another.

    Example::

        tester = XmlTester()
        tester.set_default_namespace("urn:example")
        read = tester.reader_create(schema, "my reader", "Foo")
        assert read("<Foo><name>bar</name></Foo>") == {"name": "bar"}
    """

    def __init__(self, settings: Optional[TesterSettings] = None, reporter: Optional[Reporter] = None):
        self.settings = settings if settings is not None else TesterSettings()
        self.reporter = reporter if reporter is not None else Reporter()

    @classmethod
    def from_config(cls, path: Optional[Union[str, Path]] = None, overrides: Optional[List[str]] = None,
                    reporter: Optional[Reporter] = None) -> "XmlTester":
        config = ConfigManager(resolve_config_file(path))
        return cls(config.get_settings(overrides), reporter)

    # --- configuration ---

    def set_compile_defaults(self, **options: Any) -> None:
        """Replace the suite-wide compile options; no arguments resets them."""
        self.settings.compile_defaults = CompileOptions(**options)

    def set_default_namespace(self, namespace: Optional[str]) -> None:
        self.settings.default_namespace = namespace

    def to_absolute_type(self, type_: str) -> str:
        return to_absolute_type(type_, self.settings.default_namespace)

    # --- readers ---

    def _compile(self, schema: Schema, direction: Direction, base: CompileOptions,
                 label: str, type_: str, options: dict) -> Callable[..., Any]:
        abs_type = self.to_absolute_type(type_)
        merged = CompileOptions.layered(base, self.settings.compile_defaults, options)
        logger.debug("Compiling %s for %s with %s", direction.value, abs_type, merged)
        try:
            compiled = schema.compile(direction, abs_type, **merged)
        except Exception as exc:
            self.reporter.is_callable(None, label)
            raise CompileFailure(f"Could not compile {direction.value.lower()} for {abs_type}: {exc}") from exc
        self.reporter.is_callable(compiled, label)
        return compiled

    def reader_create(self, schema: Schema, label: str, type_: str, **options: Any) -> Callable[..., Any]:
        """Compile a reader for ``type_`` and record whether that worked.

        Options are layered: ``check_values=True, include_namespaces=False``,
        then the compile defaults, then ``options``.
        """
        return self._compile(schema, Direction.READER, READER_BASE_OPTIONS,
                             f"reader element {label}", type_, options)

    create_reader = reader_create

    def reader_error(self, schema: Schema, type_: str, xml: Any) -> str:
        """Read ``xml`` expecting it to be rejected; return the error text."""
        reader = self.reader_create(schema, f"check read error {type_}", type_)
        if not callable(reader):
            return ""

        outcome = attempt(reader, xml)
        error = outcome.failure.message if outcome.failed else ""
        tree = outcome.result
        if error and tree is not None:
            # Warnings alone still let the reader produce output
            logger.debug("Discarding reader output for %s after errors", type_)
            tree = None

        if tree is not None:
            self.reporter.diag(f"RETURNED TREE={tree!r}")
        self.reporter.ok(tree is None, f"no return for {type_}")
        self.reporter.ok(len(error) > 0, f"ER={error}")
        return error

    # --- writers ---

    def writer_create(self, schema: Schema, label: str, type_: str, **options: Any) -> Callable[..., Any]:
        """Compile a writer for ``type_`` and record whether that worked.

        Base options are ``check_values=True, include_namespaces=False,
        use_default_prefix=True``; compile defaults and ``options`` override them.
        """
        return self._compile(schema, Direction.WRITER, WRITER_BASE_OPTIONS,
                             f"writer element {label}", type_, options)

    create_writer = writer_create

    def writer_test(self, writer: Callable[..., Any], data: Any, doc: Optional[XmlDocument] = None) -> Any:
        """Run ``writer`` on ``data``; a document is created when none is given."""
        if doc is None:
            doc = create_document("1.0", "UTF-8")

        tree = writer(doc, data)
        self.reporter.ok(tree is not None, "writer returned a node")
        if tree is None:
            return None

        self.reporter.is_instance(tree, is_node, "writer result is an XML node", description="an lxml element")
        return tree

    def writer_error(self, schema: Schema, type_: str, data: Any) -> str:
        """Write ``data`` expecting validation to fail; return the error text."""
        writer = self.writer_create(schema, f"writer for {type_}", type_)
        if not callable(writer):
            return ""

        doc = create_document("1.0", "UTF-8")
        outcome = attempt(writer, doc, data)
        error = outcome.failure.message if outcome.failed else ""
        node = None if error else outcome.result

        if node is not None:
            returned = doc.to_string(node) if is_node(node) else repr(node)
            self.reporter.diag(f"RETURNED ={returned}")
        self.reporter.ok(node is None, f"no return for {type_} expected")
        self.reporter.ok(len(error) > 0, f"EW={error}")
        return error

    # --- templates ---

    def _template(self, schema: Schema, form: TemplateForm, type_: str, options: dict) -> Any:
        abs_type = self.to_absolute_type(type_)
        merged = {"include_namespaces": self.settings.template_include_namespaces, **options}
        return schema.template(form, abs_type, **merged)

    def templ_xml(self, schema: Schema, type_: str, **options: Any) -> str:
        """Example instance of ``type_`` as XML text (newline terminated)."""
        return self._template(schema, TemplateForm.XML, type_, options) + "\n"

    def templ_python(self, schema: Schema, type_: str, **options: Any) -> Any:
        """Example instance of ``type_`` as a Python data structure."""
        return self._template(schema, TemplateForm.PYTHON, type_, options)

    # --- comparison ---

    def compare_xml(self, actual: XmlInput, expected: Optional[str], label: Optional[str] = None) -> ComparisonResult:
        return compare(actual, expected, label, self.reporter)
