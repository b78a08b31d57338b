"""Whitespace-insensitive textual comparison of XML.

The comparison works on the serialized text, not on parsed trees: attribute
order and namespace prefixes must match exactly. Only layout whitespace is
ignored. Existing tests rely on this textual behaviour.
"""

import re
from dataclasses import dataclass
from typing import NewType, Optional, Union, runtime_checkable, Protocol

import lxml.etree as ET
from pydantic_xml import BaseXmlModel

from .reporter import Reporter

CanonicalText = NewType("CanonicalText", str)


@runtime_checkable
class SerializableNode(Protocol):
    def to_string(self) -> str: ...


RawText = Union[str, bytes]
XmlInput = Union[RawText, SerializableNode, ET._Element, BaseXmlModel, None]

# Applied in order; see canonicalize()
_LAYOUT_RULES = (
    (re.compile(r">\s+"), ">"),
    (re.compile(r"\s+<"), "<"),
    (re.compile(r">\s+<"), "><"),
    (re.compile(r"\s*\n\s*"), " "),
    (re.compile(r"\s{2,}"), " "),
    (re.compile(r"\s+\Z"), ""),
)


def canonicalize(text: Optional[str]) -> Optional[CanonicalText]:
    """Strip layout whitespace from an XML-bearing string.

    Whitespace next to tags is removed, whitespace runs containing a newline
    and runs of two or more characters become a single space, and trailing
    whitespace is dropped. ``None`` is passed through.

    >>> canonicalize("<a>\\n  <b/>\\n</a>\\n")
    '<a><b/></a>'
    """
    if text is None:
        return None
    for pattern, replacement in _LAYOUT_RULES:
        text = pattern.sub(replacement, text)
    return CanonicalText(text)


def as_text(value: XmlInput) -> Optional[str]:
    """Serialize ``value`` to a string if it is a node; raw text passes through."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8")
    if ET.iselement(value):
        return ET.tostring(value, encoding="unicode", with_tail=False)
    if isinstance(value, BaseXmlModel):
        return value.to_xml(encoding="unicode")
    if isinstance(value, SerializableNode):
        return value.to_string()
    raise TypeError(
        f"Cannot compare {type(value).__name__} as XML: expected text, an lxml element, "
        "a pydantic-xml model or an object with to_string()"
    )


@dataclass(frozen=True)
class ComparisonResult:
    equal: bool
    label: Optional[str]
    actual: Optional[CanonicalText]
    expected: Optional[CanonicalText]

    def __bool__(self) -> bool:
        return self.equal


def compare(actual: XmlInput, expected: Optional[str], label: Optional[str], reporter: Reporter) -> ComparisonResult:
    """Compare ``actual`` against ``expected`` after canonicalizing both.

    Exactly one equality assertion is recorded on ``reporter``.
    """
    canonical_actual = canonicalize(as_text(actual))
    canonical_expected = canonicalize(expected)
    result = ComparisonResult(
        equal=canonical_actual == canonical_expected,
        label=label,
        actual=canonical_actual,
        expected=canonical_expected,
    )
    reporter.is_equal(canonical_actual, canonical_expected, label)
    return result
