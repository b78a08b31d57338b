from .comparator import CanonicalText, ComparisonResult, SerializableNode, as_text, canonicalize, compare
from .document import XmlDocument, create_document, is_node
from .failure import CapturedFailure, Outcome, attempt
from .names import pack_type, to_absolute_type, unpack_type
from .reporter import AssertionFailure, AssertionKind, AssertionRecord, Reporter
from .schema import Direction, Schema, TemplateForm
from .tester import XmlTester

__all__ = [
    "CanonicalText",
    "ComparisonResult",
    "SerializableNode",
    "as_text",
    "canonicalize",
    "compare",
    "XmlDocument",
    "create_document",
    "is_node",
    "CapturedFailure",
    "Outcome",
    "attempt",
    "pack_type",
    "to_absolute_type",
    "unpack_type",
    "AssertionFailure",
    "AssertionKind",
    "AssertionRecord",
    "Reporter",
    "Direction",
    "Schema",
    "TemplateForm",
    "XmlTester",
]
