"""Interface expected from a schema collaborator."""

from enum import Enum
from typing import Any, Callable, Protocol, runtime_checkable


class Direction(str, Enum):
    READER = "READER"
    WRITER = "WRITER"


class TemplateForm(str, Enum):
    XML = "XML"
    PYTHON = "PYTHON"
    TREE = "TREE"


@runtime_checkable
class Schema(Protocol):
    """A compiled set of schema definitions.

    ``compile`` returns a reader ``(xml) -> value`` or a writer
    ``(doc, value) -> node`` for a qualified type; ``template`` returns an
    example instance of the type in the requested form.
    """

    def compile(self, direction: Direction, type_: str, **options: Any) -> Callable[..., Any]: ...

    def template(self, form: TemplateForm, type_: str, **options: Any) -> Any: ...
