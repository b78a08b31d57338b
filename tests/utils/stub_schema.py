"""A scriptable stand-in for a schema collaborator."""
from typing import Any, Callable, Dict, List, Optional, Tuple

from xmltester.core.schema import Direction, TemplateForm


class StubSchema:
    """Schema collaborator whose readers, writers and templates are set per type.

    Every ``compile`` and ``template`` call is recorded so tests can inspect
    the merged options the tester passed along.
    """

    def __init__(self):
        self.readers: Dict[str, Callable[..., Any]] = {}
        self.writers: Dict[str, Callable[..., Any]] = {}
        self.templates: Dict[Tuple[TemplateForm, str], Any] = {}
        self.compile_calls: List[Tuple[Direction, str, Dict[str, Any]]] = []
        self.template_calls: List[Tuple[TemplateForm, str, Dict[str, Any]]] = []
        self.compile_error: Optional[Exception] = None

    def compile(self, direction: Direction, type_: str, **options: Any) -> Any:
        self.compile_calls.append((direction, type_, options))
        if self.compile_error is not None:
            raise self.compile_error
        table = self.readers if direction == Direction.READER else self.writers
        return table.get(type_)

    def template(self, form: TemplateForm, type_: str, **options: Any) -> Any:
        self.template_calls.append((form, type_, options))
        return self.templates[(form, type_)]

    @property
    def last_options(self) -> Dict[str, Any]:
        return self.compile_calls[-1][2]
