"""Recording of named pass/fail assertions."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Type, Union

logger = logging.getLogger(__name__)


class AssertionKind(str, Enum):
    CALLABLE = "callable"
    INSTANCE = "instance"
    TRUTHY = "truthy"
    EQUAL = "equal"


class AssertionFailure(AssertionError):
    """Raised by a strict reporter when an assertion fails."""

    def __init__(self, record: "AssertionRecord"):
        super().__init__(record.describe())
        self.record = record


@dataclass
class AssertionRecord:
    kind: AssertionKind
    label: Optional[str]
    passed: bool
    got: Any = None
    expected: Any = None

    def describe(self) -> str:
        status = "ok" if self.passed else "not ok"
        text = f"{status} - {self.label}" if self.label else status
        if not self.passed:
            if self.kind == AssertionKind.EQUAL:
                text += f"\n     got: {self.got!r}\nexpected: {self.expected!r}"
            elif self.kind in (AssertionKind.CALLABLE, AssertionKind.INSTANCE):
                text += f"\n     got: {self.got!r}\nexpected: {self.expected}"
        return text


class Reporter:
    """Collects assertion records for one test context.

    With ``strict=True`` (the default) a failing assertion raises
    :class:`AssertionFailure` so pytest reports it at the point of failure;
    otherwise failures are only recorded.
    """

    def __init__(self, strict: bool = True):
        self.strict = strict
        self.records: List[AssertionRecord] = []
        self.diagnostics: List[str] = []

    def _record(self, record: AssertionRecord) -> bool:
        self.records.append(record)
        logger.debug(record.describe())
        if not record.passed and self.strict:
            raise AssertionFailure(record)
        return record.passed

    def ok(self, condition: Any, label: Optional[str] = None) -> bool:
        return self._record(AssertionRecord(AssertionKind.TRUTHY, label, bool(condition), got=condition))

    def is_equal(self, got: Any, expected: Any, label: Optional[str] = None) -> bool:
        return self._record(AssertionRecord(AssertionKind.EQUAL, label, got == expected, got=got, expected=expected))

    def is_callable(self, obj: Any, label: Optional[str] = None) -> bool:
        return self._record(AssertionRecord(AssertionKind.CALLABLE, label, callable(obj), got=obj, expected="a callable"))

    def is_instance(self, obj: Any, check: Union[Type, Callable[[Any], bool]], label: Optional[str] = None,
                    description: Optional[str] = None) -> bool:
        '''Record whether ``obj`` is an instance of ``check``.

        ``check`` may also be a predicate, for capabilities that are not a
        single class (e.g. lxml nodes).
        '''
        if isinstance(check, type):
            passed = isinstance(obj, check)
            expected = description or f"an instance of {check.__name__}"
        else:
            passed = bool(check(obj))
            expected = description or getattr(check, "__name__", repr(check))
        return self._record(AssertionRecord(AssertionKind.INSTANCE, label, passed, got=obj, expected=expected))

    def diag(self, message: str) -> None:
        self.diagnostics.append(message)
        logger.warning(message)

    @property
    def failures(self) -> List[AssertionRecord]:
        return [record for record in self.records if not record.passed]

    def count(self, kind: Optional[AssertionKind] = None) -> int:
        if kind is None:
            return len(self.records)
        return sum(1 for record in self.records if record.kind == kind)

    def clear(self) -> None:
        self.records.clear()
        self.diagnostics.clear()
