"""Run a callable and capture what went wrong instead of propagating it.

Both raised exceptions and warnings issued through :mod:`warnings` are
captured. Warnings are non-fatal: the callable's return value is kept, but
the warning still counts as a reported failure. Deprecation, resource and
import notices are not captured; they are re-issued unchanged.
"""

import warnings
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from pydantic import ValidationError

# Warning categories about the code in use rather than the data being read or
# written; these never count as a reported failure
LIBRARY_NOTICES = (DeprecationWarning, PendingDeprecationWarning, ResourceWarning, ImportWarning)


def _validation_messages(exc: ValidationError) -> List[str]:
    messages = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return messages


def exception_messages(exc: BaseException) -> List[str]:
    """Flatten an exception into human-readable messages.

    Exception groups (or anything exposing an ``exceptions`` sequence) are
    expanded into their members, pydantic validation errors into one message
    per error.
    """
    if isinstance(exc, ValidationError):
        return _validation_messages(exc)
    nested = getattr(exc, "exceptions", None)
    if isinstance(nested, (list, tuple)) and nested:
        messages: List[str] = []
        for sub in nested:
            messages.extend(exception_messages(sub))
        return messages
    if isinstance(exc, Warning) and exc.args and isinstance(exc.args[0], str):
        return [exc.args[0]]
    return [str(exc) or exc.__class__.__name__]


@dataclass
class CapturedFailure:
    exceptions: List[BaseException] = field(default_factory=list)

    @property
    def messages(self) -> List[str]:
        messages: List[str] = []
        for exc in self.exceptions:
            messages.extend(exception_messages(exc))
        return messages

    @property
    def message(self) -> str:
        return "\n".join(self.messages)


@dataclass
class Outcome:
    result: Any = None
    failure: Optional[CapturedFailure] = None

    @property
    def failed(self) -> bool:
        return self.failure is not None


def attempt(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Outcome:
    """Call ``func`` inside a recoverable-failure scope."""
    captured: List[BaseException] = []
    result = None
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        try:
            result = func(*args, **kwargs)
        except Exception as exc:
            captured.append(exc)
    issued: List[BaseException] = []
    for w in caught:
        if issubclass(w.category, LIBRARY_NOTICES):
            # Not a report about the data; hand back to the normal filters
            warnings.warn_explicit(w.message, w.category, w.filename, w.lineno, source=w.source)
        elif isinstance(w.message, Warning):
            issued.append(w.message)
    # Warnings first: they were issued before whatever finally raised
    exceptions = issued + captured
    return Outcome(result=result, failure=CapturedFailure(exceptions) if exceptions else None)
