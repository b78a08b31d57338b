"""Helpers for qualified type names in ``{namespace}local`` notation."""

from typing import Optional, Tuple

from ..errors import ConfigurationError


def pack_type(namespace: Optional[str], local: str) -> str:
    """Combine a namespace and a local name, e.g. ``{urn:x}Foo``.

    An empty namespace yields the bare local name.
    """
    if namespace:
        return f"{{{namespace}}}{local}"
    return local


def unpack_type(type_: str) -> Tuple[str, str]:
    """Split a packed type into ``(namespace, local)``; namespace is '' when absent."""
    if type_.startswith("{"):
        namespace, _, local = type_[1:].partition("}")
        return namespace, local
    return "", type_


def is_qualified(type_: str) -> bool:
    return "{" in type_


def to_absolute_type(type_: str, default_namespace: Optional[str]) -> str:
    """Qualify ``type_`` with ``default_namespace`` unless it already is qualified.

    Raises:
        ConfigurationError: ``type_`` is a bare local name and no default
            namespace has been configured.
    """
    if is_qualified(type_):
        return type_
    if default_namespace is None:
        raise ConfigurationError(
            f"Type '{type_}' is not namespace-qualified and no default namespace is set. "
            "Use set_default_namespace() or pass a '{namespace}local' type."
        )
    return pack_type(default_namespace, type_)
