"""Schema collaborator backed by pydantic-xml models."""

import logging
import types
from pathlib import Path
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional, Type, Union, get_args, get_origin

import lxml.etree as ET
from pydantic_xml import BaseXmlModel

from ..errors import TemplateError, UnknownTypeError
from .document import XmlDocument
from .schema import Direction, TemplateForm

logger = logging.getLogger(__name__)

# Options this adapter acts on, per direction; anything else is accepted and ignored
_SUPPORTED_OPTIONS = {
    Direction.READER: frozenset(),
    Direction.WRITER: frozenset({"check_values"}),
}

_UNION_ORIGINS = tuple(origin for origin in (Union, getattr(types, "UnionType", None)) if origin is not None)


class PydanticXmlSchema:
    """Maps qualified type names to pydantic-xml model classes.

    Readers return ``model_dump()`` of the parsed model, writers validate their
    data against the model and return the element built by ``to_xml_tree()``.
    """

    def __init__(self, models: Optional[Mapping[str, Type[BaseXmlModel]]] = None):
        self._models: Dict[str, Type[BaseXmlModel]] = dict(models or {})

    def register(self, type_: str, model: Type[BaseXmlModel]) -> None:
        self._models[type_] = model

    def types(self) -> List[str]:
        return sorted(self._models)

    def model_for(self, type_: str) -> Type[BaseXmlModel]:
        try:
            return self._models[type_]
        except KeyError:
            raise UnknownTypeError(f"No model registered for type '{type_}'") from None

    def compile(self, direction: Direction, type_: str, **options: Any) -> Callable[..., Any]:
        model = self.model_for(type_)
        if direction not in _SUPPORTED_OPTIONS:
            raise ValueError(f"Unknown compile direction: {direction!r}")
        _log_ignored(f"{direction.value} for {type_}", set(options) - _SUPPORTED_OPTIONS[direction])

        if direction == Direction.READER:
            return self._make_reader(model)
        return self._make_writer(model, options.get("check_values", True))

    @staticmethod
    def _make_reader(model: Type[BaseXmlModel]) -> Callable[[Any], Dict[str, Any]]:
        def read(xml: Any) -> Dict[str, Any]:
            if ET.iselement(xml):
                instance = model.from_xml_tree(xml)
            elif isinstance(xml, Path):
                instance = model.from_xml(xml.read_bytes())
            elif isinstance(xml, str):
                # lxml refuses str input that carries an encoding declaration
                instance = model.from_xml(xml.encode("utf-8"))
            else:
                instance = model.from_xml(xml)
            return instance.model_dump()

        read.__qualname__ = f"read_{model.__name__}"
        return read

    @staticmethod
    def _make_writer(model: Type[BaseXmlModel], check_values: bool) -> Callable[[XmlDocument, Any], ET._Element]:
        def write(doc: XmlDocument, data: Any) -> ET._Element:
            if isinstance(data, model):
                instance = data
            elif check_values:
                instance = model.model_validate(data)
            else:
                instance = model.model_construct(**data)
            return instance.to_xml_tree()

        write.__qualname__ = f"write_{model.__name__}"
        return write

    def template(self, form: TemplateForm, type_: str, **options: Any) -> Any:
        model = self.model_for(type_)
        _log_ignored(f"{form.value} template for {type_}", set(options))
        if form == TemplateForm.PYTHON:
            return python_template(model)

        missing = [name for name, info in model.model_fields.items() if info.is_required()]
        if missing:
            raise TemplateError(
                f"Cannot build a {form.value} template for '{type_}': required fields without default: {', '.join(missing)}"
            )
        tree = model().to_xml_tree()
        if form == TemplateForm.TREE:
            return tree
        return ET.tostring(tree, encoding="unicode", pretty_print=True).rstrip("\n")


def _log_ignored(what: str, ignored: Any) -> None:
    if ignored:
        logger.debug("Ignoring options %s for %s", sorted(ignored), what)


def _placeholder(annotation: Any) -> Any:
    if isinstance(annotation, type) and issubclass(annotation, BaseXmlModel):
        return python_template(annotation)
    origin = get_origin(annotation)
    args = get_args(annotation)
    if origin is list:
        return [_placeholder(args[0])] if args else []
    if origin is dict:
        return {_placeholder(args[0]): _placeholder(args[1])} if args else {}
    if origin is Literal:
        return args[0]
    if origin in _UNION_ORIGINS:
        # Optional[X] / Union[X, None]: describe the first concrete member
        members = [arg for arg in args if arg is not type(None)]
        if members:
            return _placeholder(members[0])
    elif origin is not None:
        annotation = origin
    name = getattr(annotation, "__name__", None) or str(annotation)
    return f"<{name}>"


def python_template(model: Type[BaseXmlModel]) -> Dict[str, Any]:
    """Example data for ``model``: defaults where known, placeholders otherwise."""
    template: Dict[str, Any] = {}
    for name, info in model.model_fields.items():
        if info.is_required():
            template[name] = _placeholder(info.annotation)
        else:
            template[name] = info.get_default(call_default_factory=True)
    return template
