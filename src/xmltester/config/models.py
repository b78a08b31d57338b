from typing import Any, Dict, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field


class CompileOptions(BaseModel):
    '''Options handed to a schema collaborator's ``compile``.

    The well-known flags are named but, like extra fields, passed through
    unvalidated: compilers may accept more than a bool (e.g. a callable for
    ``include_namespaces``). ``None`` means "not set at this layer", so the
    value from a lower-precedence layer stays in effect.
    '''
    model_config = ConfigDict(extra="allow")

    check_values: Optional[Any] = Field(default=None, description="Validate values while reading/writing.")
    include_namespaces: Optional[Any] = Field(default=None, description="Include namespace information in read results.")
    use_default_prefix: Optional[Any] = Field(default=None, description="Writers may use the default namespace without a prefix.")

    def as_overrides(self) -> Dict[str, Any]:
        return {key: value for key, value in self if value is not None}

    @classmethod
    def layered(cls, *layers: Mapping[str, Any]) -> Dict[str, Any]:
        '''Merge option layers, later layers win: base < suite < call-site.'''
        merged: Dict[str, Any] = {}
        for layer in layers:
            if isinstance(layer, CompileOptions):
                layer = layer.as_overrides()
            merged.update(layer)
        return merged


READER_BASE_OPTIONS = CompileOptions(check_values=True, include_namespaces=False)
WRITER_BASE_OPTIONS = CompileOptions(check_values=True, include_namespaces=False, use_default_prefix=True)


class TesterSettings(BaseModel):
    '''Settings of one test context (normally one per test module).'''
    default_namespace: Optional[str] = Field(default=None, description="Namespace used for unqualified type names.")
    compile_defaults: CompileOptions = Field(default_factory=CompileOptions, description="Suite-wide compile option overrides.")
    template_include_namespaces: bool = Field(default=False, description="Default include_namespaces for template generation.")
