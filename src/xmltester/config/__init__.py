from .models import CompileOptions, TesterSettings, READER_BASE_OPTIONS, WRITER_BASE_OPTIONS
from .loader import ConfigManager, resolve_config_file

__all__ = [
    "CompileOptions",
    "TesterSettings",
    "READER_BASE_OPTIONS",
    "WRITER_BASE_OPTIONS",
    "ConfigManager",
    "resolve_config_file",
]
