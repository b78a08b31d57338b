import os
import copy
import logging
from pathlib import Path
from typing import Dict, Any, List, Optional, Union

try:
    import tomllib # Python 3.11+
except ImportError:
    import tomli as tomllib # Fallback for Python < 3.11

from platformdirs import user_config_path
from pydantic import ValidationError

from .models import TesterSettings

logger = logging.getLogger(__name__)

TESTER_SECTION = "tester"
CONFIG_FILE_NAME = "xmltester.toml"


def config_search_path() -> List[Path]:
    """Candidate config files, the project's own before the user's."""
    return [Path.cwd() / CONFIG_FILE_NAME, user_config_path("xmltester") / "config.toml"]


def resolve_config_file(path: Optional[Union[str, Path]] = None) -> Path:
    """An explicit path wins; otherwise the first existing candidate, else the user config."""
    if path:
        return Path(path)
    candidates = config_search_path()
    return next((candidate for candidate in candidates if candidate.is_file()), candidates[-1])


class ConfigManager:
    def __init__(self, config_file_path: Union[str, Path] = "xmltester.toml"):
        self.config_file_path = str(config_file_path)
        self._raw_config: Dict[str, Any] = self._load_raw_config()

    def _load_raw_config(self) -> Dict[str, Any]:
        if not os.path.exists(self.config_file_path):
            # Missing file is fine: every setting has a usable default.
            logger.warning(
                "Configuration file '%s' not found. Using default tester settings.",
                self.config_file_path,
            )
            return {}
        try:
            with open(self.config_file_path, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Error decoding TOML file '{self.config_file_path}': {e}") from e

    def _set_nested_value(self, data_dict: Dict[str, Any], path_str: str, value_str: str) -> None:
        keys = path_str.split('.')
        current_level = data_dict
        for key in keys[:-1]:
            current_level = current_level.setdefault(key, {})
            if not isinstance(current_level, dict):
                # e.g. tester.default_namespace.x=1 when default_namespace is a string
                raise ValueError(f"Cannot set nested value: '{key}' in path '{path_str}' is not a dictionary.")

        final_key = keys[-1]
        coerced_value: Any
        if value_str.lower() == "true":
            coerced_value = True
        elif value_str.lower() == "false":
            coerced_value = False
        else:
            try:
                coerced_value = int(value_str)
            except ValueError:
                try:
                    coerced_value = float(value_str)
                except ValueError:
                    coerced_value = value_str # Fallback to string

        current_level[final_key] = coerced_value

    def _apply_cli_overrides(self, config_dict: Dict[str, Any], overrides: Optional[List[str]]) -> Dict[str, Any]:
        if not overrides:
            return config_dict

        modified_config_dict = copy.deepcopy(config_dict)

        for override_entry in overrides:
            if '=' not in override_entry:
                logger.warning(
                    "Invalid override format '%s'. Skipping. Expected 'path.to.key=value'.",
                    override_entry,
                )
                continue

            path_str, value_str = override_entry.split('=', 1)
            try:
                self._set_nested_value(modified_config_dict, path_str, value_str)
            except ValueError as e:
                logger.warning(
                    "Could not apply override '%s': %s. Skipping.", override_entry, e
                )

        return modified_config_dict

    def get_settings(self, overrides: Optional[List[str]] = None) -> TesterSettings:
        '''Return the validated tester settings with overrides applied.

        Overrides use the same dotted paths as the file, e.g.
        ``tester.default_namespace=urn:example`` or
        ``tester.compile_defaults.check_values=false``.
        '''
        current_config = self._apply_cli_overrides(copy.deepcopy(self._raw_config), overrides)
        tester_config = current_config.get(TESTER_SECTION, {})
        try:
            return TesterSettings(**tester_config)
        except ValidationError as e:
            raise ValueError(
                f"Validation error for tester settings from '{self.config_file_path}': {e}\n"
                f"Merged Data for Pydantic: {tester_config}"
            ) from e
