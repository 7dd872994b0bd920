"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from dataclasses import dataclass, field, asdict

from ...logging_config import get_logger
from .errors import ConfigError

logger = get_logger(__name__)


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Output settings
    package_name: Optional[str] = None

    # Declaration names: path + role suffix
    request_suffix: str = "ReqDto"
    response_suffix: str = "RespRto"

    # Field rendering
    sort_fields: bool = False
    add_comments: bool = True
    generate_json_tags: bool = True
    required_tag: str = 'binding:"required"'

    # Target primitive names
    string_type: str = "string"
    int_type: str = "int"
    number_type: str = "int"
    bool_type: str = "bool"

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)



_KNOWN_KEYS = frozenset(GeneratorConfig.__dataclass_fields__) - {"custom"}


class ConfigManager:
    """
    Builds generator configurations.

    Settings are layered: ``GeneratorConfig`` field defaults, then a JSON
    configuration file, then explicit overrides. Keys that are not
    settings are kept in ``custom`` so that they can be reported.
    """

    def get_config(self, language: str = "go", custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        settings: Dict[str, Any] = {}

        if config_file:
            file_settings = self._load_config_file(config_file)
            settings.update(file_settings)
            logger.debug("Loaded %d %s settings from %s", len(file_settings), language, config_file)

        if custom_config:
            settings.update(custom_config)

        return self._dict_to_config(settings)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Read a JSON object of settings."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")
        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            settings = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(settings, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")
        return settings

    def _dict_to_config(self, settings: Dict[str, Any]) -> GeneratorConfig:
        """Split settings into known fields and ``custom`` leftovers."""
        known = {key: value for key, value in settings.items() if key in _KNOWN_KEYS}
        custom = dict(settings.get("custom") or {})
        custom.update(
            (key, value)
            for key, value in settings.items()
            if key not in _KNOWN_KEYS and key != "custom"
        )
        return GeneratorConfig(custom=custom, **known)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Write a configuration as a flat JSON object loadable by ``get_config``."""
        path = Path(output_path)

        settings = asdict(config)
        settings.update(settings.pop("custom"))

        try:
            path.write_text(json.dumps(settings, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: GeneratorConfig, language: str = "go") -> List[str]:
        """
        Validate configuration for a language.

        Returns:
            List of validation warnings
        """
        warnings = []

        for name in ("request_suffix", "response_suffix"):
            value = getattr(config, name)
            if not value or not value.isidentifier():
                warnings.append(f"Invalid {name}: {value!r}")

        if config.request_suffix == config.response_suffix:
            warnings.append("request_suffix and response_suffix are identical")

        if language == "go":
            if config.package_name and not config.package_name.isidentifier():
                warnings.append(f"Invalid Go package name: {config.package_name}")

        for key in config.custom:
            warnings.append(f"Unknown setting ignored: {key}")

        return warnings


# Global configuration manager instance
_config_manager = None

def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(language: str = "go", custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
    """Build a configuration through the global manager."""
    return get_config_manager().get_config(language, custom_config, config_file)
