import os
import yaml
import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Type

from .exceptions import ConfigurationError, ElementNotFoundError, QueryError


def _default_get_roles(element, hidden: bool = False) -> List[str]:
    from ..roles import get_roles
    return get_roles(element, hidden=hidden)


def _default_compute_accessible_name(element) -> str:
    from ..roles import compute_accessible_name
    return compute_accessible_name(element)


@dataclass
class QueryConfig:
    """
    Settings threaded into every query.

    Timeouts and intervals are in milliseconds. ``get_element_error`` replaces
    the default error reporter and receives ``(message, container)``.
    ``get_roles(element)`` lists roles exposed in the accessibility tree; role
    queries with ``hidden=True`` call it as ``get_roles(element, hidden=True)``.
    """
    test_id_attribute: str = "data-testid"
    async_util_timeout: float = 1000
    async_util_interval: float = 50
    default_ignore: str = "script, style"
    throw_suggestions: bool = False
    warn_suggestions: bool = False
    dom_snapshot_limit: int = 7000
    get_element_error: Optional[Callable[[str, Any], Exception]] = None
    get_roles: Callable[..., List[str]] = field(default=_default_get_roles)
    compute_accessible_name: Callable[[Any], str] = field(default=_default_compute_accessible_name)

    def element_error(self, message: str, container: Any,
                      error_class: Type[QueryError] = ElementNotFoundError) -> Exception:
        """Build (not raise) the error reported for ``container``"""
        if self.get_element_error is not None:
            return self.get_element_error(message, container)

        from ..helpers import pretty_dom

        snapshot = pretty_dom(container, self.dom_snapshot_limit) if container is not None else ""
        if snapshot:
            message = f"{message}\n\n{snapshot}"
        return error_class(message, container)

    def update(self, **changes: Any) -> "QueryConfig":
        """Return a copy with ``changes`` applied"""
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")
        return replace(self, **changes)


def resolve_config(config: Optional[QueryConfig]) -> QueryConfig:
    return config if config is not None else QueryConfig()


class ConfigManager:
    """Manages file-based configuration for dom-queries"""

    SERIALIZABLE_KEYS = (
        "test_id_attribute",
        "async_util_timeout",
        "async_util_interval",
        "default_ignore",
        "throw_suggestions",
        "warn_suggestions",
        "dom_snapshot_limit",
    )

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or self._get_default_config_path()
        self._config = self._load_config()

    def _get_default_config_path(self) -> Path:
        """Get default configuration path"""
        # Check environment variable first
        if env_path := os.getenv("DOM_QUERIES_CONFIG"):
            return Path(env_path)

        # Check common locations
        locations = [
            Path.cwd() / "dom-queries.yaml",
            Path.cwd() / ".dom-queries" / "config.yaml",
            Path.home() / ".dom-queries" / "config.yaml",
        ]

        for location in locations:
            if location.exists():
                return location

        # Return default location
        return Path.home() / ".dom-queries" / "config.yaml"

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file"""
        if not self.config_path.exists():
            return self._get_default_config()

        with open(self.config_path, 'r') as f:
            if self.config_path.suffix in ('.yaml', '.yml'):
                loaded = yaml.safe_load(f)
            elif self.config_path.suffix == '.json':
                loaded = json.load(f)
            else:
                raise ConfigurationError(f"Unsupported config format: {self.config_path.suffix}")

        config = self._get_default_config()
        for section, values in (loaded or {}).items():
            if isinstance(values, dict) and isinstance(config.get(section), dict):
                config[section].update(values)
            else:
                config[section] = values
        return config

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration"""
        defaults = QueryConfig()
        return {
            "general": {
                "log_level": "INFO",
            },
            "queries": {key: getattr(defaults, key) for key in self.SERIALIZABLE_KEYS},
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation"""
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """Set configuration value using dot notation"""
        keys = key.split('.')
        config = self._config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def save(self) -> None:
        """Save configuration to file"""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, 'w') as f:
            if self.config_path.suffix in ('.yaml', '.yml'):
                yaml.dump(self._config, f, default_flow_style=False)
            elif self.config_path.suffix == '.json':
                json.dump(self._config, f, indent=2)

    def to_query_config(self, **overrides: Any) -> QueryConfig:
        """Build the QueryConfig described by the ``queries`` section"""
        settings = dict(self.get("queries", {}) or {})
        unknown = set(settings) - set(self.SERIALIZABLE_KEYS)
        if unknown:
            raise ConfigurationError(
                f"Unknown keys in 'queries' section of {self.config_path}: {sorted(unknown)}"
            )
        settings.update(overrides)
        return QueryConfig().update(**settings)
