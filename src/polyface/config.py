"""Interface declaration loading and merging for polyface."""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

import yaml

from .errors import InvalidArgumentError
from .registry import INSTANCE_PREDICATE, InterfaceRegistry


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class InterfaceConfig:
    """An interface declaration: its name and method names."""
    name: str = ""
    methods: list[str] = field(default_factory=list)

    # Logging settings for the CLI
    log_level: str = "WARNING"
    log_file: Optional[str] = None


def _normalize_config(config: InterfaceConfig) -> None:
    """Validate config.methods and config.log_level.

    Duplicate method names and the reserved predicate name are dropped: the
    registry always declares the predicate itself, so it is never kept in the
    serialized declaration.
    """
    level = str(config.log_level).upper()
    if level not in LOG_LEVELS:
        raise InvalidArgumentError(f"unknown log_level {config.log_level!r}, expected one of {list(LOG_LEVELS)}")
    config.log_level = level

    methods = config.methods
    if methods is None:
        methods = []
    if isinstance(methods, (str, bytes)) or not isinstance(methods, (list, tuple)):
        raise InvalidArgumentError(f"'methods' must be a list of strings, got {methods!r}")
    bad = [m for m in methods if not isinstance(m, str)]
    if bad:
        raise InvalidArgumentError(f"method names must be strings, got {bad!r}")
    config.methods = [m for m in dict.fromkeys(methods) if m != INSTANCE_PREDICATE]


def load_config(path: str | Path) -> InterfaceConfig:
    """Load an InterfaceConfig from a YAML file."""
    path = Path(path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise InvalidArgumentError(f"{path}: expected a mapping at the top level")

    valid_fields = {f.name for f in fields(InterfaceConfig)}
    filtered = {k: v for k, v in data.items() if k in valid_fields}
    if filtered.get("name") is None:
        filtered.pop("name", None)

    config = InterfaceConfig(**filtered)
    _normalize_config(config)
    return config


def merge_cli_args(config: InterfaceConfig, args) -> InterfaceConfig:
    """Overlay CLI arguments onto an existing config. CLI values take precedence."""
    for f in fields(InterfaceConfig):
        cli_val = getattr(args, f.name, None)
        if cli_val is not None:
            setattr(config, f.name, cli_val)
    _normalize_config(config)
    return config


def config_to_yaml(config: InterfaceConfig) -> str:
    """Serialize an InterfaceConfig to YAML."""
    data: dict = {}
    if config.name:
        data["name"] = config.name
    data["methods"] = list(config.methods)
    data["log_level"] = config.log_level
    if config.log_file:
        data["log_file"] = config.log_file
    return yaml.dump(data, default_flow_style=False, sort_keys=False)


def build_registry(config: InterfaceConfig) -> InterfaceRegistry:
    """Construct an empty registry declaring the configured methods."""
    return InterfaceRegistry(config.methods, name=config.name or None)
