"""Configuration file loader for lnproto.

Supports two formats:

- ``lnproto.toml``: settings under ``[lnproto]`` table
- ``pyproject.toml``: settings under ``[tool.lnproto]`` table

Discovery order:

1. Explicit path from ``--config`` or ``LNPROTO_CONFIG``
2. ``lnproto.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.lnproto]`` section

Configuration precedence: defaults < config file < environment < CLI args.

Example (``lnproto.toml``)::

    [lnproto]
    proto_dir = "protos/lnrpc"
    lowest_version = "0.5.1-beta"
    highest_version = "0.5.2-beta.rc3"
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

from semantic_version import Version

from lnproto.exceptions import ConfigError
from lnproto.models.version import VersionBounds
from lnproto.utils.logger import get_logger
from lnproto.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME

logger = get_logger("config")

_KNOWN_KEYS = frozenset({"proto_dir", "lowest_version", "highest_version"})


@dataclass
class LnProtoConfig:
    """Parsed and validated lnproto configuration.

    Attributes:
        proto_dir: Directory holding the proto files. ``None`` means the
            directory bundled with the package.
        lowest_version: Oldest catalog version resolution may return.
        highest_version: Newest catalog version resolution may return.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    proto_dir: Optional[Path] = None
    lowest_version: Optional[str] = None
    highest_version: Optional[str] = None

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    def bounds(self) -> VersionBounds:
        """Return the configured version range as :class:`VersionBounds`."""
        return VersionBounds.from_strings(self.lowest_version, self.highest_version)

    def to_log_dict(self) -> Dict[str, Any]:
        return {
            "proto_dir": str(self.proto_dir) if self.proto_dir else None,
            "lowest_version": self.lowest_version,
            "highest_version": self.highest_version,
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    dedicated = cwd / CONFIG_FILE_NAME
    if dedicated.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, dedicated)
        return dedicated

    pyproject = cwd / PYPROJECT_FILE_NAME
    if pyproject.is_file() and _pyproject_has_lnproto_section(pyproject):
        logger.debug("Found [tool.lnproto] in pyproject.toml: %s", pyproject)
        return pyproject

    logger.debug("No configuration file found")
    return None


def _pyproject_has_lnproto_section(path: Path) -> bool:
    """Check if pyproject.toml contains a ``[tool.lnproto]`` section.

    Parse errors count as "no section" so that a broken pyproject.toml
    belonging to another tool does not stop lnproto.
    """
    try:
        raw = _read_toml(path)
    except ConfigError:
        return False
    return "lnproto" in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> LnProtoConfig:
    """Load and validate lnproto configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`LnProtoConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return LnProtoConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == PYPROJECT_FILE_NAME:
        section = raw.get("tool", {}).get("lnproto", {})
    else:
        section = raw.get("lnproto", {})

    if not section:
        logger.debug("Config file found but no lnproto section, using defaults")
        return LnProtoConfig(source_path=resolved)

    config = _parse_section(section, config_path=resolved)
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(section: Dict[str, Any], *, config_path: Path) -> LnProtoConfig:
    """Validate an ``[lnproto]`` or ``[tool.lnproto]`` table.

    Relative ``proto_dir`` values are resolved against the directory of
    the configuration file.

    Raises:
        ConfigError: Unknown keys, wrong types or unparsable versions.
    """
    unknown = set(section) - _KNOWN_KEYS
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=str(config_path),
        )

    config = LnProtoConfig()

    if "proto_dir" in section:
        value = _require_str(section, "proto_dir", config_path)
        proto_dir = Path(value).expanduser()
        if not proto_dir.is_absolute():
            proto_dir = config_path.parent / proto_dir
        config.proto_dir = proto_dir

    for option in ("lowest_version", "highest_version"):
        if option not in section:
            continue
        value = _require_str(section, option, config_path)
        try:
            Version(value)
        except ValueError as exc:
            raise ConfigError(
                f"{option} is not a semantic version: {value!r}",
                config_path=str(config_path),
                option=option,
            ) from exc
        setattr(config, option, value)

    if config.lowest_version and config.highest_version:
        if Version(config.lowest_version) > Version(config.highest_version):
            raise ConfigError(
                "lowest_version must not be greater than highest_version",
                config_path=str(config_path),
                option="lowest_version",
            )

    return config


def _require_str(section: Dict[str, Any], option: str, config_path: Path) -> str:
    value = section[option]
    if not isinstance(value, str):
        raise ConfigError(
            f"{option} must be a string, got {type(value).__name__}",
            config_path=str(config_path),
            option=option,
        )
    return value
