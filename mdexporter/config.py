"""Configuration management for mdexporter."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_DIR = Path("~/.config/mdexporter").expanduser()
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"
DEFAULT_EXPORT_DIRNAME = "export"
DEFAULT_IMAGE_DIRNAME = "images"

LINK_STYLE_RELATIVE = "relative"
LINK_STYLE_ABSOLUTE = "absolute"
LINK_STYLES = (LINK_STYLE_RELATIVE, LINK_STYLE_ABSOLUTE)


class ConfigError(RuntimeError):
    """Base error for configuration related issues."""


class MissingConfigError(ConfigError):
    """Raised when the configuration file cannot be found."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Configuration file not found at {path}")
        self.path = path


class InvalidConfigError(ConfigError):
    """Raised when the configuration file misses required keys or values."""


@dataclass(slots=True)
class ExporterConfig:
    """In-memory representation of the mdexporter configuration file."""

    vault_dir: Path
    export_dir: str = DEFAULT_EXPORT_DIRNAME
    image_dir: str = DEFAULT_IMAGE_DIRNAME
    link_style: str = LINK_STYLE_RELATIVE
    compatibility_formatting: bool = True
    plugins: dict[str, dict[str, Any]] = field(default_factory=dict)
    source_path: Path | None = None

    @property
    def export_root(self) -> Path:
        """Directory exports are written under."""

        root = Path(self.export_dir).expanduser()
        if root.is_absolute():
            return root
        return self.vault_dir / root


def default_config(vault_dir: Path) -> ExporterConfig:
    """Return a configuration using defaults for everything but the vault."""

    return ExporterConfig(vault_dir=Path(vault_dir).expanduser().resolve())


def load_config(path: Path | None = None) -> ExporterConfig:
    """Load configuration from ``path`` or the default location.

    Parameters
    ----------
    path:
        Optional location of the configuration file. When ``None`` the default
        path (``~/.config/mdexporter/config.toml``) is used.

    Raises
    ------
    MissingConfigError
        If the file cannot be found.
    InvalidConfigError
        If mandatory settings are missing or malformed.
    """

    config_path = (path or DEFAULT_CONFIG_PATH).expanduser()
    if not config_path.exists():
        raise MissingConfigError(config_path)

    try:
        with config_path.open("rb") as fh:
            raw = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise InvalidConfigError(f"Invalid TOML in {config_path}: {exc}") from exc

    section = raw.get("mdexporter")
    if not isinstance(section, dict):
        raise InvalidConfigError("'mdexporter' section is required and must be a table")

    base_dir = config_path.parent if path is not None else DEFAULT_CONFIG_DIR
    config_dir = base_dir.expanduser()

    # The vault path may be absolute or relative; relative paths are resolved
    # against the configuration directory.
    vault_raw = section.get("vault_dir")
    if not isinstance(vault_raw, str) or not vault_raw.strip():
        raise InvalidConfigError("'vault_dir' is required and must be a non-empty string")
    vp = Path(vault_raw.strip()).expanduser()
    vault_dir = (vp if vp.is_absolute() else (config_dir / vp)).resolve()

    export_dir = _optional_str(section, "export_dir", DEFAULT_EXPORT_DIRNAME)
    image_dir = _optional_str(section, "image_dir", DEFAULT_IMAGE_DIRNAME)
    if "/" in image_dir or "\\" in image_dir or image_dir in (".", ".."):
        raise InvalidConfigError("'image_dir' must be a plain directory name")

    link_style = _optional_str(section, "link_style", LINK_STYLE_RELATIVE).lower()
    if link_style not in LINK_STYLES:
        choices = ", ".join(LINK_STYLES)
        raise InvalidConfigError(f"'link_style' must be one of: {choices}")

    formatting = section.get("compatibility_formatting", True)
    if not isinstance(formatting, bool):
        raise InvalidConfigError("'compatibility_formatting' must be a boolean")

    plugins_section = raw.get("plugins")
    plugins: dict[str, dict[str, Any]] = {}
    if isinstance(plugins_section, dict):
        for key, value in plugins_section.items():
            if isinstance(value, dict):
                plugins[key] = dict(value)
            else:
                plugins[key] = {}

    return ExporterConfig(
        vault_dir=vault_dir,
        export_dir=export_dir,
        image_dir=image_dir,
        link_style=link_style,
        compatibility_formatting=formatting,
        plugins=plugins,
        source_path=config_path,
    )


def _optional_str(section: dict[str, Any], key: str, default: str) -> str:
    value = section.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise InvalidConfigError(f"'{key}' must be a string when provided")
    stripped = value.strip()
    return stripped or default


def bootstrap_config_file(path: Path) -> bool:
    """Create a default config file if missing.

    Returns True when the file was created, False if it already existed.
    """

    if path.exists():
        return False

    config_dir = path.parent
    config_dir.mkdir(parents=True, exist_ok=True)
    default_content = (
        "[mdexporter]\n"
        'vault_dir = "~/Notes"\n'
        f'export_dir = "{DEFAULT_EXPORT_DIRNAME}"\n'
        f'image_dir = "{DEFAULT_IMAGE_DIRNAME}"\n'
        f'link_style = "{LINK_STYLE_RELATIVE}"\n'
        "compatibility_formatting = true\n"
    )
    path.write_text(default_content, encoding="utf-8")
    return True
