"""
Runtime configuration for stylegate.

The defaults reproduce the house rules for the prototype directory. A
``stylegate.yaml`` next to the prototypes (or one passed via ``--config``)
can override any of them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

CONFIG_FILENAME = "stylegate.yaml"

DEFAULT_TOKEN_SOURCE = "styles.css"
DEFAULT_EXTENSION = ".html"

# 3- and 6-digit spellings of common neutrals are always in the palette
ALWAYS_ALLOWED_COLORS: tuple[str, ...] = (
    "#FFF",
    "#FFFFFF",
    "#000",
    "#000000",
    "#EEE",
    "#EEEEEE",
)

DEFAULT_EXEMPT_FILES: dict[str, str] = {
    "brandbook.html": "reference page",
}

DEFAULT_EXEMPT_PREFIXES: dict[str, str] = {
    "wireframe-": "wireframe, no brand styles",
}

# (substring, message) pairs checked against every scanned file
DEFAULT_REQUIRED_STYLESHEETS: tuple[tuple[str, str], ...] = (
    ("styles.css", "Must include styles.css for design system tokens"),
    ("components.css", "Must include components.css for shared components"),
)

DEFAULT_REQUIRED_FONT = "Space Grotesk"
DEFAULT_FONT_SPELLINGS: tuple[str, ...] = ("Space+Grotesk", "Space Grotesk")


# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class LintConfig:
    """Configuration for a lint run."""

    token_source: str = DEFAULT_TOKEN_SOURCE
    extension: str = DEFAULT_EXTENSION
    always_allowed_colors: tuple[str, ...] = ALWAYS_ALLOWED_COLORS
    exempt_files: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_EXEMPT_FILES))
    exempt_prefixes: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_EXEMPT_PREFIXES))
    required_stylesheets: tuple[tuple[str, str], ...] = DEFAULT_REQUIRED_STYLESHEETS
    required_font: str = DEFAULT_REQUIRED_FONT
    font_spellings: tuple[str, ...] = DEFAULT_FONT_SPELLINGS

    def token_source_path(self, root: Path) -> Path:
        return root / self.token_source


# =============================================================================
# Loading
# =============================================================================


def _expect(key: str, value: Any, kind: type) -> Any:
    if not isinstance(value, kind):
        raise ConfigError(
            f"'{key}' must be a {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _string_map(key: str, value: Any) -> dict[str, str]:
    _expect(key, value, dict)
    result: dict[str, str] = {}
    for name, reason in value.items():
        result[str(name)] = "" if reason is None else str(reason)
    return result


def _string_item(key: str, item: Any) -> str:
    # A bare "-" or "name:" in YAML is null, not an empty string
    if item is None:
        raise ConfigError(f"'{key}' contains an empty entry")
    return str(item)


def _string_tuple(key: str, value: Any) -> tuple[str, ...]:
    _expect(key, value, list)
    return tuple(_string_item(key, item) for item in value)


def _stylesheets(key: str, value: Any) -> tuple[tuple[str, str], ...]:
    """Accept either bare names or ``{name: message}`` mappings.

    A mapping entry with no message gets the same default message as a
    bare name.
    """
    if isinstance(value, dict):
        items = list(value.items())
    else:
        items = [(item, None) for item in _expect(key, value, list)]

    sheets: list[tuple[str, str]] = []
    for raw_name, msg in items:
        name = _string_item(key, raw_name)
        sheets.append((name, f"Must include {name}" if msg is None else str(msg)))
    return tuple(sheets)


_PARSERS = {
    "token_source": lambda k, v: str(_expect(k, v, str)),
    "extension": lambda k, v: str(_expect(k, v, str)),
    "always_allowed_colors": lambda k, v: tuple(c.upper() for c in _string_tuple(k, v)),
    "exempt_files": _string_map,
    "exempt_prefixes": _string_map,
    "required_stylesheets": _stylesheets,
    "required_font": lambda k, v: str(_expect(k, v, str)),
    "font_spellings": _string_tuple,
}


def config_from_dict(data: dict[str, Any]) -> LintConfig:
    """Build a LintConfig from a parsed mapping, validating keys and types.

    Raises:
        ConfigError: On unknown keys or values of the wrong type.
    """
    known = {f.name for f in fields(LintConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    overrides = {key: _PARSERS[key](key, value) for key, value in data.items()}
    return LintConfig(**overrides)


def load_config(root: Path, path: Optional[Path] = None) -> LintConfig:
    """Load configuration for a run rooted at ``root``.

    Uses ``path`` if given, otherwise ``root/stylegate.yaml`` when present,
    otherwise the built-in defaults.

    Raises:
        ConfigError: If the file is missing (explicit path only), not valid
            YAML, or not a mapping.
    """
    if path is None:
        candidate = root / CONFIG_FILENAME
        if not candidate.is_file():
            logger.debug(f"No {CONFIG_FILENAME} in {root}, using defaults")
            return LintConfig()
        path = candidate
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path.name}: {e}") from e

    if data is None:
        return LintConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name} must contain a mapping at top level")

    logger.debug(f"Loaded configuration from {path}")
    return config_from_dict(data)
