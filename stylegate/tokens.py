"""
Design token extraction from the stylesheet source of truth.

Reads the ``:root { ... }`` block of a CSS file and collects every hex
color literal declared there into an allow-set. This is a pattern match,
not a CSS parser: only the first ``:root`` block is considered, and it ends
at the first closing brace.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from .config import ALWAYS_ALLOWED_COLORS
from .errors import FileReadError, TokenSourceMissingError

logger = logging.getLogger(__name__)


# =============================================================================
# Patterns
# =============================================================================

ROOT_BLOCK_PATTERN = re.compile(r":root\s*\{([^}]+)\}")

# Greedy 3-8 digits with no lookahead; a 9+ digit run still yields its
# first eight digits.
HEX_COLOR_PATTERN = re.compile(r"#[0-9A-Fa-f]{3,8}")


# =============================================================================
# Data Structures
# =============================================================================


@dataclass(frozen=True)
class TokenSet:
    """The approved design palette.

    Attributes:
        colors: Uppercased hex color literals allowed anywhere in a prototype.
        fonts: Reserved for font tokens; not consulted by any check.
        radii: Reserved for radius tokens; not consulted by any check.
        shadows: Reserved for shadow tokens; not consulted by any check.
    """

    colors: frozenset[str] = field(default_factory=frozenset)
    fonts: tuple[str, ...] = ()
    radii: tuple[str, ...] = ()
    shadows: tuple[str, ...] = ()

    def allows(self, color: str) -> bool:
        """Check whether a hex literal is in the palette, ignoring case."""
        return color.upper() in self.colors

    def __len__(self) -> int:
        return len(self.colors)


# =============================================================================
# Extraction
# =============================================================================


def extract_root_block(css: str) -> Optional[str]:
    """Return the body of the first ``:root`` block, or None if absent."""
    match = ROOT_BLOCK_PATTERN.search(css)
    if match is None:
        return None
    return match.group(1)


def extract_hex_colors(text: str) -> list[str]:
    """Return every hex color literal in ``text``, uppercased, in order."""
    return [m.group(0).upper() for m in HEX_COLOR_PATTERN.finditer(text)]


def extract_tokens_from_css(
    css: str,
    always_allowed: Iterable[str] = ALWAYS_ALLOWED_COLORS,
) -> TokenSet:
    """Build a TokenSet from raw CSS content.

    Args:
        css: Stylesheet text.
        always_allowed: Colors added to the palette unconditionally.

    Returns:
        TokenSet whose colors are the ``:root`` hex literals plus
        ``always_allowed``. When there is no ``:root`` block only the
        always-allowed colors are present.
    """
    colors = {c.upper() for c in always_allowed}

    block = extract_root_block(css)
    if block is None:
        logger.debug("No :root block found; palette is the fixed neutrals only")
        return TokenSet(colors=frozenset(colors))

    colors.update(extract_hex_colors(block))
    return TokenSet(colors=frozenset(colors))


def extract_tokens(
    css_path: Path,
    always_allowed: Iterable[str] = ALWAYS_ALLOWED_COLORS,
) -> TokenSet:
    """Read a stylesheet and build its TokenSet.

    Raises:
        TokenSourceMissingError: If ``css_path`` does not exist.
        FileReadError: If ``css_path`` exists but cannot be read.
    """
    if not css_path.is_file():
        raise TokenSourceMissingError(css_path)

    try:
        css = css_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileReadError(css_path, e) from e
    tokens = extract_tokens_from_css(css, always_allowed)
    logger.debug(f"Extracted {len(tokens)} palette colors from {css_path}")
    return tokens
