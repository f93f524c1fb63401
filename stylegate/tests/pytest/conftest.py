"""
Shared pytest fixtures for stylegate tests.

Provides fixtures for building throwaway prototype directories: a token
stylesheet plus any number of HTML pages.

Test Tier Markers:
  @pytest.mark.evergreen - Tests that always run, never skip (production tests)
  @pytest.mark.dev       - Development/WIP tests, toggle-able
  @pytest.mark.temporary - Tests with explicit discard flag
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from stylegate.tokens import TokenSet, extract_tokens_from_css


# =============================================================================
# Test Data Constants
# =============================================================================

BRAND_CSS = """
:root {
    --brand: #112233;
    --accent: #FFAA00;
    --surface: #f5f5f5;
    --radius-md: 8px;
}

.card { color: var(--brand); }
"""

# A page that satisfies every document-level requirement
PAGE_HEAD = """<!DOCTYPE html>
<html>
<head>
  <link rel="stylesheet" href="styles.css">
  <link rel="stylesheet" href="components.css">
  <link href="https://fonts.googleapis.com/css2?family=Space+Grotesk" rel="stylesheet">
</head>
"""


def make_page(body: str = "") -> str:
    """Wrap ``body`` in a head that loads both stylesheets and the font."""
    return f"{PAGE_HEAD}<body>\n{body}\n</body>\n</html>\n"


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def palette() -> TokenSet:
    """Palette built from BRAND_CSS."""
    return extract_tokens_from_css(BRAND_CSS)


@pytest.fixture
def prototype_dir(tmp_path: Path) -> Path:
    """A directory containing only the brand styles.css."""
    (tmp_path / "styles.css").write_text(BRAND_CSS, encoding="utf-8")
    return tmp_path


@pytest.fixture
def write_page(prototype_dir: Path) -> Callable[[str, str], Path]:
    """Factory writing an HTML file into ``prototype_dir``."""

    def _write(name: str, content: str) -> Path:
        path = prototype_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test tiers."""
    config.addinivalue_line(
        "markers",
        "evergreen: tests that always run, never skip (production tests)"
    )
    config.addinivalue_line(
        "markers",
        "dev: development/WIP tests, toggle-able for active development"
    )
    config.addinivalue_line(
        "markers",
        "temporary: tests with explicit discard flag"
    )
