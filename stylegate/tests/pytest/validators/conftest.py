"""
Shared pytest fixtures for check tests.
"""

from __future__ import annotations

from typing import Callable

import pytest

from stylegate.config import LintConfig
from stylegate.tokens import TokenSet
from stylegate.validators.base import ScanContext


@pytest.fixture
def make_context(palette: TokenSet) -> Callable[..., ScanContext]:
    """Factory building a ScanContext over the brand palette."""

    def _make(text: str, file_name: str = "page.html", config: LintConfig | None = None) -> ScanContext:
        return ScanContext(
            file_name=file_name,
            text=text,
            tokens=palette,
            config=config or LintConfig(),
        )

    return _make
