"""
CLI behavior: report format and exit codes.

Pass condition: ``main`` returns 0 for clean directories and 1 for
violations or a missing token stylesheet, printing the report described
in the README.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

import pytest

from stylegate.cli import create_parser, main

CLEAN_PAGE = (
    '<link href="styles.css"><link href="components.css">\n'
    "<p>Space Grotesk</p>\n"
    '<p style="color:#112233">ok</p>\n'
)


def _run(capsys: pytest.CaptureFixture[str], *argv: str) -> tuple[int, str, str]:
    code = main(["--no-color", *argv])
    captured = capsys.readouterr()
    return code, captured.out, captured.err


# ---------------------------------------------------------------------------
# Exit Codes
# ---------------------------------------------------------------------------


@pytest.mark.evergreen
class TestExitCodes:

    def test_clean(self, prototype_dir: Path, write_page: Callable, capsys) -> None:
        write_page("index.html", CLEAN_PAGE)
        code, out, _ = _run(capsys, "--root", str(prototype_dir))
        assert code == 0

    def test_violation(self, prototype_dir: Path, write_page: Callable, capsys) -> None:
        write_page("index.html", CLEAN_PAGE.replace("#112233", "#445566"))
        code, _, _ = _run(capsys, "--root", str(prototype_dir))
        assert code == 1

    def test_missing_token_source(self, tmp_path: Path, capsys) -> None:
        (tmp_path / "index.html").write_text(CLEAN_PAGE, encoding="utf-8")
        code, out, err = _run(capsys, "--root", str(tmp_path))
        assert code == 1
        assert "ERROR: styles.css not found" in err
        assert out == ""

    def test_unreadable_token_source(
        self, prototype_dir: Path, write_page: Callable, capsys, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        write_page("index.html", CLEAN_PAGE)
        original_read_text = Path.read_text

        def deny_styles(self: Path, *args, **kwargs) -> str:
            if self.name == "styles.css":
                raise PermissionError(13, "Permission denied")
            return original_read_text(self, *args, **kwargs)

        monkeypatch.setattr(Path, "read_text", deny_styles)
        code, out, err = _run(capsys, "--root", str(prototype_dir))
        assert code == 1
        assert err.startswith("ERROR: could not read styles.css")
        assert out == ""

    def test_bad_config(self, prototype_dir: Path, capsys) -> None:
        (prototype_dir / "stylegate.yaml").write_text("bogus: 1\n", encoding="utf-8")
        code, _, err = _run(capsys, "--root", str(prototype_dir))
        assert code == 1
        assert "Unknown configuration keys: bogus" in err

    def test_config_checked_before_token_source(self, tmp_path: Path, capsys) -> None:
        # The config names the token source, so it has to load first
        (tmp_path / "stylegate.yaml").write_text("bogus: 1\n", encoding="utf-8")
        code, _, err = _run(capsys, "--root", str(tmp_path))
        assert code == 1
        assert "Unknown configuration keys: bogus" in err
        assert "not found" not in err

    def test_defaults_to_cwd(
        self, prototype_dir: Path, write_page: Callable, capsys, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        write_page("index.html", CLEAN_PAGE)
        monkeypatch.chdir(prototype_dir)
        code, out, _ = _run(capsys)
        assert code == 0
        assert "✓ index.html" in out


# ---------------------------------------------------------------------------
# Report Format
# ---------------------------------------------------------------------------


@pytest.mark.evergreen
class TestHumanReport:

    def test_clean_report(self, prototype_dir: Path, write_page: Callable, capsys) -> None:
        write_page("index.html", CLEAN_PAGE)
        write_page("brandbook.html", '<p style="color:#ABCDEF"></p>')
        write_page("wireframe-a.html", "")
        _, out, _ = _run(capsys, "--root", str(prototype_dir))
        lines = out.splitlines()
        assert lines[0] == "Design system: 9 colors in palette"
        assert lines[1] == ""
        assert "✓ brandbook.html (exempt — reference page)" in lines
        assert "✓ wireframe-a.html (exempt — wireframe, no brand styles)" in lines
        assert "✓ index.html" in lines
        assert "─" * 50 in lines
        assert "✓ ALL CLEAN — 3 files, 0 violations" in lines
        assert lines[-1] == "All prototypes conform to the design system."

    def test_failure_report(self, prototype_dir: Path, write_page: Callable, capsys) -> None:
        write_page("index.html", CLEAN_PAGE.replace("#112233", "#445566"))
        write_page("bare.html", "<p></p>")
        _, out, _ = _run(capsys, "--root", str(prototype_dir))
        lines = out.splitlines()
        assert "✗ index.html — 1 violation(s):" in lines
        assert "  [UNKNOWN_COLOR] index.html:3 → Hardcoded color #445566 not in design system palette" in lines
        assert "    value: #445566" in lines
        assert "✗ bare.html — 3 violation(s):" in lines
        # File-level findings omit the line number
        assert "  [MISSING_FONT] bare.html → Must import Space Grotesk from Google Fonts" in lines
        assert "✗ 4 violation(s) in 2 file(s)" in lines
        assert lines[-1] == "Fix violations to ensure brand consistency."

    def test_no_candidates(self, prototype_dir: Path, capsys) -> None:
        code, out, _ = _run(capsys, "--root", str(prototype_dir))
        assert code == 0
        assert out.splitlines()[-1] == "No HTML files found."

    def test_blank_line_after_scanned_file(self, prototype_dir: Path, write_page: Callable, capsys) -> None:
        write_page("index.html", CLEAN_PAGE)
        _, out, _ = _run(capsys, "--root", str(prototype_dir))
        lines = out.splitlines()
        assert lines[lines.index("✓ index.html") + 1] == ""


@pytest.mark.evergreen
class TestJsonReport:

    def test_json_output(self, prototype_dir: Path, write_page: Callable, capsys) -> None:
        write_page("index.html", CLEAN_PAGE.replace("#112233", "#445566"))
        write_page("brandbook.html", "")
        code, out, _ = _run(capsys, "--root", str(prototype_dir), "--json")
        data = json.loads(out)
        assert code == 1
        assert data["passed"] is False
        assert data["total_violations"] == 1
        assert data["files"][0] == {"file": "brandbook.html", "exempt_reason": "reference page", "violations": []}
        assert data["files"][1]["violations"][0] == {
            "file": "index.html",
            "line": 3,
            "type": "UNKNOWN_COLOR",
            "value": "#445566",
            "message": "Hardcoded color #445566 not in design system palette",
        }


@pytest.mark.evergreen
class TestParser:

    def test_no_arguments(self) -> None:
        args = create_parser().parse_args([])
        assert args.root is None
        assert args.config is None
        assert not args.json

    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "stylegate" in capsys.readouterr().out
