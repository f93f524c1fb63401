"""
Command-line entry point for stylegate.

Running with no arguments lints the current directory using the built-in
rules (or ``stylegate.yaml`` if one is present).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import load_config
from .errors import StyleGateError
from .reporting import render_human, render_json
from .runner import run
from .utils import log


# =============================================================================
# Version
# =============================================================================

__version__ = "0.1.0"


# =============================================================================
# Argument Parsing
# =============================================================================


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="stylegate",
        description="Check HTML prototypes against the design-token palette",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit codes:
  0   every non-exempt prototype is clean
  1   violations found, or the token stylesheet is missing

Examples:
  stylegate                      # Lint the current directory
  stylegate --root prototypes    # Lint another directory
  stylegate --json > report.json # Machine-readable report
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Directory holding styles.css and the prototypes (default: current directory)",
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML configuration file (default: <root>/stylegate.yaml if present)",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the report as JSON",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


# =============================================================================
# Main
# =============================================================================


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.no_color:
        log.set_color(False)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    root = (args.root or Path.cwd()).resolve()

    try:
        config = load_config(root, args.config)
        result = run(root, config)
    except KeyboardInterrupt:
        log.error("Interrupted")
        return 130
    except StyleGateError as e:
        log.error(str(e))
        return 1

    if args.json:
        print(render_json(result))
    else:
        file_kind = config.extension.lstrip(".").upper() or "matching"
        render_human(result, log, file_kind=file_kind)

    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
