"""
tsprettify Command-Line Interface.

Prettifies TypeScript type-mismatch diagnostics from the shell.

Usage:
    tsprettify prettify "Type 'string' is not assignable to type 'number'."
    tsc --noEmit | grep TS2322 | tsprettify prettify --code 2322
    tsprettify extract --json "Argument of type 'A' is not assignable to parameter of type 'B'."
    tsprettify format "{ a: string; b: { c: number; }; }"
    tsprettify diff "{ a: string; }" "{ a: number; }"
    tsprettify summarize "{ id: number; name: string; active: boolean; extra: string; }"
    tsprettify templates            # List configured templates
"""

import argparse
import json
import logging
import re
import sys
from pathlib import Path
from typing import Optional

from tsprettify import __version__
from tsprettify.config import DEFAULT_CONFIG, PrettifierConfig, load_config_file
from tsprettify.core.diff import DEFAULT_MARKERS, diff_types
from tsprettify.extractor import extract
from tsprettify.formatter import check_format, format_type
from tsprettify.render import SEPARATOR, TITLE, prettify_message, render_mismatch
from tsprettify.summary import summarize
from tsprettify.utils.errors import PrettifierError

EXIT_OK = 0
EXIT_NO_MATCH = 1
EXIT_CONFIG_ERROR = 2


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    # Text colors
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"

    # Styles
    BOLD = "\033[1m"

    # Reset
    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY output)."""
        cls.RED = ""
        cls.GREEN = ""
        cls.YELLOW = ""
        cls.CYAN = ""
        cls.GRAY = ""
        cls.BOLD = ""
        cls.RESET = ""


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    # Disable colors if not a TTY or if NO_COLOR is set
    import os

    if not sys.stdout.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


# Initialize on module load
_init_colors()


_REMOVED_RE = re.compile(
    re.escape(DEFAULT_MARKERS.removed_open) + r".*?" + re.escape(DEFAULT_MARKERS.removed_close)
)
_ADDED_RE = re.compile(
    re.escape(DEFAULT_MARKERS.added_open) + r".*?" + re.escape(DEFAULT_MARKERS.added_close)
)


def _highlight_diff(text: str) -> str:
    """Color removed tokens red and added tokens green."""
    if not Colors.RESET:
        return text
    text = _REMOVED_RE.sub(lambda m: f"{Colors.RED}{m.group(0)}{Colors.RESET}", text)
    return _ADDED_RE.sub(lambda m: f"{Colors.GREEN}{m.group(0)}{Colors.RESET}", text)


def _highlight_block(block: str) -> str:
    """Color the title and labels of a prettified block."""
    if not Colors.RESET:
        return block
    lines = block.split("\n")
    if len(lines) < 2 or lines[0] != TITLE or lines[1] != SEPARATOR:
        return block
    lines[0] = f"{Colors.BOLD}{Colors.RED}{lines[0]}{Colors.RESET}"
    lines[1] = f"{Colors.GRAY}{lines[1]}{Colors.RESET}"
    # Labels sit right after the separator and right after the blank line
    label_rows = [2] + [i + 1 for i, line in enumerate(lines) if i > 2 and not line]
    for i in label_rows:
        if i < len(lines):
            lines[i] = f"{Colors.CYAN}{lines[i]}{Colors.RESET}"
    return _highlight_diff("\n".join(lines))


def _read_input(value: Optional[str]) -> str:
    """Take the positional argument, or read standard input when it is omitted."""
    if value is not None:
        return value
    return sys.stdin.read().strip()


def _load_config(args: argparse.Namespace) -> PrettifierConfig:
    config_path: Optional[Path] = args.config
    if config_path is None:
        return DEFAULT_CONFIG
    return load_config_file(config_path)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="tsprettify",
        description="tsprettify - readable TypeScript type-mismatch diagnostics",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Options shared by every command
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="JSON file with configuration overrides",
    )
    common.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging on stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Prettify command
    prettify_parser = subparsers.add_parser(
        "prettify",
        aliases=["p"],
        parents=[common],
        help="Render a diagnostic message as a readable block",
    )
    prettify_parser.add_argument(
        "message",
        nargs="?",
        help="Diagnostic message (read from stdin when omitted)",
    )
    prettify_parser.add_argument(
        "--code",
        help="Diagnostic code, e.g. 2322 or TS2322",
    )

    # Extract command
    extract_parser = subparsers.add_parser(
        "extract",
        aliases=["x"],
        parents=[common],
        help="Print the two type expressions compared by a diagnostic",
    )
    extract_parser.add_argument(
        "message",
        nargs="?",
        help="Diagnostic message (read from stdin when omitted)",
    )
    extract_parser.add_argument(
        "--code",
        help="Diagnostic code, e.g. 2322 or TS2322",
    )
    extract_parser.add_argument(
        "--json",
        action="store_true",
        help="Output the extraction as JSON",
    )

    # Format command
    format_parser = subparsers.add_parser(
        "format",
        aliases=["fmt"],
        parents=[common],
        help="Indent a type expression by its nesting",
    )
    format_parser.add_argument(
        "type_expr",
        nargs="?",
        help="Type expression (read from stdin when omitted)",
    )
    format_parser.add_argument(
        "--check",
        action="store_true",
        help="Check if the expression is already formatted (exit 1 if not)",
    )

    # Diff command
    diff_parser = subparsers.add_parser(
        "diff",
        aliases=["d"],
        parents=[common],
        help="Show a token diff of two type expressions",
    )
    diff_parser.add_argument("actual", help="The actual type expression")
    diff_parser.add_argument("expected", help="The expected type expression")

    # Summarize command
    summarize_parser = subparsers.add_parser(
        "summarize",
        aliases=["s"],
        parents=[common],
        help="Shorten a type expression to one line",
    )
    summarize_parser.add_argument(
        "type_expr",
        nargs="?",
        help="Type expression (read from stdin when omitted)",
    )

    # Templates command
    subparsers.add_parser(
        "templates",
        parents=[common],
        help="List the configured message templates",
    )

    return parser


def cmd_prettify(args: argparse.Namespace, config: PrettifierConfig) -> int:
    """Handle the prettify command."""
    message = _read_input(args.message)
    print(_highlight_block(prettify_message(message, args.code, config)))
    return EXIT_OK


def cmd_extract(args: argparse.Namespace, config: PrettifierConfig) -> int:
    """Handle the extract command."""
    message = _read_input(args.message)
    mismatch = extract(message, args.code, config.templates)

    if args.json:
        if mismatch is None:
            print("null")
        else:
            rendering = render_mismatch(mismatch, config)
            print(
                json.dumps(
                    {
                        "template": mismatch.template,
                        "labels": list(mismatch.labels),
                        "actual": mismatch.actual,
                        "expected": mismatch.expected,
                        "renderings": {
                            "verbose": list(rendering.verbose),
                            "diff": list(rendering.diff),
                            "summary": list(rendering.summary),
                        },
                    },
                    indent=2,
                )
            )
        return EXIT_OK if mismatch is not None else EXIT_NO_MATCH

    if mismatch is None:
        print(f"{Colors.YELLOW}No template matched{Colors.RESET}", file=sys.stderr)
        return EXIT_NO_MATCH

    print(f"{Colors.GRAY}template:{Colors.RESET} {mismatch.template}")
    print(f"{Colors.CYAN}{mismatch.actual_label}{Colors.RESET} {mismatch.actual}")
    print(f"{Colors.CYAN}{mismatch.expected_label}{Colors.RESET} {mismatch.expected}")
    return EXIT_OK


def cmd_format(args: argparse.Namespace, config: PrettifierConfig) -> int:
    """Handle the format command."""
    type_expr = _read_input(args.type_expr)

    if args.check:
        if check_format(type_expr, config):
            print(f"{Colors.GREEN}[ok]{Colors.RESET} Already formatted")
            return EXIT_OK
        print(f"{Colors.YELLOW}[!!]{Colors.RESET} Would reformat")
        return 1

    print(format_type(type_expr, config))
    return EXIT_OK


def cmd_diff(args: argparse.Namespace, config: PrettifierConfig) -> int:  # noqa: ARG001
    """Handle the diff command."""
    left, right = diff_types(args.actual, args.expected)
    print(_highlight_diff(left))
    print(_highlight_diff(right))
    return EXIT_OK


def cmd_summarize(args: argparse.Namespace, config: PrettifierConfig) -> int:  # noqa: ARG001
    """Handle the summarize command."""
    print(summarize(_read_input(args.type_expr)))
    return EXIT_OK


def cmd_templates(args: argparse.Namespace, config: PrettifierConfig) -> int:  # noqa: ARG001
    """Handle the templates command."""
    templates = config.templates
    codes_by_name: dict[str, list[str]] = {}
    for code, name in templates.codes.items():
        codes_by_name.setdefault(name, []).append(code)

    print(f"{Colors.BOLD}{len(templates)} templates{Colors.RESET} (in matching order)")
    for template in templates:
        codes = ", ".join(f"TS{code}" for code in sorted(codes_by_name.get(template.name, [])))
        print(f"  {Colors.CYAN}{template.name:<16}{Colors.RESET} {codes or '-'}")
        print(f"    {Colors.GRAY}labels:{Colors.RESET}  {' / '.join(template.labels)}")
        print(f"    {Colors.GRAY}pattern:{Colors.RESET} {template.pattern.pattern}")
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    if args.no_color:
        Colors.disable()
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    try:
        config = _load_config(args)
    except FileNotFoundError:
        print(f"{Colors.RED}Error:{Colors.RESET} Config file not found: {args.config}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except PrettifierError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    command_handlers = {
        "prettify": cmd_prettify,
        "p": cmd_prettify,
        "extract": cmd_extract,
        "x": cmd_extract,
        "format": cmd_format,
        "fmt": cmd_format,
        "diff": cmd_diff,
        "d": cmd_diff,
        "summarize": cmd_summarize,
        "s": cmd_summarize,
        "templates": cmd_templates,
    }

    handler = command_handlers.get(args.command)
    if handler:
        return handler(args, config)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
