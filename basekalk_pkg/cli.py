from __future__ import annotations

import argparse
import json

from . import config
from .config import VERSION
from .logging_config import get_logger, setup_logging
from .session import Session
from .types import EvalResult

logger = get_logger("cli")

# Words the REPL treats as commands rather than expressions
REPL_COMMANDS = {"help", "quit", "exit", "ibase", "obase", "vars", "funcs"}


def _health_check() -> int:
    """Run health check to verify basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running Basekalk health check...")
    print("-" * 50)

    checks = [
        ("Operator precedence", "2+3*4", 10, 10, "14"),
        ("Hexadecimal input", "ff", 16, 10, "255"),
        ("Binary to hexadecimal", "1010", 2, 16, "a"),
        ("Built-in functions", "sqrt(16)+fac(3)", 10, 10, "10"),
        ("Fractional output", "1/4", 10, 2, "0.01"),
    ]
    for label, expr, input_base, output_base, expected in checks:
        try:
            result = Session(input_base, output_base).submit(expr)
            if result.ok and result.result == expected:
                print(f"[OK] {label} works")
                checks_passed += 1
            else:
                print(f"[FAIL] {label}: expected {expected}, got {result}")
                checks_failed += 1
        except Exception as e:
            print(f"[FAIL] {label} check failed: {e}")
            checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. Core functionality may be impaired.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_result_pretty(res: EvalResult, output_format: str = "human") -> None:
    """Print result in specified format.

    Args:
        res: Result of a calculation
        output_format: "json" for JSON output, "human" for human-readable
    """
    if output_format == "json":
        print(json.dumps(res.to_dict(), indent=2, ensure_ascii=False))
        return
    if not res.ok:
        print("Error:", res.error)
        return
    if res.result is not None:
        print(res.result)


def print_help_text() -> None:
    print(
        f"""Basekalk {VERSION} - arithmetic in any base from {config.MIN_BASE} to {config.MAX_BASE}

Expressions:
  2+3*4          operators ^ * / % + - with parentheses
  x = ff         assign a variable (later assignments overwrite)
  sqrt(x)        built-ins: sin cos tan asin acos atan exp sqrt cbrt fac
  -3*2           a leading '-' is only allowed directly before a number

Digits are 0-9, a-z, A-Z. Up to base 36 letters are case-insensitive.
A number may start with a letter (e.g. ff) as long as no variable of that
name exists.

Commands:
  ibase N        set the input base
  obase N        set the output base (re-formats the last result)
  vars           list variables
  funcs          list functions
  help           show this text
  quit, exit     leave"""
    )


def _handle_command(session: Session, raw: str, output_format: str) -> bool:
    """Run a REPL command. Returns False if ``raw`` is not a command."""
    parts = raw.split()
    command = parts[0].lower()
    if command not in REPL_COMMANDS or (command in ("vars", "funcs", "help") and len(parts) > 1):
        return False

    if command == "help":
        print_help_text()
    elif command == "vars":
        for name, value in sorted(session.symbols.items()):
            print(f"{name} = {value!r}")
    elif command == "funcs":
        for name, spec in sorted(session.functions.items()):
            print(f"{name}/{spec.arity}")
    elif command in ("ibase", "obase"):
        if len(parts) != 2:
            print(f"Usage: {command} N")
            return True
        try:
            base = int(parts[1])
        except ValueError:
            print(f"Error: base must be an integer, got {parts[1]!r}")
            return True
        if command == "ibase":
            res = session.set_input_base(base)
        else:
            res = session.set_output_base(base)
        print(f"[{command} = {base}]")
        if session.text:
            print_result_pretty(res, output_format)
    return True


def repl_loop(session: Session, output_format: str = "human") -> None:
    """Interactive REPL loop."""
    try:
        import readline  # noqa: F401
    except (ImportError, ModuleNotFoundError):
        # readline not available on Windows - that's fine
        pass

    print("Basekalk - type 'help' for commands, 'quit' to exit.")
    while True:
        try:
            raw = input(f"[{session.input_base}->{session.output_base}] >>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            return
        if not raw:
            continue
        if raw.lower() in ("quit", "exit"):
            print("Goodbye.")
            return
        if _handle_command(session, raw, output_format):
            continue
        print_result_pretty(session.submit(raw), output_format)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for Basekalk CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="basekalk")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        action="append",
        help="Evaluate an expression and exit (repeatable; variables carry over)",
        dest="eval_expr",
    )
    parser.add_argument(
        "-i", "--input-base", type=int, help="Base of numeric literals (default: 10)"
    )
    parser.add_argument(
        "-o", "--output-base", type=int, help="Base of printed results (default: 10)"
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-p",
        "--precision",
        type=int,
        help="Maximum digits after the point in results (default: 15)",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level (default: BASEKALK_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify basic operations",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    # Apply CLI configuration overrides
    if args.precision is not None and args.precision >= 0:
        config.MAX_FRACTION_DIGITS = int(args.precision)

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()

    session = Session(input_base=args.input_base, output_base=args.output_base)
    logger.debug(
        "Session started with input base %d, output base %d",
        session.input_base,
        session.output_base,
    )

    if args.eval_expr:
        exit_code = 0
        for expr in args.eval_expr:
            expr = expr.strip()
            # Remove ">>>" prompt if present
            if expr.startswith(">>>"):
                expr = expr[3:].strip()
            if not expr:
                print("Error: Empty input. Please enter a valid expression.")
                exit_code = 1
                continue
            res = session.submit(expr)
            print_result_pretty(res, args.format)
            if not res.ok:
                exit_code = 1
        return exit_code

    repl_loop(session, args.format)
    return 0


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m basekalk_pkg.cli"""
    import sys

    sys.exit(main_entry())
