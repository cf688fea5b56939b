"""CLI interface for no-emoji.

Usage:
    # Report emoji (stdin: text, stdout: JSON list of diagnostics)
    echo 'Hello 👋 World' | no-emoji check

    # Remove emoji (stdout: fixed text)
    echo 'Hello 👋 World' | no-emoji fix

    # Old behaviour: replace each emoji with a single space
    echo 'Hello 👋 World' | no-emoji --legacy fix

The whole input is treated as one text node.  ``check`` exits 1 when any
emoji was found.
"""

from __future__ import annotations
import argparse
import json
import logging
import sys

from .config import create_rule, load_config, load_from_yaml
from .errors import InputError, NoEmojiError


def _build_rule(args: argparse.Namespace):
    cfg = load_from_yaml(args.config) if args.config else load_config({})
    if args.legacy:
        cfg["legacy_mode"] = True
    if args.allow:
        cfg["allow_list"] |= {a for a in args.allow.split(",") if a}
    return create_rule(cfg)


def _read_input(args: argparse.Namespace) -> str:
    if args.file:
        try:
            with open(args.file, encoding="utf-8") as f:
                return f.read()
        except OSError as e:
            raise InputError(f"cannot read {args.file}: {e.strerror or e}") from e
    return sys.stdin.read()


def cmd_check(args: argparse.Namespace) -> int:
    """Report emoji in the input as JSON."""
    rule = _build_rule(args)
    diagnostics = rule.check(_read_input(args))
    json.dump([d.to_dict() for d in diagnostics], sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")
    return 1 if diagnostics else 0


def cmd_fix(args: argparse.Namespace) -> int:
    """Write the input with emoji removed."""
    rule = _build_rule(args)
    sys.stdout.write(rule.fix(_read_input(args)))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="no-emoji",
        description="Find and remove emoji in plain text",
    )
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--legacy", action="store_true", help="Replace emoji with a space")
    parser.add_argument("--allow", default="", help="Comma-separated emoji to never report")
    parser.add_argument("--file", help="Read text from FILE instead of stdin")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("check", help="Report emoji (JSON stdout)")
    sub.add_parser("fix", help="Remove emoji (text stdout)")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cmds = {
        "check": cmd_check,
        "fix": cmd_fix,
    }
    try:
        return cmds[args.command](args)
    except NoEmojiError as e:
        sys.stderr.write(f"no-emoji: {e}\n")
        return 2


if __name__ == "__main__":
    sys.exit(main())
