"""``smartque`` entry point: routes to the quiz subcommands."""

from __future__ import annotations

import sys
from importlib import metadata
from typing import Optional, Sequence

from smartque.quiz import cli as quiz_cli


COMMANDS = {
    "init": (quiz_cli.init_main, "Write a smartque.toml configuration template."),
    "generate": (
        quiz_cli.generate_main,
        "Generate a multiple-choice quiz for a topic and level.",
    ),
}

USAGE = "Usage: smartque <command> [args...]"


def command_table() -> str:
    lines = ["Available commands:"]
    for name, (_, summary) in COMMANDS.items():
        lines.append(f"  {name:<8}  {summary}")
    return "\n".join(lines)


def _version() -> str:
    try:
        return metadata.version("smartque")
    except metadata.PackageNotFoundError:
        return "unknown"


def _unknown(name: str) -> int:
    print(f"Unknown command '{name}'.\n{command_table()}", file=sys.stderr)
    return 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] in ("-h", "--help"):
        print(f"{USAGE}\n\n{command_table()}")
        return 0 if args else 2

    head, *tail = args
    if head in ("-V", "--version", "version"):
        print(_version())
        return 0
    if head == "list":
        print(command_table())
        return 0
    if head == "help":
        if not tail:
            print(f"{USAGE}\n\n{command_table()}")
            return 0
        if tail[0] not in COMMANDS:
            return _unknown(tail[0])
        print(f"Run `smartque {tail[0]} --help` for command options.")
        return 0
    if head not in COMMANDS:
        return _unknown(head)

    handler, _ = COMMANDS[head]
    try:
        return handler(tail)
    except SystemExit as exc:
        # argparse exits 0 for --help and 2 for usage errors.
        if isinstance(exc.code, int):
            return exc.code
        return 1 if exc.code else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
