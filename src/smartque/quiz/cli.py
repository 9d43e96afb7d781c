"""Command-line handlers for ``smartque generate`` and ``smartque init``."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import openai
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from smartque.core import configure_logger, write_jsonl

from .config import CONFIG_FILENAME, ConfigError, load_config, write_template
from .parsing import QuizQuestion
from .prompts import DEFAULT_LANGUAGE, LANGUAGE_NAMES, level_names
from .requester import QuizRequester
from .selection import SelectionStore


def build_generate_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smartque generate",
        description="Generate a 20-question multiple-choice quiz with AI",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--topic", required=True, help="Quiz topic")
    parser.add_argument(
        "--level",
        required=True,
        choices=level_names(),
        help="Difficulty level",
    )
    parser.add_argument(
        "--language",
        default=DEFAULT_LANGUAGE,
        help=(
            "Language code for the quiz text ("
            + ", ".join(["en", *LANGUAGE_NAMES])
            + "); unknown codes fall back to English"
        ),
    )
    parser.add_argument(
        "--output",
        help="Write the questions to this JSON-lines file",
    )
    parser.add_argument(
        "--config",
        help=f"Path to {CONFIG_FILENAME}; defaults to $SMARTQUE_CONFIG "
        f"then ./{CONFIG_FILENAME}",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Echo log messages to stderr",
    )
    return parser


def build_init_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smartque init",
        description=f"Write a commented {CONFIG_FILENAME} template",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--path",
        default=CONFIG_FILENAME,
        help="Destination for the config template",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing file",
    )
    return parser


def render_questions(
    questions: Sequence[QuizQuestion], console: Optional[Console] = None
) -> None:
    target = console or Console()
    table = Table(box=box.SIMPLE, show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("Question")
    table.add_column("Answer")
    for q in questions:
        table.add_row(
            str(q.id), Text(str(q.question or "")), Text(str(q.answer or ""))
        )
    target.print(table)


def generate_main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_generate_parser()
    args = parser.parse_args(argv)

    explicit = Path(args.config) if args.config else None
    try:
        config = load_config(explicit_path=explicit)
    except ConfigError as exc:
        print(f"Error: {exc}")
        return 2

    logger = configure_logger(
        "smartque",
        log_dir=config.logging.log_dir,
        level=config.logging.level,
        verbose=bool(args.verbose or config.logging.verbose),
    )

    store = SelectionStore()
    store.set_topic(args.topic)
    store.set_level(args.level)
    selection = store.get_selections()

    requester = QuizRequester(settings=config.openai)
    try:
        questions: List[QuizQuestion] = asyncio.run(
            requester.generate(selection.topic, selection.level, args.language)
        )
    except (RuntimeError, openai.OpenAIError) as exc:
        logger.error("Error generating questions: %s", exc)
        print(f"Failed to generate quiz: {exc}")
        return 1

    render_questions(questions)
    if args.output:
        out_path = Path(args.output).expanduser().resolve()
        written = write_jsonl(out_path, (q.to_dict() for q in questions))
        print(f"Wrote {written} question(s) -> {out_path}")
    else:
        print(f"Generated {len(questions)} question(s)")
    return 0


def init_main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_init_parser()
    args = parser.parse_args(argv)
    path = Path(args.path).expanduser().resolve()
    try:
        write_template(path, overwrite=bool(args.force))
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Created template {path}")
    return 0
