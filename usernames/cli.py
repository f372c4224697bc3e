from __future__ import annotations

import argparse
import json
import random
import sys

from usernames.generator import generate_usernames
from usernames.logging import configure_logging, logger
from usernames.schemas import GeneratorOptions
from usernames.settings import SETTINGS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="usernames", description="Generate random adjective-noun usernames.")
    parser.add_argument("--count", type=int, default=SETTINGS.default_count)
    parser.add_argument("--separator", default=SETTINGS.default_separator)
    parser.add_argument("--word-count", type=int, default=SETTINGS.default_word_count)
    parser.add_argument("--min-length", type=int, default=0)
    parser.add_argument("--max-length", type=int, default=None)
    parser.add_argument("--max-attempts", type=int, default=SETTINGS.default_max_attempts)
    parser.add_argument("--seed", type=int, default=None, help="Seed the word picker for reproducible output.")
    parser.add_argument("--json", action="store_true", help="Print a JSON array instead of one name per line.")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(SETTINGS.log_level)

    options = GeneratorOptions(
        separator=args.separator,
        word_count=args.word_count,
        min_length=args.min_length,
        max_length=args.max_length,
        max_attempts=args.max_attempts,
    )
    pick_index = random.Random(args.seed).randrange if args.seed is not None else None
    names = generate_usernames(args.count, options, pick_index=pick_index)
    logger.info("usernames_generated", requested=args.count, produced=len(names))

    if args.json:
        sys.stdout.write(json.dumps(names) + "\n")
    else:
        for name in names:
            sys.stdout.write(name + "\n")


if __name__ == "__main__":
    main()
