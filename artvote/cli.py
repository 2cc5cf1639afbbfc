from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .commands import COMMAND_HANDLERS, resolve_paths


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="artvote",
        description="Build the voting form for a Pokémon Workshop art contest.",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help=(
            "Directory holding credentials.json, token.json and .env "
            "(defaults to the current directory)."
        ),
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser(
        "auth",
        aliases=["login"],
        help="Run the Google sign-in flow and cache the token.",
    )

    build_cmd = subparsers.add_parser(
        "build",
        help="Create the voting form from the contest's submissions.",
    )
    build_cmd.add_argument("pokemon", help="Featured Pokémon of the contest.")
    build_cmd.add_argument("number", help="Contest number, e.g. 12.")
    build_cmd.add_argument(
        "categories",
        nargs="+",
        help="Voting categories; one checkbox question is added per category.",
    )
    build_cmd.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the submission order (random when omitted).",
    )
    build_cmd.add_argument(
        "--max-votes",
        type=int,
        default=None,
        help="Votes allowed per category (overrides MAX_VOTES from .env).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    paths = resolve_paths(args.data_dir)
    paths.ensure()

    command = "auth" if args.command == "login" else args.command
    handler = COMMAND_HANDLERS.get(command or "")
    if handler is None:
        parser.print_help()
        return 1
    return handler(paths, args)


if __name__ == "__main__":
    raise SystemExit(main())
