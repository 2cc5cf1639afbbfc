from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Callable, Dict

from artvote_forms.builder import build_voting_form
from artvote_forms.colors import ERROR, RESET
from artvote_forms.config import ConfigError, build_contest_request, load_config
from artvote_forms.google_client import GoogleClientError, build_google_services
from artvote_forms.image_host import ImageHostError
from artvote_forms.paths import AppPaths
from artvote_forms.submissions import SubmissionError

from .auth import run_auth


def resolve_paths(data_dir: Path | None) -> AppPaths:
    """Return the application paths, defaulting to the current directory."""
    if data_dir is None:
        return AppPaths.default()
    return AppPaths(base_dir=data_dir.expanduser())


def _fail(prefix: str, exc: Exception) -> int:
    print(f"{ERROR}{prefix}{RESET}: {exc}", file=sys.stderr)
    return 1


def handle_auth(paths: AppPaths, args: argparse.Namespace) -> int:
    try:
        run_auth(paths)
        return 0
    except GoogleClientError as exc:
        return _fail("Authentication failed", exc)


def handle_build(paths: AppPaths, args: argparse.Namespace) -> int:
    try:
        request = build_contest_request(args.pokemon, args.number, args.categories)
        config = load_config(paths)
        if args.max_votes is not None:
            if args.max_votes < 1:
                raise ConfigError("--max-votes must be at least 1.")
            config.max_votes = args.max_votes
    except ConfigError as exc:
        return _fail("Config error", exc)

    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        services = build_google_services(paths)
        build_voting_form(services, config, request, rng=rng)
    except GoogleClientError as exc:
        return _fail("Google API error", exc)
    except SubmissionError as exc:
        return _fail("Submission error", exc)
    except ImageHostError as exc:
        return _fail("Image host error", exc)
    return 0


CommandHandler = Callable[[AppPaths, argparse.Namespace], int]


COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "auth": handle_auth,
    "build": handle_build,
}
