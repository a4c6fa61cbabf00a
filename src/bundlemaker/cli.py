"""Command line interface for the bundle scaffolder."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Sequence

from .config import DEFAULT_PATH, BundleConfig
from .errors import BundleMakerError, InvalidBundleNameError
from .scaffold import BundleScaffolder

LOGGER = logging.getLogger(__name__)

MAKE_BUNDLE = "make:bundle"
MAKE_BUNDLE_DESCRIPTION = "Creates a new Symfony bundle with a predefined structure"

NAME_QUESTION = "Please enter the name of the bundle (with namespace, e.g., Napse\\DemoBundle): "
PATH_QUESTION = f"Please enter the path where the bundle should be created (Default: {DEFAULT_PATH}): "

Prompt = Callable[[str], str]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bundlemaker", description="Scaffold Symfony bundles")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every filesystem operation",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    make_parser = subparsers.add_parser(MAKE_BUNDLE, help=MAKE_BUNDLE_DESCRIPTION)
    make_parser.add_argument(
        "--name",
        help="Name of the bundle with namespace (e.g., Napse\\DemoBundle)",
    )
    make_parser.add_argument(
        "--path",
        help=f"Path where the bundle will be created (default: {DEFAULT_PATH})",
    )
    make_parser.add_argument(
        "-n",
        "--no-interaction",
        action="store_true",
        help="Do not ask for missing options",
    )
    make_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the planned operations without writing anything",
    )

    subparsers.add_parser("list", help="list available commands")

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _ask(prompt: Prompt, question: str, default: str | None = None) -> str | None:
    try:
        answer = prompt(question).strip()
    except EOFError:
        answer = ""
    return answer or default


def _interact(args: argparse.Namespace, prompt: Prompt) -> None:
    """Fill in ``--name`` and ``--path`` when they were not given."""

    if args.no_interaction:
        if args.path is None:
            args.path = DEFAULT_PATH
        return

    if not args.name:
        args.name = _ask(prompt, NAME_QUESTION)
    if not args.path:
        args.path = _ask(prompt, PATH_QUESTION, DEFAULT_PATH)


def _handle_make_bundle(args: argparse.Namespace, prompt: Prompt) -> int:
    _interact(args, prompt)
    if not args.name:
        raise InvalidBundleNameError("the --name option is required")

    config = BundleConfig.from_name(args.name)
    scaffolder = BundleScaffolder()

    if args.dry_run:
        plan = scaffolder.plan(config, args.path)
        scaffolder.ensure_target_free(plan.target)
        for operation in plan:
            print(operation.describe())
        print(f'Dry run: the bundle "{config.qualified_name}" would be created at "{plan.target}".')
        return 0

    path = scaffolder.create(config, args.path)
    print(f'The bundle "{config.qualified_name}" was successfully created at "{path}".')
    return 0


def _handle_list(args: argparse.Namespace) -> int:
    print(f"{MAKE_BUNDLE}  {MAKE_BUNDLE_DESCRIPTION}")
    return 0


def main(argv: Sequence[str] | None = None, *, prompt: Prompt = input) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        if args.command == MAKE_BUNDLE:
            return _handle_make_bundle(args, prompt)
        if args.command == "list":
            return _handle_list(args)
    except (BundleMakerError, OSError) as exc:
        LOGGER.debug("command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
