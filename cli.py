"""
Command line interface for GeneLib.

Examples
--------
Evolve random words until one matches::

    python cli.py guess Unicorn

Inspect the configuration reference::

    python cli.py describe-config --section engine
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

from genelib.demo import run_word_guess, valid_word
from genelib.evolution import Ranking
from genelib.exceptions import GeneLibError
from genelib.utils import ConfigLoader
from genelib.utils.config_reference import explain, to_console, to_markdown, write_markdown
from genelib.utils.profiles import get_profile, list_profiles

REQUEST_WORD = "Please enter a word (only lower and uppercase letters are allowed)"
TRY_AGAIN = "Invalid word, please try again"


def _complain(word: str) -> None:
    print(f"Invalid word '{word}', must all be lower or uppercase letters!")


def _prompt_word() -> str:
    print(REQUEST_WORD)
    word = input().strip()
    while not valid_word(word):
        _complain(word)
        print(TRY_AGAIN)
        word = input().strip()
    return word


def _load_config(args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if args.profile:
        overrides = get_profile(args.profile)
    engine: Dict[str, Any] = dict(overrides.get("engine", {}))
    for key in ("pop_size", "top_k", "mutation_rate", "seed", "parent_sampling"):
        value = getattr(args, key, None)
        if value is not None:
            engine[key] = value
    if engine:
        overrides["engine"] = engine
    if args.max_rounds is not None:
        overrides.setdefault("demo", {})["max_rounds"] = args.max_rounds
    loader = ConfigLoader()
    config_source: Optional[Path] = Path(args.config) if args.config else None
    return loader.load(config=config_source, overrides=overrides).to_dict()


def _guess_command(args: argparse.Namespace) -> None:
    word = args.word
    if word is None:
        word = _prompt_word()
    elif not valid_word(word):
        _complain(word)
        raise SystemExit(1)

    config = _load_config(args)
    report_top = int(config["demo"]["report_top"])

    def report(generation: int, ranking: Ranking) -> None:
        print(f"---- GENERATION {generation} ----")
        print(f"top {report_top} performers:")
        for agent, cost in ranking.pairs()[:report_top]:
            print(f"{agent}: {cost:f}")

    result = run_word_guess(word, config, on_round=report)
    if result.solved:
        print("---- SUCCESS ----")
        print(f"> {result.best}")
    else:
        print(f"---- GAVE UP after {result.rounds} generations ----")
        print(f"> {result.best} (cost {result.cost:f})")


def _describe_config_command(args: argparse.Namespace) -> None:
    if args.key:
        print(explain(args.key))
        return
    if args.markdown:
        print(to_markdown(section=args.section))
        return
    print(to_console(section=args.section))


def _generate_config_docs_command(args: argparse.Namespace) -> None:
    path = write_markdown(Path(args.output))
    print(f"Configuration reference generated at {path.resolve()}")


def _profiles_command(_: argparse.Namespace) -> None:
    for name, conf in list_profiles().items():
        print(f"{name}: {conf}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="genelib", description="GeneLib genetic algorithm CLI")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"],
        help="Minimum level of log lines written to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    guess_parser = subparsers.add_parser("guess", help="Evolve random words until one matches WORD.")
    guess_parser.add_argument("word", nargs="?", help="Word to guess. Prompted for when omitted.")
    guess_parser.add_argument("--config", help="YAML/JSON configuration file.")
    guess_parser.add_argument("--profile", choices=sorted(list_profiles()), help="Configuration profile.")
    guess_parser.add_argument("--pop-size", dest="pop_size", type=int, help="Population size.")
    guess_parser.add_argument("--top-k", dest="top_k", type=int, help="Elite size kept every generation.")
    guess_parser.add_argument("--mutation-rate", dest="mutation_rate", type=float, help="Mutation probability.")
    guess_parser.add_argument("--seed", type=int, help="Random seed for a reproducible run.")
    guess_parser.add_argument(
        "--parent-sampling",
        dest="parent_sampling",
        choices=["legacy", "bounded"],
        help="Parent index scheme.",
    )
    guess_parser.add_argument("--max-rounds", dest="max_rounds", type=int, help="Give up after this many generations.")
    guess_parser.set_defaults(func=_guess_command)

    describe_parser = subparsers.add_parser("describe-config", help="Show configuration reference.")
    describe_parser.add_argument("--section", help="Limit output to one section (engine, demo).")
    describe_parser.add_argument("--key", help="Explain a single configuration key.")
    describe_parser.add_argument("--markdown", action="store_true", help="Render as markdown.")
    describe_parser.set_defaults(func=_describe_config_command)

    docs_parser = subparsers.add_parser("generate-config-docs", help="Write the configuration reference markdown.")
    docs_parser.add_argument("--output", default="CONFIG.md", help="Target markdown file.")
    docs_parser.set_defaults(func=_generate_config_docs_command)

    profiles_parser = subparsers.add_parser("profiles", help="List configuration profiles.")
    profiles_parser.set_defaults(func=_profiles_command)

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger.remove()
    logger.add(sys.stderr, level=args.log_level)
    if not getattr(args, "func", None):
        parser.print_help()
        return
    try:
        args.func(args)
    except GeneLibError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc


if __name__ == "__main__":
    main()
