"""Command-line interface for shuffling names into balanced groups."""

from __future__ import annotations

import argparse
import importlib.util
import json
import random
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

from rich.console import Console
from rich.prompt import Prompt

from group_types import GroupSet, InvalidInputError, UserCancelled
from grouper import create_groups
from logger import GroupLogger
from render import Renderer
from validation import (
    DEFAULT_SEPARATOR,
    parse_group_count,
    suggest_group_count,
    validate_names,
)


Ask = Callable[[str, Optional[str]], str]

NAMES_PROMPT = "[cyan]\N{HEAVY RIGHT-POINTING ANGLE QUOTATION MARK ORNAMENT} Enter names[/cyan][dim] (separated by commas)[/dim]"
GROUPS_PROMPT = "[cyan]\N{HEAVY RIGHT-POINTING ANGLE QUOTATION MARK ORNAMENT} Enter desired amount of groups[/cyan]"


def _load_config(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as handle:
        if path.endswith((".yaml", ".yml")):
            spec = importlib.util.find_spec("yaml")
            if spec is None:
                raise RuntimeError("PyYAML is required to load YAML configurations")
            module = importlib.util.module_from_spec(spec)
            if spec.loader is None:  # pragma: no cover - defensive
                raise RuntimeError("Unable to import yaml module")
            spec.loader.exec_module(module)  # type: ignore[no-untyped-call]
            return module.safe_load(handle) or {}  # type: ignore[attr-defined]
        return json.load(handle)


def console_ask(console: Console) -> Ask:
    def ask(message: str, default: Optional[str] = None) -> str:
        if default is None:
            return Prompt.ask(message, console=console)
        return Prompt.ask(message, console=console, default=default)

    return ask


def _prompt(ask: Ask, message: str, default: Optional[str] = None) -> str:
    try:
        return ask(message, default)
    except (KeyboardInterrupt, EOFError):
        raise UserCancelled() from None


def prompt_names(ask: Ask, renderer: Renderer, separator: str) -> Tuple[str, ...]:
    """Ask for names until the answer holds at least two of them."""

    while True:
        raw = _prompt(ask, NAMES_PROMPT)
        try:
            return validate_names(raw, separator)
        except InvalidInputError as exc:
            renderer.invalid(exc)


def prompt_group_count(ask: Ask, renderer: Renderer, name_count: int) -> int:
    default = str(suggest_group_count(name_count))
    while True:
        raw = _prompt(ask, GROUPS_PROMPT, default)
        if not raw.strip():
            raw = default
        try:
            return parse_group_count(raw, name_count)
        except InvalidInputError as exc:
            renderer.invalid(exc)


def _separator(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("separator must not be empty")
    return value


def _config_value(action: argparse.Action, value: Any) -> Any:
    """Convert a config file value the way argparse would convert the flag."""

    if value is None:
        return None
    if isinstance(action, argparse._StoreTrueAction):
        if not isinstance(value, bool):
            raise RuntimeError(f"Config option {action.dest!r} must be true or false")
        return value
    if action.dest == "names" and isinstance(value, (list, tuple)):
        return [str(name) for name in value]
    if isinstance(value, (bool, list, tuple, dict)):
        raise RuntimeError(f"Invalid value for config option {action.dest!r}: {value!r}")
    if action.type is not None:
        try:
            value = action.type(str(value))
        except (TypeError, ValueError, argparse.ArgumentTypeError) as exc:
            raise RuntimeError(
                f"Invalid value for config option {action.dest!r}: {value!r}"
            ) from exc
    if action.choices is not None and value not in action.choices:
        raise RuntimeError(
            f"Config option {action.dest!r} must be one of {sorted(action.choices)}"
        )
    return value


def apply_config(
    parser: argparse.ArgumentParser,
    args: argparse.Namespace,
    config: Dict[str, Any],
) -> None:
    """Fill options still at their defaults from ``config``."""

    defaults = parser.parse_args([])
    actions = {action.dest: action for action in parser._actions}
    for key, value in config.items():
        key = key.replace("-", "_")
        action = actions.get(key)
        if action is None or not hasattr(args, key):
            continue
        if getattr(args, key) == getattr(defaults, key):
            setattr(args, key, _config_value(action, value))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Randomly shuffle names into evenly sized groups"
    )
    parser.add_argument(
        "--names",
        type=str,
        default=None,
        help="Names to shuffle; skips the interactive names prompt",
    )
    parser.add_argument(
        "--groups",
        type=str,
        default=None,
        help="Number of groups; skips the interactive group prompt",
    )
    parser.add_argument(
        "--separator",
        type=_separator,
        default=DEFAULT_SEPARATOR,
        help="Delimiter between names",
    )
    parser.add_argument("--seed", type=int, default=None, help="RNG seed")
    parser.add_argument("--log", type=str, default=None, help="Path to write the result log")
    parser.add_argument(
        "--log-format", choices=["jsonl", "csv"], default="jsonl", help="Log format"
    )
    parser.add_argument(
        "--no-animation",
        action="store_true",
        help="Skip the banner pause and spinner delays",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Optional JSON or YAML configuration file",
    )
    return parser


def run(
    args: argparse.Namespace,
    renderer: Renderer,
    ask: Ask,
) -> GroupSet:
    renderer.title()

    if args.names is not None:
        raw_names = args.names
        if isinstance(raw_names, (list, tuple)):
            raw_names = args.separator.join(str(name) for name in raw_names)
        names = validate_names(str(raw_names), args.separator)
    else:
        names = prompt_names(ask, renderer, args.separator)
    renderer.names_received(len(names))

    if args.groups is not None:
        group_count = parse_group_count(args.groups, len(names))
    else:
        group_count = prompt_group_count(ask, renderer, len(names))

    rng = random.Random(args.seed)
    renderer.shuffling()
    group_set = create_groups(names, group_count, rng=rng, seed=args.seed)

    if args.log:
        with GroupLogger(args.log, fmt=args.log_format) as logger:
            logger.log(group_set)

    renderer.groups(group_set)
    return group_set


def main(
    argv: Optional[List[str]] = None,
    *,
    console: Optional[Console] = None,
    ask: Optional[Ask] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    console = console or Console()
    renderer = Renderer(console, animate=not args.no_animation)
    ask = ask or console_ask(console)

    try:
        if args.config:
            config = _load_config(args.config)
            if not isinstance(config, dict):
                raise RuntimeError("Configuration file must contain a mapping")
            apply_config(parser, args, config)
            renderer.animate = not args.no_animation
        run(args, renderer, ask)
    except (UserCancelled, KeyboardInterrupt):
        renderer.goodbye()
        return 0
    except InvalidInputError as exc:
        # Only reachable for --names/--groups; prompts re-ask instead.
        renderer.invalid(exc)
        return 1
    except Exception as exc:
        renderer.error(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
