"""CLI for KeySmith — generate passwords and manage the saved generator settings."""

import argparse
import logging
import random
import sys

from rich import print
from rich.table import Table

from .config import DEFAULTS, coerce_value, config_path, load_config, save_config
from .errors import KeySmithError
from .generator import EmptyPoolPolicy, SamplingMode, generate
from .log import setup_logging
from .validation import build_request

log = logging.getLogger(__name__)


def positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {raw!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _pick(flag, cfg, key):
    return cfg[key] if flag is None else flag


def cmd_generate(args):
    cfg = load_config()
    request = build_request(
        args.length if args.length is not None else cfg["length"],
        has_lower_case=_pick(args.lower, cfg, "lowercase"),
        has_upper_case=_pick(args.upper, cfg, "uppercase"),
        has_digit=_pick(args.digits, cfg, "digits"),
        has_symbol=_pick(args.symbols, cfg, "symbols"),
    )
    sampling = SamplingMode.LEGACY if args.legacy else SamplingMode(cfg["sampling"])
    empty_pool = EmptyPoolPolicy.RAISE if args.strict else EmptyPoolPolicy(cfg["empty_pool"])
    secure = args.secure or bool(cfg["secure_random"])
    rng = random.Random(args.seed) if args.seed is not None else None
    if rng is not None and secure:
        log.warning("--seed given, ignoring secure random source")

    for i in range(args.copies):
        pw = generate(request, rng=rng, sampling=sampling, empty_pool=empty_pool, secure=secure)
        if not pw:
            print(f"[yellow]Password #{i+1}: (empty, no character class enabled)[/yellow]")
            continue
        print(f"[bold green]Password #{i+1}:[/bold green] {pw}")


# Config subcommands

def cmd_config_show(args):
    cfg = load_config()
    table = Table(show_header=True, header_style="bold cyan", title=config_path())
    table.add_column("Key")
    table.add_column("Value")
    table.add_column("Default")
    for key, value in cfg.items():
        default = DEFAULTS.get(key, "")
        style = "" if value == default else "bold"
        table.add_row(key, f"[{style}]{value}[/{style}]" if style else str(value), str(default))
    print(table)


def cmd_config_set(args):
    try:
        value = coerce_value(args.key, args.value)
    except KeyError:
        print(f"[red]Unknown setting: {args.key}[/red]")
        print("Known settings: " + ", ".join(DEFAULTS))
        sys.exit(2)
    except ValueError as e:
        print(f"[red]Invalid value for {args.key}: {e}[/red]")
        sys.exit(2)
    cfg = load_config()
    cfg[args.key] = value
    path = save_config(cfg)
    print(f"[green]Set {args.key} = {value}[/green] ({path})")


def cmd_config_reset(args):
    path = save_config(DEFAULTS.copy())
    print(f"[green]Settings reset to defaults:[/green] {path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="keysmith")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (DEBUG, INFO, WARNING, ...)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", "-l", type=str, default=None, help="Password length (4-16)")
    gen.add_argument("--lower", action=argparse.BooleanOptionalAction, default=None, help="Include lowercase")
    gen.add_argument("--upper", action=argparse.BooleanOptionalAction, default=None, help="Include uppercase")
    gen.add_argument("--digits", action=argparse.BooleanOptionalAction, default=None, help="Include digits")
    gen.add_argument("--symbols", action=argparse.BooleanOptionalAction, default=None, help="Include symbols")
    gen.add_argument("--copies", type=positive_int, default=1, help="How many passwords to generate")
    gen.add_argument("--legacy", action="store_true", help="Use the original round()-based sampling")
    gen.add_argument("--strict", action="store_true", help="Fail when no character class is enabled")
    gen.add_argument("--secure", action="store_true", help="Use the OS random source")
    gen.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    gen.set_defaults(func=cmd_generate)

    c = sub.add_parser("config", help="Show or change saved settings")
    csub = c.add_subparsers(dest="ccmd", required=True)

    c_show = csub.add_parser("show", help="Print current settings")
    c_show.set_defaults(func=cmd_config_show)

    c_set = csub.add_parser("set", help="Change one setting")
    c_set.add_argument("key", type=str, help="Setting name")
    c_set.add_argument("value", type=str, help="New value")
    c_set.set_defaults(func=cmd_config_set)

    c_reset = csub.add_parser("reset", help="Restore default settings")
    c_reset.set_defaults(func=cmd_config_reset)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level or load_config()["log_level"])
    try:
        args.func(args)
    except KeySmithError as e:
        print(f"[red]{e}[/red]")
        sys.exit(2)


if __name__ == "__main__":
    main()
