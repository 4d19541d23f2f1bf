"""Entry point: load config → build registry → run an audit subcommand → exit."""

from __future__ import annotations

import argparse
import logging
import sys

from core.config import load_config
from core.path_config import PRESETS, PathConfig
from core.path_registry import ToolPolicyRegistry, build_registry
from core.platform_config import PlatformKind
from core.policy_engine import PathPolicyEngine, ToolForbidden
from policies.default_policies import POLICIES

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sandboxed PATH tool policy inspector")
    parser.add_argument(
        "--platform",
        choices=[kind.value for kind in PlatformKind],
        help="evaluate the table as it would be on this platform (default: host)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    lookup = sub.add_parser("lookup", help="print the policy for one or more tools")
    lookup.add_argument("names", nargs="+")

    listing = sub.add_parser("list", help="print every tool listed in the table")
    group = listing.add_mutually_exclusive_group()
    group.add_argument("--denied", action="store_true", help="only tools that error")
    group.add_argument("--symlinked", action="store_true", help="only tools that get a symlink")

    sub.add_parser("presets", help="describe the named policy regimes")

    check = sub.add_parser("check", help="exit non-zero if the tool may not be run")
    check.add_argument("name")
    return parser.parse_args(argv)


def format_row(name: str, config: PathConfig) -> str:
    flags = (
        config.allow_symlink,
        config.log_usage,
        config.deny_execution,
        config.platform_restricted,
    )
    return "\t".join([name, *("yes" if f else "no" for f in flags)])


def _print_rows(rows: list[tuple[str, PathConfig]]) -> None:
    print("\t".join(["tool", "symlink", "log", "error", "platform_restricted"]))
    for name, config in rows:
        print(format_row(name, config))


def run(args: argparse.Namespace, registry: ToolPolicyRegistry) -> int:
    engine = PathPolicyEngine(registry)

    if args.command == "lookup":
        _print_rows([(name, engine.decide(name)) for name in args.names])
    elif args.command == "list":
        rows = registry.items()
        if args.denied:
            rows = [(n, c) for n, c in rows if c.deny_execution]
        elif args.symlinked:
            rows = [(n, c) for n, c in rows if c.allow_symlink]
        _print_rows(rows)
    elif args.command == "presets":
        for key, preset in PRESETS.items():
            print(format_row(key, preset))
            print(f"  {POLICIES[key]['description']}")
            for rule in POLICIES[key]["rules"]:
                print(f"  - {rule}")
    elif args.command == "check":
        try:
            engine.check_invocation(args.name)
        except ToolForbidden as exc:
            print(f"denied: {exc}")
            return 1
        print(f"allowed: {args.name}")
    return 0


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        config = load_config()
    except EnvironmentError as exc:
        logger.error("configuration error: %s", exc)
        sys.exit(1)
    logging.getLogger().setLevel(config.log.level)

    platform = PlatformKind(args.platform) if args.platform else config.platform()
    registry = build_registry(platform)
    logger.debug("registry built — %r", registry)
    sys.exit(run(args, registry))


if __name__ == "__main__":
    main()
