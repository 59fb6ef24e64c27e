"""
Command-line interface for steamidlab.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional

from steamidlab import __version__
from steamidlab.constants import url as U
from steamidlab.core.entity import SteamEnum
from steamidlab.types import AccountType, Universe

log = logging.getLogger(__name__)

ENUMS: dict[str, type[SteamEnum]] = {
    "universe": Universe,
    "account": AccountType,
}

URLS = {
    "vanity": U.VANITY,
    "profile": U.PROFILE,
    "user": U.USER,
    "invite": U.INVITE,
    "china": U.CHINA,
}


def _member_dict(member: SteamEnum) -> dict:
    """Serialize a member to a JSON-friendly dict."""
    data = {"name": member.name, "id": member.id, "index": member.index}
    if isinstance(member, AccountType):
        data["char"] = member.char
    return data


def cmd_list(args) -> int:
    """List every member of an enumeration in declaration order."""
    enum_cls = ENUMS[args.kind]
    members = enum_cls.values()

    if args.json:
        json.dump([_member_dict(m) for m in members], sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        for member in members:
            print(member)
    return 0


def cmd_lookup(args) -> int:
    """Resolve a single member by id, letter code or declaration index."""
    enum_cls = ENUMS[args.kind]

    if args.char is not None:
        if enum_cls is not AccountType:
            print(f"Error: {enum_cls.__name__} has no letter codes", file=sys.stderr)
            return 1
        member = AccountType.from_char_or_null(args.char)
        key = f"char {args.char!r}"
    elif args.index is not None:
        member = enum_cls.from_index_or_null(args.index)
        key = f"index {args.index}"
    else:
        member = enum_cls.from_id_or_null(args.id)
        key = f"id {args.id}"

    if member is None:
        log.debug("No %s for %s", enum_cls.__name__, key)
        print(f"Error: no {enum_cls.__name__} with {key}", file=sys.stderr)
        return 1

    if args.json:
        json.dump(_member_dict(member), sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        print(member)
    return 0


def cmd_urls(args) -> int:
    """Print the Steam profile URL prefixes."""
    if args.json:
        json.dump(URLS, sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        for name, value in URLS.items():
            print(f"{name}: {value}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="steamid", description="steamidlab - Steam account constants"
    )
    parser.add_argument(
        "--version", action="version", version=f"steamidlab {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(
        dest="cmd", required=True, help="Available commands"
    )

    # List command
    list_parser = subparsers.add_parser(
        "list", help="List the members of an enumeration"
    )
    list_parser.add_argument("kind", choices=sorted(ENUMS), help="Enumeration to list")
    list_parser.add_argument(
        "--json", action="store_true", help="Output in JSON format"
    )
    list_parser.set_defaults(func=cmd_list)

    # Lookup command
    lookup_parser = subparsers.add_parser(
        "lookup", help="Look a member up by id, letter code or index"
    )
    lookup_parser.add_argument(
        "kind", choices=sorted(ENUMS), help="Enumeration to search"
    )
    key_group = lookup_parser.add_mutually_exclusive_group(required=True)
    key_group.add_argument("--id", type=int, help="Numeric identifier")
    key_group.add_argument("--char", help="Letter code (account types only)")
    key_group.add_argument("--index", type=int, help="Declaration index")
    lookup_parser.add_argument(
        "--json", action="store_true", help="Output in JSON format"
    )
    lookup_parser.set_defaults(func=cmd_lookup)

    # URLs command
    urls_parser = subparsers.add_parser("urls", help="Print profile URL prefixes")
    urls_parser.add_argument(
        "--json", action="store_true", help="Output in JSON format"
    )
    urls_parser.set_defaults(func=cmd_urls)

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()

    # Parse arguments and execute
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
