"""Command-line interface for managing stored snippets."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .snippet import (
    SnippetNotFoundError,
    delete_snippet,
    format_snippet_list,
    get_snippet,
    new_snippet,
    set_next_id,
)
from .store import StoreError, load_snippets, save_snippets


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="snipstash", description="Store and look up text snippets."
    )
    commands = parser.add_subparsers(dest="command")

    add = commands.add_parser("add", help="add a new snippet")
    add.add_argument("-n", "--name", required=True, help="name of snippet")
    add.add_argument("-c", "--content", required=True, help="content of snippet")
    add.add_argument("-d", "--description", default="", help="description of the snippet")
    add.add_argument(
        "-t",
        "--tag",
        action="append",
        default=[],
        help="comma-separated tags for the snippet (can be repeated)",
    )

    delete = commands.add_parser("delete", help="delete a snippet by id")
    delete.add_argument("-i", "--id", required=True, help="id of snippet")

    get = commands.add_parser("get", help="show a snippet by id")
    get.add_argument("-i", "--id", required=True, help="id of snippet")

    commands.add_parser("list", help="list all snippets")
    return parser


def _split_tags(values: Sequence[str]) -> list[str]:
    return [tag for value in values for tag in value.split(",") if tag != ""]


def _add(args: argparse.Namespace) -> int:
    try:
        current = load_snippets()
    except StoreError as exc:
        print(f"error: unable to load snippets: {exc}")
        return 1
    set_next_id(current)
    snippet = new_snippet(args.name, args.content, _split_tags(args.tag), args.description)
    try:
        save_snippets([*current, snippet])
    except StoreError as exc:
        print(f"error: {exc}")
        return 1
    print("Created a New Snippet")
    print(snippet)
    return 0


def _delete(args: argparse.Namespace) -> int:
    try:
        current = load_snippets()
        remaining = delete_snippet(args.id, current)
    except (StoreError, SnippetNotFoundError, ValueError) as exc:
        print(f"error: {exc}")
        return 1
    print(format_snippet_list(remaining), end="")
    try:
        save_snippets(remaining)
    except StoreError as exc:
        print(f"error: {exc}")
        return 1
    return 0


def _get(args: argparse.Namespace) -> int:
    try:
        current = load_snippets()
    except StoreError:
        print("cannot load snippets")
        return 1
    try:
        snippet = get_snippet(args.id, current)
    except ValueError as exc:
        print(exc)
        print("issue finding id")
        return 1
    except SnippetNotFoundError:
        print("issue finding id")
        return 1
    print(snippet)
    return 0


def _list(args: argparse.Namespace) -> int:
    try:
        current = load_snippets()
    except StoreError as exc:
        print(f"error: {exc}")
        return 1
    print(format_snippet_list(current), end="")
    return 0


_HANDLERS = {"add": _add, "delete": _delete, "get": _get, "list": _list}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0
    return _HANDLERS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())