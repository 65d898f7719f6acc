"""Command line interface."""

from __future__ import annotations

import argparse
import json
import sys
from typing import List

from .core.errors import StartupError, UnsupportedPlatformError
from .core.manager import StartupManager
from .core.models import StartupEntry
from .core.settings import OUTPUT_FORMATS

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_UNSUPPORTED = 2


def format_entries(entries: List[StartupEntry], output: str) -> str:
    if output == "json":
        return json.dumps([e.to_dict() for e in entries], ensure_ascii=False, indent=2)
    lines = ["ID\tENABLED\tNAME\tCOMMAND"]
    for e in entries:
        lines.append(f"{e.id}\t{int(e.enabled)}\t{e.name}\t{e.command}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="startup-manager", description="Manage applications started at login (Linux/Windows)"
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=False)

    list_p = sub.add_parser("list", help="List startup applications")
    list_p.add_argument("-o", "--output", choices=OUTPUT_FORMATS, default=None)

    enable_p = sub.add_parser("enable", help="Enable a startup application")
    enable_p.add_argument("id", help="Entry ID (file name, as shown by list) or display name")

    disable_p = sub.add_parser("disable", help="Disable a startup application")
    disable_p.add_argument("id", help="Entry ID (file name, as shown by list) or display name")

    create_p = sub.add_parser("create", help="Add a new startup application")
    create_p.add_argument("name", help="Display name")
    create_p.add_argument("command", help="Command line to run at login")
    create_p.add_argument("-d", "--description", default="", help="Comment (ignored on Windows)")

    delete_p = sub.add_parser("delete", help="Remove a startup application")
    delete_p.add_argument("id", help="Entry ID (file name, as shown by list) or display name")

    sub.add_parser("gui", help="Open the graphical interface")

    return p


def run_cli(args: argparse.Namespace, manager: StartupManager, default_output: str = "text") -> int:
    try:
        if args.cmd in (None, "list"):
            entries = manager.discover()
            print(format_entries(entries, getattr(args, "output", None) or default_output))
            return EXIT_OK
        if args.cmd in ("enable", "disable"):
            manager.toggle_by_id(args.id, args.cmd == "enable")
            print(f"{args.cmd.capitalize()}d {args.id}")
            return EXIT_OK
        if args.cmd == "create":
            path = manager.create(args.name, args.command, args.description)
            print(f"Created {path}")
            return EXIT_OK
        if args.cmd == "delete":
            manager.delete_by_id(args.id)
            print(f"Deleted {args.id}")
            return EXIT_OK
    except UnsupportedPlatformError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_UNSUPPORTED
    except StartupError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILED
    return EXIT_OK
