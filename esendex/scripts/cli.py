"""Command line client for the Esendex REST API.

Usage:
  export ESENDEX_USERNAME=user@example.com ESENDEX_PASSWORD=...
  esendex accounts
  esendex sent --page 2
  esendex --account-reference EX0000000 received --json
  esendex message 1183C73D-2E62-4F60-B610-30F160BDFBD5
  esendex body 1183C73D-2E62-4F60-B610-30F160BDFBD5
  esendex batches

Credentials may also be given with --username/--password. Any API or
transport error ends the process with the error text.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import pprint
import sys
from datetime import datetime
from typing import Any, Sequence

import requests

from ..adapters.esendex_client import Client
from ..adapters.options import page as page_option
from ..common.config import settings
from ..common.errors import EsendexError
from ..common.logging import configure_logging

PAGE_SIZE = 20


def page_opts(page: int):
    start_index = (max(page, 1) - 1) * PAGE_SIZE
    return page_option(start_index, PAGE_SIZE)


def _plain(o: Any) -> Any:
    if dataclasses.is_dataclass(o) and not isinstance(o, type):
        return dataclasses.asdict(o)
    return o


def _json_default(o: Any) -> Any:
    if isinstance(o, datetime):
        return o.isoformat()
    raise TypeError(f"not JSON serializable: {type(o).__name__}")


def render(data: Any, as_json: bool = False) -> str:
    if isinstance(data, list):
        plain = [_plain(d) for d in data]
    else:
        plain = _plain(data)
    if as_json:
        return json.dumps(plain, indent=2, ensure_ascii=False, default=_json_default)
    return pprint.pformat(plain, sort_dicts=False)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="esendex",
        description="A command line client for the Esendex REST API.",
    )
    ap.add_argument("--username", default=settings.username, help="username to authenticate with")
    ap.add_argument("--password", default=settings.password, help="password to authenticate with")
    ap.add_argument(
        "--account-reference",
        default=settings.account_reference,
        help="scope sent/received/batches to this account",
    )
    ap.add_argument("--json", action="store_true", help="print JSON instead of a formatted dump")

    sub = ap.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    p = sub.add_parser("received", help="lists received messages")
    p.add_argument("--page", type=int, default=1, help="display given page")

    p = sub.add_parser("sent", help="lists sent messages")
    p.add_argument("--page", type=int, default=1, help="display given page")

    p = sub.add_parser("message", help="displays a message")
    p.add_argument("message_id", metavar="MESSAGEID")

    p = sub.add_parser("body", help="displays the body of a message")
    p.add_argument("message_id", metavar="MESSAGEID")

    sub.add_parser("accounts", help="list accounts")

    p = sub.add_parser("batches", help="lists message batches")
    p.add_argument("--page", type=int, default=1, help="display given page")

    return ap


def run(args: argparse.Namespace, client: Client) -> Any:
    scope = client.account(args.account_reference) if args.account_reference else client

    if args.command == "received":
        return scope.received(page_opts(args.page)).messages
    if args.command == "sent":
        return scope.sent(page_opts(args.page)).messages
    if args.command == "batches":
        return scope.batches(page_opts(args.page)).batches
    if args.command == "message":
        return client.message(args.message_id)
    if args.command == "body":
        return client.body(client.message(args.message_id))
    if args.command == "accounts":
        return client.accounts().accounts
    raise SystemExit(f"Unknown command: {args.command}")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(settings.log_level)

    if not args.username or not args.password:
        raise SystemExit("Both --username and --password options are required.")

    client = Client(args.username, args.password)

    try:
        result = run(args, client)
    except (EsendexError, requests.RequestException, ValueError) as e:
        raise SystemExit(str(e)) from e

    sys.stdout.write(render(result, as_json=args.json) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
