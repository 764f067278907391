#!/usr/bin/env python3
"""
CLI to query HubDB tables.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

import yaml

from hubdb_client import config
from hubdb_client.client import HubSpotClient
from hubdb_client.error import HubDBError
from hubdb_client.sentry import init_sentry

logger = logging.getLogger(__name__)


def parse_param(value: str) -> tuple[str, str]:
    key, sep, val = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{value}'")
    return key, val


def load_descriptor(path: str) -> dict:
    # YAML is a superset of JSON, so both formats are accepted
    with open(Path(path), "rb") as f:
        descriptor = yaml.safe_load(f)
    if not isinstance(descriptor, dict):
        raise ValueError(f"{path} does not contain a table descriptor")
    return descriptor


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hubdb-client", description="Query HubSpot HubDB tables")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("tables", help="List HubDB tables")

    for name, help_text in [("table", "Get a table by ID"), ("rows", "Get the rows of a table")]:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("table_id")
        sub.add_argument("portal_id")
        sub.add_argument(
            "--param",
            action="append",
            type=parse_param,
            default=[],
            metavar="KEY=VALUE",
            help="Extra query parameter, can be repeated",
        )

    create = subparsers.add_parser("create-table", help="Create a table from a YAML or JSON file")
    create.add_argument("file")
    return parser


async def execute(args: argparse.Namespace, descriptor: dict | None = None):
    async with HubSpotClient.from_config() as hs:
        if args.command == "tables":
            return await hs.hubdb.get_tables()
        if args.command == "table":
            return await hs.hubdb.get_table_by_id(args.table_id, args.portal_id, dict(args.param))
        if args.command == "rows":
            return await hs.hubdb.get_table_rows(args.table_id, args.portal_id, dict(args.param))
        if args.command == "create-table":
            return await hs.hubdb.create_table(descriptor)
    raise ValueError(f"unknown command '{args.command}'")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    descriptor = None
    if args.command == "create-table":
        try:
            descriptor = load_descriptor(args.file)
        except (OSError, ValueError, yaml.YAMLError) as e:
            parser.error(str(e))
    logging.basicConfig(level=config.LOG_LEVEL)
    init_sentry()
    try:
        result = asyncio.run(execute(args, descriptor))
    except HubDBError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(e.message, file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
