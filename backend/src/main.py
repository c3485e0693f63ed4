"""Command-line entry point for quick Admin REST lookups."""

import argparse
import asyncio
import json
import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from domains.resources import ALL_RESOURCES, Shop
from integrations.shopify import RestClient
from infrastructure.config.settings import get_settings
from shared import ShopifyError, get_logger, setup_logging


logger = get_logger(__name__)

RESOURCES = {cls.PLURAL: cls for cls in ALL_RESOURCES if cls is not Shop}


def parse_parent_ids(values: Optional[List[str]]) -> Dict[str, str]:
    """Turn ``["blog_id=1"]`` into ``{"blog_id": "1"}``."""
    ids = {}
    for value in values or []:
        name, sep, raw = value.partition("=")
        if not sep or not name or not raw:
            raise ValueError(f"Expected name=value, got '{value}'")
        ids[name] = raw
    return ids


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Shopify Admin REST client")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("shop", help="Show the current shop")

    for name, help_text in (("list", "List one page of a resource"), ("count", "Count a resource")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("resource", choices=sorted(RESOURCES))
        cmd.add_argument(
            "--parent",
            action="append",
            metavar="NAME=VALUE",
            help="Parent id for nested resources, e.g. blog_id=123"
        )
        if name == "list":
            cmd.add_argument("--limit", type=int, default=None)

    return parser


async def run_command(
    client: RestClient,
    args: argparse.Namespace,
    parent_ids: Dict[str, str]
) -> Any:
    if args.command == "shop":
        shop = await Shop.current(client)
        return shop.model_dump(mode="json", exclude_none=True)

    resource = RESOURCES[args.resource]

    if args.command == "count":
        return {"count": await resource.count(client, **parent_ids)}

    page = await resource.all(client, {"limit": args.limit}, **parent_ids)
    return {
        args.resource: [item.model_dump(mode="json", exclude_none=True) for item in page],
        "next_page_info": page.next_page_info,
    }


async def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        parent_ids = parse_parent_ids(getattr(args, "parent", None))
    except ValueError as e:
        parser.error(str(e))

    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging()
        logger.error("Invalid configuration", error_count=e.error_count(), error=str(e))
        return 1

    setup_logging(
        log_level=settings.log_level,
        json_logs=settings.log_json
    )
    logger.debug("Loaded settings", config=settings.mask_sensitive())

    async with RestClient.from_settings(settings) as client:
        try:
            result = await run_command(client, args, parent_ids)
        except ShopifyError as e:
            logger.error("Command failed", command=args.command, **e.to_dict())
            return 1

    print(json.dumps(result, indent=2))
    return 0


def run():
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
