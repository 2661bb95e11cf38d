#!/usr/bin/env python3
"""
itad - command-line front-end for a handful of read-only endpoints.

Credentials come from the environment (ITAD_API_KEY / ITAD_OAUTH_TOKEN),
decoded ``data`` payloads are printed as JSON on stdout.

    itad regions
    itad stores eu1 --country DE
    itad search "witcher" --limit 5
    itad prices witcheriiiwildhunt --region us --shop steam --shop gog
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from .api import FindGames, Prices, Regions, StoresInRegion, UserInfo
from .api.endpoint import Endpoint
from .client import ItadClient
from .config import ClientSettings
from .errors import ItadClientError


def setup_logging(log_level: str) -> logging.Logger:
    logger = logging.getLogger("itad_client")
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.handlers.clear()

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    ch.setLevel(logger.level)
    logger.addHandler(ch)

    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="itad", description="Query the IsThereAnyDeal API."
    )
    parser.add_argument("--host", default=None, help="Override the API host")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("regions", help="List regions and their countries")

    stores = sub.add_parser("stores", help="List stores available in a region")
    stores.add_argument("region")
    stores.add_argument("--country", default=None)

    search = sub.add_parser("search", help="Search games by title")
    search.add_argument("q")
    search.add_argument("--limit", type=int, default=None)
    search.add_argument("--strict", action="store_true")

    prices = sub.add_parser("prices", help="Current prices for plains")
    prices.add_argument("plains", nargs="+")
    prices.add_argument("--region", default=None)
    prices.add_argument("--country", default=None)
    prices.add_argument("--shop", action="append", default=[], dest="shops")

    sub.add_parser("user-info", help="Show the OAuth token's user")

    return parser


def endpoint_from_args(args: argparse.Namespace) -> Endpoint:
    if args.command == "regions":
        return Regions.builder().build()

    if args.command == "stores":
        builder = StoresInRegion.builder().region(args.region)
        if args.country:
            builder.country(args.country)
        return builder.build()

    if args.command == "search":
        builder = FindGames.builder().q(args.q)
        if args.limit is not None:
            builder.limit(args.limit)
        if args.strict:
            builder.strict(True)
        return builder.build()

    if args.command == "prices":
        builder = Prices.builder().plains(args.plains).shops(args.shops)
        if args.region:
            builder.region(args.region)
        if args.country:
            builder.country(args.country)
        return builder.build()

    if args.command == "user-info":
        return UserInfo()

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logging(args.log_level)

    try:
        settings = ClientSettings.from_env()
        endpoint = endpoint_from_args(args)
        with ItadClient(
            host=args.host or settings.host,
            api_key=settings.api_key,
            oauth_token=settings.oauth_token,
            timeout=settings.timeout,
        ) as client:
            data: Any = client.query(endpoint)
    except ItadClientError as e:
        logger.error("%s", e)
        return 1

    json.dump(data, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
