#!/usr/bin/env python3

"""
Command line front end.

  keydirectory serve              run the web directory
  keydirectory page N             print the keys on page N
  keydirectory derive INDEX       print one key
  keydirectory lookup WIF         print the index and page of a WIF key
  keydirectory info               print the size of the keyspace
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import LOG_LEVELS, Settings
from .deriver import KeyDeriver
from .encoding import NETWORKS, get_network
from .errors import KeyDirectoryError
from .keyspace import Keyspace, parse_number

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="keydirectory", description="Browse every secp256k1 private key, page by page")
    parser.add_argument("--network", choices=sorted(NETWORKS), help="Address network (default: mainnet)")
    parser.add_argument("--page-size", type=int, help="Keys per page (default: 128)")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Logging level (default: INFO)")

    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the web directory")
    serve.add_argument("--host", help="Listen address")
    serve.add_argument("--port", type=int, help="Listen port")

    page = sub.add_parser("page", help="Print the keys on a page")
    page.add_argument("number", help="Page number")

    derive = sub.add_parser("derive", help="Print the key at an index")
    derive.add_argument("index", help="Key index, 1-based")

    lookup = sub.add_parser("lookup", help="Find the page of a WIF private key")
    lookup.add_argument("wif", help="WIF private key")

    sub.add_parser("info", help="Print keyspace size")
    return parser


def cmd_serve(settings: Settings) -> None:
    from .web import create_app

    app = create_app(settings)
    logger.info("Listening on %s:%d (%s)", settings.host, settings.port, settings.network)
    app.run(host=settings.host, port=settings.port, threaded=True)


def cmd_page(deriver: KeyDeriver, number: str) -> None:
    keyspace = deriver.keyspace
    page = keyspace.parse_page(number)
    keys, length = deriver.derive_page(page)
    print(f"# page {page} of {keyspace.pages()}, {length} keys")
    for key in keys:
        print(key.number, key.private, key.uncompressed, key.compressed)


def cmd_derive(deriver: KeyDeriver, index: str) -> None:
    key = deriver.derive_one(parse_number(index))
    print("Index:               ", key.number)
    print("Private key (WIF):   ", key.private)
    print("Address:             ", key.uncompressed)
    print("Compressed address:  ", key.compressed)


def cmd_lookup(deriver: KeyDeriver, wif: str) -> None:
    index = deriver.decode_index(wif.strip())
    print("Index:", index)
    print("Page: ", deriver.keyspace.page_for_index(index))


def cmd_info(keyspace: Keyspace) -> None:
    print("Keys:     ", keyspace.bound)
    print("Per page: ", keyspace.page_size)
    print("Pages:    ", keyspace.pages())


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = Settings.from_env().replace(
            network=args.network,
            page_size=args.page_size,
            log_level=args.log_level,
            host=getattr(args, "host", None),
            port=getattr(args, "port", None),
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.command == "serve":
        cmd_serve(settings)
        return 0

    keyspace = Keyspace.create(page_size=settings.page_size)
    deriver = KeyDeriver(keyspace, get_network(settings.network))
    try:
        if args.command == "page":
            cmd_page(deriver, args.number)
        elif args.command == "derive":
            cmd_derive(deriver, args.index)
        elif args.command == "lookup":
            cmd_lookup(deriver, args.wif)
        elif args.command == "info":
            cmd_info(keyspace)
    except KeyDirectoryError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
