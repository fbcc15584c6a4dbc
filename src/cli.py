'''Generate and validate short identifiers with a Luhn mod N check symbol.'''
import sys
import json
import logging
import argparse
from typing import Optional

import jsonschema
import pydantic

from src.core.domain.presets import POOLS
from src.identifiers.config import IdentifierConfig, load_config
from src.identifiers.service import IdentifierService

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_CONFIG_ERROR = 2


def eprint(*errors, **kwargs):
    '''prints errors to stderr'''
    print(*errors, file=sys.stderr, **kwargs)


def init_logs(verbose: bool = False):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO,
                        format='[%(levelname)s] %(asctime)s - %(message)s',
                        datefmt='%Y-%m-%d %H:%M:%S')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__, prog="luhn-id")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    profile = argparse.ArgumentParser(add_help=False)
    profile.add_argument("--pool", "-p", help="pool type, defaults to alphanum")
    profile.add_argument("--length", "-l", type=int, help="identifier length incl. check symbol, defaults to 32")
    profile.add_argument("--config", "-c", help="path to a JSON identifier profile")

    gen = commands.add_parser("generate", parents=[profile], help="print new identifiers")
    gen.add_argument("--count", "-n", type=int, default=1, help="number of identifiers, defaults to 1")

    val = commands.add_parser("validate", parents=[profile], help="check identifiers")
    val.add_argument("ids", nargs="+", help="identifiers to check")

    commands.add_parser("pools", help="list pool presets")
    return parser


def resolve_config(args: argparse.Namespace) -> IdentifierConfig:
    '''profile file first, then command line overrides'''
    data = load_config(args.config).model_dump() if args.config else {}
    if args.pool is not None:
        data["pool_type"] = args.pool
    if args.length is not None:
        data["length"] = args.length
    return IdentifierConfig(**data)


def cmd_generate(service: IdentifierService, count: int) -> int:
    if count < 0:
        eprint(f"Error: count must be non-negative, got {count}")
        return EXIT_CONFIG_ERROR
    for identifier in service.generate_many(count):
        print(identifier)
    return EXIT_OK


def cmd_validate(service: IdentifierService, ids: list[str]) -> int:
    status = EXIT_OK
    for candidate in ids:
        result = service.inspect(candidate)
        if result.is_valid:
            print(f"{candidate}\tvalid")
        else:
            print(f"{candidate}\tinvalid ({result.reject_reason.value})")
            status = EXIT_INVALID
    return status


def cmd_pools() -> int:
    for pool_type, symbols in POOLS.items():
        print(f"{pool_type.value}\t{len(symbols)}\t{symbols}")
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    init_logs(args.verbose)

    if args.command == "pools":
        return cmd_pools()

    try:
        config = resolve_config(args)
    except (OSError, json.JSONDecodeError, jsonschema.ValidationError, pydantic.ValidationError) as e:
        eprint(f"Error: invalid identifier profile: {e}")
        return EXIT_CONFIG_ERROR

    service = IdentifierService(config)
    logging.debug(f"Using pool '{service.pool_type.value}' (radix {service.alphabet.radix}), length {service.length}")
    if args.command == "generate":
        return cmd_generate(service, args.count)
    return cmd_validate(service, args.ids)


if __name__ == '__main__':
    sys.exit(main())
