"""
Command-line front end: enroll a password, verify one against a stored
record, or print a raw PBKDF2 key.
"""

from __future__ import annotations
import argparse
import logging
import sys
from getpass import getpass

from .config import Pbkdf2Config
from .credential import CredentialEncoder
from .exceptions import Pbkdf2Error
from .kdf_core import derive_hex


def _add_config_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--algorithm", help="Keyed-hash algorithm (default: sha256)")
    parser.add_argument("--iterations", type=int, help="Iteration count (default: 1000)")
    parser.add_argument("--hash-length", type=int, help="Derived key length in bytes (default: 32)")
    parser.add_argument("--salt-length", type=int, help="Salt length in bytes (default: 32)")


def _config_from_args(args: argparse.Namespace) -> Pbkdf2Config:
    conf = {
        "algorithm": args.algorithm,
        "iterations": args.iterations,
        "hash_length": args.hash_length,
        "salt_length": args.salt_length,
    }
    # Environment first, explicit options on top
    return Pbkdf2Config.from_env().reconfigure({k: v for k, v in conf.items() if v is not None})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pbkdf2vault",
        description="PBKDF2-HMAC password hashing and verification.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    enr = sub.add_parser("enroll", help="Hash a password and print the salt+hash record")
    _add_config_options(enr)

    ver = sub.add_parser("verify", help="Check a password against a salt+hash record")
    ver.add_argument("record", help="Stored salt+hash record")
    _add_config_options(ver)

    der = sub.add_parser("derive", help="Print the raw PBKDF2 key as hex")
    der.add_argument("password")
    der.add_argument("salt")
    der.add_argument("--algorithm", default="sha256")
    der.add_argument("--iterations", type=int, default=1000)
    der.add_argument("--length", type=int, default=32, help="Key length in bytes")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.cmd == "derive":
            print(derive_hex(args.algorithm, args.password, args.salt, args.iterations, args.length))
            return 0

        encoder = CredentialEncoder(_config_from_args(args))

        if args.cmd == "enroll":
            password = getpass("Password: ")
            if getpass("Confirm password: ") != password:
                print("Error: passwords do not match.", file=sys.stderr)
                return 2
            print(encoder.enroll(password).hash)
            return 0

        if encoder.verify(getpass("Password: "), args.record):
            print("OK")
            return 0
        print("Password does not match.", file=sys.stderr)
        return 1
    except (Pbkdf2Error, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
