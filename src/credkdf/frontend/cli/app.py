"""Command-line front end for CredKDF.

Examples:

    credkdf encrypt --profile deterministic --email alice@example.com
    credkdf verify --profile compact --stored 'c2FsdA==.aGFzaA=='
    credkdf register --username alice --email alice@example.com
"""

from __future__ import annotations

import argparse
import getpass
import json
import logging
import sys
from typing import Optional, Sequence

from credkdf.core.encoding import format_secure
from credkdf.core.exceptions import CredKdfError
from credkdf.frontend.cli.logging_config import configure_logging, level_from_env, parse_log_level
from credkdf.security.passwords import (
    encrypt_compact,
    encrypt_deterministic,
    encrypt_secure,
    validate_password_secure,
    verify_compact,
    verify_deterministic,
)
from credkdf.security.profiles import PROFILES, get_profile
from credkdf.security.registration import prepare_secure_registration

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_ERROR = 2


def _read_password(args: argparse.Namespace) -> str:
    if args.password_stdin:
        return sys.stdin.readline().rstrip("\r\n")
    return getpass.getpass("Password: ")


def cmd_encrypt(args: argparse.Namespace) -> int:
    password = _read_password(args)
    if args.profile == "secure":
        result = encrypt_secure(password)
        print(format_secure(result["salt"], result["hash"]))
    elif args.profile == "compact":
        print(encrypt_compact(password))
    else:
        print(encrypt_deterministic(password, args.email))
    return EXIT_OK


def cmd_verify(args: argparse.Namespace) -> int:
    password = _read_password(args)
    if args.profile == "secure":
        ok = validate_password_secure(password, args.stored)
    elif args.profile == "compact":
        ok = verify_compact(password, args.stored)
    else:
        ok = verify_deterministic(password, args.email, args.stored)
    print("match" if ok else "no match")
    return EXIT_OK if ok else EXIT_MISMATCH


def cmd_register(args: argparse.Namespace) -> int:
    password = _read_password(args)
    payload = prepare_secure_registration(args.username, args.email, password, args.avatar)
    print(json.dumps(payload.to_dict(), indent=2))
    return EXIT_OK


def cmd_params(args: argparse.Namespace) -> int:
    print(json.dumps(get_profile(args.profile).to_dict(), indent=2))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="credkdf", description="Client-side password KDF and encoding")
    parser.add_argument(
        "--log-level",
        type=parse_log_level,
        default=level_from_env(),
        help="logging level (default: $CREDKDF_LOG_LEVEL or WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    def add_password_source(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--password-stdin",
            action="store_true",
            help="read the password from the first line of stdin instead of prompting",
        )

    enc = sub.add_parser("encrypt", help="encrypt a password with a profile")
    enc.add_argument("--profile", choices=sorted(PROFILES), default="secure")
    enc.add_argument("--email", help="email used to derive the salt (deterministic profile)")
    add_password_source(enc)
    enc.set_defaults(func=cmd_encrypt)

    ver = sub.add_parser("verify", help="verify a password against a stored credential")
    ver.add_argument("--profile", choices=sorted(PROFILES), default="secure")
    ver.add_argument("--stored", required=True, help="stored credential (salt:hash or salt.hash)")
    ver.add_argument("--email", help="email used to derive the salt (deterministic profile)")
    add_password_source(ver)
    ver.set_defaults(func=cmd_verify)

    reg = sub.add_parser("register", help="build a secure registration payload")
    reg.add_argument("--username", required=True)
    reg.add_argument("--email", required=True)
    reg.add_argument("--avatar", default="")
    add_password_source(reg)
    reg.set_defaults(func=cmd_register)

    par = sub.add_parser("params", help="show the parameters of a profile")
    par.add_argument("--profile", choices=sorted(PROFILES), default="secure")
    par.set_defaults(func=cmd_params)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "profile", None) == "deterministic" and args.command != "params" and not args.email:
        parser.error("--email is required for the deterministic profile")
    configure_logging(args.log_level)
    try:
        return args.func(args)
    except CredKdfError as e:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
