# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Command line entry point: ``python -m leadform``."""

from __future__ import annotations

import argparse
import getpass
import sys

from sqlalchemy.exc import SQLAlchemyError

from leadform.application.services.password_hashing import WerkzeugPasswordHasher
from leadform.shared.config import load_config
from leadform.shared.logging import logger


def _serve(args: argparse.Namespace) -> int:
    from leadform.app import create_app
    from leadform.infrastructure.container import Container
    from leadform.infrastructure.health import check_database

    config = load_config()
    container = Container(config)
    app = create_app(config, container=container)

    database = container.database
    if database is None:
        logger.error("No database configured")
        return 1
    try:
        check_database(database)
        database.init_schema()
    except SQLAlchemyError as exc:
        logger.error(f"Database connection failed: {type(exc).__name__}: {exc}")
        return 1
    logger.info("Connected to database")

    host = args.host or config.host
    port = args.port or config.port
    logger.info(f"Server running on port {port}")
    try:
        app.run(host=host, port=port, threaded=True, use_reloader=False)
    finally:
        database.dispose()
    return 0


def _hash_password(args: argparse.Namespace) -> int:
    password = args.password
    if password is None:
        password = getpass.getpass("Admin password: ")
        if password != getpass.getpass("Repeat password: "):
            print("Passwords do not match", file=sys.stderr)
            return 1
    if not password:
        print("Password must not be empty", file=sys.stderr)
        return 1
    print(WerkzeugPasswordHasher().hash(password))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="leadform", description="Contact form backend")
    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Run the HTTP server (default)")
    serve.add_argument("--host", default=None, help="Bind address (defaults to LISTEN_HOST)")
    serve.add_argument("--port", type=int, default=None, help="Port (defaults to PORT)")
    serve.set_defaults(handler=_serve)

    hash_pw = sub.add_parser("hash-password", help="Print a hash for ADMIN_PASSWORD_HASH")
    hash_pw.add_argument("password", nargs="?", default=None)
    hash_pw.set_defaults(handler=_hash_password)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        args = parser.parse_args(["serve", *(argv or [])])
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
