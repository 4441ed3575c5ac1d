#!/usr/bin/env python3
"""
Main entry point for the Prize Bond Checker.

Runs the API server by default, or checks two local files from the
command line with the ``check`` command.
"""

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from .exceptions import BondCheckError
from .models.bond_result import UploadedFile
from .server.api_server import DEFAULT_CORS_ORIGINS, run_server
from .service.bond_checker import BondChecker
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Prize Bond Checker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the API server with default settings
  python -m prizebond_checker.main

  # Run on a custom port with debug error details
  python -m prizebond_checker.main serve --port 8080 --debug

  # Check a bond list against a draw result PDF
  python -m prizebond_checker.main check my_bonds.xlsx draw_results.pdf
        """
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Logging level (default: INFO)"
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        help="Optional log file path"
    )

    subparsers = parser.add_subparsers(dest="command")

    serve = subparsers.add_parser("serve", help="Run the API server (default)")
    serve.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host to bind the server to (default: 0.0.0.0)"
    )
    serve.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("PORT", 5000)),
        help="Port to bind the server to (default: $PORT or 5000)"
    )
    serve.add_argument(
        "--upload-dir",
        type=Path,
        default=Path("uploads"),
        help="Directory for temporarily staged uploads (default: uploads)"
    )
    serve.add_argument(
        "--max-upload-mb",
        type=int,
        default=10,
        help="Maximum size of each uploaded file in MB (default: 10)"
    )
    serve.add_argument(
        "--cors-origin",
        action="append",
        dest="cors_origins",
        help="Allowed CORS origin, may be repeated (default: built-in list)"
    )
    serve.add_argument(
        "--debug",
        action="store_true",
        default=os.environ.get("APP_ENV") == "development",
        help="Include exception details in error responses"
    )

    # No subcommand: serve with the serve defaults
    parser.set_defaults(command="serve", **vars(serve.parse_args([])))

    check = subparsers.add_parser("check", help="Check a bond list against a draw file")
    check.add_argument("user_file", type=Path, help="Your bond list (.txt, .xlsx, .xls, .pdf)")
    check.add_argument("draw_file", type=Path, help="Draw result list (.txt, .xlsx, .xls, .pdf)")

    return parser


def read_file(path: Path) -> UploadedFile:
    return UploadedFile(filename=path.name, content=path.read_bytes())


def check_command(user_path: Path, draw_path: Path) -> int:
    """Check two local files and print the result as JSON."""
    checker = BondChecker()
    try:
        checker.validate(user_path.name, draw_path.name)
        result = asyncio.run(checker.check_files(read_file(user_path), read_file(draw_path)))
    except (BondCheckError, OSError) as e:
        logger.error(f"Check failed: {e}")
        return 1

    print(result.model_dump_json(by_alias=True, indent=2))
    return 0


def main(argv=None):
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)

    setup_logging(
        level=args.log_level,
        log_file=args.log_file
    )

    if args.command == "check":
        sys.exit(check_command(args.user_file, args.draw_file))

    try:
        run_server(
            host=args.host,
            port=args.port,
            upload_dir=args.upload_dir,
            cors_origins=args.cors_origins or DEFAULT_CORS_ORIGINS,
            max_upload_bytes=args.max_upload_mb * 1024 * 1024,
            debug=args.debug,
            log_level=args.log_level,
        )
    except KeyboardInterrupt:
        print("\nShutting down server...")
        sys.exit(0)
    except Exception as e:
        print(f"Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
