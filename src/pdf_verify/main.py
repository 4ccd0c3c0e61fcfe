# ==============================================================================
#  Copyright 2025 Matthew Pounsett <matt@conundrum.com>
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
# ==============================================================================
"""CLI entry point for the product PDF checker."""

import argparse
import logging
import sys

from pydantic import ValidationError

from pdf_verify import __version__
from pdf_verify.checker import PdfChecker, make_console
from pdf_verify.config import Settings
from pdf_verify.store import RecordStore, RecordStoreError

logger = logging.getLogger(__name__)


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog="pdf-verify",
        description="Check that the PDF document of every catalogue product is reachable.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--url",
        dest="supabase_url",
        metavar="URL",
        help="Supabase project URL (default: $PDF_VERIFY_SUPABASE_URL).",
    )
    parser.add_argument(
        "--key",
        dest="supabase_key",
        metavar="KEY",
        help="Supabase API key (default: $PDF_VERIFY_SUPABASE_KEY).",
    )
    parser.add_argument(
        "--table",
        dest="products_table",
        metavar="TABLE",
        help="Table holding the product records.",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        dest="probe_timeout",
        type=float,
        metavar="SECONDS",
        help="Timeout for each PDF probe. Probes wait indefinitely by default.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity. Use -vv for debug output.",
    )

    return parser.parse_args(args)


def setup_logging(verbosity: int) -> None:
    """Configure logging based on verbosity level.

    Args:
        verbosity: Verbosity level (0=warning, 1=info, 2+=debug).
    """
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def load_settings(parsed_args: argparse.Namespace) -> Settings:
    """Build settings from the environment, overridden by CLI options."""
    overrides = {
        name: getattr(parsed_args, name)
        for name in ("supabase_url", "supabase_key", "products_table", "probe_timeout")
        if getattr(parsed_args, name) is not None
    }
    return Settings(**overrides)


def main(args: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 once every product was checked, 1 if the run could not start).
    """
    parsed_args = parse_args(args)
    setup_logging(parsed_args.verbose)

    try:
        settings = load_settings(parsed_args)
    except ValidationError as e:
        # Report field names only; input values may contain the API key.
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            logger.error("Invalid configuration: %s: %s", field, error["msg"])
        return 1

    if not parsed_args.verbose:
        logging.getLogger().setLevel(settings.log_level)

    try:
        store = RecordStore.from_settings(settings)
    except RecordStoreError as e:
        logger.error("%s", e)
        return 1

    with PdfChecker.from_settings(settings) as checker:
        results = checker.run(store, make_console(), make_console(stderr=True))

    if results is None:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
