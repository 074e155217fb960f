"""
Printful Sync Product CLI

Lists the Printful catalog, inspects the variants of one product, uploads
the first image file found in a directory and creates a sync product that
references it.

Usage:
    python3 sync_canvas.py
    python3 sync_canvas.py --directory artwork/ --verbose
    python3 sync_canvas.py --product-index 5 --variant-id 19314 --retail-price 34.99
    python3 sync_canvas.py --token xxx   # or set PRINTFUL_API_TOKEN (.env supported)

Exit codes:
    0 = sync product request sent
    1 = missing token, API failure, no image file, or upload/sync error
"""

import argparse
import logging
import sys
from typing import List, Optional

import yaml

from .common.config_loader import load_api_token, load_base_url, load_sync_settings
from .common.constants import COMPLETION_MESSAGE, DEFAULT_TIMEOUT, TOKEN_ENV_VAR
from .common.log_config import setup_logging
from .printful.api_client import PrintfulAPIClient
from .workflow.sync_pipeline import SyncPipeline

logger = logging.getLogger(__name__)


def positive_float(value: str) -> float:
    """argparse type for timeouts: a number greater than zero."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Upload artwork to Printful and create a sync product.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--token",
        help=f"Printful API token (default: reads {TOKEN_ENV_VAR} env var)",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Sync settings YAML (default: config/sync_product.yaml)",
    )
    parser.add_argument(
        "--directory",
        default=".",
        metavar="DIR",
        help="Directory scanned for .png/.jpg artwork (default: current directory)",
    )
    parser.add_argument("--product-index", type=int, metavar="N",
                        help="Catalog index of the product to inspect")
    parser.add_argument("--variant-id", type=int, metavar="ID",
                        help="Catalog variant ID used in the sync product")
    parser.add_argument("--external-id", help="Sync product external ID")
    parser.add_argument("--name", help="Sync product name")
    parser.add_argument("--retail-price", metavar="PRICE", help="Retail price, e.g. 29.99")
    parser.add_argument(
        "--inspect-name",
        metavar="NAME",
        help="Log catalog products with exactly this name (does not change selection)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit 1 if Printful rejects the sync product",
    )
    parser.add_argument(
        "--timeout",
        type=positive_float,
        default=DEFAULT_TIMEOUT,
        metavar="SECONDS",
        help=f"Per-request timeout (default: {DEFAULT_TIMEOUT})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Also log the full catalog and variant response bodies",
    )
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(verbose=args.verbose, quiet=args.quiet)

    # Resolve token before anything touches the network
    token = load_api_token(args.token)
    if not token:
        print(f"ERROR: {TOKEN_ENV_VAR} not set in environment. Use --token or set {TOKEN_ENV_VAR}.")
        return 1

    try:
        settings = load_sync_settings(args.config).with_overrides(
            product_index=args.product_index,
            variant_id=args.variant_id,
            external_id=args.external_id,
            name=args.name,
            retail_price=args.retail_price,
        )
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"ERROR: Invalid sync settings: {e}")
        return 1

    with PrintfulAPIClient(access_token=token, base_url=load_base_url(),
                           timeout=args.timeout) as client:
        pipeline = SyncPipeline(
            client,
            settings,
            directory=args.directory,
            inspect_name=args.inspect_name,
            strict=args.strict,
        )
        outcome = pipeline.run()

    if not outcome.ok:
        logger.error("%s failed: %s", outcome.failed_step, outcome.error)
        print(f"ERROR: {outcome.error}")
        return 1

    logger.info(COMPLETION_MESSAGE)
    print(COMPLETION_MESSAGE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
