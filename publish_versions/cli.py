"""
Command-line interface for resolving deprecation publish versions.
"""

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from .changed_packages import read_changed_packages
from .packages import AllPackages
from .registry import DEFAULT_REGISTRY_URL, CachedRegistryInfoClient
from .reporting import export_resolutions_csv, print_summary, save_resolutions_json
from .resolver import resolve_not_needed_packages


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve the versions to publish for deprecated typings packages"
    )

    parser.add_argument(
        "--data-dir",
        required=True,
        help="Directory containing versions.json, typesData.json and notNeededPackages.json"
    )

    parser.add_argument(
        "--registry-url",
        default=DEFAULT_REGISTRY_URL,
        help=f"npm registry to read package info from. Default: {DEFAULT_REGISTRY_URL}"
    )

    parser.add_argument(
        "--output-dir",
        default="./output",
        help="Output directory for results. Default: ./output"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    data_dir = Path(args.data_dir)
    output_dir = Path(args.output_dir)

    try:
        all_packages = AllPackages.read(data_dir)
        changed = read_changed_packages(all_packages, data_dir)

        client = CachedRegistryInfoClient(registry_url=args.registry_url)
        for pkg in tqdm(changed.changed_not_needed_packages, desc="Fetching registry info"):
            if client.fetch_and_cache_info(pkg.full_escaped_npm_name) is None:
                raise LookupError(f"{pkg.full_npm_name} is not in the registry")

        resolutions = [resolution for _, resolution in resolve_not_needed_packages(changed, client)]
        print_summary(resolutions)

        results_file = save_resolutions_json(resolutions, output_dir)
        csv_file = export_resolutions_csv(resolutions, output_dir)
        logger.info("Results saved to: %s", results_file)
        logger.info("CSV saved to: %s", csv_file)
    except Exception as e:
        logger.error("Error resolving publish versions: %s", e)
        print(f"\nError resolving publish versions: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
