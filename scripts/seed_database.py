"""
Seed the movie catalog from TMDB, or clear it.
Runs the same SeedingService as the seeding/movies endpoint, without the HTTP layer.
"""

import sys
from pathlib import Path

# Add parent directory to path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

import argparse
import logging
import time

import requests

from movie_catalog_service.exceptions import CatalogError
from movie_catalog_service.services import SeedingService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Seed the movie catalog with popular movies from TMDB'
    )
    parser.add_argument(
        '--count',
        type=int,
        default=100,
        help='Number of popular movies to import (default: 100)'
    )
    parser.add_argument(
        '--clear',
        action='store_true',
        help='Delete all movies, actors and ratings before seeding'
    )
    parser.add_argument(
        '--clear-only',
        action='store_true',
        help='Delete all movies, actors and ratings and exit'
    )
    parser.add_argument(
        '--delay',
        type=float,
        default=1.0,
        help='Seconds to wait between pages of TMDB results (default: 1.0)'
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace, service: SeedingService | None = None) -> dict:
    """
    Run seeding as described by the parsed arguments.

    Returns:
        Dict with 'cleared' and/or 'seeded' statistics
    """
    service = service or SeedingService(batch_delay=args.delay)
    results = {}

    if args.clear or args.clear_only:
        results['cleared'] = service.clear_database()

    if not args.clear_only:
        results['seeded'] = service.seed_database(count=args.count)

    return results


def main(argv=None):
    args = parse_args(argv)

    start_time = time.time()
    logger.info("="*70)
    logger.info("MOVIE CATALOG SEEDING")
    logger.info("="*70)

    try:
        results = run(args)
    except (CatalogError, requests.RequestException) as e:
        logger.error(f"Seeding failed: {e}")
        sys.exit(1)

    elapsed_time = time.time() - start_time
    logger.info("="*70)
    logger.info("✓ SEEDING COMPLETE")
    logger.info("="*70)
    for step, stats in results.items():
        logger.info(f"  {step}: {stats}")
    logger.info(f"Total time: {elapsed_time:.1f} seconds")


if __name__ == '__main__':
    main()
