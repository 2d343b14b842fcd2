"""
Download the public suffix list into the local cache.

This script:
- Loads regdom configuration (optionally from an env file)
- Fetches the list from REGDOM_PSL_URL into REGDOM_DATA_DIR
- Builds a tree from the new copy and prints its metadata

Usage:
    python scripts/update_psl.py
    python scripts/update_psl.py --env-file /etc/regdom/regdom.env
    python scripts/update_psl.py --if-stale
"""

import argparse
import json
import logging
import os
import sys

from regdom.config import load_config, validate_config
from regdom.exceptions import RegDomError
from regdom.provider import SuffixListProvider


logger = logging.getLogger("update_psl")
logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")


def _load_env_file(path: str) -> None:
    """Load environment variables from a .env-style file."""
    from dotenv import dotenv_values

    values = dotenv_values(path)
    for key, value in values.items():
        if value is None:
            continue
        os.environ[key] = value


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Update the cached public suffix list")
    parser.add_argument("--env-file", help="Load environment variables from this file first")
    parser.add_argument(
        "--if-stale",
        action="store_true",
        help="Only download when the cache is older than REGDOM_CACHE_MAX_AGE_DAYS",
    )
    args = parser.parse_args(argv)

    if args.env_file:
        _load_env_file(args.env_file)

    config = load_config()
    errors = validate_config(config)
    if errors:
        for error in errors:
            logger.error(error)
        return 2

    if config.psl_file is not None:
        logger.error("REGDOM_PSL_FILE is set; the cache is not used")
        return 2

    provider = SuffixListProvider(config)
    if args.if_stale and not provider.cache.needs_update(config.cache_max_age_days):
        logger.info("Cached list is %s days old; nothing to do", provider.cache.days_old())
        return 0

    try:
        provider.refresh(force_download=True)
    except RegDomError as e:
        logger.error("Update failed: %s", e)
        return 1

    print(json.dumps(provider.metadata(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
