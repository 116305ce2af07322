"""
provision_search.py — Provision Azure AI Search indexes, data sources and indexers.

Reconciles three pipelines against the search service:
  1. Azure SQL      sql-customers   ← azure-sql    (azure-sql-indexer, run now)
  2. Table storage  storage-users   ← azure-table  (azure-table-indexer, schedule only)
  3. SQL + Blob     sql-blob-index  ← azure-blob   (azure-blob-indexer, run now)
                                    ← azure-sql    (azure-combined-sql-indexer, run now)

Re-running is safe: existing indexes are dropped and recreated, existing
indexers are reset before being updated.

Prerequisites:
  - azure_config.env populated with AI_SEARCH_NAME, AI_SEARCH_ADMIN_KEY and
    the three AZURE_*_CONNECTION_STRING values

Usage:
  uv run python provision_search.py [--env-file PATH] [--no-pause] [-v]
"""

from __future__ import annotations

import argparse
import logging
import sys

from search_provisioner import SearchAdminClient, SearchProvisioner, load_config
from search_provisioner.config import CONFIG_FILE


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Create Azure AI Search indexes, data sources and indexers",
    )
    parser.add_argument(
        "--env-file",
        default=str(CONFIG_FILE),
        help="Path to the env file holding service name, admin key and connection strings",
    )
    parser.add_argument(
        "--no-pause",
        action="store_true",
        help="Exit without waiting for a key-press",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.env_file)
    except EnvironmentError as e:
        print(f"ERROR: {e}")
        return 1

    client = SearchAdminClient.from_config(config)
    provisioner = SearchProvisioner(client, config, on_progress=print)
    provisioner.provision_all()

    if not args.no_pause:
        input("Press Enter to continue...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
