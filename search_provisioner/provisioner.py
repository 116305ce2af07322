"""
SearchProvisioner — idempotent reconciliation of indexes, data sources
and indexers against an Azure AI Search service.

Each reconcile_* call is safe to re-run:
  - indexes are deleted and recreated, so reruns start from an empty index
  - data sources are upserted (they hold no indexing state)
  - indexers are reset when they exist, then upserted, so the next run
    reprocesses every source row

Pipelines run in a fixed order; later steps refer by name to resources
created by earlier ones. Remote failures propagate and abort the run.
"""

from __future__ import annotations

import logging
from typing import Callable

from azure.search.documents.indexes.models import (
    SearchIndex,
    SearchIndexer,
    SearchIndexerDataSourceConnection,
)

from . import data_sources, indexers, schemas
from .client import SearchAdminClient
from .config import SearchConfig

logger = logging.getLogger("search-provisioner")

SEPARATOR = "=" * 40


def _summary(
    index_names: list[str],
    data_source_names: list[str],
    indexer_names: list[str],
    run_names: list[str],
) -> dict[str, list[str]]:
    return {
        "indexes": index_names,
        "data_sources": data_source_names,
        "indexers": indexer_names,
        "runs": run_names,
    }


class SearchProvisioner:
    """Drives the three demo pipelines through one shared admin client."""

    def __init__(
        self,
        client: SearchAdminClient,
        config: SearchConfig,
        on_progress: Callable[[str], None] | None = None,
    ):
        self.client = client
        self.config = config
        self.on_progress = on_progress

    def emit(self, msg: str) -> None:
        logger.info(msg)
        if self.on_progress:
            self.on_progress(msg)

    # ------------------------------------------------------------------
    # Single-resource reconciliation
    # ------------------------------------------------------------------

    def reconcile_index(self, index: SearchIndex) -> SearchIndex:
        """Replace *index* remotely; any documents already in it are lost."""
        schemas.validate_index_schema(index)

        if self.client.index_exists(index.name):
            logger.debug("Index '%s' exists; deleting before recreate", index.name)
            self.client.delete_index(index.name)
        return self.client.create_index(index)

    def reconcile_data_source(
        self, data_source: SearchIndexerDataSourceConnection
    ) -> SearchIndexerDataSourceConnection:
        # Upsert keeps the connection string current without an existence check
        return self.client.create_or_update_data_source(data_source)

    def reconcile_indexer(self, indexer: SearchIndexer) -> SearchIndexer:
        """Reset *indexer* if it already exists, then create or update it.

        An existing indexer remembers how far it got; without the reset a
        rerun would skip rows it has already seen.
        """
        if self.client.indexer_exists(indexer.name):
            logger.debug("Indexer '%s' exists; resetting", indexer.name)
            self.client.reset_indexer(indexer.name)
        return self.client.create_or_update_indexer(indexer)

    def run_indexer_now(self, name: str) -> None:
        """Start an out-of-schedule run. Does not wait for it to finish."""
        self.client.run_indexer(name)

    # ------------------------------------------------------------------
    # Pipelines
    # ------------------------------------------------------------------

    def provision_sql_pipeline(self) -> dict[str, list[str]]:
        self.emit("Creating indexes...")
        self.emit("Creating SQL Index")
        index = self.reconcile_index(schemas.sql_customers_index())

        self.emit("Creating SQL data source...")
        ds = self.reconcile_data_source(data_sources.sql_data_source(self.config))

        self.emit("Creating Azure SQL indexer...")
        indexer = self.reconcile_indexer(
            indexers.sql_indexer(index_name=index.name, data_source_name=ds.name)
        )

        # Scheduled daily, but also run once now
        self.emit("Running Azure SQL indexer...")
        self.run_indexer_now(indexer.name)

        return _summary([index.name], [ds.name], [indexer.name], [indexer.name])

    def provision_table_pipeline(self) -> dict[str, list[str]]:
        self.emit("")
        self.emit(SEPARATOR)
        self.emit("Creating Table Storage Index...")
        index = self.reconcile_index(schemas.storage_users_index())

        self.emit("Creating Table Storage data source...")
        ds = self.reconcile_data_source(data_sources.table_data_source(self.config))

        # No immediate run here: the table indexer only runs on its schedule
        self.emit("Creating Azure Table indexer...")
        indexer = self.reconcile_indexer(
            indexers.table_indexer(index_name=index.name, data_source_name=ds.name)
        )

        return _summary([index.name], [ds.name], [indexer.name], [])

    def provision_combined_pipeline(self) -> dict[str, list[str]]:
        self.emit("")
        self.emit(SEPARATOR)
        self.emit("Creating Combined SQL and Blob Index...")
        index = self.reconcile_index(schemas.sql_blob_index())

        self.emit("Creating Blob data source...")
        blob_ds = self.reconcile_data_source(data_sources.blob_data_source(self.config))
        sql_ds = self.reconcile_data_source(data_sources.sql_data_source(self.config))

        self.emit("Creating combined sql and blob data indexers...")
        self.emit("Creating Azure Blob indexer...")
        blob = self.reconcile_indexer(
            indexers.blob_indexer(index_name=index.name, data_source_name=blob_ds.name)
        )
        self.emit("Creating Azure SQL indexer...")
        combined = self.reconcile_indexer(
            indexers.combined_sql_indexer(index_name=index.name, data_source_name=sql_ds.name)
        )

        self.emit("Running Azure blob and sql indexers...")
        self.run_indexer_now(blob.name)
        self.run_indexer_now(combined.name)

        return _summary(
            [index.name],
            [blob_ds.name, sql_ds.name],
            [blob.name, combined.name],
            [blob.name, combined.name],
        )

    def provision_all(self) -> dict[str, list[str]]:
        """Run the SQL, table and combined pipelines in that order.

        Returns:
            {"indexes": [...], "data_sources": [...], "indexers": [...], "runs": [...]}
            with resource names in the order they were reconciled.
        """
        result = _summary([], [], [], [])
        for pipeline in (
            self.provision_sql_pipeline,
            self.provision_table_pipeline,
            self.provision_combined_pipeline,
        ):
            for kind, names in pipeline().items():
                result[kind].extend(names)
        return result
