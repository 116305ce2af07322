"""
SearchAdminClient — the administrative surface the provisioner needs.

Bundles SearchIndexClient (indexes) and SearchIndexerClient (data sources,
indexers) behind one handle. The SDK has no exists() call, so existence is
probed with get_index / get_indexer and ResourceNotFoundError.
"""

from __future__ import annotations

import logging

from azure.core.exceptions import ResourceNotFoundError
from azure.search.documents.indexes import SearchIndexClient, SearchIndexerClient
from azure.search.documents.indexes.models import (
    SearchIndex,
    SearchIndexer,
    SearchIndexerDataSourceConnection,
)

from .config import SearchConfig

logger = logging.getLogger("search-provisioner.client")


class SearchAdminClient:
    def __init__(self, index_client: SearchIndexClient, indexer_client: SearchIndexerClient):
        self.index_client = index_client
        self.indexer_client = indexer_client

    @classmethod
    def from_config(cls, cfg: SearchConfig) -> "SearchAdminClient":
        credential = cfg.get_credential()
        return cls(
            SearchIndexClient(endpoint=cfg.endpoint, credential=credential),
            SearchIndexerClient(endpoint=cfg.endpoint, credential=credential),
        )

    # -- Indexes -----------------------------------------------------------

    def index_exists(self, name: str) -> bool:
        try:
            self.index_client.get_index(name)
            return True
        except ResourceNotFoundError:
            logger.debug("Index '%s' not found", name)
            return False

    def create_index(self, index: SearchIndex) -> SearchIndex:
        return self.index_client.create_index(index)

    def delete_index(self, name: str) -> None:
        self.index_client.delete_index(name)

    # -- Data sources ------------------------------------------------------

    def create_or_update_data_source(
        self, data_source: SearchIndexerDataSourceConnection
    ) -> SearchIndexerDataSourceConnection:
        return self.indexer_client.create_or_update_data_source_connection(data_source)

    # -- Indexers ----------------------------------------------------------

    def indexer_exists(self, name: str) -> bool:
        try:
            self.indexer_client.get_indexer(name)
            return True
        except ResourceNotFoundError:
            logger.debug("Indexer '%s' not found", name)
            return False

    def reset_indexer(self, name: str) -> None:
        self.indexer_client.reset_indexer(name)

    def create_or_update_indexer(self, indexer: SearchIndexer) -> SearchIndexer:
        return self.indexer_client.create_or_update_indexer(indexer)

    def run_indexer(self, name: str) -> None:
        self.indexer_client.run_indexer(name)
