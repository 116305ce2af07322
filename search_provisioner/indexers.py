"""
Indexer definitions — one per (data source → index) binding.

All indexers run on a daily schedule; the blob indexer maps the blob's
unique key metadata onto the CustomerID key of the combined index.
"""

from __future__ import annotations

from datetime import timedelta

from azure.search.documents.indexes.models import (
    FieldMapping,
    IndexingSchedule,
    SearchIndexer,
)

from .data_sources import (
    BLOB_DATA_SOURCE_NAME,
    SQL_DATA_SOURCE_NAME,
    TABLE_DATA_SOURCE_NAME,
)
from .schemas import COMBINED_INDEX_NAME, SQL_INDEX_NAME, STORAGE_INDEX_NAME

SQL_INDEXER_NAME = "azure-sql-indexer"
TABLE_INDEXER_NAME = "azure-table-indexer"
BLOB_INDEXER_NAME = "azure-blob-indexer"
COMBINED_SQL_INDEXER_NAME = "azure-combined-sql-indexer"

DAILY = timedelta(days=1)


def _daily() -> IndexingSchedule:
    return IndexingSchedule(interval=DAILY)


def sql_indexer(
    index_name: str = SQL_INDEX_NAME,
    data_source_name: str = SQL_DATA_SOURCE_NAME,
) -> SearchIndexer:
    return SearchIndexer(
        name=SQL_INDEXER_NAME,
        data_source_name=data_source_name,
        target_index_name=index_name,
        schedule=_daily(),
    )


def table_indexer(
    index_name: str = STORAGE_INDEX_NAME,
    data_source_name: str = TABLE_DATA_SOURCE_NAME,
) -> SearchIndexer:
    return SearchIndexer(
        name=TABLE_INDEXER_NAME,
        data_source_name=data_source_name,
        target_index_name=index_name,
        schedule=_daily(),
    )


def blob_indexer(
    index_name: str = COMBINED_INDEX_NAME,
    data_source_name: str = BLOB_DATA_SOURCE_NAME,
) -> SearchIndexer:
    return SearchIndexer(
        name=BLOB_INDEXER_NAME,
        data_source_name=data_source_name,
        target_index_name=index_name,
        field_mappings=[
            FieldMapping(source_field_name="uniqueblobkey", target_field_name="CustomerID"),
        ],
        schedule=_daily(),
    )


def combined_sql_indexer(
    index_name: str = COMBINED_INDEX_NAME,
    data_source_name: str = SQL_DATA_SOURCE_NAME,
) -> SearchIndexer:
    """Second indexer on the SQL source, feeding the combined index."""
    return SearchIndexer(
        name=COMBINED_SQL_INDEXER_NAME,
        data_source_name=data_source_name,
        target_index_name=index_name,
        schedule=_daily(),
    )
