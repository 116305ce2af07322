"""Data source connections for the three backing stores."""

from __future__ import annotations

from azure.search.documents.indexes.models import (
    SearchIndexerDataContainer,
    SearchIndexerDataSourceConnection,
    SqlIntegratedChangeTrackingPolicy,
)

from .config import SearchConfig

SQL_DATA_SOURCE_NAME = "azure-sql"
TABLE_DATA_SOURCE_NAME = "azure-table"
BLOB_DATA_SOURCE_NAME = "azure-blob"

SQL_TABLE_OR_VIEW = "SalesLT.Customer"
STORAGE_TABLE = "users"
BLOB_CONTAINER = "search-data"


def sql_data_source(cfg: SearchConfig) -> SearchIndexerDataSourceConnection:
    """Azure SQL table with integrated change tracking, so reruns only pick up changed rows."""
    return SearchIndexerDataSourceConnection(
        name=SQL_DATA_SOURCE_NAME,
        type="azuresql",
        connection_string=cfg.sql_connection_string,
        container=SearchIndexerDataContainer(name=SQL_TABLE_OR_VIEW),
        data_change_detection_policy=SqlIntegratedChangeTrackingPolicy(),
    )


def table_data_source(cfg: SearchConfig) -> SearchIndexerDataSourceConnection:
    return SearchIndexerDataSourceConnection(
        name=TABLE_DATA_SOURCE_NAME,
        type="azuretable",
        connection_string=cfg.table_connection_string,
        container=SearchIndexerDataContainer(name=STORAGE_TABLE),
    )


def blob_data_source(cfg: SearchConfig) -> SearchIndexerDataSourceConnection:
    return SearchIndexerDataSourceConnection(
        name=BLOB_DATA_SOURCE_NAME,
        type="azureblob",
        connection_string=cfg.blob_connection_string,
        container=SearchIndexerDataContainer(name=BLOB_CONTAINER),
    )
