import pytest

from search_provisioner.config import SearchConfig
from search_provisioner.provisioner import SearchProvisioner


class FakeSearchAdminClient:
    """In-memory stand-in for SearchAdminClient that records every call."""

    def __init__(self):
        self.calls = []
        self.indexes = {}
        self.data_sources = {}
        self.indexers = {}
        self.runs = []

    def index_exists(self, name):
        self.calls.append(("index_exists", name))
        return name in self.indexes

    def create_index(self, index):
        self.calls.append(("create_index", index.name))
        if index.name in self.indexes:
            raise RuntimeError(f"index {index.name} already exists")
        self.indexes[index.name] = index
        return index

    def delete_index(self, name):
        self.calls.append(("delete_index", name))
        del self.indexes[name]

    def create_or_update_data_source(self, data_source):
        self.calls.append(("create_or_update_data_source", data_source.name))
        self.data_sources[data_source.name] = data_source
        return data_source

    def indexer_exists(self, name):
        self.calls.append(("indexer_exists", name))
        return name in self.indexers

    def reset_indexer(self, name):
        self.calls.append(("reset_indexer", name))

    def create_or_update_indexer(self, indexer):
        self.calls.append(("create_or_update_indexer", indexer.name))
        self.indexers[indexer.name] = indexer
        return indexer

    def run_indexer(self, name):
        self.calls.append(("run_indexer", name))
        self.runs.append(name)

    def calls_named(self, op):
        return [name for call, name in self.calls if call == op]


@pytest.fixture
def config():
    return SearchConfig(
        service_name="demo-search",
        admin_key="admin-key",
        sql_connection_string="Server=tcp:sql;Database=db;",
        table_connection_string="DefaultEndpointsProtocol=https;AccountName=table;",
        blob_connection_string="DefaultEndpointsProtocol=https;AccountName=blob;",
    )


@pytest.fixture
def fake_client():
    return FakeSearchAdminClient()


@pytest.fixture
def provisioner(fake_client, config):
    return SearchProvisioner(fake_client, config)
