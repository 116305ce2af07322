import os
from unittest.mock import patch

import pytest
from azure.core.credentials import AzureKeyCredential

from search_provisioner.config import SearchConfig, load_config

ENV = {
    "AI_SEARCH_NAME": "demo-search",
    "AI_SEARCH_ADMIN_KEY": "admin-key",
    "AZURE_SQL_CONNECTION_STRING": "sql-conn",
    "AZURE_TABLE_CONNECTION_STRING": "table-conn",
    "AZURE_BLOB_CONNECTION_STRING": "blob-conn",
}


def test_load_config_from_env(tmp_path):
    with patch.dict(os.environ, ENV, clear=True):
        cfg = load_config(tmp_path / "missing.env")

    assert cfg.service_name == "demo-search"
    assert cfg.admin_key == "admin-key"
    assert cfg.sql_connection_string == "sql-conn"
    assert cfg.endpoint == "https://demo-search.search.windows.net"


def test_load_config_from_env_file(tmp_path):
    env_file = tmp_path / "azure_config.env"
    env_file.write_text("".join(f"{k}={v}\n" for k, v in ENV.items()))

    with patch.dict(os.environ, {}, clear=True):
        cfg = load_config(env_file)

    assert cfg.blob_connection_string == "blob-conn"


def test_missing_vars_reported_together(tmp_path):
    with patch.dict(os.environ, {"AI_SEARCH_NAME": "demo-search"}, clear=True):
        with pytest.raises(EnvironmentError) as exc:
            load_config(tmp_path / "missing.env")

    msg = str(exc.value)
    assert "AZURE_SQL_CONNECTION_STRING" in msg
    assert "AZURE_BLOB_CONNECTION_STRING" in msg
    assert "AI_SEARCH_NAME" not in msg


def test_admin_key_optional(tmp_path):
    env = {k: v for k, v in ENV.items() if k != "AI_SEARCH_ADMIN_KEY"}
    with patch.dict(os.environ, env, clear=True):
        cfg = load_config(tmp_path / "missing.env")
    assert cfg.admin_key == ""


def test_key_credential(config):
    cred = config.get_credential()
    assert isinstance(cred, AzureKeyCredential)


def test_falls_back_to_default_credential():
    cfg = SearchConfig(
        service_name="demo-search",
        sql_connection_string="sql",
        table_connection_string="table",
        blob_connection_string="blob",
    )
    with patch("search_provisioner.config.DefaultAzureCredential") as default_cls:
        cred = cfg.get_credential()
    assert cred is default_cls.return_value
