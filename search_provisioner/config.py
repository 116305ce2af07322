"""
Configuration — environment variable loading for the search provisioner.

Centralises all env var reads so other modules receive an explicit
SearchConfig instead of calling os.getenv() directly. Values come from
azure_config.env (loaded with python-dotenv) or the process environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from azure.core.credentials import AzureKeyCredential
from azure.identity import DefaultAzureCredential
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
CONFIG_FILE = PROJECT_ROOT / "azure_config.env"

# Env var → SearchConfig field
REQUIRED_VARS: dict[str, str] = {
    "AI_SEARCH_NAME": "service_name",
    "AZURE_SQL_CONNECTION_STRING": "sql_connection_string",
    "AZURE_TABLE_CONNECTION_STRING": "table_connection_string",
    "AZURE_BLOB_CONNECTION_STRING": "blob_connection_string",
}
ADMIN_KEY_VAR = "AI_SEARCH_ADMIN_KEY"


@dataclass(frozen=True)
class SearchConfig:
    """Operator-supplied settings, built once at startup."""
    service_name: str
    sql_connection_string: str
    table_connection_string: str
    blob_connection_string: str
    admin_key: str = ""

    @property
    def endpoint(self) -> str:
        return f"https://{self.service_name}.search.windows.net"

    def get_credential(self) -> AzureKeyCredential | DefaultAzureCredential:
        """Admin key when configured, otherwise the ambient Azure identity."""
        if self.admin_key:
            return AzureKeyCredential(self.admin_key)
        return DefaultAzureCredential()


def load_config(env_file: Path | str | None = None) -> SearchConfig:
    """Load azure_config.env and return a SearchConfig.

    Raises EnvironmentError listing every missing variable at once.
    """
    load_dotenv(env_file or CONFIG_FILE, override=True)

    missing = [k for k in REQUIRED_VARS if not os.environ.get(k)]
    if missing:
        raise EnvironmentError(
            f"Missing required config: {', '.join(missing)}. "
            "Set them in azure_config.env or export them before running."
        )

    return SearchConfig(
        admin_key=os.environ.get(ADMIN_KEY_VAR, ""),
        **{field: os.environ[var] for var, field in REQUIRED_VARS.items()},
    )
