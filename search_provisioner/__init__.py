"""Azure AI Search provisioning — indexes, data sources and indexers."""

from .client import SearchAdminClient
from .config import SearchConfig, load_config
from .provisioner import SearchProvisioner
from .schemas import SchemaValidationError

__all__ = [
    "SearchAdminClient",
    "SearchConfig",
    "SearchProvisioner",
    "SchemaValidationError",
    "load_config",
]
