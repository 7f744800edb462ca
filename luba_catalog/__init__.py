"""LubaUI catalog query engine.

Answers questions about the LubaUI design system: token and component
lookup, spacing and radius validation, color and typography matching,
pattern-based suggestions and migration planning from other systems.

Modules:
    store: Immutable catalog loaded once from the packaged JSON
    tools: Operations returning JSON-ready payloads
    server: FastMCP server exposing the operations as tools
    cli: Click command line interface
"""

from .config import CatalogConfig, load_config
from .errors import CatalogError, ErrorCategory
from .store import CatalogStore

__version__ = "1.0.0"

__all__ = [
    "CatalogConfig",
    "CatalogError",
    "CatalogStore",
    "ErrorCategory",
    "__version__",
    "load_config",
]
