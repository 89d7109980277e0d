"""Server configuration.

Usage:
    from artinit.config import ServerConfigStore

    store = ServerConfigStore()
    server_id = store.get_default_server_id()
"""

from artinit.config.servers import ServerConfigStore, ServerDetails

__all__ = [
    "ServerConfigStore",
    "ServerDetails",
]
