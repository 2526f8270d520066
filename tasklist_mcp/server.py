"""FastMCP server initialization for the task list."""

import logging

from mcp.server.fastmcp import FastMCP

from tasklist_mcp.adapters.files import LocalFileAdapter
from tasklist_mcp.adapters.storage import JsonFileStorage, MemoryStorage, StorageAdapter
from tasklist_mcp.config import Settings, get_settings
from tasklist_mcp.logging_setup import setup_logging
from tasklist_mcp.store import TaskStore
from tasklist_mcp.tools.core import register_tools

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> TaskStore:
    """Construct the session's TaskStore from settings and load saved tasks."""
    storage: StorageAdapter
    if settings.storage_backend == "memory":
        storage = MemoryStorage()
    else:
        storage = JsonFileStorage(settings.storage_dir)
    return TaskStore(
        storage,
        LocalFileAdapter(),
        storage_key=settings.storage_key,
        export_dir=settings.export_dir.expanduser(),
    )


def create_server(store: TaskStore) -> FastMCP:
    """Create an MCP server whose tools operate on ``store``."""
    server = FastMCP("tasklist_mcp")
    register_tools(server, store)
    return server


def run() -> None:
    """Run the MCP server."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    store = build_store(settings)
    if store.last_error is not None:
        logger.warning("Starting with an empty list: %s", store.last_error)
    server = create_server(store)
    try:
        server.run()
    finally:
        # Flush once more on shutdown, like the widget's beforeunload save.
        store.save()
        logger.info("Task list server stopped: %s", store.describe())


if __name__ == "__main__":
    run()
