"""Storage and file adapters consumed by the task store."""

from tasklist_mcp.adapters.files import FileAdapter, LocalFileAdapter, export_filename
from tasklist_mcp.adapters.storage import (
    JsonFileStorage,
    MemoryStorage,
    StorageAdapter,
    StorageQuotaExceeded,
)

__all__ = [
    "StorageAdapter",
    "MemoryStorage",
    "JsonFileStorage",
    "StorageQuotaExceeded",
    "FileAdapter",
    "LocalFileAdapter",
    "export_filename",
]
