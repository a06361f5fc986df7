from .table import (
    HashTable,
    NotFound,
    TableAllocationError,
    TableFreedError,
    free_table,
    new_table,
)

__all__ = [
    "HashTable",
    "NotFound",
    "TableAllocationError",
    "TableFreedError",
    "free_table",
    "new_table",
]
