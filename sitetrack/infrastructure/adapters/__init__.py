"""
Record adapters for the data-store boundary.
"""
from .base_adapter import RecordAdapter, Dataset
from .remote_rows import RemoteRowAdapter
from .in_memory import InMemoryAdapter

__all__ = [
    'RecordAdapter',
    'Dataset',
    'RemoteRowAdapter',
    'InMemoryAdapter',
]
