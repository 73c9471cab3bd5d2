"""
Dataset loading and tabular reporting.
"""
from .loaders import DataLoader, load_dataset, snapshots_to_frame

__all__ = ['DataLoader', 'load_dataset', 'snapshots_to_frame']
