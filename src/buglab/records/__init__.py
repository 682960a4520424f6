"""Record persistence for the maze optimizer."""

from .record_store import RecordStore, create_record_store

__all__ = [
    'RecordStore',
    'create_record_store'
]
