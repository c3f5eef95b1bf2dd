from .core.summary import summarize
from .errors import NoteStoreError, ReadError, StorageUnavailable, WriteError
from .store.repo import NoteEntry, NoteStore

__all__ = ['summarize',
           'NoteStoreError',
           'ReadError',
           'StorageUnavailable',
           'WriteError',
           'NoteEntry',
           'NoteStore'
           ]
