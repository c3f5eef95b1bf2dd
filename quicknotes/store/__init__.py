from .filesystem import atomic_write_text
from .repo import NoteEntry, NoteStore

__all__ = ["atomic_write_text",
           "NoteEntry",
           "NoteStore"
           ]
