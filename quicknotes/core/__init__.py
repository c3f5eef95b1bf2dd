from .filenames import is_note_filename, is_plain_filename, note_filename
from .summary import summarize

__all__ = ["is_note_filename",
           "is_plain_filename",
           "note_filename",
           "summarize"
           ]
