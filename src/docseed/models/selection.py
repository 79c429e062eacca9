"""
Editor selection snapshot
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ActiveTextEditorSelection:
    """
    Snapshot of the user's current selection, or of the entire file when nothing is selected.

    The preceding and following text are the parts of the file around the selection;
    both are empty when the selection covers the whole file.
    """
    file_uri: str  # Path or file URI of the document the selection belongs to.
    selected_text: str
    preceding_text: str = ""
    following_text: str = ""
    repo_name: Optional[str] = None
    revision: Optional[str] = None