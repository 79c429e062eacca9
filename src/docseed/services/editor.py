"""
Editor collaborators: where selections come from and where warnings go.
"""
import logging
from pathlib import Path
from typing import Optional, Protocol

from rich.console import Console

from ..core.config import Config
from ..core.exceptions import SelectionError
from ..models.selection import ActiveTextEditorSelection
from .file_service import FileService

logger = logging.getLogger(__name__)


class Editor(Protocol):
    async def get_active_text_editor_selection_or_entire_file(self) -> Optional[ActiveTextEditorSelection]:
        ...

    async def show_warning_message(self, text: str) -> None:
        ...


class FileEditor:
    """
    Treats a file on disk as the active editor.

    Without a line range the whole file is the selection. With a 1-based, inclusive
    range, the lines before and after it become the preceding and following text.
    """

    def __init__(self, config: Config, file_path: Path | str,
                 start_line: Optional[int] = None, end_line: Optional[int] = None,
                 console: Optional[Console] = None):
        self.config = config
        self.file_path = Path(file_path)
        self.start_line = start_line
        self.end_line = end_line
        self.console = console or Console(stderr=True)
        self.file_service = FileService(config)

    async def get_active_text_editor_selection_or_entire_file(self) -> Optional[ActiveTextEditorSelection]:
        content = await self.file_service.read_file(self.file_path)
        if not content.strip():
            return None

        file_uri = self.file_path.as_posix()
        if self.start_line is None and self.end_line is None:
            return ActiveTextEditorSelection(
                file_uri=file_uri,
                selected_text=content,
                repo_name=self.config.repo_name,
            )

        lines = content.splitlines(keepends=True)
        start = self.start_line if self.start_line is not None else 1
        end = self.end_line if self.end_line is not None else len(lines)
        if start < 1 or end > len(lines) or start > end:
            raise SelectionError(self.file_path, start, end)

        selected = "".join(lines[start - 1:end])
        if not selected.strip():
            return None

        logger.debug(f"Selected lines {start}-{end} of {file_uri}")
        return ActiveTextEditorSelection(
            file_uri=file_uri,
            selected_text=selected,
            preceding_text="".join(lines[:start - 1]),
            following_text="".join(lines[end:]),
            repo_name=self.config.repo_name,
        )

    async def show_warning_message(self, text: str) -> None:
        logger.warning(text)
        self.console.print(f"[yellow]{text}[/yellow]")
