import logging
import aiofiles
from pathlib import Path
from ..core.config import Config
from ..core.exceptions import FileServiceError

logger = logging.getLogger(__name__)

class FileService:
    """Service for asynchronous file reads inside the configured work dir."""

    def __init__(self, config: Config):
        self.config = config
        self.work_dir = config.work_dir

    def resolve(self, file_path: Path | str) -> Path:
        """Resolve a path against the work dir, rejecting anything outside it."""
        full_path = self.work_dir.joinpath(file_path).resolve()
        try:
            full_path.relative_to(self.work_dir)
        except ValueError:
            raise FileServiceError(f"Security error: Attempted to read file outside of project directory: {full_path}")
        return full_path

    def is_supported(self, path: Path) -> bool:
        # Allow supported extensions or files with no extension (like Dockerfile)
        return (
            not path.suffix
            or path.suffix in self.config.supported_extensions
            or path.name in self.config.supported_extensions
        )

    async def read_file(self, file_path: Path | str) -> str:
        """Read file content asynchronously, with validation."""
        full_path = self.resolve(file_path)

        if not full_path.is_file():
            raise FileServiceError(f"File not found: {full_path}")

        size = full_path.stat().st_size
        if size > self.config.max_file_size:
            raise FileServiceError(f"File is too large: {full_path} ({size} bytes)")

        if not self.is_supported(full_path):
            raise FileServiceError(f"Unsupported file type: {full_path.suffix}")

        try:
            async with aiofiles.open(full_path, 'r', encoding='utf-8') as f:
                content = await f.read()
        except UnicodeDecodeError:
            logger.error(f"Unicode decode error for file: {full_path}")
            raise FileServiceError(f"Unable to decode file as UTF-8: {full_path}")
        except OSError as e:
            logger.error(f"Unexpected error reading file {full_path}: {e}")
            raise FileServiceError(f"Error reading file {full_path}: {e}")

        logger.debug(f"Successfully read file: {full_path}")
        return content
