import os
from pathlib import Path
from typing import Dict

from ..core.config import Config

EXCLUDED_DIRS = {'.git', 'node_modules', '__pycache__', 'venv', '.venv', 'build', 'dist', 'target', '.tox', '.mypy_cache'}


def build_repo_context(repo_path: Path, config: Config) -> Dict[str, str]:
    """
    Recursively collect the content of all supported text files in a directory.
    Skips common temporary/build directories and files above the size limit.
    """
    context = {}

    for root, dirs, files in os.walk(repo_path, topdown=True):
        dirs[:] = sorted(d for d in dirs if d not in EXCLUDED_DIRS)

        for file in sorted(files):
            file_path = Path(root) / file
            is_supported_name = file_path.name in config.supported_extensions
            is_supported_ext = file_path.suffix in config.supported_extensions
            if not (is_supported_name or is_supported_ext):
                continue
            try:
                if file_path.stat().st_size > config.max_file_size:
                    continue
                relative_path_str = file_path.relative_to(repo_path).as_posix()
                with open(file_path, 'r', encoding='utf-8', errors='ignore') as f:
                    context[relative_path_str] = f.read()
            except (IOError, OSError, UnicodeDecodeError):
                # Ignore files that can't be opened, read, or decoded
                continue
    return context
