"""
Codebase context providers used to enrich a prompt with related code.
"""
import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Set, Tuple

from ..core.config import Config
from ..models.interaction import ContextFile, ContextMessage
from ..utils.file_utils import build_repo_context
from ..utils.prompt_utils import get_context_message_with_response, populate_code_context_template
from ..utils.truncation import truncate_text

logger = logging.getLogger(__name__)

TERM_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]{2,}")


class CodebaseContext(Protocol):
    def check_embeddings_connection(self) -> bool:
        ...

    async def get_context_messages(self, query: str, num_code_results: int,
                                   num_text_results: int) -> List[ContextMessage]:
        ...


class NullCodebaseContext:
    """A codebase context that is never connected."""

    def check_embeddings_connection(self) -> bool:
        return False

    async def get_context_messages(self, query: str, num_code_results: int,
                                   num_text_results: int) -> List[ContextMessage]:
        return []


def extract_terms(text: str) -> Set[str]:
    return {term.lower() for term in TERM_PATTERN.findall(text)}


class LocalCodebaseContext:
    """
    Keyword-overlap search over the repository's text files.

    Files are ranked by how many distinct query terms they contain, ties broken by path.
    Only code results are produced; there is no prose index, so `num_text_results`
    has no effect.
    """

    def __init__(self, config: Config, repo_path: Optional[Path] = None, exclude: Optional[str] = None):
        self.config = config
        self.repo_path = Path(repo_path or config.work_dir).resolve()
        self.exclude = self._relative_to_repo(exclude) if exclude else None
        self._files: Optional[Dict[str, str]] = None
        self._terms: Dict[str, Set[str]] = {}

    def _index(self) -> Dict[str, str]:
        if self._files is None:
            self._files = build_repo_context(self.repo_path, self.config)
            self._terms = {path: extract_terms(content) for path, content in self._files.items()}
            logger.debug(f"Indexed {len(self._files)} files under {self.repo_path}")
        return self._files

    def check_embeddings_connection(self) -> bool:
        return bool(self._index())

    def _relative_to_repo(self, path: Path | str) -> Optional[str]:
        """Repo-relative POSIX form of a path, None when it lies outside the repo."""
        try:
            return Path(path).resolve().relative_to(self.repo_path).as_posix()
        except ValueError:
            return None

    def _is_excluded(self, path: str) -> bool:
        return self.exclude is not None and path == self.exclude

    def search(self, query: str, limit: int) -> List[Tuple[str, int]]:
        files = self._index()
        query_terms = extract_terms(query)
        if not query_terms or limit <= 0:
            return []

        scored = []
        for path in files:
            if self._is_excluded(path):
                continue
            score = len(query_terms & self._terms[path])
            if score:
                scored.append((path, score))
        scored.sort(key=lambda item: (-item[1], item[0]))
        return scored[:limit]

    async def get_context_messages(self, query: str, num_code_results: int,
                                   num_text_results: int) -> List[ContextMessage]:
        files = self._index()
        messages: List[ContextMessage] = []
        for path, score in self.search(query, num_code_results):
            snippet = truncate_text(files[path], self.config.max_surrounding_tokens, self.config.chars_per_token)
            logger.debug(f"Adding context from {path} (score {score})")
            messages.extend(get_context_message_with_response(
                populate_code_context_template(snippet, path, self.config.repo_name),
                ContextFile(file_name=path, repo_name=self.config.repo_name),
            ))
        return messages
