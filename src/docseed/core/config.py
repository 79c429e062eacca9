# src/docseed/core/config.py

import os
from pathlib import Path
from typing import Optional, List, Dict, Any
from dataclasses import dataclass, field
import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Define the project root to find the configs directory
try:
    PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
except Exception:
    PROJECT_ROOT = Path.cwd()

DEFAULT_CONFIG_NAME = "configs/docseed.yaml"

@dataclass
class Config:
    """Main configuration class"""
    config_path: Optional[Path] = None
    max_input_tokens: int = 2000
    max_surrounding_tokens: int = 500
    chars_per_token: int = 4
    work_dir: Path = field(default_factory=Path.cwd)
    max_file_size: int = 1024 * 1024
    supported_extensions: List[str] = field(default_factory=list)
    repo_name: Optional[str] = None

    def __post_init__(self):
        """Post-initialization logic to load configs."""
        if not self.supported_extensions:
            self.supported_extensions = [
                '.py', '.pyi', '.js', '.jsx', '.mjs', '.cjs', '.ts', '.tsx', '.java', '.go',
                '.c', '.h', '.cpp', '.cc', '.hpp', '.cs', '.rs', '.rb', '.php', '.kt',
                '.swift', '.scala', '.sh', '.html', '.css', '.scss', '.json', '.yaml',
                '.yml', '.sql', '.md', '.txt', 'Dockerfile', 'Makefile', '.toml', '.ini', '.cfg'
            ]
        self.work_dir = Path(self.work_dir).resolve()

        load_dotenv()

        if self.config_path is not None:
            self.config_path = Path(self.config_path)
            if not self.config_path.exists():
                raise ConfigurationError(f"Config file not found: {self.config_path}")
            self._load_from_file(self.config_path)
        else:
            for candidate in (PROJECT_ROOT / DEFAULT_CONFIG_NAME, Path.cwd() / DEFAULT_CONFIG_NAME):
                if candidate.exists():
                    self._load_from_file(candidate)
                    break

        self._load_from_env()
        self._validate()

    def _load_from_file(self, path: Path):
        """Load recipe settings from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing config file {path}: {e}")
        except OSError as e:
            raise ConfigurationError(f"Error reading config file {path}: {e}")

        if data is None:
            return
        if not isinstance(data, dict):
            raise ConfigurationError(f"Invalid config file format in {path}. Expected a mapping.")

        self._apply(data, source=str(path))

    def _load_from_env(self):
        """Load overrides from environment variables."""
        overrides: Dict[str, Any] = {}
        if os.getenv('DOCSEED_MAX_INPUT_TOKENS'):
            overrides['max_input_tokens'] = os.getenv('DOCSEED_MAX_INPUT_TOKENS')
        if os.getenv('DOCSEED_MAX_SURROUNDING_TOKENS'):
            overrides['max_surrounding_tokens'] = os.getenv('DOCSEED_MAX_SURROUNDING_TOKENS')
        if os.getenv('DOCSEED_REPO_NAME'):
            overrides['repo_name'] = os.getenv('DOCSEED_REPO_NAME')
        self._apply(overrides, source="environment")

    def _apply(self, data: Dict[str, Any], source: str):
        for key in ('max_input_tokens', 'max_surrounding_tokens', 'chars_per_token'):
            if key in data:
                try:
                    setattr(self, key, int(data[key]))
                except (TypeError, ValueError):
                    raise ConfigurationError(f"'{key}' must be an integer (from {source}), got {data[key]!r}.")
        if 'repo_name' in data:
            self.repo_name = data['repo_name'] or None
        if 'max_file_size' in data:
            try:
                self.max_file_size = int(data['max_file_size'])
            except (TypeError, ValueError):
                raise ConfigurationError(f"'max_file_size' must be an integer (from {source}).")

    def _validate(self):
        for key in ('max_input_tokens', 'max_surrounding_tokens', 'chars_per_token', 'max_file_size'):
            if getattr(self, key) <= 0:
                raise ConfigurationError(f"'{key}' must be positive, got {getattr(self, key)}.")
        if self.max_surrounding_tokens > self.max_input_tokens:
            raise ConfigurationError(
                f"'max_surrounding_tokens' ({self.max_surrounding_tokens}) cannot exceed "
                f"'max_input_tokens' ({self.max_input_tokens})."
            )
