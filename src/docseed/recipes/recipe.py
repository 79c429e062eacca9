from dataclasses import dataclass, field
from typing import Optional, Protocol

from ..core.config import Config
from ..models.interaction import Interaction
from ..services.codebase_context import CodebaseContext, NullCodebaseContext
from ..services.editor import Editor


@dataclass
class RecipeContext:
    """Collaborators a recipe reads from while building its interaction."""
    editor: Editor
    codebase_context: CodebaseContext = field(default_factory=NullCodebaseContext)
    config: Optional[Config] = None


class Recipe(Protocol):
    id: str
    title: str

    async def get_interaction(self, human_chat_input: str, context: RecipeContext) -> Optional[Interaction]:
        ...
