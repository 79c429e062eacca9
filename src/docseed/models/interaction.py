"""
Prompt bundle and interaction models handed to the completion pipeline
"""
from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple

HUMAN = "human"
ASSISTANT = "assistant"


@dataclass(frozen=True)
class ContextFile:
    file_name: str
    repo_name: Optional[str] = None
    revision: Optional[str] = None


@dataclass(frozen=True)
class ContextMessage:
    """Auxiliary message giving the model background code beyond the main prompt."""
    speaker: str
    text: str
    file: Optional[ContextFile] = None


@dataclass(frozen=True)
class PromptBundle:
    """
    Everything a recipe produces for one request.

    `assistant_prefix` and `assistant_text` carry the same string: the start of the
    answer the model is expected to continue.
    """
    text: str
    display_text: str
    source: str
    assistant_prefix: str
    assistant_text: str
    context_messages: Tuple[ContextMessage, ...] = ()


@dataclass
class Message:
    speaker: str
    text: str
    display_text: Optional[str] = None
    prefix: Optional[str] = None


@dataclass
class Interaction:
    human_message: Message
    assistant_message: Message
    context_messages: List[ContextMessage] = field(default_factory=list)
    source: str = ""
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_chat(self) -> List[Dict[str, str]]:
        """Flatten into the ordered chat messages a completion pipeline receives."""
        chat = [{"speaker": m.speaker, "text": m.text} for m in self.context_messages]
        chat.append({"speaker": HUMAN, "text": self.human_message.text})
        if self.assistant_message.prefix:
            chat.append({"speaker": ASSISTANT, "text": self.assistant_message.prefix})
        return chat


def new_interaction(
    text: str,
    display_text: str,
    source: str,
    assistant_prefix: str = "",
    assistant_text: str = "",
    context_messages: Sequence[ContextMessage] = (),
) -> Interaction:
    return Interaction(
        human_message=Message(speaker=HUMAN, text=text, display_text=display_text),
        assistant_message=Message(speaker=ASSISTANT, text=assistant_text, prefix=assistant_prefix),
        context_messages=list(context_messages),
        source=source,
    )
