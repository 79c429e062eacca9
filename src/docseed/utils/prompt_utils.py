"""
Shared prompt fragments and helpers for turning code snippets into context messages.
"""
import logging
from typing import List, Optional, Sequence

from ..models.interaction import ASSISTANT, HUMAN, ContextFile, ContextMessage
from ..models.selection import ActiveTextEditorSelection
from .languages import markdown_code_block_language_id_for_filename

logger = logging.getLogger(__name__)

MARKDOWN_FORMAT_PROMPT = "Enclose code snippets with three backticks like so: ```."

NUM_CODE_RESULTS = 4
NUM_TEXT_RESULTS = 0


def populate_code_context_template(code: str, file_name: str, repo_name: Optional[str] = None) -> str:
    location = f"file `{file_name}`"
    if repo_name:
        location += f" in repository `{repo_name}`"
    fence = markdown_code_block_language_id_for_filename(file_name)
    return f"Use following code snippet from {location}:\n```{fence}\n{code}\n```"


def get_context_message_with_response(text: str, file: Optional[ContextFile] = None,
                                      response: str = "Ok.") -> List[ContextMessage]:
    return [
        ContextMessage(speaker=HUMAN, text=text, file=file),
        ContextMessage(speaker=ASSISTANT, text=response),
    ]


async def get_context_messages_from_selection(
    selected_text: str,
    preceding_text: str,
    following_text: str,
    selection: ActiveTextEditorSelection,
    codebase_context,
) -> List[ContextMessage]:
    """
    Collect background messages for a selection.

    Codebase results for the selected text come first, then one exchange each for the
    text before and after the selection. A blank preceding or following fragment gets
    no exchange at all rather than an empty code snippet, so a whole-file selection
    carries only the codebase results. Nothing is returned when the codebase context
    is not connected.
    """
    if not codebase_context.check_embeddings_connection():
        logger.debug("Codebase context is not connected; skipping context messages.")
        return []

    messages = list(await codebase_context.get_context_messages(
        selected_text, num_code_results=NUM_CODE_RESULTS, num_text_results=NUM_TEXT_RESULTS
    ))

    file = ContextFile(file_name=selection.file_uri, repo_name=selection.repo_name, revision=selection.revision)
    surrounding: Sequence[str] = (preceding_text, following_text)
    for text in surrounding:
        if not text.strip():
            continue
        messages.extend(get_context_message_with_response(
            populate_code_context_template(text, selection.file_uri, selection.repo_name), file
        ))
    return messages
