"""
Recipe that asks the model to document the selected code.
"""
import logging
from typing import Dict, Optional

from ..models.interaction import Interaction, PromptBundle, new_interaction
from ..utils.languages import (
    Language,
    language_display_name,
    language_from_filename,
    markdown_code_block_language_id_for_filename,
)
from ..utils.prompt_utils import MARKDOWN_FORMAT_PROMPT, get_context_messages_from_selection
from ..utils.truncation import CHARS_PER_TOKEN, truncate_text, truncate_text_start
from .recipe import RecipeContext

logger = logging.getLogger(__name__)

MAX_RECIPE_INPUT_TOKENS = 2000
MAX_RECIPE_SURROUNDING_TOKENS = 500

NO_SELECTION_WARNING = "No code selected. Please select some code and try again."

DEFAULT_INSTRUCTIONS = "Use the {language} documentation style to generate a {language} comment."

ADDITIONAL_INSTRUCTIONS: Dict[Language, str] = {
    Language.JAVA: "Use the JavaDoc documentation style to generate a Java comment.",
    Language.PYTHON: "Use a Python docstring to generate a Python multi-line string.",
}

DOC_STARTS: Dict[Language, str] = {
    Language.JAVA: "/*",
    Language.JAVASCRIPT: "/*",
    Language.TYPESCRIPT: "/*",
    Language.PYTHON: '"""\n',
    Language.GO: "// ",
}


def additional_instructions_for(language: Language, display_name: str) -> str:
    if language in ADDITIONAL_INSTRUCTIONS:
        return ADDITIONAL_INSTRUCTIONS[language]
    return DEFAULT_INSTRUCTIONS.format(language=display_name)


def doc_start_for(language: Language) -> str:
    return DOC_STARTS.get(language, "")


class GenerateDocstring:
    id = "generate-docstring"
    title = "Generate Docstring"

    async def get_interaction(self, human_chat_input: str, context: RecipeContext) -> Optional[Interaction]:
        bundle = await self.build_prompt_bundle(context)
        if bundle is None:
            return None
        return new_interaction(
            text=bundle.text,
            display_text=bundle.display_text,
            source=bundle.source,
            assistant_prefix=bundle.assistant_prefix,
            assistant_text=bundle.assistant_text,
            context_messages=bundle.context_messages,
        )

    async def build_prompt_bundle(self, context: RecipeContext) -> Optional[PromptBundle]:
        selection = await context.editor.get_active_text_editor_selection_or_entire_file()
        if not selection:
            logger.warning("Generate docstring requested without a selection")
            await context.editor.show_warning_message(NO_SELECTION_WARNING)
            return None

        config = context.config
        input_tokens = config.max_input_tokens if config else MAX_RECIPE_INPUT_TOKENS
        surrounding_tokens = config.max_surrounding_tokens if config else MAX_RECIPE_SURROUNDING_TOKENS
        chars_per_token = config.chars_per_token if config else CHARS_PER_TOKEN

        truncated_selected_text = truncate_text(selection.selected_text, input_tokens, chars_per_token)
        truncated_preceding_text = truncate_text_start(selection.preceding_text, surrounding_tokens, chars_per_token)
        truncated_following_text = truncate_text(selection.following_text, surrounding_tokens, chars_per_token)
        if len(truncated_selected_text) < len(selection.selected_text):
            logger.debug(f"Selected text truncated from {len(selection.selected_text)} "
                         f"to {len(truncated_selected_text)} characters")

        language = language_from_filename(selection.file_uri)
        display_name = language_display_name(selection.file_uri)
        logger.debug(f"Resolved language {display_name} for {selection.file_uri}")

        additional_instructions = additional_instructions_for(language, display_name)
        prompt_prefix = (
            f"Generate a comment documenting the parameters and functionality "
            f"of the following {display_name} code:"
        )
        prompt_message = (
            f"{prompt_prefix}\n```\n{truncated_selected_text}\n```\n"
            f"Only generate the documentation, do not generate the code. "
            f"{additional_instructions} {MARKDOWN_FORMAT_PROMPT}"
        )

        display_text = f"Generate documentation for the following code:\n```\n{selection.selected_text}\n```"

        code_block_id = markdown_code_block_language_id_for_filename(selection.file_uri)
        assistant_response_prefix = (
            f"Here is the generated documentation:\n```{code_block_id}\n{doc_start_for(language)}"
        )

        context_messages = await get_context_messages_from_selection(
            truncated_selected_text,
            truncated_preceding_text,
            truncated_following_text,
            selection,
            context.codebase_context,
        )
        logger.debug(f"Collected {len(context_messages)} context messages")

        return PromptBundle(
            text=prompt_message,
            display_text=display_text,
            source=self.id,
            assistant_prefix=assistant_response_prefix,
            assistant_text=assistant_response_prefix,
            context_messages=tuple(context_messages),
        )
