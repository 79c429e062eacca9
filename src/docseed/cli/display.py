from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from ..models.interaction import Interaction
from ..utils.languages import EXTENSION_LANGUAGES, markdown_code_block_language_id_for_filename

console = Console()


def show_interaction(interaction: Interaction, out: Console = console):
    """Render an interaction as panels: what the user sees, what the model gets."""
    human = interaction.human_message
    assistant = interaction.assistant_message

    out.print(Panel(
        Syntax(human.display_text or "", "markdown", theme="github-dark", word_wrap=True),
        title="Request", border_style="cyan"
    ))
    out.print(Panel(
        Syntax(human.text, "markdown", theme="github-dark", word_wrap=True),
        title=f"Prompt ({interaction.source})", border_style="blue"
    ))
    out.print(Panel(
        Syntax(assistant.prefix or "", "markdown", theme="github-dark", word_wrap=True),
        title="Assistant prefix", border_style="green"
    ))

    if interaction.context_messages:
        table = Table(title="Context messages")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Speaker", style="cyan")
        table.add_column("File", style="magenta")
        table.add_column("Characters", justify="right")
        for i, message in enumerate(interaction.context_messages, start=1):
            file_name = message.file.file_name if message.file else ""
            table.add_row(str(i), message.speaker, file_name, str(len(message.text)))
        out.print(table)
    else:
        out.print("[dim]No context messages.[/dim]")


def show_languages(out: Console = console):
    table = Table(title="Supported languages")
    table.add_column("Extension", style="cyan")
    table.add_column("Language", style="green")
    table.add_column("Fence", style="magenta")
    for ext, language in sorted(EXTENSION_LANGUAGES.items()):
        table.add_row(ext, language.value, markdown_code_block_language_id_for_filename(f"file{ext}"))
    out.print(table)
