import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

import click
import yaml
from rich.console import Console

from ..core.config import Config
from ..core.exceptions import ConfigurationError, DocseedError
from ..core.logger import setup_logging
from ..recipes.generate_docstring import GenerateDocstring
from ..recipes.recipe import Recipe, RecipeContext
from ..services.codebase_context import LocalCodebaseContext, NullCodebaseContext
from ..services.editor import FileEditor
from . import display

console = Console()


@click.group()
@click.option('--config', '-c', type=click.Path(exists=True, dir_okay=False), help='Config file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, config: Optional[str], verbose: bool):
    """
    docseed - build documentation-comment prompts for selected code.

    Run `docseed docstring FILE` to see the request that would be sent to the model.
    """
    setup_logging(verbose)
    try:
        ctx.obj = Config(config_path=Path(config) if config else None)
    except ConfigurationError as e:
        console.print(f"[red]Configuration Error: {e}[/red]")
        sys.exit(1)


@cli.command()
@click.argument('file', type=click.Path(dir_okay=False))
@click.option('--start-line', '-s', type=int, help='First selected line (1-based)')
@click.option('--end-line', '-e', type=int, help='Last selected line (inclusive)')
@click.option('--format', '-f', 'output_format', type=click.Choice(['rich', 'json', 'yaml']),
              default='rich', show_default=True, help='Output format')
@click.option('--no-context', is_flag=True, help='Do not search the repository for related code')
@click.pass_obj
def docstring(config: Config, file: str, start_line: Optional[int], end_line: Optional[int],
              output_format: str, no_context: bool):
    """Build the docstring request for FILE or a line range of it."""
    editor = FileEditor(config, file, start_line=start_line, end_line=end_line)
    if no_context:
        codebase_context = NullCodebaseContext()
    else:
        codebase_context = LocalCodebaseContext(config, config.work_dir, exclude=file)
    recipe_context = RecipeContext(editor=editor, codebase_context=codebase_context, config=config)
    recipe: Recipe = GenerateDocstring()

    try:
        interaction = asyncio.run(recipe.get_interaction("", recipe_context))
    except DocseedError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    if interaction is None:
        return

    if output_format == 'json':
        click.echo(json.dumps(interaction.to_dict(), indent=2))
    elif output_format == 'yaml':
        click.echo(yaml.safe_dump(interaction.to_dict(), sort_keys=False, allow_unicode=True))
    else:
        display.show_interaction(interaction)


@cli.command()
def languages():
    """List the file extensions docseed recognizes."""
    display.show_languages()


def main():
    cli()

if __name__ == '__main__':
    main()
