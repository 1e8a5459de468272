#!/usr/bin/env python3
"""
Résumé Preview and Export CLI

Renders a YAML résumé draft with one of the template variants, writes an HTML
preview or an A4 PDF, and runs the suggestion workflows against the draft.

Commands:
    variants - List the available template variants
    preview  - Write the on-screen preview as HTML
    export   - Export the print-mode render as PDF
    suggest  - Show bullet and skill suggestions for a draft

Examples:\n

    export_resume.py variants

    export_resume.py preview drafts/ada.yaml --template classic

    export_resume.py export drafts/ada.yaml --template minimal --output-dir outs/exports

    export_resume.py suggest drafts/ada.yaml --provider openai
"""

import asyncio
import os
from datetime import datetime
from pathlib import Path

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from vitae.contexts.editing import EditingSession, document_to_dict, load_draft
from vitae.contexts.rendering import ExportCoordinator, HTMLCapture, PDFCapture
from vitae.contexts.rendering.logger import setup_rendering_logger
from vitae.contexts.suggestions import (
    OpenAISuggestionProvider,
    StaticSuggestionProvider,
    SuggestionAdapter,
)
from vitae.contexts.templating import Variant, list_variants
from vitae.contexts.templating.logger import setup_templating_logger

load_dotenv()
LOGS_PATH = Path(os.getenv("VITAE_LOGS_PATH", "outs/logs"))
EXPORTS_PATH = Path(os.getenv("VITAE_EXPORTS_PATH", "outs/exports"))


def session_log_dir(command: str) -> Path:
    return LOGS_PATH / f"{command}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"


def resolve_variant(template: str) -> Variant:
    try:
        return Variant.parse(template)
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def load_draft_or_exit(draft: Path):
    try:
        return load_draft(draft)
    except (FileNotFoundError, ValueError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


app = typer.Typer(
    help="Preview and export résumé drafts with interchangeable templates",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("variants")
def variants_command():
    """List the available template variants."""
    typer.secho("\nTemplates:", fg=typer.colors.BLUE, bold=True)
    for info in list_variants():
        typer.echo(f"  {info.id.value:<8} {info.name} - {info.description}")
    typer.echo("")


@app.command("preview")
def preview_command(
    draft: Annotated[Path, typer.Argument(help="Path to YAML résumé draft")],
    template: Annotated[
        str,
        typer.Option("--template", "-t", help="Template variant (modern, classic, minimal)"),
    ] = Variant.MODERN.value,
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", "-o", help="Directory for the HTML preview"),
    ] = EXPORTS_PATH,
    print_mode: Annotated[
        bool,
        typer.Option("--print-mode", help="Write the print-mode tree instead of the screen tree"),
    ] = False,
):
    """
    Write a draft's preview as a standalone HTML file.

    Examples:\n

        $ export_resume.py preview drafts/ada.yaml

        $ export_resume.py preview drafts/ada.yaml -t classic --print-mode
    """
    variant = resolve_variant(template)
    setup_templating_logger(session_log_dir("preview"), variant.value)

    doc = load_draft_or_exit(draft)
    coordinator = ExportCoordinator(capture=HTMLCapture(output_dir=output_dir))
    tree = coordinator.print_tree(doc, variant) if print_mode else coordinator.preview(doc, variant)

    html_path = asyncio.run(coordinator.capture(tree, draft.with_suffix(".html").name))
    typer.secho(f"✓ Preview written: {html_path}", fg=typer.colors.GREEN, bold=True)


@app.command("export")
def export_command(
    draft: Annotated[Path, typer.Argument(help="Path to YAML résumé draft")],
    template: Annotated[
        str,
        typer.Option("--template", "-t", help="Template variant (modern, classic, minimal)"),
    ] = Variant.MODERN.value,
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", "-o", help="Directory for the exported PDF"),
    ] = EXPORTS_PATH,
):
    """
    Export a draft's print-mode render as an A4 PDF.

    The filename comes from the draft's personal_info.name ("resume.pdf" if blank).

    Examples:\n

        $ export_resume.py export drafts/ada.yaml

        $ export_resume.py export drafts/ada.yaml -t minimal -o outs/exports
    """
    variant = resolve_variant(template)
    log_file = setup_rendering_logger(session_log_dir("export"), variant.value)

    doc = load_draft_or_exit(draft)
    typer.secho(f"\nExporting: {draft.name}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Template: {variant.value}")
    typer.echo("")

    coordinator = ExportCoordinator(capture=PDFCapture(output_dir=output_dir))
    result = asyncio.run(coordinator.export(doc, variant))

    if result.success:
        typer.secho("✓ Export succeeded", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Sections: {', '.join(result.sections) or 'none'}")
        typer.echo(f"  PDF: {result.output_path}")
    else:
        typer.secho("✗ Export failed", fg=typer.colors.RED, bold=True)
        typer.secho(f"  - {result.error}", fg=typer.colors.RED)

    typer.echo(f"  Log: {log_file}")
    typer.echo("")
    raise typer.Exit(code=0 if result.success else 1)


@app.command("suggest")
def suggest_command(
    draft: Annotated[Path, typer.Argument(help="Path to YAML résumé draft")],
    provider: Annotated[
        str,
        typer.Option("--provider", "-p", help="Suggestion provider (static, openai)"),
    ] = "static",
    show_document: Annotated[
        bool,
        typer.Option("--show-document", help="Print the merged draft as YAML"),
    ] = False,
):
    """
    Generate bullets for every experience entry and merge skill suggestions.

    The draft file is not modified; use --show-document to print the merged result.

    Examples:\n

        $ export_resume.py suggest drafts/ada.yaml

        $ export_resume.py suggest drafts/ada.yaml --provider openai --show-document
    """
    if provider == "openai":
        try:
            suggestion_provider = OpenAISuggestionProvider()
        except ValueError as e:
            typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
    elif provider == "static":
        suggestion_provider = StaticSuggestionProvider()
    else:
        typer.secho(f"Error: unknown provider '{provider}'\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    session = EditingSession(load_draft_or_exit(draft))
    adapter = SuggestionAdapter(suggestion_provider)

    async def run():
        for entry in session.document.experience:
            bullets = await adapter.generate_bullets(session, entry.id)
            typer.secho(f"\n{entry.position or '(untitled role)'}", fg=typer.colors.BLUE, bold=True)
            for bullet in bullets:
                typer.echo(f"  - {bullet}")

        skills = await adapter.suggest_skills(session)
        typer.secho("\nSuggested skills:", fg=typer.colors.BLUE, bold=True)
        typer.echo(f"  {', '.join(skills) if skills else '(no experience position to base them on)'}")

    asyncio.run(run())

    if show_document:
        typer.echo("")
        typer.echo(OmegaConf.to_yaml(OmegaConf.create(document_to_dict(session.document))))
    typer.echo("")


if __name__ == "__main__":
    app()
