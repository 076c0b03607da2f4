import logging
from pathlib import Path
from typing import Annotated

import typer

from ._config import SkillsConfig
from ._logging import configure_logging
from .errors import SkillError, SkillValidationError
from .fs import LocalFileSystem
from .models import SkillWithLocation
from .parser import find_skill_md, read_properties, resolve_skill_path
from .prompts import to_prompt_with_location
from .validator import validate_skill

logger = logging.getLogger(__name__)

app = typer.Typer(help="Read and validate Agent Skills (SKILL.md) directories.", no_args_is_help=True)


@app.callback()
def main(
    ctx: typer.Context,
    skills_folder: Annotated[
        str | None,
        typer.Option("--skills-folder", help="Base folder for relative skill paths (default: $SKILLS_FOLDER)"),
    ] = None,
    log_level: Annotated[str | None, typer.Option("--log-level", help="Log level (default: $LOG_LEVEL or INFO)")] = None,
):
    configure_logging(log_level)
    ctx.obj = SkillsConfig(skills_folder)


def _skill_path(ctx: typer.Context, path: Path) -> Path:
    return resolve_skill_path(ctx.obj.resolve(path))


@app.command("validate")
def validate_command(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Path to skill directory or SKILL.md file")],
):
    """Validate a skill directory."""
    skill_path = _skill_path(ctx, path)
    try:
        validate_skill(LocalFileSystem(), skill_path)
    except SkillValidationError as e:
        typer.echo(f"✗ Validation failed: {'; '.join(e.errors)}", err=True)
        raise typer.Exit(code=1)
    except SkillError as e:
        typer.echo(f"✗ Validation failed: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo("✓ Skill is valid")


@app.command("read-properties")
def read_properties_command(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Path to skill directory or SKILL.md file")],
):
    """Read and print skill properties as JSON."""
    skill_path = _skill_path(ctx, path)
    try:
        props, _ = read_properties(LocalFileSystem(), skill_path)
    except SkillError as e:
        typer.echo(f"✗ Failed to read properties: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(props.to_json())


@app.command("to-prompt")
def to_prompt_command(
    ctx: typer.Context,
    paths: Annotated[list[Path] | None, typer.Argument(help="Paths to skill directories or SKILL.md files")] = None,
):
    """Generate <available_skills> XML for agent prompts."""
    fs = LocalFileSystem()
    skills = []
    had_error = False

    for path in paths or []:
        skill_path = _skill_path(ctx, path)
        try:
            props, _ = read_properties(fs, skill_path)
        except SkillError as e:
            typer.echo(f"✗ Failed to read skill from {path}: {e}", err=True)
            had_error = True
            continue
        skills.append(SkillWithLocation(properties=props, location=str(find_skill_md(fs, skill_path))))

    if had_error and not skills:
        logger.error("None of the given paths contained a readable skill")
        raise typer.Exit(code=1)

    typer.echo(to_prompt_with_location(skills))


def run():
    app()


if __name__ == "__main__":
    run()
