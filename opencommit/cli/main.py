"""Default CLI command: generate a commit message and commit."""

import logging
from typing import Optional

import typer
from rich.markup import escape

from opencommit import __version__
from opencommit.config import ConfigError, load_config
from opencommit.git import GitError, NoChangesError, open_repo
from opencommit.i18n import UnsupportedLanguageError
from opencommit.interactive import Prompter, UserCancelledError, console
from opencommit.llm import LLMError, MissingAPIKeyError
from opencommit.log_setup import setup_logging
from opencommit.workflow import CommitWorkflow, WorkflowState

logger = logging.getLogger(__name__)


def commit_command(
    ctx: typer.Context,
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Skip the commit confirmation prompt.",
    ),
    fgm: bool = typer.Option(
        False,
        "--fgm",
        help="Use the full GitMoji legend in emoji mode.",
    ),
    context: Optional[str] = typer.Option(
        None,
        "--context",
        "-c",
        help="Additional context for the commit message.",
    ),
    stage_all: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Stage all changed files before generating the message.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging.",
    ),
) -> None:
    """Generate a commit message for the staged changes and commit.

    Any other arguments are passed to `git commit`. An argument containing
    the message template placeholder (default "$msg") becomes the commit
    message, with the generated text substituted for the placeholder.
    """
    setup_logging(verbose)
    console.print(f"[bold bright_blue]OpenCommit[/bold bright_blue] v{__version__}")

    try:
        config = load_config()
        repo = open_repo()

        workflow = CommitWorkflow(config, repo, Prompter(), console=console)
        outcome = workflow.run(
            extra_args=list(ctx.args),
            context=context or "",
            stage_all=stage_all,
            full_emoji_spec=fgm,
            skip_confirmation=yes,
        )
    except NoChangesError as e:
        console.print(f"[yellow]{escape(str(e))}[/yellow]", soft_wrap=True)
        raise typer.Exit(1)
    except UserCancelledError as e:
        console.print(f"[yellow]Cancelled: {escape(str(e))}[/yellow]")
        raise typer.Exit(1)
    except MissingAPIKeyError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)
    except GitError as e:
        console.print(f"[red]Git error: {escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)
    except LLMError as e:
        console.print(f"[red]LLM error: {escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)
    except (ConfigError, UnsupportedLanguageError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        console.print(f"[red]Error: {escape(str(e) or type(e).__name__)}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    if outcome.state == WorkflowState.CANCELLED:
        console.print("[yellow]Commit cancelled.[/yellow]")
        raise typer.Exit(0)
