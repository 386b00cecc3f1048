"""The commit workflow: staging, generation, confirmation, commit and push.

States:
    SELECTING_FILES -> DIFF_COLLECTED -> MESSAGE_GENERATED -> AWAITING_CONFIRMATION
    AWAITING_CONFIRMATION -> REGENERATING -> MESSAGE_GENERATED
    AWAITING_CONFIRMATION -> CANCELLED
    AWAITING_CONFIRMATION -> COMMITTING -> COMMITTED
    COMMITTING -> AWAITING_PUSH -> PUSHED | SKIPPED

Hard errors (missing API key, no changes, engine and git failures) and
dismissed prompts propagate as exceptions.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from rich.console import Console
from rich.rule import Rule

from opencommit.config import ResolvedConfig
from opencommit.git.exceptions import NoChangesError
from opencommit.interactive import Prompter, console as default_console, loading_spinner
from opencommit.llm import get_engine, token_counter_for
from opencommit.llm.base import BaseEngine, build_request_messages
from opencommit.llm.exceptions import MissingAPIKeyError
from opencommit.llm.prompts import build_commit_prompt
from opencommit.llm.tokens import TokenBudget
from opencommit.workflow.push import PushResolver
from opencommit.workflow.staging import StagingResolver
from opencommit.workflow.template import apply_message_template

logger = logging.getLogger(__name__)

CONFIRM_PROMPT = "Confirm the commit message?"
REGENERATE_PROMPT = "Do you want to regenerate the message?"


class WorkflowState(Enum):
    """States of the commit workflow."""

    SELECTING_FILES = "selecting_files"
    DIFF_COLLECTED = "diff_collected"
    MESSAGE_GENERATED = "message_generated"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    REGENERATING = "regenerating"
    COMMITTING = "committing"
    AWAITING_PUSH = "awaiting_push"
    PUSHED = "pushed"
    SKIPPED = "skipped"
    COMMITTED = "committed"
    CANCELLED = "cancelled"


@dataclass
class CommitOutcome:
    """Result of one workflow run."""

    message: str
    committed: bool
    pushed: Optional[str]
    state: WorkflowState


class CommitWorkflow:
    """Runs the commit workflow for one invocation.

    Args:
        config: The configuration snapshot for this invocation.
        repo: Repository collaborator (see opencommit.git.GitRepository).
        prompter: Interactive prompt collaborator.
        engine: Engine to use. Built from config on first use when omitted.
        console: Console for user-facing output.
        budget: Token budget for the pre-flight check. Built from config
            when omitted.
    """

    def __init__(
        self,
        config: ResolvedConfig,
        repo,
        prompter: Prompter,
        engine: Optional[BaseEngine] = None,
        console: Optional[Console] = None,
        budget: Optional[TokenBudget] = None,
    ):
        self.config = config
        self.repo = repo
        self.prompter = prompter
        self.engine = engine
        self.console = console or default_console
        self.budget = budget or TokenBudget(
            config.tokens_max_input,
            config.tokens_max_output,
            counter=token_counter_for(config.ai_provider),
        )
        self.state: Optional[WorkflowState] = None
        self.history: list[WorkflowState] = []

    def _transition(self, state: WorkflowState) -> None:
        logger.debug("Workflow state: %s", state.value)
        self.state = state
        self.history.append(state)

    def run(
        self,
        extra_args: Optional[list[str]] = None,
        context: str = "",
        stage_all: bool = False,
        full_emoji_spec: bool = False,
        skip_confirmation: bool = False,
    ) -> CommitOutcome:
        """Run the workflow to a terminal state.

        Args:
            extra_args: Arguments forwarded to `git commit`, possibly
                including a message template argument.
            context: Free-text context for the prompt.
            stage_all: Stage every changed file without asking.
            full_emoji_spec: Use the full GitMoji legend in emoji mode.
            skip_confirmation: Commit without asking for confirmation.

        Returns:
            The outcome. A declined message without regeneration ends in
            the CANCELLED state with nothing committed.

        Raises:
            NoChangesError: If there is nothing to commit.
            MissingAPIKeyError: If the provider needs an API key and none is set.
            UserCancelledError: If a staging or confirmation prompt is dismissed.
            LLMError: If generation fails.
            GitError: If a git command fails.
        """
        extra_args = list(extra_args or [])

        self._transition(WorkflowState.SELECTING_FILES)
        files = self._resolve_files(stage_all)
        diff = self.repo.diff_text(files)
        self._transition(WorkflowState.DIFF_COLLECTED)

        if self.config.requires_api_key and not self.config.api_key:
            raise MissingAPIKeyError(
                f"No API key configured for provider '{self.config.ai_provider.value}'. "
                "Set it with: oco config set api_key=<your key>"
            )

        messages = build_commit_prompt(self.config, full_emoji_spec, context)
        self.budget.check([m.content for m in build_request_messages(messages, diff)])

        engine = self.engine or get_engine(self.config)

        while True:
            with loading_spinner("Generating the commit message", self.console):
                generated = engine.generate_commit_message(messages, diff)
            message, commit_args = apply_message_template(
                generated, extra_args, self.config.message_template_placeholder
            )
            self._transition(WorkflowState.MESSAGE_GENERATED)
            self._show_message(message)

            self._transition(WorkflowState.AWAITING_CONFIRMATION)
            if skip_confirmation or self.prompter.confirm(CONFIRM_PROMPT, default=True):
                break

            if not self.prompter.confirm(REGENERATE_PROMPT, default=False):
                self._transition(WorkflowState.CANCELLED)
                return CommitOutcome(message=message, committed=False, pushed=None, state=self.state)

            self._transition(WorkflowState.REGENERATING)

        self._commit(message, commit_args)

        pushed = None
        if self.config.gitpush:
            pushed = self._push()

        return CommitOutcome(message=message, committed=True, pushed=pushed, state=self.state)

    def _resolve_files(self, stage_all: bool) -> list[str]:
        resolver = StagingResolver(
            self.repo,
            self.prompter,
            self.repo.ignore_patterns(),
            console=self.console,
        )
        files = resolver.resolve(stage_all=stage_all)
        if not files:
            raise NoChangesError("No changes detected, write some code and run `oco` again")

        self.console.print(f"{len(files)} staged files:")
        for path in files:
            self.console.print(f"  {path}", markup=False, highlight=False, soft_wrap=True)
        return files

    def _show_message(self, message: str) -> None:
        self.console.print()
        self.console.print("[green]Generated commit message:[/green]")
        self.console.print(Rule(style="bright_black"))
        self.console.print(message, markup=False, highlight=False, soft_wrap=True)
        self.console.print(Rule(style="bright_black"))

    def _commit(self, message: str, commit_args: list[str]) -> None:
        self._transition(WorkflowState.COMMITTING)
        with loading_spinner("Committing the changes", self.console):
            output = self.repo.commit(message, commit_args)
        self.console.print("[green]✔[/green] Successfully committed")
        if output:
            self.console.print(output, markup=False, highlight=False)
        self._transition(WorkflowState.COMMITTED)

    def _push(self) -> Optional[str]:
        remotes = self.repo.remotes()
        if not remotes:
            logger.debug("No remotes configured, skipping push")
            return None

        self._transition(WorkflowState.AWAITING_PUSH)
        remote = PushResolver(self.prompter).resolve_push_target(remotes)
        if remote is None:
            self.console.print("[yellow]`git push` aborted[/yellow]")
            self._transition(WorkflowState.SKIPPED)
            return None

        with loading_spinner(f"Running 'git push {remote}'", self.console):
            output = self.repo.push(remote)
        self.console.print(f"[green]✔[/green] Successfully pushed all commits to {remote}")
        if output:
            self.console.print(output, markup=False, highlight=False)
        self._transition(WorkflowState.PUSHED)
        return remote
