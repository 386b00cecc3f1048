"""Selection of the remote to push to after a commit."""

from typing import Optional

from opencommit.interactive import Prompter, UserCancelledError

DONT_PUSH = "don't push"
SELECT_REMOTE_PROMPT = "Choose a remote to push to:"


class PushResolver:
    """Asks the user whether, and where, to push."""

    def __init__(self, prompter: Prompter):
        self.prompter = prompter

    def resolve_push_target(self, remotes: list[str]) -> Optional[str]:
        """Pick the remote to push to.

        With no remotes there is nothing to ask. With one remote the user
        confirms the push; with several the user picks one or "don't push".
        A dismissed prompt counts as declining.

        Args:
            remotes: Names of the configured remotes.

        Returns:
            The chosen remote, or None to skip the push.
        """
        if not remotes:
            return None

        try:
            if len(remotes) == 1:
                remote = remotes[0]
                if self.prompter.confirm(f"Do you want to run `git push {remote}`?", default=True):
                    return remote
                return None

            choice = self.prompter.select(SELECT_REMOTE_PROMPT, list(remotes) + [DONT_PUSH])
        except UserCancelledError:
            return None

        return None if choice == DONT_PUSH else choice
