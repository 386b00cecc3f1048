"""Prompt templates for commit message generation.

This package contains:
- gitmoji: GitMoji legends and the conventional commit keyword clause
- commit: The system instruction, the exemplar pair and build_commit_prompt
"""

from opencommit.llm.prompts.gitmoji import (
    CONVENTIONAL_COMMIT_KEYWORDS,
    FULL_GITMOJI_SPEC,
    GITMOJI_HELP,
)
from opencommit.llm.prompts.commit import (
    IDENTITY,
    INIT_DIFF,
    build_commit_prompt,
    build_exemplar_message,
    build_system_prompt,
)


__all__ = [
    "CONVENTIONAL_COMMIT_KEYWORDS",
    "FULL_GITMOJI_SPEC",
    "GITMOJI_HELP",
    "IDENTITY",
    "INIT_DIFF",
    "build_commit_prompt",
    "build_exemplar_message",
    "build_system_prompt",
]
