"""Commit workflow for opencommit.

This package contains:
- staging: StagingResolver, which decides the files of the commit
- push: PushResolver, which picks the remote to push to
- template: message template handling for pass-through arguments
- commit: the CommitWorkflow state machine
"""

from opencommit.workflow.commit import CommitOutcome, CommitWorkflow, WorkflowState
from opencommit.workflow.push import DONT_PUSH, PushResolver
from opencommit.workflow.staging import StagingResolver
from opencommit.workflow.template import apply_message_template


__all__ = [
    "CommitOutcome",
    "CommitWorkflow",
    "WorkflowState",
    "DONT_PUSH",
    "PushResolver",
    "StagingResolver",
    "apply_message_template",
]
