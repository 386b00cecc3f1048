"""Prompt assembly for commit message generation.

The prompt is a system instruction followed by a one-shot exemplar: a
fixed example diff as a user turn and the matching commit message, in the
configured language and emoji mode, as an assistant turn.
"""

from opencommit.config import ResolvedConfig
from opencommit.i18n import get_translation
from opencommit.llm.base import Message
from opencommit.llm.prompts.gitmoji import (
    CONVENTIONAL_COMMIT_KEYWORDS,
    FULL_GITMOJI_SPEC,
    GITMOJI_HELP,
)

IDENTITY = "You are to act as an author of a commit message in git."

WHY_CLAUSE = "and WHY the changes were done"

DESCRIPTION_CLAUSE = (
    "Add a short description of WHY the changes are done after the commit message. "
    "Don't start it with \"This commit\", just describe the changes."
)
NO_DESCRIPTION_CLAUSE = "Don't add any descriptions to the commit, only commit message."

ONE_LINE_CLAUSE = (
    "Craft a concise commit message that encapsulates all changes made, with an "
    "emphasis on the primary updates. If the modifications share a common theme "
    "or scope, mention it succinctly; otherwise, leave the scope out to maintain "
    "focus. The goal is to provide a clear and unified overview of the changes in "
    "a one single message, without diverging into a list of commit per file change."
)

USER_CONTEXT_TEMPLATE = (
    "Additional context provided by the user: <context>{context}</context>\n"
    "Consider this context when generating the commit message, incorporating "
    "relevant information when appropriate."
)

SYSTEM_PROMPT_TEMPLATE = """{identity} Your mission is to create clean and comprehensive commit messages and explain WHAT were the changes {why}.
I'll send you an output of 'git diff --staged' command, and you are to convert it into a commit message.
{convention}
{description}
{one_line}
Use the present tense. Lines must not be longer than 74 characters. Use {language} for the commit message.
{user_context}"""

# Example diff paired with the exemplar answer
INIT_DIFF = """diff --git a/src/server.ts b/src/server.ts
index ad4db42..f3b18a9 100644
--- a/src/server.ts
+++ b/src/server.ts
@@ -10,7 +10,7 @@ import {
 initWinstonLogger();

 const app = express();
-const port = 7799;
+const PORT = 7799;

 app.use(express.json());

@@ -34,6 +34,6 @@ app.use((_, res, next) => {
 // ROUTES
 app.use(PROTECTED_ROUTER_URL, protectedRouter);

-app.listen(port, () => {
-  console.log(`Server listening on port ${port}`);
+app.listen(process.env.PORT || PORT, () => {
+  console.log(`Server listening on port ${PORT}`);
 });"""


def _strip_keyword(message: str, keyword: str) -> str:
    """Remove the first occurrence of a commit keyword and leading spaces."""
    return message.replace(keyword, "", 1).lstrip()


def build_system_prompt(
    config: ResolvedConfig,
    full_emoji_spec: bool = False,
    context: str = "",
) -> str:
    """Build the system instruction.

    Args:
        config: The resolved configuration.
        full_emoji_spec: Use the full GitMoji legend instead of the short one.
        context: Free-text context from the user; omitted when empty.

    Returns:
        The system message text.

    Raises:
        UnsupportedLanguageError: If the configured language has no translation.
    """
    translation = get_translation(config.language)

    if config.emoji:
        convention = FULL_GITMOJI_SPEC if full_emoji_spec else GITMOJI_HELP
    else:
        convention = CONVENTIONAL_COMMIT_KEYWORDS

    return SYSTEM_PROMPT_TEMPLATE.format(
        identity=IDENTITY,
        why=WHY_CLAUSE if config.why else "",
        convention=convention,
        description=DESCRIPTION_CLAUSE if config.description else NO_DESCRIPTION_CLAUSE,
        one_line=ONE_LINE_CLAUSE if config.one_line_commit else "",
        language=translation.local_language,
        user_context=USER_CONTEXT_TEMPLATE.format(context=context) if context else "",
    )


def build_exemplar_message(config: ResolvedConfig) -> str:
    """Build the example commit message that answers INIT_DIFF."""
    translation = get_translation(config.language)
    description = translation.commit_description if config.description else ""

    if config.emoji:
        fix = _strip_keyword(translation.commit_fix, "fix")
        feat = _strip_keyword(translation.commit_feat, "feat")
        return f"🐛 {fix}\n✨ {feat}\n{description}"

    return f"{translation.commit_fix}\n{translation.commit_feat}\n{description}"


def build_commit_prompt(
    config: ResolvedConfig,
    full_emoji_spec: bool = False,
    context: str = "",
) -> list[Message]:
    """Assemble the prompt for commit message generation.

    Args:
        config: The resolved configuration.
        full_emoji_spec: Use the full GitMoji legend instead of the short one.
        context: Free-text context from the user.

    Returns:
        The messages [system, example diff, example answer].

    Raises:
        UnsupportedLanguageError: If the configured language has no translation.
    """
    return [
        Message.system(build_system_prompt(config, full_emoji_spec, context)),
        Message.user(INIT_DIFF),
        Message.assistant(build_exemplar_message(config)),
    ]
