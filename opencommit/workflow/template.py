"""Message template handling for pass-through commit arguments.

A pass-through argument containing the configured placeholder (default
"$msg") is a template for the final commit message: the generated message
is substituted for the placeholder and the argument itself is not
forwarded to `git commit`.
"""

from typing import Optional


def find_template_argument(extra_args: list[str], placeholder: str) -> Optional[int]:
    """Get the index of the first argument containing the placeholder."""
    for index, arg in enumerate(extra_args):
        if placeholder in arg:
            return index
    return None


def apply_message_template(
    message: str,
    extra_args: list[str],
    placeholder: str,
) -> tuple[str, list[str]]:
    """Apply a message template from the pass-through arguments, if any.

    Args:
        message: The generated commit message.
        extra_args: Arguments that will be forwarded to `git commit`.
        placeholder: The placeholder token, e.g. "$msg".

    Returns:
        A tuple of (final commit message, arguments left to forward).
        Without a template argument the message and arguments are
        returned unchanged.
    """
    index = find_template_argument(extra_args, placeholder)
    if index is None:
        return message, list(extra_args)

    template = extra_args[index]
    remaining = extra_args[:index] + extra_args[index + 1:]
    return template.replace(placeholder, message), remaining
