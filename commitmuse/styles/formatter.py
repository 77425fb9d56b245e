"""Render heuristic commit messages in each style.

Format per style (scope segments are dropped when scope is empty):
    conventional:  <type>(<scope>): <action> <target>
    emoji:         <emoji> <scope>: <action> <target>
    corporate:     <scope>: <Action> <target> to enhance system functionality
    casual:        <scope>: <actioned> <target>
    genz:          <scope>: <actioned> <target> and it hits different 🔥
    other:         <scope>: <action> <target>
"""

from commitmuse.styles.constants import (
    ACTION_EMOJIS,
    CONVENTIONAL_TYPES,
    DEFAULT_ACTION_EMOJI,
    DEFAULT_CONVENTIONAL_TYPE,
    FIRE_EMOJI,
    StyleId,
)


def get_conventional_type(action: str) -> str:
    return CONVENTIONAL_TYPES.get(action, DEFAULT_CONVENTIONAL_TYPE)


def get_action_emoji(action: str) -> str:
    return ACTION_EMOJIS.get(action, DEFAULT_ACTION_EMOJI)


def past_tense(action: str) -> str:
    """Put the leading verb of ``action`` in the past tense.

    "add" -> "added", "configure" -> "configured",
    "update dependencies" -> "updated dependencies".
    """
    verb, sep, rest = action.partition(" ")
    if not verb or verb.endswith("ed"):
        return action
    if verb.endswith("e"):
        verb += "d"
    else:
        verb += "ed"
    return f"{verb}{sep}{rest}"


def format_message(action: str, scope: str, target: str, style_id: str) -> str:
    """Format a heuristic commit message for ``style_id``.

    Args:
        action: Action token (add, remove, refactor, ...).
        scope: Scope token, may be empty.
        target: What was changed (file base name or "<N> files").
        style_id: Resolved style identifier.

    Returns:
        The formatted, single-line message.
    """
    scope_prefix = f"{scope}: " if scope else ""

    if style_id == StyleId.CONVENTIONAL:
        commit_type = get_conventional_type(action)
        scope_part = f"({scope})" if scope else ""
        message = f"{commit_type}{scope_part}: {action} {target}"
    elif style_id == StyleId.EMOJI:
        message = f"{get_action_emoji(action)} {scope_prefix}{action} {target}"
    elif style_id == StyleId.CORPORATE:
        message = f"{scope_prefix}{action[:1].upper()}{action[1:]} {target} to enhance system functionality"
    elif style_id == StyleId.CASUAL:
        message = f"{scope_prefix}{past_tense(action)} {target}"
    elif style_id == StyleId.GENZ:
        message = f"{scope_prefix}{past_tense(action)} {target} and it hits different {FIRE_EMOJI}"
    else:
        message = f"{scope_prefix}{action} {target}"

    return message.strip()
