"""Constants for commitmuse styles module.

Contains:
- StyleId: Identifiers of the built-in styles
- CUSTOM_STYLE_ID: Pseudo-style whose instruction comes from configuration
- CONVENTIONAL_TYPES: Action to Conventional Commits type mapping
- ACTION_EMOJIS: Action to emoji mapping for the emoji style
"""

from enum import Enum


class StyleId(str, Enum):
    """Built-in commit message styles ("vibes")."""

    CONVENTIONAL = "conventional"
    EMOJI = "emoji"
    CORPORATE = "corporate"
    CASUAL = "casual"
    GENZ = "genz"
    TLDR = "tldr"


CUSTOM_STYLE_ID = "custom"
DEFAULT_STYLE_ID = StyleId.CONVENTIONAL.value

# Heuristic action tokens
ACTION_ADD = "add"
ACTION_REMOVE = "remove"
ACTION_TEST = "test"
ACTION_CONFIGURE = "configure"
ACTION_REFACTOR = "refactor"
ACTION_UPDATE_DEPENDENCIES = "update dependencies"
ACTION_DOCUMENT = "document"
ACTION_STYLE = "style"
ACTION_UPDATE = "update"

# Conventional Commits type per heuristic action; anything else is "feat"
CONVENTIONAL_TYPES = {
    ACTION_ADD: "feat",
    ACTION_REMOVE: "refactor",
    ACTION_TEST: "test",
    ACTION_DOCUMENT: "docs",
    ACTION_STYLE: "style",
    ACTION_CONFIGURE: "chore",
    ACTION_UPDATE_DEPENDENCIES: "chore",
}
DEFAULT_CONVENTIONAL_TYPE = "feat"

ACTION_EMOJIS = {
    ACTION_ADD: "✨",
    ACTION_REMOVE: "🗑️",
    ACTION_TEST: "🧪",
    ACTION_DOCUMENT: "📝",
    ACTION_STYLE: "💄",
    ACTION_CONFIGURE: "⚙️",
    ACTION_UPDATE_DEPENDENCIES: "⬆️",
    ACTION_REFACTOR: "♻️",
}
DEFAULT_ACTION_EMOJI = "🔧"

FIRE_EMOJI = "🔥"
