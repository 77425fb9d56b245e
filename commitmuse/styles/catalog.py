"""Built-in style catalog and style resolution.

The catalog is constructed once at import and is read-only afterwards.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from commitmuse.styles.constants import CUSTOM_STYLE_ID, DEFAULT_STYLE_ID, StyleId
from commitmuse.styles.models import Style


BUILTIN_STYLES = (
    Style(
        id=StyleId.CONVENTIONAL.value,
        display_name="Conventional Commits",
        instruction=(
            "Generate a conventional commit message (feat:, fix:, docs:, style:, "
            "refactor:, test:, chore:). Be concise and descriptive."
        ),
        example="feat: add user authentication with JWT tokens",
    ),
    Style(
        id=StyleId.EMOJI.value,
        display_name="Emoji Style",
        instruction=(
            "Generate a commit message with relevant emojis. "
            "Use emojis that match the type of change."
        ),
        example="✨ Add user authentication with JWT tokens",
    ),
    Style(
        id=StyleId.CORPORATE.value,
        display_name="Corporate Professional",
        instruction=(
            "Generate a professional, formal commit message suitable for corporate "
            "environments. Focus on business impact and technical accuracy."
        ),
        example="Implement user authentication functionality using JWT tokens",
    ),
    Style(
        id=StyleId.CASUAL.value,
        display_name="Casual & Friendly",
        instruction=(
            "Generate a casual, friendly commit message that explains what was done "
            "in simple terms."
        ),
        example="Added login functionality so users can sign in securely",
    ),
    Style(
        id=StyleId.GENZ.value,
        display_name="Gen Z Vibes",
        instruction=(
            "Generate a fun, Gen Z style commit message with modern slang and energy. "
            "Keep it professional but with personality."
        ),
        example="no cap added fire auth system that actually slaps 🔥",
    ),
    Style(
        id=StyleId.TLDR.value,
        display_name="TLDR Dev",
        instruction=(
            "Generate a concise, developer-friendly commit message that quickly explains "
            "what changed. Use casual but clear language. Start with action verbs like "
            '"add", "fix", "update", "remove".'
        ),
        example="add jwt auth to login flow",
    ),
)


class StyleCatalog:
    """Immutable registry of built-in styles.

    Args:
        styles: Styles to register, in display order.
        default_id: Style returned for unknown or blank identifiers.
    """

    def __init__(self, styles: Iterable[Style], default_id: str = DEFAULT_STYLE_ID):
        self._styles: Mapping[str, Style] = MappingProxyType({s.id: s for s in styles})
        if default_id not in self._styles:
            raise ValueError(f"Default style {default_id!r} is not in the catalog")
        self._default_id = default_id

    def __contains__(self, style_id: object) -> bool:
        return style_id in self._styles

    def __len__(self) -> int:
        return len(self._styles)

    @property
    def default(self) -> Style:
        return self._styles[self._default_id]

    def get(self, style_id: str) -> Optional[Style]:
        return self._styles.get(style_id)

    def list_styles(self) -> list[Style]:
        """Return the built-in styles in display order."""
        return list(self._styles.values())

    def ids(self) -> list[str]:
        return list(self._styles)

    def resolve(self, style_id: object, custom_instruction: Optional[str] = None) -> Style:
        """Resolve a style identifier to a Style. Never raises.

        ``custom`` takes its instruction from ``custom_instruction``; a blank
        instruction, like any unknown identifier, resolves to the default
        style.

        Args:
            style_id: Identifier selected by the caller.
            custom_instruction: Instruction for the ``custom`` style.

        Returns:
            The resolved Style.
        """
        if style_id == CUSTOM_STYLE_ID:
            if custom_instruction and custom_instruction.strip():
                return Style.custom(custom_instruction)
            return self.default

        if isinstance(style_id, str) and style_id in self._styles:
            return self._styles[style_id]
        return self.default


STYLE_CATALOG = StyleCatalog(BUILTIN_STYLES)


def resolve_style(style_id: object, custom_instruction: Optional[str] = None) -> Style:
    """Resolve ``style_id`` against the process-wide catalog."""
    return STYLE_CATALOG.resolve(style_id, custom_instruction)


def list_styles() -> list[Style]:
    """List the built-in styles in display order."""
    return STYLE_CATALOG.list_styles()
