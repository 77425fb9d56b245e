"""Data models for commitmuse styles module.

Contains:
- Style: An immutable named tone/format template
"""

from pydantic import BaseModel, ConfigDict

from commitmuse.styles.constants import CUSTOM_STYLE_ID


class Style(BaseModel):
    """A commit message style.

    Attributes:
        id: Style identifier (case-sensitive).
        display_name: Human-readable name.
        instruction: Generation instruction sent to the backend.
        example: Illustrative output. Documentation only, never sent.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str
    instruction: str
    example: str = ""

    @property
    def is_custom(self) -> bool:
        return self.id == CUSTOM_STYLE_ID

    @classmethod
    def custom(cls, instruction: str) -> "Style":
        """Build the custom style from a caller-supplied instruction."""
        return cls(
            id=CUSTOM_STYLE_ID,
            display_name="Custom",
            instruction=instruction.strip(),
        )
