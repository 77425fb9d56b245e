"""Commit styles for commitmuse.

Supported styles ("vibes"):
- conventional: Conventional Commits (type(scope): subject)
- emoji: Gitmoji-like prefix per change type
- corporate: Formal, business-impact phrasing
- casual: Friendly past-tense phrasing
- genz: Slang with energy
- tldr: Terse developer phrasing
- custom: Instruction supplied by configuration

This package provides:
- constants: StyleId, CUSTOM_STYLE_ID, action tokens and mappings
- models: Style
- catalog: StyleCatalog, STYLE_CATALOG, resolve_style, list_styles
- formatter: format_message and helpers
- heuristic: network-free message generation from diff statistics
"""

# Constants
from commitmuse.styles.constants import (
    CUSTOM_STYLE_ID,
    DEFAULT_STYLE_ID,
    StyleId,
)

# Models
from commitmuse.styles.models import Style

# Catalog
from commitmuse.styles.catalog import (
    BUILTIN_STYLES,
    STYLE_CATALOG,
    StyleCatalog,
    list_styles,
    resolve_style,
)

# Formatter
from commitmuse.styles.formatter import (
    format_message,
    get_action_emoji,
    get_conventional_type,
    past_tense,
)

# Heuristic generation
from commitmuse.styles.heuristic import (
    DiffStats,
    FileCategories,
    analyze_diff,
    classify_files,
    heuristic_message,
    heuristic_summary,
    infer_action,
    infer_scope,
    infer_target,
)


__all__ = [
    # Constants
    "StyleId",
    "CUSTOM_STYLE_ID",
    "DEFAULT_STYLE_ID",
    # Models
    "Style",
    # Catalog
    "BUILTIN_STYLES",
    "STYLE_CATALOG",
    "StyleCatalog",
    "list_styles",
    "resolve_style",
    # Formatter
    "format_message",
    "get_action_emoji",
    "get_conventional_type",
    "past_tense",
    # Heuristic
    "DiffStats",
    "FileCategories",
    "analyze_diff",
    "classify_files",
    "heuristic_message",
    "heuristic_summary",
    "infer_action",
    "infer_scope",
    "infer_target",
]
