"""Network-free commit message generation from diff statistics.

Used when the caller opts into offline generation, or as a last resort
when every backend failed and the caller asked for a heuristic answer.
Everything here is a pure function of the diff text.
"""

import re
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Iterable

from commitmuse.styles.constants import (
    ACTION_ADD,
    ACTION_CONFIGURE,
    ACTION_DOCUMENT,
    ACTION_REFACTOR,
    ACTION_REMOVE,
    ACTION_STYLE,
    ACTION_TEST,
    ACTION_UPDATE,
    ACTION_UPDATE_DEPENDENCIES,
)
from commitmuse.styles.formatter import format_message
from commitmuse.styles.models import Style

FILE_HEADER_PREFIX = "diff --git"
# Git quotes paths with unusual characters: diff --git "a/caf\303\251.py" "b/caf\303\251.py"
_POST_IMAGE_PATH = re.compile(r' "?b/(.+?)"?$')
UNKNOWN_PATH = "file"

DECLARATION_TOKENS = ("function", "class", "const ", "def ")
IMPORT_TOKENS = ("import", "require")

# Growth/shrink ratio that makes a diff an "add" or a "remove"
DOMINANCE_RATIO = 3

_CONFIG_RE = re.compile(r"\.(json|ya?ml|toml|ini|env)$")
_TEST_RE = re.compile(r"\.(test|spec)\.|(^|/)tests?/|__tests__/|(^|/)test_[^/]*$|_test\.[^/.]+$")
_DOCS_RE = re.compile(r"\.(md|txt|rst)$")
_STYLE_RE = re.compile(r"\.(css|scss|sass|less|styl)$")
_API_RE = re.compile(r"api/|routes/|controllers/")
_UI_RE = re.compile(r"components/|views/|pages/|\.(vue|jsx|tsx)$")


@dataclass(frozen=True)
class FileCategories:
    """Which kinds of files a diff touches (OR across all files)."""

    config: bool = False
    test: bool = False
    docs: bool = False
    style: bool = False
    api: bool = False
    ui: bool = False


@dataclass(frozen=True)
class DiffStats:
    """Line and file statistics extracted from a unified diff."""

    added_lines: int = 0
    removed_lines: int = 0
    files: tuple[str, ...] = field(default_factory=tuple)
    has_declarations: bool = False
    has_imports: bool = False

    @property
    def file_count(self) -> int:
        return len(self.files)


def is_config_file(path: str) -> bool:
    return bool(_CONFIG_RE.search(path)) or "config" in path.lower()


def is_test_file(path: str) -> bool:
    return bool(_TEST_RE.search(path))


def is_docs_file(path: str) -> bool:
    return bool(_DOCS_RE.search(path)) or "README" in path


def classify_files(paths: Iterable[str]) -> FileCategories:
    """Classify touched files by path and extension.

    A file may fall into several categories.

    Args:
        paths: Post-image paths of the touched files.

    Returns:
        FileCategories with each flag set if any file matches.
    """
    paths = list(paths)
    return FileCategories(
        config=any(is_config_file(p) for p in paths),
        test=any(is_test_file(p) for p in paths),
        docs=any(is_docs_file(p) for p in paths),
        style=any(_STYLE_RE.search(p) for p in paths),
        api=any(_API_RE.search(p) for p in paths),
        ui=any(_UI_RE.search(p) for p in paths),
    )


def analyze_diff(diff: str) -> DiffStats:
    """Collect line counts, touched files and token hints from a diff.

    Every ``diff --git`` header is one file. File header lines
    (``+++``/``---``) are not counted as changed lines. Declaration and
    import tokens are looked for on every line, context included.

    Args:
        diff: Unified diff text.

    Returns:
        DiffStats for the diff.
    """
    added = 0
    removed = 0
    files = []
    declarations = False
    imports = False

    for line in diff.splitlines():
        if not declarations and any(token in line for token in DECLARATION_TOKENS):
            declarations = True
        if not imports and any(token in line for token in IMPORT_TOKENS):
            imports = True

        if line.startswith(FILE_HEADER_PREFIX):
            match = _POST_IMAGE_PATH.search(line)
            files.append(match.group(1) if match else UNKNOWN_PATH)
        elif line.startswith("+++") or line.startswith("---"):
            continue
        elif line.startswith("+"):
            added += 1
        elif line.startswith("-"):
            removed += 1

    return DiffStats(
        added_lines=added,
        removed_lines=removed,
        files=tuple(files),
        has_declarations=declarations,
        has_imports=imports,
    )


def infer_action(stats: DiffStats, categories: FileCategories) -> str:
    """Pick the action token. The first matching rule wins."""
    if stats.added_lines > stats.removed_lines * DOMINANCE_RATIO:
        if categories.config:
            return ACTION_CONFIGURE
        if categories.test:
            return ACTION_TEST
        return ACTION_ADD
    if stats.removed_lines > stats.added_lines * DOMINANCE_RATIO:
        return ACTION_REMOVE
    if stats.has_declarations:
        return ACTION_TEST if categories.test else ACTION_REFACTOR
    if stats.has_imports:
        return ACTION_UPDATE_DEPENDENCIES
    if categories.docs:
        return ACTION_DOCUMENT
    if categories.style:
        return ACTION_STYLE
    return ACTION_UPDATE


def infer_scope(categories: FileCategories) -> str:
    """Pick the scope token: config > tests > docs > api > ui > none."""
    if categories.config:
        return "config"
    if categories.test:
        return "tests"
    if categories.docs:
        return "docs"
    if categories.api:
        return "api"
    if categories.ui:
        return "ui"
    return ""


def infer_target(files: tuple[str, ...]) -> str:
    """Name the single touched file (base name, no extension) or count them."""
    if len(files) == 1:
        stem = PurePosixPath(files[0]).name.split(".")[0]
        return stem or "file"
    return f"{len(files)} files"


def heuristic_message(diff: str, style: Style) -> str:
    """Derive a commit message from the diff alone.

    Deterministic: the same diff and style always give the same message.

    Args:
        diff: Unified diff text.
        style: Resolved style.

    Returns:
        The formatted commit message.
    """
    stats = analyze_diff(diff)
    categories = classify_files(stats.files)
    return format_message(
        infer_action(stats, categories),
        infer_scope(categories),
        infer_target(stats.files),
        style.id,
    )


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def heuristic_summary(diff: str) -> str:
    """Summarize a branch diff from its statistics alone."""
    stats = analyze_diff(diff)
    scope = infer_scope(classify_files(stats.files))
    summary = (
        f"Updates {_plural(stats.file_count, 'file')} with "
        f"{_plural(stats.added_lines, 'addition')} and "
        f"{_plural(stats.removed_lines, 'deletion')}."
    )
    if scope:
        summary += f" Most changes are in {scope}."
    return summary
