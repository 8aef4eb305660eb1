"""Whitespace-collapsing transforms applied to built HTML, CSS and JS files.

These are plain regular-expression passes over raw text, not parsers.
Whitespace inside string literals, ``<pre>`` blocks and ``<textarea>``
contents is collapsed too.  Only ASCII whitespace is matched, so
non-breaking and other Unicode spaces are preserved.
"""

import re
from pathlib import Path
from typing import Callable, Dict, Optional

_WHITESPACE_RE = re.compile(r"\s+", re.ASCII)
# Whitespace sitting directly between two tags: "> <"
_BETWEEN_TAGS_RE = re.compile(r">\s+<", re.ASCII)
# A semicolon (and any whitespace) right before a closing brace
_SEMICOLON_BEFORE_BRACE_RE = re.compile(r";\s*}", re.ASCII)
_AROUND_OPEN_BRACE_RE = re.compile(r"\s*{\s*", re.ASCII)
_AROUND_CLOSE_BRACE_RE = re.compile(r"\s*}\s*", re.ASCII)


def optimize_html(content: str) -> str:
    content = _WHITESPACE_RE.sub(" ", content)
    return _BETWEEN_TAGS_RE.sub("><", content)


def optimize_css(content: str) -> str:
    content = _WHITESPACE_RE.sub(" ", content)
    content = _SEMICOLON_BEFORE_BRACE_RE.sub("}", content)
    content = _AROUND_OPEN_BRACE_RE.sub("{", content)
    return _AROUND_CLOSE_BRACE_RE.sub("}", content)


def optimize_js(content: str) -> str:
    content = _WHITESPACE_RE.sub(" ", content)
    return _SEMICOLON_BEFORE_BRACE_RE.sub("}", content)


_OPTIMIZERS: Dict[str, Callable[[str], str]] = {
    ".html": optimize_html,
    ".css": optimize_css,
    ".js": optimize_js,
}


def optimizer_for(path: Path) -> Optional[Callable[[str], str]]:
    """Return the transform for *path*'s extension, or ``None`` to copy it as-is."""
    return _OPTIMIZERS.get(path.suffix.lower())


def optimize_file(path: Path) -> bool:
    """Rewrite *path* in place if its type has a transform.

    Returns ``True`` when the file was rewritten.
    """
    transform = optimizer_for(path)
    if transform is None:
        return False
    content = path.read_text(encoding="utf-8")
    path.write_text(transform(content), encoding="utf-8")
    return True
