from __future__ import annotations

"""
Include Resolution Engine.

Expands `<!--#include virtual="..."-->` directives. Every include target is
resolved against the processing root, never against the including document's
own directory. Expansion is depth-first and pre-order: a nested directive is
fully resolved before the enclosing substitution completes.

Nesting is tracked on an explicit work stack of document frames rather than
on the interpreter's call stack, so the depth of an acyclic include chain is
bounded only by the optional max_depth.

The active chain is the set of canonical paths currently being expanded. A
path is added when its frame is pushed and removed when it is popped, so a
document may be included several times in one tree as long as it never
includes itself.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from typing import Iterator, List, MutableSet, Optional

from ssinject.domain.build_models import ResolveStats
from ssinject.domain.constants import DEFAULT_ENCODING, INCLUDE_DIRECTIVE
from ssinject.domain.errors import CycleError, DepthLimitError, NotFoundError
from ssinject.infra.fs import read_document

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# WORK STACK MODEL
# -----------------------------------------------------------------------------

@dataclass
class _Frame:
    """
    A document whose directives are being substituted.

    Attributes:
        path: Canonical path, also the frame's entry in the active chain.
        content: Raw document text.
        matches: Remaining directive matches, left to right.
        pieces: Output fragments produced so far.
        pos: Offset in content up to which text has been emitted.
    """
    path: str
    content: str
    matches: Iterator[re.Match[str]]
    pieces: List[str] = field(default_factory=list)
    pos: int = 0

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve_includes(
        path: str,
        root: str,
        active_chain: MutableSet[str],
        *,
        encoding: str = DEFAULT_ENCODING,
        max_depth: Optional[int] = None,
        stats: Optional[ResolveStats] = None,
) -> str:
    """
    Return the content of a document with every include directive replaced
    by the recursively resolved content of its target.

    Args:
        path: Document to resolve.
        root: Directory that include targets are resolved against.
        active_chain: Canonical paths currently being resolved. Mutated during
            the call and restored before it returns or raises.
        encoding: Text encoding of every document in the tree.
        max_depth: Maximum number of documents allowed on the active chain
            (None for unbounded).
        stats: Optional counters updated as directives are substituted.

    Returns:
        str: Fully substituted text.

    Raises:
        CycleError: If a document is already on the active chain.
        NotFoundError: If the document or an include target does not exist.
        DepthLimitError: If max_depth would be exceeded.
    """
    stack: List[_Frame] = []
    try:
        stack.append(_enter(path, active_chain, encoding, max_depth, stats))
        resolved: Optional[str] = None

        while stack:
            frame = stack[-1]

            if resolved is not None:
                frame.pieces.append(resolved)
                resolved = None
                if stats is not None:
                    stats.includes += 1

            match = next(frame.matches, None)
            if match is None:
                frame.pieces.append(frame.content[frame.pos:])
                stack.pop()
                active_chain.discard(frame.path)
                resolved = "".join(frame.pieces)
                continue

            frame.pieces.append(frame.content[frame.pos:match.start()])
            frame.pos = match.end()

            target = resolve_virtual_path(match.group(1), root)
            logger.debug(f"{frame.path}: include '{match.group(1)}' -> {target}")

            if not os.path.isfile(target):
                raise NotFoundError(target, included_from=frame.path)

            stack.append(_enter(target, active_chain, encoding, max_depth, stats))

        return resolved or ""
    finally:
        for frame in stack:
            active_chain.discard(frame.path)


def resolve_virtual_path(value: str, root: str) -> str:
    """
    Map a directive's virtual path onto the filesystem.

    A leading '/' means "relative to root", not "relative to the filesystem
    root"; leading slashes are stripped and the remainder joined under root.
    Values without a leading slash are joined under root as well.

    Args:
        value: Raw directive value.
        root: Processing root directory.

    Returns:
        str: Absolute, normalized target path.
    """
    relative = value.lstrip("/")
    return os.path.normpath(os.path.join(os.path.abspath(root), relative))


def find_directives(text: str) -> List[str]:
    """Return the virtual paths referenced by a text, in order of appearance."""
    return [m.group(1) for m in INCLUDE_DIRECTIVE.finditer(text)]

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _enter(
        path: str,
        active_chain: MutableSet[str],
        encoding: str,
        max_depth: Optional[int],
        stats: Optional[ResolveStats],
) -> _Frame:
    """Validate a document, read it and register it on the active chain."""
    canonical = os.path.abspath(path)

    if canonical in active_chain:
        raise CycleError(canonical, active_chain)

    if not os.path.isfile(canonical):
        raise NotFoundError(canonical)

    if max_depth is not None and len(active_chain) >= max_depth:
        raise DepthLimitError(canonical, max_depth)

    content = read_document(canonical, encoding)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Resolving {canonical}: directives {find_directives(content)}")

    active_chain.add(canonical)
    if stats is not None:
        stats.max_chain = max(stats.max_chain, len(active_chain))

    return _Frame(path=canonical, content=content, matches=INCLUDE_DIRECTIVE.finditer(content))
