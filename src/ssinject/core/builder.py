from __future__ import annotations

"""
Build Driver.

Coordinates a complete build:
1. Validates the input directory and prepares the output directory.
2. Locates every entry document.
3. Resolves each entry through the include engine with a fresh active chain.
4. Mirrors each entry onto the output tree and persists the resolved text.

Every entry is resolved before the first one is written, so a failing
include never leaves a partially populated output tree behind.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Set, Tuple

from ssinject.core.resolver import resolve_includes
from ssinject.domain.build_models import BuildResult, ResolveStats, create_build_result
from ssinject.domain.config import validate_config
from ssinject.domain.errors import EntryNotFoundError, InvalidInputError
from ssinject.infra.fs import mirror_output_path, normalize_path, safe_mkdir, write_document

logger = logging.getLogger(__name__)


def build_site(
        input_dir: str,
        output_dir: str,
        config: Optional[Dict[str, Any]] = None,
) -> BuildResult:
    """
    Expand the entry documents of input_dir into output_dir.

    Args:
        input_dir: Source tree; also the root for include resolution.
        output_dir: Destination tree, created if missing.
        config: Build configuration (defaults when None).

    Returns:
        BuildResult: Written files and resolution statistics.

    Raises:
        InvalidInputError: If input_dir is missing or not a directory.
        EntryNotFoundError: If an entry document is absent.
        NotFoundError, CycleError, DepthLimitError: Propagated from the resolver.
    """
    cfg, warnings = validate_config(config)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    cwd = os.getcwd()
    input_root = normalize_path(input_dir, cwd)
    output_root = normalize_path(output_dir, cwd)

    if not os.path.isdir(input_root):
        raise InvalidInputError(input_root)

    safe_mkdir(output_root)
    logger.info(f"Building {input_root} -> {output_root}")

    entries = locate_entries(input_root, cfg["entry_documents"])

    stats = ResolveStats()
    rendered: List[Tuple[str, str]] = []
    for entry in entries:
        active_chain: Set[str] = set()
        content = resolve_includes(
            entry,
            input_root,
            active_chain,
            encoding=cfg["encoding"],
            max_depth=cfg["max_depth"],
            stats=stats,
        )
        rendered.append((mirror_output_path(entry, input_root, output_root), content))

    written: List[str] = []
    for output_path, content in rendered:
        write_document(output_path, content, cfg["encoding"])
        logger.info(f"Processed and wrote to: {output_path}")
        written.append(output_path)

    logger.debug(f"Substituted {stats.includes} include directive(s).")
    return create_build_result(input_root, output_root, written, stats)


def locate_entries(input_root: str, entry_documents: List[str]) -> List[str]:
    """
    Resolve entry document names to absolute paths inside input_root.

    Raises:
        EntryNotFoundError: For the first entry that is not a regular file.
    """
    entries: List[str] = []
    for name in entry_documents:
        candidate = os.path.join(input_root, name)
        if not os.path.isfile(candidate):
            raise EntryNotFoundError(candidate)
        entries.append(candidate)
    return entries
