from __future__ import annotations

"""
Build Domain Data Models.

Defines the structures exchanged between the build driver, the resolver
and the interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass
class ResolveStats:
    """
    Mutable counters collected while resolving a document tree.

    Attributes:
        includes: Number of directives substituted.
        max_chain: Deepest active chain observed.
    """
    includes: int = 0
    max_chain: int = 0


@dataclass(frozen=True)
class BuildResult:
    """
    Outcome of a successful build.

    Attributes:
        input_dir: Absolute processing root.
        output_dir: Absolute output root.
        written_files: Absolute paths of every document written.
        summary: Execution statistics.
    """
    input_dir: str
    output_dir: str
    written_files: List[str] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_build_result(
        input_dir: str,
        output_dir: str,
        written_files: List[str],
        stats: ResolveStats,
) -> BuildResult:
    """
    Assemble the immutable result of a completed build.

    Args:
        input_dir: Normalized input directory.
        output_dir: Normalized output directory.
        written_files: Output documents in the order they were written.
        stats: Counters gathered by the resolver.

    Returns:
        BuildResult: The populated result object.
    """
    return BuildResult(
        input_dir=input_dir,
        output_dir=output_dir,
        written_files=list(written_files),
        summary={
            "documents": len(written_files),
            "includes": stats.includes,
            "max_chain": stats.max_chain,
        },
    )
