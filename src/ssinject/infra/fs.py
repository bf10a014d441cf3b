from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization, output mirroring, idempotent directory
creation, and whole-document text I/O used by the resolver and the build
driver.
"""

import os
from typing import Optional

from ssinject.domain.constants import DEFAULT_ENCODING

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Expands user home shortcuts (~/). Any other character, including
    surrounding whitespace and a literal "$", is kept as part of the name.
    Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty or None.

    Returns:
        str: Normalized absolute path.
    """
    p = path or fallback
    p = os.path.expanduser(p)
    return os.path.abspath(p)


def mirror_output_path(file_path: str, input_dir: str, output_dir: str) -> str:
    """
    Map a document inside the input tree onto the same place in the output tree.

    Args:
        file_path: Document location inside input_dir.
        input_dir: Root of the source tree.
        output_dir: Root of the destination tree.

    Returns:
        str: Absolute destination path.
    """
    rel_path = os.path.relpath(os.path.abspath(file_path), os.path.abspath(input_dir))
    return os.path.join(os.path.abspath(output_dir), rel_path)

# -----------------------------------------------------------------------------
# DIRECTORY MANAGEMENT
# -----------------------------------------------------------------------------

def safe_mkdir(path: str) -> None:
    """
    Recursively create a directory structure; no-op if it already exists.

    Args:
        path: Target directory path.

    Raises:
        OSError: If the hierarchy cannot be created.
    """
    os.makedirs(path, exist_ok=True)


def ensure_parent_dir(path: str) -> None:
    """
    Create the parent directory hierarchy for a target file.

    Args:
        path: Path of the file about to be written.
    """
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.isdir(parent):
        safe_mkdir(parent)

# -----------------------------------------------------------------------------
# DOCUMENT I/O
# -----------------------------------------------------------------------------

def read_document(file_path: str, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Read the full text of a document.

    Newlines are preserved exactly as stored on disk.

    Raises:
        OSError: If the file cannot be opened.
    """
    with open(file_path, "r", encoding=encoding, newline="") as f:
        return f.read()


def write_document(file_path: str, content: str, encoding: str = DEFAULT_ENCODING) -> None:
    """
    Write a document, creating missing parent directories and overwriting
    any existing file.

    Raises:
        OSError: If filesystem write permissions are denied.
    """
    ensure_parent_dir(file_path)
    with open(file_path, "w", encoding=encoding, newline="") as f:
        f.write(content)
