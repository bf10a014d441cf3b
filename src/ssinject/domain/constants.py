from __future__ import annotations

"""
Domain Constants.

Centralizes the include directive grammar and the defaults shared by the
resolver, the build driver and the CLI.
"""

import re
from typing import List

APP_NAME = "ssinject"
APP_VERSION = "1.0.0"

DEFAULT_ENCODING = "utf-8"
DEFAULT_ENTRY_DOCUMENTS: List[str] = ["index.html"]

# -----------------------------------------------------------------------------
# DIRECTIVE GRAMMAR
# -----------------------------------------------------------------------------

# <!--#include virtual="path/to/file"-->, whitespace tolerant between tokens
INCLUDE_DIRECTIVE: re.Pattern[str] = re.compile(
    r'<!--\s*#include\s+virtual\s*=\s*"([^"]+)"\s*-->',
    re.IGNORECASE,
)

# -----------------------------------------------------------------------------
# CLI MESSAGES
# -----------------------------------------------------------------------------

USAGE_MESSAGE = f"Usage: {APP_NAME} <input_directory> <output_directory>"
PROCESSED_MESSAGE = "Processed and wrote to: {path}"
COMPLETED_MESSAGE = "SSI injection completed successfully."
