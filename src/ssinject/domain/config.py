from __future__ import annotations

"""
Build Configuration Management.

Provides the default build configuration, JSON loading for user supplied
overrides, and schema validation with type coercion.
"""

import codecs
import json
import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from ssinject.domain.constants import DEFAULT_ENCODING, DEFAULT_ENTRY_DOCUMENTS
from ssinject.domain.errors import ConfigError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# DEFAULTS
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default build configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "entry_documents": list(DEFAULT_ENTRY_DOCUMENTS),
        "encoding": DEFAULT_ENCODING,
        "max_depth": None,
    }

# -----------------------------------------------------------------------------
# PERSISTENCE
# -----------------------------------------------------------------------------

def load_config(path: str) -> Dict[str, Any]:
    """
    Read a JSON configuration file.

    Args:
        path: Location of the JSON document.

    Returns:
        Dict[str, Any]: The raw configuration object.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, or does
            not hold a JSON object.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Unable to read configuration file: {path} ({e})", path) from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in configuration file: {path} ({e})", path) from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file must hold a JSON object: {path}", path)

    logger.debug(f"Loaded configuration from {path}")
    return data

# -----------------------------------------------------------------------------
# VALIDATION
# -----------------------------------------------------------------------------

def validate_config(
        config: Optional[Dict[str, Any]],
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Merge a raw configuration over the defaults and normalize its values.

    Unknown keys are dropped. Invalid values are replaced by their defaults
    and reported as warnings, unless strict mode is requested.

    Args:
        config: Raw configuration (None means defaults only).
        strict: If True, raise ConfigError instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if config is None:
        return defaults, warnings

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise ConfigError(msg)
        warnings.append(f"{msg} Using defaults.")
        return defaults, warnings

    for key in config:
        if key not in defaults:
            warnings.append(f"Unknown configuration key '{key}' ignored.")

    merged = dict(defaults)
    merged["entry_documents"] = _as_entry_list(
        config.get("entry_documents"), defaults["entry_documents"], warnings, strict
    )
    merged["encoding"] = _as_encoding(
        config.get("encoding"), defaults["encoding"], warnings, strict
    )
    merged["max_depth"] = _as_depth(config.get("max_depth"), warnings, strict)

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _reject(msg: str, warnings: List[str], strict: bool) -> None:
    if strict:
        raise ConfigError(msg)
    warnings.append(f"{msg} Using fallback.")


def _as_entry_list(value: Any, fallback: List[str], warnings: List[str], strict: bool) -> List[str]:
    """Entry documents must be non-empty relative paths inside the input directory."""
    if value is None:
        return list(fallback)
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not value:
        _reject("Invalid field 'entry_documents': expected a non-empty list of str.", warnings, strict)
        return list(fallback)

    entries: List[str] = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            _reject("Invalid field 'entry_documents': entries must be non-empty str.", warnings, strict)
            return list(fallback)
        item = item.strip()
        if os.path.isabs(item) or os.pardir in item.replace("\\", "/").split("/"):
            _reject(
                f"Invalid field 'entry_documents': '{item}' escapes the input directory.",
                warnings, strict
            )
            return list(fallback)
        entries.append(item)
    return entries


def _as_encoding(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if not isinstance(value, str) or not value.strip():
        _reject("Invalid field 'encoding': expected a non-empty str.", warnings, strict)
        return fallback

    try:
        codecs.lookup(value.strip())
    except LookupError:
        _reject(f"Invalid field 'encoding': unknown codec '{value}'.", warnings, strict)
        return fallback
    return value.strip()


def _as_depth(value: Any, warnings: List[str], strict: bool) -> Optional[int]:
    """None disables the cap; otherwise a positive int is required."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        _reject("Invalid field 'max_depth': expected a positive int or null.", warnings, strict)
        return None
    return value
