# keysmith/config.py
"""
Settings persistence for KeySmith.
Settings saved as JSON in %APPDATA%/KeySmith/config.json (Windows) or ~/.keysmith/config.json (fallback).
Set KEYSMITH_CONFIG to use another file.
"""

import logging
import os
from typing import Any, Dict, Optional

from .generator import EmptyPoolPolicy, SamplingMode
from .storage import atomic_write_bytes, dump_json_bytes, read_json_file, settings_dir

log = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "length": 8,
    "lowercase": True,
    "uppercase": True,
    "digits": True,
    "symbols": False,
    "sampling": SamplingMode.UNIFORM.value,
    "empty_pool": EmptyPoolPolicy.EMPTY.value,
    "secure_random": False,
    "clipboard_clear_seconds": 20,
    "log_level": "WARNING",
}

_BOOL_WORDS = {"1": True, "true": True, "yes": True, "on": True,
               "0": False, "false": False, "no": False, "off": False}


def config_path() -> str:
    override = os.getenv("KEYSMITH_CONFIG")
    if override:
        return override
    return os.path.join(settings_dir(), "config.json")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        data = read_json_file(p)
    except (OSError, ValueError) as e:
        log.warning("could not read settings from %s (%s), using defaults", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        log.warning("settings file %s does not hold an object, using defaults", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    for key, enum_cls in (("sampling", SamplingMode), ("empty_pool", EmptyPoolPolicy)):
        try:
            out[key] = enum_cls(str(out[key]).strip().lower()).value
        except ValueError:
            log.warning("invalid %s %r in %s, using %r", key, out[key], p, DEFAULTS[key])
            out[key] = DEFAULTS[key]
    return out


def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> str:
    p = path or config_path()
    atomic_write_bytes(p, dump_json_bytes(cfg))
    log.debug("settings written to %s", p)
    return p


def coerce_value(key: str, raw: str) -> Any:
    """
    Convert a string (e.g. from the command line) to the type of the default for `key`.
    Raises KeyError for unknown keys and ValueError for values of the wrong shape.
    """
    if key not in DEFAULTS:
        raise KeyError(key)
    default = DEFAULTS[key]
    if isinstance(default, bool):
        try:
            return _BOOL_WORDS[raw.strip().lower()]
        except KeyError:
            raise ValueError(f"{key} expects true/false, got {raw!r}") from None
    if isinstance(default, int):
        return int(raw)
    if key == "sampling":
        return SamplingMode(raw.lower()).value
    if key == "empty_pool":
        return EmptyPoolPolicy(raw.lower()).value
    return raw
