"""Settings lookup shared by the theme and logging setup.

Priority: real environment variable > project .env file > default.
The .env file lives in the project root (one level above src/) and holds
simple KEY=VALUE lines; blank lines and '#' comments are skipped.
"""
from __future__ import annotations
import os
from pathlib import Path
from typing import Dict, Optional

ENV_PATH = Path(__file__).resolve().parent.parent / '.env'
ENV_PREFIX = 'NOTEPAD_'
_FALSEY = {"0", "false", "no", "off", ""}


def parse_env_text(text: str) -> Dict[str, str]:
    """Parse .env style text into a dict of NOTEPAD_* and color switches."""
    values: Dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        v = v.strip().strip('"').strip("'")
        if k.startswith(ENV_PREFIX) or k in {'NO_COLOR', 'FORCE_COLOR'}:
            values[k] = v
    return values


def load_env_file(path: Path = ENV_PATH) -> Dict[str, str]:
    if not path.exists():
        return {}
    return parse_env_text(path.read_text(encoding='utf-8'))


_ENV_OVERRIDES: Dict[str, str] = load_env_file()


def get_setting(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.environ.get(key)
    if value is not None:
        return value
    return _ENV_OVERRIDES.get(key, default)


def truthy(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in _FALSEY


def is_hex_color(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)


def hex_setting(key: str, default: str) -> str:
    """Hex color setting; malformed values fall back to the default."""
    value = get_setting(key)
    if value and is_hex_color(value):
        return '#' + value.lstrip('#')
    return default
