"""Color & message helpers for terminal output.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Palette overrides come from the environment or the project .env file
  (see config.py).
- Message kinds are tagged "[OK]", "[Error]" and "[Info]" so output stays
  readable with colors off.
"""
from __future__ import annotations
import os, re, sys
from config import get_setting, hex_setting, truthy

_FORCE = truthy(get_setting("FORCE_COLOR"))
_NO_COLOR = get_setting("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

def _code(part: str) -> str:
    """Generate ANSI escape code for a given style part."""
    return f"\033[{part}m" if _ENABLE else ''

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _fg_truecolor(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    idx = 16 + 36 * r6 + 6 * g6 + b6
    return f"\033[38;5;{idx}m"

def _from_hex(hex_code: str) -> str:
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return _fg_truecolor(r, g, b)
    return _fg_256(r, g, b)

RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')

HEX_OK_DEFAULT = '#A7E399'
HEX_ERROR_DEFAULT = '#E06C75'
HEX_INFO_DEFAULT = '#48B3AF'
HEX_PROMPT_DEFAULT = '#476EAE'

HEX_OK = hex_setting('NOTEPAD_OK', HEX_OK_DEFAULT)
HEX_ERROR = hex_setting('NOTEPAD_ERROR', HEX_ERROR_DEFAULT)
HEX_INFO = hex_setting('NOTEPAD_INFO', HEX_INFO_DEFAULT)
HEX_PROMPT = hex_setting('NOTEPAD_PROMPT', HEX_PROMPT_DEFAULT)

OK_COLOR = _from_hex(HEX_OK)
ERROR_COLOR = _from_hex(HEX_ERROR)
INFO_COLOR = _from_hex(HEX_INFO)
PROMPT_COLOR = _from_hex(HEX_PROMPT)
POSITION_COLOR = PROMPT_COLOR + BOLD
DONE_COLOR = OK_COLOR
EMPTY_COLOR = DIM + PROMPT_COLOR

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

def strip_ansi(text: str) -> str:
    return ANSI_RE.sub('', text)

def ok(message: str) -> str:
    return color(f"[OK] {message}", OK_COLOR)

def error(message: str) -> str:
    return color(f"[Error] {message}", ERROR_COLOR)

def info(message: str) -> str:
    return color(f"[Info] {message}", INFO_COLOR)

def prompt() -> str:
    return color("Enter a command and data: ", PROMPT_COLOR) + "\n> "

__all__ = [
    'color','strip_ansi','ok','error','info','prompt','RESET','BOLD','DIM',
    'OK_COLOR','ERROR_COLOR','INFO_COLOR','PROMPT_COLOR','POSITION_COLOR','DONE_COLOR','EMPTY_COLOR',
    'HEX_OK','HEX_ERROR','HEX_INFO','HEX_PROMPT'
]
