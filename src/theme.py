"""Color & style helpers.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Supports palette overrides via environment or a .env file in the
  working directory.
"""
from __future__ import annotations
import os, sys
from pathlib import Path
from typing import Dict

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

PALETTE_KEYS = ('TODO_PRIMARY', 'TODO_PENDING', 'TODO_DONE', 'TODO_ERROR')


def _code(part: str) -> str:
    return f"\033[{part}m" if _ENABLE else ''


def _is_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip('#')
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    return f"\033[38;5;{16 + 36 * r6 + 6 * g6 + b6}m"


def _from_hex(hex_code: str) -> str:
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return f"\033[38;2;{r};{g};{b}m"
    return _fg_256(r, g, b)


def read_env_file(path: Path) -> Dict[str, str]:
    """Palette overrides from a KEY=#rrggbb file; unknown keys and bad values ignored."""
    overrides: Dict[str, str] = {}
    try:
        lines = path.read_text(encoding='utf-8').splitlines()
    except (OSError, UnicodeDecodeError):
        return overrides
    for line in lines:
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k, v = k.strip(), v.strip()
        if k in PALETTE_KEYS and _is_hex(v):
            overrides[k] = '#' + v.lstrip('#')
    return overrides


def resolve_hex(key: str, default: str, env_file: Dict[str, str]) -> str:
    """Priority: real env var > .env override > default."""
    value = os.environ.get(key)
    if value and _is_hex(value):
        return '#' + value.lstrip('#')
    return env_file.get(key, default)


RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')

HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_PENDING_DEFAULT = '#F6FF99'
HEX_DONE_DEFAULT = '#A7E399'
HEX_ERROR_DEFAULT = '#E5484D'

_ENV_OVERRIDES = read_env_file(Path.cwd() / '.env')

HEX_PRIMARY = resolve_hex('TODO_PRIMARY', HEX_PRIMARY_DEFAULT, _ENV_OVERRIDES)
HEX_PENDING = resolve_hex('TODO_PENDING', HEX_PENDING_DEFAULT, _ENV_OVERRIDES)
HEX_DONE = resolve_hex('TODO_DONE', HEX_DONE_DEFAULT, _ENV_OVERRIDES)
HEX_ERROR = resolve_hex('TODO_ERROR', HEX_ERROR_DEFAULT, _ENV_OVERRIDES)

PRIMARY = _from_hex(HEX_PRIMARY)
PENDING_COLOR = _from_hex(HEX_PENDING)
DONE_COLOR = _from_hex(HEX_DONE)
ERROR_COLOR = _from_hex(HEX_ERROR)

HEADER_COLOR = PRIMARY + BOLD
ID_COLOR = PRIMARY + BOLD
EMPTY_COLOR = DIM + PRIMARY


def colors_enabled() -> bool:
    """True when styled output should reach the terminal (TTY or FORCE_COLOR)."""
    return _ENABLE


def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET


__all__ = [
    'color', 'colors_enabled', 'BOLD', 'HEADER_COLOR', 'ID_COLOR', 'EMPTY_COLOR',
    'PENDING_COLOR', 'DONE_COLOR', 'ERROR_COLOR', 'read_env_file', 'resolve_hex',
]
