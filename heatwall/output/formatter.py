"""
Output formatting for heatwall.

Handles ANSI colors and number formatting for CLI output.
All stdlib - no external dependencies.
"""

import os
import re
import sys
from typing import Optional, Union

# Enable ANSI colors on Windows
if sys.platform == 'win32':
    os.system('')  # Triggers VT100 emulation


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'


def bold(text: str, enabled: bool = True) -> str:
    """Make text bold."""
    if not enabled:
        return text
    return f"{Colors.BOLD}{text}{Colors.RESET}"


def dim(text: str, enabled: bool = True) -> str:
    """Make text dim/gray."""
    if not enabled:
        return text
    return f"{Colors.DIM}{text}{Colors.RESET}"


def truecolor(text: str, hex_color: Optional[str], enabled: bool = True) -> str:
    """Paint text with a 24-bit foreground color given as '#rrggbb'."""
    if not enabled or not hex_color:
        return text
    match = re.match(r'^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$', hex_color)
    if not match:
        return text
    r, g, b = (int(part, 16) for part in match.groups())
    return f"\033[38;2;{r};{g};{b}m{text}{Colors.RESET}"


def format_number(value: Union[int, float], decimals: int = 0) -> str:
    """Format number with thousands separator."""
    if decimals > 0:
        return f"{value:,.{decimals}f}"
    return f"{value:,.0f}"


def print_section(title: str, color_enabled: bool = True) -> str:
    """Create a section header."""
    return f"\n{bold(title, color_enabled)}\n{'-' * len(title)}"
