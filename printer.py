"""printer.py

Various functions related to printing.
"""
import builtins
import re

import config
from extras import (
    BACKGROUND,
    FOREGROUND,
    FULL_BLOCK,
    LOWER_BLOCK,
    RESET,
    UPPER_BLOCK,
)


def bar(index, edge):
    """Light face of bar `index` followed by its dark `edge` glyph."""
    return (
        f"{FOREGROUND[index]}{FULL_BLOCK * config.BLOCK_WIDTH}"
        f"{BACKGROUND[index]}{edge}{config.GAP}{RESET}"
    )


def cap_row():
    """Top row of the banner."""
    return config.INDENT + "".join(
        [bar(i, LOWER_BLOCK) for i in range(config.COLUMNS)]
    )


def body_row():
    """Middle row of the banner."""
    return config.INDENT + "".join(
        [bar(i, FULL_BLOCK) for i in range(config.COLUMNS)]
    )


def base_row():
    """Shadow under the bars."""
    return config.INDENT + "".join(
        [
            f"{config.SPACE}{BACKGROUND[i]}"
            f"{UPPER_BLOCK * config.BLOCK_WIDTH}{config.GAP}{RESET}"
            for i in range(config.COLUMNS)
        ]
    )


def render_banner():
    """Return the whole banner, margins included."""
    margin = "\n" * config.MARGIN
    rows = [cap_row(), *[body_row()] * config.BODY_ROWS, base_row()]
    return margin + "".join([f"{row}\n" for row in rows]) + margin


def print_banner():
    """Print Blocks banner."""
    builtins.print(render_banner(), end="", flush=True)


def strip(text):
    """Strip ANSI escape sequences from text."""
    text = re.sub(r"\033\[[\d;]*m", "", text)
    return text
