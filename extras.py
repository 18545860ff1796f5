"""extras.py

Palettes and Glyphs
"""
# ANSI escape sequences
RESET = "\033[0m"
# 256-color foreground, light shade of each bar
PINK_FG = "\033[38;5;204m"
GREEN_FG = "\033[38;5;78m"
YELLOW_FG = "\033[38;5;228m"
BLUE_FG = "\033[38;5;75m"
PURPLE_FG = "\033[38;5;141m"
CYAN_FG = "\033[38;5;81m"
# 256-color foreground, dark shade of each bar
DARK_PINK_FG = "\033[38;5;161m"
DARK_GREEN_FG = "\033[38;5;35m"
DARK_YELLOW_FG = "\033[38;5;185m"
DARK_BLUE_FG = "\033[38;5;32m"
DARK_PURPLE_FG = "\033[38;5;98m"
DARK_CYAN_FG = "\033[38;5;38m"

FOREGROUND = (
    PINK_FG,
    GREEN_FG,
    YELLOW_FG,
    BLUE_FG,
    PURPLE_FG,
    CYAN_FG,
)

# Still foreground escapes: the bars are two-tone glyphs, not shaded cells.
BACKGROUND = (
    DARK_PINK_FG,
    DARK_GREEN_FG,
    DARK_YELLOW_FG,
    DARK_BLUE_FG,
    DARK_PURPLE_FG,
    DARK_CYAN_FG,
)

# Block elements
FULL_BLOCK = "█"
LOWER_BLOCK = "▄"
UPPER_BLOCK = "▀"
