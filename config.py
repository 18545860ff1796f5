"""config.py

Blocks Configuration
"""
# Separator character
SPACE = " "

# Indent before the first bar
INDENT = SPACE * 4

# Gap after each bar
GAP = SPACE * 3

# Number of bars, one per palette entry
COLUMNS = 6

# Full blocks in the light face of a bar
BLOCK_WIDTH = 4

# Blank lines above and below the banner
MARGIN = 2

# Rows between the cap and the base
BODY_ROWS = 2
