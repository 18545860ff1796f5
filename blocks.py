"""blocks.py

Blocks: six two-tone color bars for the terminal
"""

import io
import os
import sys

from printer import print_banner


class Blocks:
    """Class to represent Blocks."""

    def run(self):
        """Print the banner to standard output."""
        print_banner()


def main():
    """Run Blocks, returning the exit status."""
    # Block glyphs are written as UTF-8 whatever the locale says.
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding="utf-8")

    try:
        Blocks().run()
    except BrokenPipeError:
        # Python flushes standard output at exit; point it at devnull so
        # the closed pipe is not reported a second time.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
