#!/usr/bin/env python
"""
hooksetup.py — Main CLI for HookSetup

Run once after cloning: sets core.hooksPath to .githooks so git picks up
the repository's own hooks. Takes no arguments.
"""

import argparse
import sys
from core import configure_hooks_path

def main(argv=None):
    parser = argparse.ArgumentParser(
        description="HookSetup: configure git to use the repository's .githooks directory."
    )
    parser.parse_args(argv)

    sys.exit(configure_hooks_path())

if __name__ == "__main__":
    main()
