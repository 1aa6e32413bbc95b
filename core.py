#!/usr/bin/env python
"""
core.py — HookSetup Core Logic

Points the local git repository at the version-controlled hooks directory.
Used by the CLI (hooksetup.py) and importable on its own.
"""

import subprocess

HOOKS_PATH_KEY = 'core.hooksPath'
HOOKS_DIR = '.githooks'

CONFIRMATION = "Git hooks configured. Pre-commit hook will run fmt, clippy, and test."

def get_hooks_path():
    """Return the locally configured hooks path, or None if unset or not in a repo."""
    result = subprocess.run(
        ['git', 'config', '--local', '--get', HOOKS_PATH_KEY],
        capture_output=True,
        text=True
    )
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None

def configure_hooks_path():
    """
    Set core.hooksPath to .githooks in the local git config.

    git's own diagnostics go straight to stderr. Returns git's exit code;
    the confirmation line is printed only when the write succeeded.
    """
    result = subprocess.run(['git', 'config', '--local', HOOKS_PATH_KEY, HOOKS_DIR])
    if result.returncode != 0:
        return result.returncode

    print(CONFIRMATION)
    return 0
