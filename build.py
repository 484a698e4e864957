#!/usr/bin/env python3
"""
Build wrapper for an Android platform project.

This is a convenience wrapper that forwards to the android_build module.
Run with --help to see available commands.

Usage:
    python build.py <command> [options]
    ./build.py <command> [options]  (on Unix with execute permission)

Examples:
    python build.py build --release
    python build.py build --gradle
    python build.py clean
    python build.py best-apk emulator-5554 --nobuild
"""

import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent


def main() -> int:
    """Forward all arguments to the android_build module."""
    return subprocess.call(
        [sys.executable, "-m", "android_build"] + sys.argv[1:],
        cwd=ROOT,
    )


if __name__ == "__main__":
    sys.exit(main())
