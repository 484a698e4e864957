#!/usr/bin/env python3
"""
Build tools CLI for Android platform projects.

Usage:
    python -m android_build <command> [options]

Commands:
    build         Build the project (Ant, Gradle, or --nobuild)
    clean         Clean build outputs
    detect-arch   Print the architecture (arm/x86) of a device
    best-apk      Build, then print the APK that best fits a device
    help          Show build flag help

Examples:
    python -m android_build build --release --gradle
    python -m android_build clean
    python -m android_build detect-arch emulator-5554
    python -m android_build best-apk emulator-5554 --nobuild
"""

from __future__ import annotations

import argparse
import sys

from android_build.artifacts import select_for_architecture
from android_build.device import detect_architecture
from android_build.orchestrator import print_help, run_build, run_clean
from android_build.shared.config import BuildConfig
from android_build.shared.errors import AndroidBuildError


def cmd_build(args: list[str]) -> int:
    """Build the project."""
    run_build(args, BuildConfig.load())
    return 0


def cmd_clean(args: list[str]) -> int:
    """Clean build outputs."""
    run_clean(args, BuildConfig.load())
    return 0


def cmd_detect_arch(args: list[str]) -> int:
    """Print the architecture of a connected device."""
    parser = argparse.ArgumentParser(
        prog="android_build detect-arch",
        description="Detect the processor architecture of a device or emulator",
    )
    parser.add_argument("device", help="adb device serial (see 'adb devices')")
    parsed = parser.parse_args(args)

    print(detect_architecture(parsed.device))
    return 0


def cmd_best_apk(args: list[str]) -> int:
    """Build, then print the APK that fits the device."""
    if not args or args[0].startswith("-"):
        print("Usage: python -m android_build best-apk <device> [build flags]")
        return 1

    device, build_args = args[0], args[1:]
    result = run_build(build_args, BuildConfig.load())
    architecture = detect_architecture(device)
    print(select_for_architecture(result, architecture))
    return 0


def cmd_help(args: list[str]) -> int:
    """Show build flag help."""
    print_help(BuildConfig.load())
    return 0


COMMANDS = {
    "build": (cmd_build, "Build the project (Ant, Gradle, or --nobuild)"),
    "clean": (cmd_clean, "Clean build outputs"),
    "detect-arch": (cmd_detect_arch, "Print the architecture (arm/x86) of a device"),
    "best-apk": (cmd_best_apk, "Build, then print the APK that best fits a device"),
    "help": (cmd_help, "Show build flag help"),
}


def main() -> int:
    if len(sys.argv) < 2 or sys.argv[1] in ("-h", "--help"):
        print(__doc__)
        print("Available commands:")
        for name, (_, desc) in COMMANDS.items():
            print(f"  {name:14} {desc}")
        return 0

    command = sys.argv[1]
    args = sys.argv[2:]

    if command not in COMMANDS:
        print(f"Unknown command: {command}")
        print(f"Available commands: {', '.join(COMMANDS.keys())}")
        return 1

    handler, _ = COMMANDS[command]
    try:
        return handler(args)
    except AndroidBuildError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nBuild interrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
