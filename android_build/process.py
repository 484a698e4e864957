"""Subprocess helpers for the external build tools and adb."""

from __future__ import annotations

import shutil
import subprocess
import sys
from pathlib import Path
from typing import Sequence

from .shared.errors import BuildEnvironmentError, BuildToolError


def _resolve_executable(command: str) -> str:
    # On Windows, resolve the executable path to handle .cmd/.bat files
    if sys.platform == "win32":
        resolved = shutil.which(command)
        if resolved:
            return resolved
    return command


def spawn(
    command: str | Path,
    args: Sequence[str | Path] = (),
    cwd: Path | None = None,
) -> str:
    """Run a build tool, streaming its output to the console.

    Returns:
        The combined stdout/stderr of the process.

    Raises:
        BuildEnvironmentError: If the executable does not exist.
        BuildToolError: If the process exits with a non-zero status.
    """
    full_command = [_resolve_executable(str(command)), *(str(a) for a in args)]
    print(f"\n$ {' '.join(str(c) for c in [command, *args])}")

    try:
        process = subprocess.Popen(
            full_command,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
    except FileNotFoundError as e:
        raise BuildEnvironmentError(f"Command not found: {e.filename}", str(command)) from e

    captured: list[str] = []
    assert process.stdout is not None
    with process.stdout:
        for line in process.stdout:
            print(line, end="")
            captured.append(line)
    exit_code = process.wait()

    output = "".join(captured)
    if exit_code != 0:
        raise BuildToolError(str(command), exit_code, output)
    return output


def exec_shell(command: str) -> str:
    """Run a shell command and return its captured stdout.

    Raises:
        BuildToolError: If the command exits with a non-zero status.
    """
    result = subprocess.run(
        command,
        shell=True,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        raise BuildToolError(command, result.returncode, result.stdout + result.stderr)
    return result.stdout
