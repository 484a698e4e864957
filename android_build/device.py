"""Device/emulator architecture detection through adb."""

from __future__ import annotations

import re
import shlex
from typing import Callable, Final

from .process import exec_shell

X86: Final[str] = "x86"
ARM: Final[str] = "arm"

_INTEL_RE: Final[re.Pattern[str]] = re.compile(r"intel", re.IGNORECASE)


def detect_architecture(
    device_id: str,
    executor: Callable[[str], str] | None = None,
) -> str:
    """Return ``"x86"`` or ``"arm"`` for the given adb device serial."""
    executor = executor or exec_shell
    output = executor(f"adb -s {shlex.quote(device_id)} shell cat /proc/cpuinfo")
    if _INTEL_RE.search(output):
        return X86
    return ARM
