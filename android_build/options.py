"""Build option resolution.

Turns the raw ``--flag`` tokens passed to ``build`` / ``clean`` into an
immutable :class:`BuildRequest`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Final, Mapping, Sequence

from .shared.config import BUILD_METHOD_ENV_VAR, DEFAULT_BUILD_METHOD
from .shared.errors import UnrecognizedOptionError

OPTION_PREFIX: Final[str] = "--"


class BuildType(str, Enum):
    DEBUG = "debug"
    RELEASE = "release"

    def __str__(self) -> str:
        return self.value


class BuildMethod(str, Enum):
    ANT = "ant"
    GRADLE = "gradle"
    NONE = "none"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class BuildRequest:
    """A normalized build request. One per invocation."""

    build_type: BuildType = BuildType.DEBUG
    build_method: BuildMethod = BuildMethod.ANT


# Flag name (without prefix) -> (field, value)
_FLAGS: Final[dict[str, tuple[str, BuildType | BuildMethod]]] = {
    "debug": ("build_type", BuildType.DEBUG),
    "release": ("build_type", BuildType.RELEASE),
    "ant": ("build_method", BuildMethod.ANT),
    "gradle": ("build_method", BuildMethod.GRADLE),
    "nobuild": ("build_method", BuildMethod.NONE),
}


def default_build_method(
    environ: Mapping[str, str] | None = None,
    fallback: str = DEFAULT_BUILD_METHOD,
) -> BuildMethod:
    """Return the build method selected by ``ANDROID_BUILD``, else ``fallback``."""
    env = os.environ if environ is None else environ
    value = env.get(BUILD_METHOD_ENV_VAR) or fallback
    try:
        return BuildMethod(value)
    except ValueError:
        raise UnrecognizedOptionError(value) from None


def resolve_options(
    options: str | Sequence[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    fallback_method: str = DEFAULT_BUILD_METHOD,
) -> BuildRequest:
    """Resolve command line flags into a :class:`BuildRequest`.

    A single string is accepted as well as a sequence of strings. Resolution
    stops at the first bad token.

    Args:
        options: Flag tokens such as ``["--release", "--gradle"]``.
        environ: Environment used for the default build method.
        fallback_method: Build method used when the environment sets none.

    Raises:
        UnrecognizedOptionError: For a token without the ``--`` prefix or an
            unknown flag.
    """
    if isinstance(options, str):
        options = [options]

    values: dict[str, BuildType | BuildMethod] = {"build_type": BuildType.DEBUG}

    for token in options or ():
        if not token.startswith(OPTION_PREFIX):
            raise UnrecognizedOptionError(token)
        flag = _FLAGS.get(token[len(OPTION_PREFIX):])
        if flag is None:
            raise UnrecognizedOptionError(token)
        field_name, value = flag
        values[field_name] = value

    # An invalid ANDROID_BUILD only matters when no flag picked a method
    if "build_method" not in values:
        values["build_method"] = default_build_method(environ, fallback_method)

    return BuildRequest(**values)
