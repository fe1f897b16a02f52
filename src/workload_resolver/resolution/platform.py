"""Target-framework moniker parsing.

Public API (the "studs"):
    PlatformToken: Normalized platform identifier with optional version
    platform_name: Platform name of a token or string, version stripped
    parse_target_framework: Extract the platform token from one moniker
    parse_target_frameworks: Extract platform tokens from a TargetFrameworks list
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

# Platform suffix: identifier letters, then an optional dotted numeric version
_PLATFORM_PATTERN = re.compile(r"^(?P<name>[a-z][a-z_]*)(?P<version>\d+(?:\.\d+)*)?$")


class PlatformToken(BaseModel):
    """A platform identifier taken from a target-framework moniker.

    Attributes:
        name: Lowercase platform name, e.g. "android"
        version: Platform version if the moniker carried one, e.g. "30.0"
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Lowercase platform name")
    version: str | None = Field(default=None, description="Platform version")

    def __str__(self) -> str:
        return f"{self.name}{self.version or ''}"

    @classmethod
    def parse(cls, value: str) -> PlatformToken | None:
        """Split a platform string such as "android30.0" into name and version.

        Returns None when value is not a platform identifier.
        """
        match = _PLATFORM_PATTERN.match(value.strip().lower())
        if match is None:
            return None
        return cls(name=match.group("name"), version=match.group("version"))


def platform_name(token: PlatformToken | str) -> str:
    """Normalized platform name of a token, without its version.

    Strings that are not platform identifiers are only lowercased, so they
    still resolve (as unknown platforms) instead of raising.
    """
    if isinstance(token, PlatformToken):
        return token.name
    parsed = PlatformToken.parse(token)
    if parsed is None:
        return token.strip().lower()
    return parsed.name


def parse_target_framework(moniker: str) -> PlatformToken | None:
    """Parse the platform part of a target-framework moniker.

    Examples:
        >>> parse_target_framework("net5.0-android30.0")
        PlatformToken(name='android', version='30.0')
        >>> parse_target_framework("net5.0") is None
        True

    Args:
        moniker: Target-framework moniker such as "net5.0-ios"

    Returns:
        PlatformToken, or None for a moniker without a platform suffix

    Raises:
        ValueError: If the platform suffix is empty or not an identifier
    """
    moniker = moniker.strip()
    base, sep, suffix = moniker.partition("-")
    if not sep:
        return None

    if not base:
        raise ValueError(f"Target framework {moniker!r} has no framework name")

    token = PlatformToken.parse(suffix)
    if token is None or suffix != suffix.strip():
        raise ValueError(f"Target framework {moniker!r} has an invalid platform suffix {suffix!r}")
    return token


def parse_target_frameworks(target_frameworks: str | Iterable[str]) -> list[PlatformToken]:
    """Parse every platform token declared by a project.

    Args:
        target_frameworks: A ";"-separated TargetFrameworks value, or monikers

    Returns:
        Platform tokens in declaration order; neutral monikers are skipped
    """
    if isinstance(target_frameworks, str):
        target_frameworks = target_frameworks.split(";")

    tokens: list[PlatformToken] = []
    for moniker in target_frameworks:
        if not moniker.strip():
            continue
        token = parse_target_framework(moniker)
        if token is not None:
            tokens.append(token)
    return tokens


__all__ = ["PlatformToken", "platform_name", "parse_target_framework", "parse_target_frameworks"]
