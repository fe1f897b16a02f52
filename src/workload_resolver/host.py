"""Host environment classification.

Pack aliases and auto-imports branch on the class of operating system the
build runs on. The set of classes is closed so every alias map and import
map can be checked exhaustively.

Public API (the "studs"):
    HostOS: Closed enumeration of host OS classes
    HostDescriptor: Description of the environment a resolution runs for
"""

from __future__ import annotations

import platform
import sys
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class HostOS(str, Enum):
    """Host operating system classes."""

    WINDOWS = "windows"
    UNIX = "unix"

    @classmethod
    def from_platform(cls, platform_name: str) -> HostOS:
        """Classify a ``sys.platform`` style string.

        Args:
            platform_name: Value such as "win32", "cygwin", "linux", "darwin"

        Returns:
            WINDOWS for win32/cygwin/msys, UNIX for everything else
        """
        if platform_name.lower().startswith(("win", "cygwin", "msys")):
            return cls.WINDOWS
        return cls.UNIX


class HostDescriptor(BaseModel):
    """The environment a resolution runs for.

    Only ``os`` takes part in alias and import selection; ``architecture``
    is carried for callers that want to log or display it.
    """

    model_config = ConfigDict(frozen=True)

    os: HostOS = Field(..., description="Host OS class")
    architecture: str | None = Field(default=None, description="Machine architecture, e.g. x86_64")

    @classmethod
    def current(cls) -> HostDescriptor:
        """Describe the host running this interpreter."""
        return cls(
            os=HostOS.from_platform(sys.platform),
            architecture=platform.machine() or None,
        )

    @property
    def is_windows(self) -> bool:
        return self.os is HostOS.WINDOWS


__all__ = ["HostOS", "HostDescriptor"]
