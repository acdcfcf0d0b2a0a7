"""Data models for identity facts."""

from enum import Enum, unique
from typing import Optional

from pydantic import BaseModel


@unique
class PlatformFamily(str, Enum):
    """Operating system families that can be told apart from a user agent."""

    WINDOWS = "Windows"
    LINUX = "Linux"
    MACOS = "MacOS"
    UNKNOWN = "Unknown"


@unique
class Arch(str, Enum):
    """CPU word width of the browser execution target."""

    WASM32 = "Wasm32"
    WASM64 = "Wasm64"


@unique
class DesktopEnv(str, Enum):
    """Desktop environment. Always a web browser here."""

    WEB_BROWSER = "WebBrowser"


class Platform(BaseModel, frozen=True):
    """Data model for a platform family.

    `family`: One of the `PlatformFamily` members.
    `name`: The unrecognized platform text, only set when `family` is
            `PlatformFamily.UNKNOWN`.
    """

    family: PlatformFamily
    name: Optional[str] = None

    @classmethod
    def unknown(cls, name: str) -> "Platform":
        """Create an unknown platform carrying the unrecognized text."""
        return cls(family=PlatformFamily.UNKNOWN, name=name)

    def __str__(self) -> str:
        if self.family is PlatformFamily.UNKNOWN:
            return f"Unknown({self.name})"
        return self.family.value


WINDOWS = Platform(family=PlatformFamily.WINDOWS)
LINUX = Platform(family=PlatformFamily.LINUX)
MACOS = Platform(family=PlatformFamily.MACOS)
