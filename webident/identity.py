"""The fact surface: host identity as seen from inside a web browser.

The browser sandbox does not expose the real OS user, so `username` and
`realname` are fixed values. Everything else is read from a `BrowserContext`
at call time.
"""

import logging
import struct
from typing import Iterator, Optional

from pydantic import BaseModel

from webident.context import BrowserContext
from webident.exceptions import IdentityError, NotFoundError
from webident.models import Arch, DesktopEnv, Platform
from webident.parser import iter_languages, parse_devicename, parse_distro, parse_platform

logger = logging.getLogger(__name__)

USERNAME = "anonymous"
REALNAME = "Anonymous"


def pointer_width() -> int:
    """Return the pointer width of the running interpreter in bits."""
    return struct.calcsize("P") * 8


class HostIdentity(BaseModel):
    """Data model for every identity fact of one browser context.

    `hostname` and `distro` are None if they could not be derived.
    """

    username: str
    realname: str
    devicename: str
    hostname: Optional[str] = None
    distro: Optional[str] = None
    platform: Platform
    arch: Arch
    desktop_env: DesktopEnv
    languages: list[str]


class BrowserIdentity:
    """Derive identity facts from a `BrowserContext`."""

    def __init__(self, context: BrowserContext) -> None:
        """Initialize."""
        self.context = context

    def username(self) -> str:
        """Return the user name. Always "anonymous" in a browser."""
        return USERNAME

    def realname(self) -> str:
        """Return the real name. Always "Anonymous" in a browser."""
        return REALNAME

    def devicename(self) -> str:
        """Return the browser name and version, e.g. "Firefox 104.0"."""
        return parse_devicename(self.context.user_agent() or "")

    def hostname(self) -> str:
        """Return the domain of the current document.

        Raises:
            NotFoundError if the domain is missing or empty.
        """
        domain = self.context.document_domain()
        if not domain:
            raise NotFoundError("Domain missing")
        return domain

    def distro(self) -> str:
        """Return the OS distribution label.

        Raises:
            PermissionDeniedError if no user agent is available.
            InvalidDataError if the user agent can't be parsed.
        """
        return parse_distro(self.context.user_agent())

    def platform(self) -> Platform:
        """Return the platform family."""
        return parse_platform(self.context.user_agent() or "")

    def arch(self) -> Arch:
        """Return the CPU word width of the execution target."""
        return Arch.WASM64 if pointer_width() == 64 else Arch.WASM32

    def desktop_env(self) -> DesktopEnv:
        """Return the desktop environment, which is the browser itself."""
        return DesktopEnv.WEB_BROWSER

    def lang(self) -> Iterator[str]:
        """Return a single-pass iterator over the declared languages."""
        return iter_languages(self.context.declared_languages())

    def describe(self) -> HostIdentity:
        """Collect every fact into a `HostIdentity`.

        Facts that fail are logged and left as None.
        """
        hostname = distro = None
        try:
            hostname = self.hostname()
        except IdentityError as exc:
            logger.debug(f"Hostname unavailable: {exc}")
        try:
            distro = self.distro()
        except IdentityError as exc:
            logger.debug(f"Distro unavailable: {exc}")

        return HostIdentity(
            username=self.username(),
            realname=self.realname(),
            devicename=self.devicename(),
            hostname=hostname,
            distro=distro,
            platform=self.platform(),
            arch=self.arch(),
            desktop_env=self.desktop_env(),
            languages=list(self.lang()),
        )
