"""A utility module for user agent parsing.

The browser only exposes one semi-structured string describing itself and the
host OS, so every fact here is derived heuristically from that "User-Agent"
string. Families that are not recognized degrade to a fallback value instead
of failing.
"""

import logging
from typing import Any, Iterable, Iterator, Optional

from webident.exceptions import InvalidDataError, PermissionDeniedError
from webident.models import LINUX, MACOS, WINDOWS, Platform

logger = logging.getLogger(__name__)

UNKNOWN_BROWSER = "Unknown Browser"
UNKNOWN_LINUX = "Unknown Linux"
GNOME_WEB = "GNOME Web"


def _find(haystack: str, needle: str, start: int = 0) -> Optional[int]:
    """Return the lowest index of `needle` in `haystack`, or None if it's missing."""
    index = haystack.find(needle, start)
    return None if index == -1 else index


def _rfind(haystack: str, needle: str) -> Optional[int]:
    """Return the highest index of `needle` in `haystack`, or None if it's missing."""
    index = haystack.rfind(needle)
    return None if index == -1 else index


def platform_parenthetical(ua_str: str) -> Optional[str]:
    """Slice out the text between the first "(" and the first ")".

    Returns None if either delimiter is missing or they are out of order.
    """
    if (begin := _find(ua_str, "(")) is None:
        return None
    if (end := _find(ua_str, ")")) is None or end < begin:
        return None
    return ua_str[begin + 1 : end]


def _is_windows(parenthetical: str) -> bool:
    return "Win32" in parenthetical or "Win64" in parenthetical


def parse_devicename(ua_str: str) -> str:
    """Parse the browser name and version, e.g. "Firefox 104.0" or "Chrome 98.0.4758.102".

    Chromium based browsers, GNOME Web and Safari all advertise a "Safari"
    compatibility token, so a "Safari" tail is disambiguated by looking for
    "Chrome" anywhere in the user agent first, then for "Linux".
    """
    if (start := _rfind(ua_str, " ")) is None:
        return UNKNOWN_BROWSER

    tail = ua_str[start + 1 :].replace("/", " ")

    if (safari := _rfind(tail, "Safari")) is not None:
        if (chrome := _rfind(ua_str, "Chrome")) is not None:
            chrome_token = ua_str[chrome:]
            if (end := _find(chrome_token, " ")) is None:
                return "Chrome"
            return chrome_token[:end].replace("/", " ")
        if "Linux" in ua_str:
            return GNOME_WEB
        return tail[safari:]

    if "Edg " in tail:
        return tail.replace("Edg ", "Edge ")
    if "OPR " in tail:
        return tail.replace("OPR ", "Opera ")
    return tail


def _parse_windows(parenthetical: str) -> str:
    if (begin := _find(parenthetical, "NT")) is None:
        return "Windows"
    if _find(parenthetical, ".", begin) is None:
        return "Windows"
    version = parenthetical[begin + 3 :]
    if (end := _find(version, ";")) is not None:
        version = version[:end]
    version = version.strip()
    return f"Windows {version}" if version else "Windows"


def _parse_linux(parenthetical: str) -> str:
    if "X11" in parenthetical or "Wayland" in parenthetical:
        # Drop the windowing system token, e.g. "X11; ".
        if (begin := _find(parenthetical, ";")) is None:
            return UNKNOWN_LINUX
        parenthetical = parenthetical[begin + 2 :]

    if parenthetical.startswith("Linux"):
        return UNKNOWN_LINUX
    if (end := _find(parenthetical, ";")) is None:
        return UNKNOWN_LINUX
    return parenthetical[:end]


def _parse_macos(parenthetical: str, begin: int) -> str:
    mac = parenthetical[begin:]
    if (end := _find(mac, ";")) is not None:
        return mac[:end]
    # The version is written with underscores here, e.g. "10_15_7".
    return mac.replace("_", ".")


def parse_distro(ua_str: Optional[str]) -> str:
    """Parse the OS distribution label, e.g. "Windows 10.0", "Ubuntu" or
    "Mac OS X 10.15.7".

    Raises:
        PermissionDeniedError if `ua_str` is None.
        InvalidDataError if the platform parenthetical can't be found.
    """
    if ua_str is None:
        raise PermissionDeniedError("User agent unavailable")

    if (parenthetical := platform_parenthetical(ua_str)) is None:
        raise InvalidDataError("Parsing failed")

    if _is_windows(parenthetical):
        return _parse_windows(parenthetical)
    if "Linux" in parenthetical:
        return _parse_linux(parenthetical)
    if (begin := _find(parenthetical, "Mac OS X")) is not None:
        return _parse_macos(parenthetical, begin)

    logger.debug("Unrecognized distro in user agent", extra={"platform": parenthetical})
    return parenthetical


def parse_platform(ua_str: str) -> Platform:
    """Parse the coarse platform family from the "User-Agent" string.

    This never fails: an unrecognized family is returned as an unknown
    platform carrying the parenthetical text.
    """
    if (parenthetical := platform_parenthetical(ua_str)) is None:
        return Platform.unknown("Unknown")

    if _is_windows(parenthetical):
        return WINDOWS
    if "Linux" in parenthetical:
        return LINUX
    if "Mac OS X" in parenthetical:
        return MACOS

    logger.debug("Unrecognized platform in user agent", extra={"platform": parenthetical})
    return Platform.unknown(parenthetical)


def iter_languages(values: Iterable[Any]) -> Iterator[str]:
    """Return a lazy iterator over the text values of `values`, in order.

    `values` is copied up front so the iterator is unaffected by later
    changes to the source. Non-text values are skipped.
    """
    snapshot = list(values)
    return (value for value in snapshot if isinstance(value, str))
