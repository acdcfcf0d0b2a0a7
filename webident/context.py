"""Sources of the raw browser-provided strings identity facts are derived from.

Anything that satisfies the `BrowserContext` protocol can back a
`BrowserIdentity`. Each capability is read at call time and is never cached.
"""

import logging
from typing import Any, Optional, Protocol, Sequence

from starlette.datastructures import Headers

from webident.config import settings

logger = logging.getLogger(__name__)


class BrowserContext(Protocol):
    """Protocol for the browser capabilities the parser consumes."""

    def user_agent(self) -> Optional[str]:  # pragma: no cover
        """Return the navigator user agent string, or None if unavailable."""
        ...

    def document_domain(self) -> Optional[str]:  # pragma: no cover
        """Return the hostname of the document location, or None if unavailable."""
        ...

    def declared_languages(self) -> Sequence[Any]:  # pragma: no cover
        """Return the raw navigator languages array. Elements may not be text."""
        ...


def _lookup(root: Any, *path: str) -> Any:
    """Walk an attribute chain on a JS proxy, returning None if any link is missing."""
    node = root
    for name in path:
        if node is None:
            return None
        node = getattr(node, name, None)
    return node


class WindowBrowserContext:
    """A `BrowserContext` backed by a JS `window` object, as exposed by Pyodide.

    A missing link anywhere in an accessor chain (no window, no document, no
    location) makes the whole capability absent.
    """

    def __init__(self, window: Any = None) -> None:
        """Initialize."""
        self.window = window

    @classmethod
    def from_pyodide(cls) -> "WindowBrowserContext":
        """Bind to the global `window` of the Pyodide runtime.

        Raises:
            ImportError if not running under Pyodide.
        """
        import js

        return cls(getattr(js, "window", None))

    def user_agent(self) -> Optional[str]:
        """Return `window.navigator.userAgent`."""
        user_agent = _lookup(self.window, "navigator", "userAgent")
        return user_agent if isinstance(user_agent, str) else None

    def document_domain(self) -> Optional[str]:
        """Return `window.document.location.hostname`."""
        hostname = _lookup(self.window, "document", "location", "hostname")
        return hostname if isinstance(hostname, str) else None

    def declared_languages(self) -> Sequence[Any]:
        """Return `window.navigator.languages` as a list."""
        languages = _lookup(self.window, "navigator", "languages")
        if languages is None:
            return []
        return list(languages)


class StaticBrowserContext:
    """A `BrowserContext` with fixed values, e.g. supplied on the command line."""

    def __init__(
        self,
        user_agent: Optional[str] = None,
        document_domain: Optional[str] = None,
        languages: Optional[Sequence[Any]] = None,
    ) -> None:
        """Initialize."""
        self._user_agent = user_agent
        self._document_domain = document_domain
        self._languages = list(languages) if languages is not None else []

    def user_agent(self) -> Optional[str]:
        """Return the fixed user agent."""
        return self._user_agent

    def document_domain(self) -> Optional[str]:
        """Return the fixed document domain."""
        return self._document_domain

    def declared_languages(self) -> Sequence[Any]:
        """Return the fixed languages."""
        return self._languages


def get_accepted_languages(languages: str | None) -> list[str]:
    """Parse an "Accept-Language" header into language tags sorted by quality.

    The wildcard "*" is dropped since it does not name a language. An empty
    list is returned for a missing or malformed header.
    """
    if not languages:
        return []
    result = []
    try:
        for lang in languages.split(","):
            language, *params = [part.strip() for part in lang.split(";")]
            if not language or language == "*":
                continue
            quality = 1.0  # Default q-value is 1.0
            for param in params:
                # Whitespace around "=" and the case of "q" are both allowed.
                name, _, value = param.partition("=")
                if name.strip().lower() == "q":
                    quality = float(value.strip())
            result.append((language, quality))
    except ValueError:
        logger.debug("Malformed Accept-Language header", extra={"header": languages})
        return []

    # Sort by quality in descending order, keeping header order for ties.
    result.sort(key=lambda x: x[1], reverse=True)
    return [language[0] for language in result]


def strip_port(host: str) -> str:
    """Strip the port from a "Host" header value, handling IPv6 literals."""
    if host.startswith("["):
        end = host.find("]")
        return host[1:end] if end != -1 else host
    return host.rsplit(":", 1)[0] if host.count(":") == 1 else host


class HeadersBrowserContext:
    """A `BrowserContext` backed by the headers of an HTTP request sent by a browser.

    `User-Agent` stands in for `navigator.userAgent`, the `Host` header (or
    `X-Forwarded-Host` if `web.identity.trust_forwarded_host` is set) for
    `location.hostname`, and `Accept-Language` for `navigator.languages`.
    """

    def __init__(self, headers: Headers) -> None:
        """Initialize."""
        self.headers = headers

    def user_agent(self) -> Optional[str]:
        """Return the `User-Agent` header."""
        return self.headers.get("user-agent")

    def document_domain(self) -> Optional[str]:
        """Return the request host without its port."""
        host = None
        if settings.web.identity.trust_forwarded_host:
            host = self.headers.get("x-forwarded-host")
            if host:
                # Proxies may append their own host, the first one is the client's.
                host = host.split(",")[0].strip()
        host = host or self.headers.get("host")
        return strip_port(host) if host is not None else None

    def declared_languages(self) -> Sequence[Any]:
        """Return the languages listed in the `Accept-Language` header."""
        return get_accepted_languages(self.headers.get("accept-language"))
