"""The middleware that derives host identity facts from the HTTP request headers
a browser sends.
"""

from starlette.datastructures import Headers
from starlette.types import ASGIApp, Receive, Scope, Send

from webident.context import HeadersBrowserContext
from webident.identity import BrowserIdentity
from webident.middleware import ScopeKey


class IdentityMiddleware:
    """An ASGI middleware to derive and populate host identity from the
    `User-Agent`, `Host` and `Accept-Language` headers.

    The result `HostIdentity` is stored in `scope[ScopeKey.HOST_IDENTITY]`.
    """

    def __init__(self, app: ASGIApp) -> None:
        """Initialize."""
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Derive host identity through the request headers and store the result
        to `scope`.
        """
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        identity = BrowserIdentity(HeadersBrowserContext(Headers(scope=scope)))

        scope[ScopeKey.HOST_IDENTITY] = identity.describe()

        await self.app(scope, receive, send)
        return
