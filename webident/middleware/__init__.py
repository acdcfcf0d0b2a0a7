"""webident middlewares"""

from enum import Enum, unique


@unique
class ScopeKey(str, Enum):
    """Keys into the ASGI scope dict"""

    HOST_IDENTITY = "webident_host_identity"
