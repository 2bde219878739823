"""HTTP transport, authentication and endpoint methods of the v20 API."""

from .auth import AuthProvider, BearerTokenProvider  # noqa: F401
from .http_client import Endpoint, HttpTransport  # noqa: F401
from .v20 import V20Client  # noqa: F401
