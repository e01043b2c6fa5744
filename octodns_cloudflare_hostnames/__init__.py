#
#
#

from .exceptions import (
    CloudflareClientException,
    CloudflareClientNotFound,
    CloudflareClientUnauthorized,
    CloudflareCustomHostnameNotFound,
    CloudflareDecodeError,
    CloudflareNotImplemented,
    CloudflareTransportError,
)
from .models import CustomHostname, CustomHostnameSSL, ResultInfo

__version__ = __VERSION__ = '0.1.0'

# Imported after __version__, the client reads it for its User-Agent
from .api_client import CloudflareClient  # noqa: E402
from .custom_hostnames import CustomHostnamesClient  # noqa: E402

__all__ = [
    'CloudflareClient',
    'CloudflareClientException',
    'CloudflareClientNotFound',
    'CloudflareClientUnauthorized',
    'CloudflareCustomHostnameNotFound',
    'CloudflareDecodeError',
    'CloudflareNotImplemented',
    'CloudflareTransportError',
    'CustomHostname',
    'CustomHostnameSSL',
    'CustomHostnamesClient',
    'ResultInfo',
]
