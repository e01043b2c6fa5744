#
#
#

from octodns.provider import ProviderException


class CloudflareClientException(ProviderException):
    pass


class CloudflareClientNotFound(CloudflareClientException):
    def __init__(self):
        super().__init__('Not Found')


class CloudflareClientUnauthorized(CloudflareClientException):
    def __init__(self):
        super().__init__('Unauthorized')


class CloudflareTransportError(CloudflareClientException):
    pass


class CloudflareDecodeError(CloudflareClientException):
    pass


class CloudflareNotImplemented(CloudflareClientException, NotImplementedError):
    def __init__(self):
        super().__init__('Not implemented')


class CloudflareCustomHostnameNotFound(CloudflareClientException):
    def __init__(self, hostname):
        super().__init__(
            f'the custom hostname could not be found: {hostname}'
        )
        self.hostname = hostname
