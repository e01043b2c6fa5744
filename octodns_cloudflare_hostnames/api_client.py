#
#
#

import logging

from requests import Session

from octodns import __VERSION__ as octodns_version

from . import __version__ as package_version
from .custom_hostnames import CustomHostnamesClient
from .exceptions import CloudflareClientNotFound, CloudflareClientUnauthorized


class CloudflareClient(object):
    BASE_URL = 'https://api.cloudflare.com/client/v4'

    def __init__(self, token=None, email=None, key=None, base_url=BASE_URL):
        self.log = logging.getLogger('CloudflareClient')
        self.log.debug(
            '__init__: token=***, email=%s, key=***, base_url=%s',
            email,
            base_url,
        )
        session = Session()
        session.headers.update(
            {
                'User-Agent': f'octodns/{octodns_version} '
                f'octodns-cloudflare-hostnames/{package_version}'
            }
        )
        if email and key:
            session.headers.update({'X-Auth-Email': email, 'X-Auth-Key': key})
        elif token:
            session.headers.update({'Authorization': f'Bearer {token}'})
        else:
            raise ValueError('either token or email and key must be provided')
        self._session = session
        self.base_url = base_url

        self.custom_hostnames = CustomHostnamesClient(self)

    def _do(self, method, path, data=None):
        url = f'{self.base_url}{path}'
        response = self._session.request(method, url, json=data)
        if response.status_code in (401, 403):
            raise CloudflareClientUnauthorized()
        if response.status_code == 404:
            raise CloudflareClientNotFound()
        response.raise_for_status()
        return response

    def request(self, method, path, data=None):
        return self._do(method, path, data).content
