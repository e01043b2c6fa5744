#
#
#

import json
import logging
from typing import List, Tuple
from urllib.parse import urlencode

from pydantic import ValidationError

from .clients import RequestExecutor
from .exceptions import (
    CloudflareCustomHostnameNotFound,
    CloudflareDecodeError,
    CloudflareNotImplemented,
    CloudflareTransportError,
)
from .models import (
    CustomHostname,
    CustomHostnameListResponse,
    CustomHostnameResponse,
    CustomHostnameSSL,
    ResultInfo,
)


class CustomHostnamesClient(object):
    '''
    Custom hostnames (Cloudflare for SaaS) of a zone.

    Every call is a single round trip through the executor, nothing is
    cached between calls.
    '''

    PER_PAGE = 50

    def __init__(self, executor: RequestExecutor):
        self.log = logging.getLogger('CustomHostnamesClient')
        self._executor = executor

    def _path(self, zone_id, custom_hostname_id=None):
        path = f'/zones/{zone_id}/custom_hostnames'
        if custom_hostname_id is not None:
            path = f'{path}/{custom_hostname_id}'
        return path

    def _do(self, method, path, data=None):
        try:
            return self._executor.request(method, path, data)
        except Exception as e:
            raise CloudflareTransportError(
                f'request failed: {method} {path}: {e}'
            ) from e

    def _decode(self, raw, model):
        try:
            return model.model_validate_json(raw)
        except ValidationError as e:
            raise CloudflareDecodeError(f'invalid response: {e}') from e

    def create(
        self, zone_id: str, custom_hostname: CustomHostname
    ) -> CustomHostname:
        '''Creates a custom hostname and requests that an SSL certificate be
        issued for it.'''
        self.log.debug(
            'create: zone_id=%s, hostname=%s',
            zone_id,
            custom_hostname.hostname,
        )
        raw = self._do(
            'POST', self._path(zone_id), custom_hostname.to_payload()
        )
        return self._decode(raw, CustomHostnameResponse).result

    def get(self, zone_id: str, custom_hostname_id: str) -> CustomHostname:
        self.log.debug(
            'get: zone_id=%s, custom_hostname_id=%s',
            zone_id,
            custom_hostname_id,
        )
        raw = self._do('GET', self._path(zone_id, custom_hostname_id))
        return self._decode(raw, CustomHostnameResponse).result

    def list(
        self, zone_id: str, page: int
    ) -> Tuple[List[CustomHostname], ResultInfo]:
        return self.filter(zone_id, page, CustomHostname())

    def filter(
        self, zone_id: str, page: int, filter: CustomHostname
    ) -> Tuple[List[CustomHostname], ResultInfo]:
        '''
        Fetches a page of custom hostnames, narrowed by the non-empty fields
        of `filter`. Only `hostname` is supported as a filter.
        '''
        self.log.debug(
            'filter: zone_id=%s, page=%s, hostname=%s',
            zone_id,
            page,
            filter.hostname,
        )
        params = {'per_page': self.PER_PAGE, 'page': page}
        # Empty values would over-constrain the server side filter
        if filter.hostname:
            params['hostname'] = filter.hostname
        query = urlencode(sorted(params.items()))

        raw = self._do('GET', f'{self._path(zone_id)}?{query}')
        response = self._decode(raw, CustomHostnameListResponse)
        return response.result or [], response.result_info or ResultInfo()

    def update_ssl(
        self, zone_id: str, custom_hostname_id: str, ssl: CustomHostnameSSL
    ) -> CustomHostname:
        raise CloudflareNotImplemented()

    def delete(self, zone_id: str, custom_hostname_id: str) -> None:
        '''Deletes a custom hostname and any issued SSL certificates.'''
        self.log.debug(
            'delete: zone_id=%s, custom_hostname_id=%s',
            zone_id,
            custom_hostname_id,
        )
        raw = self._do('DELETE', self._path(zone_id, custom_hostname_id))
        # Body content is irrelevant, but it has to be JSON
        try:
            json.loads(raw)
        except ValueError as e:
            raise CloudflareDecodeError(f'invalid response: {e}') from e

    def id_by_name(self, zone_id: str, hostname: str) -> str:
        '''
        Looks up the id of `hostname` in the zone.

        Only the first page of results is searched, a hostname that the API
        sorts beyond the first 50 matches is reported as not found.
        '''
        self.log.debug(
            'id_by_name: zone_id=%s, hostname=%s', zone_id, hostname
        )
        custom_hostnames, _ = self.filter(
            zone_id, 1, CustomHostname(hostname=hostname)
        )
        for custom_hostname in custom_hostnames:
            if custom_hostname.hostname == hostname:
                return custom_hostname.id or ''
        raise CloudflareCustomHostnameNotFound(hostname)
