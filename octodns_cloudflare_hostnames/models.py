#
#
#

"""Wire models for the custom hostnames endpoints.

Attribute names match the lower snake case field names used by the API, so
models validate straight from the decoded JSON envelope.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class CustomHostnameSSL(BaseModel):
    """SSL section of a custom hostname.

    Everything except ``method`` and ``type`` is computed by Cloudflare.
    """

    status: Optional[str] = None
    method: Optional[str] = None
    type: Optional[str] = None
    cname_target: Optional[str] = None
    cname_name: Optional[str] = None


class CustomHostname(BaseModel):
    id: Optional[str] = None
    hostname: Optional[str] = None
    # Per-hostname override of the origin, an optional Cloudflare feature
    custom_origin_server: Optional[str] = None
    ssl: Optional[CustomHostnameSSL] = None
    # Acted upon by Cloudflare-side logic only
    custom_metadata: Optional[Dict[str, Any]] = None

    def to_payload(self) -> Dict[str, Any]:
        """Generates the request payload from this model, unset fields
        omitted."""
        return self.model_dump(exclude_none=True)


class ResultInfo(BaseModel):
    page: int = 0
    per_page: int = 0
    total_pages: int = 0
    count: int = 0
    total_count: int = 0


class ResponseInfo(BaseModel):
    code: int = 0
    message: str = ''


class Response(BaseModel):
    success: bool = False
    errors: List[ResponseInfo] = Field(default_factory=list)
    messages: List[ResponseInfo] = Field(default_factory=list)


class CustomHostnameResponse(Response):
    result: CustomHostname


class CustomHostnameListResponse(Response):
    result: Optional[List[CustomHostname]] = None
    result_info: Optional[ResultInfo] = None
