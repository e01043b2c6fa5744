#
#
#

"""Protocol definitions for request executors.

This module defines structural typing (PEP 544) for the transport that
resource clients talk through, allowing type checking without requiring
explicit inheritance.
"""

from typing import Any, Optional, Protocol


class RequestExecutor(Protocol):
    """Protocol defining the expected interface for request executors.

    CloudflareClient conforms to this interface. Tests and callers with
    their own transport may supply anything with the same shape.
    """

    def request(
        self, method: str, path: str, data: Optional[Any] = None
    ) -> bytes:
        """Perform a single API request.

        Args:
            method: HTTP method (GET, POST, DELETE, ...)
            path: Path relative to the API root, including any query string
            data: Optional JSON-serializable request body

        Returns:
            Raw response body

        Raises:
            Any exception when the request could not be completed
        """
        ...
