"""
Local error taxonomy for the Graph API helpers.

API-level errors returned by the Graph API in the body of a response are not
exceptions raised by this package; they are returned as `GraphError` values
(see fbgraph.response).
"""


class GraphClientError(Exception):
    """Base class for failures raised by this package."""


class TransportError(GraphClientError):
    """The request could not be completed (DNS, TLS, connection or timeout failure)."""


class ResponseDecodeError(GraphClientError, ValueError):
    """The response body could not be read or decoded as a JSON object."""


class MalformedErrorResponse(ResponseDecodeError):
    """
    The response carries an "error" property that is not a JSON object.

    The partially populated GraphError is kept on `error_response`; only its
    `message` field is meaningful.
    """

    def __init__(self, message: str, error_response):
        super().__init__(message)
        self.error_response = error_response
