"""
Graph API Response Decoder Module.

The Graph API signals application-level failures with an "error" property in an
otherwise ordinary JSON body. This module decodes a response body once and
tells apart three shapes:

    - no "error" property: the payload is handed to a RespFiller;
    - "error" is an object: a populated GraphError is returned;
    - "error" is anything else: MalformedErrorResponse is raised, carrying a
      GraphError with only its message set.
"""

import logging
from typing import Any, Protocol

import requests

from fbgraph.errors import MalformedErrorResponse, ResponseDecodeError
from fbgraph.values import int_value, str_value

logger = logging.getLogger(__name__)


class GraphError(Exception):
    """
    An error object returned by the Graph API in the "error" property of a response.

    Unset fields hold their zero value: "" for strings and 0 for integers.
    """

    def __init__(
        self,
        message: str = "",
        type: str = "",
        code: int = 0,
        error_subcode: int = 0,
        error_user_title: str = "",
        error_user_message: str = "",
        fbtrace_id: str = "",
    ):
        super().__init__(message)
        self.message = message
        self.type = type
        self.code = code
        self.error_subcode = error_subcode
        self.error_user_title = error_user_title
        self.error_user_message = error_user_message
        self.fbtrace_id = fbtrace_id

    @classmethod
    def from_dict(cls, m: dict[str, Any]) -> "GraphError":
        """Builds a GraphError from the decoded "error" object, ignoring values of the wrong type."""
        return cls(
            message=str_value(m.get("message")),
            type=str_value(m.get("type")),
            code=int_value(m.get("code")),
            error_subcode=int_value(m.get("error_subcode")),
            error_user_title=str_value(m.get("error_user_title")),
            error_user_message=str_value(m.get("error_user_message")),
            fbtrace_id=str_value(m.get("fbtrace_id")),
        )

    def summary(self) -> str:
        return f"fb: error code {self.code}, subcode {self.error_subcode}; msg: {self.message}"

    def user_message(self) -> str:
        """
        Returns a message suitable for showing to a user.

        Prefers error_user_title and error_user_message, falling back to type and
        message respectively when the API leaves them out.
        """
        title = self.error_user_title or self.type
        message = self.error_user_message or self.message
        return f"{title}: {message}"

    def __str__(self):
        return self.summary()

    def __repr__(self):
        return (
            f"GraphError(message={self.message!r}, type={self.type!r}, code={self.code}, "
            f"error_subcode={self.error_subcode}, fbtrace_id={self.fbtrace_id!r})"
        )

    def __eq__(self, other):
        if not isinstance(other, GraphError):
            return NotImplemented
        return vars(self) == vars(other)

    __hash__ = Exception.__hash__


class RespFiller(Protocol):
    """Anything able to populate itself from a decoded Graph API response body."""

    def fill(self, tree: dict[str, Any]) -> None: ...


def _decode_body(response: requests.Response) -> dict[str, Any]:
    # Reads and decodes the body once; the caller closes the response
    try:
        tree = response.json()

    except (ValueError, OSError, requests.RequestException) as e:
        logger.warning("Error decoding response from %s: %s", response.url, e)
        raise ResponseDecodeError(f"error decoding response: {e}") from e

    if not isinstance(tree, dict):
        raise ResponseDecodeError(f"error decoding response: expected a JSON object, got {type(tree).__name__}")

    return tree


def read_response_fill(response: requests.Response, filler: RespFiller | None) -> GraphError | None:
    """
    Reads a Graph API response and fills `filler` with it unless the API returned an error.

    The filler's `fill` method is called only if the body was read and decoded without
    problems and it has no "error" property. The response is closed on return.

    Args:
        response (requests.Response): The response to read.
        filler (RespFiller | None): Receives the decoded body. May be None.

    Returns:
        GraphError | None: The error object returned by the API, or None on success.

    Raises:
        ResponseDecodeError: If the body could not be read or decoded; the filler is not used.
        MalformedErrorResponse: If the body has an "error" property that is not a JSON object.
            Its `error_response` holds a GraphError whose message is the error value when
            that value is a string; check it together with the exception.
    """
    with response:
        tree = _decode_body(response)

        if "error" in tree:
            err = tree["error"]

            if isinstance(err, dict):
                return GraphError.from_dict(err)

            partial = GraphError(message=err if isinstance(err, str) else "")
            raise MalformedErrorResponse(
                "got an error response, but error value is not a JSON object; check error_response.message",
                partial,
            )

        if filler is not None:
            filler.fill(tree)

        return None


def read_response(response: requests.Response, target):
    """
    Decodes the response body straight into `target` and returns it.

    Unlike read_response_fill, the "error" property is not inspected here; the
    target is expected to pick it up into its own `error` attribute. The response
    is closed on return.

    Raises:
        ResponseDecodeError: If the body could not be read or decoded.
        MalformedErrorResponse: Raised by typed responses (fbgraph.resources.base.GraphResponse)
            when the "error" property is present but is not a JSON object.
    """
    with response:
        target.fill(_decode_body(response))

    return target
