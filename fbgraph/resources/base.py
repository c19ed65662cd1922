"""
Typed Response Base Module.

Shared behaviour of the typed Graph API responses: each one fills itself from a
decoded body and keeps the API's error object, if any, on its `error` attribute.
"""

from typing import Any

from fbgraph.errors import MalformedErrorResponse
from fbgraph.response import GraphError
from fbgraph.values import dict_items


class GraphResponse:
    """
    Base of the typed Graph API responses.

    A response type fills itself from a decoded body. The "error" property, when it
    is an object, is kept on `error` (None if the API returned no error), so a
    typed response works both with read_response and read_response_fill.
    """

    def __init__(self):
        self.error: GraphError | None = None

    def fill(self, tree: dict[str, Any]) -> None:
        """
        Fills the response from a decoded body.

        Raises:
            MalformedErrorResponse: If the "error" property is present but is not a JSON
                object. Its `error_response` holds the error value as message when that
                value is a string; the response itself is left unfilled.
        """
        err = tree.get("error")

        if err is not None and not isinstance(err, dict):
            raise MalformedErrorResponse(
                "got an error response, but error value is not a JSON object; check error_response.message",
                GraphError(message=err if isinstance(err, str) else ""),
            )

        self.error = GraphError.from_dict(err) if err is not None else None
        self._fill(tree)

    def _fill(self, tree: dict[str, Any]) -> None:
        raise NotImplementedError


def data_list(tree: Any) -> list[dict[str, Any]]:
    """Returns the objects of the "data" list of a list response, or an empty list."""
    if not isinstance(tree, dict):
        return []
    return dict_items(tree.get("data"))
