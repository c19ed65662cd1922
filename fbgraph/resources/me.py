"""
Me Endpoint Module.

Request and response type for the node of the user (or page) an access token belongs to.
"""

import requests

from fbgraph.request import build_request
from fbgraph.resources.base import GraphResponse
from fbgraph.values import str_value


def me_request(access_token: str, fields: list[str] | None = None) -> requests.PreparedRequest:
    """
    Sets up a request for the user or page the access token belongs to.

    Args:
        access_token (str): The user or page access token.
        fields (list[str], optional): Fields to select, e.g. ["id", "name", "email"].

    Returns:
        requests.PreparedRequest: The request. Use GraphResponseMe for the response.
    """
    return build_request("GET", "me", access_token, fields)


class GraphResponseMe(GraphResponse):
    """The id, name and email of the token's owner; fields not selected stay empty."""

    def __init__(self):
        super().__init__()
        self.id = ""
        self.name = ""
        self.email = ""

    def _fill(self, tree):
        self.id = str_value(tree.get("id"))
        self.name = str_value(tree.get("name"))
        self.email = str_value(tree.get("email"))
