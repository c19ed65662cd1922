"""
Graph API Request Builder Module.

This module sets up requests to the Graph API without sending them. It handles
URL construction against the versioned API root, the optional fields selection,
access token injection and the placement of the encoded parameters (query
string for GET/DELETE, form body for POST).
"""

import io

import requests

from config import Config
from fbgraph.params import StrParam, encode_params

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def graph_url(node_edge: str) -> str:
    """
    Builds the absolute URL of a node or edge.

    Args:
        node_edge (str): The node or edge path, without a leading slash or the API version
                         (e.g. "me/accounts").

    Returns:
        str: The absolute URL, e.g. "https://graph.facebook.com/v2.11/me/accounts".
    """
    return f"{Config.GRAPH_SCHEME}://{Config.GRAPH_HOST}/{Config.GRAPH_API_VERSION}/{node_edge}"


def build_request(
    method: str, node_edge: str, access_token: str, fields: list[str] | None = None, params=()
) -> requests.PreparedRequest:
    """
    Sets up a request to the Graph API but does not send it.

    Args:
        method (str): HTTP method in capitals: "GET", "POST" or "DELETE".
        node_edge (str): The node or edge path, without a leading slash or the API version.
        access_token (str): The access token; always sent as the "access_token" parameter.
        fields (list[str], optional): Fields to select. Leave empty or None to get the
                                      endpoint's default fields.
        params (Iterable[Param], optional): Additional request parameters.

    Returns:
        requests.PreparedRequest: The request, ready to be sent.
    """
    # Copy so the caller's list is never extended
    all_params = list(params)

    if fields:
        all_params.append(StrParam("fields", ",".join(fields)))

    encoded = encode_params(access_token, all_params)
    url = graph_url(node_edge)

    if method == "POST":
        # A bytes body can be replayed from the start if the transport resends it
        body = encoded.encode("ascii")
        request = requests.Request(method, url, headers={"Content-Type": FORM_CONTENT_TYPE}, data=body)
    else:
        request = requests.Request(method, f"{url}?{encoded}")

    return request.prepare()


def body_reader(request: requests.PreparedRequest) -> io.BytesIO:
    """Returns a fresh stream over the request body, positioned at its start."""
    body = request.body or b""

    if isinstance(body, str):
        body = body.encode("utf-8")

    return io.BytesIO(body)
