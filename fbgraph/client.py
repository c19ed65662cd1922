"""
Graph API Client Module.

This module provides the low-level HTTP transport for the Graph API. It sends
one prepared request at a time with a bounded timeout and reports network
failures as TransportError. Response status codes and bodies are left to
fbgraph.response.
"""

import logging

import requests
from requests.adapters import HTTPAdapter

from config import Config
from fbgraph.errors import TransportError
from fbgraph.request import build_request

logger = logging.getLogger(__name__)

SESSION = requests.Session()
SESSION.mount("https://", HTTPAdapter())


def send(request: requests.PreparedRequest, timeout: float = Config.GRAPH_TIMEOUT) -> requests.Response:
    """
    Executes a prepared request against the Graph API.

    Args:
        request (requests.PreparedRequest): The request, usually from build_request.
        timeout (float, optional): Seconds to wait for the server. Defaults to Config.GRAPH_TIMEOUT.

    Returns:
        requests.Response: The raw response, whatever its status code.

    Raises:
        TransportError: If a network, DNS, TLS or timeout failure occurs.
    """
    try:
        return SESSION.send(request, timeout=timeout)

    except requests.RequestException as e:
        logger.error("Error sending %s %s: %s", request.method, request.url, e)
        raise TransportError(f"Error sending {request.method} request: {e}") from e


def req(
    method: str,
    node_edge: str,
    access_token: str,
    fields: list[str] | None = None,
    *params,
    timeout: float = Config.GRAPH_TIMEOUT,
) -> requests.Response:
    """
    Sets up a request with build_request and sends it.

    Args:
        method (str): HTTP method in capitals: "GET", "POST" or "DELETE".
        node_edge (str): The node or edge path, without a leading slash or the API version.
        access_token (str): The access token.
        fields (list[str], optional): Fields to select.
        *params (Param): Additional request parameters.
        timeout (float, optional): Seconds to wait for the server.

    Returns:
        requests.Response: The raw response.
    """
    return send(build_request(method, node_edge, access_token, fields, params), timeout=timeout)


def follow(url: str, timeout: float = Config.CONTINUATION_TIMEOUT) -> requests.Response:
    """
    Fetches a continuation page given by a paging descriptor's "next" or "previous" URL.

    The URL is used as is; it already carries the access token and cursors.

    Args:
        url (str): The absolute continuation URL.
        timeout (float, optional): Seconds to wait for the server. Defaults to Config.CONTINUATION_TIMEOUT.

    Returns:
        requests.Response: The raw response.
    """
    return send(requests.Request("GET", url).prepare(), timeout=timeout)
