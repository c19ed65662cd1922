"""
Token Endpoints Module.

Requests for creating system user tokens and for debugging access tokens.
"""

import requests

from fbgraph.params import StrParam
from fbgraph.request import build_request
from fbgraph.resources.base import GraphResponse
from fbgraph.values import bool_value, dict_value, int_value, str_list, str_value


def create_system_token_request(
    user_token: str, appsecret_proof: str, app_id: str, scope: list[str]
) -> requests.PreparedRequest:
    """
    Sets up a request for getting a system user token.

    Args:
        user_token (str): Access token of the system user.
        appsecret_proof (str): Proof generated with fbgraph.auth.appsecret_proof.
        app_id (str): The app the token is for.
        scope (list[str]): Permissions requested for the token.
    """
    return build_request(
        "GET",
        "",
        user_token,
        None,
        [
            StrParam("business_app", app_id),
            StrParam("appsecret_proof", appsecret_proof),
            StrParam("scope", ",".join(scope)),
        ],
    )


def debug_token_request(access_token: str, token_to_debug: str) -> requests.PreparedRequest:
    """Sets up a request for debugging a token. Use TokenDebug for the response."""
    return build_request("GET", "debug_token", access_token, None, [StrParam("input_token", token_to_debug)])


class TokenDebug(GraphResponse):
    """
    The token debugging response.

    `error` is None unless the API itself returned an error, in which case there is
    no data. `data_error_code` and `data_error_message` describe a problem with the
    debugged token and are zero valued when there is none.
    """

    def __init__(self):
        super().__init__()
        self.is_valid = False
        self.app_id = ""
        self.application = ""
        self.type = ""
        self.issued_at = 0
        self.expires_at = 0
        self.scopes: list[str] = []
        self.user_id = ""
        self.data_error_code = 0
        self.data_error_message = ""

    def _fill(self, tree):
        data = dict_value(tree.get("data"))
        self.is_valid = bool_value(data.get("is_valid"))
        self.app_id = str_value(data.get("app_id"))
        self.application = str_value(data.get("application"))
        self.type = str_value(data.get("type"))
        self.issued_at = int_value(data.get("issued_at"))
        self.expires_at = int_value(data.get("expires_at"))
        self.scopes = str_list(data.get("scopes"))
        self.user_id = str_value(data.get("user_id"))

        data_error = dict_value(data.get("error"))
        self.data_error_code = int_value(data_error.get("code"))
        self.data_error_message = str_value(data_error.get("message"))
