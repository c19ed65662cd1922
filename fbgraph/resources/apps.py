"""
App Endpoints Module.

Request and response types for the webhook subscriptions of an app.
"""

import requests

from fbgraph.request import build_request
from fbgraph.resources.base import GraphResponse, data_list
from fbgraph.values import bool_value, dict_items, str_value


def list_app_subscriptions_request(app_access_token: str, app_id: str) -> requests.PreparedRequest:
    """
    Lists the webhook subscriptions of an app.

    Args:
        app_access_token (str): An app access token.
        app_id (str): The app ID.

    Returns:
        requests.PreparedRequest: The request. Use AppSubscriptionsList for the response.
    """
    return build_request("GET", f"{app_id}/subscriptions", app_access_token)


class AppSubscription:
    """
    A webhook subscription of an app to one object type ("page", "user", ...).

    `fields` holds one {"name": ..., "version": ...} mapping per subscribed field.
    """

    def __init__(self, object: str = "", callback_url: str = "", active: bool = False, fields=None):
        self.object = object
        self.callback_url = callback_url
        self.active = active
        self.fields = fields or []


class AppSubscriptionsList(GraphResponse):
    """The webhook subscriptions of an app."""

    def __init__(self):
        super().__init__()
        self.data: list[AppSubscription] = []

    def _fill(self, tree):
        self.data = [
            AppSubscription(
                object=str_value(s.get("object")),
                callback_url=str_value(s.get("callback_url")),
                active=bool_value(s.get("active")),
                fields=[
                    {"name": str_value(f.get("name")), "version": str_value(f.get("version"))}
                    for f in dict_items(s.get("fields"))
                ],
            )
            for s in data_list(tree)
        ]
