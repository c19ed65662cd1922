"""
Page Endpoints Module.

Request builders and response types for a user's pages, app subscriptions of a
page and a page's lead ads (leadgen) setup.
"""

from typing import Any

import requests

from fbgraph.paging import CursorPaging
from fbgraph.request import build_request
from fbgraph.resources.base import GraphResponse, data_list
from fbgraph.values import bool_value, dict_items, dict_value, str_list, str_value

LIST_USER_PAGES_FIELDS = ["id", "name", "access_token", "category", "perms", "picture{url}"]

LEADGEN_SETUP_FIELDS = ["id", "name", "leadgen_has_crm_integration", "leadgen_forms{id,name,status}"]


def list_user_pages_request(access_token: str) -> requests.PreparedRequest:
    """
    Lists the pages belonging to a user, using a user access token, with the fields:
    id,name,access_token,category,perms,picture{url}

    Use UserPagesList for the response.
    """
    return list_user_pages_fields_request(access_token, LIST_USER_PAGES_FIELDS)


def list_user_pages_fields_request(access_token: str, fields: list[str]) -> requests.PreparedRequest:
    """Lists the pages belonging to a user, using a user access token, with the given fields."""
    return build_request("GET", "me/accounts", access_token, fields)


def subscribe_app_to_page_request(page_access_token: str, page_id: str) -> requests.PreparedRequest:
    """
    Subscribes an app to a page. A page access token belonging to the page must be used.

    Use SubscribeAppResponse for the response.
    """
    return build_request("POST", f"{page_id}/subscribed_apps", page_access_token)


def list_page_subscribed_apps_request(page_access_token: str, page_id: str) -> requests.PreparedRequest:
    """Queries the apps subscribed to a page's events. Use SubscribedAppsList for the response."""
    return build_request("GET", f"{page_id}/subscribed_apps", page_access_token)


def page_leadgen_setup_request(page_access_token: str, page_id: str) -> requests.PreparedRequest:
    """
    Queries the basic settings of a page's leadgen setup with the fields:
    id,name,leadgen_has_crm_integration,leadgen_forms{id,name,status}

    Use PageLeadgenSetup for the response.
    """
    return build_request("GET", page_id, page_access_token, LEADGEN_SETUP_FIELDS)


class UserPage:
    """A page of a user, with the page access token the user holds for it."""

    def __init__(
        self,
        id: str = "",
        name: str = "",
        access_token: str = "",
        category: str = "",
        category_list: list[dict[str, str]] | None = None,
        picture_url: str = "",
        perms: list[str] | None = None,
    ):
        self.id = id
        self.name = name
        self.access_token = access_token
        self.category = category
        self.category_list = category_list or []
        self.picture_url = picture_url
        self.perms = perms or []

    @classmethod
    def from_dict(cls, m: dict[str, Any]) -> "UserPage":
        picture = dict_value(dict_value(m.get("picture")).get("data"))
        return cls(
            id=str_value(m.get("id")),
            name=str_value(m.get("name")),
            access_token=str_value(m.get("access_token")),
            category=str_value(m.get("category")),
            category_list=[
                {"id": str_value(c.get("id")), "name": str_value(c.get("name"))}
                for c in dict_items(m.get("category_list"))
            ],
            picture_url=str_value(picture.get("url")),
            perms=str_list(m.get("perms")),
        )


class UserPagesList(GraphResponse):
    """Lists the pages belonging to a user."""

    def __init__(self):
        super().__init__()
        self.data: list[UserPage] = []
        self.paging = CursorPaging()

    def _fill(self, tree):
        self.data = [UserPage.from_dict(p) for p in data_list(tree)]
        self.paging = CursorPaging.from_dict(tree.get("paging"))


class SubscribeAppResponse(GraphResponse):
    """Tells if an app was subscribed to a page."""

    def __init__(self):
        super().__init__()
        self.success = False

    def _fill(self, tree):
        self.success = bool_value(tree.get("success"))


class SubscribedAppsList(GraphResponse):
    """The apps subscribed to a page. Each entry has category, link, name and id."""

    def __init__(self):
        super().__init__()
        self.data: list[dict[str, str]] = []
        self.paging = CursorPaging()

    def _fill(self, tree):
        self.data = [
            {k: str_value(app.get(k)) for k in ("category", "link", "name", "id")} for app in data_list(tree)
        ]
        self.paging = CursorPaging.from_dict(tree.get("paging"))


class PageLeadgenForm:
    """A lead ads form of a page; status is e.g. "ACTIVE" or "ARCHIVED"."""

    def __init__(self, id: str = "", name: str = "", status: str = ""):
        self.id = id
        self.name = name
        self.status = status

    @classmethod
    def from_dict(cls, m: dict[str, Any]) -> "PageLeadgenForm":
        return cls(id=str_value(m.get("id")), name=str_value(m.get("name")), status=str_value(m.get("status")))


class PageLeadgenSetup(GraphResponse):
    """The leadgen settings of a page and the first page of its lead ads forms."""

    def __init__(self):
        super().__init__()
        self.id = ""
        self.name = ""
        self.leadgen_has_crm_integration = False
        self.leadgen_forms: list[PageLeadgenForm] = []
        self.leadgen_forms_paging = CursorPaging()

    def _fill(self, tree):
        self.id = str_value(tree.get("id"))
        self.name = str_value(tree.get("name"))
        self.leadgen_has_crm_integration = bool_value(tree.get("leadgen_has_crm_integration"))

        forms = dict_value(tree.get("leadgen_forms"))
        self.leadgen_forms = [PageLeadgenForm.from_dict(f) for f in data_list(forms)]
        self.leadgen_forms_paging = CursorPaging.from_dict(forms.get("paging"))


class PageLeadgenFormList(GraphResponse):
    """
    A page of lead ads forms, read from a "next" URL of the forms of a page
    (see PageLeadgenSetup.leadgen_forms_paging).
    """

    def __init__(self):
        super().__init__()
        self.data: list[PageLeadgenForm] = []
        self.paging = CursorPaging()

    def _fill(self, tree):
        self.data = [PageLeadgenForm.from_dict(f) for f in data_list(tree)]
        self.paging = CursorPaging.from_dict(tree.get("paging"))
