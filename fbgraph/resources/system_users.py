"""
System Users Endpoints Module.

Requests for listing the system users of a business and installing apps for them.
"""

import requests

from fbgraph.paging import CursorPaging
from fbgraph.params import StrParam
from fbgraph.request import build_request
from fbgraph.resources.base import GraphResponse, data_list
from fbgraph.values import bool_value, str_value


def list_system_users_request(admin_token: str, business_id: str) -> requests.PreparedRequest:
    """
    Lists the system users and admin system users of a business.

    The admin token must belong to an admin of the business or to an admin system user.
    The ID of each user returned is an app-scoped user ID. Use SystemUserList for the response.
    """
    return build_request("GET", f"{business_id}/system_users", admin_token)


def install_system_user_app_request(admin_token: str, app_id: str, app_user_id: str) -> requests.PreparedRequest:
    """
    Installs an app for a system user.

    The app_user_id must be an app-scoped system user ID, as returned by list_system_users_request.
    """
    return build_request("POST", f"{app_user_id}/applications", admin_token, None, [StrParam("business_app", app_id)])


class SystemUser:
    """
    A system user with its assigned ad accounts ({"id", "account_id", "role"})
    and assigned pages ({"id", "role"}).
    """

    def __init__(self, id: str = "", name: str = "", assigned_ad_accounts=None, assigned_pages=None):
        self.id = id
        self.name = name
        self.assigned_ad_accounts = assigned_ad_accounts or []
        self.assigned_pages = assigned_pages or []

    @classmethod
    def from_dict(cls, m) -> "SystemUser":
        accounts = data_list(m.get("assigned_ad_accounts"))
        pages = data_list(m.get("assigned_pages"))
        return cls(
            id=str_value(m.get("id")),
            name=str_value(m.get("name")),
            assigned_ad_accounts=[{k: str_value(a.get(k)) for k in ("id", "account_id", "role")} for a in accounts],
            assigned_pages=[{k: str_value(p.get(k)) for k in ("id", "role")} for p in pages],
        )


class SystemUserList(GraphResponse):
    """The system users of a business."""

    def __init__(self):
        super().__init__()
        self.data: list[SystemUser] = []
        self.paging = CursorPaging()

    def _fill(self, tree):
        self.data = [SystemUser.from_dict(u) for u in data_list(tree)]
        self.paging = CursorPaging.from_dict(tree.get("paging"))


class InstallSystemUserResponse(GraphResponse):
    """
    The result of installing an app for a system user.

    The API answers either with a bare {"success": true} or with {"data": true};
    both are read into `success`.
    """

    def __init__(self):
        super().__init__()
        self.success = False

    def _fill(self, tree):
        self.success = bool_value(tree["success"] if "success" in tree else tree.get("data"))
