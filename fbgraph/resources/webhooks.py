"""
Webhook Payloads Module.

Types for webhook notifications sent by the Graph API to an app's callback URL,
and for the lead ads (leadgen) entries and leads they refer to.
"""

import json
from typing import Any

from fbgraph.values import dict_items, int_value, str_list, str_value


class WebhookChange:
    """A change of one field of an entry."""

    def __init__(self, field: str = "", value: Any = None):
        self.field = field
        # Left undecoded; its shape depends on the field
        self.value = value


class WebhookEntry:
    """The changes to one object (e.g. a page), with the Unix time they happened."""

    def __init__(self, id: str = "", changed_fields=None, changes=None, time: int = 0):
        self.id = id
        self.changed_fields = changed_fields or []
        self.changes = changes or []
        self.time = time


class WebhookNotif:
    """
    A webhook notification payload.

    `object` is one of "user", "page", "permissions" or "payments". Changed fields
    include, e.g. for a page, "leadgen", "location" or "messages".
    """

    def __init__(self, object: str = "", entry: list[WebhookEntry] | None = None):
        self.object = object
        self.entry = entry or []

    @classmethod
    def from_dict(cls, m: dict[str, Any]) -> "WebhookNotif":
        entries = []
        for e in dict_items(m.get("entry")):
            changes = [WebhookChange(str_value(c.get("field")), c.get("value")) for c in dict_items(e.get("changes"))]
            entries.append(
                WebhookEntry(
                    id=str_value(e.get("id")),
                    changed_fields=str_list(e.get("changed_fields")),
                    changes=changes,
                    time=int_value(e.get("time")),
                )
            )
        return cls(object=str_value(m.get("object")), entry=entries)

    @classmethod
    def from_json(cls, payload: str | bytes) -> "WebhookNotif":
        return cls.from_dict(json.loads(payload))


class LeadGenEntry:
    """A page webhook notification value for the field "leadgen"."""

    def __init__(
        self,
        ad_id: str = "",
        form_id: str = "",
        leadgen_id: str = "",
        page_id: str = "",
        adgroup_id: str = "",
        created_time: int = 0,
    ):
        self.ad_id = ad_id
        self.form_id = form_id
        self.leadgen_id = leadgen_id
        self.page_id = page_id
        self.adgroup_id = adgroup_id
        self.created_time = created_time

    @classmethod
    def from_dict(cls, m: dict[str, Any]) -> "LeadGenEntry":
        return cls(
            ad_id=str_value(m.get("ad_id")),
            form_id=str_value(m.get("form_id")),
            leadgen_id=str_value(m.get("leadgen_id")),
            page_id=str_value(m.get("page_id")),
            adgroup_id=str_value(m.get("adgroup_id")),
            created_time=int_value(m.get("created_time")),
        )

    def to_json(self) -> str:
        return json.dumps(
            {
                "ad_id": self.ad_id,
                "form_id": self.form_id,
                "leadgen_id": self.leadgen_id,
                "page_id": self.page_id,
                "adgroup_id": self.adgroup_id,
                "created_time": self.created_time,
            },
            separators=(",", ":"),
        )


class FormLead:
    """
    A lead submitted through a lead ads form.

    `field_data` is a list of (name, values) pairs, one per form question.
    """

    def __init__(self, created_time: str = "", id: str = "", field_data: list[tuple[str, list[str]]] | None = None):
        self.created_time = created_time
        self.id = id
        self.field_data = field_data or []

    @classmethod
    def from_dict(cls, m: dict[str, Any]) -> "FormLead":
        return cls(
            created_time=str_value(m.get("created_time")),
            id=str_value(m.get("id")),
            field_data=[(str_value(f.get("name")), str_list(f.get("values"))) for f in dict_items(m.get("field_data"))],
        )

    def to_json(self) -> str:
        return json.dumps(
            {
                "created_time": self.created_time,
                "id": self.id,
                "field_data": [{"name": name, "values": values} for name, values in self.field_data],
            },
            separators=(",", ":"),
        )
