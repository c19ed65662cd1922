"""
Paging descriptors returned in the "paging" property of Graph API list responses.

An endpoint always uses one of the three shapes; the caller knows which one.
Continuation links are fetched with fbgraph.client.follow, one page at a time.
"""

from typing import Any

from fbgraph.values import dict_value, int_value, str_value


class _Links:
    def has_next(self) -> bool:
        return bool(self.next)

    def has_previous(self) -> bool:
        return bool(self.previous)


class CursorPaging(_Links):
    """Cursor-based paging: before/after cursors plus previous/next links."""

    def __init__(self, before: str = "", after: str = "", previous: str = "", next: str = "", limit: str = ""):
        self.before = before
        self.after = after
        self.previous = previous
        self.next = next
        self.limit = limit

    @classmethod
    def from_dict(cls, m: dict[str, Any] | None) -> "CursorPaging":
        m = dict_value(m)
        cursors = dict_value(m.get("cursors"))
        limit = m.get("limit")
        return cls(
            before=str_value(cursors.get("before")),
            after=str_value(cursors.get("after")),
            previous=str_value(m.get("previous")),
            next=str_value(m.get("next")),
            limit=str(limit) if isinstance(limit, (str, int)) and not isinstance(limit, bool) else "",
        )


class TimePaging(_Links):
    """Time-based paging: until/since Unix timestamps."""

    def __init__(self, until: int = 0, since: int = 0, limit: int = 0, previous: str = "", next: str = ""):
        self.until = until
        self.since = since
        self.limit = limit
        self.previous = previous
        self.next = next

    @classmethod
    def from_dict(cls, m: dict[str, Any] | None) -> "TimePaging":
        m = dict_value(m)
        return cls(
            until=int_value(m.get("until")),
            since=int_value(m.get("since")),
            limit=int_value(m.get("limit")),
            previous=str_value(m.get("previous")),
            next=str_value(m.get("next")),
        )


class OffsetPaging(_Links):
    """Offset-based paging: offset/limit."""

    def __init__(self, offset: int = 0, limit: int = 0, previous: str = "", next: str = ""):
        self.offset = offset
        self.limit = limit
        self.previous = previous
        self.next = next

    @classmethod
    def from_dict(cls, m: dict[str, Any] | None) -> "OffsetPaging":
        m = dict_value(m)
        return cls(
            offset=int_value(m.get("offset")),
            limit=int_value(m.get("limit")),
            previous=str_value(m.get("previous")),
            next=str_value(m.get("next")),
        )
