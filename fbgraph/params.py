"""
Request Parameters Module.

A parameter is a key => value pair sent along with a Graph API request. The set
of parameter kinds is closed: string-valued and integer-valued. Each kind knows
how to render its value to the text sent on the wire.
"""

from abc import ABC, abstractmethod
from urllib.parse import urlencode

ACCESS_TOKEN_KEY = "access_token"


class Param(ABC):
    """Base of the parameter kinds. Each kind renders its value with `val`."""

    def __init__(self, key: str):
        if not key:
            raise ValueError("Parameter key must not be empty")
        self.key = key

    @abstractmethod
    def val(self) -> str:
        """Returns the value as sent on the wire."""

    def __repr__(self):
        return f"{type(self).__name__}({self.key!r}, {self.val()!r})"


class StrParam(Param):
    """A parameter with a string value."""

    def __init__(self, key: str, value: str):
        super().__init__(key)
        self.value = value

    def val(self) -> str:
        return self.value


class IntParam(Param):
    """A parameter with an integer value, sent as decimal text."""

    def __init__(self, key: str, value: int):
        super().__init__(key)
        self.value = value

    def val(self) -> str:
        return str(int(self.value))


def encode_params(access_token: str, params) -> str:
    """
    Encodes the access token and the given parameters into a form-encoded string.

    The access token is set first, then each parameter in order. A later
    parameter with the same key as an earlier one replaces it, without error.

    Args:
        access_token (str): The access token sent with every request.
        params (Iterable[Param]): Parameters to encode.

    Returns:
        str: The key-sorted "application/x-www-form-urlencoded" encoding.
    """
    values = {ACCESS_TOKEN_KEY: access_token}

    for p in params:
        values[p.key] = p.val()

    return urlencode(sorted(values.items()))
