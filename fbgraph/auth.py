"""
Request Signing Module.

Calls made with a user access token can be secured with an app secret proof,
sent as the "appsecret_proof" parameter.
"""

import hashlib
import hmac


def appsecret_proof(user_access_token: str, app_secret: str) -> str:
    """
    Generates an app secret proof for an app.

    The user access token must belong to an admin of the app.

    Args:
        user_access_token (str): The access token to sign.
        app_secret (str): The app secret from the app dashboard.

    Returns:
        str: The hex encoded HMAC-SHA256 of the token, keyed with the app secret.
    """
    sig = hmac.new(app_secret.encode("utf-8"), user_access_token.encode("utf-8"), hashlib.sha256)
    return sig.hexdigest()
