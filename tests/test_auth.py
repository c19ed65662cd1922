from fbgraph.auth import appsecret_proof


def test_appsecret_proof_is_hex_hmac_sha256() -> None:
    proof = appsecret_proof("The quick brown fox jumps over the lazy dog", "key")

    assert proof == "f7bc83f430538424b13298e6aa6fb143ef4d59a14946175997479dbc2d1a3cd8"


def test_appsecret_proof_depends_on_secret() -> None:
    assert appsecret_proof("token", "secret-a") != appsecret_proof("token", "secret-b")
