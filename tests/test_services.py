"""Tests for token issuing, block counting, settings and log masking."""

import json
import logging

import pytest
from jose import JWTError, jwt
from pydantic import ValidationError

from collab_backend.core.config import Settings
from collab_backend.core.exceptions import InvalidDocumentUpdateError
from collab_backend.core.logging import SensitiveDataFilter
from collab_backend.domains.collaboration.schemas import DocumentData
from collab_backend.domains.collaboration.services import UpdateIngestService, count_blocks
from collab_backend.domains.identity.services import TokenIssuer, public_jwk


@pytest.fixture
def issuer(private_jwk):
    return TokenIssuer(private_jwk, issuer="blocksuite-example", clock=lambda: 1000.5)


def test_claims_expire_one_hour_after_issue(issuer):
    claims = issuer.build_claims("user1")

    assert claims.iss == "blocksuite-example"
    assert claims.yuserid == "user1"
    assert claims.exp - 1_000_500 == 3_600_000


def test_issue_and_decode(issuer):
    token = issuer.issue("alice")

    claims = issuer.decode(token)
    assert claims.yuserid == "alice"
    assert claims.exp == 1_000_500 + 3_600_000


def test_decode_rejects_tampered_token(issuer):
    header, payload, signature = issuer.issue("alice").split(".")
    other_payload = issuer.issue("mallory").split(".")[1]

    with pytest.raises(JWTError):
        issuer.decode(".".join([header, other_payload, signature]))


def test_public_jwk_drops_private_part(private_jwk):
    public = public_jwk(dict(private_jwk, key_ops=["sign"]))

    assert "d" not in public
    assert "key_ops" not in public
    assert public["x"] == private_jwk["x"]


def test_hmac_key_supported():
    key = {"kty": "oct", "k": "c2VjcmV0LXNpZ25pbmcta2V5LWZvci10ZXN0cw"}
    issuer = TokenIssuer(key, issuer="demo", algorithm="HS256")

    token = issuer.issue("bob")

    assert jwt.get_unverified_header(token)["alg"] == "HS256"
    assert issuer.decode(token).yuserid == "bob"


def test_notify_changed_counts_blocks():
    data = DocumentData(blocks={"type": "Map", "content": {"a": 1, "b": 2}})
    assert UpdateIngestService().notify_changed("room", data) == 2


def test_count_blocks_rejects_garbage():
    with pytest.raises(InvalidDocumentUpdateError, match="Cannot decode document update"):
        count_blocks(b"garbage")


def test_count_blocks_empty_document():
    from pycrdt import Doc

    assert count_blocks(Doc().get_update()) == 0


def test_settings_require_private_key(monkeypatch):
    monkeypatch.delenv("AUTH_PRIVATE_KEY", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_parse_key_from_env(monkeypatch, private_jwk):
    monkeypatch.setenv("AUTH_PRIVATE_KEY", json.dumps(private_jwk))
    monkeypatch.setenv("PORT", "8080")

    settings = Settings(_env_file=None)

    assert settings.auth_private_key == private_jwk
    assert settings.port == 8080
    assert settings.token_ttl_seconds == 3600
    assert settings.app_name == "blocksuite-example"


def test_sensitive_data_filter_masks_tokens():
    record = logging.LogRecord(
        "collab_backend", logging.INFO, __file__, 1,
        "issued token=abc.def.ghi for %s", ("Bearer xyz",), None
    )

    SensitiveDataFilter().filter(record)

    assert "abc.def.ghi" not in record.msg
    assert record.args == ("Bearer ***MASKED***",)
