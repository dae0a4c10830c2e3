from datetime import timedelta

import pytest
from jose import jwt

from escola_api.core.config import settings
from escola_api.core.errors import ServerMisconfigured, TokenExpired, Unauthorized
from escola_api.core.security import hash_password, sign, verify, verify_password


def test_hash_password_roundtrip():
    h = hash_password("segredo123")
    assert h != "segredo123"
    assert verify_password("segredo123", h)
    assert not verify_password("outra-senha", h)


def test_verify_password_with_corrupted_hash_is_false():
    assert verify_password("segredo123", "nao-e-um-hash") is False


def test_sign_and_verify_carry_identity_claims():
    token = sign({"id": 7, "email": "a@hogwarts.edu", "role": "ALUNO"})
    claims = verify(token)
    assert claims["id"] == 7
    assert claims["email"] == "a@hogwarts.edu"
    assert claims["role"] == "ALUNO"
    assert claims["exp"] - claims["iat"] == 7 * 24 * 60 * 60


def test_expired_token_raises_token_expired():
    token = sign({"id": 1, "email": "a@hogwarts.edu", "role": "ALUNO"}, ttl=timedelta(seconds=-10))
    with pytest.raises(TokenExpired) as exc:
        verify(token)
    assert "expirado" in exc.value.message


def test_tampered_token_is_generic_unauthorized():
    token = sign({"id": 1, "email": "a@hogwarts.edu", "role": "ALUNO"})
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])
    with pytest.raises(Unauthorized) as exc:
        verify(tampered)
    assert not isinstance(exc.value, TokenExpired)
    assert exc.value.message == "Token inválido."


def test_token_signed_with_other_secret_is_rejected():
    token = jwt.encode({"id": 1, "email": "a@hogwarts.edu", "role": "ALUNO"}, "outro", algorithm="HS256")
    with pytest.raises(Unauthorized):
        verify(token)


def test_missing_secret_is_server_misconfigured(monkeypatch):
    monkeypatch.setattr(settings, "JWT_SECRET", None)
    with pytest.raises(ServerMisconfigured):
        sign({"id": 1})
    with pytest.raises(ServerMisconfigured):
        verify("qualquer.coisa.aqui")
