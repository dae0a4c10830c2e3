import pytest

from escola_api.core.config import settings
from escola_api.core.errors import ServerMisconfigured
from escola_api.main import ensure_bootstrap_secretario
from escola_api.services.identities import find_by_email
from conftest import auth_headers


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_unknown_route_uses_message_envelope(client):
    r = client.get("/api/nao-existe")
    assert r.status_code == 404
    assert "message" in r.json()


def test_dashboard_counts(client, secretario_headers, factory):
    grifinoria = factory.casa(nome="Grifinória")
    factory.casa(nome="Sonserina")
    factory.aluno(casa=grifinoria)
    factory.aluno(casa=grifinoria)
    factory.professor()

    r = client.get("/api/secretario/dashboard", headers=secretario_headers)
    assert r.status_code == 200
    body = r.json()
    assert body["total_alunos"] == 2
    assert body["total_professores"] == 1
    assert body["turmas_ativas"] == 2
    assert body["casas"] == [
        {"nome": "Grifinória", "alunos": 2},
        {"nome": "Sonserina", "alunos": 0},
    ]


def test_options(client, factory):
    factory.casa(nome="Corvinal")
    factory.turma(nome="1º Ano")
    factory.disciplina(nome="Poções")

    r = client.get("/api/options", headers=auth_headers(factory.professor()))
    assert r.status_code == 200
    body = r.json()
    assert [c["nome"] for c in body["casas"]] == ["Corvinal"]
    assert body["turmas"][0]["ano_letivo"] == 2026
    assert [d["nome"] for d in body["disciplinas"]] == ["Poções"]


def test_bootstrap_creates_secretario_once(db, monkeypatch):
    monkeypatch.setattr(settings, "BOOTSTRAP_SECRETARIO_EMAIL", "diretor@hogwarts.edu")
    monkeypatch.setattr(settings, "BOOTSTRAP_SECRETARIO_SENHA", "password123")

    assert ensure_bootstrap_secretario(db) is not None
    assert ensure_bootstrap_secretario(db) is None

    found = find_by_email(db, "diretor@hogwarts.edu")
    assert found is not None
    assert found.role.value == "SECRETARIO"


def test_bootstrap_disabled_without_credentials(db, monkeypatch):
    monkeypatch.setattr(settings, "BOOTSTRAP_SECRETARIO_EMAIL", "")
    assert ensure_bootstrap_secretario(db) is None


def test_bootstrap_email_is_normalized_like_login(client, db, monkeypatch):
    monkeypatch.setattr(settings, "BOOTSTRAP_SECRETARIO_EMAIL", "Diretor@Hogwarts.EDU")
    monkeypatch.setattr(settings, "BOOTSTRAP_SECRETARIO_SENHA", "password123")

    secretario = ensure_bootstrap_secretario(db)
    assert secretario.email == "Diretor@hogwarts.edu"
    # rodar de novo encontra o mesmo registro
    assert ensure_bootstrap_secretario(db) is None

    r = client.post("/api/auth/login", json={"email": "Diretor@Hogwarts.EDU", "senha": "password123"})
    assert r.status_code == 200
    assert r.json()["user"]["role"] == "SECRETARIO"


def test_bootstrap_rejects_invalid_email(db, monkeypatch):
    monkeypatch.setattr(settings, "BOOTSTRAP_SECRETARIO_EMAIL", "admin@escola.local")
    monkeypatch.setattr(settings, "BOOTSTRAP_SECRETARIO_SENHA", "password123")

    with pytest.raises(ServerMisconfigured):
        ensure_bootstrap_secretario(db)
    assert find_by_email(db, "admin@escola.local") is None
