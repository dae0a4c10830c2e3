import pytest

from conftest import SENHA, auth_headers


def _create_and_fetch(client, headers, path, payload):
    r = client.post(path, json=payload, headers=headers)
    assert r.status_code == 201, r.json()
    created = r.json()

    r = client.get(f"{path}/{created['id']}", headers=headers)
    assert r.status_code == 200
    return created, r.json()


def _assert_roundtrip(payload, fetched):
    assert "senha" not in fetched
    for campo, valor in payload.items():
        if campo == "senha":
            continue
        assert fetched[campo] == valor, campo


def test_casa_roundtrip(client, secretario_headers):
    payload = {"nome": "Grifinória", "diretor": "Minerva McGonagall", "cor": "#740001"}
    created, fetched = _create_and_fetch(client, secretario_headers, "/api/casas", payload)
    _assert_roundtrip(payload, fetched)
    assert fetched["total_alunos"] == 0
    assert fetched["alunos"] == []


def test_turma_and_disciplina_roundtrip(client, secretario_headers, factory):
    prof = factory.professor()

    turma = {"nome": "1º Ano - Matutino", "ano_letivo": 2026, "professor_responsavel_id": prof.id}
    _, fetched = _create_and_fetch(client, secretario_headers, "/api/turmas", turma)
    _assert_roundtrip(turma, fetched)

    disciplina = {"nome": "Poções", "codigo": "POC101", "professor_id": prof.id}
    _, fetched = _create_and_fetch(client, secretario_headers, "/api/disciplinas", disciplina)
    _assert_roundtrip(disciplina, fetched)


def test_professor_roundtrip_hides_password(client, secretario_headers):
    payload = {
        "nome": "Severus Snape",
        "email": "snape@hogwarts.edu",
        "senha": "password123",
        "cpf": "11111111111",
        "telefone": "11988887777",
    }
    created, fetched = _create_and_fetch(client, secretario_headers, "/api/professores", payload)
    assert "senha" not in created
    assert created["matricula"]
    _assert_roundtrip(payload, fetched)

    # a senha foi gravada com hash e serve para login
    r = client.post("/api/auth/login", json={"email": "snape@hogwarts.edu", "senha": "password123"})
    assert r.status_code == 200
    assert r.json()["user"]["role"] == "PROFESSOR"


def test_aluno_roundtrip(client, secretario_headers, factory):
    casa, turma = factory.casa(), factory.turma()
    payload = {
        "nome": "Harry Potter",
        "email": "harry.potter@hogwarts.edu",
        "senha": "password123",
        "cpf": "55555555555",
        "telefone": "11977771111",
        "data_nascimento": "1980-07-31",
        "casa_id": casa.id,
        "turma_id": turma.id,
    }
    _, fetched = _create_and_fetch(client, secretario_headers, "/api/alunos", payload)
    _assert_roundtrip(payload, fetched)
    assert fetched["casa"]["id"] == casa.id
    assert fetched["turma"]["id"] == turma.id
    assert fetched["matriculas"] == []


def test_duplicate_casa_name_is_409_naming_field(client, secretario_headers):
    payload = {"nome": "Grifinória", "cor": "#740001"}
    assert client.post("/api/casas", json=payload, headers=secretario_headers).status_code == 201

    r = client.post("/api/casas", json=payload, headers=secretario_headers)
    assert r.status_code == 409
    assert r.json()["campos"] == ["nome"]
    assert "nome" in r.json()["message"]


def test_update_to_duplicate_name_is_409(client, secretario_headers, factory):
    factory.casa(nome="Grifinória")
    outra = factory.casa(nome="Sonserina")

    r = client.put(f"/api/casas/{outra.id}", json={"nome": "Grifinória"}, headers=secretario_headers)
    assert r.status_code == 409


def test_delete_casa_with_students_is_409(client, secretario_headers, factory):
    casa = factory.casa(nome="Grifinória")
    factory.aluno(casa=casa)

    r = client.delete(f"/api/casas/{casa.id}", headers=secretario_headers)
    assert r.status_code == 409
    assert r.json()["message"] == "Não é possível remover: A Casa ainda possui alunos vinculados."

    # continua lá
    assert client.get(f"/api/casas/{casa.id}", headers=secretario_headers).status_code == 200


def test_delete_empty_casa_is_204(client, secretario_headers, factory):
    casa = factory.casa()

    r = client.delete(f"/api/casas/{casa.id}", headers=secretario_headers)
    assert r.status_code == 204
    assert r.content == b""

    assert client.get(f"/api/casas/{casa.id}", headers=secretario_headers).status_code == 404


@pytest.mark.parametrize("method,path,body", [
    ("get", "/api/casas/999", None),
    ("put", "/api/casas/999", {"diretor": "Ninguém"}),
    ("delete", "/api/casas/999", None),
    ("put", "/api/turmas/999", {"ano_letivo": 2027}),
    ("delete", "/api/disciplinas/999", None),
    ("put", "/api/alunos/999", {"nome": "Ninguém"}),
    ("delete", "/api/professores/999", None),
])
def test_missing_target_is_404(client, secretario_headers, method, path, body):
    kwargs = {"headers": secretario_headers}
    if body is not None:
        kwargs["json"] = body
    r = getattr(client, method)(path, **kwargs)
    assert r.status_code == 404


def test_partial_update_keeps_other_fields(client, secretario_headers, factory):
    casa = factory.casa(nome="Lufa-Lufa")

    r = client.put(f"/api/casas/{casa.id}", json={"diretor": "Pomona Sprout"}, headers=secretario_headers)
    assert r.status_code == 200
    assert r.json()["nome"] == "Lufa-Lufa"
    assert r.json()["diretor"] == "Pomona Sprout"


def test_update_rejects_null_on_required_field(client, secretario_headers, factory):
    casa = factory.casa()
    r = client.put(f"/api/casas/{casa.id}", json={"nome": None}, headers=secretario_headers)
    assert r.status_code == 400


def test_invalid_payload_lists_field_errors(client, secretario_headers):
    r = client.post("/api/casas", json={"nome": "G", "cor": "vermelho"}, headers=secretario_headers)
    assert r.status_code == 400
    assert {e["campo"] for e in r.json()["errors"]} == {"nome", "cor"}


@pytest.mark.parametrize("bad_id", ["abc", "0", "-3"])
def test_invalid_path_id_is_400(client, secretario_headers, bad_id):
    r = client.get(f"/api/casas/{bad_id}", headers=secretario_headers)
    assert r.status_code == 400
    assert r.json()["message"] == "Parâmetros inválidos (URL PARAMS)"
    assert r.json()["errors"][0]["campo"] == "casa_id"


def test_aluno_with_unknown_casa_is_404(client, secretario_headers, factory):
    turma = factory.turma()
    r = client.post("/api/alunos", json={
        "nome": "Neville Longbottom",
        "email": "neville@hogwarts.edu",
        "senha": "password123",
        "cpf": "12121212121",
        "data_nascimento": "1980-07-30",
        "casa_id": 999,
        "turma_id": turma.id,
    }, headers=secretario_headers)
    assert r.status_code == 404


def test_aluno_birthdate_must_be_in_the_past(client, secretario_headers, factory):
    casa, turma = factory.casa(), factory.turma()
    r = client.post("/api/alunos", json={
        "nome": "Viajante do Tempo",
        "email": "tempo@hogwarts.edu",
        "senha": "password123",
        "cpf": "13131313131",
        "data_nascimento": "2999-01-01",
        "casa_id": casa.id,
        "turma_id": turma.id,
    }, headers=secretario_headers)
    assert r.status_code == 400
    assert r.json()["errors"][0]["campo"] == "data_nascimento"


def test_email_is_unique_across_identity_tables(client, secretario_headers, factory):
    aluno = factory.aluno()
    r = client.post("/api/professores", json={
        "nome": "Impostor",
        "email": aluno.email,
        "senha": "password123",
        "cpf": "14141414141",
    }, headers=secretario_headers)
    assert r.status_code == 409
    assert r.json()["campos"] == ["email"]


def test_aluno_keeps_own_email_on_update(client, secretario_headers, factory):
    aluno = factory.aluno()
    r = client.put(
        f"/api/alunos/{aluno.id}",
        json={"email": aluno.email, "nome": "Nome Novo"},
        headers=secretario_headers,
    )
    assert r.status_code == 200
    assert r.json()["nome"] == "Nome Novo"


def test_aluno_password_update_is_hashed(client, secretario_headers, factory):
    aluno = factory.aluno()
    r = client.put(f"/api/alunos/{aluno.id}", json={"senha": "nova-senha"}, headers=secretario_headers)
    assert r.status_code == 200
    assert "senha" not in r.json()

    assert client.post("/api/auth/login", json={"email": aluno.email, "senha": SENHA}).status_code == 401
    assert client.post("/api/auth/login", json={"email": aluno.email, "senha": "nova-senha"}).status_code == 200


def test_aluno_info_returns_own_record(client, factory):
    aluno = factory.aluno()
    r = client.get("/api/aluno/info", headers=auth_headers(aluno))
    assert r.status_code == 200
    assert r.json()["id"] == aluno.id
    assert "senha" not in r.json()
