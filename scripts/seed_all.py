"""
Popula a API com dados de demonstração (casas, turmas, disciplinas,
professores, alunos e matrículas).

Uso:
    SEED_EMAIL=diretor@hogwarts.edu SEED_SENHA=... python3 scripts/seed_all.py

Rodar de novo é seguro: 409 significa que o registro já existe.
"""

import os

import requests

API_URL = os.getenv("API_URL", "http://127.0.0.1:3000/api").rstrip("/")
EMAIL = os.getenv("SEED_EMAIL")
SENHA = os.getenv("SEED_SENHA")
DEFAULT_PASSWORD = os.getenv("SEED_DEFAULT_PASSWORD", "password123")

if not EMAIL or not SENHA:
    raise SystemExit("SEED_EMAIL/SEED_SENHA não definidos (credenciais de um secretário).")

CASAS = [
    {"nome": "Grifinória", "diretor": "Minerva McGonagall", "cor": "#740001"},
    {"nome": "Sonserina", "diretor": "Severus Snape", "cor": "#1A472A"},
    {"nome": "Lufa-Lufa", "diretor": "Pomona Sprout", "cor": "#FFDB00"},
    {"nome": "Corvinal", "diretor": "Filius Flitwick", "cor": "#0E1A40"},
]

TURMAS = [
    {"nome": "1º Ano - Matutino", "ano_letivo": 2026},
    {"nome": "2º Ano - Matutino", "ano_letivo": 2026},
    {"nome": "3º Ano - Vespertino", "ano_letivo": 2026},
    {"nome": "4º Ano - Vespertino", "ano_letivo": 2026},
]

DISCIPLINAS = [
    {"nome": "Poções", "codigo": "POC101"},
    {"nome": "Feitiços", "codigo": "FEI101"},
    {"nome": "Transfiguração", "codigo": "TRA101"},
    {"nome": "Adivinhação", "codigo": "ADI101"},
    {"nome": "Estudos dos Trouxas", "codigo": "EST101"},
    {"nome": "Defesa Contra as Artes das Trevas", "codigo": "DCA101"},
]

PROFESSORES = [
    {"nome": "Severus Snape", "email": "snape@hogwarts.edu", "cpf": "11111111111",
     "telefone": "11988887777", "disciplina": "Poções"},
    {"nome": "Minerva McGonagall", "email": "mcgonagall@hogwarts.edu", "cpf": "22222222222",
     "telefone": "11988886666", "disciplina": "Transfiguração"},
    {"nome": "Filius Flitwick", "email": "flitwick@hogwarts.edu", "cpf": "33333333333",
     "telefone": "11988885555", "disciplina": "Feitiços"},
    {"nome": "Sibila Trelawney", "email": "trelawney@hogwarts.edu", "cpf": "44444444444",
     "telefone": "11988884444", "disciplina": "Adivinhação"},
]

ALUNOS = [
    {"nome": "Harry Potter", "email": "harry.potter@hogwarts.edu", "cpf": "55555555555",
     "telefone": "11977771111", "data_nascimento": "1980-07-31",
     "casa": "Grifinória", "turma": "1º Ano - Matutino"},
    {"nome": "Hermione Granger", "email": "hermione.granger@hogwarts.edu", "cpf": "66666666666",
     "telefone": "11977772222", "data_nascimento": "1979-09-19",
     "casa": "Grifinória", "turma": "1º Ano - Matutino"},
    {"nome": "Draco Malfoy", "email": "draco.malfoy@hogwarts.edu", "cpf": "77777777777",
     "telefone": "11977773333", "data_nascimento": "1980-06-05",
     "casa": "Sonserina", "turma": "1º Ano - Matutino"},
    {"nome": "Luna Lovegood", "email": "luna.lovegood@hogwarts.edu", "cpf": "88888888888",
     "telefone": "11977774444", "data_nascimento": "1981-02-13",
     "casa": "Corvinal", "turma": "2º Ano - Matutino"},
    {"nome": "Cedrico Diggory", "email": "cedrico.diggory@hogwarts.edu", "cpf": "99999999999",
     "telefone": "11977775555", "data_nascimento": "1977-09-15",
     "casa": "Lufa-Lufa", "turma": "4º Ano - Vespertino"},
]

session = requests.Session()


def login() -> None:
    r = session.post(f"{API_URL}/auth/login", json={"email": EMAIL, "senha": SENHA}, timeout=30)
    r.raise_for_status()
    session.headers["Authorization"] = f"Bearer {r.json()['token']}"


def create(path: str, payload: dict) -> None:
    r = session.post(f"{API_URL}{path}", json=payload, timeout=30)
    if r.status_code == 409:
        print(f"  = já existe: {path} {payload.get('nome') or payload}")
        return
    r.raise_for_status()
    print(f"  + criado: {path} {payload.get('nome') or payload}")


def by_name(path: str) -> dict:
    r = session.get(f"{API_URL}{path}", timeout=30)
    r.raise_for_status()
    return {item["nome"]: item["id"] for item in r.json()}


def main() -> None:
    login()

    print("Casas...")
    for casa in CASAS:
        create("/casas", casa)

    print("Turmas...")
    for turma in TURMAS:
        create("/turmas", turma)

    print("Disciplinas...")
    for disciplina in DISCIPLINAS:
        create("/disciplinas", disciplina)

    casas = by_name("/casas")
    turmas = by_name("/turmas")
    disciplinas = by_name("/disciplinas")

    print("Professores...")
    for prof in PROFESSORES:
        payload = {k: v for k, v in prof.items() if k != "disciplina"}
        create("/professores", {**payload, "senha": DEFAULT_PASSWORD})

    professores = by_name("/professores")
    for prof in PROFESSORES:
        vinculos = [
            {"turma_id": turma_id, "disciplina_id": disciplinas[prof["disciplina"]]}
            for turma_id in turmas.values()
        ]
        r = session.patch(
            f"{API_URL}/professores/{professores[prof['nome']]}/disciplinas",
            json={"vinculos": vinculos},
            timeout=30,
        )
        r.raise_for_status()

    print("Alunos...")
    for aluno in ALUNOS:
        payload = {k: v for k, v in aluno.items() if k not in ("casa", "turma")}
        payload.update({
            "senha": DEFAULT_PASSWORD,
            "casa_id": casas[aluno["casa"]],
            "turma_id": turmas[aluno["turma"]],
        })
        create("/alunos", payload)

    print("Matrículas...")
    alunos = by_name("/alunos")
    for aluno_id in alunos.values():
        for nome in ("Poções", "Feitiços", "Transfiguração"):
            create("/matriculas", {"aluno_id": aluno_id, "disciplina_id": disciplinas[nome]})

    print("Seed concluído.")


if __name__ == "__main__":
    main()
