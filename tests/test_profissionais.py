import pytest

from techmed.core.exceptions import LOGIN_OU_SENHA_INVALIDOS
from tests.factories import API, endereco_payload, profissional_payload

PROFISSIONAIS = f"{API}/profissionais"


def cadastrar(client, **overrides):
    response = client.post(PROFISSIONAIS, json=profissional_payload(**overrides))
    assert response.status_code == 200
    return response.json()


class TestProfissionais:

    def test_cadastrar_profissional(self, client):
        data = cadastrar(client, endereco=endereco_payload())

        assert data["id"] is not None
        assert data["ativo"] is True
        assert data["login"] == "joao@techmed.com.br"
        assert data["endereco"]["cep"] == "01310-100"
        assert "senha" not in data

    def test_cadastrar_sem_endereco(self, client):
        data = cadastrar(client)
        assert data["endereco"] is None

    def test_cpf_duplicado(self, client):
        cadastrar(client)
        response = client.post(
            PROFISSIONAIS, json=profissional_payload(email="outro@techmed.com.br")
        )
        assert response.status_code == 400

    def test_autenticar_profissional(self, client):
        profissional = cadastrar(client)

        response = client.post(
            f"{PROFISSIONAIS}/autenticar",
            json={"login": "joao@techmed.com.br", "senha": "crm123"},
        )
        assert response.status_code == 200
        assert response.json()["id"] == profissional["id"]

    def test_autenticar_erro_indistinguivel(self, client):
        cadastrar(client)

        inexistente = client.post(
            f"{PROFISSIONAIS}/autenticar",
            json={"login": "ninguem@techmed.com.br", "senha": "crm123"},
        )
        senha_errada = client.post(
            f"{PROFISSIONAIS}/autenticar",
            json={"login": "joao@techmed.com.br", "senha": "errada"},
        )
        assert inexistente.status_code == senha_errada.status_code == 401
        assert inexistente.json()["message"] == senha_errada.json()["message"]
        assert senha_errada.json()["message"] == "Login ou senha inválidos"

    def test_profissional_inativo_nao_autentica(self, client):
        profissional = cadastrar(client)
        client.patch(f"{PROFISSIONAIS}/inativarProfissional/{profissional['id']}")

        response = client.post(
            f"{PROFISSIONAIS}/autenticar",
            json={"login": "joao@techmed.com.br", "senha": "crm123"},
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Profissional inativo"

    def test_profissional_inativo_com_senha_errada(self, client):
        profissional = cadastrar(client)
        client.patch(f"{PROFISSIONAIS}/inativarProfissional/{profissional['id']}")

        response = client.post(
            f"{PROFISSIONAIS}/autenticar",
            json={"login": "joao@techmed.com.br", "senha": "errada"},
        )
        assert response.status_code == 401
        assert response.json()["message"] == LOGIN_OU_SENHA_INVALIDOS

    def test_contar_profissionais(self, client):
        cadastrar(client)
        cadastrar(client, cpf="11122233344", email="ana@techmed.com.br")

        response = client.get(f"{PROFISSIONAIS}/contar")
        assert response.status_code == 200
        assert response.json() == 2


class TestStatusProfissional:

    def test_alternar_status_duas_vezes_restaura(self, client):
        profissional = cadastrar(client)
        url = f"{PROFISSIONAIS}/inativarProfissional/{profissional['id']}"

        primeira = client.patch(url)
        assert primeira.status_code == 204
        assert primeira.content == b""
        assert client.get(f"{PROFISSIONAIS}/ativos").json() == []

        client.patch(url)
        ativos = client.get(f"{PROFISSIONAIS}/ativos").json()
        assert [p["id"] for p in ativos] == [profissional["id"]]
        assert ativos[0]["ativo"] is True

    def test_alternar_status_inexistente(self, client):
        response = client.patch(f"{PROFISSIONAIS}/inativarProfissional/999")
        assert response.status_code == 404

    def test_listar_somente_ativos(self, client):
        joao = cadastrar(client)
        ana = cadastrar(client, cpf="11122233344", email="ana@techmed.com.br")
        client.patch(f"{PROFISSIONAIS}/inativarProfissional/{joao['id']}")

        response = client.get(f"{PROFISSIONAIS}/ativos")
        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [ana["id"]]


class TestEspecialidadesProfissional:

    def test_sem_especialidades_retorna_lista_vazia(self, client):
        profissional = cadastrar(client)

        response = client.get(
            f"{PROFISSIONAIS}/especialidadesProfissional",
            params={"profissionalId": profissional["id"]},
        )
        assert response.status_code == 200
        assert response.json() == []

    def test_vincular_e_listar(self, client):
        profissional = cadastrar(client)
        cardiologia = client.post(f"{API}/especialidades", json={"nome": "Cardiologia"}).json()
        pediatria = client.post(f"{API}/especialidades", json={"nome": "Pediatria"}).json()

        for especialidade in (cardiologia, pediatria):
            response = client.post(
                f"{PROFISSIONAIS}/especialidadesProfissional",
                json={"profissionalId": profissional["id"], "especialidadeId": especialidade["id"]},
            )
            assert response.status_code == 200

        response = client.get(
            f"{PROFISSIONAIS}/especialidadesProfissional",
            params={"profissionalId": profissional["id"]},
        )
        data = response.json()
        assert [e["nomeEspecialidade"] for e in data] == ["Cardiologia", "Pediatria"]
        assert all(e["profissionalId"] == profissional["id"] for e in data)

    def test_vinculo_duplicado(self, client):
        profissional = cadastrar(client)
        especialidade = client.post(f"{API}/especialidades", json={"nome": "Cardiologia"}).json()
        vinculo = {"profissionalId": profissional["id"], "especialidadeId": especialidade["id"]}

        client.post(f"{PROFISSIONAIS}/especialidadesProfissional", json=vinculo)
        response = client.post(f"{PROFISSIONAIS}/especialidadesProfissional", json=vinculo)
        assert response.status_code == 400

    def test_vincular_especialidade_inexistente(self, client):
        profissional = cadastrar(client)
        response = client.post(
            f"{PROFISSIONAIS}/especialidadesProfissional",
            json={"profissionalId": profissional["id"], "especialidadeId": 999},
        )
        assert response.status_code == 404


if __name__ == "__main__":
    pytest.main([__file__])
