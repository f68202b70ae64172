import pytest

from tests.factories import API, cliente_payload, endereco_payload

CLIENTES = f"{API}/clientes"


class TestCadastroCliente:

    def test_cadastrar_cliente(self, client):
        """Registration returns generated ids and the submitted address."""
        dados = cliente_payload()
        response = client.post(CLIENTES, json=dados)
        assert response.status_code == 200

        data = response.json()
        assert data["id"] is not None
        assert data["cpf"] == dados["cpf"]
        assert data["dataNascimento"] == "1990-05-20"
        assert data["endereco"]["id"] is not None
        endereco = {k: v for k, v in data["endereco"].items() if k != "id"}
        assert endereco == dados["endereco"]
        assert "senha" not in data

    def test_login_padrao_e_o_email(self, client):
        dados = cliente_payload()
        del dados["login"]

        response = client.post(CLIENTES, json=dados)
        assert response.status_code == 200
        assert response.json()["login"] == dados["email"]

    def test_cpf_duplicado(self, client):
        client.post(CLIENTES, json=cliente_payload())

        response = client.post(
            CLIENTES, json=cliente_payload(login="outra@techmed.com.br")
        )
        assert response.status_code == 400
        assert response.json()["error"] == "validacao"
        assert "CPF já cadastrado" in response.json()["message"]

    def test_login_duplicado(self, client):
        client.post(CLIENTES, json=cliente_payload())

        response = client.post(CLIENTES, json=cliente_payload(cpf="00000000000"))
        assert response.status_code == 400
        assert "Login já cadastrado" in response.json()["message"]

    def test_endereco_obrigatorio(self, client):
        dados = cliente_payload()
        del dados["endereco"]

        response = client.post(CLIENTES, json=dados)
        assert response.status_code == 422

    def test_contar_clientes(self, client):
        assert client.get(f"{CLIENTES}/contar").json() == 0

        for i in range(3):
            client.post(
                CLIENTES,
                json=cliente_payload(cpf=f"1000000000{i}", login=f"c{i}@techmed.com.br"),
            )

        response = client.get(f"{CLIENTES}/contar")
        assert response.status_code == 200
        assert response.json() == 3


class TestBuscaPorCpf:

    def test_buscar_cliente_por_cpf(self, client):
        client.post(CLIENTES, json=cliente_payload())

        response = client.get(f"{CLIENTES}/cpf/12345678901")
        assert response.status_code == 200
        assert response.json()["cpf"] == "12345678901"

    def test_cpf_nao_cadastrado(self, client):
        response = client.get(f"{CLIENTES}/cpf/55555555555")
        assert response.status_code == 404

        data = response.json()
        assert data["error"] == "nao_encontrado"
        assert data["message"] == "Cliente não encontrado com o CPF: 55555555555"


class TestAutenticacaoCliente:

    def test_cenario_cadastro_e_autenticacao(self, client):
        cadastro = client.post(
            CLIENTES,
            json=cliente_payload(
                cpf="111",
                login="a@b.com",
                email="a@b.com",
                senha="x",
                endereco=endereco_payload(cep="123"),
            ),
        )
        assert cadastro.status_code == 200
        cliente_id = cadastro.json()["id"]
        assert cliente_id is not None
        assert cadastro.json()["endereco"]["cep"] == "123"

        errada = client.post(
            f"{CLIENTES}/autenticar", json={"login": "a@b.com", "senha": "wrong"}
        )
        assert errada.status_code == 401
        assert errada.json()["message"] == "Login ou senha inválidos"

        correta = client.post(
            f"{CLIENTES}/autenticar", json={"login": "a@b.com", "senha": "x"}
        )
        assert correta.status_code == 200
        assert correta.json()["id"] == cliente_id

    def test_erro_igual_para_login_inexistente_e_senha_errada(self, client):
        client.post(CLIENTES, json=cliente_payload())

        inexistente = client.post(
            f"{CLIENTES}/autenticar",
            json={"login": "ninguem@techmed.com.br", "senha": "segredo123"},
        )
        senha_errada = client.post(
            f"{CLIENTES}/autenticar",
            json={"login": "maria@techmed.com.br", "senha": "errada"},
        )

        assert inexistente.status_code == senha_errada.status_code == 401
        assert inexistente.json() == senha_errada.json()


class TestAtualizacaoCliente:

    def test_atualizar_substitui_endereco(self, client):
        cadastro = client.post(CLIENTES, json=cliente_payload()).json()
        novo_endereco = endereco_payload(
            cep="20040-020", logradouro="Rua da Assembleia", numero="10",
            complemento=None, bairro="Centro", cidade="Rio de Janeiro", estado="RJ",
        )

        response = client.put(
            f"{CLIENTES}/{cadastro['id']}",
            json=cliente_payload(nome="Maria Clara", endereco=novo_endereco),
        )
        assert response.status_code == 200

        data = response.json()
        assert data["id"] == cadastro["id"]
        assert data["nome"] == "Maria Clara"
        endereco = {k: v for k, v in data["endereco"].items() if k != "id"}
        assert endereco == novo_endereco

    def test_atualizar_troca_senha(self, client):
        cadastro = client.post(CLIENTES, json=cliente_payload()).json()
        client.put(f"{CLIENTES}/{cadastro['id']}", json=cliente_payload(senha="nova-senha"))

        antiga = client.post(
            f"{CLIENTES}/autenticar",
            json={"login": "maria@techmed.com.br", "senha": "segredo123"},
        )
        nova = client.post(
            f"{CLIENTES}/autenticar",
            json={"login": "maria@techmed.com.br", "senha": "nova-senha"},
        )
        assert antiga.status_code == 401
        assert nova.status_code == 200

    def test_atualizar_cliente_inexistente(self, client):
        response = client.put(f"{CLIENTES}/999", json=cliente_payload())
        assert response.status_code == 404
        assert response.json()["message"] == "Cliente não encontrado com o ID: 999"

    def test_atualizar_com_cpf_de_outro_cliente(self, client):
        client.post(CLIENTES, json=cliente_payload())
        outro = client.post(
            CLIENTES,
            json=cliente_payload(cpf="22222222222", login="ana@techmed.com.br",
                                 email="ana@techmed.com.br"),
        ).json()

        response = client.put(
            f"{CLIENTES}/{outro['id']}",
            json=cliente_payload(login="ana@techmed.com.br", email="ana@techmed.com.br"),
        )
        assert response.status_code == 400
        assert response.json()["error"] == "validacao"


if __name__ == "__main__":
    pytest.main([__file__])
