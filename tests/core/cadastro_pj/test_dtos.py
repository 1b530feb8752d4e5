"""
Testes para DTOs e envelope de resposta do cadastro PJ.
"""

import pytest

from src.core.cadastro_pj.dtos import (
    CadastroPjInputDTO,
    CadastroPjOutputDTO,
    ResponseDTO,
)
from src.core.empresas.entities import EmpresaEntity
from src.core.funcionarios.entities import FuncionarioEntity


@pytest.fixture
def funcionario_persistido():
    empresa = EmpresaEntity(id=7, cnpj="999", razao_social="Ana LLC")
    return FuncionarioEntity(
        id=3,
        nome="Ana",
        email="ana@x.com",
        cpf="111",
        senha="hash",
        empresa=empresa,
    )


class TestCadastroPjInputDTO:

    def test_senha_fora_do_repr(self):
        """A senha não deve aparecer em logs."""
        dto = CadastroPjInputDTO(
            nome="Ana",
            email="ana@x.com",
            cpf="111",
            senha="super-secreta",
            cnpj="999",
            razao_social="Ana LLC",
        )

        assert "super-secreta" not in repr(dto)

    def test_imutavel(self):
        dto = CadastroPjInputDTO(
            nome="Ana", email="a@x.com", cpf="1", senha="s", cnpj="9", razao_social="Ana LLC"
        )

        with pytest.raises(Exception):
            dto.cnpj = "outro"

    def test_normalizado_remove_espacos_menos_da_senha(self):
        dto = CadastroPjInputDTO(
            nome=" Ana ",
            email="ana@x.com ",
            cpf=" 111",
            senha=" s3nha ",
            cnpj="\t999\n",
            razao_social=" Ana LLC ",
        )

        normalizado = dto.normalizado()

        assert normalizado.nome == "Ana"
        assert normalizado.email == "ana@x.com"
        assert normalizado.cpf == "111"
        assert normalizado.cnpj == "999"
        assert normalizado.razao_social == "Ana LLC"
        assert normalizado.senha == " s3nha "
        assert dto.cnpj == "\t999\n"


class TestCadastroPjOutputDTO:

    def test_from_entity_usa_dados_da_empresa(self, funcionario_persistido):
        output = CadastroPjOutputDTO.from_entity(funcionario_persistido)

        assert output.id == 3
        assert output.cnpj == "999"
        assert output.razao_social == "Ana LLC"

    def test_to_dict_usa_nomes_da_api(self, funcionario_persistido):
        output = CadastroPjOutputDTO.from_entity(funcionario_persistido)

        assert output.to_dict() == {
            "id": 3,
            "name": "Ana",
            "email": "ana@x.com",
            "cpf": "111",
            "razaoSocial": "Ana LLC",
            "cnpj": "999",
        }


class TestResponseDTO:

    def test_ok_sem_erros(self, funcionario_persistido):
        response = ResponseDTO.ok(CadastroPjOutputDTO.from_entity(funcionario_persistido))

        assert response.sucesso
        assert response.to_dict()["errors"] == []
        assert response.to_dict()["data"]["cnpj"] == "999"

    def test_falha_sem_dados(self):
        response = ResponseDTO.falha(["CPF já existente.", "Email já existente."])

        assert not response.sucesso
        assert response.to_dict() == {
            "data": None,
            "errors": ["CPF já existente.", "Email já existente."],
        }

    def test_falha_exige_ao_menos_um_erro(self):
        with pytest.raises(ValueError):
            ResponseDTO.falha([])
