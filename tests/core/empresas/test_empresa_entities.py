"""
Testes Unitários para a Entidade Empresa e o repositório em memória.
"""

import pytest

from src.core.empresas.entities import EmpresaEntity
from src.core.empresas.ports import EmpresaRepository, InMemoryEmpresaRepository
from src.core.shared.exceptions import RepositoryError, ValidationError


class TestEmpresaCriacao:
    """Testes para criação de empresa."""

    def test_criar_empresa_valida(self):
        empresa = EmpresaEntity.criar(cnpj=" 82198127000121 ", razao_social=" Kazale IT ")

        assert empresa.cnpj == "82198127000121"
        assert empresa.razao_social == "Kazale IT"
        assert empresa.id is None
        assert not empresa.persistida

    def test_cnpj_vazio_erro(self):
        with pytest.raises(ValidationError) as exc_info:
            EmpresaEntity.criar(cnpj="  ", razao_social="Kazale IT")

        assert exc_info.value.field == "cnpj"

    @pytest.mark.parametrize("razao_social", ["", "Abc", "x" * 201])
    def test_razao_social_invalida_erro(self, razao_social):
        with pytest.raises(ValidationError) as exc_info:
            EmpresaEntity.criar(cnpj="999", razao_social=razao_social)

        assert exc_info.value.field == "razao_social"


class TestInMemoryEmpresaRepository:

    def test_implementa_port(self):
        assert isinstance(InMemoryEmpresaRepository(), EmpresaRepository)

    def test_save_atribui_id_sequencial(self):
        repo = InMemoryEmpresaRepository()

        primeira = repo.save(EmpresaEntity.criar("111", "Empresa Um"))
        segunda = repo.save(EmpresaEntity.criar("222", "Empresa Dois"))

        assert primeira.id == 1
        assert segunda.id == 2
        assert repo.get_by_id(2).cnpj == "222"

    def test_save_nao_altera_entidade_original(self):
        repo = InMemoryEmpresaRepository()
        transiente = EmpresaEntity.criar("111", "Empresa Um")

        repo.save(transiente)

        assert transiente.id is None

    def test_cnpj_duplicado_erro(self):
        repo = InMemoryEmpresaRepository()
        repo.save(EmpresaEntity.criar("111", "Empresa Um"))

        with pytest.raises(RepositoryError):
            repo.save(EmpresaEntity.criar("111", "Empresa Repetida"))

    def test_buscar_por_cnpj_inexistente(self):
        assert InMemoryEmpresaRepository().buscar_por_cnpj("000") is None
