"""
Testes dos repositórios Django, mappers e DjangoUnitOfWork.

Usam o banco SQLite em memória criado pelo pytest-django.
"""

import pytest

from src.adapters.django_app.cadastro.models import EmpresaModel, FuncionarioModel
from src.adapters.django_app.cadastro.repositories import (
    DjangoEmpresaRepository,
    DjangoFuncionarioRepository,
)
from src.adapters.django_app.shared.database import health_check
from src.adapters.django_app.shared.unit_of_work import DjangoUnitOfWork
from src.core.empresas.entities import EmpresaEntity
from src.core.empresas.ports import EmpresaRepository
from src.core.funcionarios.entities import FuncionarioEntity, PerfilEnum
from src.core.funcionarios.ports import FuncionarioRepository
from src.core.shared.exceptions import RepositoryError


pytestmark = pytest.mark.django_db


@pytest.fixture
def empresa_repo():
    return DjangoEmpresaRepository()


@pytest.fixture
def funcionario_repo():
    return DjangoFuncionarioRepository()


@pytest.fixture
def empresa(empresa_repo):
    return empresa_repo.save(EmpresaEntity.criar("999", "Ana LLC"))


def make_funcionario(empresa, **overrides) -> FuncionarioEntity:
    dados = dict(
        nome="Ana",
        email="ana@x.com",
        cpf="111",
        senha_hash="hash",
        perfil=PerfilEnum.ROLE_ADMIN,
    )
    dados.update(overrides)
    funcionario = FuncionarioEntity.criar(**dados)
    if empresa is not None:
        funcionario.vincular_empresa(empresa)
    return funcionario


class TestDjangoEmpresaRepository:

    def test_implementa_port(self, empresa_repo):
        assert isinstance(empresa_repo, EmpresaRepository)

    def test_save_atribui_id(self, empresa):
        assert empresa.id is not None
        assert EmpresaModel.objects.filter(cnpj="999").exists()

    def test_buscar_por_cnpj(self, empresa_repo, empresa):
        encontrada = empresa_repo.buscar_por_cnpj("999")

        assert encontrada.id == empresa.id
        assert encontrada.razao_social == "Ana LLC"
        assert empresa_repo.buscar_por_cnpj("000") is None

    def test_cnpj_duplicado_vira_repository_error(self, empresa_repo, empresa):
        with pytest.raises(RepositoryError):
            empresa_repo.save(EmpresaEntity.criar("999", "Outra LTDA"))

        assert empresa_repo.count() == 1


class TestDjangoFuncionarioRepository:

    def test_implementa_port(self, funcionario_repo):
        assert isinstance(funcionario_repo, FuncionarioRepository)

    def test_save_e_busca(self, funcionario_repo, empresa):
        salvo = funcionario_repo.save(make_funcionario(empresa))

        por_cpf = funcionario_repo.buscar_por_cpf("111")
        por_email = funcionario_repo.buscar_por_email("ana@x.com")

        assert salvo.id is not None
        assert por_cpf.id == salvo.id
        assert por_email.id == salvo.id
        assert por_cpf.empresa.cnpj == "999"
        assert por_cpf.perfil == PerfilEnum.ROLE_ADMIN

    def test_buscas_inexistentes(self, funcionario_repo):
        assert funcionario_repo.buscar_por_cpf("111") is None
        assert funcionario_repo.buscar_por_email("ana@x.com") is None
        assert funcionario_repo.get_by_id(42) is None

    @pytest.mark.parametrize("overrides", [
        {"email": "outra@x.com"},
        {"cpf": "222"},
    ])
    def test_cpf_ou_email_duplicado_vira_repository_error(
        self, funcionario_repo, empresa, overrides
    ):
        funcionario_repo.save(make_funcionario(empresa))

        with pytest.raises(RepositoryError):
            funcionario_repo.save(make_funcionario(empresa, **overrides))

    def test_funcionario_sem_empresa_vira_repository_error(self, funcionario_repo):
        with pytest.raises(RepositoryError):
            funcionario_repo.save(make_funcionario(None))


class TestDjangoUnitOfWork:

    def test_commit(self, empresa_repo):
        uow = DjangoUnitOfWork()

        with uow:
            empresa_repo.save(EmpresaEntity.criar("999", "Ana LLC"))

        assert uow.is_committed
        assert EmpresaModel.objects.count() == 1

    def test_rollback_descarta_empresa(self, empresa_repo, funcionario_repo):
        """Empresa não fica gravada sem o seu funcionário."""
        existente = empresa_repo.save(EmpresaEntity.criar("888", "Existente LTDA"))
        funcionario_repo.save(make_funcionario(existente))

        uow = DjangoUnitOfWork()
        with pytest.raises(RepositoryError):
            with uow:
                nova = empresa_repo.save(EmpresaEntity.criar("999", "Ana LLC"))
                funcionario_repo.save(make_funcionario(nova))

        assert uow.is_rolled_back
        assert not EmpresaModel.objects.filter(cnpj="999").exists()
        assert FuncionarioModel.objects.count() == 1


def test_health_check():
    assert health_check() is True
