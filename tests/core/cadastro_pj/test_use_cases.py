"""
Testes Unitários para Use Cases do Cadastro de Pessoa Jurídica.

Estratégia de Teste:
- Usa InMemoryEmpresaRepository e InMemoryFuncionarioRepository (fakes)
- Usa FakeUnitOfWork para verificar commit/rollback
- Usa FakePasswordHasher para contar chamadas de hash

Coverage:
- CadastrarPjService
- BuscarEmpresaPorCnpjService
"""

import pytest
from unittest.mock import MagicMock, Mock

from src.core.cadastro_pj.use_cases import (
    CadastrarPjService,
    BuscarEmpresaPorCnpjService,
)
from src.core.cadastro_pj.dtos import CadastroPjInputDTO
from src.core.empresas.entities import EmpresaEntity
from src.core.empresas.ports import InMemoryEmpresaRepository
from src.core.funcionarios.entities import PerfilEnum
from src.core.funcionarios.ports import InMemoryFuncionarioRepository
from src.core.shared.exceptions import (
    EntityNotFoundError,
    HashingUnavailableError,
    RepositoryError,
)


class FakeUnitOfWork:
    """Fake Unit of Work que registra commit/rollback."""

    def __init__(self):
        self._committed = False
        self._rolled_back = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False

    def commit(self):
        self._committed = True

    def rollback(self):
        self._rolled_back = True

    @property
    def committed(self) -> bool:
        return self._committed

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back


class FakePasswordHasher:
    """Hash determinístico que conta as chamadas."""

    def __init__(self):
        self.chamadas = 0

    def gerar_hash(self, senha: str) -> str:
        self.chamadas += 1
        return f"hash::{senha}"

    def verificar(self, senha: str, senha_hash: str) -> bool:
        return senha_hash == f"hash::{senha}"


@pytest.fixture
def empresa_repo():
    return InMemoryEmpresaRepository()


@pytest.fixture
def funcionario_repo():
    return InMemoryFuncionarioRepository()


@pytest.fixture
def hasher():
    return FakePasswordHasher()


@pytest.fixture
def uow():
    return FakeUnitOfWork()


@pytest.fixture
def service(empresa_repo, funcionario_repo, hasher, uow):
    return CadastrarPjService(empresa_repo, funcionario_repo, hasher, uow)


def make_input(**overrides) -> CadastroPjInputDTO:
    dados = dict(
        nome="Ana",
        email="ana@x.com",
        cpf="111",
        senha="secret",
        cnpj="999",
        razao_social="Ana LLC",
    )
    dados.update(overrides)
    return CadastroPjInputDTO(**dados)


class TestCadastrarPjService:
    """Testes para CadastrarPjService."""

    def test_cadastro_em_base_vazia_sucesso(self, service):
        """Exemplo canônico: cadastro de Ana em base vazia."""
        response = service.execute(make_input())

        assert response.sucesso is True
        assert response.errors == ()
        assert response.data.cnpj == "999"
        assert response.data.razao_social == "Ana LLC"
        assert response.data.nome == "Ana"
        assert response.data.email == "ana@x.com"
        assert response.data.cpf == "111"
        assert response.data.id is not None

    def test_cadastro_persiste_uma_empresa_e_um_funcionario(
        self, service, empresa_repo, funcionario_repo
    ):
        """Deve gravar exatamente uma empresa e um funcionário vinculado a ela."""
        service.execute(make_input())

        assert empresa_repo.count() == 1
        assert funcionario_repo.count() == 1

        empresa = empresa_repo.buscar_por_cnpj("999")
        funcionario = funcionario_repo.buscar_por_cpf("111")
        assert funcionario.empresa.id == empresa.id

    def test_funcionario_cadastrado_como_admin(self, service, funcionario_repo):
        """Funcionário do cadastro PJ recebe perfil ROLE_ADMIN."""
        service.execute(make_input())

        funcionario = funcionario_repo.buscar_por_email("ana@x.com")
        assert funcionario.perfil == PerfilEnum.ROLE_ADMIN
        assert funcionario.is_admin

    def test_senha_persistida_como_hash(self, service, funcionario_repo, hasher):
        """A senha nunca é gravada em texto puro."""
        service.execute(make_input())

        funcionario = funcionario_repo.buscar_por_cpf("111")
        assert funcionario.senha == "hash::secret"
        assert hasher.verificar("secret", funcionario.senha)

    def test_commit_executado(self, service, uow):
        service.execute(make_input())

        assert uow.committed is True
        assert uow.rolled_back is False

    def test_cnpj_duplicado_retorna_erro(self, service, empresa_repo, funcionario_repo):
        """CNPJ existente gera 'Empresa já existente.' e nada é gravado."""
        empresa_repo.save(EmpresaEntity.criar(cnpj="999", razao_social="Outra LTDA"))

        response = service.execute(make_input())

        assert response.data is None
        assert response.errors == ("Empresa já existente.",)
        assert empresa_repo.count() == 1
        assert funcionario_repo.count() == 0

    def test_cpf_e_email_duplicados_retorna_dois_erros(
        self, service, empresa_repo, funcionario_repo
    ):
        """CPF e email existentes, CNPJ novo: exatamente dois erros."""
        service.execute(make_input())

        response = service.execute(make_input(cnpj="888", razao_social="Nova LTDA"))

        assert response.data is None
        assert response.errors == ("CPF já existente.", "Email já existente.")
        assert empresa_repo.count() == 1
        assert funcionario_repo.count() == 1

    def test_mesmo_cadastro_duas_vezes_retorna_tres_erros(self, service):
        """Segundo envio idêntico recebe os três erros, na ordem."""
        primeira = service.execute(make_input())
        segunda = service.execute(make_input())

        assert primeira.sucesso
        assert segunda.data is None
        assert segunda.errors == (
            "Empresa já existente.",
            "CPF já existente.",
            "Email já existente.",
        )

    def test_senha_nao_e_processada_quando_validacao_falha(self, service, hasher):
        """O hash só é gerado depois que a validação passa."""
        service.execute(make_input())
        assert hasher.chamadas == 1

        service.execute(make_input())

        assert hasher.chamadas == 1

    def test_falha_de_validacao_nao_abre_transacao(
        self, empresa_repo, funcionario_repo, hasher
    ):
        uow = MagicMock()
        empresa_repo.save(EmpresaEntity.criar(cnpj="999", razao_social="Outra LTDA"))
        service = CadastrarPjService(empresa_repo, funcionario_repo, hasher, uow)

        service.execute(make_input())

        uow.__enter__.assert_not_called()

    def test_validar_dados_existentes_nao_interrompe_na_primeira_falha(
        self, service, empresa_repo, funcionario_repo
    ):
        """Todas as verificações rodam mesmo após a primeira falha."""
        empresa_repo.buscar_por_cnpj = Mock(return_value=object())
        funcionario_repo.buscar_por_cpf = Mock(return_value=None)
        funcionario_repo.buscar_por_email = Mock(return_value=None)

        erros = service.validar_dados_existentes(make_input())

        assert erros == ("Empresa já existente.",)
        funcionario_repo.buscar_por_cpf.assert_called_once_with("111")
        funcionario_repo.buscar_por_email.assert_called_once_with("ana@x.com")

    def test_falha_ao_salvar_funcionario_faz_rollback(
        self, empresa_repo, hasher, uow
    ):
        """Erro de persistência propaga e a UoW desfaz a transação."""
        funcionario_repo = InMemoryFuncionarioRepository()
        funcionario_repo.save = Mock(side_effect=RepositoryError("CPF duplicado"))
        service = CadastrarPjService(empresa_repo, funcionario_repo, hasher, uow)

        with pytest.raises(RepositoryError):
            service.execute(make_input())

        assert uow.rolled_back is True
        assert uow.committed is False

    def test_cnpj_com_espacos_conta_como_existente(
        self, service, empresa_repo, funcionario_repo
    ):
        """Espaços nas extremidades não escapam da verificação de unicidade."""
        service.execute(make_input())

        response = service.execute(
            make_input(cnpj=" 999 ", email="b@x.com", cpf="222")
        )

        assert response.errors == ("Empresa já existente.",)
        assert empresa_repo.count() == 1
        assert funcionario_repo.count() == 1

    def test_dados_gravados_sem_espacos(self, service, funcionario_repo):
        response = service.execute(
            make_input(nome="  Ana  ", email=" ana@x.com ", cpf=" 111", cnpj="999 ")
        )

        assert response.data.cnpj == "999"
        assert response.data.email == "ana@x.com"
        assert funcionario_repo.buscar_por_cpf("111").nome == "Ana"

    def test_hash_indisponivel_propaga(self, empresa_repo, funcionario_repo, uow):
        """Falha do hasher é erro de infraestrutura, não erro de validação."""
        hasher = Mock()
        hasher.gerar_hash.side_effect = HashingUnavailableError("BCrypt indisponível")
        service = CadastrarPjService(empresa_repo, funcionario_repo, hasher, uow)

        with pytest.raises(HashingUnavailableError):
            service.execute(make_input())

        assert empresa_repo.count() == 0
        assert funcionario_repo.count() == 0


class TestBuscarEmpresaPorCnpjService:
    """Testes para BuscarEmpresaPorCnpjService."""

    def test_buscar_empresa_existente(self, empresa_repo):
        empresa = empresa_repo.save(
            EmpresaEntity.criar(cnpj="82198127000121", razao_social="Kazale IT")
        )
        service = BuscarEmpresaPorCnpjService(empresa_repo)

        output = service.execute("82198127000121")

        assert output.id == empresa.id
        assert output.to_dict() == {
            "id": empresa.id,
            "razaoSocial": "Kazale IT",
            "cnpj": "82198127000121",
        }

    def test_buscar_empresa_inexistente_erro(self, empresa_repo):
        service = BuscarEmpresaPorCnpjService(empresa_repo)

        with pytest.raises(EntityNotFoundError) as exc_info:
            service.execute("000")

        assert exc_info.value.message == "Empresa não encontrada para o CNPJ 000"
        assert exc_info.value.entity_id == "000"
