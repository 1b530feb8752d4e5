"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositories, hasher)
- Factory: Nova instância por chamada (services, UoW)
- Configuration: Valores vindos do Django settings
"""

from dependency_injector import containers, providers
from typing import Optional


def _bcrypt_hasher(rounds):
    module = __import__(
        'src.adapters.security.password_hasher',
        fromlist=['BCryptPasswordHasher']
    )
    return module.BCryptPasswordHasher(
        rounds=rounds if rounds is not None else module.BCryptPasswordHasher.DEFAULT_ROUNDS
    )


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: settings
    - Infrastructure: Hash de senha
    - Repositories: Persistência
    - Unit of Work: Transações
    - Services: Use Cases

    Example:
        from src.config.container import get_container

        service = get_container().cadastrar_pj_service()
        response = service.execute(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    # =========================================================================
    # Infrastructure
    # =========================================================================

    password_hasher = providers.Singleton(
        _bcrypt_hasher,
        rounds=config.bcrypt_rounds,
    )

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    empresa_repository = providers.Singleton(
        # Lazy import
        lambda: __import__(
            'src.adapters.django_app.cadastro.repositories',
            fromlist=['DjangoEmpresaRepository']
        ).DjangoEmpresaRepository()
    )

    funcionario_repository = providers.Singleton(
        lambda: __import__(
            'src.adapters.django_app.cadastro.repositories',
            fromlist=['DjangoFuncionarioRepository']
        ).DjangoFuncionarioRepository()
    )

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        lambda: __import__(
            'src.adapters.django_app.shared.unit_of_work',
            fromlist=['DjangoUnitOfWork']
        ).DjangoUnitOfWork()
    )

    # =========================================================================
    # Services / Use Cases (Factory - nova instância por chamada)
    # =========================================================================

    cadastrar_pj_service = providers.Factory(
        lambda empresa_repo, funcionario_repo, password_hasher, uow: __import__(
            'src.core.cadastro_pj.use_cases',
            fromlist=['CadastrarPjService']
        ).CadastrarPjService(
            empresa_repo=empresa_repo,
            funcionario_repo=funcionario_repo,
            password_hasher=password_hasher,
            uow=uow,
        ),
        empresa_repo=empresa_repository,
        funcionario_repo=funcionario_repository,
        password_hasher=password_hasher,
        uow=unit_of_work,
    )

    # Leitura (sem UoW)
    buscar_empresa_por_cnpj_service = providers.Factory(
        lambda empresa_repo: __import__(
            'src.core.cadastro_pj.use_cases',
            fromlist=['BuscarEmpresaPorCnpjService']
        ).BuscarEmpresaPorCnpjService(
            empresa_repo=empresa_repo,
        ),
        empresa_repo=empresa_repository,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization), lendo
    PONTO_BCRYPT_ROUNDS do Django settings.
    """
    global _container

    if _container is None:
        from django.conf import settings

        _container = Container()
        _container.config.from_dict({
            'bcrypt_rounds': getattr(settings, 'PONTO_BCRYPT_ROUNDS', None),
        })

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo.
    """
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

class TestingContainer(containers.DeclarativeContainer):
    """
    Container para testes.

    Usa implementações InMemory e bcrypt com custo mínimo.

    Example:
        container = TestingContainer()
        response = container.cadastrar_pj_service().execute(input_dto)
        assert container.empresa_repository().count() == 1
    """

    config = providers.Configuration()

    password_hasher = providers.Singleton(_bcrypt_hasher, rounds=4)

    empresa_repository = providers.Singleton(
        lambda: __import__(
            'src.core.empresas.ports',
            fromlist=['InMemoryEmpresaRepository']
        ).InMemoryEmpresaRepository()
    )

    funcionario_repository = providers.Singleton(
        lambda: __import__(
            'src.core.funcionarios.ports',
            fromlist=['InMemoryFuncionarioRepository']
        ).InMemoryFuncionarioRepository()
    )

    unit_of_work = providers.Factory(
        lambda: __import__(
            'src.adapters.django_app.shared.unit_of_work',
            fromlist=['InMemoryUnitOfWork']
        ).InMemoryUnitOfWork()
    )

    cadastrar_pj_service = providers.Factory(
        lambda empresa_repo, funcionario_repo, password_hasher, uow: __import__(
            'src.core.cadastro_pj.use_cases',
            fromlist=['CadastrarPjService']
        ).CadastrarPjService(
            empresa_repo=empresa_repo,
            funcionario_repo=funcionario_repo,
            password_hasher=password_hasher,
            uow=uow,
        ),
        empresa_repo=empresa_repository,
        funcionario_repo=funcionario_repository,
        password_hasher=password_hasher,
        uow=unit_of_work,
    )

    buscar_empresa_por_cnpj_service = providers.Factory(
        lambda empresa_repo: __import__(
            'src.core.cadastro_pj.use_cases',
            fromlist=['BuscarEmpresaPorCnpjService']
        ).BuscarEmpresaPorCnpjService(
            empresa_repo=empresa_repo,
        ),
        empresa_repo=empresa_repository,
    )
