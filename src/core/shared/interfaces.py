"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Este módulo define as interfaces que os Adapters devem implementar.
São os "Ports" da Arquitetura Hexagonal.

Tipos de Ports:
- Driven Ports (lado direito): Repository, UnitOfWork, PasswordHasher
- Driving Ports (lado esquerdo): Definidos nos Use Cases

Princípio: Core define interfaces; Adapters implementam.
O fluxo de dependência sempre aponta para o Core.
"""

from abc import ABC, abstractmethod
from typing import Optional, TypeVar, Generic, Protocol, runtime_checkable


# Type variable para entidades genéricas
T = TypeVar("T")


class UnitOfWork(ABC):
    """
    Unit of Work - Coordena transações atômicas.

    Garante que múltiplas operações de persistência sejam
    executadas como uma única unidade: ou todas são persistidas
    ou nenhuma é.

    Pattern: Context Manager
        with uow:
            empresa_repo.save(empresa)
            funcionario_repo.save(funcionario)
        # Commit automático ao sair sem erro
        # Rollback automático se exceção

    Example:
        class DjangoUnitOfWork(UnitOfWork):
            def commit(self):
                self._atomic.__exit__(None, None, None)
    """

    def __enter__(self) -> "UnitOfWork":
        """
        Inicia contexto de transação.

        Returns:
            Self para permitir uso como context manager
        """
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """
        Finaliza contexto de transação.

        Returns:
            False para propagar exceções
        """
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False  # Não suprime exceções

    @abstractmethod
    def _begin_transaction(self) -> None:
        """Inicia uma nova transação."""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """Persiste todas as mudanças."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """
        Desfaz todas as mudanças.

        Chamado automaticamente se exceção ocorrer dentro
        do bloco `with`.
        """
        raise NotImplementedError


class Repository(Protocol, Generic[T]):
    """
    Interface genérica para repositórios.

    Capacidades mínimas: buscar por chave e salvar.

    Type Parameters:
        T: Tipo da entidade gerenciada pelo repositório

    Note:
        Usando Protocol para permitir duck typing.
        Adapters não precisam herdar explicitamente.
    """

    def save(self, entity: T) -> T:
        """
        Persiste entidade e retorna a versão persistida (com ID).

        Raises:
            RepositoryError: Se falha na persistência
        """
        ...

    def get_by_id(self, entity_id: int) -> Optional[T]:
        """
        Busca entidade por ID.

        Returns:
            Entidade encontrada ou None
        """
        ...


@runtime_checkable
class PasswordHasher(Protocol):
    """
    Interface para hash de senhas (irreversível e verificável).

    Implementações:
    - BCryptPasswordHasher (bcrypt)
    - Fakes determinísticos nos testes
    """

    def gerar_hash(self, senha: str) -> str:
        """
        Gera hash irreversível da senha, com salt.

        Raises:
            HashingUnavailableError: Se o algoritmo não está disponível
        """
        ...

    def verificar(self, senha: str, senha_hash: str) -> bool:
        """Verifica se a senha corresponde ao hash."""
        ...
