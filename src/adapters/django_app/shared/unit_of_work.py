"""
Unit of Work - Implementação Django.

Gerencia transações atômicas entre múltiplos repositórios,
garantindo que empresa e funcionário sejam gravados juntos
ou não sejam gravados.

Usa `transaction.atomic()` em vez de controlar o autocommit
manualmente, o que permite aninhar a UoW em blocos atômicos
já abertos (requests com ATOMIC_REQUESTS, testes com pytest-django).
"""

from typing import Optional
import logging

from django.db import transaction

from src.core.shared.interfaces import UnitOfWork

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementação Django do Unit of Work.

    Example:
        with DjangoUnitOfWork() as uow:
            empresa_repo.save(empresa)
            funcionario_repo.save(funcionario)
        # Commit automático

    Example com rollback:
        with DjangoUnitOfWork():
            empresa_repo.save(empresa)
            raise RepositoryError("CPF duplicado")
        # Rollback automático, empresa descartada
    """

    def __init__(self, using: Optional[str] = None):
        """
        Inicializa Unit of Work.

        Args:
            using: Alias do banco (None = 'default')
        """
        self._using = using
        self._atomic = None
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        """Abre bloco atômico."""
        self._committed = False
        self._rolled_back = False
        self._atomic = transaction.atomic(using=self._using)
        self._atomic.__enter__()
        logger.debug("Transaction started")

    def commit(self) -> None:
        """
        Fecha o bloco atômico confirmando as mudanças.

        Raises:
            Exception: Se commit falhar, re-lança exceção
        """
        if self._atomic is None:
            logger.warning("Transaction already finalized")
            return

        atomic, self._atomic = self._atomic, None
        atomic.__exit__(None, None, None)
        self._committed = True
        logger.debug("Transaction committed")

    def rollback(self) -> None:
        """
        Desfaz todas as mudanças.

        Chamado automaticamente se exceção ocorrer dentro do contexto.
        """
        if self._atomic is None:
            return

        atomic, self._atomic = self._atomic, None
        transaction.set_rollback(True, using=self._using)
        atomic.__exit__(None, None, None)
        self._rolled_back = True
        logger.debug("Transaction rolled back")

    @property
    def is_committed(self) -> bool:
        """Verifica se transação foi comitada."""
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        """Verifica se transação foi revertida."""
        return self._rolled_back


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória para testes.

    Não persiste nada - apenas registra commit/rollback
    para testes unitários sem banco de dados.

    Example:
        uow = InMemoryUnitOfWork()
        with uow:
            repo.save(entity)

        assert uow.committed
    """

    def __init__(self):
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        """Simula início de transação."""
        pass

    def commit(self) -> None:
        """Simula commit."""
        self._committed = True

    def rollback(self) -> None:
        """Simula rollback."""
        self._rolled_back = True

    @property
    def committed(self) -> bool:
        """Verifica se foi comitado."""
        return self._committed

    @property
    def rolled_back(self) -> bool:
        """Verifica se foi revertido."""
        return self._rolled_back
