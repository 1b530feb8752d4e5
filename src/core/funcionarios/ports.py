"""
Ports (Interfaces) do Domínio de Funcionários.

Define o contrato para persistência e consulta de funcionários.
Buscas por CPF e email sustentam a validação de unicidade do cadastro.
"""

from dataclasses import replace
from datetime import datetime
from typing import Dict, Optional, Protocol, runtime_checkable

from src.core.shared.exceptions import RepositoryError
from src.core.shared.interfaces import Repository

from .entities import FuncionarioEntity


@runtime_checkable
class FuncionarioRepository(Repository[FuncionarioEntity], Protocol):
    """
    Interface para persistência de Funcionários.

    Implementações:
    - DjangoFuncionarioRepository (PostgreSQL/SQLite via ORM)
    - InMemoryFuncionarioRepository (para testes)
    """

    def save(self, funcionario: FuncionarioEntity) -> FuncionarioEntity:
        """
        Persiste funcionário e retorna a entidade persistida (com ID).

        Raises:
            RepositoryError: Se falha na persistência (ex: CPF ou email duplicado)
        """
        ...

    def get_by_id(self, funcionario_id: int) -> Optional[FuncionarioEntity]:
        """Busca funcionário por ID."""
        ...

    def buscar_por_cpf(self, cpf: str) -> Optional[FuncionarioEntity]:
        """Busca funcionário pelo CPF."""
        ...

    def buscar_por_email(self, email: str) -> Optional[FuncionarioEntity]:
        """Busca funcionário pelo email."""
        ...


class InMemoryFuncionarioRepository:
    """
    Implementação em memória do FuncionarioRepository.

    Reproduz as constraints do banco: CPF e email únicos e
    empresa obrigatória.

    Não usar em produção!
    """

    def __init__(self):
        self._funcionarios: Dict[int, FuncionarioEntity] = {}
        self._proximo_id = 1

    def save(self, funcionario: FuncionarioEntity) -> FuncionarioEntity:
        """Salva funcionário em memória, atribuindo ID se necessário."""
        if funcionario.empresa is None or funcionario.empresa.id is None:
            raise RepositoryError(
                "Funcionário sem empresa persistida",
                entity_type="Funcionario"
            )

        for existente in self._funcionarios.values():
            if existente.id == funcionario.id:
                continue
            if existente.cpf == funcionario.cpf or existente.email == funcionario.email:
                raise RepositoryError(
                    f"CPF ou email já cadastrado: {funcionario.cpf}/{funcionario.email}",
                    entity_type="Funcionario"
                )

        if funcionario.id is None:
            persistido = replace(funcionario, id=self._proximo_id)
            self._proximo_id += 1
        else:
            persistido = replace(funcionario, data_atualizacao=datetime.now())

        self._funcionarios[persistido.id] = persistido
        return persistido

    def get_by_id(self, funcionario_id: int) -> Optional[FuncionarioEntity]:
        """Busca funcionário por ID."""
        return self._funcionarios.get(funcionario_id)

    def buscar_por_cpf(self, cpf: str) -> Optional[FuncionarioEntity]:
        """Busca por CPF."""
        return next(
            (f for f in self._funcionarios.values() if f.cpf == cpf),
            None
        )

    def buscar_por_email(self, email: str) -> Optional[FuncionarioEntity]:
        """Busca por email."""
        return next(
            (f for f in self._funcionarios.values() if f.email == email),
            None
        )

    def count(self) -> int:
        """Conta total."""
        return len(self._funcionarios)
