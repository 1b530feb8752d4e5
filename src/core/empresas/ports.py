"""
Ports (Interfaces) do Domínio de Empresas.

Define o contrato que os Adapters de infraestrutura devem implementar
para persistência e consulta de empresas.

Example:
    # No Adapter (Django)
    class DjangoEmpresaRepository(EmpresaRepository):
        def save(self, empresa: EmpresaEntity) -> EmpresaEntity:
            model = EmpresaMapper.to_model(empresa)
            model.save()
            return EmpresaMapper.to_entity(model)
"""

from dataclasses import replace
from datetime import datetime
from typing import Dict, Optional, Protocol, runtime_checkable

from src.core.shared.exceptions import RepositoryError
from src.core.shared.interfaces import Repository

from .entities import EmpresaEntity


@runtime_checkable
class EmpresaRepository(Repository[EmpresaEntity], Protocol):
    """
    Interface para persistência de Empresas.

    Implementações:
    - DjangoEmpresaRepository (PostgreSQL/SQLite via ORM)
    - InMemoryEmpresaRepository (para testes)
    """

    def save(self, empresa: EmpresaEntity) -> EmpresaEntity:
        """
        Persiste empresa e retorna a entidade persistida (com ID).

        Raises:
            RepositoryError: Se falha na persistência (ex: CNPJ duplicado)
        """
        ...

    def get_by_id(self, empresa_id: int) -> Optional[EmpresaEntity]:
        """Busca empresa por ID."""
        ...

    def buscar_por_cnpj(self, cnpj: str) -> Optional[EmpresaEntity]:
        """
        Busca empresa pelo CNPJ.

        Returns:
            Entidade encontrada ou None se não existir
        """
        ...


class InMemoryEmpresaRepository:
    """
    Implementação em memória do EmpresaRepository.

    Útil para testes unitários e prototipagem.
    Reproduz a constraint de unicidade do CNPJ do banco.

    Não usar em produção!
    """

    def __init__(self):
        self._empresas: Dict[int, EmpresaEntity] = {}
        self._proximo_id = 1

    def save(self, empresa: EmpresaEntity) -> EmpresaEntity:
        """Salva empresa em memória, atribuindo ID se necessário."""
        existente = self.buscar_por_cnpj(empresa.cnpj)
        if existente and existente.id != empresa.id:
            raise RepositoryError(
                f"CNPJ {empresa.cnpj} já cadastrado",
                entity_type="Empresa"
            )

        if empresa.id is None:
            persistida = replace(empresa, id=self._proximo_id)
            self._proximo_id += 1
        else:
            persistida = replace(empresa, data_atualizacao=datetime.now())

        self._empresas[persistida.id] = persistida
        return persistida

    def get_by_id(self, empresa_id: int) -> Optional[EmpresaEntity]:
        """Busca empresa por ID."""
        return self._empresas.get(empresa_id)

    def buscar_por_cnpj(self, cnpj: str) -> Optional[EmpresaEntity]:
        """Busca empresa por CNPJ."""
        for empresa in self._empresas.values():
            if empresa.cnpj == cnpj:
                return empresa
        return None

    def count(self) -> int:
        """Conta total."""
        return len(self._empresas)
