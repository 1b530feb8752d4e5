"""
Repositórios Django para persistência de Empresas e Funcionários.

Implementam as interfaces (Ports) definidas no Core.
São DRIVEN ADAPTERS - acionados pelo Core em resposta a operações.

Responsabilidades:
- Implementar EmpresaRepository e FuncionarioRepository
- Mapear entities para models e vice-versa
- Traduzir IntegrityError (constraints de unicidade) em RepositoryError

Princípios:
- Repository não contém lógica de negócio
- Usa Mapper para conversões
- Trata apenas persistência
"""

from typing import Optional
import logging

from django.db import IntegrityError, transaction

from src.core.empresas.entities import EmpresaEntity
from src.core.empresas.ports import EmpresaRepository as EmpresaRepositoryPort
from src.core.funcionarios.entities import FuncionarioEntity
from src.core.funcionarios.ports import FuncionarioRepository as FuncionarioRepositoryPort
from src.core.shared.exceptions import RepositoryError

from .models import EmpresaModel, FuncionarioModel
from .mappers import EmpresaMapper, FuncionarioMapper

logger = logging.getLogger(__name__)


class DjangoEmpresaRepository(EmpresaRepositoryPort):
    """
    Implementação Django do EmpresaRepository.

    Example:
        repo = DjangoEmpresaRepository()
        empresa = repo.save(EmpresaEntity.criar("82198127000121", "Kazale IT"))
        repo.buscar_por_cnpj("82198127000121")
    """

    def __init__(self):
        self._mapper = EmpresaMapper()

    def save(self, empresa: EmpresaEntity) -> EmpresaEntity:
        """
        Persiste empresa (create ou update).

        Raises:
            RepositoryError: Se o CNPJ já estiver cadastrado
        """
        logger.debug(f"Saving empresa: {empresa.cnpj}")

        model = self._mapper.to_model(empresa)

        try:
            # Savepoint próprio: a transação externa continua utilizável
            with transaction.atomic():
                model.save()
        except IntegrityError as e:
            logger.error(f"Falha ao persistir empresa {empresa.cnpj}: {e}")
            raise RepositoryError(
                f"Não foi possível persistir a empresa {empresa.cnpj}",
                entity_type="Empresa"
            ) from e

        logger.info(f"Empresa saved: {model.id}")
        return self._mapper.to_entity(model)

    def get_by_id(self, empresa_id: int) -> Optional[EmpresaEntity]:
        """Busca empresa por ID."""
        model = EmpresaModel.objects.filter(id=empresa_id).first()
        return self._mapper.to_entity(model) if model else None

    def buscar_por_cnpj(self, cnpj: str) -> Optional[EmpresaEntity]:
        """
        Busca empresa por CNPJ.

        Returns:
            Entidade encontrada ou None
        """
        model = EmpresaModel.objects.filter(cnpj=cnpj).first()

        if model is None:
            logger.debug(f"Empresa not found: {cnpj}")
            return None

        return self._mapper.to_entity(model)

    def count(self) -> int:
        """Conta total de empresas."""
        return EmpresaModel.objects.count()


class DjangoFuncionarioRepository(FuncionarioRepositoryPort):
    """
    Implementação Django do FuncionarioRepository.

    Consultas usam select_related('empresa') porque toda entidade
    de funcionário carrega a sua empresa.
    """

    def __init__(self):
        self._mapper = FuncionarioMapper()

    def save(self, funcionario: FuncionarioEntity) -> FuncionarioEntity:
        """
        Persiste funcionário (create ou update).

        Raises:
            RepositoryError: Se CPF/email duplicado ou empresa inexistente
        """
        logger.debug(f"Saving funcionario: {funcionario.email}")

        model = self._mapper.to_model(funcionario)

        try:
            with transaction.atomic():
                model.save()
        except IntegrityError as e:
            logger.error(f"Falha ao persistir funcionário {funcionario.email}: {e}")
            raise RepositoryError(
                f"Não foi possível persistir o funcionário {funcionario.email}",
                entity_type="Funcionario"
            ) from e

        logger.info(f"Funcionario saved: {model.id}")

        model = self._queryset().get(id=model.id)
        return self._mapper.to_entity(model)

    def get_by_id(self, funcionario_id: int) -> Optional[FuncionarioEntity]:
        """Busca funcionário por ID."""
        model = self._queryset().filter(id=funcionario_id).first()
        return self._mapper.to_entity(model) if model else None

    def buscar_por_cpf(self, cpf: str) -> Optional[FuncionarioEntity]:
        """Busca funcionário por CPF."""
        model = self._queryset().filter(cpf=cpf).first()
        return self._mapper.to_entity(model) if model else None

    def buscar_por_email(self, email: str) -> Optional[FuncionarioEntity]:
        """Busca funcionário por email."""
        model = self._queryset().filter(email=email).first()
        return self._mapper.to_entity(model) if model else None

    def count(self) -> int:
        """Conta total de funcionários."""
        return FuncionarioModel.objects.count()

    def _queryset(self):
        return FuncionarioModel.objects.select_related('empresa')
