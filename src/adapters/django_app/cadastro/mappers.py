"""
Mappers para conversão entre Entities (Core) e Models (Django).

Responsabilidades:
- EmpresaEntity ↔ EmpresaModel
- FuncionarioEntity ↔ FuncionarioModel (incluindo a empresa)

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados
"""

from datetime import datetime
from typing import Optional

from django.utils import timezone

from src.core.empresas.entities import EmpresaEntity
from src.core.funcionarios.entities import FuncionarioEntity, PerfilEnum

from .models import EmpresaModel, FuncionarioModel


def _aware(value: Optional[datetime]) -> Optional[datetime]:
    """Entities usam datetime local ingênuo; o banco guarda com timezone."""
    if value is not None and timezone.is_naive(value):
        return timezone.make_aware(value)
    return value


class EmpresaMapper:
    """Mapper para conversão entre EmpresaEntity e EmpresaModel."""

    @staticmethod
    def to_model(entity: EmpresaEntity) -> EmpresaModel:
        """
        Converte EmpresaEntity para EmpresaModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return EmpresaModel(
            id=entity.id,
            cnpj=entity.cnpj,
            razao_social=entity.razao_social,
            data_criacao=_aware(entity.data_criacao),
            data_atualizacao=_aware(entity.data_atualizacao),
        )

    @staticmethod
    def to_entity(model: EmpresaModel) -> EmpresaEntity:
        """
        Converte EmpresaModel para EmpresaEntity.

        Note:
            Bypassa validações do factory method .criar()
            pois dados já foram validados na criação original
        """
        return EmpresaEntity(
            id=model.id,
            cnpj=model.cnpj,
            razao_social=model.razao_social,
            data_criacao=model.data_criacao,
            data_atualizacao=model.data_atualizacao,
        )


class FuncionarioMapper:
    """Mapper para conversão entre FuncionarioEntity e FuncionarioModel."""

    @staticmethod
    def to_model(entity: FuncionarioEntity) -> FuncionarioModel:
        """
        Converte FuncionarioEntity para FuncionarioModel.

        A empresa é referenciada apenas pelo ID, que precisa existir.
        """
        return FuncionarioModel(
            id=entity.id,
            nome=entity.nome,
            email=entity.email,
            cpf=entity.cpf,
            senha=entity.senha,
            perfil=entity.perfil.value,
            valor_hora=entity.valor_hora,
            qtd_horas_trabalho_dia=entity.qtd_horas_trabalho_dia,
            qtd_horas_almoco=entity.qtd_horas_almoco,
            empresa_id=entity.empresa.id if entity.empresa else None,
            data_criacao=_aware(entity.data_criacao),
            data_atualizacao=_aware(entity.data_atualizacao),
        )

    @staticmethod
    def to_entity(model: FuncionarioModel) -> FuncionarioEntity:
        """Converte FuncionarioModel (com empresa) para FuncionarioEntity."""
        return FuncionarioEntity(
            id=model.id,
            nome=model.nome,
            email=model.email,
            cpf=model.cpf,
            senha=model.senha,
            perfil=PerfilEnum(model.perfil),
            empresa=EmpresaMapper.to_entity(model.empresa),
            valor_hora=model.valor_hora,
            qtd_horas_trabalho_dia=model.qtd_horas_trabalho_dia,
            qtd_horas_almoco=model.qtd_horas_almoco,
            data_criacao=model.data_criacao,
            data_atualizacao=model.data_atualizacao,
        )
