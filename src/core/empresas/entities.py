"""
Entidades do Domínio de Empresas.

Entidades:
- EmpresaEntity: Pessoa jurídica (PJ) dona dos funcionários

Regras de Negócio Encapsuladas:
- CNPJ e razão social obrigatórios
- Razão social entre 5 e 200 caracteres
- Timestamps de criação/atualização mantidos pela entidade
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from src.core.shared.exceptions import ValidationError


@dataclass
class EmpresaEntity:
    """
    Entidade de Domínio: Empresa.

    O CNPJ é a chave de negócio (único). O ID é atribuído
    pelo repositório no momento da persistência.

    Attributes:
        id: Identificador numérico (None enquanto transiente)
        cnpj: CNPJ da empresa
        razao_social: Razão social
        data_criacao: Data/hora de criação
        data_atualizacao: Data/hora da última atualização

    Example:
        empresa = EmpresaEntity.criar(cnpj="82198127000121", razao_social="Kazale IT")
        empresa = empresa_repo.save(empresa)
        print(empresa.id)
    """

    cnpj: str = ""
    razao_social: str = ""
    id: Optional[int] = None
    data_criacao: datetime = field(default_factory=datetime.now)
    data_atualizacao: datetime = field(default_factory=datetime.now)

    RAZAO_SOCIAL_MIN_LENGTH = 5
    RAZAO_SOCIAL_MAX_LENGTH = 200

    @classmethod
    def criar(cls, cnpj: str, razao_social: str) -> "EmpresaEntity":
        """
        Factory method para criar empresa com validações.

        Args:
            cnpj: CNPJ da empresa
            razao_social: Razão social (5 a 200 caracteres)

        Returns:
            Nova instância transiente de EmpresaEntity

        Raises:
            ValidationError: Se dados de entrada inválidos
        """
        if not cnpj or not cnpj.strip():
            raise ValidationError("CNPJ não pode ser vazio.", field="cnpj")

        cls._validar_razao_social(razao_social)

        return cls(cnpj=cnpj.strip(), razao_social=razao_social.strip())

    @classmethod
    def _validar_razao_social(cls, razao_social: str) -> None:
        """Valida razão social."""
        if not razao_social or not razao_social.strip():
            raise ValidationError(
                "Razão social não pode ser vazia.",
                field="razao_social"
            )

        tamanho = len(razao_social.strip())
        if not cls.RAZAO_SOCIAL_MIN_LENGTH <= tamanho <= cls.RAZAO_SOCIAL_MAX_LENGTH:
            raise ValidationError(
                f"Razão social deve conter entre {cls.RAZAO_SOCIAL_MIN_LENGTH} "
                f"e {cls.RAZAO_SOCIAL_MAX_LENGTH} caracteres.",
                field="razao_social"
            )

    @property
    def persistida(self) -> bool:
        """Verifica se a empresa já recebeu ID do repositório."""
        return self.id is not None

    def __repr__(self) -> str:
        return (
            f"EmpresaEntity("
            f"id={self.id}, "
            f"cnpj='{self.cnpj}', "
            f"razao_social='{self.razao_social[:20]}'"
            f")"
        )
