"""
Data Transfer Objects (DTOs) do Cadastro de Pessoa Jurídica.

DTOs são estruturas simples para transportar dados entre camadas,
evitando vazamento de entidades para a camada HTTP.

Tipos de DTOs:
- Input DTOs: Recebem dados já validados estruturalmente (Forms)
- Output DTOs: Formatam dados para resposta (API)
- ResponseDTO: Envelope {data, errors} de todas as respostas
"""

from dataclasses import dataclass, field, replace
from typing import Generic, Optional, Sequence, Tuple, TypeVar

from src.core.empresas.entities import EmpresaEntity
from src.core.funcionarios.entities import FuncionarioEntity


T = TypeVar("T")


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CadastroPjInputDTO:
    """
    DTO de entrada para cadastro de PJ.

    Imutável (frozen=True) para garantir que dados
    validados não sejam alterados acidentalmente.
    A senha fica fora do repr para nunca chegar aos logs.

    Attributes:
        nome: Nome do funcionário administrador
        email: Email do funcionário
        cpf: CPF do funcionário
        senha: Senha em texto puro (será convertida em hash)
        cnpj: CNPJ da empresa
        razao_social: Razão social da empresa
        id: ID opcional enviado pelo cliente (ignorado na criação)
    """

    nome: str
    email: str
    cpf: str
    senha: str = field(repr=False)
    cnpj: str
    razao_social: str
    id: Optional[int] = None

    def normalizado(self) -> "CadastroPjInputDTO":
        """
        Cópia com espaços das extremidades removidos.

        A senha é mantida como enviada.
        """
        return replace(
            self,
            nome=self.nome.strip(),
            email=self.email.strip(),
            cpf=self.cpf.strip(),
            cnpj=self.cnpj.strip(),
            razao_social=self.razao_social.strip(),
        )


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class CadastroPjOutputDTO:
    """
    DTO de saída do cadastro de PJ.

    Subconjunto dos dados do funcionário persistido e da sua empresa.
    """

    id: Optional[int]
    nome: str
    email: str
    cpf: str
    razao_social: str
    cnpj: str

    @classmethod
    def from_entity(cls, funcionario: FuncionarioEntity) -> "CadastroPjOutputDTO":
        """
        Factory method para converter funcionário (com empresa) em DTO.

        Args:
            funcionario: Funcionário persistido, vinculado à empresa

        Returns:
            DTO com dados do funcionário e da empresa
        """
        return cls(
            id=funcionario.id,
            nome=funcionario.nome,
            email=funcionario.email,
            cpf=funcionario.cpf,
            razao_social=funcionario.empresa.razao_social,
            cnpj=funcionario.empresa.cnpj,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "name": self.nome,
            "email": self.email,
            "cpf": self.cpf,
            "razaoSocial": self.razao_social,
            "cnpj": self.cnpj,
        }


@dataclass
class EmpresaOutputDTO:
    """DTO de saída com dados públicos de uma empresa."""

    id: Optional[int]
    razao_social: str
    cnpj: str

    @classmethod
    def from_entity(cls, empresa: EmpresaEntity) -> "EmpresaOutputDTO":
        return cls(
            id=empresa.id,
            razao_social=empresa.razao_social,
            cnpj=empresa.cnpj,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "razaoSocial": self.razao_social,
            "cnpj": self.cnpj,
        }


@dataclass(frozen=True)
class ResponseDTO(Generic[T]):
    """
    Envelope de resposta da API.

    Ou contém `data` (sucesso) ou uma lista ordenada e não vazia
    de mensagens em `errors` (falha). Nunca os dois.

    Attributes:
        data: DTO de saída (None em caso de falha)
        errors: Mensagens de erro legíveis, na ordem em que foram encontradas
    """

    data: Optional[T] = None
    errors: Tuple[str, ...] = ()

    @classmethod
    def ok(cls, data: T) -> "ResponseDTO[T]":
        """Cria envelope de sucesso."""
        return cls(data=data)

    @classmethod
    def falha(cls, errors: Sequence[str]) -> "ResponseDTO[T]":
        """
        Cria envelope de falha.

        Raises:
            ValueError: Se nenhuma mensagem de erro foi informada
        """
        if not errors:
            raise ValueError("Resposta de falha exige ao menos um erro")
        return cls(errors=tuple(errors))

    @property
    def sucesso(self) -> bool:
        """Verifica se a resposta não contém erros."""
        return not self.errors

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "data": self.data.to_dict() if self.data is not None else None,
            "errors": list(self.errors),
        }
