"""
Entidades do Domínio de Funcionários.

Entidades:
- FuncionarioEntity: Funcionário vinculado a uma empresa
- PerfilEnum: Perfis de acesso

Regras de Negócio Encapsuladas:
- Nome entre 3 e 200 caracteres
- Email e CPF obrigatórios
- Senha armazenada somente como hash
- Funcionário pertence a exatamente uma empresa, que deve estar
  persistida antes dele
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from src.core.shared.exceptions import ValidationError
from src.core.empresas.entities import EmpresaEntity


class PerfilEnum(Enum):
    """Perfis de acesso de um funcionário."""

    ROLE_ADMIN = "ROLE_ADMIN"
    ROLE_USUARIO = "ROLE_USUARIO"


@dataclass
class FuncionarioEntity:
    """
    Entidade de Domínio: Funcionário.

    Attributes:
        id: Identificador numérico (None enquanto transiente)
        nome: Nome completo
        email: Email (único)
        cpf: CPF (único)
        senha: Hash da senha (nunca o texto puro)
        perfil: Perfil de acesso
        empresa: Empresa à qual pertence
        valor_hora: Valor da hora trabalhada (opcional)
        qtd_horas_trabalho_dia: Horas de trabalho por dia (opcional)
        qtd_horas_almoco: Horas de almoço por dia (opcional)
        data_criacao: Data/hora de criação
        data_atualizacao: Data/hora da última atualização
    """

    nome: str = ""
    email: str = ""
    cpf: str = ""
    senha: str = field(default="", repr=False)
    perfil: PerfilEnum = PerfilEnum.ROLE_USUARIO
    empresa: Optional[EmpresaEntity] = None
    id: Optional[int] = None
    valor_hora: Optional[Decimal] = None
    qtd_horas_trabalho_dia: Optional[float] = None
    qtd_horas_almoco: Optional[float] = None
    data_criacao: datetime = field(default_factory=datetime.now)
    data_atualizacao: datetime = field(default_factory=datetime.now)

    NOME_MIN_LENGTH = 3
    NOME_MAX_LENGTH = 200

    @classmethod
    def criar(
        cls,
        nome: str,
        email: str,
        cpf: str,
        senha_hash: str,
        perfil: PerfilEnum = PerfilEnum.ROLE_USUARIO,
    ) -> "FuncionarioEntity":
        """
        Factory method para criar funcionário com validações.

        A empresa é vinculada depois, via `vincular_empresa`, quando
        já estiver persistida.

        Args:
            nome: Nome (3 a 200 caracteres)
            email: Email
            cpf: CPF
            senha_hash: Hash da senha já gerado pelo PasswordHasher
            perfil: Perfil de acesso

        Raises:
            ValidationError: Se dados de entrada inválidos
        """
        cls._validar_nome(nome)

        if not email or not email.strip():
            raise ValidationError("Email não pode ser vazio.", field="email")

        if not cpf or not cpf.strip():
            raise ValidationError("CPF não pode ser vazio.", field="cpf")

        if not senha_hash:
            raise ValidationError("Senha não pode ser vazia.", field="senha")

        return cls(
            nome=nome.strip(),
            email=email.strip(),
            cpf=cpf.strip(),
            senha=senha_hash,
            perfil=perfil,
        )

    @classmethod
    def _validar_nome(cls, nome: str) -> None:
        """Valida nome do funcionário."""
        if not nome or not nome.strip():
            raise ValidationError("Nome não pode ser vazio.", field="nome")

        tamanho = len(nome.strip())
        if not cls.NOME_MIN_LENGTH <= tamanho <= cls.NOME_MAX_LENGTH:
            raise ValidationError(
                f"Nome deve conter entre {cls.NOME_MIN_LENGTH} "
                f"e {cls.NOME_MAX_LENGTH} caracteres.",
                field="nome"
            )

    def vincular_empresa(self, empresa: EmpresaEntity) -> None:
        """
        Vincula o funcionário a uma empresa persistida.

        Raises:
            ValidationError: Se a empresa ainda não foi persistida
        """
        if empresa is None or not empresa.persistida:
            raise ValidationError(
                "Funcionário só pode ser vinculado a empresa persistida.",
                field="empresa"
            )

        self.empresa = empresa
        self.data_atualizacao = datetime.now()

    @property
    def is_admin(self) -> bool:
        """Verifica se o funcionário é administrador."""
        return self.perfil == PerfilEnum.ROLE_ADMIN
