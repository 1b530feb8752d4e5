"""
Exceções de Domínio do Ponto Inteligente.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    ├── ValidationError (validação de entrada)
    ├── EntityNotFoundError (entidade não existe)
    └── InfrastructureError (falha de colaborador externo)
        ├── HashingUnavailableError (algoritmo de hash indisponível)
        └── RepositoryError (falha na persistência)

Erros de validação de negócio do cadastro (CNPJ/CPF/email duplicados)
NÃO são exceções: são retornados como lista de mensagens na resposta.
"""


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            service.execute(input_dto)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Lançada quando dados fornecidos não atendem aos requisitos
    mínimos para criar uma entidade.

    Example:
        if not cnpj:
            raise ValidationError("CNPJ é obrigatório", field="cnpj")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Example:
        empresa = repo.buscar_por_cnpj(cnpj)
        if not empresa:
            raise EntityNotFoundError(f"Empresa não encontrada para o CNPJ {cnpj}")
    """

    def __init__(self, message: str, entity_type: str = None, entity_id: str = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id:
            result["entity_id"] = self.entity_id
        return result


class InfrastructureError(DomainException):
    """
    Falha de um colaborador de infraestrutura (banco, hash, rede).

    Não é recuperada pelos use cases: propaga até a camada HTTP,
    que responde com erro 5xx. Nenhum retry é feito no Core.
    """

    def __init__(self, message: str, code: str = None):
        super().__init__(message, code or "INFRASTRUCTURE_ERROR")


class HashingUnavailableError(InfrastructureError):
    """
    Algoritmo de hash de senha indisponível ou mal configurado.

    Example:
        try:
            salt = bcrypt.gensalt(rounds)
        except ValueError as e:
            raise HashingUnavailableError("BCrypt indisponível") from e
    """

    def __init__(self, message: str):
        super().__init__(message, "HASHING_UNAVAILABLE")


class RepositoryError(InfrastructureError):
    """
    Falha na persistência.

    Inclui violação de constraint de unicidade quando dois cadastros
    concorrentes passam pela validação e tentam gravar o mesmo CNPJ,
    CPF ou email.
    """

    def __init__(self, message: str, entity_type: str = None):
        self.entity_type = entity_type
        super().__init__(message, "REPOSITORY_ERROR")
