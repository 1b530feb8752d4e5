"""
Password Hasher - Implementação bcrypt do port PasswordHasher.

Gera hashes irreversíveis com salt aleatório e verifica senhas
contra hashes armazenados.
"""

import logging

import bcrypt

from src.core.shared.exceptions import HashingUnavailableError, ValidationError

logger = logging.getLogger(__name__)


class BCryptPasswordHasher:
    """
    Hash de senhas com BCrypt.

    Attributes:
        rounds: Fator de custo do bcrypt (4 a 31)

    Example:
        hasher = BCryptPasswordHasher(rounds=12)
        senha_hash = hasher.gerar_hash("123456")
        hasher.verificar("123456", senha_hash)  # True
    """

    DEFAULT_ROUNDS = 12
    MAX_BYTES = 72

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self.rounds = rounds

    def gerar_hash(self, senha: str) -> str:
        """
        Gera hash BCrypt da senha.

        Raises:
            HashingUnavailableError: Se bcrypt rejeitar a configuração
            ValidationError: Se a senha excede o limite de 72 bytes do BCrypt
        """
        logger.debug("Gerando hash da senha com BCrypt.")

        if len(senha.encode("utf-8")) > self.MAX_BYTES:
            raise ValidationError(
                f"Senha deve conter no máximo {self.MAX_BYTES} bytes.",
                field="senha"
            )

        try:
            salt = bcrypt.gensalt(rounds=self.rounds)
            return bcrypt.hashpw(senha.encode("utf-8"), salt).decode("utf-8")
        except ValueError as e:
            raise HashingUnavailableError(
                f"BCrypt indisponível com rounds={self.rounds}: {e}"
            ) from e

    def verificar(self, senha: str, senha_hash: str) -> bool:
        """Verifica se a senha corresponde ao hash BCrypt."""
        try:
            return bcrypt.checkpw(senha.encode("utf-8"), senha_hash.encode("utf-8"))
        except ValueError:
            logger.warning("Hash armazenado não está no formato BCrypt.")
            return False
