"""
Domínio de Funcionários.

Contém a entidade FuncionarioEntity, o enum PerfilEnum
e o port FuncionarioRepository.
"""

from .entities import FuncionarioEntity, PerfilEnum
from .ports import FuncionarioRepository, InMemoryFuncionarioRepository

__all__ = [
    "FuncionarioEntity",
    "PerfilEnum",
    "FuncionarioRepository",
    "InMemoryFuncionarioRepository",
]
