"""
Domínio de Empresas - Pessoas Jurídicas.

Contém a entidade EmpresaEntity e o port EmpresaRepository.
"""

from .entities import EmpresaEntity
from .ports import EmpresaRepository, InMemoryEmpresaRepository

__all__ = [
    "EmpresaEntity",
    "EmpresaRepository",
    "InMemoryEmpresaRepository",
]
