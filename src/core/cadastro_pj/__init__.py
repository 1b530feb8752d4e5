"""
Cadastro de Pessoa Jurídica.

Orquestra o cadastro de uma empresa junto com seu primeiro
funcionário administrador:
- DTOs (entrada, saída e envelope de resposta)
- Use Cases (CadastrarPj, BuscarEmpresaPorCnpj)

Características:
- Unicidade de CNPJ, CPF e email verificada antes de persistir
- Todos os erros de negócio são acumulados e devolvidos juntos
- Empresa sempre persistida antes do funcionário, na mesma transação
"""

from .dtos import (
    CadastroPjInputDTO,
    CadastroPjOutputDTO,
    EmpresaOutputDTO,
    ResponseDTO,
)
from .use_cases import CadastrarPjService, BuscarEmpresaPorCnpjService

__all__ = [
    # DTOs
    "CadastroPjInputDTO",
    "CadastroPjOutputDTO",
    "EmpresaOutputDTO",
    "ResponseDTO",
    # Use Cases
    "CadastrarPjService",
    "BuscarEmpresaPorCnpjService",
]
