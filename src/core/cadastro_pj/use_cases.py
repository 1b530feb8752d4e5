"""
Use Cases (Application Services) do Cadastro de Pessoa Jurídica.

Use Cases implementados:
- CadastrarPjService: Cadastra empresa e seu funcionário administrador
- BuscarEmpresaPorCnpjService: Obtém empresa pelo CNPJ

Responsabilidades dos Use Cases:
- Validar regras de negócio (unicidade de CNPJ, CPF e email)
- Converter DTOs em entidades
- Gerenciar transações (via UoW)
- Retornar DTOs de saída

Princípios:
- Um Use Case = Uma operação de negócio
- Dependências injetadas no construtor
- Sem lógica de infraestrutura
"""

import logging
from typing import List, Tuple

from src.core.shared.interfaces import PasswordHasher, UnitOfWork
from src.core.shared.exceptions import EntityNotFoundError
from src.core.empresas.entities import EmpresaEntity
from src.core.empresas.ports import EmpresaRepository
from src.core.funcionarios.entities import FuncionarioEntity, PerfilEnum
from src.core.funcionarios.ports import FuncionarioRepository

from .dtos import (
    CadastroPjInputDTO,
    CadastroPjOutputDTO,
    EmpresaOutputDTO,
    ResponseDTO,
)

logger = logging.getLogger(__name__)


class CadastrarPjService:
    """
    Use Case: Cadastrar pessoa jurídica.

    Fluxo:
    1. Validar dados existentes (acumula todos os erros)
    2. Se houver erros, retornar envelope de falha sem persistir nada
    3. Converter DTO em Empresa e Funcionário (hash da senha)
    4. Persistir empresa, vincular funcionário, persistir funcionário
    5. Retornar DTO de saída

    Erros de negócio voltam no envelope; falhas de infraestrutura
    (hash indisponível, banco) propagam como exceção.

    Example:
        service = CadastrarPjService(empresa_repo, funcionario_repo, hasher, uow)
        response = service.execute(CadastroPjInputDTO(
            nome="Ana",
            email="ana@x.com",
            cpf="111",
            senha="secret",
            cnpj="999",
            razao_social="Ana LLC",
        ))
        print(response.data.cnpj)  # "999"
    """

    MSG_EMPRESA_EXISTENTE = "Empresa já existente."
    MSG_CPF_EXISTENTE = "CPF já existente."
    MSG_EMAIL_EXISTENTE = "Email já existente."

    def __init__(
        self,
        empresa_repo: EmpresaRepository,
        funcionario_repo: FuncionarioRepository,
        password_hasher: PasswordHasher,
        uow: UnitOfWork,
    ):
        """
        Inicializa service com dependências injetadas.

        Args:
            empresa_repo: Repositório de empresas
            funcionario_repo: Repositório de funcionários
            password_hasher: Gerador de hash de senha
            uow: Unit of Work para transação atômica
        """
        self.empresa_repo = empresa_repo
        self.funcionario_repo = funcionario_repo
        self.password_hasher = password_hasher
        self.uow = uow

    def execute(self, input_dto: CadastroPjInputDTO) -> ResponseDTO[CadastroPjOutputDTO]:
        """
        Executa o cadastro da PJ.

        Args:
            input_dto: Dados de entrada validados estruturalmente

        Returns:
            Envelope com o DTO de saída ou com a lista de erros

        Raises:
            ValidationError: Se os dados não formam entidades válidas
            HashingUnavailableError: Se o hash da senha não pode ser gerado
            RepositoryError: Se a persistência falhar
        """
        # Mesmos valores nas buscas de unicidade e nas entidades gravadas
        input_dto = input_dto.normalizado()

        logger.info(f"Cadastrando PJ: {input_dto}")

        erros = self.validar_dados_existentes(input_dto)
        if erros:
            logger.error(f"Erro validando dados de cadastro PJ: {list(erros)}")
            return ResponseDTO.falha(erros)

        empresa = self._converter_dto_para_empresa(input_dto)
        funcionario = self._converter_dto_para_funcionario(input_dto)

        with self.uow:
            empresa = self.empresa_repo.save(empresa)
            funcionario.vincular_empresa(empresa)
            funcionario = self.funcionario_repo.save(funcionario)

        logger.info(
            f"PJ cadastrada: empresa {empresa.id} ({empresa.cnpj}), "
            f"funcionário {funcionario.id}"
        )

        return ResponseDTO.ok(CadastroPjOutputDTO.from_entity(funcionario))

    def validar_dados_existentes(self, input_dto: CadastroPjInputDTO) -> Tuple[str, ...]:
        """
        Verifica se a empresa ou o funcionário já existem.

        Todas as verificações são executadas, mesmo que uma anterior
        já tenha falhado, para que o cliente receba todos os erros.

        Returns:
            Tupla ordenada de mensagens (vazia se tudo for único)
        """
        erros: List[str] = []

        if self.empresa_repo.buscar_por_cnpj(input_dto.cnpj) is not None:
            erros.append(self.MSG_EMPRESA_EXISTENTE)

        if self.funcionario_repo.buscar_por_cpf(input_dto.cpf) is not None:
            erros.append(self.MSG_CPF_EXISTENTE)

        if self.funcionario_repo.buscar_por_email(input_dto.email) is not None:
            erros.append(self.MSG_EMAIL_EXISTENTE)

        return tuple(erros)

    def _converter_dto_para_empresa(self, input_dto: CadastroPjInputDTO) -> EmpresaEntity:
        """Converte os dados do DTO para empresa."""
        return EmpresaEntity.criar(
            cnpj=input_dto.cnpj,
            razao_social=input_dto.razao_social,
        )

    def _converter_dto_para_funcionario(
        self,
        input_dto: CadastroPjInputDTO
    ) -> FuncionarioEntity:
        """Converte os dados do DTO para funcionário administrador."""
        return FuncionarioEntity.criar(
            nome=input_dto.nome,
            email=input_dto.email,
            cpf=input_dto.cpf,
            senha_hash=self.password_hasher.gerar_hash(input_dto.senha),
            perfil=PerfilEnum.ROLE_ADMIN,
        )


class BuscarEmpresaPorCnpjService:
    """
    Use Case: Obter empresa pelo CNPJ.

    Não usa UoW pois é operação de leitura.
    """

    def __init__(self, empresa_repo: EmpresaRepository):
        self.empresa_repo = empresa_repo

    def execute(self, cnpj: str) -> EmpresaOutputDTO:
        """
        Busca empresa por CNPJ.

        Raises:
            EntityNotFoundError: Se não existe empresa com o CNPJ
        """
        logger.info(f"Buscando empresa por CNPJ: {cnpj}")

        empresa = self.empresa_repo.buscar_por_cnpj(cnpj)

        if not empresa:
            raise EntityNotFoundError(
                f"Empresa não encontrada para o CNPJ {cnpj}",
                entity_type="Empresa",
                entity_id=cnpj
            )

        return EmpresaOutputDTO.from_entity(empresa)
