"""
API Views JSON para o cadastro de Pessoa Jurídica.

Endpoints:
- POST /api/cadastrar-pj - Cadastra empresa e funcionário administrador
- GET /api/empresas/cnpj/<cnpj>/ - Obtém empresa pelo CNPJ

Formato:
- Entrada: JSON
- Saída: JSON com estrutura {data, errors}
"""

import json
import logging
from typing import Any, Dict, Optional, Sequence

from django.views import View
from django.http import JsonResponse, HttpRequest
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt

from src.core.shared.exceptions import (
    ValidationError,
    EntityNotFoundError,
)
from src.config.container import get_container

from .forms import CadastroPjForm

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def json_response(data: Any = None, errors: Optional[Sequence[str]] = None,
                  status: int = 200) -> JsonResponse:
    """
    Cria resposta JSON no envelope {data, errors}.

    Args:
        data: Dados da resposta (já serializáveis)
        errors: Mensagens de erro
        status: HTTP status code
    """
    return JsonResponse(
        {'data': data, 'errors': list(errors or [])},
        status=status,
    )


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Raises:
        ValueError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValueError(f"JSON inválido: {e}")

    if not isinstance(data, dict):
        raise ValueError("JSON inválido: esperado um objeto")

    return data


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON
    - Acesso ao container DI
    - Tratamento de erros padronizado
    """

    def get_service(self, service_name: str):
        """Obtém service do container."""
        return getattr(get_container(), service_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        return parse_json_body(request)

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Trata exceções e retorna resposta apropriada.

        Falhas de infraestrutura e erros inesperados viram 500
        sem expor detalhes ao cliente.
        """
        if isinstance(e, ValidationError):
            return json_response(errors=[e.message], status=400)

        if isinstance(e, EntityNotFoundError):
            return json_response(errors=[e.message], status=404)

        if isinstance(e, ValueError):
            return json_response(errors=[str(e)], status=400)

        logger.exception(f"Erro inesperado na API: {e}")
        return json_response(errors=["Erro interno do servidor"], status=500)


# =============================================================================
# Cadastro PJ
# =============================================================================

class CadastroPjAPIView(BaseAPIView):
    """
    API para cadastro de pessoa jurídica.

    POST /api/cadastrar-pj
    """

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Cadastra PJ.

        Body JSON:
        {
            "id": int (opcional),
            "name": "string",
            "email": "string",
            "cpf": "string",
            "password": "string",
            "cnpj": "string",
            "razaoSocial": "string"
        }

        Returns:
            200 com o funcionário cadastrado ou 400 com a lista de erros
        """
        try:
            data = self.parse_body(request)

            form = CadastroPjForm(data)
            if not form.is_valid():
                erros = form.mensagens_de_erro()
                logger.error(f"Erro validando dados de cadastro PJ: {erros}")
                return json_response(errors=erros, status=400)

            service = self.get_service('cadastrar_pj_service')
            response = service.execute(form.to_input_dto())

            status = 200 if response.sucesso else 400
            return JsonResponse(response.to_dict(), status=status)

        except Exception as e:
            return self.handle_exception(e)


class EmpresaPorCnpjAPIView(BaseAPIView):
    """
    API para consulta de empresa.

    GET /api/empresas/cnpj/<cnpj>/
    """

    def get(self, request: HttpRequest, cnpj: str) -> JsonResponse:
        """Obtém empresa pelo CNPJ."""
        try:
            service = self.get_service('buscar_empresa_por_cnpj_service')
            empresa = service.execute(cnpj)

            return json_response(data=empresa.to_dict())

        except Exception as e:
            return self.handle_exception(e)
