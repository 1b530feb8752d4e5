"""
URL patterns do cadastro, montadas sob /api/.

Endpoints API JSON:
- POST /api/cadastrar-pj - Cadastrar PJ (barra final opcional)
- GET /api/empresas/cnpj/<cnpj>/ - Obter empresa pelo CNPJ
"""

from django.urls import path, re_path
from . import api_views

app_name = 'cadastro'

urlpatterns = [
    re_path(r'^cadastrar-pj/?$', api_views.CadastroPjAPIView.as_view(), name='cadastrar_pj'),
    re_path(
        r'^empresas/cnpj/(?P<cnpj>[^/]+)/?$',
        api_views.EmpresaPorCnpjAPIView.as_view(),
        name='empresa_por_cnpj',
    ),
]
