"""
URL Configuration para Ponto Inteligente.

Estrutura:
- /admin/ - Django Admin
- /api/ - API de cadastro
- /health/ - Health check
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import path, include

from src.adapters.django_app.shared.database import health_check


def health(request):
    """Status da aplicação e do banco."""
    return JsonResponse({'status': 'ok', 'database': health_check()})


urlpatterns = [
    # Django Admin
    path('admin/', admin.site.urls),

    # Cadastro App
    path('api/', include('src.adapters.django_app.cadastro.urls')),

    # Health check
    path('health/', health, name='health'),
]
