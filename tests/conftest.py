"""
Configurações globais do Pytest para Ponto Inteligente.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas.

Django é configurado aqui (settings.configure) com SQLite em
memória; pytest-django cuida da criação do banco de testes.
"""

import pytest


def pytest_configure(config):
    """Configura Django."""
    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY='test-secret-key',
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.admin',
                'django.contrib.auth',
                'django.contrib.contenttypes',
                'django.contrib.sessions',
                'django.contrib.messages',
                'src.adapters.django_app.cadastro',
            ],
            ROOT_URLCONF='src.config.urls',
            MIDDLEWARE=[],
            TEMPLATES=[{
                'BACKEND': 'django.template.backends.django.DjangoTemplates',
                'DIRS': [],
                'APP_DIRS': True,
                'OPTIONS': {},
            }],
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='America/Sao_Paulo',
            LANGUAGE_CODE='pt-br',
            PONTO_BCRYPT_ROUNDS=4,
            PONTO_VALIDAR_DIGITOS=False,
        )
        django.setup()


def pytest_addoption(parser):
    """Adiciona opções de linha de comando."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="run integration tests",
    )


def pytest_collection_modifyitems(config, items):
    """Pula testes de integração sem --run-integration."""
    if config.getoption("--run-integration"):
        return

    skip_integration = pytest.mark.skip(reason="use --run-integration para executar")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def reset_di_container():
    """Container DI limpo em cada teste."""
    from src.config.container import reset_container

    reset_container()
    yield
    reset_container()
