#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Cria banco de dados SQLite
3. Executa migrations
4. Cadastra uma PJ de exemplo (opcional)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

import os
import sys
import argparse

# Adicionar raiz do projeto ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

    # Forçar SQLite para desenvolvimento rápido
    os.environ['DATABASE_URL'] = 'sqlite:///db.sqlite3'

    import django
    django.setup()


def run_migrations():
    """Executa migrations."""
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


def create_sample_data():
    """Cadastra uma PJ de exemplo pelo mesmo use case da API."""
    from src.config.container import get_container
    from src.core.cadastro_pj.dtos import CadastroPjInputDTO

    service = get_container().cadastrar_pj_service()

    print("📝 Cadastrando PJ de exemplo...")

    response = service.execute(CadastroPjInputDTO(
        nome='Administrador Kazale',
        email='admin@kazale.com',
        cpf='24291173474',
        senha='123456',
        cnpj='82198127000121',
        razao_social='Kazale IT',
    ))

    if response.sucesso:
        print(f"✅ PJ cadastrada: {response.data.razao_social} ({response.data.cnpj})")
    else:
        for erro in response.errors:
            print(f"   ⚠️  {erro}")


def check_connection():
    """Verifica conexão com o banco."""
    from src.adapters.django_app.shared.database import health_check

    print("🔍 Verificando conexão com o banco...")

    if health_check():
        print("✅ Conexão OK!")
        return True

    print("❌ Erro de conexão")
    return False


def show_info():
    """Mostra informações do setup."""
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. django-admin runserver --settings=src.config.settings")
    print("   2. POST http://localhost:8000/api/cadastrar-pj")
    print("   3. GET  http://localhost:8000/health/")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Cadastrar PJ de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 Ponto Inteligente - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está rodando.")
        return

    run_migrations()

    if args.with_sample_data:
        create_sample_data()

    show_info()


if __name__ == '__main__':
    main()
