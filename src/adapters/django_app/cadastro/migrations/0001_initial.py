"""
Migration inicial do cadastro.

Cria as tabelas:
- empresa: Pessoas jurídicas
- funcionario: Funcionários vinculados a uma empresa
"""

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        # =================================================================
        # Tabela: empresa
        # =================================================================
        migrations.CreateModel(
            name='EmpresaModel',
            fields=[
                ('id', models.BigAutoField(
                    primary_key=True,
                    serialize=False
                )),
                ('cnpj', models.CharField(
                    max_length=18,
                    unique=True,
                    help_text='CNPJ da empresa'
                )),
                ('razao_social', models.CharField(
                    max_length=200,
                    help_text='Razão social'
                )),
                ('data_criacao', models.DateTimeField(
                    default=django.utils.timezone.now,
                    help_text='Data/hora de criação'
                )),
                ('data_atualizacao', models.DateTimeField(
                    auto_now=True,
                    help_text='Data/hora da última atualização'
                )),
            ],
            options={
                'verbose_name': 'Empresa',
                'verbose_name_plural': 'Empresas',
                'db_table': 'empresa',
                'ordering': ['razao_social'],
            },
        ),

        # =================================================================
        # Tabela: funcionario
        # =================================================================
        migrations.CreateModel(
            name='FuncionarioModel',
            fields=[
                ('id', models.BigAutoField(
                    primary_key=True,
                    serialize=False
                )),
                ('nome', models.CharField(
                    max_length=200,
                    help_text='Nome completo'
                )),
                ('email', models.CharField(
                    max_length=200,
                    unique=True,
                    help_text='Email (login)'
                )),
                ('cpf', models.CharField(
                    max_length=14,
                    unique=True,
                    help_text='CPF do funcionário'
                )),
                ('senha', models.CharField(
                    max_length=255,
                    help_text='Hash da senha'
                )),
                ('perfil', models.CharField(
                    max_length=20,
                    choices=[
                        ('ROLE_ADMIN', 'Administrador'),
                        ('ROLE_USUARIO', 'Usuário'),
                    ],
                    default='ROLE_USUARIO',
                    help_text='Perfil de acesso'
                )),
                ('valor_hora', models.DecimalField(
                    max_digits=10,
                    decimal_places=2,
                    null=True,
                    blank=True,
                    help_text='Valor da hora trabalhada'
                )),
                ('qtd_horas_trabalho_dia', models.FloatField(
                    null=True,
                    blank=True,
                    help_text='Horas de trabalho por dia'
                )),
                ('qtd_horas_almoco', models.FloatField(
                    null=True,
                    blank=True,
                    help_text='Horas de almoço por dia'
                )),
                ('empresa', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='funcionarios',
                    to='cadastro.empresamodel',
                    help_text='Empresa do funcionário'
                )),
                ('data_criacao', models.DateTimeField(
                    default=django.utils.timezone.now,
                    help_text='Data/hora de criação'
                )),
                ('data_atualizacao', models.DateTimeField(
                    auto_now=True,
                    help_text='Data/hora da última atualização'
                )),
            ],
            options={
                'verbose_name': 'Funcionário',
                'verbose_name_plural': 'Funcionários',
                'db_table': 'funcionario',
                'ordering': ['nome'],
            },
        ),
    ]
