"""
Django Forms para validação de entrada do cadastro PJ.

Forms são DRIVING ADAPTERS que validam dados antes de
passar para os Use Cases.

Responsabilidades:
- Validação estrutural (campos obrigatórios, tamanhos, formato de email)
- Sanitização de entrada (pontuação de CPF/CNPJ)
- Mensagens de erro amigáveis

Princípios:
- Forms NÃO contêm lógica de negócio
- Unicidade de CNPJ/CPF/email fica no Use Case
"""

import re
from typing import List

from django import forms
from django.conf import settings
from django.core.exceptions import ValidationError

from src.core.cadastro_pj.dtos import CadastroPjInputDTO


_NAO_DIGITOS = re.compile(r"[.\-/\s]")


def somente_digitos(valor: str) -> str:
    """Remove pontuação usual de CPF/CNPJ ("111.444.777-35" -> "11144477735")."""
    return _NAO_DIGITOS.sub("", valor)


def _digito_verificador(digitos: str, pesos: List[int]) -> str:
    soma = sum(int(d) * p for d, p in zip(digitos, pesos))
    resto = soma % 11
    return "0" if resto < 2 else str(11 - resto)


def cpf_valido(cpf: str) -> bool:
    """Valida os dois dígitos verificadores de um CPF (11 dígitos)."""
    if len(cpf) != 11 or not cpf.isdigit() or cpf == cpf[0] * 11:
        return False

    primeiro = _digito_verificador(cpf[:9], list(range(10, 1, -1)))
    segundo = _digito_verificador(cpf[:10], list(range(11, 1, -1)))
    return cpf[9:] == primeiro + segundo


def cnpj_valido(cnpj: str) -> bool:
    """Valida os dois dígitos verificadores de um CNPJ (14 dígitos)."""
    if len(cnpj) != 14 or not cnpj.isdigit() or cnpj == cnpj[0] * 14:
        return False

    pesos = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    primeiro = _digito_verificador(cnpj[:12], pesos[1:])
    segundo = _digito_verificador(cnpj[:13], pesos)
    return cnpj[12:] == primeiro + segundo


class TextoEstritoMixin:
    """Recusa valores JSON que não são string em vez de convertê-los com str()."""

    def to_python(self, value):
        if value not in self.empty_values and not isinstance(value, str):
            raise ValidationError(self.error_messages['invalid'], code='invalid')
        return super().to_python(value)


class TextoField(TextoEstritoMixin, forms.CharField):
    pass


class EmailTextoField(TextoEstritoMixin, forms.EmailField):
    pass


class CadastroPjForm(forms.Form):
    """
    Form para cadastro de pessoa jurídica.

    Os nomes dos campos seguem o corpo JSON da API
    (name, password, razaoSocial). `to_input_dto()` faz a
    tradução para o DTO do Core.

    A validação de dígitos verificadores de CPF/CNPJ só é aplicada
    quando settings.PONTO_VALIDAR_DIGITOS é verdadeiro.
    """

    id = forms.IntegerField(
        required=False,
        error_messages={
            'invalid': 'Id deve ser um número inteiro.',
        },
    )

    name = TextoField(
        min_length=3,
        max_length=200,
        error_messages={
            'required': 'Nome não pode ser vazio.',
            'invalid': 'Nome inválido.',
            'min_length': 'Nome deve conter entre 3 e 200 caracteres.',
            'max_length': 'Nome deve conter entre 3 e 200 caracteres.',
        },
    )

    email = EmailTextoField(
        min_length=5,
        max_length=200,
        error_messages={
            'required': 'Email não pode ser vazio.',
            'invalid': 'Email inválido.',
            'min_length': 'Email deve conter entre 5 e 200 caracteres.',
            'max_length': 'Email deve conter entre 5 e 200 caracteres.',
        },
    )

    cpf = TextoField(
        max_length=14,
        error_messages={
            'required': 'CPF não pode ser vazio.',
            'invalid': 'CPF inválido.',
            'max_length': 'CPF inválido.',
        },
    )

    password = TextoField(
        strip=False,
        error_messages={
            'required': 'Senha não pode ser vazia.',
            'invalid': 'Senha inválida.',
        },
    )

    cnpj = TextoField(
        max_length=18,
        error_messages={
            'required': 'CNPJ não pode ser vazio.',
            'invalid': 'CNPJ inválido.',
            'max_length': 'CNPJ inválido.',
        },
    )

    razaoSocial = TextoField(
        min_length=5,
        max_length=200,
        error_messages={
            'required': 'Razão social não pode ser vazia.',
            'invalid': 'Razão social inválida.',
            'min_length': 'Razão social deve conter entre 5 e 200 caracteres.',
            'max_length': 'Razão social deve conter entre 5 e 200 caracteres.',
        },
    )

    def clean_cpf(self):
        """Remove pontuação e, se configurado, valida dígitos."""
        cpf = somente_digitos(self.cleaned_data['cpf'])

        if not cpf:
            raise ValidationError('CPF não pode ser vazio.', code='required')

        if self._validar_digitos() and not cpf_valido(cpf):
            raise ValidationError('CPF inválido.', code='invalid')

        return cpf

    def clean_cnpj(self):
        """Remove pontuação e, se configurado, valida dígitos."""
        cnpj = somente_digitos(self.cleaned_data['cnpj'])

        if not cnpj:
            raise ValidationError('CNPJ não pode ser vazio.', code='required')

        if self._validar_digitos() and not cnpj_valido(cnpj):
            raise ValidationError('CNPJ inválido.', code='invalid')

        return cnpj

    def mensagens_de_erro(self) -> List[str]:
        """Achata os erros do form em lista ordenada de mensagens."""
        mensagens = []
        for nome_campo in self.fields:
            for erro in self.errors.get(nome_campo, []):
                mensagens.append(str(erro))
        for erro in self.non_field_errors():
            mensagens.append(str(erro))
        return mensagens

    def to_input_dto(self) -> CadastroPjInputDTO:
        """
        Converte dados validados em DTO de entrada.

        Deve ser chamado apenas após is_valid().
        """
        data = self.cleaned_data
        return CadastroPjInputDTO(
            nome=data['name'],
            email=data['email'],
            cpf=data['cpf'],
            senha=data['password'],
            cnpj=data['cnpj'],
            razao_social=data['razaoSocial'],
            id=data.get('id'),
        )

    def _validar_digitos(self) -> bool:
        return bool(getattr(settings, 'PONTO_VALIDAR_DIGITOS', False))
