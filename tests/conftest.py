"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from boleto_codec.banks.sicredi import SicrediBank
from boleto_codec.models import AccountIdentity, Boleto, Pessoa


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def account() -> AccountIdentity:
    """Sicredi account used by the worked examples."""
    return AccountIdentity(agencia="0716", posto="02", codigo_cliente="12345")


@pytest.fixture
def beneficiario() -> Pessoa:
    """Beneficiary company."""
    return Pessoa(
        nome="Cooperativa Teste Ltda",
        documento="11.222.333/0001-81",
        endereco="Rua Sete de Setembro, 100",
        bairro="Centro",
        cidade="Porto Alegre",
        uf="RS",
        cep="90010-190",
    )


@pytest.fixture
def pagador() -> Pessoa:
    """Individual payer."""
    return Pessoa(
        nome="Maria da Silva",
        documento="123.456.789-09",
        endereco="Av. Ipiranga, 6681",
        bairro="Partenon",
        cidade="Porto Alegre",
        uf="RS",
        cep="90619-900",
    )


@pytest.fixture
def avalista() -> Pessoa:
    """Company guarantor."""
    return Pessoa(
        nome="Avalista Comercio SA",
        documento="12.345.678/0001-95",
        endereco="Rua das Flores, 10",
        cidade="São Paulo",
        uf="SP",
        cep="01234-567",
    )


@pytest.fixture
def boleto(account: AccountIdentity, beneficiario: Pessoa, pagador: Pessoa) -> Boleto:
    """Boleto issued in 2023 with document number 1."""
    return Boleto(
        account=account,
        beneficiario=beneficiario,
        numero="1",
        valor=Decimal("150.5"),
        data_documento=date(2023, 5, 10),
        data_vencimento=date(2023, 6, 10),
        especie_doc="DM",
        pagador=pagador,
        carteira="1",
        byte=2,
    )


@pytest.fixture
def bank() -> SicrediBank:
    """Sicredi variant with default configuration."""
    return SicrediBank()
