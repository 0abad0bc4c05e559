"""Tests for bank variants and the registry."""

from datetime import date

import pytest

from boleto_codec.banks import BankRegistry, SicrediBank, create_default_registry
from boleto_codec.config import BoletoCodecConfig, SicrediConfig
from boleto_codec.exceptions import (
    BankNotRegisteredError,
    InvalidArgumentError,
    InvalidEntityStateError,
    OutOfRangeError,
)
from boleto_codec.models import Boleto, LayoutRemessa, Situacao, TipoImpressao

EXAMPLE = "1123200001007160212345106"


class TestSicrediBank:
    """Tests for SicrediBank."""

    def test_identity(self, bank: SicrediBank) -> None:
        """Test the Sicredi bank code and name."""
        assert bank.bank_code == "748"
        assert bank.bank_name == "SICREDI"
        assert "sicredi" in bank.local_pagamento

    def test_nosso_numero(self, bank: SicrediBank, boleto: Boleto) -> None:
        """Test deriving the Nosso Número from the boleto."""
        nn = bank.nosso_numero(boleto)

        assert nn.digits == "232000010"
        assert bank.nosso_numero_boleto(boleto) == "23/200001-0"

    def test_campo_livre(self, bank: SicrediBank, boleto: Boleto) -> None:
        """Test deriving the campo livre from the boleto."""
        assert bank.campo_livre(boleto) == EXAMPLE

    def test_parse_round_trip(self, bank: SicrediBank, boleto: Boleto) -> None:
        """Test parsing the derived campo livre recovers the boleto fields."""
        parts = bank.parse_campo_livre(bank.campo_livre(boleto))

        assert parts.agencia == boleto.account.agencia
        assert parts.posto == boleto.account.posto
        assert parts.codigo_cliente == boleto.account.codigo_cliente
        assert parts.nosso_numero_full == bank.nosso_numero(boleto).digits

    def test_unregistered(self, bank: SicrediBank, boleto: Boleto) -> None:
        """Test an unregistered boleto uses flag 3."""
        boleto.registro = False
        assert bank.campo_livre(boleto)[0] == "3"

    def test_carteira_a_encodes_as_one(self, bank: SicrediBank, boleto: Boleto) -> None:
        """Test carteira A is encoded as 1."""
        boleto.carteira = "A"
        assert bank.carteira(boleto) == "1"
        assert bank.campo_livre(boleto) == EXAMPLE

    def test_invalid_carteira(self, bank: SicrediBank, boleto: Boleto) -> None:
        """Test an unsupported carteira is rejected."""
        boleto.carteira = "9"
        with pytest.raises(InvalidArgumentError):
            bank.campo_livre(boleto)
        # Nothing was frozen by the failed attempt
        assert not boleto.campo_livre.is_frozen
        assert not boleto.nosso_numero.is_frozen

    def test_defaults_from_config(self, boleto: Boleto) -> None:
        """Test missing boleto settings come from SicrediConfig."""
        boleto.byte = None
        boleto.carteira = None
        bank = SicrediBank(SicrediConfig(byte=5, carteira="2"))

        campo = bank.campo_livre(boleto)

        assert campo[1] == "2"
        assert bank.nosso_numero(boleto).byte == "5"

    def test_invalid_tipo_impressao(self, bank: SicrediBank, boleto: Boleto) -> None:
        """Test a tipo de impressão other than A or B is rejected."""
        boleto.tipo_impressao = "C"
        with pytest.raises(InvalidArgumentError):
            bank.campo_livre(boleto)

    def test_tipo_impressao_enum(self, bank: SicrediBank, boleto: Boleto) -> None:
        """Test TipoImpressao members are accepted."""
        boleto.tipo_impressao = TipoImpressao.CARNE
        assert bank.campo_livre(boleto) == EXAMPLE

    def test_non_numeric_numero(self, bank: SicrediBank, boleto: Boleto) -> None:
        """Test a non-numeric numero cannot derive a Nosso Número."""
        boleto.numero = "NF-12"
        with pytest.raises(InvalidArgumentError):
            bank.nosso_numero(boleto)

    def test_numero_overflow(self, bank: SicrediBank, boleto: Boleto) -> None:
        """Test a numero above 99999 is out of range."""
        boleto.numero = "100000"
        with pytest.raises(OutOfRangeError):
            bank.nosso_numero(boleto)

    def test_agencia_codigo_beneficiario(self, bank: SicrediBank, boleto: Boleto) -> None:
        """Test the AAAA.PP.CCCCC beneficiary field."""
        assert bank.agencia_codigo_beneficiario(boleto) == "0716.02.12345"

    def test_especie_codigo(self, bank: SicrediBank) -> None:
        """Test CNAB 240 and 400 espécie codes."""
        assert bank.especie_codigo("DM") == "05"
        assert bank.especie_codigo("DM", LayoutRemessa.CNAB400) == "A"
        assert bank.especie_codigo("OS", 400) == "K"
        assert bank.especie_codigo("BD") is None

    def test_especie_codigo_unknown_layout(self, bank: SicrediBank) -> None:
        """Test an unknown remessa layout is rejected."""
        with pytest.raises(InvalidArgumentError):
            bank.especie_codigo("DM", 500)

    def test_to_remote(self, bank: SicrediBank, boleto: Boleto) -> None:
        payload = bank.to_remote(boleto)
        assert payload["codigoBeneficiario"] == "12345"
        assert payload["tipoCobranca"] == "HIBRIDO"

    def test_build_from_remote(self, bank: SicrediBank, boleto: Boleto) -> None:
        """Test building a Boleto from an API payload."""
        payload = {"nossoNumero": EXAMPLE[2:11], "seuNumero": "1", "situacao": "EM_ABERTO"}

        imported = bank.build_from_remote(
            payload, {"account": boleto.account, "beneficiario": boleto.beneficiario}
        )

        assert imported.bank_code == "748"
        assert imported.situacao == Situacao.ABERTO
        assert bank.nosso_numero(imported).digits == "232000010"


class TestDerivedLifecycle:
    """Nosso Número and campo livre are computed once and then frozen."""

    def test_campo_livre_cached(self, bank: SicrediBank, boleto: Boleto) -> None:
        """Test the campo livre is computed once and cached."""
        first = bank.campo_livre(boleto)
        second = bank.campo_livre(boleto)

        assert first == second == EXAMPLE
        assert boleto.campo_livre.is_frozen

    def test_frozen_after_inputs_change(self, bank: SicrediBank, boleto: Boleto) -> None:
        """Test frozen values survive changes to the boleto inputs."""
        first = bank.campo_livre(boleto)

        boleto.numero = "2"
        boleto.registro = False
        boleto.data_documento = date(2024, 1, 1)

        assert bank.campo_livre(boleto) == first
        assert bank.nosso_numero(boleto).digits == "232000010"

    def test_caller_set_campo_livre_is_kept(self, boleto: Boleto, bank: SicrediBank) -> None:
        """Test a campo livre frozen by the caller is returned as-is."""
        explicit = "3123200001007160212345101"
        boleto.campo_livre.freeze(explicit)

        assert bank.campo_livre(boleto) == explicit

    def test_campo_livre_at_construction(self, boleto: Boleto, bank: SicrediBank) -> None:
        """Test a campo livre given at construction is never recomputed."""
        other = Boleto(
            account=boleto.account,
            beneficiario=boleto.beneficiario,
            numero="1",
            campo_livre=EXAMPLE,
        )
        other.numero = "5"
        assert bank.campo_livre(other) == EXAMPLE

    @pytest.mark.parametrize("blank", ["", "   "])
    def test_blank_campo_livre_at_construction_is_derived(
        self, boleto: Boleto, bank: SicrediBank, blank: str
    ) -> None:
        """Test a blank campo livre starts unset and is derived on first use."""
        other = Boleto(
            account=boleto.account,
            beneficiario=boleto.beneficiario,
            numero="1",
            data_documento=boleto.data_documento,
            campo_livre=blank,
        )

        assert not other.campo_livre.is_frozen
        campo = bank.campo_livre(other)
        assert len(campo) == 25
        assert campo == EXAMPLE

    def test_blank_nosso_numero_at_construction_is_derived(
        self, boleto: Boleto, bank: SicrediBank
    ) -> None:
        """Test a blank Nosso Número starts unset and is derived on first use."""
        other = Boleto(
            account=boleto.account,
            beneficiario=boleto.beneficiario,
            numero="1",
            data_documento=boleto.data_documento,
            nosso_numero="",
        )

        assert not other.nosso_numero.is_frozen
        assert bank.nosso_numero(other).digits == "232000010"
        assert bank.campo_livre(other) == EXAMPLE

    def test_refreeze_rejected(self, bank: SicrediBank, boleto: Boleto) -> None:
        """Test freezing an already derived slot raises."""
        bank.campo_livre(boleto)
        with pytest.raises(InvalidEntityStateError):
            boleto.campo_livre.freeze("0" * 25)

    def test_independent_boletos(self, bank: SicrediBank, boleto: Boleto) -> None:
        """Test each boleto keeps its own derived values."""
        other = Boleto(
            account=boleto.account,
            beneficiario=boleto.beneficiario,
            numero="2",
            data_documento=boleto.data_documento,
        )
        assert bank.campo_livre(boleto) != bank.campo_livre(other)


class TestBankRegistry:
    """Tests for BankRegistry."""

    def test_default_registry(self) -> None:
        """Test the default registry holds Sicredi."""
        registry = create_default_registry()

        assert len(registry) == 1
        assert registry.available_banks == ["748"]
        assert isinstance(registry.get("748"), SicrediBank)
        assert "748" in registry

    def test_default_registry_uses_config(self) -> None:
        """Test the default registry passes SicrediConfig through."""
        config = BoletoCodecConfig(sicredi=SicrediConfig(tipo_cobranca="NORMAL"))
        bank = create_default_registry(config).get("748")
        assert bank.config.tipo_cobranca == "NORMAL"

    def test_unknown_bank(self) -> None:
        """Test looking up an unregistered bank code."""
        with pytest.raises(BankNotRegisteredError):
            create_default_registry().get("001")

    def test_duplicate_registration(self) -> None:
        """Test registering the same bank code twice."""
        registry = BankRegistry()
        registry.register(SicrediBank())
        with pytest.raises(InvalidArgumentError):
            registry.register(SicrediBank())

    def test_select_by_boleto_tag(self, boleto: Boleto) -> None:
        """Test selecting the variant from the boleto bank code."""
        bank = create_default_registry().get(boleto.bank_code)
        assert bank.campo_livre(boleto) == EXAMPLE
