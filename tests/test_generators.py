"""Tests for sample data generators."""

from datetime import date

from boleto_codec.banks.sicredi import SicrediBank
from boleto_codec.generators import BoletoGenerator, PessoaGenerator
from boleto_codec.models import AccountIdentity, Pessoa


class TestPessoaGenerator:
    """Tests for PessoaGenerator."""

    def test_generate_pessoa_fisica(self, seed: int) -> None:
        """Test generating a person with a CPF."""
        pessoa = PessoaGenerator(seed=seed).generate(pessoa_juridica=False)

        assert pessoa.nome
        assert len(pessoa.documento_numerico) == 11
        assert pessoa.is_pessoa_juridica is False
        assert len(pessoa.uf) == 2

    def test_generate_pessoa_juridica(self, seed: int) -> None:
        """Test generating a company with a CNPJ."""
        pessoa = PessoaGenerator(seed=seed).generate(pessoa_juridica=True)

        assert len(pessoa.documento_numerico) == 14
        assert pessoa.is_pessoa_juridica is True

    def test_generate_batch(self, seed: int) -> None:
        """Test generating several payers."""
        pessoas = list(PessoaGenerator(seed=seed).generate_batch(5))
        assert len(pessoas) == 5

    def test_reproducible(self, seed: int) -> None:
        """Test the same seed gives the same payer."""
        first = PessoaGenerator(seed=seed).generate()
        second = PessoaGenerator(seed=seed).generate()
        assert first == second


class TestBoletoGenerator:
    """Tests for BoletoGenerator."""

    def test_generate(self, seed: int, account: AccountIdentity, beneficiario: Pessoa) -> None:
        """Test generating a sample boleto."""
        boleto = BoletoGenerator(account, beneficiario, seed=seed).generate(date(2024, 3, 1))

        assert boleto.account == account
        assert boleto.numero == "1"
        assert boleto.valor > 0
        assert boleto.data_vencimento is not None
        assert boleto.data_vencimento > boleto.data_documento
        assert boleto.pagador is not None
        assert boleto.especie_doc in BoletoGenerator.ESPECIES

    def test_sequential_numbers(
        self, seed: int, account: AccountIdentity, beneficiario: Pessoa
    ) -> None:
        """Test numero increases by one per boleto."""
        gen = BoletoGenerator(account, beneficiario, seed=seed, first_numero=41)
        numeros = [b.numero for b in gen.generate_batch(3)]
        assert numeros == ["41", "42", "43"]

    def test_generated_boletos_encode(
        self, seed: int, account: AccountIdentity, beneficiario: Pessoa, bank: SicrediBank
    ) -> None:
        """Test generated boletos encode and parse strictly."""
        gen = BoletoGenerator(account, beneficiario, seed=seed)

        campos = set()
        for boleto in gen.generate_batch(20, date(2024, 3, 1)):
            campo = bank.campo_livre(boleto)
            parts = bank.parse_campo_livre(campo, strict=True)
            assert parts.nosso_numero_full == bank.nosso_numero(boleto).digits
            payload = bank.to_remote(boleto)
            assert payload["seuNumero"] == boleto.numero
            assert ("beneficiarioFinal" in payload) == (boleto.sacador_avalista is not None)
            campos.add(campo)

        assert len(campos) == 20
