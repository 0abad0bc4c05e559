"""Payer and guarantor generator."""

from __future__ import annotations

from typing import Iterator

from boleto_codec.generators.base import BaseGenerator
from boleto_codec.models.base import Pessoa


class PessoaGenerator(BaseGenerator):
    """Generate synthetic Brazilian parties with valid CPF or CNPJ."""

    # Share of legal entities among generated parties
    PESSOA_JURIDICA_RATE = 0.3

    def generate(self, pessoa_juridica: bool | None = None) -> Pessoa:
        """Generate a single party.

        Parameters
        ----------
        pessoa_juridica : bool | None
            Force a company (``True``) or an individual (``False``). Chosen
            at random when ``None``.

        Returns
        -------
        Pessoa
            Generated party with a masked document.
        """
        if pessoa_juridica is None:
            pessoa_juridica = self.random.random() < self.PESSOA_JURIDICA_RATE

        if pessoa_juridica:
            nome = self.fake.company()
            documento = self.fake.cnpj()
        else:
            nome = self.fake.name()
            documento = self.fake.cpf()

        return Pessoa(
            nome=nome,
            documento=documento,
            endereco=self.fake.street_address(),
            bairro=self.fake.bairro(),
            cidade=self.fake.city(),
            uf=self.fake.estado_sigla(),
            cep=self.fake.postcode(),
        )

    def generate_batch(self, count: int) -> Iterator[Pessoa]:
        """Generate ``count`` parties."""
        for _ in range(count):
            yield self.generate()
