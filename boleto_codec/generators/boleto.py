"""Sample boleto generator."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from typing import Iterator

from boleto_codec.generators.base import BaseGenerator
from boleto_codec.generators.pessoa import PessoaGenerator
from boleto_codec.models.account import AccountIdentity
from boleto_codec.models.base import Pessoa
from boleto_codec.models.boleto import Boleto


class BoletoGenerator(BaseGenerator):
    """Generate sample boletos for one beneficiary account.

    Document numbers are sequential starting at ``first_numero`` so every
    generated boleto gets a distinct Nosso Número.
    """

    ESPECIES = ["DM", "DMI", "DSI", "NP", "RC", "OS"]
    ESPECIE_WEIGHTS = [0.45, 0.15, 0.15, 0.10, 0.10, 0.05]

    # Share of boletos carrying a sacador/avalista
    AVALISTA_RATE = 0.2

    def __init__(
        self,
        account: AccountIdentity,
        beneficiario: Pessoa,
        seed: int | None = None,
        first_numero: int = 1,
    ) -> None:
        super().__init__(seed)
        self.account = account
        self.beneficiario = beneficiario
        self._pessoas = PessoaGenerator(seed=seed)
        self._next_numero = first_numero

    def generate(self, data_documento: date | None = None) -> Boleto:
        """Generate a single boleto.

        Parameters
        ----------
        data_documento : date | None
            Issue date, defaults to today.

        Returns
        -------
        Boleto
            Boleto with payer, amount, due date and messages filled in.
        """
        data_documento = data_documento or date.today()
        numero = self._next_numero
        self._next_numero += 1

        valor = Decimal(str(round(self.random.uniform(10, 5000), 2))).quantize(Decimal("0.01"))
        avalista = (
            self._pessoas.generate(pessoa_juridica=True)
            if self.random.random() < self.AVALISTA_RATE
            else None
        )

        return Boleto(
            account=self.account,
            beneficiario=self.beneficiario,
            numero=str(numero),
            valor=valor,
            data_documento=data_documento,
            data_vencimento=data_documento + timedelta(days=self.random.randint(5, 60)),
            especie_doc=self.random.choices(self.ESPECIES, weights=self.ESPECIE_WEIGHTS, k=1)[0],
            pagador=self._pessoas.generate(),
            sacador_avalista=avalista,
            descricao_demonstrativo=[f"Referente ao pedido {self.fake.bothify('PED-#####')}"],
            instrucoes=["Não receber após 30 dias do vencimento"],
        )

    def generate_batch(self, count: int, data_documento: date | None = None) -> Iterator[Boleto]:
        """Generate ``count`` boletos with consecutive numbers."""
        for _ in range(count):
            yield self.generate(data_documento)
