#!/usr/bin/env python3
"""Generate sample Sicredi boletos and their API payloads.

Writes three files to the output directory:
- boletos.json: the generated boletos, with Nosso Número and campo livre
- payloads.jsonl: the API request payload of each boleto, one per line
- parsed.json: each campo livre parsed back into its fields
"""

import argparse
from dataclasses import asdict
from pathlib import Path

from boleto_codec.banks import create_default_registry
from boleto_codec.config import BoletoCodecConfig
from boleto_codec.exceptions import BoletoCodecError
from boleto_codec.generators import BoletoGenerator, PessoaGenerator
from boleto_codec.logging import get_logger, setup_logging
from boleto_codec.models import AccountIdentity
from boleto_codec.sinks import JsonFileSink

logger = get_logger("generate_sample_boletos")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate sample Sicredi boletos")
    parser.add_argument(
        "--count",
        type=int,
        default=10,
        help="Number of boletos to generate (default: 10)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument("--agencia", default="0716", help="Branch code (default: 0716)")
    parser.add_argument("--posto", default="02", help="Post code (default: 02)")
    parser.add_argument(
        "--codigo-cliente",
        default="12345",
        help="Beneficiary code (default: 12345)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("local"),
        help="Directory for the JSON files (default: ./local)",
    )
    parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")
    return parser.parse_args()


def main() -> int:
    """Generate the sample files."""
    args = parse_args()
    config = BoletoCodecConfig.from_env()
    setup_logging(config.logging.level, config.logging.format_type)

    registry = create_default_registry(config)
    bank = registry.get(config.default_bank_code)

    account = AccountIdentity(args.agencia, args.posto, args.codigo_cliente)
    beneficiario = PessoaGenerator(seed=args.seed).generate(pessoa_juridica=True)
    generator = BoletoGenerator(account, beneficiario, seed=args.seed)

    boletos = []
    payloads = []
    parsed = []
    try:
        for boleto in generator.generate_batch(args.count):
            campo_livre = bank.campo_livre(boleto)
            boletos.append(boleto)
            payloads.append(bank.to_remote(boleto))
            parsed.append(asdict(bank.parse_campo_livre(campo_livre, strict=True)))
    except BoletoCodecError:
        logger.exception("Failed to encode sample boleto")
        return 1

    sink = JsonFileSink(args.output_dir, pretty=args.pretty)
    sink.write_batch("boletos", boletos)
    sink.write_lines("payloads", payloads)
    sink.write_batch("parsed", parsed)
    sink.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
