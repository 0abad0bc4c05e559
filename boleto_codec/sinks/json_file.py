"""JSON file sink for exporting API payloads."""

import json
from pathlib import Path
from typing import Any, Iterable

from boleto_codec.logging import get_logger
from boleto_codec.mappers.serialization import to_dict

logger = get_logger(__name__)


class JsonFileSink:
    """Output records to JSON files."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, name: str, records: list[Any]) -> Path:
        """Write a batch of records to ``<name>.json``."""
        file_path = self.output_dir / f"{name}.json"
        data = [to_dict(record) for record in records]

        with open(file_path, "w", encoding="utf-8") as f:
            if self.pretty:
                json.dump(data, f, indent=2, ensure_ascii=False, default=str)
            else:
                json.dump(data, f, ensure_ascii=False, default=str)

        self._counts[name] = len(records)
        return file_path

    def write_lines(self, name: str, records: Iterable[Any]) -> Path:
        """Write records one per line to ``<name>.jsonl``."""
        file_path = self.output_dir / f"{name}.jsonl"
        count = 0

        with open(file_path, "w", encoding="utf-8") as f:
            for record in records:
                f.write(json.dumps(to_dict(record), ensure_ascii=False, default=str) + "\n")
                count += 1

        self._counts[name] = count
        return file_path

    @property
    def counts(self) -> dict[str, int]:
        """Records written per file name."""
        return dict(self._counts)

    def close(self) -> None:
        """Log a summary of what was written."""
        logger.info("JSON files written to %s", self.output_dir)
        for name, count in self._counts.items():
            logger.info("  %s: %d records", name, count)
