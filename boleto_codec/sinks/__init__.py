"""Output sinks for exporting payloads."""

from boleto_codec.sinks.json_file import JsonFileSink

__all__ = ["JsonFileSink"]
