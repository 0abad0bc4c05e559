"""Custom exception hierarchy for boleto-codec."""


class BoletoCodecError(Exception):
    """Base exception for all boleto-codec errors."""


class InvalidArgumentError(BoletoCodecError):
    """Raised when a caller supplies an argument outside its valid domain."""


class OutOfRangeError(InvalidArgumentError):
    """Raised when a numeric value does not fit its fixed-width field."""


class MalformedInputError(BoletoCodecError):
    """Raised when an encoded field cannot be parsed."""


class MissingContextError(BoletoCodecError):
    """Raised when a remote payload is imported without required context."""


class InvalidEntityStateError(BoletoCodecError):
    """Raised when an entity is in an invalid state for the operation."""


class BankNotRegisteredError(BoletoCodecError):
    """Raised when no bank variant is registered for a bank code."""


class ConfigurationError(BoletoCodecError):
    """Raised when configuration is invalid or missing."""
