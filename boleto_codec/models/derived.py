"""Compute-once slot for values derived from a boleto."""

from typing import Callable, Generic, TypeVar

from boleto_codec.exceptions import InvalidEntityStateError

T = TypeVar("T")


class DerivedField(Generic[T]):
    """Two-state slot: unset, or frozen with a value.

    A slot moves from unset to frozen exactly once, either through
    :meth:`freeze` (value supplied by the caller) or through
    :meth:`get_or_derive` (value computed on first access). Once frozen the
    value never changes.

    Not thread safe; callers serialize access to a single boleto.
    """

    __slots__ = ("_value", "_frozen")

    def __init__(self, value: T | None = None) -> None:
        self._value = value
        self._frozen = value is not None

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def value(self) -> T | None:
        """Frozen value, or ``None`` while unset."""
        return self._value

    def freeze(self, value: T) -> T:
        """Store ``value`` permanently.

        Raises
        ------
        InvalidEntityStateError
            If the slot is already frozen.
        """
        if self._frozen:
            raise InvalidEntityStateError(
                f"Value already frozen as {self._value!r}; refusing {value!r}"
            )
        if value is None:
            raise InvalidEntityStateError("Cannot freeze a slot with None")
        self._value = value
        self._frozen = True
        return value

    def get_or_derive(self, derive: Callable[[], T]) -> T:
        """Return the frozen value, computing and freezing it on first use."""
        if not self._frozen:
            return self.freeze(derive())
        return self._value  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DerivedField):
            return NotImplemented
        return self._frozen == other._frozen and self._value == other._value

    def __repr__(self) -> str:
        if self._frozen:
            return f"DerivedField(frozen={self._value!r})"
        return "DerivedField(unset)"
