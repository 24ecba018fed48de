"""Clearable holder for password material."""


class SecretBuffer:
    """Mutable buffer for a secret that can be zeroed after use.

    The contents are kept in a ``bytearray`` so ``clear()`` overwrites them in
    place instead of waiting for the garbage collector.
    """

    __slots__ = ("_data",)

    def __init__(self, value: str | bytes = "") -> None:
        if isinstance(value, str):
            value = value.encode("utf-8")
        self._data = bytearray(value)

    def reveal(self) -> str:
        """Return the secret as a string."""
        return self._data.decode("utf-8")

    def clear(self) -> None:
        """Overwrite the secret with zeros and empty the buffer."""
        for i in range(len(self._data)):
            self._data[i] = 0
        del self._data[:]

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SecretBuffer):
            return self._data == other._data
        if isinstance(other, str):
            return self._data == other.encode("utf-8")
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "SecretBuffer('****')" if self._data else "SecretBuffer('')"
