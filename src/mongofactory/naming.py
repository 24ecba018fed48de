"""Reference types handed to object factories by a naming lookup."""

import os
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class RefAddr:
    """A single typed address entry of a reference."""

    addr_type: str
    content: str


@dataclass
class Reference:
    """Ordered collection of typed address entries describing an object.

    Entries keep their insertion order and duplicate types are allowed.
    """

    class_name: str
    factory_name: str | None = None
    addrs: list[RefAddr] = field(default_factory=list)

    @classmethod
    def from_mapping(
        cls,
        properties: Mapping[str, str],
        class_name: str = "pymongo.database.Database",
    ) -> "Reference":
        """Create a reference from a mapping of property names to values."""
        ref = cls(class_name)
        for name, value in properties.items():
            ref.add(name, value)
        return ref

    @classmethod
    def from_environ(
        cls,
        prefix: str = "MONGO_",
        names: Iterable[str] | None = None,
        environ: Mapping[str, str] | None = None,
        class_name: str = "pymongo.database.Database",
    ) -> "Reference":
        """Create a reference from prefixed environment variables.

        ``MONGO_WRITECONCERN`` maps back to ``writeConcern``: the suffix is
        matched case-insensitively against ``names``.

        Args:
            prefix: Environment variable prefix
            names: Property names to look for (defaults to the factory keys)
            environ: Mapping to read instead of ``os.environ``
            class_name: Class name recorded on the reference
        """
        if names is None:
            from mongofactory.factory import PROPERTY_NAMES

            names = PROPERTY_NAMES
        if environ is None:
            environ = os.environ

        ref = cls(class_name)
        for name in names:
            value = environ.get(f"{prefix}{name.upper()}")
            if value is not None:
                ref.add(name, value)
        return ref

    def add(self, addr_type: str, content: str) -> None:
        """Append an entry."""
        self.addrs.append(RefAddr(addr_type, content))

    def get(self, addr_type: str) -> RefAddr | None:
        """Return the first entry of the given type."""
        for addr in self.addrs:
            if addr.addr_type == addr_type:
                return addr
        return None

    def get_all(self) -> Iterator[RefAddr]:
        """Iterate over the entries in order."""
        return iter(list(self.addrs))

    def __iter__(self) -> Iterator[RefAddr]:
        return self.get_all()

    def __len__(self) -> int:
        return len(self.addrs)
