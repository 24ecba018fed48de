"""Endpoint parsing for address and seed properties."""

import ipaddress
import re
from dataclasses import dataclass

from mongofactory.exceptions import InvalidEndpoint

DEFAULT_PORT = 27017

_SEED_SEPARATOR = re.compile(r"[,\s]+")


def is_blank(value: str | None) -> bool:
    """Return True for None, empty or whitespace-only strings."""
    return value is None or not value.strip()


def is_not_blank(value: str | None) -> bool:
    return not is_blank(value)


def _check_ipv6(spec: str, host: str) -> None:
    try:
        ipaddress.IPv6Address(host)
    except ValueError:
        raise InvalidEndpoint(spec, "invalid IPv6 address") from None


@dataclass(frozen=True)
class Endpoint:
    """A single cluster member."""

    host: str
    port: int = DEFAULT_PORT

    @classmethod
    def parse(cls, spec: str) -> "Endpoint":
        """Parse ``host``, ``host:port``, ``[ipv6]`` or ``[ipv6]:port``.

        Raises:
            InvalidEndpoint: if the host is empty or the port is not a
                number in 1..65535
        """
        text = spec.strip()
        port_str: str | None = None

        if text.startswith("["):
            end = text.find("]")
            if end == -1:
                raise InvalidEndpoint(spec, "unterminated IPv6 literal")
            host = text[1:end]
            rest = text[end + 1 :]
            if rest:
                if not rest.startswith(":"):
                    raise InvalidEndpoint(spec, "unexpected text after IPv6 literal")
                port_str = rest[1:]
            _check_ipv6(spec, host)
        elif text.count(":") > 1:
            # Bare IPv6 address without a port
            host = text
            _check_ipv6(spec, host)
        elif ":" in text:
            host, port_str = text.rsplit(":", 1)
        else:
            host = text

        if not host:
            raise InvalidEndpoint(spec, "empty host")

        if port_str is None:
            return cls(host.lower())

        if not (port_str.isascii() and port_str.isdigit()):
            raise InvalidEndpoint(spec, f"port {port_str!r} is not a number")
        port = int(port_str)
        if not 0 < port <= 65535:
            raise InvalidEndpoint(spec, f"port {port} out of range")

        return cls(host.lower(), port)

    def __str__(self) -> str:
        if ":" in self.host:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"


def parse_seeds(value: str | None) -> list[Endpoint]:
    """Split a seed list on commas and/or whitespace.

    Returns the endpoints in input order; a blank value yields an empty list.
    """
    if is_blank(value):
        return []
    assert value is not None
    return [Endpoint.parse(token) for token in _SEED_SEPARATOR.split(value.strip()) if token]
