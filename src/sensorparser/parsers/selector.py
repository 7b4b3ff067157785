"""Selection of a sensors output dialect by distribution identifier."""

from enum import Enum

from sensorparser.base import Result, SensorParser
from sensorparser.base.parser import Stream

from .generic import GenericParser
from .openeuler import OpenEulerParser
from .ubuntu import UbuntuParser


class Dialect(str, Enum):
    """The fixed set of sensors output dialects."""

    GENERIC = "generic"
    UBUNTU = "ubuntu"
    OPENEULER = "openeuler"

    def parser(self) -> SensorParser:
        """Create a parser for this dialect."""
        return _PARSERS[self]()


_PARSERS: dict[Dialect, type[SensorParser]] = {
    Dialect.GENERIC: GenericParser,
    Dialect.UBUNTU: UbuntuParser,
    Dialect.OPENEULER: OpenEulerParser,
}


def select_dialect(distribution_id: str) -> Dialect:
    """Map a distribution identifier to its dialect.

    Matching is case-insensitive. "openeuler" and "ubuntu" select their
    own dialects; anything else, including an empty string, selects the
    generic dialect.
    """
    distribution_id = distribution_id.strip().lower()
    if distribution_id == Dialect.OPENEULER.value:
        return Dialect.OPENEULER
    if distribution_id == Dialect.UBUNTU.value:
        return Dialect.UBUNTU
    return Dialect.GENERIC


def select_parser(distribution_id: str) -> SensorParser:
    """Create the parser suited to a distribution identifier.

    Args:
        distribution_id: Distribution ID such as "ubuntu" or
            "openEuler", as found in /etc/os-release

    Returns:
        A ready-to-use parser; never fails

    """
    return select_dialect(distribution_id).parser()


def parse(stream: Stream) -> Result:
    """Parse sensors output with the generic dialect."""
    return GenericParser().parse(stream)
