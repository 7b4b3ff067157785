"""Dialect parsers for the known sensors output variants."""

from .generic import GenericParser
from .openeuler import OpenEulerParser
from .selector import Dialect, parse, select_dialect, select_parser
from .ubuntu import UbuntuParser

__all__ = [
    "Dialect",
    "GenericParser",
    "OpenEulerParser",
    "UbuntuParser",
    "parse",
    "select_dialect",
    "select_parser",
]
