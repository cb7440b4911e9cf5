"""
MDL connection table (CTab) reader, V3000 dialect.

V3000 records are free-format: every line carries the 'M  V30 ' prefix, values
are separated by whitespace, values containing whitespace are double-quoted
(with '""' standing for a literal quote), and a record ending in '-' continues
on the next line. Blocks are delimited by 'BEGIN <name>' / 'END <name>'
records instead of counts.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Final

from ..exceptions import (
    InvalidValueError,
    ParseError,
    UnexpectedTagError,
    UnterminatedQuoteError,
)
from ..types import Atom, Bond, Point3d
from .ctab_v2000 import bond_type_from_code
from .fields import parse_float, parse_int, parse_uint, parse_uint_default
from .line_reader import LineReader, line_context

logger = logging.getLogger(__name__)

V30_PREFIX: Final[str] = "M  V30"
CONTINUATION: Final[str] = "-"

_QUOTED_VALUE: Final = re.compile(r'"((?:[^"]|"")*)"(.*)', re.DOTALL)
_WHITESPACE: Final = re.compile(r"\s")


def read_v3000_line(line: str, reader: LineReader) -> str:
    """Join a record with its continuation lines.

    While the record ends in '-', the dash is dropped and the next physical
    line, minus its 6-character 'M  V30' tag, is appended.

    Raises:
        UnexpectedEndOfInputError: If the input ends during a continuation.
    """
    while line.endswith(CONTINUATION):
        line = line[:-1] + reader.next_line()[len(V30_PREFIX):]
    return line


def pop_v3000_value(line: str) -> tuple[str, str]:
    """Split the first value off a V3000 record.

    A quoted value runs to its closing quote and the remainder starts right
    after it. An unquoted value runs to the first whitespace character, which
    is dropped from the remainder. '""' is unescaped to '"' in both cases.

    Returns:
        Tuple of (value, remainder).

    Raises:
        UnterminatedQuoteError: If a quoted value has no closing quote.
    """
    if line.startswith('"'):
        match = _QUOTED_VALUE.fullmatch(line)
        if match is None:
            raise UnterminatedQuoteError(line)
        value, rest = match.group(1), match.group(2)
    else:
        match = _WHITESPACE.search(line)
        if match is None:
            value, rest = line, ""
        else:
            value, rest = line[:match.start()], line[match.start() + 1:]

    return value.replace('""', '"'), rest


def split_v3000_values(text: str) -> list[str]:
    """Split a whole record into values.

    Parenthesised list values such as 'ENDPTS=(3 1 2 5)' are kept together.
    """
    values: list[str] = []
    rest = text.lstrip()
    while rest:
        value, rest = pop_v3000_value(rest)
        rest = rest.lstrip()
        if "=(" in value:
            while rest and not value.endswith(")"):
                part, rest = pop_v3000_value(rest)
                rest = rest.lstrip()
                value = f"{value} {part}"
        values.append(value)
    return values


def _split_keyword_values(items: list[str]) -> dict[str, str]:
    properties: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep:
            raise InvalidValueError("keyword property", item)
        properties[key.upper()] = value
    return properties


def _require(values: list[str], count: int, name: str) -> None:
    if len(values) < count:
        raise ParseError(
            f"{name} needs at least {count} values, got {len(values)}",
            name,
            " ".join(values),
        )


def _next_record(reader: LineReader) -> tuple[int, list[str]]:
    """Read one logical V3000 record.

    Returns:
        Tuple of (number of its first physical line, values after the tag).
    """
    line = reader.next_line()
    line_number = reader.line_number
    with line_context(line_number):
        if not line.startswith(V30_PREFIX):
            raise UnexpectedTagError(line[:len(V30_PREFIX)], V30_PREFIX)
        line = read_v3000_line(line, reader)
        return line_number, split_v3000_values(line[len(V30_PREFIX):])


def parse_v3000_atom(values: list[str]) -> tuple[int, Atom]:
    """Decode an atom record 'index type x y z aamap [KEY=VALUE ...]'.

    'CHG' sets the formal charge and 'MASS' the isotope mass number; other
    keyword properties are ignored.

    Returns:
        Tuple of (record index, atom).
    """
    _require(values, 6, "atom record")
    index = parse_uint(values[0], "atom index")
    atom = Atom.from_symbol(values[1])
    atom.position = Point3d(
        parse_float(values[2], "x-coordinate"),
        parse_float(values[3], "y-coordinate"),
        parse_float(values[4], "z-coordinate"),
    )
    parse_uint(values[5], "atom-atom mapping number")

    properties = _split_keyword_values(values[6:])
    if "CHG" in properties:
        atom.formal_charge = parse_int(properties["CHG"], "charge")
    if "MASS" in properties:
        atom.isotope = parse_uint(properties["MASS"], "isotope mass")
    return index, atom


def parse_v3000_bond(values: list[str], atom_positions: dict[int, int]) -> Bond:
    """Decode a bond record 'index type atom1 atom2 [KEY=VALUE ...]'.

    Atom references are resolved through `atom_positions`, which maps atom
    record indices to 0-based positions.
    """
    _require(values, 4, "bond record")
    parse_uint(values[0], "bond index")
    bond_type = bond_type_from_code(parse_uint(values[1], "bond type"), values[1])

    ends: list[int] = []
    for name, raw in (("atom 1", values[2]), ("atom 2", values[3])):
        ref = parse_uint(raw, name)
        if ref not in atom_positions:
            raise InvalidValueError(name, raw)
        ends.append(atom_positions[ref])

    _split_keyword_values(values[4:])
    return Bond(ends[0], ends[1], bond_type)


def _skip_block(reader: LineReader, name: str) -> None:
    depth = 1
    while depth:
        _, values = _next_record(reader)
        if values and values[0] == "BEGIN":
            depth += 1
        elif values and values[0] == "END":
            depth -= 1
    logger.debug("Skipped V3000 %s block", name)


def _check_count(found: int, declared: int | None, name: str) -> None:
    if declared is not None and found != declared:
        raise ParseError(
            f"{name} block has {found} records, COUNTS declares {declared}",
            f"{name.lower()} count",
            str(found),
        )


def read_ctab_v3000(reader: LineReader) -> tuple[list[Atom], list[Bond]]:
    """Read a V3000 CTAB from 'BEGIN CTAB' through 'END CTAB'.

    Returns:
        The decoded atoms and bonds.

    Raises:
        LineParseError: If a record cannot be decoded, attributed to the first
            physical line of the record.
        UnexpectedEndOfInputError: If the input ends inside the CTAB.
    """
    line_number, values = _next_record(reader)
    with line_context(line_number):
        if values[:2] != ["BEGIN", "CTAB"]:
            raise UnexpectedTagError(" ".join(values), "BEGIN CTAB")

    num_atoms: int | None = None
    num_bonds: int | None = None
    atoms: list[Atom] = []
    bonds: list[Bond] = []
    atom_positions: dict[int, int] = {}

    def add_atom(vals: list[str]) -> None:
        index, atom = parse_v3000_atom(vals)
        if index in atom_positions:
            raise InvalidValueError("atom index", vals[0])
        atom_positions[index] = len(atoms)
        atoms.append(atom)

    def add_bond(vals: list[str]) -> None:
        bonds.append(parse_v3000_bond(vals, atom_positions))

    while True:
        line_number, values = _next_record(reader)
        keyword = values[0] if values else ""
        block = values[1] if len(values) > 1 else ""

        if keyword == "COUNTS":
            with line_context(line_number):
                _require(values, 3, "COUNTS record")
                num_atoms = parse_uint(values[1], "atom count")
                num_bonds = parse_uint(values[2], "bond count")
                if len(values) > 5:
                    parse_uint_default(values[5], "chiral flag")
        elif keyword == "BEGIN" and block == "ATOM":
            line_number = _read_block(reader, "ATOM", add_atom)
            with line_context(line_number):
                _check_count(len(atoms), num_atoms, "ATOM")
        elif keyword == "BEGIN" and block == "BOND":
            line_number = _read_block(reader, "BOND", add_bond)
            with line_context(line_number):
                _check_count(len(bonds), num_bonds, "BOND")
        elif keyword == "BEGIN":
            _skip_block(reader, block)
        elif keyword == "END" and block == "CTAB":
            break
        elif keyword == "END":
            with line_context(line_number):
                raise UnexpectedTagError(" ".join(values), "END CTAB")
        else:
            logger.debug("Line %d: ignoring V3000 record %r", line_number, keyword)

    logger.debug("Read V3000 CTAB (%d atoms, %d bonds)", len(atoms), len(bonds))
    return atoms, bonds


def _read_block(
    reader: LineReader,
    name: str,
    handle: Callable[[list[str]], None],
) -> int:
    """Feed every record of a block to `handle` until 'END <name>'.

    Returns:
        The line number of the 'END' record.
    """
    while True:
        line_number, values = _next_record(reader)
        if values[:2] == ["END", name]:
            return line_number
        with line_context(line_number):
            handle(values)
