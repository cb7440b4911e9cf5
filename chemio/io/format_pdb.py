"""
PDB atom record reader.

Reads ATOM and HETATM records of a PDB file into a molecule without bonds.
Records are 80 fixed columns wide; shorter lines are padded with spaces.
"""

from __future__ import annotations

import logging
from os import PathLike
from typing import IO, Final

from ..exceptions import InvalidValueError, UnexpectedTagError
from ..types import Atom, Molecule, Point3d
from .fields import pad_line, parse_float, parse_int, parse_uint
from .line_reader import LineReader, line_context

logger = logging.getLogger(__name__)

PDB_LINE_WIDTH: Final[int] = 80

ATOM_RECORDS: Final[frozenset[str]] = frozenset({"ATOM  ", "HETATM"})
IGNORED_RECORDS: Final[frozenset[str]] = frozenset({"      ", "TER   ", "CONECT", "END   "})


def parse_pdb_charge(field: str) -> int:
    """Decode the 2-column charge field, e.g. '1+', '2-' or blank.

    Raises:
        InvalidValueError: If the sign column is not ' ', '+' or '-'.
    """
    sign = field[1]
    if sign == " ":
        return 0
    if sign == "+":
        return parse_int(field[0], "charge")
    if sign == "-":
        return -parse_int(field[0], "charge")
    raise InvalidValueError("charge", field)


def parse_pdb_atom(line: str) -> Atom:
    """Decode an ATOM/HETATM record.

    Only the serial number, coordinates, element and charge columns are
    decoded; residue and chain columns are not used.

    Raises:
        ParseNumericError: If a numeric field cannot be decoded.
        InvalidValueError: If the charge field is malformed.
        UnknownElementError: If the element column is not a known element.
    """
    line = pad_line(line, PDB_LINE_WIDTH)

    parse_uint(line[6:11], "atom number")
    x = parse_float(line[30:38], "x-coordinate")
    y = parse_float(line[38:46], "y-coordinate")
    z = parse_float(line[46:54], "z-coordinate")
    symbol = line[76:78].strip()
    charge = parse_pdb_charge(line[78:80])

    atom = Atom.from_symbol(symbol)
    atom.position = Point3d(x, y, z)
    atom.formal_charge = charge
    return atom


def read_pdb(stream: IO[bytes] | IO[str]) -> Molecule:
    """Read the atoms of a PDB stream.

    Raises:
        LineParseError: If a record cannot be decoded or has an unknown tag.
    """
    reader = LineReader(stream)
    atoms: list[Atom] = []

    while (line := reader.read_line_optional()) is not None:
        line = pad_line(line, PDB_LINE_WIDTH)
        tag = line[:6]
        with line_context(reader.line_number):
            if tag in ATOM_RECORDS:
                atoms.append(parse_pdb_atom(line))
            elif tag in IGNORED_RECORDS:
                logger.debug("Line %d: ignoring %r record", reader.line_number, tag)
            else:
                raise UnexpectedTagError(tag)

    logger.info("Read PDB structure: %d atoms", len(atoms))
    return Molecule.from_graph(atoms, [])


def load_pdb(path: str | PathLike[str]) -> Molecule:
    """Read the atoms of a PDB file on disk."""
    with open(path, "rb") as fh:
        return read_pdb(fh)
