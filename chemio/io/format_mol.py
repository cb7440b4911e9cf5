"""
MDL Molfile reader.

A Molfile starts with a three-line header block (name, program/header line,
comment), followed by the counts line and a connection table in either the
V2000 or the V3000 dialect, and ends with an 'M  END' line.

Reference: MDL CTFile Formats, Elsevier MDL.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from os import PathLike
from typing import IO, Final

from ..properties import MoleculeProperty
from ..types import Atom, Bond, Molecule
from .ctab_v2000 import parse_counts, read_ctab_v2000, scan_property_block
from .ctab_v3000 import read_ctab_v3000
from .fields import pad_line, parse_float_default, parse_uint_default
from .line_reader import LineReader, line_context

logger = logging.getLogger(__name__)

HEADER_LINE_WIDTH: Final[int] = 52


@dataclass(frozen=True, slots=True)
class HeaderLine:
    """Decoded second line of the header block.

    Layout: 'IIPPPPPPPPMMDDYYHHmmddSSssssssssssEEEEEEEEEEEERRRRRR'

    Attributes:
        user: Creator's initials (II).
        program: Creating program name (PPPPPPPP).
        datetime: Date and time, MMDDYYHHmm.
        flag_3d: True for 3D coordinates (dd == "3D").
        scaling_int: Integer scaling factor (SS).
        scaling_float: Float scaling factor.
        energy: Energy from a modelling program.
        reg_number: Internal registry number.
    """

    user: str
    program: str
    datetime: str
    flag_3d: bool
    scaling_int: int
    scaling_float: float
    energy: float
    reg_number: int


def parse_header(line: str) -> HeaderLine:
    """Decode the header line; blank numeric fields default to zero.

    Raises:
        ParseNumericError: If a numeric field cannot be decoded.
    """
    line = pad_line(line, HEADER_LINE_WIDTH)
    return HeaderLine(
        user=line[0:2],
        program=line[2:10],
        datetime=line[10:20],
        flag_3d=line[20:22] == "3D",
        scaling_int=parse_uint_default(line[22:24], "scaling factor"),
        scaling_float=parse_float_default(line[24:34], "scaling factor"),
        energy=parse_float_default(line[34:46], "energy"),
        reg_number=parse_uint_default(line[46:52], "registration number"),
    )


def assemble_molecule(
    atoms: list[Atom],
    bonds: list[Bond],
    name: str,
    comment: str,
    header: HeaderLine,
) -> Molecule:
    """Build the molecule and stamp it with the header block properties."""
    molecule = Molecule.from_graph(atoms, bonds)
    molecule.set_property(MoleculeProperty.NAME, name)
    molecule.set_property(MoleculeProperty.COMMENT, comment)
    molecule.set_property(MoleculeProperty.CREATION_USER, header.user)
    molecule.set_property(MoleculeProperty.CREATION_PROGRAM, header.program)
    molecule.set_property(MoleculeProperty.CREATION_DATE, header.datetime)
    return molecule


def read_mol(stream: IO[bytes] | IO[str]) -> Molecule:
    """Read a molecule from a Molfile stream.

    Args:
        stream: Binary or text stream positioned at the start of the file.

    Returns:
        The decoded molecule.

    Raises:
        LineParseError: If a record cannot be decoded.
        UnexpectedEndOfInputError: If the stream ends before 'M  END'.
    """
    reader = LineReader(stream)

    name = reader.next_line()
    header_line = reader.next_line()
    with line_context(reader.line_number):
        header = parse_header(header_line)
    comment = reader.next_line()

    counts_line = reader.next_line()
    with line_context(reader.line_number):
        counts = parse_counts(counts_line)
    logger.debug(
        "Counts line: %d atoms, %d bonds, version %r",
        counts.num_atoms,
        counts.num_bonds,
        counts.version,
    )

    if counts.is_v3000:
        atoms, bonds = read_ctab_v3000(reader)
    else:
        atoms, bonds = read_ctab_v2000(reader, counts)

    scan_property_block(reader, atoms)

    molecule = assemble_molecule(atoms, bonds, name, comment, header)
    logger.info(
        "Read molecule %r: %d atoms, %d bonds",
        name,
        molecule.num_atoms,
        molecule.num_bonds,
    )
    return molecule


def load_mol(path: str | PathLike[str]) -> Molecule:
    """Read a molecule from a Molfile on disk."""
    with open(path, "rb") as fh:
        return read_mol(fh)
