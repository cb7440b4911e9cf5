"""
MDL connection table (CTab) decoders, V2000 dialect.

Record layouts follow the MDL CTFile format description. Every field is
addressed by fixed character columns; short lines are right-padded before
slicing so trailing optional fields read as blank.

Counts line:  'aaabbblllfffcccsssxxxrrrpppiiimmmvvvvvv'
Atom line:    'xxxxx.xxxxyyyyy.yyyyzzzzz.zzzz aaaddcccssshhhbbbvvvHHHrrriiimmmnnneee'
Bond line:    '111222tttsssxxxrrrccc'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from ..exceptions import InvalidValueError, LineTooShortError
from ..types import Atom, Bond, BondType, Point3d
from .fields import (
    pad_line,
    parse_float,
    parse_int_default,
    parse_uint_default,
)
from .line_reader import LineReader, line_context

logger = logging.getLogger(__name__)

COUNTS_LINE_WIDTH: Final[int] = 39
ATOM_LINE_WIDTH: Final[int] = 69
BOND_LINE_WIDTH: Final[int] = 21
PROPERTY_TAG_WIDTH: Final[int] = 6

TAG_END: Final[str] = "M  END"
TAG_CHARGE: Final[str] = "M  CHG"
TAG_RADICAL: Final[str] = "M  RAD"

# Atom-block charge code -> formal charge. Code 4 (doublet radical) is not a
# charge and, like any unknown code, leaves the atom neutral.
CHARGE_CODES: Final[dict[int, int]] = {
    0: 0,
    1: 3,
    2: 2,
    3: 1,
    5: -1,
    6: -2,
    7: -3,
}

# Mass differences outside this range defer to an 'M  ISO' property line.
MAX_MASS_DIFFERENCE: Final[int] = 3


@dataclass(frozen=True, slots=True)
class CountsLine:
    """Decoded counts line.

    Attributes:
        num_atoms: Number of atom records.
        num_bonds: Number of bond records.
        num_atom_lists: Number of atom list records.
        chiral_flag: Whether the structure is flagged chiral.
        num_stext: Number of stext entries (two lines each).
        num_properties: Declared property line count (obsolete, often 999).
        version: Version tag, verbatim (" V2000" or " V3000").
    """

    num_atoms: int
    num_bonds: int
    num_atom_lists: int
    chiral_flag: bool
    num_stext: int
    num_properties: int
    version: str

    @property
    def is_v3000(self) -> bool:
        """Whether the connection table uses the V3000 dialect."""
        return self.version.strip() == "V3000"


def parse_counts(line: str) -> CountsLine:
    """Decode the counts line.

    Raises:
        ParseNumericError: If a count field is not a number.
    """
    line = pad_line(line, COUNTS_LINE_WIDTH)
    return CountsLine(
        num_atoms=parse_uint_default(line[0:3], "atom count"),
        num_bonds=parse_uint_default(line[3:6], "bond count"),
        num_atom_lists=parse_uint_default(line[6:9], "atom list count"),
        chiral_flag=parse_uint_default(line[12:15], "chiral flag") != 0,
        num_stext=parse_uint_default(line[15:18], "stext count"),
        num_properties=parse_uint_default(line[30:33], "property list count"),
        version=line[33:39],
    )


def charge_from_code(code: int) -> int:
    """Map an atom-block charge code to a formal charge."""
    return CHARGE_CODES.get(code, 0)


def isotope_from_mass_difference(atom: Atom, mass_difference: int) -> int | None:
    """Resolve an atom-block mass difference to an isotope mass number.

    Returns:
        The isotope, or None for a zero or out-of-range difference.
    """
    if mass_difference == 0 or abs(mass_difference) > MAX_MASS_DIFFERENCE:
        return None
    return atom.element.most_common_isotope + mass_difference


def parse_atom_line(line: str) -> Atom:
    """Decode one atom-block record.

    Stereo parity, hydrogen count, stereo care box, valence, H0 designator
    and the reaction fields are validated but not kept on the atom.

    Raises:
        ParseNumericError: If a numeric field cannot be decoded.
        UnknownElementError: If the symbol is not a known element.
    """
    line = pad_line(line, ATOM_LINE_WIDTH)

    x = parse_float(line[0:10], "x-coordinate")
    y = parse_float(line[10:20], "y-coordinate")
    z = parse_float(line[20:30], "z-coordinate")
    symbol = line[31:34].strip()
    mass_difference = parse_int_default(line[34:36], "mass difference")
    charge_code = parse_uint_default(line[36:39], "charge")
    parse_uint_default(line[39:42], "atom stereo parity")
    parse_uint_default(line[42:45], "hydrogen count")
    parse_uint_default(line[45:48], "stereo care box")
    parse_uint_default(line[48:51], "valence")
    parse_uint_default(line[51:54], "H0 designator")
    parse_uint_default(line[60:63], "atom-atom mapping number")
    parse_uint_default(line[63:66], "inversion/retention flag")
    parse_uint_default(line[66:69], "exact change flag")

    atom = Atom.from_symbol(symbol)
    atom.position = Point3d(x, y, z)
    atom.formal_charge = charge_from_code(charge_code)
    atom.isotope = isotope_from_mass_difference(atom, mass_difference)
    return atom


def bond_type_from_code(code: int, raw: str) -> BondType:
    """Map a bond-block type code to a BondType.

    Raises:
        InvalidValueError: If the code is not 1..8; `value` is `raw`.
    """
    try:
        return BondType(code)
    except ValueError:
        raise InvalidValueError("bond type", raw) from None


def parse_bond_line(line: str) -> Bond:
    """Decode one bond-block record.

    Atom indices are converted from 1-based to 0-based. They are not checked
    against the atom block.

    Raises:
        ParseNumericError: If a numeric field cannot be decoded.
        InvalidValueError: If the bond type code is unknown.
    """
    line = pad_line(line, BOND_LINE_WIDTH)

    from_atom = parse_uint_default(line[0:3], "atom 1")
    to_atom = parse_uint_default(line[3:6], "atom 2")
    type_code = parse_uint_default(line[6:9], "bond type")
    parse_uint_default(line[9:12], "bond stereochemistry")
    parse_uint_default(line[15:18], "bond topology")
    parse_int_default(line[18:21], "reacting center status")

    bond_type = bond_type_from_code(type_code, line[6:9])
    return Bond(from_atom - 1, to_atom - 1, bond_type)


def reset_atom_charges(atoms: list[Atom]) -> None:
    """Set the formal charge of every atom to zero."""
    for atom in atoms:
        atom.formal_charge = 0


def scan_property_block(reader: LineReader, atoms: list[Atom]) -> None:
    """Consume property lines up to and including 'M  END'.

    The first 'M  CHG' or 'M  RAD' line supersedes the atom-block charge
    codes: all charges are reset to zero once. The per-atom values on those
    lines are not applied.

    Raises:
        LineParseError: If a line is too short to hold a tag.
        UnexpectedEndOfInputError: If the input ends before 'M  END'.
    """
    has_charge_props = False

    while True:
        line = reader.next_line()
        with line_context(reader.line_number):
            if len(line) < PROPERTY_TAG_WIDTH:
                raise LineTooShortError(line, PROPERTY_TAG_WIDTH)

        tag = line[:PROPERTY_TAG_WIDTH]
        if tag == TAG_END:
            return
        if tag in (TAG_CHARGE, TAG_RADICAL):
            if not has_charge_props:
                logger.debug(
                    "Line %d: %r supersedes atom block charges",
                    reader.line_number,
                    tag,
                )
                reset_atom_charges(atoms)
                has_charge_props = True
        else:
            logger.debug("Line %d: ignoring property %r", reader.line_number, tag)


def read_ctab_v2000(reader: LineReader, counts: CountsLine) -> tuple[list[Atom], list[Bond]]:
    """Read the atom, bond, list and stext blocks following the counts line.

    Returns:
        The decoded atoms and bonds.

    Raises:
        LineParseError: If a record cannot be decoded.
        UnexpectedEndOfInputError: If the input ends inside a block.
    """
    atoms: list[Atom] = []
    for atom_line in reader.read_lines(counts.num_atoms):
        with line_context(reader.line_number):
            atoms.append(parse_atom_line(atom_line))

    bonds: list[Bond] = []
    for bond_line in reader.read_lines(counts.num_bonds):
        with line_context(reader.line_number):
            bonds.append(parse_bond_line(bond_line))

    for _ in reader.read_lines(counts.num_atom_lists):
        pass
    for _ in reader.read_lines(counts.num_stext * 2):
        pass

    logger.debug(
        "Read V2000 atom block (%d atoms) and bond block (%d bonds)",
        len(atoms),
        len(bonds),
    )
    return atoms, bonds
