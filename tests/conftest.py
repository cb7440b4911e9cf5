"""Test configuration and fixtures for chemio tests."""

import io

import pytest

# RDKit is used as reference for Molfile decoding
from rdkit import Chem


def molblock(*lines: str) -> str:
    """Join record lines into a Molfile text."""
    return "\n".join(lines) + "\n"


def as_stream(text: str) -> io.BytesIO:
    """Wrap file text in a binary stream, as read from disk."""
    return io.BytesIO(text.encode("utf-8"))


def rdkit_mol(text: str) -> Chem.Mol:
    """Parse a Molfile with RDKit, without sanitization.

    Args:
        text: Molfile text.

    Returns:
        RDKit molecule with explicit hydrogens kept.
    """
    mol = Chem.MolFromMolBlock(text, sanitize=False, removeHs=False)
    if mol is None:
        raise ValueError("RDKit could not parse molblock")
    return mol


def rdkit_charges(text: str) -> list[int]:
    """Formal charges per atom according to RDKit."""
    return [atom.GetFormalCharge() for atom in rdkit_mol(text).GetAtoms()]


def rdkit_isotopes(text: str) -> list[int | None]:
    """Isotopes per atom according to RDKit (None for natural abundance)."""
    return [atom.GetIsotope() or None for atom in rdkit_mol(text).GetAtoms()]


ALANINE_HEADER = "GSMACCS-II10169115362D 1   0.00366     0.00123    42"

ALANINE_ATOMS = [
    "   -0.6622    0.5342    0.0000 C   0  0  2  0  0  0",
    "    0.6745   -0.0981    0.0000 C   0  0  0  0  0  0",
    "   -0.7821    1.7000    0.0000 C   1  0  0  0  0  0",
    "   -1.8622   -0.3695    0.0000 N   0  3  0  0  0  0",
    "    0.7332   -1.3348    0.0000 O   0  0  0  0  0  0",
    "    1.6623    0.6545    0.0000 O   0  5  0  0  0  0",
]

ALANINE_BONDS = [
    "  1  2  1  0  0  0",
    "  1  3  1  1  0  0",
    "  1  4  1  0  0  0",
    "  2  5  2  0  0  0",
    "  2  6  1  0  0  0",
]

# Zwitterionic L-alanine with a 13C methyl, charges given as atom block codes
# and superseded by an 'M  CHG' property line.
ALANINE_V2000 = molblock(
    "L-Alanine (13C)",
    ALANINE_HEADER,
    "Additional Comments",
    "  6  5  0  0  1  0              3 V2000",
    *ALANINE_ATOMS,
    *ALANINE_BONDS,
    "M  CHG  2   4   1   6  -1",
    "M  ISO  1   3  13",
    "M  END",
)

# Same structure with charges only in the atom block.
ALANINE_V2000_INLINE_CHARGES = molblock(
    "L-Alanine (13C)",
    ALANINE_HEADER,
    "Additional Comments",
    "  6  5  0  0  1  0              1 V2000",
    *ALANINE_ATOMS,
    *ALANINE_BONDS,
    "M  END",
)

ALANINE_V3000 = molblock(
    "L-Alanine (13C)",
    ALANINE_HEADER,
    "Additional Comments",
    "  0  0  0     0  0            999 V3000",
    "M  V30 BEGIN CTAB",
    "M  V30 COUNTS 6 5 0 0 1",
    "M  V30 BEGIN ATOM",
    "M  V30 1 C -0.6622 0.5342 0 0 CFG=2",
    "M  V30 2 C 0.6745 -0.0981 0 0",
    "M  V30 3 C -0.7821 1.7 0 0 MASS=13",
    "M  V30 4 N -1.8622 -0.3695 0 0 CHG=1",
    "M  V30 5 O 0.7332 -1.3348 0 0",
    "M  V30 6 O 1.6623 0.6545 0 0 CHG=-1",
    "M  V30 END ATOM",
    "M  V30 BEGIN BOND",
    "M  V30 1 1 1 2",
    "M  V30 2 1 1 3 CFG=1",
    "M  V30 3 1 1 4",
    "M  V30 4 2 2 5",
    "M  V30 5 1 2 6",
    "M  V30 END BOND",
    "M  V30 END CTAB",
    "M  END",
)

PDB_ATOM = "ATOM      4  CA  ALA L   1B     13.000  21.098  20.348  1.00 20.50      A    C  "
PDB_ATOM_CATION = "ATOM     47  NH1 ARG L   4       0.065   9.975  21.485  1.00  7.68      A    N1+"
PDB_ATOM_ANION = "ATOM     17  OD2 ASP L   1A      7.250  19.552  18.526  0.50 22.65      A    O1-"


@pytest.fixture
def alanine_v2000() -> str:
    """Alanine Molfile with an 'M  CHG' property block."""
    return ALANINE_V2000


@pytest.fixture
def alanine_inline_charges() -> str:
    """Alanine Molfile with atom block charge codes only."""
    return ALANINE_V2000_INLINE_CHARGES


@pytest.fixture
def alanine_v3000() -> str:
    """Alanine Molfile in the V3000 dialect."""
    return ALANINE_V3000


@pytest.fixture
def pdb_text() -> str:
    """Small PDB file with ATOM, HETATM, TER, CONECT and END records."""
    return molblock(
        PDB_ATOM,
        PDB_ATOM_CATION,
        "TER",
        PDB_ATOM_ANION,
        "HETATM  100 CL    CL A 201      10.000  11.000  12.000  1.00 30.00          CL1-",
        "CONECT    4   47",
        "",
        "END",
    )
