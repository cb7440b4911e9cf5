"""
Chemio - Pure Python chemical structure file reader.

Reads MDL Molfiles (V2000 and V3000 connection tables) and PDB atom records
into a molecular graph of atoms and bonds with loosely-typed properties.

    >>> from chemio import read_mol, MoleculeProperty
    >>> mol = read_mol(open("alanine.mol", "rb"))  # doctest: +SKIP
    >>> mol.get_property_string(MoleculeProperty.NAME)  # doctest: +SKIP
    'L-Alanine (13C)'

Submodules:
    chemio.io         - Molfile and PDB readers, line and field decoders
    chemio.properties - Property keys and the type-checked property map
"""

__version__ = "0.1.0"

# Core types
from chemio.types import Atom, Bond, BondType, Molecule, Point3d

# Properties
from chemio.properties import (
    AtomProperty,
    BondProperty,
    MoleculeProperty,
    PropertyMap,
)

# Readers
from chemio.io import load_mol, load_pdb, read_mol, read_pdb

# Exceptions
from chemio.exceptions import (
    ChemError,
    FileReadError,
    InvalidEncodingError,
    InvalidValueError,
    LineParseError,
    MoleculeError,
    ParseError,
    ParseNumericError,
    PropertyError,
    PropertyTypeError,
    UnexpectedEndOfInputError,
    UnknownAtomicNumberError,
    UnknownElementError,
)

# Element data
from chemio.elements import ELEMENTS, Element

__all__ = [
    # Types
    "Atom", "Bond", "BondType", "Molecule", "Point3d",
    # Properties
    "AtomProperty", "BondProperty", "MoleculeProperty", "PropertyMap",
    # Readers
    "read_mol", "load_mol", "read_pdb", "load_pdb",
    # Exceptions
    "ChemError", "FileReadError", "InvalidEncodingError", "InvalidValueError",
    "LineParseError", "MoleculeError", "ParseError", "ParseNumericError", "PropertyError",
    "PropertyTypeError", "UnexpectedEndOfInputError",
    "UnknownAtomicNumberError", "UnknownElementError",
    # Elements
    "ELEMENTS", "Element",
]
