"""
Core molecular data types.

This module defines the fundamental data structures for representing molecules
read from structure files: Atom, Bond and Molecule, plus the Point3d position
and BondType enumeration they use.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, NamedTuple

from .elements import Element, lookup_atomic_number, lookup_symbol
from .properties import (
    AtomProperty,
    BondProperty,
    HasProperties,
    MoleculeProperty,
    PropertyMap,
)


class Point3d(NamedTuple):
    """Cartesian position."""

    x: float
    y: float
    z: float


class BondType(IntEnum):
    """Bond type, valued by its MDL bond-block code.

    Codes 5 to 7 are query types matching either of two basic types;
    ANY matches every bond.
    """

    SINGLE = 1
    DOUBLE = 2
    TRIPLE = 3
    AROMATIC = 4
    SINGLE_OR_DOUBLE = 5
    SINGLE_OR_AROMATIC = 6
    DOUBLE_OR_AROMATIC = 7
    ANY = 8

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def is_query(self) -> bool:
        """Whether this type only occurs in query structures."""
        return self >= BondType.SINGLE_OR_DOUBLE

    @property
    def alternatives(self) -> frozenset[BondType]:
        """Basic bond types this type matches (itself for basic types)."""
        return _QUERY_ALTERNATIVES.get(self, frozenset({self}))

    @property
    def order(self) -> int | None:
        """Covalent bond order, or None for aromatic and query types."""
        if self <= BondType.TRIPLE:
            return int(self)
        return None


_QUERY_ALTERNATIVES: dict[BondType, frozenset[BondType]] = {
    BondType.SINGLE_OR_DOUBLE: frozenset({BondType.SINGLE, BondType.DOUBLE}),
    BondType.SINGLE_OR_AROMATIC: frozenset({BondType.SINGLE, BondType.AROMATIC}),
    BondType.DOUBLE_OR_AROMATIC: frozenset({BondType.DOUBLE, BondType.AROMATIC}),
    BondType.ANY: frozenset(
        {BondType.SINGLE, BondType.DOUBLE, BondType.TRIPLE, BondType.AROMATIC}
    ),
}


@dataclass(slots=True)
class Bond(HasProperties):
    """Represents a chemical bond between two atoms.

    Attributes:
        from_atom: 0-based index of the first atom.
        to_atom: 0-based index of the second atom.
        bond_type: Bond type.
        properties: Open per-bond property map.
    """

    from_atom: int
    to_atom: int
    bond_type: BondType = BondType.SINGLE
    properties: PropertyMap[BondProperty] = field(
        default_factory=lambda: PropertyMap(BondProperty)
    )

    def other_atom(self, atom_idx: int) -> int:
        """Get the index of the atom on the other end of this bond.

        Raises:
            ValueError: If atom_idx is not part of this bond.
        """
        if atom_idx == self.from_atom:
            return self.to_atom
        if atom_idx == self.to_atom:
            return self.from_atom
        raise ValueError(f"Atom {atom_idx} not in bond {self.from_atom}-{self.to_atom}")

    def __contains__(self, atom_idx: int) -> bool:
        """Check if atom is part of this bond."""
        return atom_idx in (self.from_atom, self.to_atom)


@dataclass(slots=True)
class Atom(HasProperties):
    """Represents an atom in a molecule.

    Attributes:
        element: Shared element from the static element table.
        position: Cartesian coordinates.
        formal_charge: Formal charge.
        isotope: Mass number, or None for the most abundant isotope.
        properties: Open per-atom property map.
    """

    element: Element
    position: Point3d = Point3d(0.0, 0.0, 0.0)
    formal_charge: int = 0
    isotope: int | None = None
    properties: PropertyMap[AtomProperty] = field(
        default_factory=lambda: PropertyMap(AtomProperty)
    )

    @classmethod
    def from_symbol(cls, symbol: str) -> Atom:
        """Create an atom of the element with the given symbol.

        Raises:
            UnknownElementError: If the symbol is not a known element.
        """
        return cls(lookup_symbol(symbol))

    @classmethod
    def from_atomic_number(cls, atomic_number: int) -> Atom:
        """Create an atom of the element with the given atomic number.

        Raises:
            UnknownAtomicNumberError: If the number is not a known element.
        """
        return cls(lookup_atomic_number(atomic_number))

    @property
    def symbol(self) -> str:
        """Element symbol."""
        return self.element.symbol

    @property
    def atomic_number(self) -> int:
        """Atomic number of the element."""
        return self.element.atomic_number


@dataclass
class Molecule(HasProperties):
    """Represents a molecular structure.

    Atoms are identified by their position in `atoms`; bonds refer to them
    by that 0-based index.

    Attributes:
        atoms: List of atoms in the molecule.
        bonds: List of bonds in the molecule.
        properties: Per-molecule property map (name, comment, creation data).

    Example:
        >>> mol = Molecule()
        >>> c1 = mol.add_atom(Atom.from_symbol("C"))
        >>> o1 = mol.add_atom(Atom.from_symbol("O"))
        >>> mol.add_bond(c1, o1, BondType.DOUBLE)
        0
        >>> len(mol)
        2
    """

    atoms: list[Atom] = field(default_factory=list)
    bonds: list[Bond] = field(default_factory=list)
    properties: PropertyMap[MoleculeProperty] = field(
        default_factory=lambda: PropertyMap(MoleculeProperty)
    )

    @classmethod
    def from_graph(cls, atoms: list[Atom], bonds: list[Bond]) -> Molecule:
        """Create a molecule from pre-built atom and bond sequences.

        Bond indices are not validated against the atom list.
        """
        return cls(atoms=atoms, bonds=bonds)

    def __len__(self) -> int:
        """Return number of atoms."""
        return len(self.atoms)

    def __iter__(self) -> Iterator[Atom]:
        """Iterate over atoms."""
        return iter(self.atoms)

    def __getitem__(self, idx: int) -> Atom:
        """Get atom by index."""
        return self.atoms[idx]

    def add_atom(self, atom: Atom) -> int:
        """Append an atom and return its index."""
        self.atoms.append(atom)
        return len(self.atoms) - 1

    def add_bond(
        self,
        from_atom: int,
        to_atom: int,
        bond_type: BondType = BondType.SINGLE,
    ) -> int:
        """Add a bond between two atoms.

        Returns:
            Index of the newly added bond.

        Raises:
            IndexError: If atom indices are out of bounds.
        """
        for atom_idx in (from_atom, to_atom):
            if not 0 <= atom_idx < len(self.atoms):
                raise IndexError(f"Atom index out of bounds: {from_atom}, {to_atom}")

        self.bonds.append(Bond(from_atom, to_atom, bond_type))
        return len(self.bonds) - 1

    @property
    def num_atoms(self) -> int:
        """Number of atoms in the molecule."""
        return len(self.atoms)

    @property
    def num_bonds(self) -> int:
        """Number of bonds in the molecule."""
        return len(self.bonds)

    @property
    def name(self) -> str | None:
        """Molecule name, if set."""
        return self.properties.get_string(MoleculeProperty.NAME)
