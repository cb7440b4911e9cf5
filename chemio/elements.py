"""
Chemical elements.

This module provides the static element table shared by all atoms. The table
is built once at import time; every atom refers to one of the `Element`
instances held here and never owns a copy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Final

from .exceptions import UnknownAtomicNumberError, UnknownElementError


@dataclass(frozen=True, slots=True)
class Element:
    """Immutable element data.

    Attributes:
        atomic_number: Atomic number (proton count).
        symbol: Element symbol (e.g., "C", "Cl").
        name: Full element name.
        most_common_isotope: Mass number of the most abundant isotope, or of
            the most stable one for elements without natural abundance.
    """

    atomic_number: int
    symbol: str
    name: str
    most_common_isotope: int

    # Class-level registry
    _by_symbol: ClassVar[dict[str, "Element"]] = {}
    _by_number: ClassVar[dict[int, "Element"]] = {}

    def __post_init__(self) -> None:
        Element._by_symbol[self.symbol] = self
        Element._by_number[self.atomic_number] = self

    @classmethod
    def from_symbol(cls, symbol: str) -> "Element | None":
        """Look up element by symbol (upper-case forms such as "CL" accepted)."""
        if symbol in cls._by_symbol:
            return cls._by_symbol[symbol]
        return cls._by_symbol.get(symbol.capitalize())

    @classmethod
    def from_atomic_number(cls, num: int) -> "Element | None":
        """Look up element by atomic number."""
        return cls._by_number.get(num)


_ELEMENTS_DATA: Final[list[tuple[int, str, str, int]]] = [
    # (atomic_number, symbol, name, most_common_isotope)
    (1, "H", "Hydrogen", 1),
    (2, "He", "Helium", 4),
    (3, "Li", "Lithium", 7),
    (4, "Be", "Beryllium", 9),
    (5, "B", "Boron", 11),
    (6, "C", "Carbon", 12),
    (7, "N", "Nitrogen", 14),
    (8, "O", "Oxygen", 16),
    (9, "F", "Fluorine", 19),
    (10, "Ne", "Neon", 20),
    (11, "Na", "Sodium", 23),
    (12, "Mg", "Magnesium", 24),
    (13, "Al", "Aluminum", 27),
    (14, "Si", "Silicon", 28),
    (15, "P", "Phosphorus", 31),
    (16, "S", "Sulfur", 32),
    (17, "Cl", "Chlorine", 35),
    (18, "Ar", "Argon", 40),
    (19, "K", "Potassium", 39),
    (20, "Ca", "Calcium", 40),
    (21, "Sc", "Scandium", 45),
    (22, "Ti", "Titanium", 48),
    (23, "V", "Vanadium", 51),
    (24, "Cr", "Chromium", 52),
    (25, "Mn", "Manganese", 55),
    (26, "Fe", "Iron", 56),
    (27, "Co", "Cobalt", 59),
    (28, "Ni", "Nickel", 58),
    (29, "Cu", "Copper", 63),
    (30, "Zn", "Zinc", 64),
    (31, "Ga", "Gallium", 69),
    (32, "Ge", "Germanium", 74),
    (33, "As", "Arsenic", 75),
    (34, "Se", "Selenium", 80),
    (35, "Br", "Bromine", 79),
    (36, "Kr", "Krypton", 84),
    (37, "Rb", "Rubidium", 85),
    (38, "Sr", "Strontium", 88),
    (39, "Y", "Yttrium", 89),
    (40, "Zr", "Zirconium", 90),
    (41, "Nb", "Niobium", 93),
    (42, "Mo", "Molybdenum", 98),
    (43, "Tc", "Technetium", 98),
    (44, "Ru", "Ruthenium", 102),
    (45, "Rh", "Rhodium", 103),
    (46, "Pd", "Palladium", 106),
    (47, "Ag", "Silver", 107),
    (48, "Cd", "Cadmium", 114),
    (49, "In", "Indium", 115),
    (50, "Sn", "Tin", 120),
    (51, "Sb", "Antimony", 121),
    (52, "Te", "Tellurium", 130),
    (53, "I", "Iodine", 127),
    (54, "Xe", "Xenon", 132),
    (55, "Cs", "Cesium", 133),
    (56, "Ba", "Barium", 138),
    (57, "La", "Lanthanum", 139),
    (58, "Ce", "Cerium", 140),
    (59, "Pr", "Praseodymium", 141),
    (60, "Nd", "Neodymium", 142),
    (61, "Pm", "Promethium", 145),
    (62, "Sm", "Samarium", 152),
    (63, "Eu", "Europium", 153),
    (64, "Gd", "Gadolinium", 158),
    (65, "Tb", "Terbium", 159),
    (66, "Dy", "Dysprosium", 164),
    (67, "Ho", "Holmium", 165),
    (68, "Er", "Erbium", 166),
    (69, "Tm", "Thulium", 169),
    (70, "Yb", "Ytterbium", 174),
    (71, "Lu", "Lutetium", 175),
    (72, "Hf", "Hafnium", 180),
    (73, "Ta", "Tantalum", 181),
    (74, "W", "Tungsten", 184),
    (75, "Re", "Rhenium", 187),
    (76, "Os", "Osmium", 192),
    (77, "Ir", "Iridium", 193),
    (78, "Pt", "Platinum", 195),
    (79, "Au", "Gold", 197),
    (80, "Hg", "Mercury", 202),
    (81, "Tl", "Thallium", 205),
    (82, "Pb", "Lead", 208),
    (83, "Bi", "Bismuth", 209),
    (84, "Po", "Polonium", 209),
    (85, "At", "Astatine", 210),
    (86, "Rn", "Radon", 222),
    (87, "Fr", "Francium", 223),
    (88, "Ra", "Radium", 226),
    (89, "Ac", "Actinium", 227),
    (90, "Th", "Thorium", 232),
    (91, "Pa", "Protactinium", 231),
    (92, "U", "Uranium", 238),
    (93, "Np", "Neptunium", 237),
    (94, "Pu", "Plutonium", 244),
    (95, "Am", "Americium", 243),
    (96, "Cm", "Curium", 247),
    (97, "Bk", "Berkelium", 247),
    (98, "Cf", "Californium", 251),
    (99, "Es", "Einsteinium", 252),
    (100, "Fm", "Fermium", 257),
    (101, "Md", "Mendelevium", 258),
    (102, "No", "Nobelium", 259),
    (103, "Lr", "Lawrencium", 266),
    (104, "Rf", "Rutherfordium", 267),
    (105, "Db", "Dubnium", 268),
    (106, "Sg", "Seaborgium", 269),
    (107, "Bh", "Bohrium", 270),
    (108, "Hs", "Hassium", 269),
    (109, "Mt", "Meitnerium", 278),
    (110, "Ds", "Darmstadtium", 281),
    (111, "Rg", "Roentgenium", 282),
    (112, "Cn", "Copernicium", 285),
    (113, "Nh", "Nihonium", 286),
    (114, "Fl", "Flerovium", 289),
    (115, "Mc", "Moscovium", 290),
    (116, "Lv", "Livermorium", 293),
    (117, "Ts", "Tennessine", 294),
    (118, "Og", "Oganesson", 294),
]

# Initialize elements
ELEMENTS: Final[tuple[Element, ...]] = tuple(
    Element(num, sym, name, isotope)
    for num, sym, name, isotope in _ELEMENTS_DATA
)


def lookup_symbol(symbol: str) -> Element:
    """Get the shared element for a symbol.

    Args:
        symbol: Element symbol (e.g., "C", "Cl", "CL").

    Returns:
        The element from the static table.

    Raises:
        UnknownElementError: If the symbol is not in the table.
    """
    elem = Element.from_symbol(symbol)
    if elem is None:
        raise UnknownElementError(symbol)
    return elem


def lookup_atomic_number(atomic_num: int) -> Element:
    """Get the shared element for an atomic number.

    Raises:
        UnknownAtomicNumberError: If the number is not in the table.
    """
    elem = Element.from_atomic_number(atomic_num)
    if elem is None:
        raise UnknownAtomicNumberError(atomic_num)
    return elem


def get_atomic_number(symbol: str) -> int:
    """Get atomic number for an element symbol, or 0 if not found."""
    elem = Element.from_symbol(symbol)
    return elem.atomic_number if elem else 0


def get_most_common_isotope(atomic_num: int) -> int | None:
    """Get the most common isotope mass number, or None if unknown."""
    elem = Element.from_atomic_number(atomic_num)
    return elem.most_common_isotope if elem else None
