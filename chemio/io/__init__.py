"""Structure file readers (MDL Molfile V2000/V3000 and PDB)."""

from chemio.io.format_mol import load_mol, read_mol
from chemio.io.format_pdb import load_pdb, read_pdb
from chemio.io.line_reader import LineReader

__all__ = ["read_mol", "load_mol", "read_pdb", "load_pdb", "LineReader"]
