"""Tests for the PDB atom record reader."""

import io

import pytest
from rdkit import Chem

from chemio import load_pdb, read_pdb
from chemio.exceptions import (
    InvalidValueError,
    LineParseError,
    ParseNumericError,
    UnexpectedTagError,
    UnknownElementError,
)
from chemio.io.format_pdb import parse_pdb_atom, parse_pdb_charge
from chemio.types import Point3d

from conftest import PDB_ATOM, PDB_ATOM_ANION, PDB_ATOM_CATION, as_stream, molblock


class TestAtomRecord:
    """Test ATOM/HETATM record decoding."""

    def test_parse_atom(self):
        """Coordinates and element columns."""
        atom = parse_pdb_atom(PDB_ATOM)
        assert atom.symbol == "C"
        assert atom.position == Point3d(13.0, 21.098, 20.348)
        assert atom.formal_charge == 0
        assert atom.isotope is None

    def test_cation(self):
        """'1+' gives a positive charge."""
        atom = parse_pdb_atom(PDB_ATOM_CATION)
        assert atom.symbol == "N"
        assert atom.formal_charge == 1

    def test_anion(self):
        """'1-' gives a negative charge."""
        atom = parse_pdb_atom(PDB_ATOM_ANION)
        assert atom.symbol == "O"
        assert atom.formal_charge == -1

    def test_charges_match_rdkit(self):
        """Charge columns agree with RDKit."""
        lines = (PDB_ATOM, PDB_ATOM_CATION, PDB_ATOM_ANION)
        ref = Chem.MolFromPDBBlock(molblock(*lines, "END"), sanitize=False, removeHs=False)
        expected = [a.GetFormalCharge() for a in ref.GetAtoms()]
        assert [parse_pdb_atom(line).formal_charge for line in lines] == expected

    def test_short_record_padded(self):
        """Records missing the charge columns are neutral."""
        atom = parse_pdb_atom(PDB_ATOM.rstrip()[:78])
        assert atom.formal_charge == 0
        assert atom.symbol == "C"

    @pytest.mark.parametrize("field,charge", [("  ", 0), ("2+", 2), ("3-", -3)])
    def test_parse_charge(self, field, charge):
        """Charge field is digit then sign."""
        assert parse_pdb_charge(field) == charge

    def test_bad_charge_sign(self):
        """Sign column must be blank, '+' or '-'."""
        with pytest.raises(InvalidValueError) as exc_info:
            parse_pdb_atom(PDB_ATOM_CATION[:-1] + "x")
        assert exc_info.value.value == "1x"

    def test_bad_charge_digit(self):
        """Charge magnitude must be a digit."""
        with pytest.raises(ParseNumericError):
            parse_pdb_charge("x+")

    def test_bad_coordinate(self):
        """Coordinates must be numeric."""
        line = PDB_ATOM[:30] + "   bad  " + PDB_ATOM[38:]
        with pytest.raises(ParseNumericError) as exc_info:
            parse_pdb_atom(line)
        assert exc_info.value.name == "x-coordinate"

    def test_unknown_element(self):
        """Element column must name a known element."""
        line = PDB_ATOM[:76] + " Q" + PDB_ATOM[78:]
        with pytest.raises(UnknownElementError):
            parse_pdb_atom(line)


class TestReadPdb:
    """Test reading whole PDB files."""

    def test_read(self, pdb_text):
        """ATOM and HETATM records become atoms; others are skipped."""
        mol = read_pdb(as_stream(pdb_text))
        assert mol.num_atoms == 4
        assert mol.num_bonds == 0
        assert [a.symbol for a in mol.atoms] == ["C", "N", "O", "Cl"]
        assert [a.formal_charge for a in mol.atoms] == [0, 1, -1, -1]
        assert mol.atoms[3].position == Point3d(10.0, 11.0, 12.0)

    def test_no_name(self, pdb_text):
        """PDB molecules carry no name property."""
        assert read_pdb(as_stream(pdb_text)).name is None

    def test_text_stream(self, pdb_text):
        """Text streams are accepted."""
        assert read_pdb(io.StringIO(pdb_text)).num_atoms == 4

    def test_empty(self):
        """Empty input gives an empty molecule."""
        assert read_pdb(as_stream("")).num_atoms == 0

    def test_unknown_record(self):
        """Unrecognized record types fail with their line."""
        text = molblock(PDB_ATOM, "REMARK   1 generated", PDB_ATOM_CATION)
        with pytest.raises(LineParseError) as exc_info:
            read_pdb(as_stream(text))
        assert exc_info.value.line == 2
        assert isinstance(exc_info.value.source, UnexpectedTagError)
        assert exc_info.value.source.value == "REMARK"

    def test_bad_record_line(self):
        """Atom decoding errors carry the physical line number."""
        text = molblock(PDB_ATOM, "TER", PDB_ATOM_CATION[:-1] + "x")
        with pytest.raises(LineParseError) as exc_info:
            read_pdb(as_stream(text))
        assert exc_info.value.line == 3
        assert isinstance(exc_info.value.source, InvalidValueError)

    def test_load_pdb(self, pdb_text, tmp_path):
        """PDB files are loaded from disk."""
        path = tmp_path / "ligand.pdb"
        path.write_text(pdb_text)
        assert load_pdb(path).num_atoms == 4
