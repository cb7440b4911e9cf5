"""Click CLI entry point for chemio."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from chemio.exceptions import ChemError
from chemio.io import load_mol, load_pdb
from chemio.types import Molecule

PDB_SUFFIXES = (".pdb", ".ent")


def _load(path: Path, fmt: str) -> Molecule:
    if fmt == "auto":
        fmt = "pdb" if path.suffix.lower() in PDB_SUFFIXES else "mol"
    if fmt == "pdb":
        return load_pdb(path)
    return load_mol(path)


@click.command()
@click.argument(
    "path", metavar="INPUT",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--format", "fmt", default="auto", show_default=True,
    type=click.Choice(["auto", "mol", "pdb"]),
    help="Input format; 'auto' picks PDB for .pdb/.ent files, Molfile otherwise.",
)
@click.option("--atoms", "show_atoms", is_flag=True, help="List every atom.")
@click.option("--verbose", is_flag=True, help="Print debug messages.")
def main(path: Path, fmt: str, show_atoms: bool, verbose: bool) -> None:
    """Read a structure file and print a summary of its molecule."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        mol = _load(path, fmt)
    except ChemError as exc:
        raise click.ClickException(f"{path}: {exc}") from exc

    name = (mol.name or "").strip() or path.name
    click.echo(f"{name}: {mol.num_atoms} atoms, {mol.num_bonds} bonds")

    if show_atoms:
        for idx, atom in enumerate(mol.atoms):
            x, y, z = atom.position
            isotope = "" if atom.isotope is None else f" isotope={atom.isotope}"
            click.echo(
                f"{idx:5d} {atom.symbol:<2} {x:10.4f} {y:10.4f} {z:10.4f} "
                f"charge={atom.formal_charge:+d}{isotope}"
            )


if __name__ == "__main__":
    main()
