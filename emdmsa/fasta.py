"""Reading FASTA input and writing alignment and distance outputs."""

from __future__ import annotations

import os
from collections.abc import Sequence

_BOM = "\ufeff"


def read_fasta_with_names(path: str | os.PathLike) -> tuple[list[str], list[str]]:
    """Read a FASTA file, returning ``(sequences, names)`` in file order.

    Whitespace inside sequence lines is dropped; records whose sequence is
    empty are skipped.
    """
    sequences: list[str] = []
    names: list[str] = []
    current_name = ""
    current_seq: list[str] = []

    with open(path, encoding="utf-8", errors="replace") as handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if not line:
                continue
            if line.startswith(_BOM):
                line = line[len(_BOM):]
            if line.startswith(">"):
                if current_seq:
                    sequences.append("".join(current_seq))
                    names.append(current_name)
                    current_seq = []
                current_name = line[1:]
            else:
                current_seq.extend(c for c in line if not c.isspace())

    if current_seq:
        sequences.append("".join(current_seq))
        names.append(current_name)

    return sequences, names


def write_fasta(aligned: Sequence[str], path: str | os.PathLike) -> None:
    """Write aligned rows as FASTA records named ``Sequence_1``, ``Sequence_2``..."""
    with open(path, "w", encoding="utf-8") as out:
        for number, row in enumerate(aligned, start=1):
            out.write(f">Sequence_{number}\n{row}\n")


def write_csv(
    matrix: Sequence[Sequence[float]],
    names: Sequence[str],
    path: str | os.PathLike,
) -> None:
    """Write the upper triangle of a distance matrix as ``Seq1,Seq2,EMD`` rows."""
    with open(path, "w", encoding="utf-8") as out:
        out.write("Seq1,Seq2,EMD\n")
        for i, row in enumerate(matrix):
            for j in range(i + 1, len(matrix)):
                out.write(f"{names[i]},{names[j]},{row[j]:g}\n")