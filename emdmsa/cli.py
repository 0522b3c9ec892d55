"""Command-line entry point: align the sequences of a FASTA file."""

from __future__ import annotations

import argparse
import sys

from emdmsa.aligner import align_from_tree
from emdmsa.distance import compute_distance_matrix
from emdmsa.fasta import read_fasta_with_names, write_fasta
from emdmsa.profile import single_profile
from emdmsa.refine import iterative_refinement
from emdmsa.tree import build_guide_tree


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="emdmsa", description="Multiple sequence alignment guided by EMD distances."
    )
    parser.add_argument("input", nargs="?", default="input.fasta", help="FASTA input file")
    parser.add_argument(
        "-o", "--output", default="final_msa.fasta", help="where to write the alignment"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    try:
        seqs, names = read_fasta_with_names(args.input)
    except OSError:
        seqs, names = [], []
    if not seqs:
        print(" FASTA file empty or not found.", file=sys.stderr)
        return 1

    print(f"Input read. Number of sequences: {len(seqs)}")
    distances = compute_distance_matrix(seqs, names)
    print("Distance matrix computed.")

    profiles = [single_profile(s) for s in seqs]
    tree, _ = build_guide_tree(distances)
    print("Guide tree built.")

    initial = align_from_tree(tree, profiles)
    print("Initial progressive alignment done.")

    final = iterative_refinement(seqs, names, initial, 3, True)

    print(f"Final alignment has {len(final.aligned)} sequences.")
    print(f"First aligned sequence length: {len(final.aligned[0]) if final.aligned else 0}")
    print("\n--- FINAL MULTIPLE ALIGNMENT ---")
    for row in final.aligned:
        print(row)

    write_fasta(final.aligned, args.output)
    print(f"\nOutput written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())