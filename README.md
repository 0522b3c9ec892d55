# emdmsa

Progressive multiple sequence alignment for protein sequences. Columns are
compared as residue distributions, using an earth mover's style distance whose
ground cost comes from a log-odds substitution matrix over the 20 amino acids
and the gap symbol.

The workflow:

1. Read sequences from a FASTA file.
2. Compute a pairwise distance matrix (mean per-column EMD over the shared
   positions) and write it to `emd_distance_matrix.csv`.
3. Build a guide tree by average-linkage clustering.
4. Align profiles progressively along the tree, using affine gap penalties that
   depend on column entropy and alignment length.
5. Refine the result: realign each sequence against an alignment of the
   others and keep the candidate whenever the column score rises or more than
   70% of the original strongly conserved columns are kept. Alignments that
   are long or poorly conserved are left unchanged.
6. Print the final alignment and write it to a FASTA file.

## Installation

```
pip install .
```

No dependencies beyond the Python standard library (Python 3.10 or newer).

## Command line

```
emdmsa [input] [-o OUTPUT]
```

- `input` — FASTA file to align; defaults to `input.fasta`.
- `-o`, `--output` — where to write the alignment; defaults to
  `final_msa.fasta`.

The command prints its progress and the final alignment, writes the aligned
rows as records named `Sequence_1`, `Sequence_2`, … and writes the distance
matrix to `emd_distance_matrix.csv` in the current directory (this file is
rewritten during refinement as well). It exits with status 1 when the input
is missing or holds no sequences.

## Library use

```python
from emdmsa.fasta import read_fasta_with_names, write_fasta
from emdmsa.distance import compute_distance_matrix
from emdmsa.tree import build_guide_tree, format_ascii_tree
from emdmsa.profile import single_profile
from emdmsa.aligner import align_from_tree
from emdmsa.refine import iterative_refinement
from emdmsa.scoring import compute_cs_score, compute_sps_score

seqs, names = read_fasta_with_names("input.fasta")
distances = compute_distance_matrix(seqs, names, None)  # None: no CSV written
tree, merge_distances = build_guide_tree(distances)
print(format_ascii_tree(tree, names, merge_distances))

profiles = [single_profile(s) for s in seqs]
initial = align_from_tree(tree, profiles)
final = iterative_refinement(seqs, names, initial, 3, False)

for row in final.aligned:
    print(row)
print("CS:", compute_cs_score(final.aligned))
print("SPS:", compute_sps_score(final.aligned, -3.0, True, False))
write_fasta(final.aligned, "final_msa.fasta")
```

Note that `iterative_refinement` computes distance matrices with the default
CSV path, so it writes `emd_distance_matrix.csv` in the current directory.

Other building blocks:

- `emdmsa.emd.calculate_emd(dist1, dist2)` compares two 21-element residue
  distributions; it raises `ValueError` for other sizes and returns
  `MISSING_DISTANCE` when either sums to zero.
- `emdmsa.blosum.log_odds_matrix()` returns the 21×21 ground-cost matrix,
  indexed in the order of `emdmsa.blosum.AA`.
- `emdmsa.profile` holds the `Profile` dataclass, `compute_distributions`,
  `compute_gap_vectors`, `calc_entropy`, `pick_consensus` and
  `pick_strong_consensus`.
- `emdmsa.aligner.align` and `emdmsa.aligner.combine` align and merge two
  profiles directly.
- `emdmsa.scoring.find_strong_columns` lists near-conserved columns.
- `emdmsa.fasta.write_csv` writes the upper triangle of a distance matrix.

## Limitations

The number of refinement iterations and the gap-penalty parameters are fixed
on the command line (three iterations, the default penalties); use the library
functions to change them. Output records are renamed `Sequence_N` rather than
keeping the input names.