from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

import numpy as np

from gradfit.core.errors import DatasetParseError

log = logging.getLogger("gradfit.data")


@dataclass(frozen=True, eq=False)
class Dataset:
    """
    Row-major float64 table read from a headerless delimited file.
    `values` is read-only; rows = examples (m), cols fixed by the first row.
    """

    values: np.ndarray  # (rows, cols)
    source: str = "<memory>"

    @property
    def rows(self) -> int:
        return self.values.shape[0]

    @property
    def cols(self) -> int:
        return self.values.shape[1]

    def column(self, j: int) -> np.ndarray:
        return self.values[:, j].copy()


def parse_rows(lines: Iterable[str], delimiter: str = ",", source: str = "<memory>") -> Dataset:
    """
    Parse delimited text lines into a Dataset.

    Blank lines are skipped. Every row must have as many fields as the first one.
    """
    vals: List[List[float]] = []
    n_cols = 0
    for lineno, record in enumerate(csv.reader(lines, delimiter=delimiter), start=1):
        if not record or all(not f.strip() for f in record):
            continue
        row: List[float] = []
        for field in record:
            try:
                row.append(float(field.strip()))
            except ValueError:
                raise DatasetParseError(
                    f"{source}:{lineno}: could not parse {field!r} as a float"
                ) from None
        if n_cols == 0:
            n_cols = len(row)
        elif len(row) != n_cols:
            raise DatasetParseError(
                f"{source}:{lineno}: expected {n_cols} fields (from first row), got {len(row)}"
            )
        vals.append(row)

    if not vals:
        raise DatasetParseError(f"{source}: no data rows")

    arr = np.array(vals, dtype=np.float64)
    arr.flags.writeable = False
    return Dataset(values=arr, source=source)


def load_dataset(path: Path | str, delimiter: str = ",") -> Dataset:
    """Read a headerless delimited file of floats. Missing files raise FileNotFoundError."""
    p = Path(path)
    with p.open(newline="") as f:
        ds = parse_rows(f, delimiter=delimiter, source=str(p))
    log.info(f"Loaded {ds.rows}x{ds.cols} dataset from {p}")
    return ds
