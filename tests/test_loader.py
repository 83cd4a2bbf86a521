from pathlib import Path

import numpy as np
import pytest

from gradfit.core.errors import DatasetParseError, DimensionMismatch
from gradfit.data.design import add_bias, build_design_matrix
from gradfit.data.loader import load_dataset, parse_rows
from gradfit.data.toy import make_linear_regression, write_table


def test_load_roundtrip(tmp_path: Path):
    table, _, _ = make_linear_regression(n=12, d=2, seed=0)
    p = tmp_path / "data.txt"
    write_table(p, table)
    ds = load_dataset(p)
    assert (ds.rows, ds.cols) == (12, 3)
    assert np.allclose(ds.values, table)
    assert ds.source == str(p)


def test_parse_rows_skips_blank_lines_and_strips():
    ds = parse_rows(["6.1101, 17.592\n", "\n", "5.5277,9.1302\n", "   \n"])
    assert ds.values.tolist() == [[6.1101, 17.592], [5.5277, 9.1302]]
    assert ds.column(1).tolist() == [17.592, 9.1302]


def test_values_read_only():
    ds = parse_rows(["1,2", "3,4"])
    with pytest.raises(ValueError):
        ds.values[0, 0] = 10.0


def test_other_delimiter():
    ds = parse_rows(["1;2;3", "4;5;6"], delimiter=";")
    assert ds.cols == 3


def test_ragged_row_rejected():
    with pytest.raises(DatasetParseError, match="expected 2 fields"):
        parse_rows(["1,2", "3,4", "5,6,7"])
    with pytest.raises(DatasetParseError):
        parse_rows(["1,2", "3"])


def test_non_numeric_field_rejected():
    with pytest.raises(DatasetParseError, match=r"data\.txt:2: could not parse"):
        parse_rows(["1,2", "3,abc"], source="data.txt")


def test_header_row_rejected():
    with pytest.raises(DatasetParseError):
        parse_rows(["population,profit", "1,2"])


def test_empty_rejected():
    with pytest.raises(DatasetParseError):
        parse_rows(["", "  "])


def test_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_dataset(tmp_path / "nope.txt")


def test_design_matrix_bias_first():
    ds = parse_rows(["1,2", "2,4", "3,6"])
    X, y = build_design_matrix(ds)
    assert np.array_equal(np.asarray(X), [[1, 1], [1, 2], [1, 3]])
    assert y.tolist() == [2.0, 4.0, 6.0]


def test_design_matrix_label_column():
    ds = parse_rows(["9,1,2", "8,3,4"])
    X, y = build_design_matrix(ds, label_column=0)
    assert np.array_equal(np.asarray(X), [[1, 1, 2], [1, 3, 4]])
    assert y.tolist() == [9.0, 8.0]
    with pytest.raises(DimensionMismatch, match="out of range"):
        build_design_matrix(ds, label_column=3)


def test_design_matrix_needs_two_columns():
    with pytest.raises(DimensionMismatch):
        build_design_matrix(parse_rows(["1", "2"]))


def test_add_bias_1d():
    assert add_bias([2.0, 3.0]).tolist() == [[1.0, 2.0], [1.0, 3.0]]
