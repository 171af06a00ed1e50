import numpy as np
import pytest

from dutils.cvtypes import type_name, vectorize


@pytest.mark.parametrize(
    "dtype,name",
    [
        (np.uint8, "CV_8U"),
        (np.int8, "CV_8S"),
        (np.uint16, "CV_16U"),
        (np.int16, "CV_16S"),
        (np.int32, "CV_32S"),
        (np.float32, "CV_32F"),
        (np.float64, "CV_64F"),
    ],
)
def test_type_name(dtype, name):
    assert type_name(np.zeros((2, 2), dtype=dtype)) == name


def test_type_name_unknown_and_multichannel():
    assert type_name(np.zeros((2, 2), dtype=np.int64)) == ""
    assert type_name(np.zeros((2, 2, 3), dtype=np.uint8)) == ""


def test_vectorize_row_major():
    m = np.array([[1, 2, 3], [4, 5, 6]], dtype=np.int16)
    assert vectorize(m).tolist() == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]


def test_vectorize_column_and_row_vectors_agree():
    col = np.array([[7], [8], [9]], dtype=np.float32)
    row = np.array([[7, 8, 9]], dtype=np.float32)
    assert vectorize(col).tolist() == vectorize(row).tolist() == [7.0, 8.0, 9.0]


def test_vectorize_empty():
    assert vectorize(np.zeros((0, 3), dtype=np.float64)).size == 0


def test_vectorize_unsupported_type():
    with pytest.raises(TypeError):
        vectorize(np.zeros((2, 2), dtype=np.complex128))