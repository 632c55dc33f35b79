"""
Tests for PyLSoE exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyLSoEError)
    - Builtin compatibility (IndexError, FileNotFoundError, ValueError)
    - Diagnostic attributes and their defaults
"""

import pytest

from pylsoe.core.exceptions import (
    DimensionError,
    InconsistentSystemError,
    IndexOutOfRangeError,
    MalformedDataError,
    MatrixFileNotFoundError,
    MissingDirectoryError,
    NumericalError,
    PersistenceError,
    PivotInvariantError,
    PyLSoEError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyLSoEError."""

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_index_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise IndexOutOfRangeError("row 3", axis="row", index=3, size=2)

    def test_index_error_is_builtin_index_error(self):
        with pytest.raises(IndexError):
            raise IndexOutOfRangeError("row 3", axis="row", index=3, size=2)

    def test_pivot_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise PivotInvariantError("zero pivot", row=0, column=0)

    def test_singular_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_inconsistent_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise InconsistentSystemError("no solution")

    @pytest.mark.parametrize("cls", [
        MatrixFileNotFoundError, MissingDirectoryError, MalformedDataError,
    ])
    def test_persistence_errors(self, cls):
        with pytest.raises(PersistenceError):
            raise cls("io failed")
        with pytest.raises(PyLSoEError):
            raise cls("io failed")

    def test_file_not_found_is_builtin(self):
        with pytest.raises(FileNotFoundError):
            raise MatrixFileNotFoundError("missing", path="a.json")

    def test_malformed_is_value_error(self):
        with pytest.raises(ValueError):
            raise MalformedDataError("bad json")

    def test_persistence_is_not_validation(self):
        assert not isinstance(MalformedDataError("x"), ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:

    def test_index_out_of_range(self):
        err = IndexOutOfRangeError("column 7 out of range", axis="column", index=7, size=3)
        assert str(err) == "column 7 out of range"
        assert err.axis == "column"
        assert err.index == 7
        assert err.size == 3

    def test_pivot_invariant(self):
        err = PivotInvariantError("zero pivot", row=1, column=2)
        assert err.row == 1
        assert err.column == 2

    def test_singular_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.rank is None
        assert err.expected_rank is None

    def test_singular_attributes(self):
        err = SingularMatrixError("rank deficient", rank=2, expected_rank=3)
        assert err.rank == 2
        assert err.expected_rank == 3

    def test_inconsistent_row(self):
        assert InconsistentSystemError("no solution", row=2).row == 2
        assert InconsistentSystemError("no solution").row is None

    def test_file_not_found_message_and_path(self):
        err = MatrixFileNotFoundError("matrix file not found: m.json", path="m.json")
        assert str(err) == "matrix file not found: m.json"
        assert err.path == "m.json"

    def test_persistence_path_default(self):
        assert MalformedDataError("bad").path is None
