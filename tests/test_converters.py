"""
Tests for converting tables to and from host representations.
"""
import json
import pandas as pd
import pyarrow as pa
import pytest

from rframe import (
    create_df, to_arrow_table, from_arrow_table, to_pandas,
    Table, Column, TableKind, NA_INTEGER, TableConstructionError,
)
from rframe.converters import METADATA_KEY


class TestArrowConversion:
    """Tests for the pyarrow conversion."""

    def test_schema(self, seeded_source):
        """Test column order, types and attribute metadata."""
        arrow_table = to_arrow_table(create_df(seeded_source))

        assert arrow_table.column_names == ["a", "b", "c"]
        assert arrow_table.num_rows == 3
        assert arrow_table.schema.field("a").type == pa.float64()
        assert arrow_table.schema.field("b").type == pa.string()
        assert arrow_table.schema.field("c").type == pa.float64()
        assert arrow_table.column("b").to_pylist() == ["alpha", "beta", "gamma"]

        attrs = json.loads(arrow_table.schema.metadata[METADATA_KEY])
        assert attrs == {"class": "data.frame", "row.names": [None, -3]}

    def test_restores_table(self, seeded_source):
        """Test that converting back yields an equal table."""
        table = create_df(seeded_source)
        restored = from_arrow_table(table.to_arrow())

        assert restored == table
        assert restored.row_index.as_tuple() == (NA_INTEGER, -3)
        assert restored.kind is TableKind.DATA_FRAME

    def test_plain_arrow_table(self):
        """Test an Arrow table without rframe metadata."""
        arrow_table = pa.table({"n": pa.array([1, 2], type=pa.int32()), "s": ["u", "v"]})
        table = from_arrow_table(arrow_table)

        assert table.column_names == ["n", "s"]
        assert table["n"].to_list() == [1.0, 2.0]
        assert table.row_index == (NA_INTEGER, -2)

    def test_unsupported_type(self):
        """Test that unsupported Arrow types fail."""
        arrow_table = pa.table({"flag": [True, False]})
        with pytest.raises(TableConstructionError):
            from_arrow_table(arrow_table)

    def test_nulls_rejected(self):
        """Test that missing values fail."""
        arrow_table = pa.table({"x": pa.array([1.0, None])})
        with pytest.raises(TableConstructionError):
            from_arrow_table(arrow_table)

    def test_row_names_not_a_pair(self):
        """Test that malformed row.names metadata is a construction error."""
        for row_names in (5, "NA", [None, -3, 0], [None, 2 ** 40]):
            metadata = {METADATA_KEY: json.dumps({"class": "data.frame", "row.names": row_names}).encode()}
            arrow_table = pa.table({"a": [1.0]}).replace_schema_metadata(metadata)
            with pytest.raises(TableConstructionError) as exc_info:
                from_arrow_table(arrow_table)
            assert "row.names" in str(exc_info.value)

    def test_integer_too_large_for_float64(self):
        """Test that integers beyond float64 precision are a construction error."""
        arrow_table = pa.table({"big": pa.array([2 ** 53 + 1], type=pa.int64())})
        with pytest.raises(TableConstructionError) as exc_info:
            from_arrow_table(arrow_table)
        assert "big" in str(exc_info.value)

    def test_not_an_arrow_table(self):
        """Test that other inputs are rejected."""
        with pytest.raises(TypeError):
            from_arrow_table({"a": [1.0]})


class TestPandasConversion:
    """Tests for the pandas conversion."""

    def test_dataframe(self, seeded_source):
        """Test values, index and attributes of the DataFrame."""
        table = create_df(seeded_source)
        df = to_pandas(table)

        assert list(df.columns) == ["a", "b", "c"]
        assert df.shape == (3, 3)
        assert isinstance(df.index, pd.RangeIndex)
        assert df["a"].tolist() == [1.0, 2.0, 4.0]
        assert df["b"].tolist() == ["alpha", "beta", "gamma"]
        assert df["c"].tolist() == table["c"].to_list()
        assert df["a"].dtype == "float64"
        assert df.attrs["class"] == "data.frame"
        assert df.attrs["row.names"] == [None, -3]

    def test_dataframe_is_a_copy(self, seeded_source):
        """Test that editing the DataFrame leaves the table untouched."""
        table = create_df(seeded_source)
        df = table.to_pandas()
        df.loc[0, "a"] = 100.0
        assert table["a"].to_list() == [1.0, 2.0, 4.0]

    def test_empty_table(self):
        """Test converting a table without columns."""
        df = to_pandas(Table([]))
        assert df.shape == (0, 0)
        assert df.attrs["row.names"] == [None, 0]
