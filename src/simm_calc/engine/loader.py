"""
CRIF loader implementations for the SIMM calculator.

Provides concrete implementations of LoaderProtocol for loading CRIF
sensitivity files.

Classes:
    CSVLoader: Load CRIF from CSV files
    JSONLoader: Load CRIF from JSON record arrays
    ParquetLoader: Load CRIF from Parquet files

Usage:
    from simm_calc.engine.loader import CSVLoader

    loader = CSVLoader("/path/to/crif.csv")
    crif = loader.load()

Every loader returns a LazyFrame with CRIF_SCHEMA column names. CRIF
CamelCase headers (RiskType, AmountUSD, ...) are renamed, remaining
headers are normalised to snake case, and columns are cast to CRIF_SCHEMA
types.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import polars as pl

from simm_calc.data.schemas import CRIF_COLUMN_MAPPING, CRIF_SCHEMA


def enforce_schema(
    lf: pl.LazyFrame,
    schema: dict[str, pl.DataType],
    strict: bool = False,
) -> pl.LazyFrame:
    """
    Enforce a schema on a LazyFrame by casting columns to expected types.

    Columns absent from the frame are left absent; the grouper decides
    which of them are required.

    Args:
        lf: LazyFrame to enforce schema on
        schema: Dictionary mapping column names to expected Polars types
        strict: If True, raise errors on invalid casts. If False (default),
                invalid values become null.

    Returns:
        LazyFrame with columns cast to expected types
    """
    current_schema = lf.collect_schema()

    cast_exprs = [
        pl.col(col_name).cast(expected_type, strict=strict).alias(col_name)
        for col_name, expected_type in schema.items()
        if col_name in current_schema and current_schema[col_name] != expected_type
    ]
    if not cast_exprs:
        return lf
    return lf.with_columns(cast_exprs)


def normalize_columns(lf: pl.LazyFrame) -> pl.LazyFrame:
    """
    Rename CRIF headers to the internal snake case names.

    Known CRIF headers are mapped through CRIF_COLUMN_MAPPING; any other
    header is lower cased with spaces replaced by underscores.
    """
    return lf.rename(
        lambda col: CRIF_COLUMN_MAPPING.get(col.strip(), col.strip().lower().replace(" ", "_"))
    )


class DataLoadError(Exception):
    """Exception raised when CRIF data cannot be loaded."""

    def __init__(self, message: str, source: str | None = None) -> None:
        """
        Initialize DataLoadError.

        Args:
            message: Error message
            source: Source file that caused the error
        """
        self.source = source
        super().__init__(f"{message}" + (f" (source: {source})" if source else ""))


class _FileLoader(ABC):
    """Shared path handling and schema enforcement for file based loaders."""

    def __init__(self, path: str | Path, enforce_schemas: bool = True) -> None:
        self.path = Path(path)
        self.enforce_schemas = enforce_schemas

    def load(self) -> pl.LazyFrame:
        """
        Load CRIF records as a LazyFrame.

        Raises:
            DataLoadError: If the file is missing or cannot be parsed
        """
        if not self.path.exists():
            raise DataLoadError(f"File not found: {self.path}", source=str(self.path))

        try:
            lf = normalize_columns(self._scan())
            if self.enforce_schemas:
                lf = enforce_schema(lf, CRIF_SCHEMA, strict=False)
            # Resolve the schema now so parse errors surface here
            lf.collect_schema()
        except (pl.exceptions.PolarsError, OSError, ValueError) as e:
            raise DataLoadError(f"Failed to load CRIF: {e}", source=str(self.path)) from e
        return lf

    @abstractmethod
    def _scan(self) -> pl.LazyFrame:
        """Lazily read the file with its original headers."""


class CSVLoader(_FileLoader):
    """
    Load CRIF from a CSV file.

    All columns are read as text and cast afterwards, so bucket labels
    such as "1" and "Residual" survive unchanged.

    Attributes:
        path: CSV file path
        separator: Field separator (default ",")
        enforce_schemas: Whether to cast columns to CRIF_SCHEMA types
    """

    def __init__(
        self,
        path: str | Path,
        separator: str = ",",
        enforce_schemas: bool = True,
    ) -> None:
        super().__init__(path, enforce_schemas)
        self.separator = separator

    def _scan(self) -> pl.LazyFrame:
        return pl.scan_csv(self.path, separator=self.separator, infer_schema=False)


class JSONLoader(_FileLoader):
    """Load CRIF from a JSON array of records."""

    def _scan(self) -> pl.LazyFrame:
        return pl.read_json(self.path).lazy()


class ParquetLoader(_FileLoader):
    """Load CRIF from a Parquet file."""

    def _scan(self) -> pl.LazyFrame:
        return pl.scan_parquet(self.path)


def create_loader(path: str | Path) -> _FileLoader:
    """
    Create a loader for a CRIF file based on its extension.

    Raises:
        DataLoadError: If the extension is not .csv, .json or .parquet
    """
    suffix = Path(path).suffix.lower()
    if suffix == ".csv":
        return CSVLoader(path)
    if suffix == ".json":
        return JSONLoader(path)
    if suffix == ".parquet":
        return ParquetLoader(path)
    raise DataLoadError(f"Unsupported CRIF file type: {suffix or '<none>'}", source=str(path))
