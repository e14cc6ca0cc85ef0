"""
CRIF file validation utilities for the SIMM calculator API.

DataPathValidator: Validates a CRIF file before calculation
validate_data_path: Convenience function for quick validation

Checks that the file exists, has a supported format and carries the
required CRIF columns. Only the header is read.
"""

from __future__ import annotations

from pathlib import Path

from simm_calc.api.errors import (
    create_file_not_found_error,
    create_load_error,
    create_missing_column_error,
    create_validation_error,
)
from simm_calc.api.models import APIError, ValidationRequest, ValidationResponse
from simm_calc.data.schemas import CRIF_REQUIRED_COLUMNS
from simm_calc.engine.loader import DataLoadError, create_loader

SUPPORTED_SUFFIXES = (".csv", ".json", ".parquet")


class DataPathValidator:
    """
    Validates a CRIF file for SIMM calculation.

    Usage:
        validator = DataPathValidator()
        response = validator.validate(ValidationRequest(crif_path="crif.csv"))
        if not response.valid:
            for error in response.errors:
                print(error)
    """

    def validate(self, request: ValidationRequest) -> ValidationResponse:
        """
        Validate a CRIF file for calculation readiness.

        Args:
            request: ValidationRequest with the file path

        Returns:
            ValidationResponse with validation results
        """
        path = request.path
        errors: list[APIError] = []

        if not path.exists():
            errors.append(create_file_not_found_error(str(path)))
            return ValidationResponse(valid=False, crif_path=str(path), errors=errors)

        if not path.is_file():
            errors.append(create_validation_error(f"CRIF path is not a file: {path}", path=str(path)))
            return ValidationResponse(valid=False, crif_path=str(path), errors=errors)

        if path.suffix.lower() not in SUPPORTED_SUFFIXES:
            errors.append(
                create_validation_error(
                    f"Unsupported CRIF file type: {path.suffix or '<none>'}",
                    path=str(path),
                )
            )
            return ValidationResponse(valid=False, crif_path=str(path), errors=errors)

        try:
            columns = set(create_loader(path).load().collect_schema().names())
        except DataLoadError as e:
            errors.append(create_load_error(str(e), source=str(path)))
            return ValidationResponse(valid=False, crif_path=str(path), errors=errors)

        columns_found = [c for c in CRIF_REQUIRED_COLUMNS if c in columns]
        columns_missing = [c for c in CRIF_REQUIRED_COLUMNS if c not in columns]
        errors.extend(create_missing_column_error(c, str(path)) for c in columns_missing)

        return ValidationResponse(
            valid=not errors,
            crif_path=str(path),
            columns_found=columns_found,
            columns_missing=columns_missing,
            errors=errors,
        )


# =============================================================================
# Convenience Functions
# =============================================================================


def validate_data_path(crif_path: str | Path) -> ValidationResponse:
    """
    Validate a CRIF file without creating a validator instance.

    Example:
        response = validate_data_path("crif.csv")
        if response.valid:
            print("Ready for calculation")
    """
    return DataPathValidator().validate(ValidationRequest(crif_path=crif_path))


def get_required_columns() -> list[str]:
    """Get the CRIF columns every input file must carry."""
    return list(CRIF_REQUIRED_COLUMNS)
