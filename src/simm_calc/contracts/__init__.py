"""
Contracts module for the SIMM calculator.

Provides interfaces, data transfer objects, and validation utilities
for the SIMM calculation pipeline. This module enables:
- Isolated unit testing of each component
- Swapping SIMM calibrations behind one provider interface
- Clear data flow boundaries

Submodules:
- bundles: Data transfer dataclasses for pipeline stages
- config: CalculationConfig
- errors: CalculationError and the SimmError exception hierarchy
- protocols: Protocol definitions for component interfaces
- validation: Schema validation utilities
"""

# Configuration contracts
from simm_calc.contracts.config import CalculationConfig

# Error handling contracts
from simm_calc.contracts.errors import (
    ERROR_INVALID_BUCKET,
    ERROR_INVALID_CONFIG,
    ERROR_INVALID_TENOR,
    ERROR_INVALID_VALUE,
    ERROR_MISSING_BUCKET,
    ERROR_MISSING_FIELD,
    ERROR_MISSING_PARAMETER,
    ERROR_TYPE_MISMATCH,
    ERROR_UNKNOWN_RISK_TYPE,
    ERROR_UNSUPPORTED_VERSION,
    CalculationError,
    ConfigurationError,
    ErrorCollector,
    SimmError,
    ValidationError,
    invalid_config_error,
    invalid_value_error,
    missing_field_error,
    missing_parameter_error,
    unsupported_version_error,
)

# Data bundle contracts
from simm_calc.contracts.bundles import (
    AddOnMargin,
    BucketMargin,
    GroupedSensitivities,
    MarginComponent,
    NetSensitivity,
    ProductClassMargin,
    RiskClassMargin,
    SimmResult,
)

# Protocol definitions
from simm_calc.contracts.protocols import (
    LoaderProtocol,
    PipelineProtocol,
    SensitivityGrouperProtocol,
    WeightsAndCorrelationsProtocol,
)

# Validation utilities
from simm_calc.contracts.validation import validate_crif_frame

__all__ = [
    # Configuration
    "CalculationConfig",
    # Errors
    "CalculationError",
    "ConfigurationError",
    "ErrorCollector",
    "SimmError",
    "ValidationError",
    "invalid_config_error",
    "invalid_value_error",
    "missing_field_error",
    "missing_parameter_error",
    "unsupported_version_error",
    # Error codes
    "ERROR_INVALID_BUCKET",
    "ERROR_INVALID_CONFIG",
    "ERROR_INVALID_TENOR",
    "ERROR_INVALID_VALUE",
    "ERROR_MISSING_BUCKET",
    "ERROR_MISSING_FIELD",
    "ERROR_MISSING_PARAMETER",
    "ERROR_TYPE_MISMATCH",
    "ERROR_UNKNOWN_RISK_TYPE",
    "ERROR_UNSUPPORTED_VERSION",
    # Bundles
    "AddOnMargin",
    "BucketMargin",
    "GroupedSensitivities",
    "MarginComponent",
    "NetSensitivity",
    "ProductClassMargin",
    "RiskClassMargin",
    "SimmResult",
    # Protocols
    "LoaderProtocol",
    "PipelineProtocol",
    "SensitivityGrouperProtocol",
    "WeightsAndCorrelationsProtocol",
    # Validation
    "validate_crif_frame",
]
