"""
ISDA SIMM Initial Margin Calculator.

Computes ISDA SIMM initial margin for non-cleared derivatives from CRIF
sensitivities, supporting the SIMM 2.5, 2.6 and 2.7 calibrations.

Basic usage:
    >>> from simm_calc.engine.pipeline import create_pipeline
    >>> from simm_calc.engine.loader import CSVLoader
    >>> from simm_calc.contracts.config import CalculationConfig
    >>>
    >>> config = CalculationConfig.v2_6(calculation_currency="EUR", exchange_rate=0.92)
    >>> crif = CSVLoader("portfolio.csv").load()
    >>> result = create_pipeline().run(crif, config)
    >>> result.total
"""

__version__ = "0.1.0"
__author__ = "OpenAfterHours"
__license__ = "Apache-2.0"

__all__ = [
    "__version__",
    "__author__",
    "__license__",
]
