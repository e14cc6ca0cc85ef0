"""
This module contains the schemas for the inputs and outputs of simm_calc.

Key Data Inputs:
- CRIF                      # Common Risk Interchange Format sensitivity records
                            # and add-on parameter rows

Output Schemas:
- Net_sensitivity           # One row per netted risk factor (grouper output)
- Breakdown                 # Hierarchical SIMM breakdown, one row per node

CRIF files use CamelCase headers (ProductClass, RiskType, AmountUSD, ...).
CRIF_COLUMN_MAPPING renames them to the snake_case names used internally.
"""

import polars as pl

CRIF_SCHEMA = {
    "product_class": pl.String,  # RatesFX, Credit, Equity, Commodity
    "risk_type": pl.String,  # Risk_IRCurve, Risk_FX, ..., Param_AddOnFixedAmount
    "qualifier": pl.String,  # currency, issuer, currency pair, product class
    "bucket": pl.String,  # 1..n or Residual; rates vol group 1/2/3
    "label1": pl.String,  # tenor
    "label2": pl.String,  # sub-curve (rates), secured/unsecured (credit)
    "amount": pl.Float64,
    "amount_currency": pl.String,
    "amount_usd": pl.Float64,  # canonical amount consumed by the engine
}

CRIF_COLUMN_MAPPING = {
    "ProductClass": "product_class",
    "RiskType": "risk_type",
    "Qualifier": "qualifier",
    "Bucket": "bucket",
    "Label1": "label1",
    "Label2": "label2",
    "Amount": "amount",
    "AmountCurrency": "amount_currency",
    "AmountUSD": "amount_usd",
}

# Columns that must be present for a calculation
CRIF_REQUIRED_COLUMNS = ["risk_type", "amount_usd"]

BREAKDOWN_SCHEMA = {
    "level": pl.String,  # BreakdownLevel value
    "product_class": pl.String,
    "risk_class": pl.String,
    "bucket": pl.String,
    "margin_type": pl.String,
    "value": pl.Float64,
}
