"""
ISDA SIMM v2.7 calibration.

Published risk weights, correlations and concentration thresholds.

References:
    - ISDA SIMM Methodology, version 2.7 (effective 14 December 2024)
"""

from simm_calc.data.tables.simm_parameters import SimmParameters

SIMM_V2_7 = SimmParameters(
    version="2.7",
    # -------------------------------------------------------------------------
    # Interest rates
    # -------------------------------------------------------------------------
    #                  2w     1m     3m    6m    1y    2y    3y    5y    10y   15y   20y   30y
    ir_rw_regular_vol=(109.0, 106.0, 91.0, 69.0, 68.0, 68.0, 66.0, 61.0, 59.0, 56.0, 57.0, 65.0),
    ir_rw_low_vol=(15.0, 21.0, 10.0, 10.0, 11.0, 15.0, 18.0, 23.0, 25.0, 23.0, 23.0, 25.0),
    ir_rw_high_vol=(171.0, 102.0, 94.0, 96.0, 105.0, 96.0, 99.0, 93.0, 99.0, 100.0, 101.0, 96.0),
    inflation_rw=52.0,
    xccy_basis_rw=21.0,
    ir_hvr=0.69,
    ir_vrw=0.20,
    ir_tenor_corr=(
        (1.00, 0.75, 0.67, 0.57, 0.43, 0.33, 0.28, 0.24, 0.19, 0.17, 0.16, 0.15),
        (0.75, 1.00, 0.85, 0.72, 0.52, 0.38, 0.30, 0.24, 0.19, 0.14, 0.16, 0.15),
        (0.67, 0.85, 1.00, 0.88, 0.67, 0.52, 0.44, 0.37, 0.30, 0.23, 0.21, 0.21),
        (0.57, 0.72, 0.88, 1.00, 0.86, 0.73, 0.64, 0.56, 0.47, 0.41, 0.38, 0.37),
        (0.43, 0.52, 0.67, 0.86, 1.00, 0.94, 0.86, 0.78, 0.67, 0.61, 0.57, 0.56),
        (0.33, 0.38, 0.52, 0.73, 0.94, 1.00, 0.96, 0.91, 0.80, 0.74, 0.70, 0.69),
        (0.28, 0.30, 0.44, 0.64, 0.86, 0.96, 1.00, 0.97, 0.87, 0.81, 0.77, 0.76),
        (0.24, 0.24, 0.37, 0.56, 0.78, 0.91, 0.97, 1.00, 0.94, 0.90, 0.86, 0.85),
        (0.19, 0.19, 0.30, 0.47, 0.67, 0.80, 0.87, 0.94, 1.00, 0.97, 0.94, 0.94),
        (0.17, 0.14, 0.23, 0.41, 0.61, 0.74, 0.81, 0.90, 0.97, 1.00, 0.97, 0.97),
        (0.16, 0.12, 0.21, 0.38, 0.57, 0.70, 0.77, 0.86, 0.94, 0.97, 1.00, 0.99),
        (0.15, 0.12, 0.21, 0.37, 0.56, 0.69, 0.76, 0.85, 0.94, 0.97, 0.99, 1.00),
    ),
    sub_curves_corr=0.99,
    inflation_corr=0.26,
    xccy_basis_corr=-0.05,
    ir_gamma=0.30,
    ir_delta_ct={"well_traded": 340.0, "less_well_traded": 61.0, "low_vol": 150.0, "other": 29.0},
    ir_vega_ct={"well_traded": 4900.0, "less_well_traded": 550.0, "low_vol": 890.0, "other": 76.0},
    # -------------------------------------------------------------------------
    # Qualifying credit
    # -------------------------------------------------------------------------
    #            Res    1     2     3     4     5     6     7      8      9      10     11     12
    credit_q_rw=(363.0, 69.0, 75.0, 69.0, 47.0, 58.0, 48.0, 153.0, 363.0, 156.0, 188.0, 299.0, 119.0),
    credit_q_vrw=0.29,
    base_corr_weight=9.9,
    credit_q_corr=(0.94, 0.47, 0.50, 0.31),
    credit_q_gamma=(
        (1.00, 0.41, 0.39, 0.35, 0.38, 0.36, 0.43, 0.29, 0.36, 0.36, 0.36, 0.37),
        (0.41, 1.00, 0.48, 0.45, 0.48, 0.45, 0.40, 0.35, 0.43, 0.43, 0.42, 0.44),
        (0.39, 0.48, 1.00, 0.49, 0.50, 0.50, 0.41, 0.32, 0.46, 0.45, 0.43, 0.48),
        (0.35, 0.45, 0.49, 1.00, 0.50, 0.49, 0.38, 0.30, 0.42, 0.44, 0.41, 0.47),
        (0.38, 0.48, 0.50, 0.50, 1.00, 0.51, 0.40, 0.31, 0.44, 0.45, 0.43, 0.49),
        (0.36, 0.45, 0.50, 0.49, 0.51, 1.00, 0.39, 0.29, 0.42, 0.43, 0.41, 0.49),
        (0.43, 0.40, 0.41, 0.38, 0.40, 0.39, 1.00, 0.28, 0.37, 0.38, 0.37, 0.39),
        (0.29, 0.35, 0.32, 0.30, 0.31, 0.29, 0.28, 1.00, 0.30, 0.30, 0.29, 0.31),
        (0.36, 0.43, 0.46, 0.42, 0.44, 0.42, 0.37, 0.30, 1.00, 0.42, 0.40, 0.44),
        (0.36, 0.43, 0.45, 0.44, 0.45, 0.43, 0.38, 0.30, 0.42, 1.00, 0.40, 0.45),
        (0.36, 0.42, 0.43, 0.41, 0.43, 0.41, 0.37, 0.29, 0.40, 0.40, 1.00, 0.42),
        (0.37, 0.44, 0.48, 0.47, 0.49, 0.49, 0.39, 0.31, 0.44, 0.45, 0.42, 1.00),
    ),
    credit_q_delta_ct=(0.18, 0.98, 0.18, 0.18, 0.18, 0.18, 0.18, 0.98, 0.18, 0.18, 0.18, 0.18, 0.18),
    credit_q_vega_ct=290.0,
    # -------------------------------------------------------------------------
    # Non-qualifying credit
    # -------------------------------------------------------------------------
    credit_non_q_rw=(2900.0, 280.0, 2900.0),
    credit_non_q_vrw=0.29,
    credit_non_q_corr=(0.85, 0.29, 0.50),
    credit_non_q_gamma=0.51,
    credit_non_q_delta_ct=(0.18, 3.3, 0.18),
    credit_non_q_vega_ct=21.0,
    # -------------------------------------------------------------------------
    # Equity
    # -------------------------------------------------------------------------
    #          Res   1     2     3     4     5     6     7     8     9     10    11    12
    equity_rw=(39.0, 27.0, 30.0, 31.0, 27.0, 23.0, 24.0, 26.0, 27.0, 33.0, 39.0, 15.0, 15.0),
    equity_hvr=0.62,
    equity_vrw=0.25,
    equity_vrw_bucket_12=0.56,
    equity_corr=(0.0, 0.14, 0.16, 0.23, 0.21, 0.23, 0.32, 0.32, 0.35, 0.21, 0.22, 0.40, 0.40),
    equity_gamma=(
        (1.00, 0.14, 0.15, 0.16, 0.13, 0.15, 0.14, 0.15, 0.14, 0.12, 0.17, 0.17),
        (0.14, 1.00, 0.18, 0.18, 0.14, 0.17, 0.17, 0.18, 0.16, 0.14, 0.19, 0.19),
        (0.15, 0.18, 1.00, 0.19, 0.14, 0.18, 0.21, 0.19, 0.18, 0.14, 0.21, 0.21),
        (0.16, 0.18, 0.19, 1.00, 0.17, 0.22, 0.21, 0.23, 0.18, 0.17, 0.24, 0.24),
        (0.13, 0.14, 0.14, 0.17, 1.00, 0.25, 0.23, 0.26, 0.13, 0.20, 0.28, 0.28),
        (0.15, 0.17, 0.18, 0.22, 0.25, 1.00, 0.29, 0.33, 0.16, 0.26, 0.34, 0.34),
        (0.14, 0.17, 0.21, 0.21, 0.23, 0.29, 1.00, 0.30, 0.15, 0.24, 0.33, 0.33),
        (0.15, 0.18, 0.19, 0.23, 0.26, 0.33, 0.30, 1.00, 0.16, 0.26, 0.37, 0.37),
        (0.14, 0.16, 0.18, 0.18, 0.13, 0.16, 0.15, 0.16, 1.00, 0.12, 0.19, 0.19),
        (0.12, 0.14, 0.14, 0.17, 0.20, 0.26, 0.24, 0.26, 0.12, 1.00, 0.26, 0.26),
        (0.17, 0.19, 0.21, 0.24, 0.28, 0.34, 0.33, 0.37, 0.19, 0.26, 1.00, 0.40),
        (0.17, 0.19, 0.21, 0.24, 0.28, 0.34, 0.33, 0.37, 0.19, 0.26, 0.40, 1.00),
    ),
    equity_delta_ct=(0.3, 2.5, 2.5, 2.5, 2.5, 10.0, 10.0, 10.0, 10.0, 0.61, 0.3, 710.0, 710.0),
    equity_vega_ct=(74.0, 300.0, 300.0, 300.0, 300.0, 1500.0, 1500.0, 1500.0, 1500.0, 74.0, 280.0, 4300.0, 4300.0),
    # -------------------------------------------------------------------------
    # Commodity
    # -------------------------------------------------------------------------
    commodity_rw=(
        0.0, 48.0, 21.0, 23.0, 20.0, 24.0, 33.0, 61.0, 45.0, 65.0,
        45.0, 21.0, 19.0, 16.0, 16.0, 11.0, 65.0, 16.0,
    ),
    commodity_hvr=0.85,
    commodity_vrw=0.34,
    commodity_corr=(
        0.0, 0.84, 0.98, 0.98, 0.98, 0.98, 0.93, 0.93, 0.51, 0.59,
        0.44, 0.58, 0.60, 0.60, 0.21, 0.17, 0.00, 0.43,
    ),
    commodity_gamma=(
        (1.00, 0.23, 0.19, 0.28, 0.24, 0.32, 0.62, 0.29, 0.50, 0.15, 0.13, 0.08, 0.19, 0.12, 0.04, 0.00, 0.22),
        (0.23, 1.00, 0.94, 0.92, 0.89, 0.36, 0.15, 0.23, 0.15, 0.20, 0.42, 0.31, 0.38, 0.28, 0.16, 0.00, 0.67),
        (0.19, 0.94, 1.00, 0.91, 0.86, 0.32, 0.11, 0.19, 0.12, 0.22, 0.41, 0.31, 0.37, 0.25, 0.15, 0.00, 0.64),
        (0.28, 0.92, 0.91, 1.00, 0.81, 0.40, 0.17, 0.26, 0.18, 0.20, 0.41, 0.26, 0.34, 0.25, 0.14, 0.00, 0.64),
        (0.24, 0.89, 0.86, 0.81, 1.00, 0.29, 0.17, 0.26, 0.23, 0.26, 0.42, 0.34, 0.23, 0.32, 0.14, 0.00, 0.62),
        (0.32, 0.36, 0.32, 0.40, 0.29, 1.00, 0.30, 0.66, 0.23, 0.07, 0.12, 0.07, 0.23, 0.09, 0.11, 0.00, 0.39),
        (0.62, 0.15, 0.11, 0.17, 0.17, 0.30, 1.00, 0.19, 0.78, 0.12, 0.12, 0.02, 0.11, 0.07, 0.00, 0.00, 0.21),
        (0.29, 0.23, 0.19, 0.26, 0.21, 0.66, 0.19, 1.00, 0.19, 0.04, 0.10, -0.01, 0.11, 0.04, 0.03, 0.00, 0.21),
        (0.50, 0.15, 0.12, 0.18, 0.23, 0.23, 0.78, 0.19, 1.00, 0.07, 0.06, -0.08, 0.13, 0.12, 0.10, 0.00, 0.18),
        (0.15, 0.20, 0.22, 0.20, 0.26, 0.07, 0.12, 0.04, 0.07, 1.00, 0.19, 0.10, 0.13, 0.10, 0.10, 0.00, 0.12),
        (0.13, 0.42, 0.41, 0.41, 0.42, 0.21, 0.12, 0.10, 0.06, 0.19, 1.00, 0.39, 0.31, 0.24, 0.14, 0.00, 0.39),
        (0.08, 0.31, 0.31, 0.26, 0.34, 0.07, 0.02, -0.01, -0.08, 0.10, 0.39, 1.00, 0.22, 0.20, 0.12, 0.00, 0.28),
        (0.19, 0.38, 0.37, 0.34, 0.23, 0.19, 0.11, 0.11, 0.13, 0.13, 0.31, 0.22, 1.00, 0.28, 0.19, 0.00, 0.41),
        (0.12, 0.28, 0.25, 0.27, 0.32, 0.09, 0.07, 0.04, 0.12, 0.10, 0.24, 0.20, 0.28, 1.00, 0.09, 0.00, 0.22),
        (0.04, 0.16, 0.15, 0.14, 0.14, 0.11, 0.00, 0.03, 0.10, 0.10, 0.14, 0.12, 0.19, 0.09, 1.00, 0.00, 0.21),
        (0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 1.00, 0.00),
        (0.22, 0.67, 0.64, 0.64, 0.62, 0.39, 0.21, 0.21, 0.18, 0.12, 0.39, 0.28, 0.41, 0.22, 0.21, 0.00, 1.00),
    ),
    commodity_delta_ct=(
        52.0, 310.0, 2500.0, 1700.0, 1700.0, 1700.0, 2400.0, 2400.0, 1800.0, 1800.0,
        52.0, 530.0, 1600.0, 100.0, 100.0, 100.0, 52.0, 4000.0,
    ),
    commodity_vega_ct=(
        59.0, 450.0, 2300.0, 240.0, 240.0, 240.0, 6400.0, 6400.0, 1300.0, 1300.0,
        94.0, 490.0, 810.0, 730.0, 730.0, 730.0, 59.0, 59.0,
    ),
    # -------------------------------------------------------------------------
    # FX
    # -------------------------------------------------------------------------
    fx_high_vol_currencies=frozenset({"ARS", "RUB", "TRY"}),
    fx_rw=(7.3, 21.4, 35.9),
    fx_hvr=0.62,
    fx_vrw=0.35,
    fx_corr_regular=((0.50, 0.17), (0.17, -0.41)),
    fx_corr_high=((0.94, 0.84), (0.84, 0.50)),
    fx_vega_corr=0.5,
    # -------------------------------------------------------------------------
    # Cross risk class correlation (Rates, CreditQ, CreditNonQ, Equity, Commodity, FX)
    # -------------------------------------------------------------------------
    psi=(
        (1.00, 0.15, 0.09, 0.08, 0.33, 0.09),
        (0.15, 1.00, 0.52, 0.67, 0.23, 0.20),
        (0.09, 0.52, 1.00, 0.36, 0.16, 0.12),
        (0.08, 0.67, 0.36, 1.00, 0.34, 0.24),
        (0.33, 0.23, 0.16, 0.34, 1.00, 0.28),
        (0.09, 0.20, 0.12, 0.24, 0.28, 1.00),
    ),
)
