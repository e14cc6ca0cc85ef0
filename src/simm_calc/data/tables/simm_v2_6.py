"""
ISDA SIMM v2.6 calibration.

Published risk weights, correlations and concentration thresholds.

References:
    - ISDA SIMM Methodology, version 2.6 (effective 2 December 2023)
"""

from simm_calc.data.tables.simm_parameters import SimmParameters

SIMM_V2_6 = SimmParameters(
    version="2.6",
    # -------------------------------------------------------------------------
    # Interest rates
    # -------------------------------------------------------------------------
    #                  2w     1m     3m    6m    1y    2y    3y    5y    10y   15y   20y   30y
    ir_rw_regular_vol=(109.0, 105.0, 90.0, 71.0, 66.0, 66.0, 64.0, 60.0, 60.0, 61.0, 61.0, 67.0),
    ir_rw_low_vol=(15.0, 18.0, 9.0, 11.0, 13.0, 15.0, 19.0, 23.0, 23.0, 22.0, 22.0, 23.0),
    ir_rw_high_vol=(163.0, 109.0, 87.0, 89.0, 102.0, 96.0, 101.0, 97.0, 97.0, 102.0, 106.0, 101.0),
    inflation_rw=61.0,
    xccy_basis_rw=21.0,
    ir_hvr=0.47,
    ir_vrw=0.23,
    ir_tenor_corr=(
        (1.00, 0.77, 0.67, 0.59, 0.48, 0.39, 0.34, 0.30, 0.25, 0.23, 0.21, 0.20),
        (0.77, 1.00, 0.84, 0.74, 0.56, 0.43, 0.36, 0.31, 0.26, 0.21, 0.19, 0.19),
        (0.67, 0.84, 1.00, 0.88, 0.69, 0.55, 0.47, 0.40, 0.34, 0.27, 0.25, 0.25),
        (0.59, 0.74, 0.88, 1.00, 0.86, 0.73, 0.65, 0.57, 0.49, 0.40, 0.38, 0.37),
        (0.48, 0.56, 0.69, 0.86, 1.00, 0.94, 0.87, 0.79, 0.68, 0.60, 0.57, 0.55),
        (0.39, 0.43, 0.55, 0.73, 0.94, 1.00, 0.96, 0.91, 0.80, 0.74, 0.70, 0.69),
        (0.34, 0.36, 0.47, 0.65, 0.87, 0.96, 1.00, 0.97, 0.88, 0.81, 0.77, 0.76),
        (0.30, 0.31, 0.40, 0.57, 0.79, 0.91, 0.97, 1.00, 0.95, 0.90, 0.86, 0.85),
        (0.25, 0.26, 0.34, 0.49, 0.68, 0.80, 0.88, 0.95, 1.00, 0.97, 0.94, 0.94),
        (0.23, 0.21, 0.27, 0.40, 0.60, 0.74, 0.81, 0.90, 0.97, 1.00, 0.98, 0.97),
        (0.21, 0.19, 0.25, 0.38, 0.57, 0.70, 0.77, 0.86, 0.94, 0.98, 1.00, 0.99),
        (0.20, 0.19, 0.25, 0.37, 0.55, 0.69, 0.76, 0.85, 0.94, 0.97, 0.99, 1.00),
    ),
    sub_curves_corr=0.993,
    inflation_corr=0.24,
    xccy_basis_corr=0.04,
    ir_gamma=0.32,
    ir_delta_ct={"well_traded": 330.0, "less_well_traded": 130.0, "low_vol": 61.0, "other": 30.0},
    ir_vega_ct={"well_traded": 4900.0, "less_well_traded": 520.0, "low_vol": 970.0, "other": 74.0},
    # -------------------------------------------------------------------------
    # Qualifying credit
    # -------------------------------------------------------------------------
    #            Res    1     2     3     4     5     6     7      8      9      10     11     12
    credit_q_rw=(343.0, 75.0, 90.0, 84.0, 54.0, 62.0, 48.0, 185.0, 343.0, 255.0, 250.0, 214.0, 173.0),
    credit_q_vrw=0.76,
    base_corr_weight=10.0,
    credit_q_corr=(0.93, 0.46, 0.50, 0.29),
    credit_q_gamma=(
        (1.00, 0.38, 0.38, 0.35, 0.37, 0.34, 0.42, 0.32, 0.34, 0.33, 0.34, 0.33),
        (0.38, 1.00, 0.48, 0.46, 0.48, 0.46, 0.39, 0.40, 0.41, 0.41, 0.43, 0.40),
        (0.38, 0.48, 1.00, 0.50, 0.51, 0.50, 0.40, 0.39, 0.45, 0.44, 0.47, 0.42),
        (0.35, 0.46, 0.50, 1.00, 0.50, 0.50, 0.37, 0.37, 0.41, 0.43, 0.45, 0.40),
        (0.37, 0.48, 0.51, 0.50, 1.00, 0.50, 0.39, 0.38, 0.43, 0.43, 0.46, 0.42),
        (0.34, 0.46, 0.50, 0.50, 0.50, 1.00, 0.37, 0.35, 0.39, 0.41, 0.44, 0.41),
        (0.42, 0.39, 0.40, 0.37, 0.39, 0.37, 1.00, 0.33, 0.37, 0.37, 0.35, 0.35),
        (0.32, 0.40, 0.39, 0.37, 0.38, 0.35, 0.33, 1.00, 0.36, 0.37, 0.37, 0.36),
        (0.34, 0.41, 0.45, 0.41, 0.43, 0.39, 0.37, 0.36, 1.00, 0.41, 0.40, 0.38),
        (0.33, 0.41, 0.44, 0.43, 0.43, 0.41, 0.37, 0.37, 0.41, 1.00, 0.41, 0.39),
        (0.34, 0.43, 0.47, 0.45, 0.46, 0.44, 0.35, 0.37, 0.40, 0.41, 1.00, 0.40),
        (0.33, 0.40, 0.42, 0.40, 0.42, 0.41, 0.35, 0.36, 0.38, 0.39, 0.40, 1.00),
    ),
    credit_q_delta_ct=(0.17, 1.00, 0.17, 0.17, 0.17, 0.17, 0.17, 1.00, 0.17, 0.17, 0.17, 0.17, 0.17),
    credit_q_vega_ct=360.0,
    # -------------------------------------------------------------------------
    # Non-qualifying credit
    # -------------------------------------------------------------------------
    credit_non_q_rw=(1300.0, 280.0, 1300.0),
    credit_non_q_vrw=0.76,
    credit_non_q_corr=(0.83, 0.32, 0.50),
    credit_non_q_gamma=0.43,
    credit_non_q_delta_ct=(0.5, 9.5, 0.5),
    credit_non_q_vega_ct=70.0,
    # -------------------------------------------------------------------------
    # Equity
    # -------------------------------------------------------------------------
    #          Res   1     2     3     4     5     6     7     8     9     10    11    12
    equity_rw=(50.0, 30.0, 33.0, 36.0, 29.0, 26.0, 25.0, 34.0, 28.0, 36.0, 50.0, 19.0, 19.0),
    equity_hvr=0.60,
    equity_vrw=0.45,
    equity_vrw_bucket_12=0.96,
    equity_corr=(0.0, 0.18, 0.20, 0.28, 0.24, 0.25, 0.36, 0.35, 0.37, 0.23, 0.27, 0.45, 0.45),
    equity_gamma=(
        (1.00, 0.18, 0.19, 0.19, 0.14, 0.16, 0.15, 0.16, 0.18, 0.12, 0.19, 0.19),
        (0.18, 1.00, 0.22, 0.21, 0.15, 0.18, 0.17, 0.19, 0.20, 0.14, 0.21, 0.21),
        (0.19, 0.22, 1.00, 0.22, 0.13, 0.16, 0.18, 0.17, 0.22, 0.13, 0.20, 0.20),
        (0.19, 0.21, 0.22, 1.00, 0.17, 0.22, 0.22, 0.23, 0.22, 0.17, 0.26, 0.26),
        (0.14, 0.15, 0.13, 0.17, 1.00, 0.29, 0.26, 0.29, 0.14, 0.24, 0.32, 0.32),
        (0.16, 0.18, 0.16, 0.22, 0.29, 1.00, 0.34, 0.36, 0.17, 0.30, 0.39, 0.39),
        (0.15, 0.17, 0.18, 0.22, 0.26, 0.34, 1.00, 0.33, 0.16, 0.28, 0.36, 0.36),
        (0.16, 0.19, 0.17, 0.23, 0.29, 0.36, 0.33, 1.00, 0.17, 0.29, 0.40, 0.40),
        (0.18, 0.20, 0.22, 0.22, 0.14, 0.17, 0.16, 0.17, 1.00, 0.13, 0.21, 0.21),
        (0.12, 0.14, 0.13, 0.17, 0.24, 0.30, 0.28, 0.29, 0.13, 1.00, 0.30, 0.30),
        (0.19, 0.21, 0.20, 0.26, 0.32, 0.39, 0.36, 0.40, 0.21, 0.30, 1.00, 0.45),
        (0.19, 0.21, 0.20, 0.26, 0.32, 0.39, 0.36, 0.40, 0.21, 0.30, 0.45, 1.00),
    ),
    equity_delta_ct=(0.37, 3.0, 3.0, 3.0, 3.0, 12.0, 12.0, 12.0, 12.0, 0.64, 0.37, 810.0, 810.0),
    equity_vega_ct=(39.0, 210.0, 210.0, 210.0, 210.0, 1300.0, 1300.0, 1300.0, 1300.0, 39.0, 190.0, 6400.0, 6400.0),
    # -------------------------------------------------------------------------
    # Commodity
    # -------------------------------------------------------------------------
    commodity_rw=(
        0.0, 48.0, 29.0, 33.0, 25.0, 35.0, 30.0, 60.0, 52.0, 68.0,
        63.0, 21.0, 21.0, 15.0, 16.0, 13.0, 68.0, 17.0,
    ),
    commodity_hvr=0.74,
    commodity_vrw=0.55,
    commodity_corr=(
        0.0, 0.83, 0.97, 0.93, 0.97, 0.98, 0.90, 0.98, 0.49, 0.80,
        0.46, 0.58, 0.53, 0.62, 0.16, 0.18, 0.00, 0.38,
    ),
    commodity_gamma=(
        (1.00, 0.22, 0.18, 0.21, 0.20, 0.24, 0.49, 0.16, 0.38, 0.14, 0.10, 0.02, 0.12, 0.11, 0.02, 0.00, 0.17),
        (0.22, 1.00, 0.92, 0.90, 0.88, 0.25, 0.08, 0.19, 0.17, 0.17, 0.42, 0.28, 0.36, 0.27, 0.20, 0.00, 0.64),
        (0.18, 0.92, 1.00, 0.87, 0.84, 0.16, 0.07, 0.15, 0.10, 0.18, 0.33, 0.22, 0.27, 0.23, 0.16, 0.00, 0.54),
        (0.21, 0.90, 0.87, 1.00, 0.77, 0.19, 0.11, 0.18, 0.16, 0.14, 0.32, 0.22, 0.28, 0.22, 0.11, 0.00, 0.58),
        (0.20, 0.88, 0.84, 0.77, 1.00, 0.19, 0.09, 0.12, 0.13, 0.18, 0.42, 0.34, 0.32, 0.29, 0.13, 0.00, 0.59),
        (0.24, 0.25, 0.16, 0.19, 0.19, 1.00, 0.31, 0.62, 0.23, 0.10, 0.21, 0.05, 0.18, 0.10, 0.08, 0.00, 0.28),
        (0.49, 0.08, 0.07, 0.11, 0.09, 0.31, 1.00, 0.21, 0.79, 0.17, 0.10, -0.08, 0.10, 0.07, -0.02, 0.00, 0.13),
        (0.16, 0.19, 0.15, 0.18, 0.12, 0.62, 0.21, 1.00, 0.16, 0.08, 0.13, -0.07, 0.07, 0.05, 0.02, 0.00, 0.19),
        (0.38, 0.17, 0.10, 0.16, 0.13, 0.23, 0.79, 0.16, 1.00, 0.15, 0.09, -0.06, 0.06, 0.06, 0.01, 0.00, 0.16),
        (0.14, 0.17, 0.18, 0.14, 0.18, 0.10, 0.17, 0.08, 0.15, 1.00, 0.16, 0.09, 0.14, 0.09, 0.03, 0.00, 0.11),
        (0.10, 0.42, 0.33, 0.32, 0.42, 0.21, 0.10, 0.13, 0.09, 0.16, 1.00, 0.36, 0.30, 0.25, 0.18, 0.00, 0.37),
        (0.02, 0.28, 0.22, 0.22, 0.34, 0.05, -0.08, -0.07, -0.06, 0.09, 0.36, 1.00, 0.20, 0.18, 0.11, 0.00, 0.26),
        (0.12, 0.36, 0.27, 0.28, 0.32, 0.18, 0.10, 0.07, 0.06, 0.14, 0.30, 0.20, 1.00, 0.28, 0.19, 0.00, 0.39),
        (0.11, 0.27, 0.23, 0.22, 0.29, 0.10, 0.07, 0.05, 0.06, 0.09, 0.25, 0.18, 0.28, 1.00, 0.13, 0.00, 0.26),
        (0.02, 0.20, 0.16, 0.11, 0.13, 0.08, -0.02, 0.02, 0.01, 0.03, 0.18, 0.11, 0.19, 0.13, 1.00, 0.00, 0.21),
        (0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 1.00, 0.00),
        (0.17, 0.64, 0.54, 0.58, 0.59, 0.28, 0.13, 0.19, 0.16, 0.11, 0.37, 0.26, 0.39, 0.26, 0.21, 0.00, 1.00),
    ),
    commodity_delta_ct=(
        52.0, 310.0, 2100.0, 1700.0, 1700.0, 1700.0, 2800.0, 2800.0, 2700.0, 2700.0,
        52.0, 530.0, 1300.0, 100.0, 100.0, 100.0, 52.0, 4000.0,
    ),
    commodity_vega_ct=(
        69.0, 390.0, 2900.0, 310.0, 310.0, 310.0, 6300.0, 6300.0, 1200.0, 1200.0,
        120.0, 390.0, 1300.0, 590.0, 590.0, 590.0, 69.0, 69.0,
    ),
    # -------------------------------------------------------------------------
    # FX
    # -------------------------------------------------------------------------
    fx_high_vol_currencies=frozenset({"BRL", "RUB", "TRY"}),
    fx_rw=(7.4, 14.7, 21.4),
    fx_hvr=0.57,
    fx_vrw=0.48,
    fx_corr_regular=((0.50, 0.25), (0.25, -0.05)),
    fx_corr_high=((0.88, 0.72), (0.72, 0.50)),
    fx_vega_corr=0.5,
    # -------------------------------------------------------------------------
    # Cross risk class correlation (Rates, CreditQ, CreditNonQ, Equity, Commodity, FX)
    # -------------------------------------------------------------------------
    psi=(
        (1.00, 0.04, 0.04, 0.07, 0.37, 0.14),
        (0.04, 1.00, 0.54, 0.70, 0.27, 0.37),
        (0.04, 0.54, 1.00, 0.46, 0.24, 0.15),
        (0.07, 0.70, 0.46, 1.00, 0.35, 0.39),
        (0.37, 0.27, 0.24, 0.35, 1.00, 0.35),
        (0.14, 0.37, 0.15, 0.39, 0.35, 1.00),
    ),
)
