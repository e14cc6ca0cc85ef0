"""
ISDA SIMM v2.5 calibration.

Published risk weights, correlations and concentration thresholds.

References:
    - ISDA SIMM Methodology, version 2.5 (effective 2 December 2022)
"""

from simm_calc.data.tables.simm_parameters import SimmParameters

SIMM_V2_5 = SimmParameters(
    version="2.5",
    # -------------------------------------------------------------------------
    # Interest rates
    # -------------------------------------------------------------------------
    #                  2w     1m     3m    6m    1y    2y    3y    5y    10y   15y   20y   30y
    ir_rw_regular_vol=(115.0, 112.0, 96.0, 74.0, 66.0, 61.0, 56.0, 52.0, 53.0, 57.0, 60.0, 66.0),
    ir_rw_low_vol=(15.0, 18.0, 9.0, 11.0, 13.0, 15.0, 18.0, 20.0, 19.0, 19.0, 20.0, 23.0),
    ir_rw_high_vol=(119.0, 93.0, 80.0, 82.0, 90.0, 92.0, 95.0, 95.0, 94.0, 108.0, 105.0, 101.0),
    inflation_rw=63.0,
    xccy_basis_rw=21.0,
    ir_hvr=0.44,
    ir_vrw=0.18,
    ir_tenor_corr=(
        (1.00, 0.74, 0.63, 0.55, 0.45, 0.36, 0.32, 0.28, 0.23, 0.20, 0.18, 0.16),
        (0.74, 1.00, 0.80, 0.69, 0.52, 0.41, 0.35, 0.29, 0.24, 0.18, 0.17, 0.16),
        (0.63, 0.80, 1.00, 0.85, 0.67, 0.53, 0.45, 0.39, 0.32, 0.24, 0.22, 0.22),
        (0.55, 0.69, 0.85, 1.00, 0.83, 0.71, 0.62, 0.54, 0.45, 0.36, 0.35, 0.33),
        (0.45, 0.52, 0.67, 0.83, 1.00, 0.94, 0.86, 0.78, 0.65, 0.58, 0.55, 0.53),
        (0.36, 0.41, 0.53, 0.71, 0.94, 1.00, 0.95, 0.89, 0.78, 0.72, 0.68, 0.67),
        (0.32, 0.35, 0.45, 0.62, 0.86, 0.95, 1.00, 0.96, 0.87, 0.80, 0.77, 0.74),
        (0.28, 0.29, 0.39, 0.54, 0.78, 0.89, 0.96, 1.00, 0.94, 0.89, 0.86, 0.84),
        (0.23, 0.24, 0.32, 0.45, 0.65, 0.78, 0.87, 0.94, 1.00, 0.97, 0.95, 0.94),
        (0.20, 0.18, 0.24, 0.36, 0.58, 0.72, 0.80, 0.89, 0.97, 1.00, 0.98, 0.98),
        (0.18, 0.17, 0.22, 0.35, 0.55, 0.68, 0.77, 0.86, 0.95, 0.98, 1.00, 0.99),
        (0.16, 0.16, 0.22, 0.33, 0.53, 0.67, 0.74, 0.84, 0.94, 0.98, 0.99, 1.00),
    ),
    sub_curves_corr=0.99,
    inflation_corr=0.37,
    xccy_basis_corr=0.01,
    ir_gamma=0.24,
    ir_delta_ct={"well_traded": 230.0, "less_well_traded": 44.0, "low_vol": 70.0, "other": 33.0},
    ir_vega_ct={"well_traded": 3300.0, "less_well_traded": 470.0, "low_vol": 570.0, "other": 120.0},
    # -------------------------------------------------------------------------
    # Qualifying credit
    # -------------------------------------------------------------------------
    #            Res    1     2     3     4     5     6     7      8      9      10     11     12
    credit_q_rw=(665.0, 75.0, 91.0, 78.0, 55.0, 67.0, 47.0, 187.0, 665.0, 262.0, 251.0, 172.0, 247.0),
    credit_q_vrw=0.74,
    base_corr_weight=10.0,
    credit_q_corr=(0.93, 0.42, 0.50, 0.24),
    credit_q_gamma=(
        (1.00, 0.36, 0.38, 0.35, 0.37, 0.33, 0.36, 0.31, 0.32, 0.33, 0.32, 0.30),
        (0.36, 1.00, 0.46, 0.44, 0.45, 0.43, 0.33, 0.36, 0.38, 0.39, 0.40, 0.36),
        (0.38, 0.46, 1.00, 0.49, 0.49, 0.47, 0.34, 0.36, 0.41, 0.42, 0.43, 0.39),
        (0.35, 0.44, 0.49, 1.00, 0.48, 0.48, 0.31, 0.34, 0.38, 0.42, 0.41, 0.37),
        (0.37, 0.45, 0.49, 0.48, 1.00, 0.48, 0.33, 0.35, 0.39, 0.42, 0.43, 0.38),
        (0.33, 0.43, 0.47, 0.48, 0.48, 1.00, 0.29, 0.32, 0.36, 0.39, 0.40, 0.35),
        (0.36, 0.33, 0.34, 0.31, 0.33, 0.29, 1.00, 0.28, 0.32, 0.31, 0.30, 0.28),
        (0.31, 0.36, 0.36, 0.34, 0.35, 0.32, 0.28, 1.00, 0.33, 0.34, 0.33, 0.30),
        (0.32, 0.38, 0.41, 0.38, 0.39, 0.36, 0.32, 0.33, 1.00, 0.38, 0.36, 0.34),
        (0.33, 0.39, 0.42, 0.42, 0.42, 0.39, 0.31, 0.34, 0.38, 1.00, 0.38, 0.36),
        (0.32, 0.40, 0.43, 0.41, 0.43, 0.40, 0.30, 0.33, 0.36, 0.38, 1.00, 0.35),
        (0.30, 0.36, 0.39, 0.37, 0.38, 0.35, 0.28, 0.30, 0.34, 0.36, 0.35, 1.00),
    ),
    credit_q_delta_ct=(0.19, 0.91, 0.19, 0.19, 0.19, 0.19, 0.19, 0.91, 0.19, 0.19, 0.19, 0.19, 0.19),
    credit_q_vega_ct=260.0,
    # -------------------------------------------------------------------------
    # Non-qualifying credit
    # -------------------------------------------------------------------------
    credit_non_q_rw=(1300.0, 280.0, 1300.0),
    credit_non_q_vrw=0.74,
    credit_non_q_corr=(0.82, 0.27, 0.50),
    credit_non_q_gamma=0.40,
    credit_non_q_delta_ct=(0.5, 9.5, 0.5),
    credit_non_q_vega_ct=145.0,
    # -------------------------------------------------------------------------
    # Equity
    # -------------------------------------------------------------------------
    #          Res   1     2     3     4     5     6     7     8     9     10    11    12
    equity_rw=(34.0, 26.0, 28.0, 34.0, 28.0, 23.0, 25.0, 29.0, 27.0, 32.0, 32.0, 18.0, 18.0),
    equity_hvr=0.58,
    equity_vrw=0.45,
    equity_vrw_bucket_12=0.96,
    equity_corr=(0.0, 0.18, 0.23, 0.30, 0.26, 0.23, 0.35, 0.36, 0.33, 0.19, 0.20, 0.45, 0.45),
    equity_gamma=(
        (1.00, 0.20, 0.20, 0.20, 0.13, 0.16, 0.16, 0.16, 0.17, 0.12, 0.18, 0.18),
        (0.20, 1.00, 0.25, 0.23, 0.14, 0.17, 0.18, 0.17, 0.19, 0.13, 0.19, 0.19),
        (0.20, 0.25, 1.00, 0.24, 0.13, 0.17, 0.18, 0.16, 0.20, 0.13, 0.18, 0.18),
        (0.20, 0.23, 0.24, 1.00, 0.17, 0.22, 0.22, 0.22, 0.21, 0.16, 0.24, 0.24),
        (0.13, 0.14, 0.13, 0.17, 1.00, 0.27, 0.26, 0.27, 0.15, 0.20, 0.30, 0.30),
        (0.16, 0.17, 0.17, 0.22, 0.27, 1.00, 0.34, 0.33, 0.18, 0.24, 0.38, 0.38),
        (0.16, 0.18, 0.18, 0.22, 0.26, 0.34, 1.00, 0.32, 0.18, 0.24, 0.37, 0.37),
        (0.16, 0.17, 0.16, 0.22, 0.27, 0.33, 0.32, 1.00, 0.18, 0.23, 0.37, 0.37),
        (0.17, 0.19, 0.20, 0.21, 0.15, 0.18, 0.18, 0.18, 1.00, 0.14, 0.20, 0.20),
        (0.12, 0.13, 0.13, 0.16, 0.20, 0.24, 0.24, 0.23, 0.14, 1.00, 0.25, 0.25),
        (0.18, 0.19, 0.18, 0.24, 0.30, 0.38, 0.37, 0.37, 0.20, 0.25, 1.00, 0.45),
        (0.18, 0.19, 0.18, 0.24, 0.30, 0.38, 0.37, 0.37, 0.20, 0.25, 0.45, 1.00),
    ),
    equity_delta_ct=(0.6, 10.0, 10.0, 10.0, 10.0, 21.0, 21.0, 21.0, 21.0, 1.4, 0.6, 2100.0, 2100.0),
    equity_vega_ct=(40.0, 210.0, 210.0, 210.0, 210.0, 1300.0, 1300.0, 1300.0, 1300.0, 40.0, 200.0, 5900.0, 5900.0),
    # -------------------------------------------------------------------------
    # Commodity
    # -------------------------------------------------------------------------
    commodity_rw=(
        0.0, 27.0, 29.0, 33.0, 25.0, 35.0, 24.0, 40.0, 53.0, 44.0,
        58.0, 20.0, 21.0, 13.0, 16.0, 13.0, 58.0, 17.0,
    ),
    commodity_hvr=0.69,
    commodity_vrw=0.60,
    commodity_corr=(
        0.0, 0.84, 0.98, 0.96, 0.97, 0.98, 0.88, 0.98, 0.49, 0.80,
        0.46, 0.55, 0.46, 0.66, 0.18, 0.21, 0.00, 0.36,
    ),
    commodity_gamma=(
        (1.00, 0.33, 0.21, 0.27, 0.29, 0.21, 0.48, 0.16, 0.41, 0.23, 0.18, 0.02, 0.21, 0.19, 0.15, 0.00, 0.24),
        (0.33, 1.00, 0.94, 0.94, 0.89, 0.21, 0.19, 0.13, 0.21, 0.21, 0.41, 0.27, 0.31, 0.29, 0.21, 0.00, 0.60),
        (0.21, 0.94, 1.00, 0.91, 0.85, 0.12, 0.20, 0.09, 0.19, 0.20, 0.36, 0.18, 0.22, 0.23, 0.23, 0.00, 0.54),
        (0.27, 0.94, 0.91, 1.00, 0.84, 0.14, 0.24, 0.13, 0.21, 0.19, 0.39, 0.25, 0.23, 0.27, 0.18, 0.00, 0.59),
        (0.29, 0.89, 0.85, 0.84, 1.00, 0.15, 0.17, 0.09, 0.16, 0.21, 0.38, 0.28, 0.28, 0.27, 0.18, 0.00, 0.55),
        (0.21, 0.21, 0.12, 0.14, 0.15, 1.00, 0.33, 0.53, 0.26, 0.09, 0.21, 0.04, 0.11, 0.10, 0.09, 0.00, 0.24),
        (0.48, 0.19, 0.20, 0.24, 0.17, 0.33, 1.00, 0.31, 0.72, 0.24, 0.14, -0.12, 0.19, 0.14, 0.08, 0.00, 0.24),
        (0.16, 0.13, 0.09, 0.13, 0.09, 0.53, 0.31, 1.00, 0.24, 0.04, 0.13, -0.07, 0.04, 0.06, 0.01, 0.00, 0.16),
        (0.41, 0.21, 0.19, 0.21, 0.16, 0.26, 0.72, 0.24, 1.00, 0.21, 0.18, -0.07, 0.12, 0.12, 0.10, 0.00, 0.21),
        (0.23, 0.21, 0.20, 0.19, 0.21, 0.09, 0.24, 0.04, 0.21, 1.00, 0.14, 0.11, 0.11, 0.10, 0.07, 0.00, 0.14),
        (0.18, 0.41, 0.36, 0.39, 0.38, 0.21, 0.14, 0.13, 0.18, 0.14, 1.00, 0.28, 0.30, 0.25, 0.18, 0.00, 0.38),
        (0.02, 0.27, 0.18, 0.25, 0.28, 0.04, -0.12, -0.07, -0.07, 0.11, 0.28, 1.00, 0.18, 0.18, 0.08, 0.00, 0.21),
        (0.21, 0.31, 0.22, 0.23, 0.28, 0.11, 0.19, 0.04, 0.12, 0.11, 0.30, 0.18, 1.00, 0.34, 0.16, 0.00, 0.34),
        (0.19, 0.29, 0.23, 0.27, 0.27, 0.10, 0.14, 0.06, 0.12, 0.10, 0.25, 0.18, 0.34, 1.00, 0.13, 0.00, 0.26),
        (0.15, 0.21, 0.23, 0.18, 0.18, 0.09, 0.08, 0.01, 0.10, 0.07, 0.18, 0.08, 0.16, 0.13, 1.00, 0.00, 0.21),
        (0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 0.00, 1.00, 0.00),
        (0.24, 0.60, 0.54, 0.59, 0.55, 0.24, 0.24, 0.16, 0.21, 0.14, 0.38, 0.21, 0.34, 0.26, 0.21, 0.00, 1.00),
    ),
    commodity_delta_ct=(
        52.0, 310.0, 2100.0, 1700.0, 1700.0, 1700.0, 3200.0, 3200.0, 2700.0, 2700.0,
        52.0, 530.0, 1600.0, 100.0, 100.0, 100.0, 52.0, 4000.0,
    ),
    commodity_vega_ct=(
        65.0, 210.0, 2700.0, 290.0, 290.0, 290.0, 5000.0, 5000.0, 920.0, 920.0,
        100.0, 350.0, 720.0, 500.0, 500.0, 500.0, 65.0, 65.0,
    ),
    # -------------------------------------------------------------------------
    # FX
    # -------------------------------------------------------------------------
    fx_high_vol_currencies=frozenset({"BRL", "RUB", "TRY", "ZAR"}),
    fx_rw=(7.4, 13.6, 14.6),
    fx_hvr=0.52,
    fx_vrw=0.47,
    fx_corr_regular=((0.50, 0.27), (0.27, 0.42)),
    fx_corr_high=((0.85, 0.54), (0.54, 0.50)),
    fx_vega_corr=0.5,
    # -------------------------------------------------------------------------
    # Cross risk class correlation (Rates, CreditQ, CreditNonQ, Equity, Commodity, FX)
    # -------------------------------------------------------------------------
    psi=(
        (1.00, 0.29, 0.13, 0.28, 0.46, 0.32),
        (0.29, 1.00, 0.54, 0.71, 0.52, 0.38),
        (0.13, 0.54, 1.00, 0.46, 0.41, 0.12),
        (0.28, 0.71, 0.46, 1.00, 0.49, 0.35),
        (0.46, 0.52, 0.41, 0.49, 1.00, 0.41),
        (0.32, 0.38, 0.12, 0.35, 0.41, 1.00),
    ),
)
