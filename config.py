import logging
from typing import Optional

APP_NAME = "Tsumitate: Investment & Cash-Flow Simulator"

# Set to True to get per-call debug output from the calculators
DEBUG_LOGGING = False

# Default inputs for the calculators. Investment amounts are in yen;
# income amounts are in income units (10,000 yen).
DEFAULTS = {
    # Investment simulation
    "monthly_amount": 30_000,
    "years": 20,
    "annual_return": 5.0,           # % per year, nominal

    # Income / expense simulation
    "monthly_salary": 30,           # gross, per month
    "bonus": 80,                    # per year
    "monthly_expense": 20,
    "income_years": 10,
    "monthly_mode": True,           # salary entered per month instead of per year

    # User settings
    "settings": {
        "consider_fees": False,
        "fee_rate": 0.5,            # % per year
        "consider_tax": False,
        "is_nisa": True,            # NISA accounts are tax-free
    },
}

# Fee rates offered in the settings screen (% per year)
FEE_RATES = [0.1, 0.3, 0.5, 1.0]

# Tax on investment gains outside NISA (%)
TAXABLE_ACCOUNT_RATE = 20.315

# Slider bounds used by the front end to clamp inputs
LIMITS = {
    "monthly_amount": (1_000, 300_000, 1_000),
    "years": (1, 50, 1),
    "annual_return": (0.0, 10.0, 0.5),
    "monthly_salary": (10, 200, 1),
    "bonus": (0, 500, 5),
    "monthly_expense": (5, 150, 1),
    "income_years": (1, 40, 1),
}


def configure_logging(debug: Optional[bool] = None):
    level = logging.DEBUG if (DEBUG_LOGGING if debug is None else debug) else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
