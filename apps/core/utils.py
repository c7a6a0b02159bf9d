"""
Core utility functions for the loan application demo.

Contains the EMI calculation and the rupee rounding used for display.
"""

from decimal import ROUND_HALF_UP, Decimal

DEFAULT_INTEREST_RATE = 8.5
DEFAULT_TENURE_YEARS = 15


def calculate_emi(
    principal: float,
    annual_rate: float = DEFAULT_INTEREST_RATE,
    tenure_years: int = DEFAULT_TENURE_YEARS,
) -> float:
    """
    Calculate EMI using the amortizing loan formula.

    EMI = P × r × (1+r)^n / ((1+r)^n - 1)

    Where:
        P = principal (loan amount)
        r = monthly interest rate (annual_rate / 100 / 12)
        n = tenure in months (tenure_years * 12)

    Inputs are not validated; callers only pass amounts that already
    passed is_valid_amount.

    Args:
        principal: Loan amount.
        annual_rate: Annual interest rate as percentage (e.g., 8.5 for 8.5%).
        tenure_years: Repayment period in years.

    Returns:
        Monthly installment as an unrounded float.
    """
    monthly_rate = annual_rate / 100 / 12
    months = tenure_years * 12

    # 0% interest: straight-line repayment
    if monthly_rate == 0:
        return principal / months

    power_term = (1 + monthly_rate) ** months
    return principal * monthly_rate * power_term / (power_term - 1)


def round_half_up(amount: float) -> int:
    """
    Round an amount to the nearest whole rupee, halves rounding up.

    Examples:
        round_half_up(9847.5) → 9848
        round_half_up(9847.49) → 9847
    """
    return int(Decimal(str(amount)).quantize(Decimal('1'), rounding=ROUND_HALF_UP))
