"""Fixed-payment annuity math shared by the schedule and the capacity estimator.

Pure functions. Decimal in, Decimal out. No rounding: callers round at
presentation time only.
"""

from decimal import Decimal

from creditsim.engine.errors import InvalidParameter

ZERO = Decimal("0")
ONE = Decimal("1")
MONTHS_PER_YEAR = 12


def monthly_rate(annual_rate_percent: Decimal) -> Decimal:
    """Nominal annual percent (e.g. 3.35) to a monthly decimal rate."""
    return annual_rate_percent / Decimal(100) / Decimal(MONTHS_PER_YEAR)


def annuity_factor(rate: Decimal, n_months: int) -> Decimal:
    """Present value of 1 paid monthly for ``n_months`` at ``rate``.

    a(n, r) = (1 - (1 + r)^-n) / r, which degenerates to n when r == 0.
    """
    if rate == 0:
        return Decimal(n_months)
    return (ONE - (ONE + rate) ** (-n_months)) / rate


def annuity_payment(principal: Decimal, rate: Decimal, n_months: int) -> Decimal:
    """Constant payment that repays ``principal`` over ``n_months``.

    M = P * r / (1 - (1 + r)^-n); straight-line P / n at a 0% rate.
    """
    if n_months <= 0:
        raise ValueError("n_months must be positive")
    if rate == 0:
        return principal / Decimal(n_months)
    return principal * rate / (ONE - (ONE + rate) ** (-n_months))


def annuity_principal(payment: Decimal, rate: Decimal, n_months: int) -> Decimal:
    """Principal repaid by a constant ``payment`` over ``n_months``.

    Inverse of :func:`annuity_payment`: P = M * a(n, r).
    """
    if n_months <= 0:
        raise ValueError("n_months must be positive")
    return payment * annuity_factor(rate, n_months)


# ---- Boundary validation helpers ----

def to_decimal(name: str, value) -> Decimal:
    """Coerce an int/float/str/Decimal input to a finite Decimal."""
    if isinstance(value, bool):
        raise InvalidParameter(name, "must be a number")
    try:
        # str() keeps 3.35 as Decimal("3.35") rather than its binary expansion
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (ArithmeticError, ValueError, TypeError):
        raise InvalidParameter(name, "must be a number")
    if not result.is_finite():
        raise InvalidParameter(name, "must be finite")
    return result


def to_whole(name: str, value) -> int:
    """Coerce a whole-number input (months, years) to int."""
    number = to_decimal(name, value)
    if number != number.to_integral_value():
        raise InvalidParameter(name, "must be a whole number")
    return int(number)


def require_positive(name: str, value) -> None:
    if value <= 0:
        raise InvalidParameter(name, "must be greater than 0")


def require_non_negative(name: str, value) -> None:
    if value < 0:
        raise InvalidParameter(name, "must be greater than or equal to 0")
