"""Validation errors raised at the boundary of every engine function."""


class CreditSimError(ValueError):
    """Base class for rejected engine inputs."""


class InvalidParameter(CreditSimError):
    """A loan or capacity parameter violates its constraint.

    Carries the failing parameter name and the violated constraint so callers
    can attach the message to the right form field.
    """

    def __init__(self, parameter: str, constraint: str):
        self.parameter = parameter
        self.constraint = constraint
        super().__init__(f"{parameter} {constraint}")

    def to_dict(self) -> dict[str, str]:
        return {
            "parameter": self.parameter,
            "constraint": self.constraint,
            "message": str(self),
        }


class InvalidIncome(InvalidParameter):
    """Net monthly income is missing or not positive."""

    def __init__(self, constraint: str = "must be greater than 0"):
        super().__init__("net_monthly_income", constraint)
