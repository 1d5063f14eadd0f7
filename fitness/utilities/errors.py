"""Error types raised by the fitness domain."""


class FitnessError(Exception):
    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidDimension(FitnessError, ValueError):
    """A body measurement cannot be used (e.g. height <= 0 for BMI)."""


class InvalidParameter(FitnessError, ValueError):
    """An activity or profile parameter is outside its accepted range."""


__all__ = ["FitnessError", "InvalidDimension", "InvalidParameter"]
