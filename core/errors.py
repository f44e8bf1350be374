"""
Error taxonomy for the scoring and matching engine.

ValidationError  - the caller supplied malformed input (answers, scores).
ConfigurationError - a bundled catalog is broken; fatal at startup.
"""


class CareerPathError(Exception):
    """Base class for all engine errors."""


class ValidationError(CareerPathError, ValueError):
    def __init__(self, errors):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class ConfigurationError(CareerPathError, ValueError):
    pass
