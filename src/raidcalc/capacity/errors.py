from typing import Optional


class CapacityError(ValueError):
    """Base class for every validation failure raised by the capacity engine."""

    def __init__(self, message: str, scheme_id: Optional[str] = None,
                 required: Optional[int] = None, actual: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.scheme_id = scheme_id
        self.required = required
        self.actual = actual

    def to_dict(self):
        return {
            "error": type(self).__name__,
            "message": self.message,
            "scheme_id": self.scheme_id,
            "required": self.required,
            "actual": self.actual,
        }


class UnknownSchemeError(CapacityError):
    def __init__(self, scheme_id: str):
        super().__init__(f"Unknown storage scheme: {scheme_id}", scheme_id=scheme_id)


class InsufficientDrivesError(CapacityError):
    def __init__(self, scheme_id: str, name: str, required: int, actual: int,
                 unit: str = "drives"):
        super().__init__(
            f"{name} requires at least {required} {unit}",
            scheme_id=scheme_id,
            required=required,
            actual=actual,
        )


class ParityMismatchError(CapacityError):
    def __init__(self, scheme_id: str, name: str, actual: int):
        super().__init__(
            f"{name} requires an even number of drives",
            scheme_id=scheme_id,
            actual=actual,
        )


class TopologyMismatchError(CapacityError):
    pass


class InvalidDriveSizeError(CapacityError):
    pass
