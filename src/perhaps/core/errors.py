ABSENT_ACCESS_MESSAGE = "attempted to access value of an absent optional"


class AbsentValueError(ValueError):
    """Raised when the payload of an absent optional is accessed."""

    def __init__(self, message: str = ABSENT_ACCESS_MESSAGE):
        super().__init__(message)
