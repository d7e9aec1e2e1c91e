
class NanoError(Exception):
    """ Base class for all Nano errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NanoUnboundVariable(NanoError):
    """ Raised when a variable is used that is not bound in the environment"""

    def __init__(self, name: str, reason: str | None = None):
        message = f"unbound variable: {name}"
        if reason is not None:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.name = name


class NanoTypeError(NanoError):
    """ Raised when an operand or argument has the wrong shape"""


class NanoEmptyListError(NanoError):
    """ Raised when head is applied to the empty list"""


class NanoInternalError(NanoError):
    """ Raised when the evaluator meets an expression it does not recognise"""


class NanoSyntaxError(NanoError):
    """ Raised when source text cannot be parsed"""

    def __init__(self, message: str, pos: int | None = None):
        if pos is not None:
            message = f"{message} at {pos}"
        super().__init__(message)
        self.pos = pos
