
class VauError(Exception):
    """ Base class for all vau errors"""
    pass


class VauTypeError(VauError):
    """ Raised when a value does not have the expected shape"""

    def __init__(self, expected: str, value):
        from vau.printer import render
        super().__init__(f"expected a {expected}, got {render(value)}")
        self.expected = expected
        self.value = value


class VauReferenceError(VauError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""

    def __init__(self, name):
        super().__init__(f'Undefined variable "{name}"')
        self.name = name


class VauNoEnvironment(VauError):
    """ Raised when a lookup is attempted without any environment"""

    def __init__(self, name):
        super().__init__(f'No environment provided to look-up for "{name}"')
        self.name = name


class VauInvocationError(VauError):
    """ Raised when the operator of a combination is not callable"""

    def __init__(self, value):
        from vau.printer import render
        super().__init__(f'Attempting to call a non-callable "{render(value)}"')
        self.value = value


class VauArityError(VauError):
    """ Raised when a combiner receives the wrong number of operands"""


class VauSyntaxError(VauError):
    """ Raised when source text cannot be read"""

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message if position is None else f"{message} at {position}")
        self.position = position
