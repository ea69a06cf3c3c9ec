
class CinderError(Exception):
    """ Base class for all Cinder errors"""
    pass

class CinderSyntaxError(CinderError):
    """ Raised when input text cannot be parsed"""

class CinderUnboundSymbol(CinderError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name):
        super().__init__(f"Cannot lookup unbound symbol {name}")
        self.name = name

class CinderMalformedExpression(CinderError):
    """ Raised when a form does not have the shape its operator requires"""

class CinderEmptyLambdaBody(CinderError):
    """ Raised when a lambda form has no body expressions"""

class CinderArityError(CinderError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class CinderTypeError(CinderError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class CinderZeroDivisionError(CinderError):
    """ Raised when an integer is divided by zero"""

class CinderOverflowError(CinderError):
    """ Raised when an integer leaves the signed 64-bit range"""
