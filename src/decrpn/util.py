from functools import wraps


class RPNError(Exception):
    pass


class ParseError(RPNError):
    '''
    Segment of a line that is neither an operator nor a decimal literal.
    '''
    def __init__(self, segment, reason):
        super().__init__("Couldn't parse {0!r}: {1}".format(segment, reason))
        self.segment = segment
        self.reason = reason


class EvalError(RPNError):
    pass


class InsufficientOperands(EvalError):
    def __init__(self):
        super().__init__('Insufficient number of operands')


class DivisionByZero(EvalError):
    def __init__(self):
        super().__init__('Division by zero!')


class EmptyStack(EvalError):
    def __init__(self):
        super().__init__('Empty stack')


def wrap_user_errors(fmt, error=RPNError):
    '''
    Ugly hack decorator that converts exceptions to calculator errors.

    Passes through RPNErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
