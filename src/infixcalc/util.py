from functools import wraps


class CalcError(Exception):
    '''
    Any failure to turn an expression into a value.

    ``args[0]`` is always the message meant for the user.
    '''

    @property
    def message(self):
        return self.args[0] if self.args else ''


class NoOperandsError(CalcError):
    def __init__(self):
        super().__init__('Expression does not contain any operands.')


class ParenthesisError(CalcError):
    def __init__(self, side):
        '''
        :param side: ``'open'`` or ``'close'``, whichever one is left over.
        '''
        super().__init__('Found extra {} parenthesis.'.format(side))
        self.side = side


class TokenOrderError(CalcError):
    '''
    A token kind that may not follow the previous token kind.
    '''

    def __init__(self, message, previous, current):
        super().__init__(message)
        # (kind, text) pairs
        self.previous = previous
        self.current = current


class MalformedExpressionError(CalcError):
    def __init__(self, *details):
        super().__init__('Incorrect expression', *details)


class DivisionByZeroError(CalcError):
    def __init__(self):
        super().__init__('Division by zero is not defined')


class UnboundVariableError(CalcError):
    def __init__(self, name):
        super().__init__('Variable {} is not defined'.format(name))
        self.name = name


class DomainError(CalcError):
    pass


class InternalError(CalcError):
    '''
    Broken invariant. Never raised for bad user input.
    '''

    def __init__(self, *details):
        super().__init__('Something went wrong', *details)


def wrap_user_errors(fmt, error=CalcError):
    '''
    Decorator that converts foreign exceptions to ``error``.

    Passes through CalcErrors. ``fmt`` is formatted with the call's arguments
    to produce the message; the original exception is kept as the second
    argument and as ``__cause__``.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator
