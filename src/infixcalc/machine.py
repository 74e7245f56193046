from collections import deque
from types import MappingProxyType
import logging
import math
import operator

from .tokens import Operation, Variable
from .util import (DivisionByZeroError, DomainError, InternalError,
                   MalformedExpressionError, UnboundVariableError,
                   wrap_user_errors)


logger = logging.getLogger(__name__)


def _divide(left, right):
    # Checked before dividing, so -0.0 counts as zero too.
    if right == 0.0:
        raise DivisionByZeroError()
    return left / right


class Machine:
    '''
    Arithmetic stack machine.

    Runs a postfix program produced by the Compiler. One Machine per run: the
    value stack is its own, the variable bindings are only read.
    '''

    # math.pow rather than **, which would give complex numbers for a
    # negative base and fractional exponent.
    BUILTINS = MappingProxyType({
        Operation.UNARY_MINUS: operator.__neg__,
        Operation.ADD: operator.__add__,
        Operation.SUB: operator.__sub__,
        Operation.MUL: operator.__mul__,
        Operation.DIV: _divide,
        Operation.POW: math.pow,
        Operation.SQRT: math.sqrt,
    })

    assert set(BUILTINS) == set(Operation)

    def __init__(self, variables=None):
        '''
        Create empty stack machine.

        :param variables: Mapping of variable name to value.
        '''
        self.stack = deque()
        self.variables = MappingProxyType(dict(variables or {}))

    def run(self, program):
        '''
        Run a whole postfix program and return the single value it leaves.
        '''
        for item in program:
            self.feed(item)
        if len(self.stack) != 1:
            raise MalformedExpressionError(
                '{} value(s) left on stack'.format(len(self.stack)))
        return self.stack[-1]

    def feed(self, item):
        '''
        Stack or run one postfix item.
        '''
        if isinstance(item, Operation):
            self._apply(item)
        elif isinstance(item, Variable):
            self._pshstack(self.load(item.name))
        elif isinstance(item, (int, float)) and not isinstance(item, bool):
            self._pshstack(float(item))
        else:
            raise InternalError('Cannot run {!r}'.format(item))

    def load(self, name):
        '''
        Return the value bound to variable name.
        '''
        try:
            return float(self.variables[name])
        except KeyError:
            raise UnboundVariableError(name) from None

    def _apply(self, operation):
        '''
        Apply operation to stack, popping arguments as needed.
        '''
        # If you don't reverse, you'll do 3 - 5 when you say 5 3 -.
        args = reversed(self._popstack(operation.arity))
        result = self._call(operation, *args)
        logger.debug('%s -> %r', operation, result)
        self._pshstack(result)

    @wrap_user_errors('Result of {1} is not a finite real number', DomainError)
    def _call(self, operation, *args):
        result = type(self).BUILTINS[operation](*args)
        # math.pow raises on overflow, * + - / quietly give inf instead.
        if not math.isfinite(result) and all(map(math.isfinite, args)):
            raise OverflowError('{} overflowed'.format(operation))
        return result

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1):
        '''
        Pop specified number of args from stack, topmost first.
        '''
        if len(self.stack) < n:
            raise MalformedExpressionError(
                'Less than {} element(s) on stack'.format(n))
        return [self.stack.pop() for _ in range(n)]
