from collections import namedtuple
import logging

from .compiler import Compiler
from .lexer import Lexer
from .machine import Machine
from .util import CalcError, InternalError


logger = logging.getLogger(__name__)


Result = namedtuple('Result', 'ok value message')
Result.__doc__ = '''
Outcome of one calculation.

value is only meaningful when ok; message is only set when not.
'''

# Tables only, shared by every call.
_lexer = Lexer()
_compiler = Compiler()


def evaluate(expression, variables=None):
    '''
    Tokenize, compile and run expression, raising CalcError on failure.
    '''
    tokens = _lexer.tokenize(expression)
    program = _compiler.compile(tokens)
    return Machine(variables).run(program)


def calculate(expression, variables=None):
    '''
    Evaluate expression and return a Result. Never raises.

    :param expression: Infix expression text. None is the same as empty.
    :param variables: Mapping of variable name to value.
    '''
    try:
        value = evaluate(expression, variables)
    except CalcError as e:
        logger.debug('%r failed: %s', expression, e.message)
        return Result(False, 0.0, e.message)
    except Exception:
        logger.exception('Internal fault evaluating %r', expression)
        return Result(False, 0.0, InternalError().message)
    return Result(True, value, '')


def format_value(value, precision=6):
    '''
    Format value for display with at most precision significant digits.
    '''
    text = '{:.{}g}'.format(value, max(int(precision), 1))
    # 0 * -1 is -0.0, nobody wants to see that.
    return '0' if text == '-0' else text
