'''
Token kinds, the operations they compile to, and the grammar tables.

All tables are built once at import and are read-only afterwards, so they can
be shared between compilers and threads.
'''

from collections import namedtuple
from enum import Enum
from types import MappingProxyType


class TokenKind(Enum):
    NUMBER = 'number'
    VARIABLE = 'variable'
    OPEN = 'open'
    CLOSE = 'close'
    UNARY_MINUS = 'unary minus'
    ADD = 'add'
    SUB = 'sub'
    MUL = 'mul'
    DIV = 'div'
    POW = 'pow'
    SQRT = 'sqrt'
    # Only ever the kind of the token *before* the first one.
    UNDEFINED = 'undefined'


class Operation(Enum):
    '''
    What the machine can apply, with its display symbol and arity.
    '''
    UNARY_MINUS = ('neg', 1)
    ADD = ('+', 2)
    SUB = ('-', 2)
    MUL = ('*', 2)
    DIV = ('/', 2)
    POW = ('^', 2)
    SQRT = ('sqrt', 1)

    def __init__(self, symbol, arity):
        self.symbol = symbol
        self.arity = arity

    def __str__(self):
        return self.symbol


class Variable(namedtuple('Variable', 'name')):
    '''
    Postfix item naming an operand to look up at run time.

    Numbers are plain floats and operations are Operation members.
    '''
    __slots__ = ()

    def __str__(self):
        return self.name


# Exact text of keywords and symbols. Anything else is a number or variable.
KEYWORDS = MappingProxyType({
    '(': TokenKind.OPEN,
    ')': TokenKind.CLOSE,
    '+': TokenKind.ADD,
    '-': TokenKind.SUB,
    '*': TokenKind.MUL,
    '/': TokenKind.DIV,
    '^': TokenKind.POW,
    'sqrt': TokenKind.SQRT,
})

BINARY = frozenset({
    TokenKind.ADD,
    TokenKind.SUB,
    TokenKind.MUL,
    TokenKind.DIV,
    TokenKind.POW,
})
OPERANDS = frozenset({TokenKind.NUMBER, TokenKind.VARIABLE})


def _adjacency():
    '''
    Which kinds may follow which.

    +-------------------+-------------------------------+
    | previous          | permitted current             |
    +-------------------+-------------------------------+
    | number variable ) | + - * / ^ )                   |
    | + - * / ^         | number variable ( sqrt neg    |
    | undefined (       | number variable ( sqrt neg    |
    | neg               | number variable ( sqrt        |
    | sqrt              | (                             |
    +-------------------+-------------------------------+

    undefined is the kind before the first token, so its row lists what may
    start an expression.
    '''
    table = {}
    after_operand = BINARY | {TokenKind.CLOSE}
    for kind in OPERANDS | {TokenKind.CLOSE}:
        table[kind] = after_operand
    start_operand = OPERANDS | {TokenKind.OPEN, TokenKind.SQRT}
    table[TokenKind.UNARY_MINUS] = start_operand
    for kind in BINARY | {TokenKind.UNDEFINED, TokenKind.OPEN}:
        table[kind] = start_operand | {TokenKind.UNARY_MINUS}
    table[TokenKind.SQRT] = frozenset({TokenKind.OPEN})
    return MappingProxyType(table)


ADJACENCY = _adjacency()

# Higher binds tighter, popped first.
PRIORITY = MappingProxyType({
    TokenKind.OPEN: 0,
    TokenKind.CLOSE: 0,
    TokenKind.ADD: 1,
    TokenKind.SUB: 1,
    TokenKind.MUL: 2,
    TokenKind.DIV: 2,
    TokenKind.POW: 3,
    TokenKind.UNARY_MINUS: 4,
    TokenKind.SQRT: 5,
})

OPERATIONS = MappingProxyType({
    TokenKind.UNARY_MINUS: Operation.UNARY_MINUS,
    TokenKind.ADD: Operation.ADD,
    TokenKind.SUB: Operation.SUB,
    TokenKind.MUL: Operation.MUL,
    TokenKind.DIV: Operation.DIV,
    TokenKind.POW: Operation.POW,
    TokenKind.SQRT: Operation.SQRT,
})

# Kinds after which a '-' is negation rather than subtraction
NEGATION_CONTEXT = BINARY | {TokenKind.UNDEFINED, TokenKind.OPEN}

_DESCRIPTIONS = MappingProxyType({
    TokenKind.NUMBER: 'number {}',
    TokenKind.VARIABLE: 'variable {}',
    TokenKind.OPEN: 'open parenthesis',
    TokenKind.CLOSE: 'close parenthesis',
    TokenKind.UNARY_MINUS: "unary minus '-'",
    TokenKind.ADD: "addition sign '+'",
    TokenKind.SUB: "subtraction sign '-'",
    TokenKind.MUL: "multiplication sign '*'",
    TokenKind.DIV: "division sign '/'",
    TokenKind.POW: "power sign '^'",
    TokenKind.SQRT: 'sqrt function',
    TokenKind.UNDEFINED: 'undefined',
})

# A kind added without a table entry must not slip through unnoticed.
assert set(ADJACENCY) == set(TokenKind)
assert set(PRIORITY) == set(TokenKind) - OPERANDS - {TokenKind.UNDEFINED}
assert set(OPERATIONS.values()) == set(Operation)
assert set(_DESCRIPTIONS) == set(TokenKind)
assert not [follower
            for followers
            in ADJACENCY.values()
            for follower
            in followers
            if follower is TokenKind.UNDEFINED]


def parse_number(token):
    '''
    Return token as a float if the *whole* token is a number, else None.
    '''
    try:
        number = float(token)
    except ValueError:
        return None
    # float() is happier than a lexer would be: reject what it only accepts
    # as a courtesy, like surrounding blanks, digit underscores and
    # non-ASCII digits.
    if token != token.strip() or '_' in token or not token.isascii():
        return None
    return number


def classify(token):
    '''
    Return (TokenKind, number or None) for a raw token.
    '''
    kind = KEYWORDS.get(token)
    if kind is not None:
        return kind, None
    number = parse_number(token)
    if number is not None:
        return TokenKind.NUMBER, number
    return TokenKind.VARIABLE, None


def describe(kind, token=''):
    '''
    Human readable name for a token, e.g. "number 2" or "addition sign '+'".
    '''
    return _DESCRIPTIONS[kind].format(token)
