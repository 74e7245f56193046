'''
Infix calculator.

Evaluates arithmetic expressions such as ``-3 + sqrt(2 ^ 4) / (1 - x)``:
numbers, + - * / ^, unary minus, sqrt and parentheses, with optional named
variables. Malformed input is explained rather than just rejected.

The expression goes through four stages:

- the Lexer splits text into raw tokens,
- classify() tells what each token is,
- the Compiler checks token order and turns the tokens into a postfix (RPN)
  program with the shunting-yard algorithm,
- the Machine runs that program on a value stack.

calculate() runs them all and wraps the outcome in a Result.

^ is left-associative: 2 ^ 3 ^ 2 is (2 ^ 3) ^ 2 = 64.
'''

from .calculator import Result, calculate, evaluate, format_value
from .cli import CLI
from .compiler import Compiler
from .lexer import Lexer, tokenize
from .machine import Machine
from .tokens import Operation, TokenKind, Variable, classify
from .util import (CalcError, DivisionByZeroError, DomainError,
                   InternalError, MalformedExpressionError, NoOperandsError,
                   ParenthesisError, TokenOrderError, UnboundVariableError)


__all__ = ('calculate', 'evaluate', 'format_value', 'Result',
           'Lexer', 'tokenize', 'classify', 'TokenKind', 'Operation',
           'Variable', 'Compiler', 'Machine', 'CLI',
           'CalcError', 'NoOperandsError', 'ParenthesisError',
           'TokenOrderError', 'MalformedExpressionError',
           'DivisionByZeroError', 'UnboundVariableError', 'DomainError',
           'InternalError')
