from collections import deque
import logging

from .tokens import (ADJACENCY, NEGATION_CONTEXT, OPERATIONS, PRIORITY,
                     TokenKind, Variable, classify, describe)
from .util import (InternalError, NoOperandsError, ParenthesisError,
                   TokenOrderError)


logger = logging.getLogger(__name__)


class Compiler:
    '''
    Infix to postfix (RPN) compiler, Dijkstra's shunting-yard.

    Checks every pair of neighbouring tokens against the grammar as it goes
    and stops on the first error. The compiler only reads its tables, so one
    instance can compile any number of expressions, from any thread; all
    scan state lives in the compile() call.
    '''

    ADJACENCY = ADJACENCY
    PRIORITY = PRIORITY

    def resolve(self, tokens):
        '''
        Yield (token, kind, number or None) for each raw token.

        Same as classify(), except that a '-' in operand position comes out
        as unary minus.
        '''
        previous = TokenKind.UNDEFINED
        for token in tokens:
            current, number = classify(token)
            if current is TokenKind.SUB and previous in NEGATION_CONTEXT:
                current = TokenKind.UNARY_MINUS
            yield token, current, number
            previous = current

    def compile(self, tokens):
        '''
        Return the postfix program for a sequence of raw tokens.

        The program is a tuple of floats, Variables and Operations.
        '''
        program = []
        operations = deque()
        previous, previous_token = TokenKind.UNDEFINED, ''
        operands = 0

        for token, current, number in self.resolve(tokens):
            logger.debug('%r is %s', token, current.value)
            self._check_order(previous, previous_token, current, token)

            if current is TokenKind.NUMBER:
                program.append(number)
                operands += 1
            elif current is TokenKind.VARIABLE:
                program.append(Variable(token))
                operands += 1
            elif current in (TokenKind.OPEN, TokenKind.SQRT):
                operations.append(current)
            elif current is TokenKind.CLOSE:
                while operations and operations[-1] is not TokenKind.OPEN:
                    program.append(self._operation(operations.pop()))
                if not operations:
                    raise ParenthesisError('close')
                operations.pop()
            elif current in OPERATIONS:
                # >= makes every operator, ^ included, left-associative.
                priority = self._priority(current)
                while operations and \
                        self._priority(operations[-1]) >= priority:
                    program.append(self._operation(operations.pop()))
                operations.append(current)
            else:
                raise InternalError('Unexpected kind {}'.format(current))

            previous, previous_token = current, token

        if not operands:
            raise NoOperandsError()

        while operations:
            kind = operations.pop()
            if kind is TokenKind.OPEN:
                raise ParenthesisError('open')
            program.append(self._operation(kind))

        logger.debug('compiled to %s', ' '.join(map(str, program)))
        return tuple(program)

    def _check_order(self, previous, previous_token, current, token):
        '''
        Raise TokenOrderError if current may not follow previous.
        '''
        if current is TokenKind.UNDEFINED:
            raise InternalError('Token {!r} has no kind'.format(token))
        if current in self.ADJACENCY[previous]:
            return
        if previous is TokenKind.UNDEFINED:
            where = 'the first in an expression'
        else:
            where = 'after the ' + describe(previous, previous_token)
        message = 'Incorrect order of operands and operations in the ' \
                  'expression.\nThe {} cannot be {}.'.format(
                      describe(current, token), where)
        raise TokenOrderError(message,
                              (previous, previous_token),
                              (current, token))

    def _priority(self, kind):
        try:
            return self.PRIORITY[kind]
        except KeyError:
            raise InternalError('{} has no priority'.format(kind)) from None

    def _operation(self, kind):
        '''
        Convert a stacked token kind to the Operation it runs as.
        '''
        try:
            return OPERATIONS[kind]
        except KeyError:
            raise InternalError('{} is not an operation'.format(kind)) \
                from None
