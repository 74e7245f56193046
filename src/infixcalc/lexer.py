from functools import reduce
import operator

import regex


class Lexer:
    '''
    Lexer for infix arithmetic expressions.

    Splits text into raw tokens only; what a token means is decided by the
    classifier. Holds no state between calls, so one instance may be shared.
    '''
    # Characters that are always a token on their own, whatever surrounds them
    SYMBOLS = '+-*/^()'
    # Number, as far as float() would read it. May still be followed by junk,
    # that's the classifier's problem.
    NUMBER = r'''
              (?:
                  # 1, 12, 12. (notice trailing dot), 1.3
                  \d+
                  (?:
                      \.
                      \d*
                  )?
              |
                  # .2
                  \.
                  \d+
              )
              # 1e3, 1.5E-7, but never a dangling 1e
              (?:
                  [eE]
                  [+-]?
                  \d+
              )?
              '''
    SYMBOL = r'[' + regex.escape(SYMBOLS) + r']'
    # Anything up to whitespace or a symbol: sqrt, x, 1x2, a lone dot, ...
    WORD = r'[^\s' + regex.escape(SYMBOLS) + r']+'
    SPACE = r'\s+'

    # All possible lexemes. Order matters, numbers win over words.
    LEXEME = r'(?<space>' + SPACE + r')|' \
             r'(?<symbol>' + SYMBOL + r')|' \
             r'(?<number>' + NUMBER + r')|' \
             r'(?<word>' + WORD + r')'
    # Default regex flags for matching lexemes. ASCII keeps \d to 0-9, so
    # Arabic-Indic or full-width digits are words, not numbers.
    FLAGS = reduce(operator.__or__,
                   {regex.ASCII,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def __init__(self):
        self.pattern = regex.compile(type(self).LEXEME,
                                     flags=type(self).FLAGS)

    def lex(self, line):
        '''
        Take a line and yield all lexeme matches, whitespace included.
        '''
        position = 0
        while line and position < len(line):
            match = self.pattern.match(line, position)
            # Every character is at least a word or a space.
            assert match is not None and match.end() > position
            yield match
            position = match.end()

    def kind(self, match):
        '''
        Return the name of the group that matched: space, symbol, number or
        word.
        '''
        return match.lastgroup

    def tokenize(self, line):
        '''
        Return all raw tokens in line, whitespace dropped.

        None and empty input give no tokens.
        '''
        return [match.group(0)
                for match
                in self.lex(line)
                if self.kind(match) != 'space']


_lexer = Lexer()


def tokenize(line):
    '''
    Split line into raw tokens with a shared Lexer.
    '''
    return _lexer.tokenize(line)
