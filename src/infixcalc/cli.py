from os import isatty, path
from sys import stdin, stdout, stderr
from argparse import (ArgumentParser, ArgumentTypeError, REMAINDER,
                      OPTIONAL)
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .calculator import calculate, format_value
from .compiler import Compiler
from .lexer import Lexer
from .tokens import TokenKind, classify
from .util import CalcError


class InteractiveInput:
    def __init__(self, prompt, history=None):
        self.prompt = prompt
        self.history = history

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    history=self.history,
                                    enable_suspend=True,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


def _binding(text):
    '''
    Parse a NAME=VALUE command line variable binding.
    '''
    name, sep, value = text.partition('=')
    name = name.strip()
    if not sep or not name:
        raise ArgumentTypeError('expected NAME=VALUE, got {!r}'.format(text))
    kind, _ = classify(name)
    if kind is not TokenKind.VARIABLE:
        raise ArgumentTypeError('{!r} cannot be a variable name'.format(name))
    try:
        return name, float(value)
    except ValueError:
        raise ArgumentTypeError('{!r} is not a number'.format(value)) \
            from None


class CLI:
    '''
    Command line interface to the calculator.

    Reads one expression per line and prints its value, or why it has none.
    '''

    DEFAULT_PROMPT = '> '
    DEFAULT_PRECISION = 6
    HISTORY_FILE = '~/.infixcalc_history'

    def dumper(self):
        '''
        Dump tokens, their kinds and the compiled program of each expression.
        '''
        lexer = Lexer()
        compiler = Compiler()
        print('<token>\t<kind>')
        for line in self._lines():
            tokens = lexer.tokenize(line)
            for token, kind, _ in compiler.resolve(tokens):
                print(repr(token), kind.value, sep='\t')
            try:
                program = compiler.compile(tokens)
            except CalcError as e:
                self._fail(e.message)
            else:
                print('=>', *program)

    def executor(self):
        '''
        Evaluate each expression, printing its value or its error.
        '''
        for line in self._lines():
            result = calculate(line, self.variables)
            if result.ok:
                print(format_value(result.value, self.args.precision),
                      flush=True)
            else:
                self._fail(result.message)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.LEXEME)

    def _lines(self):
        '''
        Yield non-blank expressions from whatever the input is.
        '''
        expressions = self.args.expressions
        if expressions is stdin:
            expressions = self._prompting_input()
        for line in expressions:
            if line.strip():
                yield line

    def _fail(self, message):
        self.failures += 1
        print(message, file=stderr, flush=True)

    def _prompting_input(self):
        '''
        Return prompting input if either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            history = FileHistory(path.expanduser(self.HISTORY_FILE))
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=history)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Infix calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=int,
                                          default=self.DEFAULT_PRECISION,
                                          help='significant digits shown')
        self.argument_parser.add_argument('-d', '--define',
                                          type=_binding,
                                          action='append',
                                          default=[],
                                          dest='variables',
                                          metavar='NAME=VALUE')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.

        Return the exit status: 1 if any expression failed.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.verbose:
            logging.basicConfig(level=logging.DEBUG, stream=stderr)
        self.variables = dict(self.args.variables)
        self.failures = 0
        try:
            self.args.action()
        except KeyboardInterrupt:
            return 1
        return 1 if self.failures else 0
