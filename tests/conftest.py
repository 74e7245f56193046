import sys

from pytest import Item, fixture

from infixcalc.cli import CLI
from infixcalc.compiler import Compiler
from infixcalc.lexer import Lexer


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every passing assertion, in case we later need to audit a run.

    Off unless asked for: pytest -rP -o enable_assertion_pass_hook=true
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!
    print('actual', item.name + ':' + str(lineno),
          # Drop pytest's full-diff hint lines.
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def compile_():
    '''
    Compile expression text straight to its postfix program.
    '''
    lexer = Lexer()
    compiler = Compiler()

    def compile_(text):
        return compiler.compile(lexer.tokenize(text))
    return compile_


@fixture
def run_cli(capsys, monkeypatch):
    '''
    Run the CLI with args, return (status, stdout, stderr).
    '''
    def run_cli(*args):
        # cli.py took its stderr at import, before capsys swapped sys.stderr.
        monkeypatch.setattr('infixcalc.cli.stderr', sys.stderr)
        status = CLI().run(args=list(args))
        captured = capsys.readouterr()
        return status, captured.out, captured.err
    return run_cli
