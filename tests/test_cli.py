'''
Command line interface tests
'''

from infixcalc.lexer import Lexer

from pytest import raises


def test_expressions(run_cli):
    status, out, err = run_cli('-e', '2 + 3 * 4', 'sqrt(16)')
    assert status == 0
    assert out == '14\n4\n'
    assert err == ''


def test_failure_carries_on(run_cli):
    status, out, err = run_cli('-e', '(2 + 3', '1 / 4')
    assert status == 1
    assert out == '0.25\n'
    assert err == 'Found extra open parenthesis.\n'


def test_blank_expressions_are_skipped(run_cli):
    status, out, err = run_cli('-e', '', '  ', '1')
    assert status == 0
    assert out == '1\n'


def test_precision(run_cli):
    assert run_cli('-k', '3', '-e', '2 / 3')[1] == '0.667\n'


def test_define(run_cli):
    status, out, _ = run_cli('-d', 'x=2', '--define', 'y = 0.5',
                             '-e', 'x ^ 3 * y')
    assert (status, out) == (0, '4\n')


def test_undefined(run_cli):
    status, _, err = run_cli('-e', 'x ^ 3')
    assert status == 1
    assert err == 'Variable x is not defined\n'


def test_bad_define(run_cli):
    for binding in 'x', '=2', '2=3', 'sqrt=1', 'x=two':
        with raises(SystemExit):
            run_cli('-d', binding, '-e', '1')


def test_dump(run_cli):
    status, out, _ = run_cli('-D', '-e', '-3 + 5')
    assert status == 0
    assert out.splitlines() == [
        '<token>\t<kind>',
        "'-'\tunary minus",
        "'3'\tnumber",
        "'+'\tadd",
        "'5'\tnumber",
        '=> 3.0 neg 5.0 +',
    ]


def test_dump_error(run_cli):
    status, _, err = run_cli('-D', '-e', '2 3')
    assert status == 1
    assert err.endswith('The number 3 cannot be after the number 2.\n')


def test_raw_grammar(run_cli):
    status, out, _ = run_cli('-G', '-e')
    assert status == 0
    assert out == Lexer.LEXEME + '\n'


def test_dump_tells_minus_apart(run_cli):
    _, out, _ = run_cli('-D', '-e', '3 - -5')
    assert out.splitlines()[1:] == [
        "'3'\tnumber",
        "'-'\tsub",
        "'-'\tunary minus",
        "'5'\tnumber",
        '=> 3.0 5.0 neg -',
    ]
