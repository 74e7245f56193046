'''
End to end calculation tests
'''

from concurrent.futures import ThreadPoolExecutor

from infixcalc import calculator
from infixcalc.calculator import Result, calculate, format_value


def test_values():
    cases = {
        '2 + 3 * 4': 14.0,
        '(2 + 3) * 4': 20.0,
        '2 ^ 3 ^ 2': 64.0,
        '-3 + 5': 2.0,
        '3 - -5': 8.0,
        'sqrt(16)': 4.0,
        'sqrt(2+2)': 2.0,
        '-2 ^ 2': 4.0,
        '2 ^ -1': 0.5,
        '10 / 4': 2.5,
        '1.5e3 / 3': 500.0,
        '2 * (3 + 4) - 10 / 5': 12.0,
        '5 - 3 - 1': 1.0,
        '-(1 + 2) * -sqrt(9)': 9.0,
    }
    for text, value in cases.items():
        assert calculate(text) == Result(True, value, ''), text


def test_result_fields():
    result = calculate('1')
    assert result.ok
    assert result.value == 1.0
    assert result.message == ''


def test_parentheses():
    assert calculate('(2 + 3') == \
        Result(False, 0.0, 'Found extra open parenthesis.')
    assert calculate('2 + 3)') == \
        Result(False, 0.0, 'Found extra close parenthesis.')


def test_no_operands():
    for text in None, '', '   ':
        assert calculate(text) == \
            Result(False, 0.0, 'Expression does not contain any operands.')


def test_division_by_zero():
    assert calculate('5 / 0') == \
        Result(False, 0.0, 'Division by zero is not defined')
    assert calculate('5 / (1 - 1)').message == \
        'Division by zero is not defined'


def test_token_order():
    result = calculate('+ 2')
    assert not result.ok
    assert result.message.endswith(
        "The addition sign '+' cannot be the first in an expression.")
    result = calculate('2 3')
    assert not result.ok
    assert result.message.endswith(
        'The number 3 cannot be after the number 2.')


def test_unfinished():
    assert calculate('2 *') == Result(False, 0.0, 'Incorrect expression')


def test_variables():
    assert calculate('x + 1').message == 'Variable x is not defined'
    assert calculate('x + 1', {'x': 2}) == Result(True, 3.0, '')
    assert calculate('2 * rate ^ 2', {'rate': 3.0}).value == 18.0


def test_domain():
    result = calculate('sqrt(-4)')
    assert not result.ok
    assert result.message.startswith('Result of sqrt')


def test_failures_are_repeatable():
    for text in '(2 + 3', '5 / 0', '2 3', '', 'x', '2 *':
        results = {calculate(text) for _ in range(5)}
        assert len(results) == 1
        assert not results.pop().ok


def test_internal_fault(monkeypatch):
    def boom(tokens):
        raise RuntimeError('boom')
    monkeypatch.setattr(calculator._compiler, 'compile', boom)
    assert calculate('1 + 1') == Result(False, 0.0, 'Something went wrong')


def test_threads():
    texts = ['2 + 3 * 4', '(2 + 3', '3 - -5', '5 / 0', 'sqrt(16)'] * 50
    expected = [calculate(text) for text in texts]
    with ThreadPoolExecutor(max_workers=8) as executor:
        assert list(executor.map(calculate, texts)) == expected


def test_format_value():
    assert format_value(14.0) == '14'
    assert format_value(1 / 3) == '0.333333'
    assert format_value(2 / 3, 3) == '0.667'
    assert format_value(-0.0) == '0'
    assert format_value(1e20) == '1e+20'
    assert format_value(-2.5) == '-2.5'


def test_overflow():
    for text in '1e308 * 10', '1e308 + 1e308', '10 ^ 400':
        result = calculate(text)
        assert not result.ok, text
        assert result.message.endswith('is not a finite real number')
    assert calculate('1e308 * 10').message == \
        'Result of * is not a finite real number'


def test_only_ascii_digits():
    assert calculate('١٢ + 1') == \
        Result(False, 0.0, 'Variable ١٢ is not defined')
    assert calculate('１２ * 2') == \
        Result(False, 0.0, 'Variable １２ is not defined')
