'''
Infix evaluator tests
'''

import math

import regex

from keycalc.evaluator import Evaluator
from keycalc.util import EvaluationError

from pytest import approx, mark, raises


@mark.parametrize('expression,expected', [
    ('2+3', 5),
    ('2+3*4', 14),
    ('(2+3)*4', 20),
    ('10-4-3', 3),
    ('48/4/2', 6),
    ('15/4', 3.75),
    ('2*-3', -6),
    ('-(2+3)', -5),
    ('5-+3', 2),
    ('+-3', -3),
    ('.5+1.', 1.5),
    ('007', 7),
    ('010', 10),
    ('2**3**2', 512),
    ('2**-2', 0.25),
    ('(-2)**2', 4),
    ('((((1))))', 1),
])
def test_valid(expression, expected):
    assert Evaluator().evaluate(expression) == approx(expected)


def test_ieee():
    assert Evaluator().evaluate('0.1+0.2') == 0.1 + 0.2


@mark.parametrize('expression', [
    '',
    '5+',
    '*5',
    '(3',
    '3)',
    '()',
    '1.2.3',
    '.',
    '5--3',
    '++3',
    '2//3',
    '-2**2',
    '2(3)',
])
def test_malformed(expression):
    with raises(EvaluationError):
        Evaluator().evaluate(expression)


def test_unbalanced_message():
    with raises(EvaluationError, match='Unbalanced parentheses'):
        Evaluator().evaluate('(1+2')


def test_trailing_message():
    with raises(EvaluationError, match=regex.escape("Unexpected '--'")):
        Evaluator().evaluate('5--3')


def test_division_by_zero():
    e = Evaluator()
    assert e.evaluate('1/0') == math.inf
    assert e.evaluate('-1/0') == -math.inf
    assert e.evaluate('1/-0') == -math.inf
    assert math.isnan(e.evaluate('0/0'))


def test_power_corners():
    e = Evaluator()
    assert e.evaluate('0**-1') == math.inf
    assert e.evaluate('10**400') == math.inf
    assert math.isnan(e.evaluate('(0-8)**(1/3)'))
    assert math.isnan(e.evaluate('1**(1/0)'))


def test_deep_nesting():
    with raises(EvaluationError):
        Evaluator().evaluate('(' * 5000 + '1' + ')' * 5000)


def test_reusable():
    e = Evaluator()
    with raises(EvaluationError):
        e.evaluate('(')
    assert e.evaluate('6*7') == 42
