'''
Infix arithmetic over IEEE doubles, by recursive descent.

Grammar, loosest binding first::

    expression     := multiplicative (('+' | '-') multiplicative)*
    multiplicative := power (('*' | '/') power)*
    power          := unary | primary ('**' power)?
    unary          := ('+' | '-') unary | primary
    primary        := number | '(' expression ')'

A signed operand cannot be the base of '**' (-2**2 is an error, not -4 or
4), but may be its exponent (2**-2).
'''

import math

from .lexer import Lexer
from .util import EvaluationError, wrap_user_errors


def _divide(left, right):
    '''
    IEEE division: never raises, signed infinity or NaN on zero divisor.
    '''
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1, right)
    return left / right


def _power(base, exponent):
    '''
    IEEE power with ECMAScript corner cases: never raises.
    '''
    if math.isnan(exponent):
        return math.nan
    if abs(base) == 1 and math.isinf(exponent):
        return math.nan
    try:
        return math.pow(base, exponent)
    except OverflowError:
        odd = exponent.is_integer() and exponent % 2 == 1
        return -math.inf if base < 0 and odd else math.inf
    except (ValueError, ZeroDivisionError):
        # Negative base with a fractional exponent.
        if base != 0:
            return math.nan
        # Zero base with a negative exponent.
        odd = exponent.is_integer() and exponent % 2 == 1
        return math.copysign(math.inf, base) if odd else math.inf


class Evaluator:
    '''
    Evaluate sanitized keypad expressions to floats.

    Instances hold parse state for the expression currently being evaluated
    only; reusable, but not reentrant.
    '''

    BINARY = {
        '+': float.__add__,
        '-': float.__sub__,
        '*': float.__mul__,
        '/': _divide,
        '**': _power,
    }

    def __init__(self, lexer=None):
        self.lexer = lexer or Lexer()
        self._tokens = []
        self._position = 0

    @wrap_user_errors('Cannot evaluate {1!r}', error=EvaluationError)
    def evaluate(self, expression):
        '''
        Evaluate whole expression, which must already be sanitized.

        :raises EvaluationError: on malformed expressions.
        '''
        self._tokens = list(self.lexer.tokens(expression))
        self._position = 0
        if not self._tokens:
            raise EvaluationError('Empty expression')
        result = self._expression()
        if self._peek() is not None:
            raise EvaluationError(
                'Unexpected {!r}'.format(self._peek()[1]))
        return result

    def _peek(self):
        if self._position < len(self._tokens):
            return self._tokens[self._position]
        return None

    def _next(self):
        token = self._peek()
        if token is None:
            raise EvaluationError('Unexpected end of expression')
        self._position += 1
        return token

    def _accept(self, kind, *texts):
        '''
        Consume and return next token if of kind, and one of texts if given.
        '''
        token = self._peek()
        if token is None or token[0] != kind:
            return None
        if texts and token[1] not in texts:
            return None
        self._position += 1
        return token

    def _expression(self):
        result = self._multiplicative()
        while True:
            token = self._accept('operator', '+', '-')
            if token is None:
                return result
            result = self.BINARY[token[1]](result, self._multiplicative())

    def _multiplicative(self):
        result = self._power()
        while True:
            token = self._accept('operator', '*', '/')
            if token is None:
                return result
            result = self.BINARY[token[1]](result, self._power())

    def _power(self):
        token = self._peek()
        if token is not None and token[0] == 'operator' and \
           token[1] in ('+', '-'):
            base = self._unary()
            if self._accept('operator', '**'):
                raise EvaluationError(
                    'Signed base needs parentheses before **')
            return base
        base = self._primary()
        if self._accept('operator', '**'):
            # Right associative: 2**3**2 is 2**9
            return self.BINARY['**'](base, self._power())
        return base

    def _unary(self):
        if self._accept('operator', '-'):
            return -self._unary()
        if self._accept('operator', '+'):
            return self._unary()
        return self._primary()

    def _primary(self):
        kind, text = self._next()
        if kind == 'number':
            return self._iconvert(text)
        if kind == 'lparen':
            result = self._expression()
            if not self._accept('rparen'):
                raise EvaluationError('Unbalanced parentheses')
            return result
        raise EvaluationError('Unexpected {!r}'.format(text))

    @wrap_user_errors('Cannot convert {1}', error=EvaluationError)
    def _iconvert(self, number):
        '''
        Convert number lexeme to float.

        Always decimal, leading zeros are insignificant: 010 is 10, not 8.
        '''
        return float(number)
