from decimal import Decimal
from functools import wraps
import math


class CalcError(Exception):
    pass


class EvaluationError(CalcError):
    '''
    Expression could not be evaluated to a number.
    '''
    pass


def wrap_user_errors(fmt, error=CalcError):
    '''
    Decorator that converts unexpected exceptions to user errors.

    Passes through CalcErrors. The original exception is kept as the second
    argument of the raised error.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator


def format_number(number):
    '''
    Render a float the way a JavaScript Number prints.

    Shortest round-tripping digits, no trailing .0 on integers, plain
    notation for decimal exponents in [-7, 21), scientific otherwise.
    '''
    if math.isnan(number):
        return 'NaN'
    if math.isinf(number):
        return 'Infinity' if number > 0 else '-Infinity'
    # Also catches -0.0
    if number == 0:
        return '0'
    sign, digits, exponent = Decimal(repr(number)).normalize().as_tuple()
    digits = ''.join(map(str, digits))
    # Position of the decimal point relative to the start of digits
    point = exponent + len(digits)
    if len(digits) <= point <= 21:
        text = digits + '0' * (point - len(digits))
    elif 0 < point <= 21:
        text = digits[:point] + '.' + digits[point:]
    elif -6 < point <= 0:
        text = '0.' + '0' * -point + digits
    else:
        mantissa = digits[0]
        if len(digits) > 1:
            mantissa += '.' + digits[1:]
        text = '{}e{}{}'.format(mantissa,
                                '+' if point > 0 else '-',
                                abs(point - 1))
    return '-' + text if sign else text
