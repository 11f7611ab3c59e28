'''
Keypad calculator.

A sixteen key keypad (digits, + - * /, C and =) feeds an expression buffer,
evaluated on = with plain IEEE double arithmetic. Results seed the next
expression. Malformed expressions show Error until the next keypress.

No scientific functions, no memory, no history. For those, use a real
calculator.
'''

from .cli import CLI
from .engine import Engine, KEYPAD
from .evaluator import Evaluator
from .keypad import Keypad
from .lexer import Lexer
from .util import CalcError, EvaluationError


__all__ = ('Engine', 'KEYPAD', 'Evaluator', 'Lexer', 'Keypad', 'CLI',
           'CalcError', 'EvaluationError')
