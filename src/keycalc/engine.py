import math

from .evaluator import Evaluator
from .util import EvaluationError, format_number


# Keypad symbols, row by row, four per row.
KEYPAD = (
    '7', '8', '9', '/',
    '4', '5', '6', '*',
    '1', '2', '3', '-',
    'C', '0', '=', '+',
)


class Engine:
    '''
    Calculator state machine driven one keypress at a time.

    Keypresses accumulate into an expression buffer, which '=' evaluates and
    replaces with its result, so results seed the next expression. 'C'
    resets everything. A failed evaluation shows Error until the next
    keypress.
    '''

    CLEAR = 'C'
    EVALUATE = '='
    DEFAULT_DISPLAY = '0'
    ERROR_DISPLAY = 'Error'

    def __init__(self, strict=False, evaluator=None):
        '''
        Create idle calculator, displaying 0.

        :param strict: Treat infinite and NaN results as errors, instead of
                       displaying them.
        :param evaluator: Evaluator to use instead of a default one.
        '''
        self.strict = strict
        self.evaluator = evaluator or Evaluator()
        self.buffer = ''
        self.display = type(self).DEFAULT_DISPLAY
        self.error = False
        # Why the last evaluation failed, if it did.
        self.last_error = None

    def press(self, token):
        '''
        Handle one keypress.

        Any token other than C and = is appended as is, unvalidated.
        '''
        if token == type(self).CLEAR:
            self.clear()
        elif token == type(self).EVALUATE:
            if self.buffer:
                try:
                    self._evaluate()
                except EvaluationError as e:
                    self.error = True
                    self.last_error = e
                    self.buffer = ''
        else:
            if self.error:
                self.error = False
                self.last_error = None
                self.buffer = ''
            self.buffer += token

    def clear(self):
        '''
        Reset to idle state.
        '''
        self.buffer = ''
        self.display = type(self).DEFAULT_DISPLAY
        self.error = False
        self.last_error = None

    def _evaluate(self):
        sanitized = self.evaluator.lexer.sanitize(self.buffer)
        result = self.evaluator.evaluate(sanitized)
        if self.strict and not math.isfinite(result):
            raise EvaluationError(
                'Result of {!r} is not finite'.format(sanitized))
        self.display = self.buffer = format_number(result)
        self.error = False
        self.last_error = None

    def display_text(self):
        '''
        Return what the calculator currently shows.
        '''
        if self.error:
            return type(self).ERROR_DISPLAY
        return self.buffer or self.display
