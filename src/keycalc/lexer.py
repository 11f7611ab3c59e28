from functools import reduce
import operator

import regex

from .util import EvaluationError


class Lexer:
    '''
    Lexer for keypad arithmetic expressions.

    For consistency with the evaluator, needs to be instantiated, despite
    holding no internal state.
    '''
    # Anything a keypad expression may be made of. Everything else is noise.
    DISCARD = r'[^-()0-9/*+.]'
    # Number: 1, 12, 1. (notice trailing dot), 1.3, .2
    NUMBER = r'''
              (?:
                  [0-9]+
                  (?:
                      \.
                      [0-9]*
                  )?
              )|(?:
                  \.
                  [0-9]+
              )
              '''
    # Longest first, ** before *.
    OPERATOR = r'\*\*|[-+*/]'
    # Increment and decrement. Never valid, but lexed greedily so that 5--3
    # is not silently read as 5 - -3.
    UPDATE = r'\+\+|--'
    LPAREN = r'\('
    RPAREN = r'\)'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<update>' + UPDATE + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<lparen>' + LPAREN + r')|' \
             r'(?<rparen>' + RPAREN + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def sanitize(self, expression):
        '''
        Strip every character that cannot be part of an expression.

        Doesn't check that what is left is well formed.
        '''
        return regex.sub(type(self).DISCARD, '', expression)

    def lex(self, expression):
        '''
        Take a sanitized expression and yield all lexemes.

        Raises on the first character that doesn't start a lexeme.
        '''
        while expression:
            match = regex.match(type(self).LEXEME, expression,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            expression = expression[len(match.group(0)):]
        if expression:
            raise EvaluationError("Couldn't lex {0}".format(expression))

    def matchedgroups(self, match):
        '''
        Return matched lexeme groups.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}

    def tokens(self, expression):
        '''
        Yield (kind, text) for every lexeme of expression.
        '''
        for match in self.lex(expression):
            (kind, text), = self.matchedgroups(match).items()
            yield kind, text
