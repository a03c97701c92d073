from decimal import Decimal
from functools import reduce
import operator

import regex

from .util import ParseError
from .machine import Operand, Operator


class Lexer:
    '''
    Lexer for the RPN *regular* grammar.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Integral part of a number
    INTEGRAL = r'''
                # DO NOT REPEAT ME! I REPEAT MYSELF INTERNALLY!
                (?:
                    # 1, 12, or the 1 in 1_200.
                    \d{1,3}
                    (?:
                        # The 4, 45, etc. in 1234, 12345, etc.
                        \d
                        |
                        # Support not just digits, but thousands separators
                        (?:
                            _\d{3}
                        )
                    )*
                )
                '''
    # Fractional part of a number. No separators, plain digits only.
    FRACTIONAL = r'''
                  (?:
                      \d+
                  )
                  '''
    # Decimal literal, optionally signed.
    # String formatting and regex is a tricky business, because of the braces.
    # It works here. Be careful in general!
    NUMBER = r'''
              [+-]?
              (?:
                  (?:
                      # 1, 12, 1_200, 1_200. (notice trailing dot), 1.3
                      {INTEGRAL}
                      (?:
                          \.
                          {FRACTIONAL}?
                      )?
                  )|(?:
                      # .2
                      \.
                      {FRACTIONAL}
                  )
              )
              '''.format(INTEGRAL=INTEGRAL, FRACTIONAL=FRACTIONAL)
    # Default regex flags for matching lexemes. ASCII, so that no other
    # script's digits sneak into Decimal().
    FLAGS = reduce(operator.__or__,
                   {regex.ASCII,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)
    OPERATORS = {op.value: op for op in Operator}
    SEPARATOR = ' '

    def lex(self, line):
        '''
        Take a line and yield (segment, token) for each segment.

        Raises on first bad segment. Segments are split on every single
        space, so two spaces in a row make an empty, bad, segment.
        '''
        for segment in line.split(type(self).SEPARATOR):
            yield segment, self.token(segment)

    def parse(self, line):
        '''
        Take a line and return all tokens, or raise without returning any.
        '''
        return [token for _, token in self.lex(line)]

    def token(self, segment):
        '''
        Classify a single segment as an operator or an operand.
        '''
        if segment in type(self).OPERATORS:
            return type(self).OPERATORS[segment]
        if not segment:
            raise ParseError(segment, 'empty segment')
        if regex.fullmatch(type(self).NUMBER, segment,
                           flags=type(self).FLAGS) is None:
            raise ParseError(segment, 'not an operator or decimal literal')
        return Operand(self._iconvert(segment))

    def _iconvert(self, number):
        '''
        Convert number literal to its exact internal representation.
        '''
        # Thousands separators are only for the reader.
        return Decimal(number.replace('_', ''))
