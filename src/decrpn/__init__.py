'''
RPN calculator, with exact decimal arithmetic.

Reads lines of space separated numbers and the four arithmetic operators,
keeping a stack of decimal numbers between lines. No floating point, so 0.1
0.2 + is 0.3, not 0.30000000000000004.

Operands are taken in the order they were pushed, top of stack first: 1 2 -
is 2 - 1, and 1 2 / is 2 / 1.
'''

from .cli import CLI
from .lexer import Lexer
from .machine import Machine, Operand, Operator
from .util import (RPNError, ParseError, EvalError, InsufficientOperands,
                   DivisionByZero, EmptyStack)


__all__ = ('Machine', 'Lexer', 'CLI', 'Operand', 'Operator',
           'RPNError', 'ParseError', 'EvalError', 'InsufficientOperands',
           'DivisionByZero', 'EmptyStack')
