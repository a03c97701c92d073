from collections import deque, namedtuple
from decimal import (Context, ROUND_HALF_EVEN,
                     InvalidOperation, Overflow, DivisionByZero as _Undefined)
from enum import Enum

from .util import (EvalError, InsufficientOperands, DivisionByZero,
                   EmptyStack, wrap_user_errors)


Operand = namedtuple('Operand', 'value')
Operand.__doc__ = '''
Literal number token.
'''


class Operator(Enum):
    '''
    Binary arithmetic operator token, valued by its symbol.
    '''
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'

    @wrap_user_errors('Cannot compute {2} {1} {0.value}', error=EvalError)
    def apply(self, a, b, context):
        '''
        Compute result of operator given top of stack a, and b under it.

        Note the order: 1 2 - is 2 - 1, and 1 2 / is 2 / 1.
        '''
        if self is Operator.DIVIDE and a.is_zero():
            raise DivisionByZero()
        return ARITHMETIC[self](context, a, b)


# Arithmetic of each operator, top of stack first.
ARITHMETIC = {
    Operator.ADD: lambda context, a, b: context.add(a, b),
    Operator.SUBTRACT: lambda context, a, b: context.subtract(b, a),
    Operator.MULTIPLY: lambda context, a, b: context.multiply(a, b),
    Operator.DIVIDE: lambda context, a, b: context.divide(b, a),
}


class Machine:
    '''
    Arithmetic stack machine (RPN calculator).

    Takes tokens and runs them. Owns its stack for the whole session.
    '''

    # Significant digits of a 96-bit decimal mantissa.
    PRECISION = 28
    ROUNDING = ROUND_HALF_EVEN

    def __init__(self):
        '''
        Create empty stack machine.
        '''
        self.stack = deque()
        self.context = Context(prec=type(self).PRECISION,
                               rounding=type(self).ROUNDING,
                               traps=[InvalidOperation, Overflow, _Undefined])

    def feed(self, token):
        '''
        Stack or run a single token on machine.
        '''
        if isinstance(token, Operand):
            self._pshstack(token.value)
        elif isinstance(token, Operator):
            self._apply(token)
        else:
            raise TypeError('Not a token: {!r}'.format(token))

    def ingest(self, tokens):
        '''
        Feed all tokens, left to right, and return the new top of stack.

        Stops on the first error. Whatever earlier tokens did to the stack
        stays done.
        '''
        for token in tokens:
            self.feed(token)
        return self.top()

    def _apply(self, operator):
        '''
        Pop the two topmost elements and push the result of operator.

        The top element is consumed even if the operator then fails.
        '''
        if len(self.stack) < 2:
            raise InsufficientOperands()
        a = self.stack.pop()
        self.stack[-1] = operator.apply(a, self.stack[-1], self.context)

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def top(self):
        '''
        Return the element on the top of the stack.
        '''
        if not self.stack:
            raise EmptyStack()
        return self.stack[-1]

    def snapshot(self):
        '''
        Return all elements on the stack, top of the stack first.
        '''
        return list(reversed(self.stack))

    def clear(self):
        '''
        Clear everything from the stack, returning a notice for the user.
        '''
        self.stack.clear()
        return 'Clearing stack'

    @staticmethod
    def format(value):
        '''
        Format number as fixed point, never in exponent notation.

        Zero is unsigned: -0 5 * is 0, not -0.
        '''
        if value.is_zero():
            value = value.copy_abs()
        return '{:f}'.format(value)
