'''
Two operand RPN keypad calculator.

Type the first number, ENTER, the second number, pick an operator, ENTER, and
read the result. Reset to go again. No expression parsing, no precedence, no
stack beyond the two operands.

The engine is a small state machine with no I/O: a keypad lexer feeds it keys
and a display renders its snapshots, so other front ends can drive it the
same way the command line does.
'''

from .cli import CLI
from .display import Display
from .engine import DIV0, Engine, Event, Operator, Phase, compute, \
    format_result
from .lexer import Lexer
from .util import CalculatorError, ParseError


__all__ = ('Engine', 'Phase', 'Operator', 'Event', 'DIV0', 'compute',
           'format_result', 'Lexer', 'Display', 'CLI', 'CalculatorError',
           'ParseError')
