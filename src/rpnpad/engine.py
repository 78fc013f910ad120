from collections import namedtuple
from decimal import Decimal
from enum import Enum
import operator

import regex

from .util import CalculatorError, ParseError, wrap_user_errors


# Shown in place of a result when dividing by zero.
DIV0 = 'ERR:DIV0'

# Unsigned decimal as typed on the keypad: 5, 5., .5, 0.25
NUMBER = regex.compile(r'''
                       (?:
                           \d+
                           (?:
                               \.
                               \d*
                           )?
                       )|(?:
                           \.
                           \d+
                       )
                       ''', flags=regex.VERBOSE)


class Phase(Enum):
    AWAITING_FIRST_OPERAND = 'input1'
    AWAITING_SECOND_OPERAND = 'input2'
    SHOWING_RESULT = 'result'


class Operator(Enum):
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'


class Event(Enum):
    '''
    Notifications sent to engine listeners.
    '''
    REFRESH = 'refresh'
    LOCKED = 'locked'
    COMPUTED = 'computed'
    RESET = 'reset'


class Snapshot(namedtuple('Snapshot', 'phase operand1 operand2 operator')):
    '''
    Read-only view of the engine state, for renderers.
    '''
    __slots__ = ()

    @property
    def is_error(self):
        return self.operand1 == DIV0


class State:
    '''
    Mutable calculator state. Owned and mutated by exactly one Engine.
    '''

    def __init__(self):
        self.clear()

    def clear(self):
        self.phase = Phase.AWAITING_FIRST_OPERAND
        self.operand1 = ''
        self.operand2 = ''
        self.operator = None


@wrap_user_errors('Not a number: {!r}')
def parse_operand(text):
    '''
    Parse operand text into a float, accepting only unsigned decimals.
    '''
    if NUMBER.fullmatch(text) is None:
        raise ValueError(text)
    return float(text)


@wrap_user_errors('No such operator: {!r}')
def parse_operator(op):
    return op if isinstance(op, Operator) else Operator(op)


# Arithmetic by explicit lookup.
ARITHMETIC = {
    Operator.ADD: operator.__add__,
    Operator.SUBTRACT: operator.__sub__,
    Operator.MULTIPLY: operator.__mul__,
    Operator.DIVIDE: operator.__truediv__,
}


def compute(text1, text2, op):
    '''
    Apply op to two operand texts.

    Returns a float, or DIV0 when dividing by zero. Raises ParseError when
    either operand or the operator is unusable.
    '''
    left = parse_operand(text1)
    right = parse_operand(text2)
    function = ARITHMETIC[parse_operator(op)]
    try:
        return function(left, right)
    except ZeroDivisionError:
        return DIV0


def format_result(value, precision=10):
    '''
    Round value to precision significant digits and convert it to text.

    Hides binary floating point noise: 0.1 + 0.2 shows as 0.3. Positional
    between 1e-6 and 1e21, exponent form (1e-7, 1e+21) outside.
    '''
    if value == DIV0:
        return value
    rounded = float('{:.{}g}'.format(value, precision))
    if rounded == 0:
        return '0'
    if 1e-6 <= abs(rounded) < 1e21:
        if rounded.is_integer():
            return str(int(rounded))
        return format(Decimal(repr(rounded)), 'f')
    text = repr(rounded)
    if 'e' not in text:
        return text
    mantissa, exponent = text.split('e')
    return '{0}e{1:+d}'.format(mantissa, int(exponent))


class Engine:
    '''
    Two operand RPN calculator driven as a four phase input state machine.

    first operand, ENTER, second operand, operator, ENTER, result, reset.

    Input that is malformed or arrives in the wrong phase is rejected: the
    operation returns False and the state is left untouched.
    '''

    DIGITS = frozenset('0123456789.')
    MAX_LENGTH = 12
    PRECISION = 10

    def __init__(self, state=None, max_length=None, precision=None):
        '''
        Create an engine in the initial phase.

        :param state: State to drive; a fresh one by default.
        :param max_length: Operand length cap.
        :param precision: Significant digits shown in results.
        '''
        self.state = State() if state is None else state
        self.max_length = type(self).MAX_LENGTH \
            if max_length is None else int(max_length)
        self.precision = type(self).PRECISION \
            if precision is None else int(precision)
        if self.max_length < 1:
            raise CalculatorError(
                'Operand length cap must be at least 1, got {}'.format(
                    self.max_length))
        if self.precision < 1:
            raise CalculatorError(
                'Precision must be at least 1, got {}'.format(self.precision))
        self.listeners = []

    def subscribe(self, listener):
        '''
        Call listener(event, snapshot) after every accepted mutation.
        '''
        self.listeners.append(listener)

    def unsubscribe(self, listener):
        self.listeners.remove(listener)

    def _notify(self, event):
        snapshot = self.snapshot()
        for listener in list(self.listeners):
            listener(event, snapshot)

    def snapshot(self):
        state = self.state
        return Snapshot(state.phase, state.operand1, state.operand2,
                        state.operator)

    @property
    def phase(self):
        return self.state.phase

    def apply_digit(self, token):
        '''
        Append a digit or decimal point to the operand being entered.
        '''
        state = self.state
        if token not in type(self).DIGITS:
            return False
        if state.phase is Phase.SHOWING_RESULT:
            return False
        target = 'operand1' \
            if state.phase is Phase.AWAITING_FIRST_OPERAND else 'operand2'
        current = getattr(state, target)
        if token == '.' and '.' in current:
            return False
        # "0." is fine, "00" is not
        if current == '0' and token != '.':
            setattr(state, target, token)
        elif len(current) >= self.max_length:
            return False
        else:
            setattr(state, target, current + token)
        self._notify(Event.REFRESH)
        return True

    def select_operator(self, op):
        '''
        Lock in the operator for the next ENTER. Re-selectable until then.
        '''
        if self.state.phase is not Phase.AWAITING_SECOND_OPERAND:
            return False
        try:
            self.state.operator = parse_operator(op)
        except ParseError:
            return False
        self._notify(Event.LOCKED)
        return True

    def confirm(self):
        '''
        ENTER: advance to the second operand, or compute the result.
        '''
        state = self.state
        if state.phase is Phase.AWAITING_FIRST_OPERAND:
            if state.operand1 in ('', '.'):
                return False
            state.phase = Phase.AWAITING_SECOND_OPERAND
            self._notify(Event.REFRESH)
            return True
        if state.phase is Phase.AWAITING_SECOND_OPERAND:
            if state.operand2 in ('', '.') or state.operator is None:
                return False
            try:
                result = compute(state.operand1, state.operand2,
                                 state.operator)
            except ParseError:
                return False
            state.operand1 = format_result(result, self.precision)
            state.operand2 = ''
            state.operator = None
            state.phase = Phase.SHOWING_RESULT
            self._notify(Event.COMPUTED)
            return True
        return False

    def reset(self):
        '''
        Return to the initial state from any phase.
        '''
        self.state.clear()
        self._notify(Event.RESET)
        return True
