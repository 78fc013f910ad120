from prompt_toolkit.formatted_text import FormattedText, fragment_list_to_text
from prompt_toolkit.styles import Style

from .engine import Event, Phase, Operator


PHASE_MESSAGES = {
    Phase.AWAITING_FIRST_OPERAND: 'ENTER FIRST NUMBER',
    Phase.AWAITING_SECOND_OPERAND: 'ENTER SECOND NUMBER',
    Phase.SHOWING_RESULT: 'RESULT \N{EM DASH} RESET TO CONTINUE',
}

OP_SYMBOL = {
    Operator.ADD: '+',
    Operator.SUBTRACT: '\N{MINUS SIGN}',
    Operator.MULTIPLY: '\N{MULTIPLICATION SIGN}',
    Operator.DIVIDE: '\N{DIVISION SIGN}',
}

CURSOR = '_'

STYLE = Style.from_dict({
    'operand': '',
    'operand.active': 'underline',
    'operator': 'bold',
    'operator.locked': 'bold reverse',
    'error': 'fg:ansired bold',
    'flash': 'reverse',
    'label': 'italic fg:ansigray',
})


class Display:
    '''
    Terminal rendering of an engine's snapshot.

    Tracks the result flash: set by a computation, cleared by the next event.
    How long the flash stays visible is up to whoever prints it.
    '''

    def __init__(self, engine=None):
        self.flash = False
        if engine is not None:
            engine.subscribe(self.notify)

    def notify(self, event, snapshot):
        self.flash = event is Event.COMPUTED

    def label(self, snapshot):
        return PHASE_MESSAGES[snapshot.phase]

    def symbol(self, snapshot):
        if snapshot.operator is None:
            return ''
        return OP_SYMBOL[snapshot.operator]

    def fragments(self, snapshot):
        '''
        Render snapshot as prompt_toolkit formatted text.

        operand1 [operator operand2]    label
        '''
        phase = snapshot.phase
        first_style = 'class:operand'
        if snapshot.is_error:
            first_style = 'class:error'
        elif self.flash and phase is Phase.SHOWING_RESULT:
            first_style = 'class:flash'
        first = snapshot.operand1
        if phase is Phase.AWAITING_FIRST_OPERAND:
            first_style = 'class:operand.active'
            first += CURSOR
        fragments = [(first_style, first)]
        if phase is Phase.AWAITING_SECOND_OPERAND:
            locked = snapshot.operator is not None
            fragments += [
                ('', ' '),
                ('class:operator.locked' if locked else 'class:operator',
                 self.symbol(snapshot) or '?'),
                ('', ' '),
                ('class:operand.active', snapshot.operand2 + CURSOR),
            ]
        fragments += [('', '    '), ('class:label', self.label(snapshot))]
        return FormattedText(fragments)

    def text(self, snapshot):
        return fragment_list_to_text(self.fragments(snapshot))
