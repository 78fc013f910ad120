'''
Display rendering tests
'''

from rpnpad.display import Display, PHASE_MESSAGES
from rpnpad.engine import DIV0, Phase


def styles(display, engine):
    return dict((text, style)
                for style, text in display.fragments(engine.snapshot()))


def test_first_operand(engine, press):
    display = Display(engine)
    press('12')
    assert display.text(engine.snapshot()) == '12_    ENTER FIRST NUMBER'
    assert styles(display, engine)['12_'] == 'class:operand.active'


def test_second_operand_without_operator(engine, press):
    display = Display(engine)
    press('12=3')
    assert display.text(engine.snapshot()) == \
        '12 ? 3_    ENTER SECOND NUMBER'
    assert styles(display, engine)['?'] == 'class:operator'


def test_locked_operator(engine, press):
    display = Display(engine)
    press('12=3/')
    assert display.text(engine.snapshot()) == \
        '12 ÷ 3_    ENTER SECOND NUMBER'
    assert styles(display, engine)['÷'] == 'class:operator.locked'


def test_result_flash(engine, press):
    display = Display(engine)
    press('12=3-=')
    assert display.flash
    assert display.text(engine.snapshot()) == \
        '9    ' + PHASE_MESSAGES[Phase.SHOWING_RESULT]
    assert styles(display, engine)['9'] == 'class:flash'


def test_flash_cleared_by_next_event(engine, press):
    display = Display(engine)
    press('1=1+=')
    press('c')
    assert not display.flash
    assert styles(display, engine)['_'] == 'class:operand.active'


def test_error(engine, press):
    display = Display(engine)
    press('1=0/=')
    assert engine.snapshot().is_error
    assert styles(display, engine)[DIV0] == 'class:error'


def test_symbol_and_label(engine):
    display = Display()
    snapshot = engine.snapshot()
    assert display.symbol(snapshot) == ''
    assert display.label(snapshot) == 'ENTER FIRST NUMBER'
    assert not display.flash
