'''
Arithmetic and result formatting tests
'''

from pytest import mark, raises

from rpnpad.engine import DIV0, Operator, compute, format_result
from rpnpad.util import ParseError


@mark.parametrize('op, expected', [
    (Operator.ADD, 8.0),
    (Operator.SUBTRACT, 2.0),
    (Operator.MULTIPLY, 15.0),
    (Operator.DIVIDE, 5 / 3),
])
def test_arithmetic(op, expected):
    assert compute('5', '3', op) == expected


def test_operator_symbols():
    assert compute('5', '3', '*') == 15.0


def test_trailing_and_leading_decimal_point():
    assert compute('5.', '.5', Operator.ADD) == 5.5


def test_point_one_plus_point_two():
    assert format_result(compute('0.1', '0.2', Operator.ADD)) == '0.3'


@mark.parametrize('dividend', ['1', '0', '0.5', '999999999999'])
def test_divide_by_zero(dividend):
    assert compute(dividend, '0', Operator.DIVIDE) is DIV0
    assert compute(dividend, '0.000', Operator.DIVIDE) is DIV0


@mark.parametrize('text', ['', '.', '-3', '1e5', '1_0', 'inf', 'nan', ' 2',
                           '1.2.3', None])
def test_unparseable_operand(text):
    with raises(ParseError):
        compute(text, '1', Operator.ADD)
    with raises(ParseError):
        compute('1', text, Operator.ADD)


def test_unknown_operator():
    with raises(ParseError, match='No such operator'):
        compute('1', '2', '%')


def test_parse_error_message():
    with raises(ParseError, match="Not a number: '1e5'"):
        compute('1e5', '2', Operator.ADD)


@mark.parametrize('value, expected', [
    (8.0, '8'),
    (0.0, '0'),
    (-2.0, '-2'),
    (2.5, '2.5'),
    (1 / 3, '0.3333333333'),
    (2 / 3, '0.6666666667'),
    (123456789012.0, '123456789000'),
    (0.1 * 3, '0.3'),
    (1e-05, '0.00001'),
    (1.5e-06, '0.0000015'),
    (1e-06, '0.000001'),
    (1e-07, '1e-7'),
    (2.5e-09, '2.5e-9'),
    (-0.00042, '-0.00042'),
    (-0.0, '0'),
    (999999999999.0 * 999999999999.0, '1e+24'),
])
def test_format_result(value, expected):
    assert format_result(value) == expected


def test_format_result_precision():
    assert format_result(1 / 3, precision=3) == '0.333'
    assert format_result(2 / 3, precision=1) == '0.7'


def test_format_passes_marker_through():
    assert format_result(DIV0) == 'ERR:DIV0'


def test_small_quotient_is_positional():
    assert format_result(compute('1', '100000', Operator.DIVIDE)) == '0.00001'
    assert format_result(compute('1', '10000000', Operator.DIVIDE)) == '1e-7'
