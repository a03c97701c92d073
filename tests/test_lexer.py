'''
RPN lexer tests
'''

from decimal import Decimal

import regex

from decrpn.util import ParseError
from decrpn.lexer import Lexer
from decrpn.machine import Machine, Operand, Operator

from pytest import mark, raises


def test_operators():
    l = Lexer()
    assert l.parse('+ - * /') == [Operator.ADD,
                                  Operator.SUBTRACT,
                                  Operator.MULTIPLY,
                                  Operator.DIVIDE]


@mark.parametrize('literal', ['0', '7', '-2', '3.14', '-0.001', '1.50',
                              '12345678901234567890.123456789012345'])
def test_literal_roundtrip(literal):
    l = Lexer()
    [token] = l.parse(literal)
    assert token == Operand(Decimal(literal))
    assert Machine.format(token.value) == literal


@mark.parametrize('literal, value', [('+3', '3'),
                                     ('.5', '0.5'),
                                     ('-.5', '-0.5'),
                                     ('5.', '5'),
                                     ('1_000', '1000'),
                                     ('1_234_567.25', '1234567.25')])
def test_literal_shapes(literal, value):
    l = Lexer()
    assert l.parse(literal) == [Operand(Decimal(value))]


def test_mixed_line():
    l = Lexer()
    assert l.parse('1 2.5 +') == [Operand(Decimal(1)),
                                  Operand(Decimal('2.5')),
                                  Operator.ADD]


@mark.parametrize('segment', ['abc', '1e5', 'NaN', 'Infinity', '1.2.3',
                              '--1', '1_00', '.', '+-', '\N{ARABIC-INDIC DIGIT ONE}'])
def test_bad_literal(segment):
    l = Lexer()
    with raises(ParseError, match=regex.escape(repr(segment))) as info:
        l.parse(segment)
    assert info.value.segment == segment
    assert info.value.reason == 'not an operator or decimal literal'


def test_double_space():
    l = Lexer()
    with raises(ParseError) as info:
        l.parse('1  2')
    assert info.value.segment == ''
    assert info.value.reason == 'empty segment'


def test_empty_line():
    l = Lexer()
    with raises(ParseError, match='empty segment'):
        l.parse('')


def test_whole_line_or_nothing():
    l = Lexer()
    lexed = l.lex('1 2 x +')
    # Lazily, good segments come out before the bad one is reached.
    assert next(lexed) == ('1', Operand(Decimal(1)))
    assert next(lexed) == ('2', Operand(Decimal(2)))
    with raises(ParseError, match="'x'"):
        next(lexed)
    # But parse doesn't hand over any of them.
    with raises(ParseError, match="'x'"):
        l.parse('1 2 x +')


def test_grammar_is_verbose():
    assert regex.fullmatch(Lexer.NUMBER, '-1_000.5', flags=Lexer.FLAGS)
    assert not regex.fullmatch(Lexer.NUMBER, ' 1', flags=Lexer.FLAGS)
