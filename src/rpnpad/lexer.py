from functools import reduce
import operator

import regex

from .util import CalculatorError
from .engine import Operator


class Lexer:
    '''
    Lexer for keypad input: one lexeme per key.

    Holds no internal state, but needs to be instantiated.
    '''
    DIGIT = r'[0-9.]'
    # Display symbols are accepted too, so output can be pasted back in.
    SYMBOLS = {
        '\N{MINUS SIGN}': Operator.SUBTRACT,
        '\N{MULTIPLICATION SIGN}': Operator.MULTIPLY,
        '\N{DIVISION SIGN}': Operator.DIVIDE,
    }
    OPERATORS = {op.value: op for op in Operator}
    OPERATORS.update(SYMBOLS)
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, OPERATORS)) + r')'
    # = or Return
    ENTER = r'=|\r?\n'
    # c, C or Escape
    RESET = r'[cC]|\x1b'
    SPACE = r'[ \t]+'

    # All possible lexemes.
    LEXEME = r'(?<digit>' + DIGIT + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<enter>' + ENTER + r')|' \
             r'(?<reset>' + RESET + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1},
                   0)

    def lex(self, line):
        '''
        Take a line of keys and yield all lexemes.

        Stops on the first unknown key, raising after the good ones.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise CalculatorError("Couldn't lex {0}".format(line.strip()))

    def matchedgroups(self, match):
        '''
        Return the named groups the lexeme matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}

    def isfeedable(self, match):
        '''
        Return True if lexeme can be fed to an engine.
        '''
        return 'space' not in self.matchedgroups(match)

    def feed(self, engine, match):
        '''
        Run the engine operation for a lexeme.

        Returns whether the engine accepted it, or None for blanks.
        '''
        groups = self.matchedgroups(match)
        if 'digit' in groups:
            return engine.apply_digit(groups['digit'])
        elif 'operator' in groups:
            return engine.select_operator(
                type(self).OPERATORS[groups['operator']])
        elif 'enter' in groups:
            return engine.confirm()
        elif 'reset' in groups:
            return engine.reset()
        return None
