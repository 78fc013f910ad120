from pytest import fixture

from rpnpad.engine import Engine
from rpnpad.lexer import Lexer


@fixture
def engine() -> Engine:
    return Engine()


@fixture
def events(engine: Engine) -> list:
    '''
    Every (event, snapshot) the engine notifies, in order.
    '''
    seen = []
    engine.subscribe(lambda event, snapshot: seen.append((event, snapshot)))
    return seen


@fixture
def press(engine: Engine):
    '''
    Feed a line of keys to the engine, returning the accepted flags.
    '''
    lexer = Lexer()

    def press(keys: str) -> list:
        return [lexer.feed(engine, match)
                for match in lexer.lex(keys)
                if lexer.isfeedable(match)]
    return press
