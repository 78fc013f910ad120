from functools import wraps


class CalculatorError(Exception):
    pass


class ParseError(CalculatorError):
    '''
    Operand text or operator the engine cannot compute with.
    '''
    pass


def wrap_user_errors(fmt):
    '''
    Decorator that converts exceptions on user input to ParseErrors.

    Passes through CalculatorErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalculatorError:
                raise
            except Exception as e:
                raise ParseError(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator
