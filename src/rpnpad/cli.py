from os import isatty
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, ArgumentTypeError, REMAINDER, OPTIONAL

from prompt_toolkit import PromptSession, print_formatted_text

from .util import CalculatorError
from .engine import Engine
from .lexer import Lexer
from .display import Display, STYLE


def positive_int(text):
    '''
    argparse type for counts that must be at least 1.
    '''
    try:
        value = int(text)
    except ValueError:
        raise ArgumentTypeError('not an integer: {!r}'.format(text))
    if value < 1:
        raise ArgumentTypeError('must be at least 1: {}'.format(value))
    return value


class InteractiveInput:
    '''
    Prompting line source. Return is ENTER, so each line ends with one.
    '''

    def __init__(self, prompt, display, engine):
        self.prompt = prompt
        self.display = display
        self.engine = engine

    def _toolbar(self):
        return self.display.label(self.engine.snapshot())

    def _rprompt(self):
        return self.display.symbol(self.engine.snapshot())

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    history=None,
                                    rprompt=self._rprompt,
                                    bottom_toolbar=self._toolbar,
                                    style=STYLE,
                                    erase_when_done=False)
            while True:
                yield session.prompt() + '\n'
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the keypad calculator.
    '''

    DEFAULT_PROMPT = '> '

    def executor(self):
        '''
        Feed every line of keys to the engine, showing the display after each.
        '''
        lexer = Lexer()
        for line in self.args.expressions:
            # Flash lasts one display
            self.display.flash = False
            after_reset = False
            try:
                for match in lexer.lex(line):
                    if not lexer.isfeedable(match):
                        continue
                    groups = lexer.matchedgroups(match)
                    accepted = lexer.feed(self.engine, match)
                    # c then Return: nothing to enter yet
                    quiet = after_reset and 'enter' in groups
                    if not accepted and self.args.verbose and not quiet:
                        print('Rejected {0!r}'.format(match.group(0)),
                              file=stderr)
                    after_reset = 'reset' in groups
            # Abort entire rest of line
            except CalculatorError as e:
                print(e.args[0], file=stderr)
            self.show()

    def show(self):
        snapshot = self.engine.snapshot()
        if self._interactive():
            print_formatted_text(self.display.fragments(snapshot),
                                 style=STYLE)
        else:
            print(self.display.text(snapshot))

    def _prompting_input(self):
        '''
        Return prompting input if either:

        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    display=self.display,
                                    engine=self.engine)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Two operand RPN keypad calculator',
            epilog='Keys: 0-9 . digits, + - * / operator, = or Return '
                   'ENTER, c or Escape reset.')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='report rejected keys')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=positive_int,
                                          default=Engine.PRECISION,
                                          help='significant digits shown')
        self.argument_parser.add_argument('-l', '--max-length',
                                          type=positive_int,
                                          default=Engine.MAX_LENGTH,
                                          help='operand length cap')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the process's CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        self.engine = Engine(max_length=self.args.max_length,
                             precision=self.args.precision)
        self.display = Display(self.engine)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)


def main():
    CLI().run()
