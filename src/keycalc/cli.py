from os import isatty
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL

from prompt_toolkit import PromptSession

from .engine import Engine
from .keypad import Keypad
from .lexer import Lexer


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    # Not persistent, like the engine
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to keypad calculator.

    In line mode, every non-whitespace character is one keypress.
    '''

    DEFAULT_PROMPT = '> '

    def _engine(self):
        return Engine(strict=self.args.strict)

    def _report(self, engine, before):
        '''
        Explain Error on stderr, if asked to be verbose.

        Only errors raised since before, the previous last_error, are new.
        '''
        if self.args.verbose and engine.last_error is not None and \
           engine.last_error is not before:
            print(engine.last_error.args[0], file=stderr)

    def executor(self):
        '''
        Press keys of each line, then print display.
        '''
        engine = self._engine()
        for line in self.args.expressions:
            before = engine.last_error
            for token in ''.join(line.split()):
                engine.press(token)
            self._report(engine, before)
            print(engine.display_text(), flush=True)

    def dumper(self):
        '''
        Dump every keypress and the display after it.
        '''
        engine = self._engine()
        print('<token>\t<display>')
        for line in self.args.expressions:
            for token in ''.join(line.split()):
                before = engine.last_error
                engine.press(token)
                self._report(engine, before)
                print(token, engine.display_text(), sep='\t')

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def keypad(self):
        '''
        Run full screen keypad.
        '''
        Keypad(engine=self._engine()).run()

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Keypad calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='explain errors on stderr')
        self.argument_parser.add_argument('--strict',
                                          action='store_true',
                                          help='infinite and NaN results '
                                               'are errors')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper),
                                      ('-k', '--keypad', self.keypad)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is stdin and \
           self.args.action != self.keypad:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
