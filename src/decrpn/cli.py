from os import isatty
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import traceback

from prompt_toolkit import PromptSession

from .util import RPNError
from .machine import Machine, Operand
from .lexer import Lexer


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    # Stack is not persisted, neither is input
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to RPN system.
    '''

    DEFAULT_PROMPT = '> '
    INTRO_MSG = '''
RPN Calculator
--------------
Enter command or input, press enter to execute.
Command:
    q : quit program
    c : clear stack
    p : print stack
Input:
    +
    -
    /
    *
    Number
'''

    def dumper(self):
        '''
        Dump every segment's token kind, text, and parsed token.
        '''
        lexer = Lexer()
        print('<kind>\t<repr(segment)>\t<token>')
        for line in self.args.expressions:
            try:
                for segment, token in lexer.lex(line.strip()):
                    kind = 'operand' if isinstance(token, Operand) \
                        else 'operator'
                    print(kind, repr(segment), token, sep='\t')
            except RPNError as e:
                self.report(e)

    def executor(self):
        '''
        Run machine (RPN calculator).
        '''
        machine = Machine()
        lexer = Lexer()
        if self._interactive():
            print(self.INTRO_MSG)
        for line in self.args.expressions:
            line = line.strip()
            if line == 'q':
                print('Exiting...')
                exit(0)
            elif line == 'c':
                print(machine.clear())
            elif line == 'p':
                for value in machine.snapshot():
                    print(machine.format(value))
            else:
                # Abort entire rest of line, makes sense anyway
                try:
                    print(machine.format(machine.ingest(lexer.parse(line))))
                except RPNError as e:
                    self.report(e)

    def report(self, error):
        '''
        Tell the user about a bad line, with a stack trace if verbose.
        '''
        print('Error:', error.args[0], file=stderr)
        if self.args.verbose:
            traceback.print_exception(type(error), error,
                                      error.__traceback__, file=stderr)

    def raw_grammar(self):
        '''
        Print current internally defined number grammar.
        '''
        print(Lexer.NUMBER)

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
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
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
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
