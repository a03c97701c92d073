from pytest import Item, fixture

from decrpn.lexer import Lexer
from decrpn.machine import Machine


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases.

    Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!)
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def lexer():
    return Lexer()


@fixture
def machine():
    return Machine()


@fixture
def calc(lexer, machine):
    '''
    Feed a line to a fresh machine, like the CLI does.
    '''
    def calc(line):
        return machine.ingest(lexer.parse(line))
    return calc
