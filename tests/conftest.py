from pytest import Item, fixture

from keycalc.engine import Engine


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!
    print('actual', item.name + ':' + str(lineno),
          # Get rid of full-diff, -vv for full diff, etc.
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def engine():
    return Engine()


@fixture
def press(engine):
    '''
    Press every character of keys in turn, return display afterwards.
    '''
    def pressing(keys):
        for key in keys:
            engine.press(key)
        return engine.display_text()
    return pressing
