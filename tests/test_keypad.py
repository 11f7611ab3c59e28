'''
Keypad view tests
'''

from types import SimpleNamespace

from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.keys import Keys
from prompt_toolkit.output import DummyOutput

from keycalc.engine import Engine, KEYPAD
from keycalc.keypad import Keypad


def test_buttons():
    k = Keypad()
    assert list(k.buttons) == list(KEYPAD)
    assert all(button.text == symbol
               for symbol, button in k.buttons.items())


def test_press():
    k = Keypad()
    for symbol in '12+3':
        k.press(symbol)
    assert k.text() == '12+3'


def test_button_handlers():
    k = Keypad()
    for symbol in '9*9=':
        k.buttons[symbol].handler()
    assert k.text() == '81'
    k.buttons['C'].handler()
    assert k.text() == '0'


def test_shared_engine():
    engine = Engine(strict=True)
    k = Keypad(engine=engine)
    for symbol in '1/0=':
        k.buttons[symbol].handler()
    assert engine.error
    assert k.text() == 'Error'


def test_bindings():
    bindings = Keypad().key_bindings()
    for keys in [(Keys.ControlC,), (Keys.ControlQ,),
                 (Keys.Tab,), (Keys.BackTab,),
                 (Keys.Left,), (Keys.Right,), (Keys.Up,), (Keys.Down,)]:
        assert bindings.get_bindings_for_keys(keys)


def test_application():
    k = Keypad()
    with create_pipe_input() as pipe_input:
        app = k.application(input=pipe_input, output=DummyOutput())
        assert app.full_screen
        assert app.layout.has_focus(k.buttons['7'])


def test_focus_rows():
    k = Keypad()
    bindings = k.key_bindings()
    down, = bindings.get_bindings_for_keys((Keys.Down,))
    up, = bindings.get_bindings_for_keys((Keys.Up,))
    with create_pipe_input() as pipe_input:
        app = k.application(input=pipe_input, output=DummyOutput())
        event = SimpleNamespace(app=app)
        down.handler(event)
        assert app.layout.has_focus(k.buttons['4'])
        down.handler(event)
        down.handler(event)
        assert app.layout.has_focus(k.buttons['C'])
        # Wraps around, same column.
        down.handler(event)
        assert app.layout.has_focus(k.buttons['7'])
        up.handler(event)
        assert app.layout.has_focus(k.buttons['C'])
        k.focus_row(event, rows=-2)
        assert app.layout.has_focus(k.buttons['4'])
