from functools import partial

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.bindings.focus import focus_next, focus_previous
from prompt_toolkit.layout import (FormattedTextControl, HSplit, Layout,
                                   VSplit, Window, WindowAlign)
from prompt_toolkit.widgets import Button, Frame

from .engine import Engine, KEYPAD


class Keypad:
    '''
    Full screen keypad view of an engine.

    Buttons are activated with the mouse, or Enter/Space when focused. Digits
    and operators cannot be typed.
    '''

    COLUMNS = 4
    BUTTON_WIDTH = 5
    TITLE = 'keycalc'

    def __init__(self, engine=None):
        self.engine = engine or Engine()
        self.buttons = {symbol: Button(text=symbol,
                                       handler=partial(self.press, symbol),
                                       width=type(self).BUTTON_WIDTH)
                        for symbol in KEYPAD}
        # Callable text, so every redraw polls the engine.
        self.screen = Window(FormattedTextControl(self.text),
                             align=WindowAlign.RIGHT,
                             height=1)
        columns = type(self).COLUMNS
        rows = [VSplit([self.buttons[symbol]
                        for symbol in KEYPAD[i:i + columns]],
                       padding=1)
                for i in range(0, len(KEYPAD), columns)]
        self.container = Frame(HSplit([self.screen, *rows], padding=1),
                               title=type(self).TITLE)

    def press(self, symbol):
        '''
        Forward button press to engine.
        '''
        self.engine.press(symbol)

    def text(self):
        '''
        Text currently on the calculator's screen.
        '''
        return self.engine.display_text()

    def focus_row(self, event, rows):
        '''
        Move focus rows up (negative) or down, wrapping around, same column.
        '''
        layout = event.app.layout
        for i, symbol in enumerate(KEYPAD):
            if layout.has_focus(self.buttons[symbol]):
                i = (i + rows * type(self).COLUMNS) % len(KEYPAD)
                layout.focus(self.buttons[KEYPAD[i]])
                return

    def key_bindings(self):
        '''
        Focus movement between buttons, and quitting.
        '''
        bindings = KeyBindings()
        bindings.add('tab')(focus_next)
        bindings.add('right')(focus_next)
        bindings.add('s-tab')(focus_previous)
        bindings.add('left')(focus_previous)
        bindings.add('up')(partial(self.focus_row, rows=-1))
        bindings.add('down')(partial(self.focus_row, rows=1))

        @bindings.add('c-c')
        @bindings.add('c-q')
        def _(event):
            event.app.exit()

        return bindings

    def application(self, **kwargs):
        '''
        Build application showing keypad, not yet running.

        :param kwargs: Passed on to Application, e.g. input and output.
        '''
        return Application(layout=Layout(self.container,
                                         focused_element=self.buttons['7']),
                           key_bindings=self.key_bindings(),
                           mouse_support=True,
                           full_screen=True,
                           **kwargs)

    def run(self):
        '''
        Run keypad until quit.
        '''
        self.application().run()
