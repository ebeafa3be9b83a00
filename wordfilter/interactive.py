import pathlib
import asyncio
import string

import click
import urwid
from blinker import signal

import logging
logging.getLogger('asyncio').setLevel(logging.WARNING)

from . import dictfile, wordlen, wildcards, logger
from .word import Word, Excluded, Included
from .matcher import matches
from .dictionary import read_words
from .utils import pad_pattern


class Signal:
    """
    a blinker.signal that is also a variable
    when signal.value is set, emit the new value
    """

    def __init__(self, *args, **kw):
        self._value = kw.pop('value', None)
        self._signal = signal(*args, **kw)

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, value):
        self._value = value
        self._signal.send(self._signal.name, value=self.value)

    def __getattr__(self, name):
        return getattr(self._signal, name)


class Signals:

    pattern    = Signal('pattern',    value='')
    excludes   = Signal('excludes',   value='')
    includes   = Signal('includes',   value='')
    dictionary = Signal('dictionary', value=list())
    wordlist   = Signal('wordlist',   value=list())

signals = Signals()


class Filter:
    """
    the current pattern and letter sets, recalculates the word list
    whenever any of them change
    """

    def __init__(self):
        signals.dictionary.connect(self.cb_changed)
        signals.pattern.connect(self.cb_changed)
        signals.excludes.connect(self.cb_changed)
        signals.includes.connect(self.cb_changed)

    def cb_changed(self, sender, value):
        logger.debug(f"{sender} changed")
        self.recalc()

    @property
    def chosen(self):
        return Word(pad_pattern(signals.pattern.value))

    @property
    def excluded(self):
        return Excluded.parse(signals.excludes.value)

    @property
    def included(self):
        return Included.parse(signals.includes.value)

    def recalc(self):
        chosen, excluded, included = self.chosen, self.excluded, self.included

        signals.wordlist.value = [
            word for word in signals.dictionary.value
            if matches(chosen, word, excluded, included)
        ]


def is_letter(key):
    return len(key) == 1 and key in string.ascii_letters


class Window(urwid.WidgetWrap):
    def __init__(self, *args, **kw):
        super().__init__(
            urwid.LineBox(*args, **kw)
        )

    def __repr__(self):
        return self.__class__.__name__

    @property
    def original_widget(self):
        # return what's inside the LineBox
        return self._w


class WinPattern(Window):

    # next key is a letter for this set
    COMMANDS = {
        '!': signals.excludes,
        '+': signals.includes,
    }

    def __init__(self, *args, **kw):
        label = urwid.Text('pattern:')
        edit = urwid.AttrMap(
            urwid.Edit('', '', multiline=False, align='left', wrap='clip',),
            'default', 'focused'
        )
        widget = urwid.Columns([
                (10, label),
                (wordlen + 1, edit),
                ('weight', 2, urwid.Padding(urwid.Text(''))),
        ])

        super().__init__(widget)

        self.prev = ''

    def keypress(self, size, key):

        if key in self.COMMANDS:
            self.prev = key
            return

        if self.prev in self.COMMANDS:
            target = self.COMMANDS[self.prev]
            self.prev = ''

            if not is_letter(key):
                return key

            if key.upper() not in target.value:
                target.value += key.upper()
            return

        if key == 'backspace':
            self.text = self.text[:-1]
            return

        # propagate keypress if not a letter or wildcard
        if not (is_letter(key) or (len(key) == 1 and key in wildcards)):
            return key

        if len(self.text) >= wordlen:
            return

        self.text += key
        self.prev = key

    @property
    def widget(self):
        # the edit box
        return self.original_widget.original_widget.contents[1][0].original_widget

    @property
    def text(self):
        return self.widget.get_edit_text()

    @text.setter
    def text(self, text):
        self.widget.set_edit_text(text)
        self.widget.edit_pos = len(text)

        signals.pattern.value = self.text


class WinLetters(Window):
    def __init__(self, *args, **kw):
        widget = urwid.Text('')
        super().__init__(widget, tlcorner='┬', blcorner='┴', )

        signals.excludes.connect(self.cb_letters)
        signals.includes.connect(self.cb_letters)
        self.cb_letters(None, None)

    def cb_letters(self, sender, value):
        self.text = f"excludes: {signals.excludes.value}  includes: {signals.includes.value}"

    @property
    def widget(self):
        return self.original_widget.original_widget

    @property
    def text(self):
        text, _ = self.widget.get_text()
        return text

    @text.setter
    def text(self, text):
        self.widget.set_text(text)


class WinMatches(Window):

    HELP = f"{' '.join(wildcards)} is a wildcard\n!c to exclude a letter\n+c to include a letter"

    def __init__(self, *args, **kw):
        super().__init__(
            urwid.Filler(
                urwid.Text(self.HELP),
                valign='top',
            )
        )

        signals.wordlist.connect(self.cb_wordlist)

    def cb_wordlist(self, sender, value):
        if app.args['invisible']:
            self.text = 'running in invisible mode'
        elif signals.pattern.value or signals.excludes.value or signals.includes.value:
            self.text = ' '.join(str(word) for word in value)
        else:
            self.text = self.HELP

    @property
    def widget(self):
        return self.original_widget.original_widget.original_widget

    @property
    def text(self):
        return self.widget.get_text()

    @text.setter
    def text(self, value):
        self.widget.set_text(value)


class WinCounts(Window):
    def __init__(self, *args, **kw):
        font = urwid.Thin3x3Font()
        widget = urwid.Padding(
            urwid.BigText('', font),
            align='center', width='clip'
        )
        super().__init__(widget, title='Word Count', title_align='left')

        signals.wordlist.connect(self.cb_wordlist)

    def cb_wordlist(self, sender, value):
        self.widget.set_text(str(len(value)))

    @property
    def widget(self):
        return self.original_widget.original_widget.original_widget


class WinLogging(Window):

    def __init__(self, *args, **kw):
        super().__init__(
            urwid.BoxAdapter(
                urwid.ListBox(urwid.SimpleListWalker([])),
                height=3
            ),
            title="Logging", title_align='left', tlcorner='┬', blcorner='┴',
        )

    @property
    def listbox(self):
        return self.original_widget.original_widget.original_widget


class MainFrame(urwid.Frame):
    def __init__(self, *args, **kw):
        super().__init__(urwid.Text(''), *args, **kw)

        self.header = urwid.Columns([
            ("weight", 1, WinPattern()),
            ("weight", 2, WinLetters()),
        ])

        self.body = WinMatches()

        self.footer = urwid.Columns([
            ("weight", 1, WinCounts()),
            ("weight", 2, WinLogging()),
        ])

    @property
    def win_logging(self):
        return self.footer.contents[1][0].listbox


class App:

    def __init__(self, args):
        self.args = args

    def setup(self):

        self.filter = Filter()
        self.frame = MainFrame(focus_part='header')
        replace_handlers(logger, self.frame.win_logging)

        # load and send dictionary to listeners
        words = read_words(self.args['dict'])
        logger.info(f"loaded {len(words)} words")
        signals.dictionary.value = words

    def run(self):
        palette = [
            # (name, foreground, background, mono, foreground_high, background_high)
            ('unfocused', 'default', '', '', '', ''),
            ('focused', 'light gray', 'dark blue', '', '#ffd', '#00a'),
        ]

        event_loop = urwid.AsyncioEventLoop(loop=asyncio.new_event_loop())
        self.loop = urwid.MainLoop(self.frame,
                                   palette,
                                   unhandled_input=self.handle_keypress,
                                   handle_mouse=False,
                                   event_loop=event_loop,
                                   )

        self.loop.screen.set_terminal_properties(colors=256)
        self.loop.run() # blocking

    def handle_keypress(self, key):
        if key in ('f10', 'esc'):
            raise urwid.ExitMainLoop()

        return key


class UrwidHandler(logging.StreamHandler):
    def __init__(self, listbox):
        super().__init__()
        self.listbox = listbox

    def emit(self, record):
        msg = self.format(record)
        msg = urwid.Text(msg)
        self.listbox.body.append(msg)
        self.listbox.set_focus(len(self.listbox.body) - 1) # scroll to last line


def replace_handlers(logger, listbox):
    """
    replace current handlers and emit to given urwid.ListBox
    """
    logger.handlers = [UrwidHandler(listbox)]


@click.command()
@click.option('--dict', default=str(dictfile), type=click.Path(exists=True, readable=True, dir_okay=False, path_type=pathlib.Path))
@click.option('--exclude', '-e', 'excludes', metavar='letters', default='', type=str)
@click.option('--include', '-i', 'includes', metavar='letters', default='', type=str)
@click.option('--invisible', is_flag=True, help="don't show matching words, just count")
@click.pass_context
def cli(ctx, *_, **args):
    """
    interactively filter a dictionary by showing the updated word list as a
    pattern is typed

    \b
    * _ ?  for wildcard
    !c     to add a letter to the exclude list
    +c     to add a letter to the include list
    """
    logging.basicConfig(format="%(message)s", level=logging.INFO)

    global app
    app = App(args)
    app.setup()

    signals.excludes.value = ''.join(sorted(Excluded.parse(args['excludes'])))
    signals.includes.value = ''.join(sorted(Included.parse(args['includes'])))

    try:
        app.run()       # blocking call
    except KeyboardInterrupt:
        pass
