import pathlib

import click

from rich.console import Console
print = Console(highlight=False).print

import logging

from . import dictfile, logger
from .errors import WordError
from .word import Word, Excluded, Included
from .matcher import WordsResult
from .dictionary import read_lines, filter_words
from .utils import dotdict


def to_word(ctx, param, value):
    try:
        return Word(value)
    except WordError as e:
        raise click.BadParameter(str(e))

def to_excluded(ctx, param, value):
    return Excluded.parse(value)

def to_included(ctx, param, value):
    return Included.parse(value)


class FilterUI:

    def __init__(self, args):
        args = dotdict(args)

        self.args     = args
        self.result   = WordsResult(args.word)
        self.excluded = args.excluded
        self.included = args.included

    @property
    def length(self):
        return self.result.length

    def check_letters(self):
        for name, letters in (('excluded', self.excluded), ('included', self.included)):
            bad = [c for c in letters if not c.isalpha()]
            if bad:
                logger.warning(f"{name} letters contain non letters: {''.join(sorted(bad))}")

    def run(self):
        self.check_letters()
        filter_words(self.result, read_lines(self.args.dict), self.excluded, self.included)

        print(self.result.render(), end='', markup=False)

        if self.length:
            print(f"[bold green]{self.length} possible words[/bold green]")
        else:
            print("[bold yellow]no words match[/bold yellow]")


@click.command()
@click.option('--dict', default=str(dictfile), type=click.Path(exists=True, readable=True, dir_okay=False, path_type=pathlib.Path))
@click.option('--excluded', '-e', metavar='letters', default='', callback=to_excluded, help="List of chars you want to omit")
@click.option('--included', '-i', metavar='letters', default='', callback=to_included, help="List of chars you want to include")
@click.option('--verbose', '-v', is_flag=True, help="show debug logging")
@click.argument('word', callback=to_word)
@click.pass_context
def cli(ctx, *_, **args):
    """
    find the possible answers to a word puzzle

    WORD is 5 characters long, use * _ or ? for unknown letters.

    \b
    eg. words -e wt -i r 'a??gh'
    """
    level = logging.DEBUG if args['verbose'] else logging.INFO
    logging.basicConfig(format="%(message)s", level=level)
    logger.setLevel(level)
    logger.debug(f"{args=}")

    try:
        ui = FilterUI(args)
        ui.run()
    except KeyboardInterrupt:
        pass
