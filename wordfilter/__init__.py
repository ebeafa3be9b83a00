import pathlib

dictfile  = pathlib.Path('words.txt')
wordlen   = 5
wildcards = '*_?'

import logging
logger = logging.getLogger()
