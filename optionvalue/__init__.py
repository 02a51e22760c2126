import logging
from .error import *
from .option import Option, Present, Absent
from .foreign import from_foreign


absent = Option.absent
empty = Option.empty
of = Option.of
of_nullable = Option.of_nullable
from_nullable = Option.from_nullable


logging.getLogger(__name__).addHandler(logging.NullHandler())


__title__ = 'optionvalue'
__version__ = '0.1.0'
__license__ = 'MIT'
