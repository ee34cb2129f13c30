from . import protocol, grammar, names, mapping, ctcp

from .protocol import Error, NullInputError, GrammarError, ConversionError
from .grammar import NameGrammar, CharacterSet
from .names import Parsed, Identifier, Nickname, ChannelName, Username
from .mapping import ReadOnlyDict

__name__ = 'ircnames'
__version__ = '0.1.0'
__version_info__ = (0, 1, 0)
__license__ = 'BSD'
