## grammar.py
# Character-level grammars for IRC names.
from .mapping import ReadOnlyDict

__all__ = [ 'CharacterSet', 'NameGrammar', 'NICKNAME', 'CHANNEL_NAME', 'USERNAME', 'GRAMMARS' ]


class CharacterSet:
    """
    A set of characters described by inclusive code point ranges, literal characters and an optional
    predicate such as `str.isspace`.
    If `inverted` is set, the set contains every character *not* described.
    """
    def __init__(self, ranges=(), chars='', predicate=None, inverted=False):
        self.ranges = tuple(ranges)
        self.chars = frozenset(chars)
        self.predicate = predicate
        self.inverted = inverted

    def __contains__(self, char):
        code = ord(char)
        found = (char in self.chars or any(low <= code <= high for low, high in self.ranges)
                 or (self.predicate is not None and self.predicate(char)))
        return found != self.inverted

    def __repr__(self):
        return '{mod}.{cls}(ranges={ranges!r}, chars={chars!r}, predicate={pred!r}, inverted={inv!r})'.format(
            mod=__name__, cls=self.__class__.__name__,
            ranges=self.ranges, chars=''.join(sorted(self.chars)), pred=self.predicate, inv=self.inverted)


class NameGrammar:
    """
    The rule set a name has to follow: a set of characters allowed to lead the name,
    a set of characters allowed anywhere after that, and length bounds.
    Checking is a single pass over the input and never modifies it.
    """
    def __init__(self, leading, trailing, min_length=1, max_length=None):
        if min_length < 1:
            raise ValueError('Names need at least one character.')
        if max_length is not None and max_length < min_length:
            raise ValueError('Maximum length ({}) is below minimum length ({}).'.format(max_length, min_length))

        self.leading = leading
        self.trailing = trailing
        self.min_length = min_length
        self.max_length = max_length

    def check(self, text):
        """ Check text against this grammar. Return None if it is valid, or the reason it is not. """
        if text is None:
            return 'missing'
        if not isinstance(text, str):
            return 'not a string'
        if not text:
            return 'empty'
        if not text.strip():
            return 'blank'
        if len(text) < self.min_length:
            return 'too short (minimum {} characters)'.format(self.min_length)
        if self.max_length is not None and len(text) > self.max_length:
            return 'too long (maximum {} characters)'.format(self.max_length)

        if text[0] not in self.leading:
            return 'illegal leading character {!r}'.format(text[0])
        for position, char in enumerate(text[1:], start=1):
            if char not in self.trailing:
                return 'illegal character {!r} at position {}'.format(char, position)

        return None

    def validate(self, text):
        """ Check whether text is valid according to this grammar. """
        return self.check(text) is None

    def __repr__(self):
        return '{mod}.{cls}(leading={leading!r}, trailing={trailing!r}, min_length={min}, max_length={max})'.format(
            mod=__name__, cls=self.__class__.__name__,
            leading=self.leading, trailing=self.trailing, min=self.min_length, max=self.max_length)


## Built-in grammars.

# 'A' through '}': letters plus []\`_^{|}.
NICKNAME_LEADING = CharacterSet(ranges=[ (65, 125) ])
NICKNAME_TRAILING = CharacterSet(ranges=[ (65, 125), (48, 57) ], chars='-')

# '!' is a known channel type, so it never gets the default prefix, but it is not accepted.
CHANNEL_TYPES = '#&+!'
CHANNEL_PREFIXES = '#&+'
DEFAULT_CHANNEL_PREFIX = '#'
CHANNEL_LENGTH_LIMIT = 51
CHANNEL_LEADING = CharacterSet(chars=CHANNEL_PREFIXES)
CHANNEL_TRAILING = CharacterSet(chars='\x07,', predicate=str.isspace, inverted=True)

USERNAME_CHARACTERS = CharacterSet(chars='\0\r\n@', predicate=str.isspace, inverted=True)

NICKNAME = NameGrammar(NICKNAME_LEADING, NICKNAME_TRAILING)
CHANNEL_NAME = NameGrammar(CHANNEL_LEADING, CHANNEL_TRAILING, min_length=2, max_length=CHANNEL_LENGTH_LIMIT)
USERNAME = NameGrammar(USERNAME_CHARACTERS, USERNAME_CHARACTERS)

GRAMMARS = ReadOnlyDict({
    'nickname': NICKNAME,
    'channel': CHANNEL_NAME,
    'username': USERNAME
})
