## names.py
# Validated, case-insensitively compared IRC names.
import collections
from . import grammar, protocol

__all__ = [ 'Parsed', 'Identifier', 'Nickname', 'ChannelName', 'Username' ]


Parsed = collections.namedtuple('Parsed', [ 'value', 'error' ])
Parsed.__doc__ = """ Outcome of parsing a name: exactly one of `value` and `error` is set. """


def compare_ordinal(left, right):
    """
    Compare two strings by code point.
    Returns the difference between the first pair of differing characters, or the difference in length
    if one string is a prefix of the other.
    """
    for l, r in zip(left, right):
        if l != r:
            return ord(l) - ord(r)
    return len(left) - len(right)


class Identifier:
    """
    An immutable name that is known to follow the grammar for its kind.

    Names keep the text they were created from, but compare, order and hash on their case-folded form,
    so 'TestName' and 'testname' are the same name.
    Subclasses define what kind of name they are through the KIND, GRAMMAR and CASE_MAPPING attributes.
    """
    __slots__ = ('_text', '_folded')

    KIND = 'name'
    GRAMMAR = None
    CASE_MAPPING = protocol.DEFAULT_CASE_MAPPING

    def __init__(self, text):
        """ Create a name from text, or raise if the text is not a valid name. """
        if text is None:
            raise protocol.NullInputError(self.KIND)
        if not isinstance(text, str):
            raise TypeError('A {kind} can only be created from a string, not {type}.'.format(
                kind=self.KIND, type=type(text).__name__))

        prepared = self._prepare(text)
        reason = self._grammar().check(prepared)
        if reason is not None:
            raise protocol.GrammarError(text, reason, kind=self.KIND)

        object.__setattr__(self, '_text', prepared)
        object.__setattr__(self, '_folded', protocol.fold(prepared, self.CASE_MAPPING))

    @classmethod
    def _grammar(cls):
        if cls.GRAMMAR is None:
            raise TypeError('{} defines no grammar; use a specific kind of name such as Nickname.'.format(cls.__name__))
        return cls.GRAMMAR

    @classmethod
    def _prepare(cls, text):
        """ Turn raw text into the form that gets validated and stored. """
        return text


    ## Construction.

    @classmethod
    def parse(cls, text):
        """ Create a name from text. Returns a Parsed tuple with either the name or the error that prevented it. """
        try:
            return Parsed(cls(text), None)
        except (protocol.NullInputError, protocol.GrammarError) as e:
            return Parsed(None, e)

    @classmethod
    def is_valid(cls, text):
        """ Check whether text would make a valid name. Never raises for bad text. """
        rules = cls._grammar()
        if not isinstance(text, str):
            return False
        return rules.validate(cls._prepare(text))

    @classmethod
    def convert(cls, text):
        """ Convert a plain string to a name, raising ConversionError if that is not possible. """
        if not cls.is_valid(text):
            raise protocol.ConversionError(text, kind=cls.KIND)
        return cls(text)


    ## Accessors.

    @property
    def text(self):
        """ The name as it was given. """
        return self._text

    def contains(self, value):
        """ Check whether value occurs in this name. Case-sensitive. """
        if value is None:
            raise protocol.NullInputError('substring')
        return value in self._text

    def startswith(self, value):
        """ Check whether this name starts with value. Case-sensitive. """
        if value is None:
            raise protocol.NullInputError('prefix')
        return self._text.startswith(value)

    def __contains__(self, value):
        return self.contains(value)

    def __len__(self):
        return len(self._text)

    def __str__(self):
        return self._text

    def __format__(self, spec):
        return format(self._text, spec)

    def __repr__(self):
        return '{mod}.{cls}({text!r})'.format(mod=self.__module__, cls=self.__class__.__name__, text=self._text)


    ## Comparison.

    def compare_to(self, other):
        """
        Compare this name to anything.
        Returns a negative number, zero or a positive number as this name sorts before, equal to or after other.
        Names sort after None and after anything that is not a name of the same kind.
        """
        if other is self:
            return 0
        if type(other) is not type(self):
            return 1
        return compare_ordinal(self._folded, other._folded)

    def _order(self, other):
        # Different kinds of names order by kind, so they still sort consistently among each other.
        if isinstance(other, Identifier) and type(other) is not type(self):
            return compare_ordinal(self.KIND, other.KIND) or compare_ordinal(type(self).__name__, type(other).__name__)
        return self.compare_to(other)

    def __eq__(self, other):
        if type(other) is not type(self):
            return False
        return self._folded == other._folded

    def __ne__(self, other):
        return not self == other

    def __lt__(self, other):
        return self._order(other) < 0

    def __le__(self, other):
        return self._order(other) <= 0

    def __gt__(self, other):
        return self._order(other) > 0

    def __ge__(self, other):
        return self._order(other) >= 0

    def __hash__(self):
        return hash(self._folded)


    ## Immutability.

    def __setattr__(self, name, value):
        raise AttributeError('{} objects are immutable.'.format(self.__class__.__name__))

    def __delattr__(self, name):
        raise AttributeError('{} objects are immutable.'.format(self.__class__.__name__))

    def __reduce__(self):
        return (self.__class__, (self._text,))


class Nickname(Identifier):
    """ A user nickname, such as 'WiZ' or '[afk]bot'. """
    __slots__ = ()
    KIND = 'nickname'
    GRAMMAR = grammar.NICKNAME


class ChannelName(Identifier):
    """ A channel name. Names given without a channel prefix get the default '#' prefix. """
    __slots__ = ()
    KIND = 'channel name'
    GRAMMAR = grammar.CHANNEL_NAME

    @classmethod
    def _prepare(cls, text):
        if text.strip() and text[0] not in grammar.CHANNEL_TYPES:
            return grammar.DEFAULT_CHANNEL_PREFIX + text
        return text


class Username(Identifier):
    """ The username (ident) part of a user's hostmask. """
    __slots__ = ()
    KIND = 'username'
    GRAMMAR = grammar.USERNAME
