## protocol.py
# IRC name errors, messages and case mapping.

__all__ = [ 'Error', 'NullInputError', 'GrammarError', 'ConversionError', 'MESSAGES', 'message',
            'CASE_MAPPINGS', 'DEFAULT_CASE_MAPPING', 'fold' ]


## Messages.

MESSAGES = {
    'name_format': 'The {kind} is not in a valid format.',
    'invalid_conversion': "Cannot convert '{text}' to a valid {kind}.",
    'null_input': 'A {kind} must be given, not None.',
    'file_too_large': 'The received file is larger than the announced size ({actual} > {expected} bytes).'
}

def message(key, **params):
    """ Look up message template by key and format it with the given parameters. """
    return MESSAGES[key].format(**params)


## Errors.

class Error(Exception):
    """ Base class for all ircnames errors. """
    pass


class NullInputError(Error, TypeError):
    """ No input was given at all. """
    def __init__(self, kind='name'):
        super().__init__(message('null_input', kind=kind))
        self.kind = kind


class GrammarError(Error, ValueError):
    """ Input was given, but it does not follow the grammar for its kind of name. """
    def __init__(self, text, reason=None, kind='name'):
        super().__init__(message('name_format', kind=kind))
        self.text = text
        self.reason = reason
        self.kind = kind


class ConversionError(Error, ValueError):
    """ A plain string could not be converted to a name. """
    def __init__(self, text, kind='name'):
        super().__init__(message('invalid_conversion', text=text, kind=kind))
        self.text = text
        self.kind = kind


## Case mapping.

CASE_MAPPINGS = { 'ascii', 'rfc1459', 'strict-rfc1459' }
DEFAULT_CASE_MAPPING = 'ascii'

_ASCII_LOWER = 'abcdefghijklmnopqrstuvwxyz'
_ASCII_UPPER = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'

# Fixed tables: folding must never depend on locale or on Unicode case rules.
_CASE_TABLES = {
    'ascii': str.maketrans(_ASCII_LOWER, _ASCII_UPPER),
    'rfc1459': str.maketrans(_ASCII_LOWER + '{}|~', _ASCII_UPPER + '[]\\^'),
    'strict-rfc1459': str.maketrans(_ASCII_LOWER + '{}|', _ASCII_UPPER + '[]\\')
}

def fold(text, case_mapping=DEFAULT_CASE_MAPPING):
    """ Fold text to its canonical upper case form according to case mapping. """
    if case_mapping not in CASE_MAPPINGS:
        raise ValueError('Unknown case mapping ({})'.format(case_mapping))
    return text.translate(_CASE_TABLES[case_mapping])
