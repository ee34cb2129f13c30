## mapping.py
# Read-only mapping adapter.
import collections.abc
from . import protocol

__all__ = [ 'ReadOnlyDict' ]


class ReadOnlyDict(collections.abc.Mapping):
    """
    A read-only view over another mapping.
    Changes made to the wrapped mapping show through; changes through the view are not supported.
    """
    def __init__(self, mapping):
        if mapping is None:
            raise protocol.NullInputError('mapping')
        self._storage = mapping

    def __getitem__(self, key):
        return self._storage[key]

    def __contains__(self, key):
        return key in self._storage

    def __iter__(self):
        return iter(self._storage)

    def __len__(self):
        return len(self._storage)

    def __repr__(self):
        return '{mod}.{cls}({dict!r})'.format(
            mod=__name__, cls=self.__class__.__name__, dict=self._storage)
