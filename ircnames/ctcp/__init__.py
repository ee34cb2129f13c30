## ctcp
# Client-to-Client-Protocol (CTCP) constants.
from ircnames import protocol

__all__ = [ 'CTCPError', 'DELIMITER', 'COMMANDS' ]


class CTCPError(protocol.Error):
    """ An error related to CTCP requests or replies. """
    pass


DELIMITER = '\x01'

ACTION = 'ACTION'
ERRMSG = 'ERRMSG'
TIME = 'TIME'
VERSION = 'VERSION'
FINGER = 'FINGER'
USERINFO = 'USERINFO'
CLIENTINFO = 'CLIENTINFO'
PING = 'PING'
SOURCE = 'SOURCE'

COMMANDS = frozenset({ ACTION, ERRMSG, TIME, VERSION, FINGER, USERINFO, CLIENTINFO, PING, SOURCE })
