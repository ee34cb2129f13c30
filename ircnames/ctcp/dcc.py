## dcc.py
# Direct-Client-to-Client (DCC) request payloads.
import ipaddress
from ircnames import protocol
from ircnames.names import Nickname
from . import CTCPError

__all__ = [ 'DCCError', 'FileTooLarge', 'DCCChatRequest', 'DCCSendRequest', 'DCCResumeRequest', 'DCCErrorEvent' ]


CHAT = 'CHAT'
SEND = 'SEND'
ACCEPT = 'ACCEPT'
RESUME = 'RESUME'

COMMANDS = frozenset({ CHAT, SEND, ACCEPT, RESUME })

PORT_RANGE = range(0, 65536)
DEFAULT_NETWORK_NAME = 'Unknown Network'


## Errors.

class DCCError(CTCPError):
    """ An error related to DCC sessions. """
    pass


class FileTooLarge(DCCError):
    """ A transferred file turned out larger than the size its sender announced. """
    def __init__(self, expected_size=None, actual_size=None, message=None):
        if message is None:
            message = protocol.message('file_too_large', expected=expected_size, actual=actual_size)
        super().__init__(message)
        self.expected_size = expected_size
        self.actual_size = actual_size


## Helpers.

def check_sender(sender):
    if sender is None:
        raise protocol.NullInputError('sender')
    if not isinstance(sender, Nickname):
        raise TypeError('DCC sender must be a Nickname, not {}.'.format(type(sender).__name__))
    return sender

def check_port(port):
    if port not in PORT_RANGE:
        raise ValueError('Port out of range: {}'.format(port))
    return port

def check_filename(filename):
    if filename is None:
        raise protocol.NullInputError('file name')
    if not filename:
        raise ValueError('File name must not be empty.')
    return filename

def parse_address(address):
    """ Normalize a DCC address given as integer, packed bytes or text into an IP address object. """
    if address is None:
        raise protocol.NullInputError('address')
    return ipaddress.ip_address(address)


## Payloads.

class DCCChatRequest:
    """ An incoming request to open a DCC chat session. """
    def __init__(self, sender, address, port):
        self.sender = check_sender(sender)
        self.address = parse_address(address)
        self.port = check_port(port)

        # Filled in by whoever handles the request.
        self.accept = False
        self.network_name = None
        self.protocol = None


class DCCSendRequest:
    """ An incoming offer to send a file over DCC. """
    def __init__(self, sender, filename, address, port, file_size):
        if file_size < 1:
            raise ValueError('File size must be positive, not {}.'.format(file_size))

        self.sender = check_sender(sender)
        self.filename = check_filename(filename)
        self.address = parse_address(address)
        self.port = check_port(port)
        self.file_size = file_size

        self.accept = False
        self.network_name = DEFAULT_NETWORK_NAME
        self.save_location = None
        self.token = None


class DCCResumeRequest:
    """ A request to resume a file transfer from a given position. """
    def __init__(self, filename, port, position=0):
        if position < 0:
            raise ValueError('Resume position must not be negative, not {}.'.format(position))

        self.filename = check_filename(filename)
        self.port = check_port(port)
        self.position = position
        self.token = None


class DCCErrorEvent:
    """ Describes a failure in a DCC session. """
    def __init__(self, message=None, exception=None):
        if message is None and exception is not None:
            message = str(exception)
        self.message = message
        self.exception = exception
