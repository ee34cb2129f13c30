## check.py
# Check names against the IRC name grammars.
import argparse
import logging
import sys
import ircnames
from ircnames import names

KINDS = {
    'nickname': names.Nickname,
    'channel': names.ChannelName,
    'username': names.Username
}

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser('ircnames-check', description='Check whether names are valid on IRC.', add_help=False,
        epilog='This program is part of {package}.'.format(package=ircnames.__name__))

    meta = parser.add_argument_group('Meta')
    meta.add_argument('-h', '--help', action='help', help='What you are reading right now.')
    meta.add_argument('-v', '--version', action='version', version='{package}/%(prog)s {ver}'.format(package=ircnames.__name__, ver=ircnames.__version__), help='Dump version number.')
    meta.add_argument('-V', '--verbose', help='Be verbose in warnings and errors.', action='store_true', default=False)
    meta.add_argument('-d', '--debug', help='Show debug output.', action='store_true', default=False)

    checking = parser.add_argument_group('Checking')
    checking.add_argument('names', help='Names to check. Read from standard input, one per line, if none are given.', nargs='*', metavar='NAME')
    checking.add_argument('-k', '--kind', help='Kind of name to check for. (default: nickname)', choices=sorted(KINDS), default='nickname')
    checking.add_argument('-q', '--quiet', help='Only report invalid names.', action='store_true', default=False)

    return parser.parse_args(argv)


def check(candidates, kind, out=None, quiet=False):
    """ Check every candidate name, report the outcome to out, and return how many were invalid. """
    out = out or sys.stdout
    cls = KINDS[kind]
    invalid = 0

    for candidate in candidates:
        value, error = cls.parse(candidate)
        if error is not None:
            invalid += 1
            logger.debug('Rejected %r: %s', candidate, error)
            print('{}: invalid ({})'.format(candidate, error.reason), file=out)
        elif not quiet:
            print('{}: valid'.format(value), file=out)

    return invalid


def main(argv=None):
    args = parse_args(argv)

    # Set log level.
    if args.debug:
        log_level = logging.DEBUG
    elif args.verbose:
        log_level = logging.INFO
    else:
        log_level = logging.ERROR

    logging.basicConfig(level=log_level)

    if args.names:
        candidates = args.names
    else:
        candidates = (line.rstrip('\r\n') for line in sys.stdin)

    logger.info('Checking names as %s.', args.kind)
    invalid = check(candidates, args.kind, quiet=args.quiet)
    if invalid:
        logger.info('%d invalid name(s).', invalid)
    return 1 if invalid else 0


if __name__ == '__main__':
    sys.exit(main())
