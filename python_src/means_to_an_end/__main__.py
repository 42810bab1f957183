import argparse
import logging
import os
import sys

from .server import PriceServer, run

log = logging.getLogger('means_to_an_end')


def positive_float(value):
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError('%r is not a number' % value)
    if seconds <= 0:
        raise argparse.ArgumentTypeError('timeout must be positive, got %r' % value)
    return seconds


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='means-to-an-end',
                                     description='Per-connection asset price tracking server')
    parser.add_argument('--host', default=os.getenv('SOCKET_ADDRESS', '0.0.0.0'))
    parser.add_argument('--port', type=int, default=int(os.getenv('TCP_PORT', '8080')))
    # string defaults go through type= too, so IDLE_TIMEOUT is checked like the flag
    parser.add_argument('--timeout', type=positive_float, default=os.getenv('IDLE_TIMEOUT') or None,
                        help='close connections idle for this many seconds')
    parser.add_argument('--debug', action='store_true', default=bool(os.getenv('DEBUG')))
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format='[%(levelname)s] %(name)s: %(message)s',
        stream=sys.stderr)
    try:
        server = PriceServer((args.host, args.port), idle_timeout=args.timeout)
    except OSError as e:
        log.error("Failed to bind %s:%d: %s", args.host, args.port, e)
        return 1
    try:
        run(server)
    except KeyboardInterrupt:
        log.info("interrupt...")
    return 0


if __name__ == '__main__':
    sys.exit(main())
