"""
Command line entry point.

    httpstat [--show-body] [--show-speed] [--debug] URL [CURL_OPTIONS...]

httpstat's own flags may also follow URL; every other argument after URL is
passed to curl unchanged.
"""
import argparse
import sys

from . import __version__
from .colors import Style, bold, cyan, grayscale, green, yellow
from .config import load_settings
from .curl import run_curl, scheme_of
from .errors import HttpstatError
from .metrics import parse_metrics
from .template import build_diagram

HEADER_NAME_LEVEL = 14

# Flags of our own that are pulled back out of the curl arguments.
OWN_FLAGS = ('--show-body', '--show-speed', '--debug')


def build_parser():
    parser = argparse.ArgumentParser(
        prog='httpstat',
        description='Visualize curl timing statistics for one HTTP/HTTPS request')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--show-body', action='store_true', default=None,
                        help='Print a preview of the response body (env: HTTPSTAT_SHOW_BODY)')
    parser.add_argument('--show-speed', action='store_true', default=None,
                        help='Print download and upload speed (env: HTTPSTAT_SHOW_SPEED)')
    parser.add_argument('--debug', action='store_true', default=None,
                        help='Print the curl command line to stderr (env: HTTPSTAT_DEBUG)')
    parser.add_argument('url', help='URL to request')
    parser.add_argument('curl_args', nargs=argparse.REMAINDER,
                        help='Options passed through to curl')
    return parser


def parse_args(argv=None):
    args = build_parser().parse_args(argv)
    curl_args = []
    for arg in args.curl_args:
        if arg in OWN_FLAGS:
            setattr(args, arg[2:].replace('-', '_'), True)
        else:
            curl_args.append(arg)
    args.curl_args = curl_args
    return args


def format_headers(headers):
    """Color curl's header dump: status lines green, names gray, values cyan."""
    lines = []
    for line in headers.replace('\r\n', '\n').split('\n'):
        if not line:
            continue
        if line.startswith('HTTP/'):
            lines.append(green(bold(line)))
            continue
        name, sep, value = line.partition(':')
        if not sep:
            lines.append(line)
            continue
        lines.append(grayscale(HEADER_NAME_LEVEL, name + ':') + cyan(value))
    return '\n'.join(lines)


def format_body(body, limit):
    if len(body) > limit:
        return body[:limit] + '\n' + yellow(f"{len(body) - limit} chars truncated, showing first {limit}")
    return body


def format_speed(record):
    return (f"speed_download: {record.speed_download / 1024:.1f} KiB/s, "
            f"speed_upload: {record.speed_upload / 1024:.1f} KiB/s")


def warn_negative_ranges(record, scheme):
    for name, ms in record.negative_ranges(include_tls=scheme == 'https').items():
        print(f"WARNING: negative {name} duration ({ms}ms), curl reported timestamps out of order",
              file=sys.stderr)


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings()
    show_body = settings.show_body if args.show_body is None else args.show_body
    show_speed = settings.show_speed if args.show_speed is None else args.show_speed
    debug = settings.debug if args.debug is None else args.debug

    try:
        result = run_curl(args.url, args.curl_args, curl_bin=settings.curl_bin, debug=debug)
        record = parse_metrics(result.metrics_text)
        scheme = scheme_of(args.url)
        diagram = build_diagram(record, scheme, style=Style.CYAN)
    except HttpstatError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    warn_negative_ranges(record, scheme)

    if result.headers:
        print(format_headers(result.headers))
        print()
    if show_body and result.body:
        print(format_body(result.body, settings.body_limit))
        print()
    print(diagram)
    if show_speed:
        print()
        print(format_speed(record))
    return 0
