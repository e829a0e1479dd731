"""
Run curl for a single request and collect its timing metrics.

curl writes the metrics to stdout through -w, the response headers to a
temporary file through -D and the body to another through -o. The files are
read back and removed before run_curl() returns.
"""
import os
import shlex
import subprocess
import sys
import tempfile
from collections import namedtuple
from urllib.parse import urlparse

from .errors import ConflictingCurlOption, CurlError
from .metrics import OPTIONAL_METRICS, REQUIRED_METRICS

# One "label:value" line per metric, the format metrics.parse_metrics() reads.
CURL_FORMAT = '\n'.join(f'{name}:%{{{name}}}' for name in REQUIRED_METRICS + OPTIONAL_METRICS)

# Options httpstat sets itself; letting the user pass them would break parsing.
EXCLUDED_OPTIONS = (
    '-w', '--write-out',
    '-D', '--dump-header',
    '-o', '--output',
    '-s', '--silent',
)

HEADER_FILE = 'httpstat_dump_header.txt'
BODY_FILE = 'httpstat_output.txt'

CurlResult = namedtuple('CurlResult', ['metrics_text', 'headers', 'body'])


def scheme_of(url):
    """Return the URL scheme in lower case; curl assumes http when there is none."""
    if '://' not in url:
        return 'http'
    return urlparse(url).scheme.lower() or 'http'


def check_options(curl_args):
    for arg in curl_args:
        if arg in EXCLUDED_OPTIONS:
            raise ConflictingCurlOption(arg)


def build_command(url, curl_args, header_path, body_path, curl_bin='curl'):
    """
    Build the curl argument list.

    Args:
        url (str): Request URL
        curl_args (list): Extra options passed through to curl
        header_path (str): File curl dumps the response headers to
        body_path (str): File curl writes the response body to
        curl_bin (str): curl executable

    Returns:
        list: The command for subprocess.run()

    Raises:
        ConflictingCurlOption: curl_args contains one of EXCLUDED_OPTIONS
    """
    check_options(curl_args)
    return [
        curl_bin,
        *curl_args,
        '-w', CURL_FORMAT,        # Metrics on stdout
        '-D', header_path,        # Response headers
        '-o', body_path,          # Response body
        '-s', '-S',               # No progress meter, but keep error messages
        url,
    ]


def format_command(cmd):
    return ' '.join(shlex.quote(part) for part in cmd)


def _read(path):
    try:
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            return f.read()
    except FileNotFoundError:
        # curl never creates the file when the request fails before a response.
        return ''


def run_curl(url, curl_args=(), curl_bin='curl', debug=False):
    """
    Execute one request with curl.

    Returns:
        CurlResult: metrics text, response headers and response body

    Raises:
        ConflictingCurlOption: curl_args contains a managed option
        CurlError: curl is missing or exited with a non-zero status
    """
    curl_args = list(curl_args)
    with tempfile.TemporaryDirectory(prefix='httpstat-') as tmpdir:
        header_path = os.path.join(tmpdir, HEADER_FILE)
        body_path = os.path.join(tmpdir, BODY_FILE)
        cmd = build_command(url, curl_args, header_path, body_path, curl_bin=curl_bin)
        if debug:
            print(f"DEBUG: {format_command(cmd)}", file=sys.stderr)

        try:
            process = subprocess.run(cmd, capture_output=True, text=True)
        except FileNotFoundError:
            raise CurlError(f"{curl_bin} not found. Please install curl.") from None

        if process.returncode != 0:
            error_msg = f"curl exit code: {process.returncode}"
            if process.stderr:
                error_msg += f" - {process.stderr.strip()}"
            raise CurlError(error_msg, returncode=process.returncode, stderr=process.stderr)

        return CurlResult(
            metrics_text=process.stdout,
            headers=_read(header_path),
            body=_read(body_path),
        )
