"""
Runtime settings, read from the environment by load_settings().

    HTTPSTAT_CURL_BIN    curl executable to run (default: curl)
    HTTPSTAT_SHOW_BODY   print a preview of the response body (default: false)
    HTTPSTAT_BODY_LIMIT  characters of body to preview (default: 1024)
    HTTPSTAT_SHOW_SPEED  print download/upload speed (default: false)
    HTTPSTAT_DEBUG       print the curl command line to stderr (default: false)
"""
import os
import sys

TRUE_VALUES = ('true', '1', 'yes', 'on')

DEFAULT_CURL_BIN = 'curl'
DEFAULT_BODY_LIMIT = 1024


def env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUE_VALUES


def env_int(name, default):
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        print(f"WARNING: {name}={value!r} is not an integer, using {default}", file=sys.stderr)
        return default


class Settings:
    def __init__(self, curl_bin, show_body, body_limit, show_speed, debug):
        self.curl_bin = curl_bin
        self.show_body = show_body
        self.body_limit = body_limit
        self.show_speed = show_speed
        self.debug = debug

    def __repr__(self):
        return (f"Settings(curl_bin={self.curl_bin!r}, show_body={self.show_body}, "
                f"body_limit={self.body_limit}, show_speed={self.show_speed}, debug={self.debug})")


def load_settings():
    return Settings(
        curl_bin=os.getenv('HTTPSTAT_CURL_BIN') or DEFAULT_CURL_BIN,
        show_body=env_bool('HTTPSTAT_SHOW_BODY'),
        body_limit=env_int('HTTPSTAT_BODY_LIMIT', DEFAULT_BODY_LIMIT),
        show_speed=env_bool('HTTPSTAT_SHOW_SPEED'),
        debug=env_bool('HTTPSTAT_DEBUG'),
    )
