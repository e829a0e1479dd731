import pytest

from httpstat.metrics import parse_metrics

SAMPLE_METRICS = """\
time_namelookup:2.512
time_connect:2.598
time_appconnect:0
time_pretransfer:2.599
time_starttransfer:2.659
time_total:2.782
speed_download:2048.000
speed_upload:0.000
"""


@pytest.fixture
def sample_metrics():
    return SAMPLE_METRICS


@pytest.fixture
def record():
    return parse_metrics(SAMPLE_METRICS)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ('HTTPSTAT_CURL_BIN', 'HTTPSTAT_SHOW_BODY', 'HTTPSTAT_BODY_LIMIT',
                 'HTTPSTAT_SHOW_SPEED', 'HTTPSTAT_DEBUG'):
        monkeypatch.delenv(name, raising=False)
