"""Tests for the HTTP/HTTPS diagram layouts."""

import pytest

from httpstat.colors import Style
from httpstat.metrics import TimingRecord
from httpstat.phases import Phase
from httpstat.progress import render
from httpstat.template import DiagramTemplate, build_diagram


def _blue(text):
    return f'\x1b[34m{text}\x1b[0m'


def _red(text):
    return f'\x1b[31m{text}\x1b[0m'


def _cyan(text):
    return f'\x1b[36m{text}\x1b[0m'


def test_http_format():
    t = DiagramTemplate('http')
    t.add(render(Phase.DNS_LOOKUP, 100, Style.BLUE))
    t.add(render(Phase.TCP_CONNECTION, 200, Style.BLUE))
    t.add(render(Phase.SERVER_PROCESSING, 300, Style.BLUE))
    t.add(render(Phase.CONTENT_TRANSFER, 400, Style.BLUE))
    t.add(render(Phase.NAME_LOOKUP, 500, Style.BLUE))
    t.add(render(Phase.CONNECT, 600, Style.BLUE))
    t.add(render(Phase.START_TRANSFER, 700, Style.BLUE))
    t.add(render(Phase.TOTAL, 800, Style.BLUE))

    expected = '\n'.join([
        '  DNS Lookup   TCP Connection   Server Processing   Content Transfer',
        '[   ' + _blue(' 100ms ') + '  |     ' + _blue(' 200ms ') + '    |      '
        + _blue(' 300ms ') + '      |      ' + _blue(' 400ms ') + '     ]',
        '             |                |                   |                  |',
        '    namelookup:' + _blue('500ms  ') + '        |                   |                  |',
        '                        connect:' + _blue('600ms  ') + '           |                  |',
        '                                      starttransfer:' + _blue('700ms  ') + '          |',
        '                                                                 total:' + _blue('800ms  '),
    ])
    assert t.format() == expected


def test_https_format():
    t = DiagramTemplate('https')
    t.add(render(Phase.DNS_LOOKUP, 100, Style.RED))
    t.add(render(Phase.TCP_CONNECTION, 200, Style.RED))
    t.add(render(Phase.SSL_HANDSHAKE, 300, Style.RED))
    t.add(render(Phase.SERVER_PROCESSING, 400, Style.RED))
    t.add(render(Phase.CONTENT_TRANSFER, 500, Style.RED))
    t.add(render(Phase.NAME_LOOKUP, 600, Style.RED))
    t.add(render(Phase.CONNECT, 700, Style.RED))
    t.add(render(Phase.PRE_TRANSFER, 800, Style.RED))
    t.add(render(Phase.START_TRANSFER, 900, Style.RED))
    t.add(render(Phase.TOTAL, 1000, Style.RED))

    expected = '\n'.join([
        '  DNS Lookup   TCP Connection   SSL Handshake   Server Processing   Content Transfer',
        '[   ' + _red(' 100ms ') + '  |     ' + _red(' 200ms ') + '    |    ' + _red(' 300ms ')
        + '    |      ' + _red(' 400ms ') + '      |      ' + _red(' 500ms ') + '     ]',
        '             |                |               |                   |                  |',
        '    namelookup:' + _red('600ms  ') + '        |               |                   |                  |',
        '                        connect:' + _red('700ms  ') + '       |                   |                  |',
        '                                    pretransfer:' + _red('800ms  ') + '           |                  |',
        '                                                      starttransfer:' + _red('900ms  ') + '          |',
        '                                                                                 total:' + _red('1000ms '),
    ])
    assert t.format() == expected


def test_line_counts():
    assert len(DiagramTemplate('http').format().split('\n')) == 7
    assert len(DiagramTemplate('https').format().split('\n')) == 8


def test_missing_slots_render_empty():
    lines = DiagramTemplate('http').format().split('\n')
    assert lines[0] == '  DNS Lookup   TCP Connection   Server Processing   Content Transfer'
    assert lines[1] == '[     |         |            |           ]'
    assert lines[3] == '    namelookup:        |                   |                  |'
    assert lines[6] == '                                                                 total:'


def test_partial_insert_keeps_other_slots_empty():
    t = DiagramTemplate('http')
    t.insert('b0004', 'X')
    lines = t.format().split('\n')
    assert lines[6].endswith('total:X')
    assert lines[4] == '                        connect:           |                  |'


def test_last_insert_wins():
    t = DiagramTemplate('http')
    t.insert('a0000', 'first')
    t.insert('a0000', 'second')
    out = t.format()
    assert 'second' in out
    assert 'first' not in out


def test_format_is_repeatable():
    t = DiagramTemplate('https')
    t.add(render(Phase.TOTAL, 10, Style.GREEN))
    assert t.format() == t.format()


@pytest.mark.parametrize('scheme', ['http', 'ftp', '', 'HTTPS'])
def test_non_https_schemes_use_http_layout(scheme):
    out = DiagramTemplate(scheme).format()
    assert 'SSL Handshake' not in out
    assert 'pretransfer:' not in out


def test_https_only_slots_are_ignored_in_http_layout():
    t = DiagramTemplate('http')
    t.insert('a0002', 'hidden')
    t.insert('b0002', 'hidden')
    assert 'hidden' not in t.format()


class TestBuildDiagram:
    @pytest.fixture
    def record(self):
        return TimingRecord({
            'time_namelookup': 2.512,
            'time_connect': 2.598,
            'time_appconnect': 0.0,
            'time_pretransfer': 2.599,
            'time_starttransfer': 2.659,
            'time_total': 2.782,
        })

    def test_https(self, record):
        out = build_diagram(record, 'https')
        lines = out.split('\n')
        assert lines[1] == ('[   ' + _cyan('2512ms ') + '  |     ' + _cyan(' 86ms  ') + '    |    '
                            + _cyan('  1ms  ') + '    |      ' + _cyan(' 60ms  ') + '      |      '
                            + _cyan(' 123ms ') + '     ]')
        assert 'pretransfer:' + _cyan('2599ms ') in out
        assert lines[-1].endswith('total:' + _cyan('2782ms '))

    def test_http_omits_tls(self, record):
        out = build_diagram(record, 'http')
        assert 'SSL Handshake' not in out
        assert _cyan('  1ms  ') not in out
        assert '2599ms' not in out
        assert 'starttransfer:' + _cyan('2659ms ') in out

    def test_style(self, record):
        out = build_diagram(record, 'http', style=Style.BLUE)
        assert _blue('2512ms ') in out

    def test_negative_duration_is_rendered(self):
        record = TimingRecord({
            'time_namelookup': 0.5,
            'time_connect': 0.4,
            'time_pretransfer': 0.4,
            'time_starttransfer': 0.45,
            'time_total': 0.5,
        })
        out = build_diagram(record, 'http')
        assert _cyan('-100ms ') in out

    def test_non_finite_values_render_as_zero(self):
        record = TimingRecord({
            'time_namelookup': float('inf'),
            'time_connect': float('nan'),
            'time_pretransfer': 0.01,
            'time_starttransfer': 0.02,
            'time_total': 0.03,
        })
        out = build_diagram(record, 'http')
        assert 'namelookup:' + _cyan('0ms    ') in out
        assert 'total:' + _cyan('30ms   ') in out

    def test_missing_metric_raises(self):
        from httpstat.errors import MissingRequiredPhase
        with pytest.raises(MissingRequiredPhase):
            build_diagram(TimingRecord({'time_total': 1.0}), 'http')
