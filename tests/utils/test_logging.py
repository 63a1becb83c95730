import logging
import re

import webmercator_dist.utils.logging as wd_logging
from webmercator_dist.cli import main
from webmercator_dist.scan import scan_distortion


def test_warn_once(caplog, monkeypatch):
    monkeypatch.setattr(wd_logging, '_WARNINGS', set())

    wd_logging.warn_once('pole reached')
    wd_logging.warn_once('pole reached')
    assert len(re.findall('pole reached', caplog.text)) == 1
    assert caplog.records[0].name == 'webmercator_dist'
    assert caplog.records[0].levelno == logging.WARNING


def test_pole_warning_once_across_scans(caplog, monkeypatch):
    monkeypatch.setattr(wd_logging, '_WARNINGS', set())

    list(scan_distortion(30.))
    list(scan_distortion(45.))
    assert len(re.findall('singular at the pole', caplog.text)) == 1


def test_pole_warning_skipped_short_of_pole(caplog, monkeypatch):
    monkeypatch.setattr(wd_logging, '_WARNINGS', set())

    # Running latitude stops at 80 degrees
    list(scan_distortion(40.))
    assert 'singular at the pole' not in caplog.text


def test_pole_warning_kept_out_of_report(caplog, capsys, monkeypatch):
    monkeypatch.setattr(wd_logging, '_WARNINGS', set())

    main(['90'])
    out = capsys.readouterr().out
    assert 'singular at the pole' in caplog.text
    assert 'singular at the pole' not in out
    assert len(out.splitlines()) == 2


def test_samples_logged_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger='webmercator_dist')

    list(scan_distortion(30.))
    debug = [x for x in caplog.records if x.levelno == logging.DEBUG]
    assert len(debug) == 4
    assert debug[1].getMessage().startswith('lat=30.0 ')
