import re

from uvoxid.utils import logging as uvoxid_logging
from uvoxid.utils.logging import LOGGER, warn_once


def test_logger_name():
    assert LOGGER.name == 'uvoxid'


def test_warn_once(caplog, monkeypatch):
    monkeypatch.setattr(uvoxid_logging, '_WARNINGS', set())

    warn_once('test')
    assert 'test' in caplog.text

    warn_once('test')
    assert len(re.findall('test', caplog.text)) == 1
