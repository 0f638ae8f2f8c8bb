import logging

from georeference.utils.logging import LOGGER, warn_once


def test_logger_configuration():
    assert LOGGER.name == 'georeference'
    assert LOGGER.level == logging.WARNING
    assert any(
        handler.formatter._fmt == '[%(levelname)s] %(name)s: %(message)s'
        for handler in LOGGER.handlers
    )


def test_warn_once(monkeypatch, caplog):
    monkeypatch.setattr('georeference.utils.logging._WARNINGS', set())

    warn_once('ellipsoid %s is deprecated')
    warn_once('ellipsoid %s is deprecated')
    warn_once('another message')

    records = [x for x in caplog.records if x.name == 'georeference']
    assert [x.getMessage() for x in records] == ['ellipsoid %s is deprecated', 'another message']
    assert all(x.levelno == logging.WARNING for x in records)
