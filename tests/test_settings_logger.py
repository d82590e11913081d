import logging

import pytest

from config.settings import Settings, _env_flag, project_root
from utils.logger import LoggingContext, get_logging_mode, set_logging_mode, setup_logger


@pytest.mark.parametrize('raw,expected', [
    ('true', True),
    ('1', True),
    ('Yes', True),
    ('false', False),
    ('OFF', False),
    ('', True),
])
def test_env_flag(monkeypatch, raw, expected):
    monkeypatch.setenv('RATIO_GUARD_TEST', raw)
    assert _env_flag('RATIO_GUARD_TEST', True) is expected


def test_env_flag_rejects_garbage(monkeypatch):
    monkeypatch.setenv('RATIO_GUARD_TEST', 'maybe')
    with pytest.raises(ValueError):
        _env_flag('RATIO_GUARD_TEST', True)


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv('RATIO_GUARD', 'false')
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    monkeypatch.setenv('DATA_DIR', str(tmp_path))
    monkeypatch.setenv('OUTPUT_DIR', 'reports')
    monkeypatch.delenv('BENCHMARKS_PATH', raising=False)

    s = Settings()
    assert s.RATIO_GUARD is False
    assert s.LOG_LEVEL == 'DEBUG'
    assert s.DATA_DIR == tmp_path
    assert s.OUTPUT_DIR == project_root / 'reports'
    assert s.BENCHMARKS_PATH is None
    assert s.describe()['benchmarks_path'] == 'built-in'


def test_settings_defaults(monkeypatch):
    for name in ('RATIO_GUARD', 'DATA_DIR', 'OUTPUT_DIR', 'BENCHMARKS_PATH'):
        monkeypatch.delenv(name, raising=False)
    s = Settings()
    assert s.RATIO_GUARD is True
    assert s.DATA_DIR == project_root / 'data'


class TestLogger:

    @pytest.fixture(autouse=True)
    def restore_mode(self):
        mode = get_logging_mode()
        set_logging_mode(LoggingContext.STANDALONE)
        yield
        set_logging_mode(mode)

    def test_starts_in_standalone_mode(self):
        # runner imports elsewhere in the session switch to ORCHESTRATED
        assert get_logging_mode() is LoggingContext.STANDALONE
        assert setup_logger('test_standalone', level=logging.INFO).level == logging.INFO

    def test_setup_logger_single_handler(self):
        logger = setup_logger('test_single', level=logging.INFO)
        setup_logger('test_single', level=logging.INFO)
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO

    def test_silent_mode(self):
        set_logging_mode(LoggingContext.SILENT)
        assert setup_logger('test_silent', level=logging.DEBUG).level == logging.CRITICAL

    def test_orchestrated_mode_keeps_runner_loggers(self):
        set_logging_mode(LoggingContext.ORCHESTRATED)
        assert setup_logger('category_scorer', level=logging.INFO).level == logging.ERROR
        assert setup_logger('run_scoring', level=logging.INFO).level == logging.INFO

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / 'scoring.log'
        logger = setup_logger('test_file', level=logging.INFO, log_file=str(log_file))
        logger.info('scored 3 stocks')
        for handler in logger.handlers:
            handler.flush()
        assert 'scored 3 stocks' in log_file.read_text(encoding='utf-8')
        for handler in logger.handlers:
            handler.close()
