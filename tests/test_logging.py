"""
Tests for logging configuration and secret redaction.
"""

import json
import logging
import sys

import pytest
from pythonjsonlogger.json import JsonFormatter

from targetedid.logging_config import SecretRedactionFilter, setup_logging


SALT = "secretsalt"


@pytest.fixture
def restore_logger():
    logger = logging.getLogger('targetedid')
    level = logger.level
    handlers = logger.handlers[:]
    yield logger
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


def make_record(msg, args=None):
    return logging.LogRecord('targetedid.test', logging.INFO, __file__, 1, msg, args, None)


class TestSecretRedactionFilter:
    """Test that secrets never reach log output."""
    
    def test_redacts_message(self):
        record = make_record("salt is %s", (SALT,))
        
        assert SecretRedactionFilter([SALT]).filter(record)
        assert SALT not in record.getMessage()
        assert '[REDACTED]' in record.getMessage()
    
    def test_leaves_clean_message(self):
        record = make_record("nothing to hide %s", ('here',))
        
        SecretRedactionFilter([SALT]).filter(record)
        assert record.getMessage() == "nothing to hide here"
        assert record.args == ('here',)
    
    def test_ignores_empty_secrets(self):
        record = make_record("message")
        
        SecretRedactionFilter(['']).filter(record)
        assert record.getMessage() == "message"

    
    def test_redacts_extra_fields(self):
        """Test that string values passed via extra= are redacted."""
        record = make_record("lookup")
        record.salt_source = f"env:{SALT}"
        record.attempt = 3
        
        SecretRedactionFilter([SALT]).filter(record)
        assert record.salt_source == "env:[REDACTED]"
        assert record.attempt == 3
    
    def test_redacts_exception_text(self):
        """Test that exception text is redacted and replaces exc_info."""
        try:
            raise ValueError(f"bad salt {SALT}")
        except ValueError:
            record = make_record("failed")
            record.exc_info = sys.exc_info()
        
        SecretRedactionFilter([SALT]).filter(record)
        formatted = logging.Formatter().format(record)
        
        assert record.exc_info is None
        assert "ValueError: bad salt [REDACTED]" in formatted
        assert SALT not in formatted
    
    def test_keeps_clean_exception(self):
        try:
            raise ValueError("nothing secret")
        except ValueError:
            record = make_record("failed")
            record.exc_info = sys.exc_info()
        
        SecretRedactionFilter([SALT]).filter(record)
        assert record.exc_info is not None
    
    def test_redacts_stack_info(self):
        record = make_record("trace")
        record.stack_info = f"Stack (most recent call last):\n  salt={SALT}"
        
        SecretRedactionFilter([SALT]).filter(record)
        assert SALT not in record.stack_info

class TestSetupLogging:
    """Test handler installation."""
    
    def test_json_output(self, restore_logger, capsys):
        setup_logging(level='DEBUG', log_format='json', secrets=[SALT])
        logging.getLogger('targetedid.test').info("salt %s", SALT)
        
        line = capsys.readouterr().out.strip().splitlines()[-1]
        entry = json.loads(line)
        
        assert entry['level'] == 'INFO'
        assert entry['logger'] == 'targetedid.test'
        assert SALT not in line
    
    def test_json_output_redacts_extra_and_exception(self, restore_logger, capsys):
        """Test that neither extra fields nor tracebacks leak the salt into JSON."""
        setup_logging(level='INFO', log_format='json', secrets=[SALT])
        try:
            raise RuntimeError(f"salt={SALT}")
        except RuntimeError:
            logging.getLogger('targetedid.test').exception("failed", extra={'detail': SALT})
        
        line = capsys.readouterr().out.strip().splitlines()[-1]
        entry = json.loads(line)
        
        assert entry['detail'] == '[REDACTED]'
        assert 'RuntimeError: salt=[REDACTED]' in entry['exc_info']
        assert SALT not in line
    
    def test_json_formatter_type(self, restore_logger):
        """Test that the current JSON formatter module is used."""
        handler = setup_logging(log_format='json')
        assert isinstance(handler.formatter, JsonFormatter)
    
    def test_text_output(self, restore_logger, capsys):
        setup_logging(level='INFO', log_format='text')
        logging.getLogger('targetedid.test').warning("hello")
        
        out = capsys.readouterr().out
        assert 'targetedid.test - WARNING - hello' in out
    
    def test_level_from_environment(self, restore_logger, monkeypatch):
        monkeypatch.setenv('TARGETEDID_LOG_LEVEL', 'warning')
        
        setup_logging()
        assert restore_logger.level == logging.WARNING
    
    def test_unknown_level_defaults_to_info(self, restore_logger):
        setup_logging(level='chatty')
        assert restore_logger.level == logging.INFO
    
    def test_replaces_previous_handler(self, restore_logger):
        setup_logging(log_format='text')
        handler = setup_logging(log_format='text')
        
        assert restore_logger.handlers == [handler]
