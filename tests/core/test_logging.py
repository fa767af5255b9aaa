import json
import logging
from datetime import datetime
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from sales_api.core import logging as logging_module


def test_serialize_record_basic():
    record = {
        "time": datetime.now(),
        "level": SimpleNamespace(name="INFO"),
        "message": "Seed complete",
        "name": "sales_api.db.init_db",
        "function": "seed_if_empty",
        "line": 42,
        "extra": {"attempt": 2, "_internal": "hidden"},
    }

    serialized = json.loads(logging_module.serialize_record(record))

    assert serialized["message"] == "Seed complete"
    assert serialized["level"] == "INFO"
    assert serialized["module"] == "sales_api.db.init_db"
    assert serialized["service"] == logging_module.settings.PROJECT_NAME
    assert serialized["attempt"] == 2
    assert "_internal" not in serialized


def test_serialize_record_fallback():
    record = {
        "time": datetime.now(),
        "level": SimpleNamespace(name="ERROR"),
        "message": "Fails",
        "extra": {"custom": object()},  # non-serializable
    }

    serialized = logging_module.serialize_record(record)

    assert "Error serializing log" in serialized
    assert "Fails" in serialized


@patch("sales_api.core.logging.logger")
def test_intercept_handler_forwards_to_loguru(mock_logger):
    handler = logging_module.InterceptHandler()
    record = logging.LogRecord("uvicorn.error", logging.WARNING, __file__, 1, "port %s busy", (3000,), None)

    handler.emit(record)

    mock_logger.opt.return_value.log.assert_called_once()
    _, message = mock_logger.opt.return_value.log.call_args.args
    assert message == "port 3000 busy"


@patch("sales_api.core.logging.logger")
@patch("sales_api.core.logging.settings.JSON_LOGS", True)
def test_configure_logging_json(mock_logger):
    mock_logger.add = MagicMock()
    mock_logger.remove = MagicMock()

    logging_module.configure_logging()
    mock_logger.add.assert_called()
    mock_logger.remove.assert_called()
    assert mock_logger.info.called


@patch("sales_api.core.logging.logger")
@patch("sales_api.core.logging.settings.JSON_LOGS", False)
def test_configure_logging_human(mock_logger):
    mock_logger.add = MagicMock()
    mock_logger.remove = MagicMock()

    logging_module.configure_logging()
    mock_logger.add.assert_called()
    mock_logger.remove.assert_called()
    assert isinstance(logging.getLogger("uvicorn").handlers[0], logging_module.InterceptHandler)
