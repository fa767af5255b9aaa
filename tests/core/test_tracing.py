from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI
from sqlalchemy.pool import NullPool

from sales_api.core import tracing
from sales_api.core.metrics import Metrics
from sales_api.db.session import Database
from sales_api.main import create_application


@pytest.fixture
def database(tmp_path):
    # Never connected, so there is nothing to dispose
    return Database(f"sqlite+aiosqlite:///{tmp_path / 'sales.db'}", echo=False, poolclass=NullPool)


def test_setup_tracing_disabled_is_noop(database):
    app = FastAPI()

    with patch("sales_api.core.tracing.settings.ENABLE_TRACING", False), patch.object(
        tracing, "configure_tracer"
    ) as configure, patch.object(tracing, "SQLAlchemyInstrumentor") as sqlalchemy_instrumentor:
        tracing.setup_tracing(app, database.engine)

    configure.assert_not_called()
    sqlalchemy_instrumentor.assert_not_called()


def test_setup_tracing_instruments_app_engine_and_logging(database):
    app = FastAPI()
    tracer_provider = MagicMock()

    with patch("sales_api.core.tracing.settings.ENABLE_TRACING", True), patch.object(
        tracing, "configure_tracer", return_value=tracer_provider
    ) as configure, patch.object(tracing, "FastAPIInstrumentor") as fastapi_instrumentor, patch.object(
        tracing, "SQLAlchemyInstrumentor"
    ) as sqlalchemy_instrumentor, patch.object(
        tracing, "LoggingInstrumentor"
    ) as logging_instrumentor:
        tracing.setup_tracing(app, database.engine)

    configure.assert_called_once()
    fastapi_instrumentor.instrument_app.assert_called_once()
    assert fastapi_instrumentor.instrument_app.call_args.args == (app,)
    sqlalchemy_instrumentor.return_value.instrument.assert_called_once_with(
        engine=database.engine.sync_engine,
        tracer_provider=tracer_provider,
    )
    logging_instrumentor.return_value.instrument.assert_called_once_with(tracer_provider=tracer_provider)


def test_create_application_traces_its_own_engine(database):
    with patch("sales_api.main.settings.ENABLE_TRACING", True), patch("sales_api.main.setup_tracing") as setup:
        app = create_application(database=database, metrics=Metrics())

    setup.assert_called_once_with(app, database.engine)


def test_setup_tracing_logs_instead_of_failing(database):
    app = FastAPI()

    with patch("sales_api.core.tracing.settings.ENABLE_TRACING", True), patch.object(
        tracing, "configure_tracer", side_effect=RuntimeError("collector down")
    ), patch.object(tracing, "logger") as mock_logger:
        tracing.setup_tracing(app, database.engine)

    mock_logger.error.assert_called_once()


def test_create_span_yields_span():
    with tracing.create_span("db.seed", {"sales": 20}) as span:
        span.add_event("seed_committed")

    assert span is not None
