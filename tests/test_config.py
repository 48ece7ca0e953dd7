"""Tests for configuration, logging setup and the demo entry points."""

import io
import logging

import pytest

from algebra_toolkit import main as toolkit_main
from algebra_toolkit.config import DemoConfig, create_debug_config, create_default_config
from algebra_toolkit.errors import ConfigError
from algebra_toolkit.functions import demo as polynomial_demo
from algebra_toolkit.logging_config import ROOT_LOGGER_NAME, setup_logging
from algebra_toolkit.operations import demo as operations_demo


@pytest.fixture(autouse=True)
def restore_toolkit_logger():
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level = logger.handlers[:], logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestDemoConfig:
    """Validation and factories."""

    def test_defaults(self):
        config = create_default_config()
        assert config.prime == 97
        assert config.num_samples == len(config.sample_points)
        assert config.logging_level == logging.WARNING

    def test_debug_config(self):
        config = create_debug_config()
        assert config.prime == 7
        assert config.logging_level == logging.DEBUG

    def test_log_level_case_insensitive(self):
        assert DemoConfig(log_level="info").log_level == "INFO"

    def test_sample_points_become_tuple(self):
        assert DemoConfig(sample_points=[1.0, 2.0]).sample_points == (1.0, 2.0)

    @pytest.mark.parametrize("kwargs", [
        {"prime": 1},
        {"sample_points": ()},
        {"log_level": "LOUD"},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ConfigError):
            DemoConfig(**kwargs)


class TestLogging:
    """setup_logging behavior."""

    def test_single_handler(self):
        setup_logging(logging.DEBUG)
        logger = setup_logging(logging.DEBUG)
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_level_name(self):
        assert setup_logging("warning").level == logging.WARNING

    def test_library_records_reach_handler(self):
        stream = io.StringIO()
        setup_logging(logging.DEBUG, stream=stream)
        from algebra_toolkit.functions.polynomial import PolynomialSpace
        from algebra_toolkit.operations.real import RealField
        PolynomialSpace(RealField())
        assert "Created PolynomialSpace over RealField()" in stream.getvalue()


class TestDemos:
    """The demos run end to end."""

    def test_polynomial_demo(self, capsys):
        polynomial_demo.main(create_debug_config())
        out = capsys.readouterr().out
        assert "POLYNOMIAL DEMO" in out
        assert "sum_of_self_powers = 2^0 + 3^1 + 4^2 = 20.0" in out

    def test_operations_demo(self, capsys):
        operations_demo.main(create_default_config())
        out = capsys.readouterr().out
        assert "PRIME FIELD Z_97" in out
        assert "FieldError" in out

    def test_main_quick(self, capsys):
        toolkit_main.main(["--quick"])
        assert "QUICK DEMO COMPLETE" in capsys.readouterr().out

    def test_main_menu_quit(self, capsys, monkeypatch):
        answers = iter(["x", "", "q"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        toolkit_main.main([])
        out = capsys.readouterr().out
        assert "Invalid choice" in out
        assert "Goodbye!" in out


class TestErrors:
    """The exception hierarchy."""

    def test_every_error_documented(self):
        from algebra_toolkit import errors
        for cls in (errors.AlgebraError, errors.UnsupportedOperationError, errors.FieldError,
                    errors.ShapeMismatchError, errors.ConfigError):
            assert cls.__doc__, cls.__name__

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            DemoConfig(prime=0)


class TestTestCollection:
    """A bare pytest run collects the suite and the doctests."""

    def test_testpaths(self, pytestconfig):
        assert pytestconfig.getini("testpaths") == ["tests", "algebra_toolkit"]

    def test_doctests_enabled(self, pytestconfig):
        assert pytestconfig.getoption("doctestmodules")
