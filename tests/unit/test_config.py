"""Tests for library configuration loading and logging setup."""

import logging

import pytest

from eitherkit.config import (
    DEFAULT_LOG_FORMAT,
    ENV_LOG_FORMAT,
    ENV_LOG_LEVEL,
    ENV_TRACE_COLLECTORS,
    LibraryConfig,
    LogLevel,
    configure_logging,
    get_config,
    load_config_from_env,
    parse_bool_env,
    parse_choice_env,
    set_config,
)
from eitherkit.core.either import Either
from eitherkit.errors import ConfigurationError


class TestLibraryConfigCreate:
    def test_defaults(self):
        result = LibraryConfig.create()
        assert result == Either.right(LibraryConfig())
        config = result.or_else_throw(ConfigurationError)
        assert config.log_level is LogLevel.WARNING
        assert config.log_format == DEFAULT_LOG_FORMAT
        assert config.trace_collectors is False

    def test_level_is_case_insensitive(self):
        config = LibraryConfig.create(log_level=" debug ").or_else_throw(ConfigurationError)
        assert config.log_level is LogLevel.DEBUG

    def test_invalid_level(self):
        result = LibraryConfig.create(log_level="LOUD")
        assert result.is_left()
        problems = result.get_left().or_else_throw()
        assert len(problems) == 1
        assert problems[0].startswith("log_level")

    def test_invalid_format(self):
        result = LibraryConfig.create(log_format="%(nonexistent)s")
        assert result.is_left()
        assert result.get_left().or_else_throw()[0].startswith("log_format")

    def test_reports_every_problem(self):
        result = LibraryConfig.create(log_level="LOUD", log_format="")
        assert len(result.get_left().or_else_throw()) == 2

    def test_config_is_frozen(self):
        with pytest.raises(AttributeError):
            LibraryConfig().trace_collectors = True


class TestEnvParsing:
    def test_parse_bool_env(self, clean_env):
        assert parse_bool_env(ENV_TRACE_COLLECTORS, False) == Either.right(False)
        clean_env.setenv(ENV_TRACE_COLLECTORS, "Yes")
        assert parse_bool_env(ENV_TRACE_COLLECTORS) == Either.right(True)
        clean_env.setenv(ENV_TRACE_COLLECTORS, "off")
        assert parse_bool_env(ENV_TRACE_COLLECTORS, True) == Either.right(False)
        clean_env.setenv(ENV_TRACE_COLLECTORS, "maybe")
        assert parse_bool_env(ENV_TRACE_COLLECTORS).is_left()

    def test_parse_choice_env(self, clean_env):
        assert parse_choice_env(ENV_LOG_LEVEL, LogLevel, LogLevel.INFO) == Either.right(
            LogLevel.INFO
        )
        clean_env.setenv(ENV_LOG_LEVEL, "error")
        assert parse_choice_env(ENV_LOG_LEVEL, LogLevel, LogLevel.INFO) == Either.right(
            LogLevel.ERROR
        )
        clean_env.setenv(ENV_LOG_LEVEL, "LOUD")
        result = parse_choice_env(ENV_LOG_LEVEL, LogLevel, LogLevel.INFO)
        assert "expected one of DEBUG" in result.get_left().or_else_throw()


class TestFromEnv:
    def test_defaults_without_env(self, clean_env):
        assert LibraryConfig.from_env() == Either.right(LibraryConfig())

    def test_reads_env(self, clean_env):
        clean_env.setenv(ENV_LOG_LEVEL, "info")
        clean_env.setenv(ENV_LOG_FORMAT, "%(levelname)s %(message)s")
        clean_env.setenv(ENV_TRACE_COLLECTORS, "1")
        assert LibraryConfig.from_env() == Either.right(
            LibraryConfig(
                log_level=LogLevel.INFO,
                log_format="%(levelname)s %(message)s",
                trace_collectors=True,
            )
        )

    def test_collects_all_env_problems(self, clean_env):
        clean_env.setenv(ENV_LOG_LEVEL, "LOUD")
        clean_env.setenv(ENV_TRACE_COLLECTORS, "maybe")
        problems = LibraryConfig.from_env().get_left().or_else_throw()
        assert len(problems) == 2
        assert ENV_LOG_LEVEL in problems[0]
        assert ENV_TRACE_COLLECTORS in problems[1]

    def test_from_env_or_raise(self, clean_env):
        clean_env.setenv(ENV_TRACE_COLLECTORS, "maybe")
        with pytest.raises(ConfigurationError) as exc_info:
            LibraryConfig.from_env_or_raise()
        assert len(exc_info.value.problems) == 1

    def test_load_config_from_env_activates(self, clean_env):
        clean_env.setenv(ENV_TRACE_COLLECTORS, "true")
        assert load_config_from_env().trace_collectors is True
        assert get_config().trace_collectors is True

    def test_load_config_from_env_keeps_defaults_on_error(self, clean_env, caplog):
        set_config(LibraryConfig())
        clean_env.setenv(ENV_LOG_LEVEL, "LOUD")
        with caplog.at_level(logging.WARNING, logger="eitherkit"):
            assert load_config_from_env() == LibraryConfig()
        assert "Ignoring invalid eitherkit settings" in caplog.text


class TestConfigureLogging:
    @pytest.fixture
    def package_logger(self):
        logger = logging.getLogger("eitherkit")
        saved_level = logger.level
        saved_handlers = list(logger.handlers)
        yield logger
        logger.handlers = saved_handlers
        logger.setLevel(saved_level)

    def test_sets_level_and_handler(self, package_logger):
        configure_logging(LibraryConfig(log_level=LogLevel.DEBUG))
        assert package_logger.level == logging.DEBUG
        added = [h for h in package_logger.handlers if isinstance(h, logging.StreamHandler)]
        assert len(added) == 1

    def test_is_idempotent(self, package_logger):
        before = len(package_logger.handlers)
        configure_logging(LibraryConfig())
        configure_logging(LibraryConfig(log_level=LogLevel.ERROR))
        assert len(package_logger.handlers) == before + 1
        assert package_logger.level == logging.ERROR

    def test_uses_active_config_by_default(self, package_logger):
        set_config(LibraryConfig(log_level=LogLevel.INFO))
        assert configure_logging() is package_logger
        assert package_logger.level == logging.INFO
