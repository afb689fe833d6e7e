"""Basic unit tests for subsocial-types modules."""

import logging
from pathlib import Path

import pytest


class TestSettingsInitialization:
    """Test settings initialization and basic operations."""

    def test_app_settings_init(self) -> None:
        """Test AppSettings can be initialized with defaults."""
        from subsocial_types.settings import AppSettings
        from subsocial_types.aggregation import PALLETS

        settings_obj = AppSettings()
        assert settings_obj.base_dir == Path.cwd()
        assert settings_obj.modules == PALLETS

    def test_app_settings_paths(self, tmp_path: Path) -> None:
        """Test pallet and output paths are resolved against base_dir."""
        from subsocial_types.settings import AppSettings

        settings_obj = AppSettings(base_dir=tmp_path / "scripts")
        assert settings_obj.module_types_path("posts") == (
            tmp_path / "scripts" / "../pallets/posts/types.json"
        )
        assert settings_obj.output_path == tmp_path / "scripts" / "../types.json"

    def test_app_settings_validation(self) -> None:
        """Test settings validation returns result."""
        from subsocial_types.settings import AppSettings

        settings_obj = AppSettings()
        validation = settings_obj.validate()
        assert validation is not None


class TestSettingsValidation:
    """Test validation of pallet and path settings."""

    def test_defaults_are_valid(self, node_repo: Path) -> None:
        from subsocial_types.settings import AppSettings

        result = AppSettings(base_dir=node_repo).validate()
        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []

    def test_empty_pallet_list_is_invalid(self, node_repo: Path) -> None:
        from subsocial_types.settings import AppSettings

        result = AppSettings(base_dir=node_repo, modules=[]).validate()
        assert not result.is_valid
        assert "No pallets configured" in result.errors

    @pytest.mark.parametrize("name", ["", "  ", "posts/../..", "a\\b"])
    def test_bad_pallet_names_are_invalid(self, node_repo: Path, name: str) -> None:
        from subsocial_types.settings import AppSettings

        result = AppSettings(base_dir=node_repo, modules=["posts", name]).validate()
        assert not result.is_valid
        assert len(result.errors) == 1

    def test_duplicate_pallet_is_a_warning(self, node_repo: Path) -> None:
        from subsocial_types.settings import AppSettings

        result = AppSettings(base_dir=node_repo, modules=["posts", "posts"]).validate()
        assert result.is_valid
        assert result.warnings == ["Pallet listed more than once: posts"]

    def test_missing_output_directory_is_a_warning(self, tmp_path: Path) -> None:
        from subsocial_types.settings import AppSettings

        settings_obj = AppSettings(base_dir=tmp_path / "nowhere" / "scripts")
        result = settings_obj.validate()
        assert result.is_valid
        assert len(result.warnings) == 1
        assert result.warnings[0].startswith("Output directory does not exist")


class TestModuleSettings:
    """Test the pallet list and override tables."""

    def test_default_pallets(self) -> None:
        from subsocial_types.aggregation import PALLETS

        assert len(PALLETS) == 15
        assert PALLETS[0] == "donations"
        assert PALLETS[-1] == "utils"
        assert len(set(PALLETS)) == len(PALLETS)

    def test_override_tables(self) -> None:
        from subsocial_types.aggregation import RUNTIME_OWN_TYPES, SUBSOCIAL_CUSTOM_TYPES

        assert dict(RUNTIME_OWN_TYPES) == {
            "Address": "AccountId",
            "LookupSource": "AccountId",
        }
        assert dict(SUBSOCIAL_CUSTOM_TYPES) == {"IpfsCid": "Text"}

    def test_override_tables_are_read_only(self) -> None:
        from subsocial_types.aggregation import RUNTIME_OWN_TYPES

        with pytest.raises(TypeError):
            RUNTIME_OWN_TYPES["Address"] = "Other"  # type: ignore[index]

    def test_custom_tables_are_copied(self) -> None:
        from subsocial_types.settings import ModuleSettings

        custom = {"Foo": "Bar"}
        module_settings = ModuleSettings(modules=["a"], custom_types=custom)
        custom["Foo"] = "Changed"
        assert module_settings.custom_types["Foo"] == "Bar"
        assert module_settings.modules == ("a",)


class TestLoggingSettings:
    """Test logging settings accessors."""

    def test_defaults(self) -> None:
        from subsocial_types.settings import LoggingSettings

        logging_settings = LoggingSettings()
        assert logging_settings.console_logging is True
        assert logging_settings.console_log_level == "INFO"
        assert logging_settings.file_logging is False
        assert logging_settings.log_file_path == "logs/subsocial_types.csv"

    def test_level_is_normalized(self) -> None:
        from subsocial_types.settings import LoggingSettings

        logging_settings = LoggingSettings()
        logging_settings.console_log_level = "debug"
        assert logging_settings.console_log_level == "DEBUG"

    def test_invalid_level_keeps_current(self) -> None:
        from subsocial_types.settings import LoggingSettings

        logging_settings = LoggingSettings()
        logging_settings.console_log_level = "LOUD"
        assert logging_settings.console_log_level == "INFO"


class TestUtilsLogging:
    """Test logging configuration."""

    def test_logging_setup_with_settings(self) -> None:
        """Test logging setup works with settings."""
        from subsocial_types.utils.logging_config import setup_logging
        from subsocial_types.settings import AppSettings

        settings_obj = AppSettings()
        # setup_logging returns None but should not raise
        setup_logging(settings=settings_obj)

        logger = logging.getLogger("subsocial_types")
        assert logger.level == logging.DEBUG
        assert any(
            isinstance(h, logging.StreamHandler) for h in logging.getLogger().handlers
        )

    def test_file_logging(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test file logging writes CSV lines under logs/."""
        from subsocial_types.utils.logging_config import setup_logging
        from subsocial_types.settings import AppSettings

        monkeypatch.chdir(tmp_path)
        settings_obj = AppSettings()
        settings_obj.console_logging = False
        settings_obj.file_logging = True
        setup_logging(settings_obj)

        root_logger = logging.getLogger()
        try:
            logging.getLogger("subsocial_types.test").info('say "hi"')
            for handler in root_logger.handlers:
                handler.flush()
            content = (tmp_path / "logs" / "subsocial_types.csv").read_text(encoding="utf-8")
            assert '"say ""hi"""' in content
            assert '"subsocial_types.test"' in content
        finally:
            for handler in list(root_logger.handlers):
                if isinstance(handler, logging.FileHandler):
                    handler.close()
                    root_logger.removeHandler(handler)

    def test_colored_formatter(self) -> None:
        from subsocial_types.utils.logging_config import ColoredFormatter

        formatter = ColoredFormatter(fmt="%(levelname)s : %(message)s")
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
        assert formatter.format(record) == "\033[33mWARNING\033[0m : careful"
