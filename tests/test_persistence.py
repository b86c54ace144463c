"""Tests for persistence safety features (backups, atomic writes, invalid files)."""

from pathlib import Path

import pytest
from pydantic import BaseModel

from lightctrl.exceptions import ConfigFileInvalidError, ConfigValidationError
from lightctrl.models import AppConfig
from lightctrl.utils import PydanticPersistence


class SampleModel(BaseModel):
    """Simple model for testing."""

    name: str = "test"
    value: int = 42


@pytest.mark.integration
class TestPersistenceSafety:
    """Test safety features of PydanticPersistence."""

    def test_save_creates_backup(self, tmp_path: Path):
        """Test that save_json creates a .bak file before overwriting."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(SampleModel(name="original", value=1), config_path, backup=False)
        PydanticPersistence.save_json(SampleModel(name="modified", value=2), config_path, backup=True)

        backup_path = config_path.with_suffix(".json.bak")
        assert backup_path.exists()
        assert PydanticPersistence.load_json(backup_path, SampleModel).name == "original"
        assert PydanticPersistence.load_json(config_path, SampleModel).name == "modified"

    def test_save_without_backup(self, tmp_path: Path):
        """Test that backup can be disabled."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(SampleModel(), config_path, backup=False)
        PydanticPersistence.save_json(SampleModel(value=7), config_path, backup=False)

        assert not config_path.with_suffix(".json.bak").exists()

    def test_save_leaves_no_temp_file(self, tmp_path: Path):
        """Test the atomic write cleans up its temp file."""
        config_path = tmp_path / "nested" / "config.json"

        PydanticPersistence.save_json(SampleModel(), config_path)

        assert config_path.exists()
        assert not config_path.with_suffix(".json.tmp").exists()

    def test_load_missing_file(self, tmp_path: Path):
        """Test loading a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(tmp_path / "missing.json", SampleModel)

    def test_load_empty_file(self, tmp_path: Path):
        """Test an empty file is reported as invalid."""
        config_path = tmp_path / "config.json"
        config_path.write_text("   ")

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            PydanticPersistence.load_json(config_path, SampleModel)

        assert "empty" in exc_info.value.user_message

    def test_load_invalid_json(self, tmp_path: Path):
        """Test JSON syntax errors are reported as ConfigFileInvalidError."""
        config_path = tmp_path / "config.json"
        config_path.write_text('{"name": "x",')

        with pytest.raises(ConfigFileInvalidError):
            PydanticPersistence.load_json(config_path, SampleModel)

    def test_load_invalid_values(self, tmp_path: Path):
        """Test invalid values are reported as ConfigValidationError."""
        config_path = tmp_path / "config.json"
        config_path.write_text('{"address": "127.0.0.1:1234", "led_count": -5}')

        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(config_path)

        assert exc_info.value.field == "led_count"

    def test_load_or_default_does_not_hide_corruption(self, tmp_path: Path):
        """Test a corrupted file raises instead of falling back to defaults."""
        config_path = tmp_path / "config.json"
        config_path.write_text("not json")

        with pytest.raises(ConfigFileInvalidError):
            PydanticPersistence.load_json_or_default(config_path, SampleModel)

        assert config_path.read_text() == "not json"

    def test_load_or_default_factory(self, tmp_path: Path):
        """Test the default factory is used for missing files."""
        result = PydanticPersistence.load_json_or_default(
            tmp_path / "missing.json",
            SampleModel,
            default_factory=lambda: SampleModel(name="factory"),
        )
        assert result.name == "factory"
