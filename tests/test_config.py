"""Tests for ShimConfig and JSON persistence."""

import json
from pathlib import Path

import pytest
from pydantic import BaseModel, ValidationError

from buttonshim.exceptions import ConfigFileInvalidError, ConfigValidationError
from buttonshim.models import ShimConfig
from buttonshim.utils import PydanticPersistence


class SampleModel(BaseModel):
    """Simple model for testing."""

    name: str = "test"
    value: int = 42


class TestShimConfig:
    """Test config defaults, validation and loading."""

    @pytest.mark.unit
    def test_defaults(self):
        config = ShimConfig()
        assert config.i2c_bus == 1
        assert config.address == 0x3F
        assert config.poll_interval == 0.1
        assert config.hold_threshold == 2.0
        assert config.max_consecutive_failures is None

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "field,value",
        [
            ("address", 0x02),
            ("address", 0x78),
            ("poll_interval", 0),
            ("hold_threshold", -1.0),
            ("max_consecutive_failures", 0),
            ("i2c_bus", -1),
        ],
    )
    def test_rejects_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            ShimConfig(**{field: value})

    @pytest.mark.unit
    def test_missing_file_gives_defaults(self, tmp_path: Path):
        config = ShimConfig.load_or_default(tmp_path / "missing.json")
        assert config == ShimConfig()
        assert not (tmp_path / "missing.json").exists()

    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path):
        path = tmp_path / "nested" / "config.json"
        ShimConfig(i2c_bus=0, hold_threshold=1.5).save(path)

        loaded = ShimConfig.load_or_default(path)

        assert loaded.i2c_bus == 0
        assert loaded.hold_threshold == 1.5

    @pytest.mark.unit
    def test_partial_file_uses_defaults_for_rest(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"poll_interval": 0.05}))

        config = ShimConfig.load_or_default(path)

        assert config.poll_interval == 0.05
        assert config.address == 0x3F

    @pytest.mark.unit
    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text('{"i2c_bus": 1,}')

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            ShimConfig.load_or_default(path)
        assert str(path) in exc_info.value.technical_message

    @pytest.mark.unit
    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("   \n")

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            ShimConfig.load_or_default(path)
        assert exc_info.value.user_message == "Configuration file is empty"

    @pytest.mark.unit
    def test_invalid_address_value(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"address": 200}))

        with pytest.raises(ConfigValidationError) as exc_info:
            ShimConfig.load_or_default(path)

        error = exc_info.value
        assert error.field == "address"
        assert error.value == 200
        assert "i2cdetect" in error.recovery_hint

    @pytest.mark.unit
    def test_several_invalid_values(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"poll_interval": -1, "hold_threshold": 0}))

        with pytest.raises(ConfigValidationError) as exc_info:
            ShimConfig.load_or_default(path)
        assert exc_info.value.field == "multiple fields"


class TestPersistenceSafety:
    """Test safety features of PydanticPersistence."""

    @pytest.mark.unit
    def test_save_creates_backup(self, tmp_path: Path):
        path = tmp_path / "data.json"
        PydanticPersistence.save_json(SampleModel(name="original", value=1), path, backup=False)
        PydanticPersistence.save_json(SampleModel(name="modified", value=2), path)

        backup = PydanticPersistence.load_json(path.with_suffix(".json.bak"), SampleModel)
        current = PydanticPersistence.load_json(path, SampleModel)

        assert backup.name == "original"
        assert current.name == "modified"

    @pytest.mark.unit
    def test_save_without_backup(self, tmp_path: Path):
        path = tmp_path / "data.json"
        PydanticPersistence.save_json(SampleModel(), path, backup=False)
        PydanticPersistence.save_json(SampleModel(value=7), path, backup=False)

        assert not path.with_suffix(".json.bak").exists()

    @pytest.mark.unit
    def test_no_temp_file_left_behind(self, tmp_path: Path):
        path = tmp_path / "data.json"
        PydanticPersistence.save_json(SampleModel(), path)

        assert sorted(p.name for p in tmp_path.iterdir()) == ["data.json"]

    @pytest.mark.unit
    def test_load_missing_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(tmp_path / "nope.json", SampleModel)

    @pytest.mark.unit
    def test_default_factory(self, tmp_path: Path):
        loaded = PydanticPersistence.load_json_or_default(
            tmp_path / "nope.json", SampleModel, lambda: SampleModel(name="factory")
        )
        assert loaded.name == "factory"
