"""Smoke tests for CLI commands.

Commands run against a real ButtonShim on an in-memory transport, so the
whole path from argument parsing to bus writes is exercised without I2C
hardware.
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from buttonshim.cli.commands.rainbow import RAINBOW, RainbowObserver
from buttonshim.cli.main import cli
from buttonshim.core.debounce import Pressed, Released
from buttonshim.core.frame import encode_frame
from buttonshim.devices import ButtonShim, Led
from buttonshim.models import Button, ShimConfig
from buttonshim.protocols import ButtonEvent


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def base_args(tmp_path: Path):
    """Global options that keep config and logs inside tmp_path."""
    return [
        "--config", str(tmp_path / "config.json"),
        "--log-file", str(tmp_path / "buttonshim.log"),
    ]


@pytest.fixture
def patched_shim(fake_transport):
    """Make CLI commands open a ButtonShim on the fake transport."""
    with patch(
        "buttonshim.cli.context.ButtonShim",
        side_effect=lambda config: ButtonShim(config, transport=fake_transport),
    ) as shim_cls:
        yield shim_cls


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Button SHIM" in result.output
        assert "--config" in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    @pytest.mark.parametrize("command", ["led", "buttons", "rainbow", "config"])
    def test_command_help(self, runner, command):
        result = runner.invoke(cli, [command, "--help"])
        assert result.exit_code == 0


@pytest.mark.integration
class TestLedCommands:
    """Test the led command group."""

    def test_led_set(self, runner, base_args, patched_shim, fake_transport):
        result = runner.invoke(cli, base_args + ["led", "set", "255", "0", "0"])

        assert result.exit_code == 0, result.output
        assert "#FF0000" in result.output
        assert fake_transport.raw_writes == [encode_frame(255, 0, 0)]
        assert fake_transport.closed

    def test_led_off(self, runner, base_args, patched_shim, fake_transport):
        result = runner.invoke(cli, base_args + ["led", "off"])

        assert result.exit_code == 0, result.output
        assert fake_transport.raw_writes == [encode_frame(0, 0, 0)]

    def test_led_set_rejects_out_of_range(self, runner, base_args, patched_shim):
        result = runner.invoke(cli, base_args + ["led", "set", "256", "0", "0"])

        assert result.exit_code != 0
        patched_shim.assert_not_called()

    def test_transport_error_reported(self, runner, base_args, patched_shim, fake_transport):
        fake_transport.fail_writes = True

        result = runner.invoke(cli, base_args + ["led", "off"])

        assert result.exit_code == 1
        assert "ERROR: I2C write failed (register 0x03)." in result.output
        assert "i2cdetect" in result.output


@pytest.mark.integration
class TestButtonCommands:
    """Test the buttons command group."""

    def test_read(self, runner, base_args, patched_shim, fake_transport):
        fake_transport.input_value = 0b11101

        result = runner.invoke(cli, base_args + ["buttons", "read"])

        assert result.exit_code == 0, result.output
        assert "A: Released" in result.output
        assert "B: Pressed" in result.output

    def test_monitor_stops_when_polling_gives_up(
        self, runner, base_args, tmp_path, patched_shim, fake_transport
    ):
        ShimConfig(max_consecutive_failures=2).save(tmp_path / "config.json")
        fake_transport.fail_reads = -1

        result = runner.invoke(cli, base_args + ["buttons", "monitor", "--interval", "0.01"])

        assert result.exit_code == 1
        assert "Monitoring buttons every 0.01s" in result.output
        assert "ERROR: I2C read failed" in result.output

    def test_monitor_rejects_zero_interval(self, runner, base_args, patched_shim):
        result = runner.invoke(cli, base_args + ["buttons", "monitor", "--interval", "0"])
        assert result.exit_code != 0


@pytest.mark.integration
class TestRainbow:
    """Test the rainbow demo."""

    def test_observer_colours(self, bus, fake_transport):
        observer = RainbowObserver(Led(bus))

        observer.on_button_event(ButtonEvent(Button.A, Pressed(0.0)))
        observer.on_button_event(ButtonEvent(Button.A, Released()))
        observer.on_button_event(ButtonEvent(Button.E, Pressed(1.0)))

        assert fake_transport.raw_writes == [
            encode_frame(0x94, 0x00, 0xD3),
            encode_frame(0xFF, 0x00, 0x00),
        ]

    def test_palette(self):
        assert [RAINBOW[b].to_hex() for b in Button] == [
            "#9400D3", "#0000FF", "#00FF00", "#FFFF00", "#FF0000",
        ]

    def test_rainbow_stops_when_polling_gives_up(
        self, runner, base_args, tmp_path, patched_shim, fake_transport
    ):
        ShimConfig(poll_interval=0.01, max_consecutive_failures=1).save(tmp_path / "config.json")
        fake_transport.fail_reads = -1

        result = runner.invoke(cli, base_args + ["rainbow"])

        assert result.exit_code == 1
        # LED turned off at start and again on exit
        assert fake_transport.raw_writes == [encode_frame(0, 0, 0)] * 2


@pytest.mark.integration
class TestConfigCommands:
    """Test the config command group."""

    def test_init_then_show(self, runner, base_args, tmp_path):
        result = runner.invoke(cli, base_args + ["config", "init"])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "config.json").exists()

        result = runner.invoke(cli, base_args + ["config", "show"])
        assert result.exit_code == 0
        assert '"address": 63' in result.output

    def test_init_refuses_to_overwrite(self, runner, base_args, tmp_path):
        ShimConfig(i2c_bus=4).save(tmp_path / "config.json")

        result = runner.invoke(cli, base_args + ["config", "init"])

        assert "already exists" in result.output
        assert ShimConfig.load_or_default(tmp_path / "config.json").i2c_bus == 4

    def test_init_force(self, runner, base_args, tmp_path):
        ShimConfig(i2c_bus=4).save(tmp_path / "config.json")

        result = runner.invoke(cli, base_args + ["config", "init", "--force"])

        assert result.exit_code == 0
        assert ShimConfig.load_or_default(tmp_path / "config.json").i2c_bus == 1

    def test_show_invalid_config(self, runner, base_args, tmp_path):
        (tmp_path / "config.json").write_text("{not json")

        result = runner.invoke(cli, base_args + ["config", "show"])

        assert result.exit_code == 1
        assert "ERROR: Configuration file" in result.output
