"""Tests for the LED, Buttons and ButtonShim facades."""

from unittest.mock import patch

import pytest

from buttonshim.core.debounce import Hold, Pressed, Released
from buttonshim.core.frame import encode_frame
from buttonshim.core.registers import REG_CONFIG, REG_OUTPUT, REG_POLARITY
from buttonshim.devices import ButtonShim, Led
from buttonshim.exceptions import TransportError
from buttonshim.models import Button, Color, ShimConfig

from conftest import FakeTransport


class TestLed:
    """Test LED control."""

    @pytest.mark.unit
    def test_set_pixel_writes_one_frame(self, bus, fake_transport):
        led = Led(bus)
        led.set_pixel(0x12, 0x34, 0x56)

        assert fake_transport.raw_writes == [encode_frame(0x12, 0x34, 0x56)]
        assert led.color == Color(r=0x12, g=0x34, b=0x56)

    @pytest.mark.unit
    def test_color_unset_initially(self, bus):
        assert Led(bus).color is None

    @pytest.mark.unit
    def test_set_color_and_off(self, bus, fake_transport):
        led = Led(bus)
        led.set_color(Color.from_hex("#9400D3"))
        led.off()

        assert fake_transport.raw_writes == [encode_frame(0x94, 0x00, 0xD3), encode_frame(0, 0, 0)]
        assert led.color == Color.off()

    @pytest.mark.unit
    def test_invalid_channel_writes_nothing(self, bus, fake_transport):
        led = Led(bus)
        with pytest.raises(ValueError):
            led.set_pixel(0, 256, 0)
        assert fake_transport.raw_writes == []
        assert led.color is None

    @pytest.mark.unit
    def test_write_failure_keeps_requested_color(self, bus, fake_transport):
        led = Led(bus)
        fake_transport.fail_writes = True

        with pytest.raises(TransportError):
            led.set_pixel(255, 0, 0)

        assert led.color == Color(r=255, g=0, b=0)


class TestButtonShim:
    """Test bring-up, lifecycle and the button facade."""

    @pytest.mark.unit
    def test_bring_up_sequence(self, fake_transport):
        ButtonShim(transport=fake_transport)

        assert fake_transport.register_writes == [
            (REG_CONFIG, 0b00011111),
            (REG_POLARITY, 0x00),
            (REG_OUTPUT, 0x00),
        ]

    @pytest.mark.unit
    def test_bring_up_failure_closes_bus(self, fake_transport):
        fake_transport.fail_writes = True

        with pytest.raises(TransportError):
            ButtonShim(transport=fake_transport)

        assert fake_transport.closed

    @pytest.mark.unit
    def test_opens_smbus_from_config(self):
        config = ShimConfig(i2c_bus=3, address=0x40)
        with patch("buttonshim.devices.shim.SMBusTransport") as transport_cls:
            transport_cls.return_value = FakeTransport()
            ButtonShim(config)
        transport_cls.assert_called_once_with(3, 0x40)

    @pytest.mark.unit
    def test_config_applied_to_buttons(self, fake_transport):
        config = ShimConfig(poll_interval=0.25, hold_threshold=0.5, max_consecutive_failures=4)
        shim = ButtonShim(config, transport=fake_transport)

        assert shim.buttons.poll_interval == 0.25
        assert shim.buttons.max_consecutive_failures == 4
        assert shim.buttons.sampler.hold_threshold == 0.5

    @pytest.mark.unit
    def test_set_pixel_shortcut(self, fake_transport):
        shim = ButtonShim(transport=fake_transport)
        shim.set_pixel(1, 2, 3)
        assert fake_transport.raw_writes == [encode_frame(1, 2, 3)]

    @pytest.mark.unit
    def test_context_manager_closes(self, fake_transport):
        with ButtonShim(transport=fake_transport) as shim:
            shim.buttons.update()
        assert fake_transport.closed
        assert shim.bus.closed

    @pytest.mark.unit
    def test_button_properties(self, fake_transport):
        shim = ButtonShim(transport=fake_transport)
        fake_transport.input_value = 0b01110

        shim.buttons.update()

        assert isinstance(shim.buttons.a, Pressed)
        assert isinstance(shim.buttons.e, Pressed)
        assert shim.buttons.b == Released()
        assert shim.buttons.c == Released()
        assert shim.buttons.d == Released()
        assert shim.buttons.state(Button.E) == shim.buttons.e

    @pytest.mark.unit
    def test_set_hold_threshold(self, fake_transport):
        shim = ButtonShim(transport=fake_transport)
        shim.buttons.set_hold_threshold(0.75)
        assert shim.buttons.sampler.hold_threshold == 0.75

    @pytest.mark.integration
    def test_polling_lights_led_from_observer(self, fake_transport):
        """An observer may write the LED from the sampling thread."""
        config = ShimConfig(poll_interval=0.01, hold_threshold=0.05)

        class LightOnHold:
            def __init__(self, led):
                self.led = led

            def on_button_event(self, event):
                if event.held:
                    self.led.set_pixel(0, 255, 0)

        with ButtonShim(config, transport=fake_transport) as shim:
            shim.buttons.register_observer(LightOnHold(shim.led))
            events = shim.buttons.subscribe()
            fake_transport.input_value = 0b11101
            task = shim.buttons.start_polling()

            first = events.get(timeout=2.0)
            second = events.get(timeout=2.0)

            assert first.button is Button.B and first.pressed
            assert second.state == Hold()
            assert task.is_running

        assert not task.is_running
        assert fake_transport.raw_writes == [encode_frame(0, 255, 0)]
