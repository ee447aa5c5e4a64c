"""Rainbow example: each button lights the LED in its own colour.

Reads button events from a subscriber queue instead of an observer, so
the LED is written from the main thread.
"""

import logging

from buttonshim import Button, ButtonShim, Color, ShimConfig

RAINBOW = {
    Button.A: Color.from_hex("#9400D3"),
    Button.B: Color.from_hex("#0000FF"),
    Button.C: Color.from_hex("#00FF00"),
    Button.D: Color.from_hex("#FFFF00"),
    Button.E: Color.from_hex("#FF0000"),
}


def main():
    """Light the LED on every button press until Ctrl+C."""
    logging.basicConfig(level=logging.INFO)
    config = ShimConfig.load_or_default()

    with ButtonShim(config) as shim:
        events = shim.buttons.subscribe()
        shim.buttons.start_polling()
        shim.led.off()

        print("Press a button to change colour. Press Ctrl+C to exit.")
        try:
            while True:
                event = events.get()
                print(event)
                if event.pressed:
                    shim.led.set_color(RAINBOW[event.button])
        except KeyboardInterrupt:
            print("\nExiting...")
        finally:
            shim.led.off()


if __name__ == "__main__":
    main()
