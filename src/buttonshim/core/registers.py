"""Register map of the Button SHIM's I/O expander."""

REG_INPUT = 0x00  # read-only, bits 0-4 = buttons A-E, active-low
REG_OUTPUT = 0x01  # bit 7 = LED data, bit 6 = LED clock
REG_POLARITY = 0x02
REG_CONFIG = 0x03  # 1 = input, 0 = output

PIN_LED_DATA = 7
PIN_LED_CLOCK = 6

NUM_BUTTONS = 5
BUTTON_MASK = 0b00011111

# Bring-up values: buttons are inputs, LED lines are outputs, no inversion
CONFIG_BUTTONS_IN = BUTTON_MASK
POLARITY_NORMAL = 0b00000000
OUTPUT_IDLE = 0b00000000
