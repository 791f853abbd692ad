"""Logic of the GPIO API and the admin password form."""

from enum import IntEnum
from typing import List, Optional, Tuple

PASSWORD_MAX = 64
GPIO_PINS = (2, 4, 5)


class GpioConf(IntEnum):
    """How a user GPIO pin is configured."""

    OFF = 0
    OUT_START_0 = 1
    OUT_START_1 = 2
    IN_PULL = 3
    IN_NOPULL = 4

    @property
    def is_output(self) -> bool:
        return self in (GpioConf.OUT_START_0, GpioConf.OUT_START_1)


def inputs_json(inputs: int) -> str:
    """JSON object with the levels of GPIO 2, 4 and 5 read from ``inputs``."""
    io2, io4, io5 = (int(bool(inputs & (1 << pin))) for pin in GPIO_PINS)
    return f'{{"io2":{io2},"io4":{io4},"io5":{io5}}}'


def resolve_output(arg: str, inputs: int, pin: int) -> bool:
    """Level to drive a pin to: ``1`` on, ``t`` toggle, anything else off."""
    if not 0 <= pin < 32:
        raise ValueError(f"bad pin number: {pin}")
    if arg.startswith("t"):
        return (inputs & (1 << pin)) == 0
    return arg.startswith("1")


def pulse_command(set_d2: Optional[bool], set_d4: Optional[bool],
                  set_d5: Optional[bool]) -> int:
    """Pack the pins changed by a request; None means the pin was left alone.

    Pins turned on land in the low half-word, pins turned off in the high one.
    """
    command = 0
    for pin, level in zip(GPIO_PINS, (set_d2, set_d4, set_d5)):
        if level is None:
            continue
        command |= 1 << pin if level else 1 << (16 + pin)
    return command


def pulse_masks(command: int, gpio2_off: bool) -> Tuple[int, int]:
    """Masks that undo a pulse: (pins to drive high, pins to drive low).

    GPIO 2 is skipped when it is not in use as a GPIO.
    """
    mask = 0x30 if gpio2_off else 0x34
    turned_on = command & mask
    turned_off = (command >> 16) & mask
    return turned_off, turned_on


def password_change_errors(new_pw: str, repeated: Optional[str]) -> List[str]:
    """Form fields at fault when changing the admin password.

    An empty new password changes nothing and has no errors; ``repeated``
    is None when the confirmation field was not sent.
    """
    if not new_pw:
        return []
    if repeated is None or repeated != new_pw:
        return ["admin_pw2"]
    if len(new_pw.encode("utf-8")) >= PASSWORD_MAX:
        return ["admin_pw"]
    return []