"""
Control Change controller numbers defined by MIDI 1.0.

Numbers the standard leaves undefined have no enum member; ``controller_name``
renders them as hex strings instead.
"""
from __future__ import annotations

from enum import IntEnum

from midistream.parsing.messages.kinds import MessageKind


class Controller(IntEnum):
    BANK_SELECT = 0x00
    MOD_WHEEL = 0x01
    BREATH_CONTROLLER = 0x02
    FOOT_CONTROLLER = 0x04
    PORTAMENTO_TIME = 0x05
    DATA_ENTRY_MSB = 0x06
    CHANNEL_VOLUME = 0x07
    BALANCE = 0x08
    PAN = 0x0A
    EXPRESSION_CONTROLLER = 0x0B
    EFFECT_CONTROL_1 = 0x0C
    EFFECT_CONTROL_2 = 0x0D
    GENERAL_PURPOSE_1 = 0x10
    GENERAL_PURPOSE_2 = 0x11
    GENERAL_PURPOSE_3 = 0x12
    GENERAL_PURPOSE_4 = 0x13
    BANK_SELECT_LSB = 0x20
    MOD_WHEEL_LSB = 0x21
    BREATH_CONTROLLER_LSB = 0x22
    FOOT_CONTROLLER_LSB = 0x24
    PORTAMENTO_TIME_LSB = 0x25
    DATA_ENTRY_LSB = 0x26
    CHANNEL_VOLUME_LSB = 0x27
    BALANCE_LSB = 0x28
    PAN_LSB = 0x2A
    EXPRESSION_CONTROLLER_LSB = 0x2B
    EFFECT_CONTROL_1_LSB = 0x2C
    EFFECT_CONTROL_2_LSB = 0x2D
    GENERAL_PURPOSE_1_LSB = 0x30
    GENERAL_PURPOSE_2_LSB = 0x31
    GENERAL_PURPOSE_3_LSB = 0x32
    GENERAL_PURPOSE_4_LSB = 0x33
    SUSTAIN_PEDAL = 0x40
    PORTAMENTO_ON_OFF = 0x41
    SOSTENUTO = 0x42
    SOFT_PEDAL = 0x43
    LEGATO_FOOTSWITCH = 0x44
    HOLD_2 = 0x45
    SOUND_CTRL_1_VARIATION = 0x46
    SOUND_CTRL_2_TIMBRE = 0x47
    SOUND_CTRL_3_RELEASE_TIME = 0x48
    SOUND_CTRL_4_ATTACK_TIME = 0x49
    SOUND_CTRL_5_BRIGHTNESS = 0x4A
    SOUND_CTRL_6 = 0x4B
    SOUND_CTRL_7 = 0x4C
    SOUND_CTRL_8 = 0x4D
    SOUND_CTRL_9 = 0x4E
    SOUND_CTRL_10 = 0x4F
    GENERAL_PURPOSE_5 = 0x50
    GENERAL_PURPOSE_6 = 0x51
    GENERAL_PURPOSE_7 = 0x52
    GENERAL_PURPOSE_8 = 0x53
    PORTAMENTO_CONTROL = 0x54
    EFFECT_1_DEPTH = 0x5B
    EFFECT_2_DEPTH = 0x5C
    EFFECT_3_DEPTH = 0x5D
    EFFECT_4_DEPTH = 0x5E
    EFFECT_5_DEPTH = 0x5F
    DATA_INCREMENT = 0x60
    DATA_DECREMENT = 0x61
    NRPN_LSB = 0x62
    NRPN_MSB = 0x63
    RPN_LSB = 0x64
    RPN_MSB = 0x65
    ALL_SOUND_OFF = 0x78
    RESET_ALL_CONTROLLERS = 0x79
    LOCAL_CONTROL = 0x7A
    ALL_NOTES_OFF = 0x7B
    OMNI_OFF = 0x7C
    OMNI_ON = 0x7D
    MONO_ON = 0x7E
    POLY_ON = 0x7F


# Human-readable names for defined controller numbers.
CONTROLLER_NAMES: dict[int, str] = {c.value: c.name.lower() for c in Controller}

# Controllers 120-127 select channel-mode messages.
CHANNEL_MODE_BY_CONTROLLER: dict[int, MessageKind] = {
    Controller.ALL_SOUND_OFF: MessageKind.ALL_SOUND_OFF,
    Controller.RESET_ALL_CONTROLLERS: MessageKind.RESET_ALL_CONTROLLERS,
    Controller.LOCAL_CONTROL: MessageKind.LOCAL_CONTROL,
    Controller.ALL_NOTES_OFF: MessageKind.ALL_NOTES_OFF,
    Controller.OMNI_OFF: MessageKind.OMNI_OFF,
    Controller.OMNI_ON: MessageKind.OMNI_ON,
    Controller.MONO_ON: MessageKind.MONO_ON,
    Controller.POLY_ON: MessageKind.POLY_ON,
}


def controller_name(number: int) -> str:
    """
    Translate a controller number to a human-readable name.

    Undefined numbers are returned as hex strings (e.g. ``"0x03"``).

    Args:
        number: Controller number, 0-127.

    Returns:
        The snake_case controller name or the hex fallback.
    """
    return CONTROLLER_NAMES.get(number, f"0x{number:02x}")


def channel_mode_kind(number: int) -> MessageKind:
    return CHANNEL_MODE_BY_CONTROLLER.get(number, MessageKind.CONTROL_CHANGE)
