"""
This package contains all modules related to decoding MIDI 1.0 data.

Sub-packages handle specific concerns:

- ``messages``: Message kinds, controller numbers and typed message payloads.
- ``stream``: Parser state and the byte-at-a-time decode state machine.
"""
