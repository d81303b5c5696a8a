"""
chuk-mcp-harmony - four-part harmony in twelve-tone equal temperament.

Layers, leaf first:
- core: PitchClass, Pitch and mod-12 interval arithmetic
- harmony: Voice ranges, chord classification and the SATB value
- synth: Additive sine-wave synthesis
- export: WAV and MIDI sinks
- models / progressions: YAML progression documents
- tools: MCP tool surface
"""

from chuk_mcp_harmony.core import Pitch, PitchClass, compute_frequency, compute_half_steps_from_zero
from chuk_mcp_harmony.harmony import SATB, HarmonyError, validate_satb
from chuk_mcp_harmony.synth import sound_wave

__version__ = "0.1.0"

__all__ = [
    "Pitch",
    "PitchClass",
    "compute_frequency",
    "compute_half_steps_from_zero",
    "SATB",
    "HarmonyError",
    "validate_satb",
    "sound_wave",
]
