"""
Export - the end of the pipeline.

    SATB → sound_wave() samples → WAV file
    SATB sequence → block chords → MIDI file
"""

from chuk_mcp_harmony.export.midi import (
    TICKS_PER_BEAT,
    VOICE_CHANNELS,
    MidiEvent,
    events_to_midi,
    harmonies_to_midi,
    harmony_to_events,
    pitch_to_midi,
)
from chuk_mcp_harmony.export.wav import (
    DEFAULT_GAIN,
    SampleFormat,
    WavSpec,
    WavWriter,
    encode_samples,
    write_wav,
)

__all__ = [
    # MIDI
    "TICKS_PER_BEAT",
    "VOICE_CHANNELS",
    "MidiEvent",
    "events_to_midi",
    "harmonies_to_midi",
    "harmony_to_events",
    "pitch_to_midi",
    # WAV
    "DEFAULT_GAIN",
    "SampleFormat",
    "WavSpec",
    "WavWriter",
    "encode_samples",
    "write_wav",
]
