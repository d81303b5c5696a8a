"""
MIDI export - harmonies as block chords.

This module converts a sequence of SATB harmonies to a MIDI file using
mido. Each harmony becomes four simultaneous notes, one per voice, and
harmonies follow one another without gaps.

All operations are deterministic: same input -> same output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_mcp_harmony.constants import Voice

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chuk_mcp_harmony.core.pitch import Pitch
    from chuk_mcp_harmony.harmony.satb import SATB


# Standard ticks per beat (quarter note) - industry standard
TICKS_PER_BEAT = 480

DEFAULT_VELOCITY = 80

# One MIDI channel per voice, soprano on channel 1
VOICE_CHANNELS: dict[Voice, int] = {
    Voice.SOPRANO: 0,
    Voice.ALTO: 1,
    Voice.TENOR: 2,
    Voice.BASS: 3,
}


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int  # Absolute start time in ticks
    duration_ticks: int  # Duration in ticks
    velocity: int  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def pitch_to_midi(pitch: Pitch) -> int:
    """MIDI note number for a pitch (C4 = 60)."""
    return pitch.to_midi()


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = 60,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a MidiFile.

    Args:
        events: Sequence of MidiEvent objects
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    # Set tempo (microseconds per beat)
    tempo_us = int(60_000_000 / tempo_bpm)
    track.append(MetaMessage("set_tempo", tempo=tempo_us, time=0))

    messages: list[tuple[int, Message]] = []

    for event in events:
        messages.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,  # Will be converted to delta
                ),
            )
        )
        messages.append(
            (
                event.start_ticks + event.duration_ticks,
                Message(
                    "note_off",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=0,
                    time=0,  # Will be converted to delta
                ),
            )
        )

    # note_off before note_on at the same tick, so repeated notes re-strike
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))

    return mid


def harmony_to_events(
    harmony: SATB,
    start_ticks: int = 0,
    duration_ticks: int = TICKS_PER_BEAT,
    velocity: int = DEFAULT_VELOCITY,
) -> list[MidiEvent]:
    """One event per voice, soprano first, all starting together."""
    return [
        MidiEvent(
            pitch=pitch_to_midi(pitch),
            start_ticks=start_ticks,
            duration_ticks=duration_ticks,
            velocity=velocity,
            channel=VOICE_CHANNELS[voice],
        )
        for voice, pitch in harmony.voices.items()
    ]


def harmonies_to_midi(
    harmonies: Sequence[SATB],
    tempo_bpm: int = 60,
    beats_per_chord: float = 4.0,
    velocity: int = DEFAULT_VELOCITY,
) -> MidiFile:
    """
    Convert harmonies to a MIDI file of consecutive block chords.

    Args:
        harmonies: The chords, in playing order
        tempo_bpm: Tempo in beats per minute
        beats_per_chord: Length of each chord in beats
        velocity: Note velocity (0-127)

    Returns:
        A mido MidiFile ready to be saved

    Example:
        midi = harmonies_to_midi([major_i, minor_ii_4_2], tempo_bpm=60)
        midi.save("cadence.mid")
    """
    chord_ticks = beats_to_ticks(beats_per_chord)
    events: list[MidiEvent] = []
    for index, harmony in enumerate(harmonies):
        events.extend(
            harmony_to_events(
                harmony,
                start_ticks=index * chord_ticks,
                duration_ticks=chord_ticks,
                velocity=velocity,
            )
        )
    return events_to_midi(events, tempo_bpm=tempo_bpm)


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat position to ticks."""
    return int(beats * ticks_per_beat)
