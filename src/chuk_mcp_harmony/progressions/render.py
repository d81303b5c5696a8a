"""
Progression rendering - every chord of a progression into one file.

Chords are rendered one after another with no crossfade; each lasts
seconds_per_chord seconds of audio or four beats of MIDI.
"""

from __future__ import annotations

import logging
from pathlib import Path

from chuk_mcp_harmony.export.midi import harmonies_to_midi
from chuk_mcp_harmony.export.wav import WavWriter
from chuk_mcp_harmony.models.progression import Progression

logger = logging.getLogger(__name__)


def render_progression_wav(progression: Progression, path: Path | str) -> Path:
    """
    Synthesize every chord and write them, in order, to a WAV file.

    The sample rate, sample format and gain come from the progression.

    Args:
        progression: The progression to render
        path: Output .wav path

    Returns:
        The path written

    Raises:
        HarmonyError: If a checked voicing breaks a rule (nothing is written)
    """
    harmonies = progression.to_harmonies()
    with WavWriter(path, progression.wav_spec(), progression.gain) as writer:
        for harmony in harmonies:
            writer.write_samples(
                harmony.sound_wave(progression.seconds_per_chord, progression.sample_rate)
            )

    logger.info(f"Rendered progression '{progression.name}' ({len(harmonies)} chords) to {path}")
    return Path(path)


def render_progression_midi(
    progression: Progression,
    path: Path | str,
    beats_per_chord: float = 4.0,
) -> Path:
    """
    Write the progression as consecutive MIDI block chords.

    Raises:
        HarmonyError: If a checked voicing breaks a rule (nothing is written)
    """
    harmonies = progression.to_harmonies()
    midi = harmonies_to_midi(
        harmonies, tempo_bpm=progression.tempo, beats_per_chord=beats_per_chord
    )

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    midi.save(str(path))
    logger.info(f"Exported progression '{progression.name}' to {path}")
    return path
