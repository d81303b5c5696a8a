#!/usr/bin/env python3
"""
Example: Render a I - ii4/2 pair to WAV and MIDI.

This demonstrates the whole pipeline - pitches, SATB voicings, additive
synthesis and the two export sinks. The pitches use the rounded
frequencies of a reference table rather than exact equal temperament.
The WAV is mono 32-bit float holding the unscaled chord sums.

Usage:
    python examples/render_major_i.py
    # Creates: examples/output/major_I.wav, examples/output/major_I.mid
"""

import logging
from pathlib import Path

from chuk_mcp_harmony import SATB, HarmonyError, Pitch
from chuk_mcp_harmony.export import SampleFormat, WavSpec, WavWriter, harmonies_to_midi

SECONDS_PER_CHORD = 5
SAMPLE_RATE = 44100

# Mono 32-bit float, chord sums written unscaled
WAV_SPEC = WavSpec(sample_rate=SAMPLE_RATE, bits_per_sample=32, sample_format=SampleFormat.FLOAT)


def main() -> None:
    """Render the example files."""
    logging.basicConfig(level=logging.INFO)
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    e4 = Pitch(329.63, 4, 4)
    f4 = Pitch(349.23, 5, 4)
    c4 = Pitch(261.63, 0, 4)
    d4 = Pitch(293.66, 2, 4)
    g3 = Pitch(196.00, 7, 3)
    a3 = Pitch(220.00, 9, 3)
    c3 = Pitch(130.81, 0, 3)

    # Both chords are voiced by hand, so skip the rule checks
    major_i = SATB.new_unchecked(0, e4, c4, g3, c3)
    minor_ii_4_2 = SATB.new_unchecked(2, f4, d4, a3, c3)

    for harmony in (major_i, minor_ii_4_2):
        try:
            sonority = harmony.classify().sonority.value
        except HarmonyError as e:
            sonority = f"illegal ({e.code})"
        print(f"{harmony}: {sonority}")

    print("\nGenerating major_I.wav...")
    wav_path = output_dir / "major_I.wav"
    with WavWriter(wav_path, WAV_SPEC, gain=1.0) as writer:
        for harmony in (major_i, minor_ii_4_2):
            writer.write_samples(harmony.sound_wave(SECONDS_PER_CHORD, SAMPLE_RATE))
    print(f"  Created: {wav_path}")

    print("\nGenerating major_I.mid...")
    midi_path = output_dir / "major_I.mid"
    harmonies_to_midi([major_i, minor_ii_4_2], tempo_bpm=60, beats_per_chord=5).save(
        str(midi_path)
    )
    print(f"  Created: {midi_path}")

    print("\nDone!")


if __name__ == "__main__":
    main()
