"""
WAV export - persist synthesized samples as PCM audio.

The synthesizer emits unnormalized floats (four voices sum to +/-4).
Integer formats scale by a gain, clip to [-1, 1] and quantize to signed
PCM of the configured width. The float format stores the scaled samples
as 32-bit IEEE floats without clipping.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import TracebackType

import numpy as np
import soundfile as sf  # type: ignore[import]
from numpy.typing import NDArray

from chuk_mcp_harmony.constants import DEFAULT_SAMPLE_RATE

logger = logging.getLogger(__name__)

# One unit sinusoid per SATB voice
DEFAULT_GAIN = 0.25


class SampleFormat(str, Enum):
    """How each sample is stored."""

    INT = "int"  # Signed integer PCM
    FLOAT = "float"  # IEEE float


# libsndfile subtype and numpy dtype per (format, bits)
_SUBTYPES: dict[tuple[SampleFormat, int], tuple[str, type[np.generic]]] = {
    (SampleFormat.INT, 16): ("PCM_16", np.int16),
    (SampleFormat.INT, 32): ("PCM_32", np.int32),
    (SampleFormat.FLOAT, 32): ("FLOAT", np.float32),
}


@dataclass(frozen=True)
class WavSpec:
    """Output format for a WAV file."""

    channels: int = 1
    sample_rate: int = DEFAULT_SAMPLE_RATE
    bits_per_sample: int = 16
    sample_format: SampleFormat = SampleFormat.INT

    def __post_init__(self) -> None:
        """Validate format ranges."""
        if self.channels < 1:
            raise ValueError(f"Channels must be >= 1, got {self.channels}")
        if self.sample_rate <= 0:
            raise ValueError(f"Sample rate must be > 0, got {self.sample_rate}")
        object.__setattr__(self, "sample_format", SampleFormat(self.sample_format))
        if (self.sample_format, self.bits_per_sample) not in _SUBTYPES:
            raise ValueError(
                "Bits per sample must be 16 or 32 for int samples and 32 for float "
                f"samples, got {self.bits_per_sample} ({self.sample_format.value})"
            )

    @property
    def subtype(self) -> str:
        """libsndfile subtype name, e.g. 'PCM_16' or 'FLOAT'."""
        return _SUBTYPES[(self.sample_format, self.bits_per_sample)][0]

    @property
    def dtype(self) -> type[np.generic]:
        """numpy dtype of one stored sample."""
        return _SUBTYPES[(self.sample_format, self.bits_per_sample)][1]

    @property
    def sample_width(self) -> int:
        """Bytes per sample."""
        return self.bits_per_sample // 8

    @property
    def max_amplitude(self) -> int:
        """Largest positive integer PCM value."""
        return (1 << (self.bits_per_sample - 1)) - 1


def encode_samples(
    samples: Iterable[float], spec: WavSpec, gain: float = DEFAULT_GAIN
) -> NDArray[np.generic]:
    """
    Convert mono float samples to frames in the WavSpec sample format.

    Returns:
        Array of shape (n,) for mono or (n, channels) otherwise
    """
    scaled = np.fromiter(samples, dtype=np.float64) * gain
    if spec.sample_format == SampleFormat.FLOAT:
        frames = scaled.astype(np.float32)
    else:
        # np.round is half-to-even, like round()
        frames = np.round(np.clip(scaled, -1.0, 1.0) * spec.max_amplitude).astype(spec.dtype)

    if spec.channels > 1:
        frames = np.repeat(frames[:, np.newaxis], spec.channels, axis=1)
    return frames


class WavWriter:
    """
    Append float samples to a WAV file.

    Mono samples are duplicated across channels. Several harmonies can be
    written one after another into the same file.

    Example:
        spec = WavSpec(sample_rate=44100, bits_per_sample=32, sample_format="float")
        with WavWriter(path, spec, gain=1.0) as writer:
            writer.write_samples(major_i.sound_wave(5, 44100))
            writer.write_samples(minor_ii.sound_wave(5, 44100))
    """

    def __init__(self, path: Path | str, spec: WavSpec | None = None, gain: float = DEFAULT_GAIN):
        self.path = Path(path)
        self.spec = spec or WavSpec()
        self.gain = gain
        self.frames_written = 0
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._file = sf.SoundFile(
            str(self.path),
            mode="w",
            samplerate=self.spec.sample_rate,
            channels=self.spec.channels,
            subtype=self.spec.subtype,
            format="WAV",
        )

    def write_samples(self, samples: Iterable[float]) -> int:
        """
        Write mono float samples.

        Returns:
            Number of frames written by this call
        """
        frames = encode_samples(samples, self.spec, self.gain)
        if len(frames):
            self._file.write(frames)
        self.frames_written += len(frames)
        return len(frames)

    def close(self) -> None:
        """Finalize the WAV header and close the file."""
        self._file.close()
        logger.info(f"Wrote {self.frames_written} frames ({self.spec.subtype}) to {self.path}")

    def __enter__(self) -> WavWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def write_wav(
    path: Path | str,
    samples: Iterable[float],
    spec: WavSpec | None = None,
    gain: float = DEFAULT_GAIN,
) -> Path:
    """
    Write one run of samples to a new WAV file.

    Returns:
        The path written
    """
    with WavWriter(path, spec, gain) as writer:
        writer.write_samples(samples)
    return writer.path
