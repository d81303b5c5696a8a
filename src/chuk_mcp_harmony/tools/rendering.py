"""
Rendering tools - MCP tools for audio and MIDI export.

Tools for synthesizing single harmonies and whole progressions.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.constants import (
    DEFAULT_DURATION_SECONDS,
    DEFAULT_SAMPLE_RATE,
    ErrorMessages,
)
from chuk_mcp_harmony.core.pitch import Pitch, PitchClass
from chuk_mcp_harmony.export.wav import SampleFormat, WavSpec, write_wav
from chuk_mcp_harmony.harmony import SATB, HarmonyError
from chuk_mcp_harmony.progressions import (
    ProgressionLoader,
    render_progression_midi,
    render_progression_wav,
)
from chuk_mcp_harmony.tools.harmony import parse_root

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def output_path(output_dir: Path, output_name: str, suffix: str) -> Path:
    """
    Resolve an output file inside output_dir.

    Raises:
        ValueError: If the name is not a plain identifier (no path separators)
    """
    if not output_name or not output_name.replace("_", "").replace("-", "").isalnum():
        raise ValueError(f"Invalid output name: {output_name}")
    return output_dir / f"{output_name}{suffix}"


def register_render_tools(
    mcp: ChukMCPServer,
    loader: ProgressionLoader,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register rendering/export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The progression loader
        output_dir: Directory for output files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_render_wav(
        root: str,
        soprano: str,
        alto: str,
        tenor: str,
        bass: str,
        duration: int = DEFAULT_DURATION_SECONDS,
        sample_rate: int = DEFAULT_SAMPLE_RATE,
        bits_per_sample: int = 16,
        sample_format: str = "int",
        checked: bool = True,
        output_name: str | None = None,
    ) -> str:
        """
        Render one SATB harmony to a WAV file.

        The four voices are summed as sine waves. With checked=False the
        voicing is rendered even if it breaks four-part writing rules.

        Args:
            root: Chord root (e.g., 'C')
            soprano: Soprano note with octave (e.g., 'E4')
            alto: Alto note with octave (e.g., 'C4')
            tenor: Tenor note with octave (e.g., 'G3')
            bass: Bass note with octave (e.g., 'C3')
            duration: Length in whole seconds (default 1)
            sample_rate: Samples per second (default 44100)
            bits_per_sample: Sample width, 16 or 32 (default 16)
            sample_format: 'int' or 'float'; float needs 32 bits (default 'int')
            checked: Enforce four-part writing rules (default True)
            output_name: Optional output filename (letters, digits, '_', '-')

        Returns:
            JSON string with the output path and sample count

        Example:
            harmony_render_wav(root="C", soprano="E4", alto="C4", tenor="G3", bass="C3")
        """
        try:
            path = output_path(output_dir, output_name or "harmony", ".wav")
            spec = WavSpec(
                sample_rate=sample_rate,
                bits_per_sample=bits_per_sample,
                sample_format=SampleFormat(sample_format),
            )
            constructor = SATB.new if checked else SATB.new_unchecked
            harmony = constructor(
                parse_root(root),
                Pitch.parse(soprano),
                Pitch.parse(alto),
                Pitch.parse(tenor),
                Pitch.parse(bass),
            )

            samples = harmony.sound_wave(duration, sample_rate)
            path = write_wav(path, samples, spec)

            return json.dumps(
                {
                    "status": "success",
                    "path": str(path),
                    "samples": len(samples),
                    "harmony": str(harmony),
                }
            )
        except HarmonyError as e:
            return json.dumps({"status": "error", "code": e.code, "message": e.message})
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to render harmony")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_render_wav"] = harmony_render_wav

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_list_progressions() -> str:
        """
        List available progressions.

        Returns progressions from the built-in library and the project
        directory, with project progressions taking precedence.

        Returns:
            JSON string with progression summaries

        Example:
            harmony_list_progressions()
        """
        try:
            progressions = loader.list_progressions()
            return json.dumps(
                {
                    "status": "success",
                    "progressions": [
                        {
                            "name": p.name,
                            "description": p.description,
                            "chords": [c.label or PitchClass(c.root).spell() for c in p.chords],
                        }
                        for p in progressions
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to list progressions")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_list_progressions"] = harmony_list_progressions

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_render_progression(name: str, output_name: str | None = None) -> str:
        """
        Render every chord of a progression into one WAV file.

        Args:
            name: Progression name
            output_name: Optional output filename, no extension (letters, digits, '_', '-')

        Returns:
            JSON string with the output path

        Example:
            harmony_render_progression(name="major_I")
        """
        try:
            progression = loader.get_progression(name)
            if progression is None:
                message = ErrorMessages.PROGRESSION_NOT_FOUND.format(name=name)
                return json.dumps({"status": "error", "message": message})

            path = render_progression_wav(
                progression, output_path(output_dir, output_name or name, ".wav")
            )

            return json.dumps(
                {
                    "status": "success",
                    "path": str(path),
                    "chords": len(progression.chords),
                    "seconds": len(progression.chords) * progression.seconds_per_chord,
                }
            )
        except HarmonyError as e:
            return json.dumps({"status": "error", "code": e.code, "message": e.message})
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to render progression")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_render_progression"] = harmony_render_progression

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_export_midi(name: str, output_name: str | None = None) -> str:
        """
        Export a progression as MIDI block chords.

        Each voice gets its own channel (soprano on channel 1).

        Args:
            name: Progression name
            output_name: Optional output filename, no extension (letters, digits, '_', '-')

        Returns:
            JSON string with the output path

        Example:
            harmony_export_midi(name="cadence_c_major")
        """
        try:
            progression = loader.get_progression(name)
            if progression is None:
                message = ErrorMessages.PROGRESSION_NOT_FOUND.format(name=name)
                return json.dumps({"status": "error", "message": message})

            path = render_progression_midi(
                progression, output_path(output_dir, output_name or name, ".mid")
            )

            return json.dumps(
                {"status": "success", "path": str(path), "chords": len(progression.chords)}
            )
        except HarmonyError as e:
            return json.dumps({"status": "error", "code": e.code, "message": e.message})
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to export MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_export_midi"] = harmony_export_midi

    return tools
