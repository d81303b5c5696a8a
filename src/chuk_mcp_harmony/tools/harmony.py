"""
Harmony tools - MCP tools for pitch lookup and chord validation.

Tools for describing pitches and checking four-part voicings.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.core.pitch import Pitch, PitchClass
from chuk_mcp_harmony.harmony import HarmonyError, classify, validate_satb

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def parse_root(root: str) -> int:
    """Parse a root given as a note name ('D', 'Eb') or a number ('2')."""
    root = root.strip()
    if root.isdigit():
        return int(PitchClass(int(root)))
    return int(PitchClass.parse(root))


def describe_pitch(pitch: Pitch) -> dict[str, Any]:
    """JSON-friendly summary of a pitch."""
    return {
        "display": pitch.display(),
        "pitch_class": int(pitch.pitch_class),
        "octave": pitch.octave,
        "frequency": pitch.frequency,
        "half_steps_from_zero": pitch.half_steps_from_zero,
        "midi": pitch.to_midi(),
    }


def register_harmony_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register pitch and harmony validation tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_describe_pitch(note: str) -> str:
        """
        Describe a pitch in twelve-tone equal temperament.

        Returns the equal-tempered frequency (A4 = 440 Hz), pitch class,
        octave and MIDI number of a note.

        Args:
            note: Note name with octave (e.g., 'A4', 'C#3', 'Bb2')

        Returns:
            JSON string with pitch details

        Example:
            harmony_describe_pitch(note="C4")
        """
        try:
            pitch = Pitch.parse(note)
            return json.dumps({"status": "success", "pitch": describe_pitch(pitch)})
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_describe_pitch"] = harmony_describe_pitch

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_validate(
        root: str,
        soprano: str,
        alto: str,
        tenor: str,
        bass: str,
    ) -> str:
        """
        Validate a four-part (SATB) voicing.

        Checks each voice's register, the spacing between adjacent voices,
        and whether the pitch classes form a legal chord over the root
        (root position or inverted triad with correct doubling, or a
        complete seventh chord). Reports every problem found.

        Args:
            root: Chord root (e.g., 'C', 'F#', 'Bb')
            soprano: Soprano note with octave (e.g., 'E4')
            alto: Alto note with octave (e.g., 'C4')
            tenor: Tenor note with octave (e.g., 'G3')
            bass: Bass note with octave (e.g., 'C3')

        Returns:
            JSON string with validity, sonority and issues

        Example:
            harmony_validate(root="C", soprano="E4", alto="C4", tenor="G3", bass="C3")
        """
        try:
            result = validate_satb(
                parse_root(root),
                Pitch.parse(soprano),
                Pitch.parse(alto),
                Pitch.parse(tenor),
                Pitch.parse(bass),
            )

            return json.dumps(
                {
                    "status": "success",
                    "valid": result.is_valid,
                    "sonority": (
                        result.classification.sonority.value if result.classification else None
                    ),
                    "errors": [
                        {"code": e.code, "message": e.message, "location": e.location}
                        for e in result.errors
                    ],
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to validate harmony")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_validate"] = harmony_validate

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_classify(
        root: str,
        soprano: str,
        alto: str,
        tenor: str,
        bass: str,
    ) -> str:
        """
        Classify four pitch classes against a root, ignoring register.

        Args:
            root: Chord root (e.g., 'G')
            soprano: Soprano pitch class (e.g., 'F')
            alto: Alto pitch class (e.g., 'D')
            tenor: Tenor pitch class (e.g., 'B')
            bass: Bass pitch class (e.g., 'G')

        Returns:
            JSON string with the sonority, or the rejection code

        Example:
            harmony_classify(root="G", soprano="F", alto="D", tenor="B", bass="G")
        """
        try:
            classification = classify(
                parse_root(root),
                PitchClass.parse(soprano),
                PitchClass.parse(alto),
                PitchClass.parse(tenor),
                PitchClass.parse(bass),
            )
            return json.dumps(
                {
                    "status": "success",
                    "legal": True,
                    "sonority": classification.sonority.value,
                    "functions": {
                        voice.value: function.value
                        for voice, function in classification.functions.items()
                    },
                }
            )
        except HarmonyError as e:
            return json.dumps(
                {"status": "success", "legal": False, "code": e.code, "message": e.message}
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_classify"] = harmony_classify

    return tools
