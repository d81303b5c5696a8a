"""
Pydantic models for the harmony system.

This module provides:
- Progression: Named sequence of voicings with render settings
- VoicingSpec: Root plus four voices, checked or unchecked
- VoiceSpec: One voice as a note name with optional frequency
"""

from chuk_mcp_harmony.models.progression import Progression, VoiceSpec, VoicingSpec

__all__ = [
    "Progression",
    "VoiceSpec",
    "VoicingSpec",
]
