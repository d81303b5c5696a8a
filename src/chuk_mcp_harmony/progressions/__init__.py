"""
Progressions - named voicing sequences stored as YAML.

This module provides:
- ProgressionLoader: Discovery from library and project directories
- render_progression_wav / render_progression_midi: Whole-progression export
"""

from chuk_mcp_harmony.progressions.loader import ProgressionLoader
from chuk_mcp_harmony.progressions.render import render_progression_midi, render_progression_wav

__all__ = [
    "ProgressionLoader",
    "render_progression_midi",
    "render_progression_wav",
]
