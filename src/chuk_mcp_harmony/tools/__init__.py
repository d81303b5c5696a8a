"""
MCP tool implementations.

Tools are organized by domain:
- harmony - Pitch lookup, validation and classification
- rendering - WAV and MIDI export
"""

from chuk_mcp_harmony.tools.harmony import register_harmony_tools
from chuk_mcp_harmony.tools.rendering import register_render_tools

__all__ = [
    "register_harmony_tools",
    "register_render_tools",
]
