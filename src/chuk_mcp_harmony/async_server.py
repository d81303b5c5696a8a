#!/usr/bin/env python3
"""
Async Harmony MCP Server using chuk-mcp-server

This server provides MCP tools for four-part (SATB) harmony in twelve-tone
equal temperament.

The server provides tools for:
- Describing pitches (frequency, pitch class, octave)
- Validating SATB voicings against four-part writing rules
- Classifying chords by harmonic function
- Rendering harmonies and progressions to WAV
- Exporting progressions to MIDI
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_harmony.progressions import ProgressionLoader
from chuk_mcp_harmony.tools import register_harmony_tools, register_render_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-harmony")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
PROGRESSIONS_DIR = BASE_PATH / "progressions"
OUTPUT_DIR = BASE_PATH / "output"
LIBRARY_PATH = Path(__file__).parent / "progressions" / "library"

progression_loader = ProgressionLoader(
    library_path=LIBRARY_PATH,
    project_path=PROGRESSIONS_DIR,
)

# Register all tools
harmony_tools = register_harmony_tools(mcp)
render_tools = register_render_tools(mcp, progression_loader, OUTPUT_DIR)

# Export tool functions for direct access
harmony_describe_pitch = harmony_tools["harmony_describe_pitch"]
harmony_validate = harmony_tools["harmony_validate"]
harmony_classify = harmony_tools["harmony_classify"]

harmony_render_wav = render_tools["harmony_render_wav"]
harmony_list_progressions = render_tools["harmony_list_progressions"]
harmony_render_progression = render_tools["harmony_render_progression"]
harmony_export_midi = render_tools["harmony_export_midi"]

logger.info("CHUK Harmony MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Progressions dir: {PROGRESSIONS_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
