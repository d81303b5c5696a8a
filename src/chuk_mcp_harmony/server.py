#!/usr/bin/env python3
"""
Command line entry point for chuk-mcp-harmony.

Serves the SATB harmony tools (pitch lookup, voicing validation, chord
classification, WAV and MIDI rendering) over MCP. Progressions are read
from ./progressions and rendered files land in ./output, both relative to
the working directory.
"""

import argparse
import asyncio
import logging

from chuk_mcp_harmony import __version__

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

EPILOG = """\
examples:
  chuk-mcp-harmony                      serve over stdio (for MCP clients)
  chuk-mcp-harmony --transport http     serve over HTTP on port 8000
  chuk-mcp-harmony --transport http --port 9000 --debug

tools:
  harmony_describe_pitch     frequency and MIDI number of a note (e.g. A4)
  harmony_validate           every range, spacing and doubling problem of a voicing
  harmony_classify           sonority and per-voice chord members
  harmony_render_wav         one voicing to a sine-wave WAV file
  harmony_list_progressions  library and project progressions
  harmony_render_progression a whole progression to one WAV file
  harmony_export_midi        a whole progression to MIDI block chords
"""


def build_parser() -> argparse.ArgumentParser:
    """Command line options for the harmony server."""
    parser = argparse.ArgumentParser(
        prog="chuk-mcp-harmony",
        description="MCP server for four-part (SATB) harmony in twelve-tone equal temperament.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port, ignored for stdio (default: 8000)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log classifier and writer details",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main() -> None:
    """Parse arguments and run the server on the chosen transport."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Deferred so --debug also covers progression discovery and tool registration
    from chuk_mcp_harmony.async_server import mcp

    if args.transport == "stdio":
        logger.info(f"Starting chuk-mcp-harmony {__version__} (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting chuk-mcp-harmony {__version__} (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
