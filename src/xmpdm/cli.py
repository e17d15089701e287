"""
Command-line interface for xmpdm.

Usage:
  xmpdm clip.mov                        # Default report
  xmpdm -q *.mov                        # One line per file
  xmpdm --json clip.mov                 # JSON to stdout
  xmpdm -o report.json *.mp4            # JSON export
  xmpdm --xml clip.xmp                  # Read a bare XMP document
  xmpdm --url https://host/clip.mp4     # Read from URL
"""

from __future__ import annotations

import argparse
import logging
import sys

from lxml import etree

from xmpdm._version import __version__
from xmpdm.exceptions import XMPError
from xmpdm.formatters import format_default, format_json, format_json_list, format_quiet_list
from xmpdm.models import XMPMetadata
from xmpdm.reader import read_file, read_url, read_xml


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="xmpdm",
        description="Read XMP Dynamic Media production metadata from media files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Sources:
  FILES        Media files with an embedded XMP packet (or an .xmp sidecar)
  --url        file:// or http(s):// URL
  --xml        File holding a bare XMP document (not scanned, parsed as-is)

Examples:
  xmpdm clip.mov                        # Default report
  xmpdm -q *.mov                        # One line per file
  xmpdm -o report.json *.mp4            # JSON export
        """,
    )
    parser.add_argument("files", nargs="*", help="Media file(s) to read")
    parser.add_argument(
        "-u",
        "--url",
        action="append",
        default=[],
        metavar="URL",
        help="Read from file:// or http(s):// URL",
    )
    parser.add_argument(
        "--xml",
        action="append",
        default=[],
        metavar="FILE",
        help="Read a file containing a bare XMP document",
    )
    parser.add_argument("-o", "--output", help="Save records to JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("-q", "--quiet", action="store_true", help="Quick summary only")
    mode_group.add_argument("--json", action="store_true", help="Print JSON instead of a report")
    return parser


def _read_xml_file(path: str) -> XMPMetadata:
    with open(path, "rb") as f:
        return read_xml(f.read())


def main(argv: list[str] | None = None) -> int:
    """Main entry point for xmpdm CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    sources = (
        [(path, read_file) for path in args.files]
        + [(url, read_url) for url in args.url]
        + [(path, _read_xml_file) for path in args.xml]
    )
    if not sources:
        parser.error("nothing to read: give FILES, --url or --xml")

    all_metadata = []
    quiet_items = []
    errors = 0

    for source, reader in sources:
        try:
            metadata = reader(source)
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            errors += 1
            continue
        except (XMPError, etree.XMLSyntaxError, ValueError, OSError) as e:
            print(f"Error reading {source}: {e}", file=sys.stderr)
            errors += 1
            continue

        all_metadata.append(metadata)
        if args.quiet:
            quiet_items.append((source, metadata))
        elif args.json:
            print(format_json(metadata))
        else:
            print(format_default(metadata, source))
            print()

    if quiet_items:
        print(format_quiet_list(quiet_items))

    # JSON export
    if args.output and all_metadata:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(format_json_list(all_metadata))
        print(f"Report saved to: {args.output}", file=sys.stderr)

    return 1 if errors > 0 else 0


if __name__ == "__main__":
    sys.exit(main())
