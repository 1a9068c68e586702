# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Command-line interface for exif_orientation

Prints the Exif orientation of JPEG files, or rewrites it in place.

Copyright 2025 DNAi inc.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from exif_orientation.exceptions import ExifOrientationError
from exif_orientation.orientation import (
    OrientationCode,
    describe_orientation,
    get_orientation_info,
    read_orientation_code_from_file,
    update_orientation_code_in_file,
)


def orientation_record(file_path: Path, code: OrientationCode) -> Dict[str, Any]:
    """
    Build the JSON record for one file.

    Args:
        file_path: File the code was read from
        code: Orientation code read from it

    Returns:
        Dictionary with file, code, rotation and flipped keys
    """
    info = get_orientation_info(code)
    return {
        'file': str(file_path),
        'code': int(code),
        'rotation': info.rotation if info else None,
        'flipped': info.flipped if info else None,
    }


def format_output(records: List[Dict[str, Any]], format_type: str = "text") -> str:
    """
    Format orientation records.

    Args:
        records: Records built by orientation_record
        format_type: Output format ('text', 'json')

    Returns:
        Formatted output string
    """
    if format_type == "json":
        return json.dumps(records, indent=2, ensure_ascii=False)

    lines = []
    for record in records:
        code = record['code']
        if code == OrientationCode.unknown:
            lines.append(f"{record['file']}: unknown")
        else:
            lines.append(f"{record['file']}: {code} ({describe_orientation(code)})")
    return "\n".join(lines)


def parse_orientation_code(value: str) -> OrientationCode:
    """argparse type for --set: a number 1..8 or a code name such as deg90."""
    try:
        code = int(value)
    except ValueError:
        try:
            code = OrientationCode[value]
        except KeyError:
            raise argparse.ArgumentTypeError(f"invalid orientation code: {value}")
    if not 1 <= code <= 8:
        raise argparse.ArgumentTypeError(f"orientation code must be 1..8, got {value}")
    return OrientationCode(code)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='exif-orientation',
        description="Read or rewrite the Exif orientation of JPEG files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print orientation
  exif-orientation photo.jpg

  # Print orientation of several files as JSON
  exif-orientation -j *.jpg

  # Reset orientation to normal, in place
  exif-orientation -s 1 photo.jpg

  # Write a copy rotated 90 degrees clockwise
  exif-orientation -s deg90 -o rotated.jpg photo.jpg
        """
    )
    parser.add_argument('files', nargs='+', type=Path, help='JPEG file(s) to process')
    parser.add_argument('-j', '--json', action='store_true', help='Output in JSON format')
    parser.add_argument('-s', '--set', type=parse_orientation_code, dest='code',
                        help='Write orientation CODE (1..8 or a name such as deg90)')
    parser.add_argument('-o', '--output', type=Path,
                        help='Write the updated file here instead of in place (single file only)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log the segment walk')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.output is not None:
        if args.code is None:
            parser.error("-o/--output requires -s/--set")
        if len(args.files) != 1:
            parser.error("-o/--output requires exactly one input file")

    failed = False
    records = []
    for file_path in args.files:
        try:
            if args.code is not None:
                update_orientation_code_in_file(file_path, args.code, args.output)
                print(f"Orientation of {args.output or file_path} set to {int(args.code)}")
            else:
                code = read_orientation_code_from_file(file_path)
                records.append(orientation_record(file_path, code))
        except (ExifOrientationError, OSError) as e:
            print(f"Error: {file_path}: {e}", file=sys.stderr)
            failed = True

    if records:
        print(format_output(records, "json" if args.json else "text"))

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
