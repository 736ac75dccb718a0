"""
Build a photo directory PDF from a directory JSON file.

Usage:
    python scripts/build_directory.py groups.json --output directory.pdf \
        --photos-dir data/photos --layout list --toc
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

# Add src to path so we can import directory_toolkit
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / "src"))

from directory_toolkit.builder import DirectoryBuildError, RenderOptions, generate_directory
from directory_toolkit.core.schemas import ValidationError
from directory_toolkit.core.utils import load_directory

logger = logging.getLogger("build_directory")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Render a photo directory to PDF")
    parser.add_argument("input", type=Path, help="Directory JSON (list of groups or {options, groups})")
    parser.add_argument("--output", "-o", type=Path, default=Path("directory.pdf"), help="Output PDF path")
    parser.add_argument("--photos-dir", type=Path, help="Photo root folder (group photos in families/)")
    parser.add_argument("--layout", choices=["list", "grid"], help="Override body layout")
    parser.add_argument("--page-size", help="Override page size (letter or a4)")
    parser.add_argument("--name", help="Override organization name")
    parser.add_argument("--cover", action="store_true", help="Include a cover page")
    parser.add_argument("--toc", action="store_true", help="Include a table of contents")
    parser.add_argument("--no-photos", action="store_true", help="Leave out photos")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def build_options(args, file_options):
    """Merge command-line overrides onto options from the file (or defaults)."""
    options = file_options or RenderOptions()
    overrides = {}
    if args.layout:
        overrides["layout"] = args.layout
    if args.page_size:
        overrides["page_size"] = args.page_size
    if args.name:
        overrides["organization_name"] = args.name
    if args.cover:
        overrides["include_cover"] = True
    if args.toc:
        overrides["include_toc"] = True
    if args.no_photos:
        overrides["include_photos"] = False
    return replace(options, **overrides) if overrides else options


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        groups, file_options = load_directory(args.input)
    except (OSError, ValidationError) as e:
        logger.error(f"Could not read {args.input}: {e}")
        return 1

    options = build_options(args, file_options)

    try:
        result = generate_directory(groups, options, args.output, photos_dir=args.photos_dir)
    except DirectoryBuildError as e:
        logger.error(f"Directory generation failed at {e.stage}: {e}")
        return 1

    print(f"Wrote {result.output_path}: {result.entry_count} entries, {result.page_count} pages")
    for warning in result.warnings:
        print(f"  warning: {warning}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
