"""Clausewitz script formatter: CLI entry point.

Parses script (``.txt``) and localisation (``.yml``) files, or every such
file under a directory, and writes them back out in canonical layout.

Usage:
    python -m clausewitz_script <path> [<path> ...] [-o OUTPUT_DIR] [--ast] [--check]

Examples:
    python -m clausewitz_script common/ideas -o formatted/
    python -m clausewitz_script history/countries/GER.txt --ast
    python -m clausewitz_script common --check --convention spaces
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Tuple

from .config import CONVENTIONS, TAB_CONVENTION, Convention
from .constants import LOCALISATION_SUFFIXES, SCRIPT_SUFFIXES
from .errors import ParseError
from .services.grammar import strip_bom
from .services.localisation import parse_localisation, serialize_localisation
from .services.marshal import localisation_to_data, to_data
from .services.parser import ScriptParser
from .services.serializer import ScriptSerializer
from .utils.logger import configure_logging, log_failure

logger = logging.getLogger(__name__)


def _normalize_newlines(text: str) -> str:
    return text.replace('\r\n', '\n').replace('\r', '\n')


def discover_files(paths: List[Path]) -> List[Tuple[Path, Path]]:
    """Expand input paths into (file, path relative to its input root) tuples"""
    suffixes = SCRIPT_SUFFIXES + LOCALISATION_SUFFIXES
    found = []
    for path in paths:
        if path.is_dir():
            for file in sorted(path.rglob('*')):
                if file.is_file() and file.suffix.lower() in suffixes:
                    found.append((file, file.relative_to(path)))
        elif path.is_file():
            found.append((path, Path(path.name)))
        else:
            logger.warning("Skipping %s: not a file or directory", path)
    return found


class FileProcessor:
    """Formats or checks one file at a time with a fixed convention"""

    def __init__(self, convention: Convention):
        self.convention = convention
        self.parser = ScriptParser(convention.parser)
        self.serializer = ScriptSerializer(convention.formatter)

    def _format(self, file: Path, text: str):
        """Return (formatted text, structured data) for a file's contents"""
        if file.suffix.lower() in LOCALISATION_SUFFIXES:
            loc = parse_localisation(text)
            return serialize_localisation(loc), localisation_to_data(loc)

        document = self.parser.parse_string(text)
        return self.serializer.serialize_to_string(document), to_data(document)

    def format_file(self, file: Path, out_path: Path, write_ast: bool = False):
        text = file.read_text(encoding='utf-8-sig')
        formatted, data = self._format(file, text)

        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(formatted, encoding='utf-8')
        logger.info("Wrote %s", out_path)

        if write_ast:
            ast_path = out_path.with_suffix(out_path.suffix + '.json')
            with ast_path.open('w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            logger.info("Wrote %s", ast_path)

    def check_file(self, file: Path) -> Tuple[bool, bool]:
        """Return (is_canonical, is_stable) for a file

        canonical: formatting the file reproduces it exactly (modulo newlines)
        stable: formatting the formatted output changes nothing
        """
        text = file.read_text(encoding='utf-8-sig')
        once, _ = self._format(file, text)
        twice, _ = self._format(file, once)

        # utf-8-sig already dropped the BOM from the original
        canonical = _normalize_newlines(strip_bom(once)) == _normalize_newlines(text)
        return canonical, once == twice


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='clausewitz-script',
        description='Parse and re-serialize Clausewitz script and localisation files.',
    )
    parser.add_argument(
        'paths',
        nargs='+',
        help='Script/localisation files or directories to process.',
    )
    parser.add_argument(
        '-o', '--output',
        default='./output',
        help='Output directory for formatted files (default: ./output).',
    )
    parser.add_argument(
        '--ast',
        action='store_true',
        help='Also write each parsed document as JSON next to the formatted file.',
    )
    parser.add_argument(
        '--check',
        action='store_true',
        help='Write nothing; report files that are not canonical or not stable.',
    )
    parser.add_argument(
        '--convention',
        choices=sorted(CONVENTIONS),
        default=TAB_CONVENTION.name,
        help='Indentation and comment-in-array convention (default: tab).',
    )
    parser.add_argument(
        '--comments-force-block',
        action='store_true',
        default=None,
        help='Treat a comment inside a pair-less brace group as making it a block.',
    )
    parser.add_argument(
        '--max-depth',
        type=int,
        default=None,
        help='Maximum brace nesting depth accepted by the parser.',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    return parser


def resolve_convention(args) -> Convention:
    """Apply command-line overrides to the chosen convention"""
    convention = CONVENTIONS[args.convention]
    overrides = {}
    if args.comments_force_block is not None:
        overrides['comments_force_block'] = args.comments_force_block
    if args.max_depth is not None:
        overrides['max_depth'] = args.max_depth
    if overrides:
        convention = replace(convention, parser=replace(convention.parser, **overrides))
    return convention


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        convention = resolve_convention(args)
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    files = discover_files([Path(p) for p in args.paths])
    if not files:
        print("No script or localisation files found.")
        return 1

    processor = FileProcessor(convention)
    output_dir = Path(args.output)

    failed = 0
    unclean = 0
    for file, rel_path in files:
        try:
            if args.check:
                canonical, stable = processor.check_file(file)
                if not stable:
                    unclean += 1
                    print(f"  [UNSTABLE] {file}")
                elif not canonical:
                    unclean += 1
                    print(f"  [REFORMAT] {file}")
            else:
                processor.format_file(file, output_dir / rel_path, write_ast=args.ast)
                print(f"  {file} -> {output_dir / rel_path}")
        except (ParseError, OSError, UnicodeDecodeError) as e:
            failed += 1
            print(f"  [FAIL] {file}: {e}")
            log_failure(e, str(file), verbose=args.verbose)

    print(f"\nDone. Processed {len(files) - failed} of {len(files)} file(s).")
    if failed:
        print(f"  ({failed} failed)")
    if args.check and unclean:
        print(f"  ({unclean} would be reformatted)")

    return 1 if failed or unclean else 0


if __name__ == '__main__':
    sys.exit(main())
