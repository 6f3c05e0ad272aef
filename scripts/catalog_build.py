#!/usr/bin/env python3
"""Catalog Build Tool.

Usage:
  catalog_build.py [build] [--dry-run] [--quiet] [--path=<dir>] [--config=<file>]
  catalog_build.py validate [--path=<dir>] [--config=<file>]
  catalog_build.py classify <file>...
  catalog_build.py (-h | --help)
  catalog_build.py --version

Commands:
  build        Scan album folders and write album.json files and index.json
               (default when no command is given)
  validate     Check album manifests against their folders (read-only)
  classify     Show the content type detected for each file

Options:
  --dry-run          Preview changes without writing
  --quiet            Only print warnings, errors and the summary
  --path=<dir>       Directory holding the album folders (default: current directory)
  --config=<file>    YAML config file (default: auto-detect .catalog_build.yaml)
  -h --help          Show this screen
  --version          Show version

Examples:
  # Rebuild manifests for the album folders in the current directory
  catalog_build.py

  # Preview a build of another directory
  catalog_build.py build --dry-run --path=./content

  # Check that every recorded song still exists
  catalog_build.py validate
"""

import sys
from pathlib import Path

from docopt import docopt

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from catalog.build_utils import build_catalog, validate_catalog
from catalog.config import Config, load_config
from catalog.errors import CatalogError
from catalog.filetype_utils import UNKNOWN, detect_format, read_header

__version__ = "1.0.0"


def cmd_build(config: Config, dry_run: bool = False, verbose: bool = True) -> None:
    """Reconcile every album folder and write the manifests."""
    print("=" * 60)
    print("BUILDING CATALOG")
    print("=" * 60)
    print(f"Base path: {config.base_path}")
    print(f"CDN base: {config.cdn_base_url}")
    print(f"Mode: {'DRY-RUN' if dry_run else 'APPLY'}")
    print()

    stats = build_catalog(config, dry_run=dry_run, verbose=verbose)

    print("\n" + "=" * 60)
    print("CATALOG BUILD COMPLETE")
    print("=" * 60)
    print(f"  Albums: {stats['albums']}")
    print(f"  Songs: {stats['songs']} ({stats['new_songs']} new)")
    print(f"  Errors: {stats['errors']}")


def cmd_validate(config: Config) -> None:
    """Validate album manifests against their folders."""
    print("=" * 60)
    print("VALIDATING CATALOG")
    print("=" * 60)
    print(f"Base path: {config.base_path}")
    print()

    result = validate_catalog(config, verbose=True)

    print("\n" + "=" * 60)
    print("VALIDATION SUMMARY")
    print("=" * 60)
    print(f"  Albums: {len(result['albums'])}")
    print(f"  Missing covers: {len(result['missing_covers'])}")
    print(f"  Issues: {len(result['issues'])}")

    if result["issues"]:
        print("\nIssues found:")
        for issue in result["issues"]:
            print(f"  - {issue}")
        sys.exit(1)
    else:
        print("\n✓ All checks passed!")


def cmd_classify(files: list[str], config: Config) -> None:
    """Print the detected kind and format of each file."""
    for name in files:
        header = read_header(Path(name), config.header_size)
        detected = detect_format(header) if header else None
        kind, fmt = detected if detected else (UNKNOWN, "-")
        print(f"{kind:<8} {fmt:<5} {name}")


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = docopt(__doc__, argv=argv, version=f"Catalog Build Tool v{__version__}")

    config = load_config(base_path=args.get("--path"), config_file=args.get("--config"))

    dry_run: bool = bool(args.get("--dry-run", False))
    verbose: bool = not args.get("--quiet", False)

    try:
        if args.get("validate"):
            cmd_validate(config)

        elif args.get("classify"):
            cmd_classify(args["<file>"], config)

        else:
            cmd_build(config, dry_run=dry_run, verbose=verbose)

    except KeyboardInterrupt:
        print("\n\nOperation cancelled by user.")
        sys.exit(1)
    except CatalogError as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
