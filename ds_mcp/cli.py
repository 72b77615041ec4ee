#!/usr/bin/env python3
"""
ds-mcp CLI Entry Point

Handles:
- Server modes (stdio, http)
- Offline inspection of the corpus (--list, --get, --check)
"""

import argparse
import asyncio
import sys
from pathlib import Path

from ds_mcp import __version__, __package_name__
from ds_mcp.config import Config, ConfigManager
from ds_mcp.docs import (
    CatalogError,
    FileDocumentStore,
    ManifestProvider,
    find_missing_documents,
)
from ds_mcp.tools import not_found_message


def print_version():
    """Print version info."""
    print(f"{__package_name__} v{__version__}")


def load_manifest(config: Config) -> ManifestProvider:
    try:
        return ManifestProvider.load(config.manifest_path)
    except CatalogError as e:
        print(f"✗ {e}", file=sys.stderr)
        sys.exit(2)


def cmd_list(config: Config) -> int:
    sys.stdout.write(load_manifest(config).list_all())
    return 0


def cmd_get(config: Config, entry_id: str) -> int:
    store = FileDocumentStore(config.docs_root)
    try:
        if not store.exists(entry_id):
            print(not_found_message(entry_id), file=sys.stderr)
            return 1
        sys.stdout.write(store.read(entry_id))
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def cmd_check(config: Config) -> int:
    """Verify every id listed in the catalog has a documentation file."""
    manifest = load_manifest(config)
    ids = manifest.entry_ids()
    missing = find_missing_documents(ids, FileDocumentStore(config.docs_root))
    
    if missing:
        print(f"✗ {len(missing)} of {len(ids)} catalog entries have no documentation:")
        for entry_id in missing:
            print(f"  - {entry_id}")
        return 1
    
    print(f"✓ All {len(ids)} catalog entries resolve")
    return 0


async def run_stdio(config: Config):
    """Run in stdio mode (for Cursor/Claude Desktop)."""
    from ds_mcp.server import run_stdio as serve_stdio
    await serve_stdio(config)


async def run_http(config: Config):
    """Run in HTTP mode."""
    from ds_mcp.server_http import main as http_main
    await http_main(config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ds-mcp",
        description="MCP server for the Reshaped design system documentation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  ds-mcp                    Run in stdio mode (default)
  ds-mcp --http --port 3000 Run HTTP server on port 3000
  ds-mcp --list             Print the catalog
  ds-mcp --get button       Print the documentation for one id
  ds-mcp --check            Verify every catalog id has documentation

MCP Configuration (.cursor/mcp.json):

  {
    "mcpServers": {
      "reshaped": {
        "command": "ds-mcp"
      }
    }
  }
"""
    )
    parser.add_argument("--version", "-v", action="store_true", help="Show version and exit")
    
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--stdio", action="store_true", help="Run in stdio mode (default)")
    mode.add_argument("--http", action="store_true", help="Run in HTTP mode")
    mode.add_argument("--list", action="store_true", help="Print the catalog and exit")
    mode.add_argument("--get", metavar="ID", help="Print documentation for ID and exit")
    mode.add_argument("--check", action="store_true", help="Validate catalog against documentation files")
    
    parser.add_argument("--port", "-p", type=int, default=None, help="HTTP port (default: 8000)")
    parser.add_argument("--docs-root", type=Path, default=None, help="Documentation directory")
    parser.add_argument(
        "--validate",
        action="store_true",
        default=None,
        help="Fail at startup if a catalog id has no documentation"
    )
    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    
    if args.version:
        print_version()
        sys.exit(0)
    
    config = ConfigManager.get_instance().load(
        docs_root=args.docs_root,
        http_port=args.port,
        validate_on_startup=args.validate,
    )
    
    if args.list:
        sys.exit(cmd_list(config))
    if args.get is not None:
        sys.exit(cmd_get(config, args.get))
    if args.check:
        sys.exit(cmd_check(config))
    
    try:
        if args.http:
            asyncio.run(run_http(config))
        else:
            asyncio.run(run_stdio(config))
    except CatalogError:
        # already logged by create_server
        sys.exit(2)


if __name__ == "__main__":
    main()
