#!/usr/bin/env python3
"""
PDF FreeText MCP Server
Exposes read-only tools to inspect FreeText annotations in PDFs and to preview
the appearance stream their appearance handler would generate.
"""

import argparse
import logging
import sys

from pdf_freetext.core import paths
from pdf_freetext.tools.mcp_tools import mcp

# --- Basic Configuration ---
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger("PDFFreeText")


def parse_arguments(argv=None):
    """Parse command line arguments for configurable directories."""
    parser = argparse.ArgumentParser(
        description="PDF FreeText MCP Server - inspect FreeText annotations and their appearances",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py ~/Downloads ~/Documents
  python main.py --allow-dir ~/Work/PDFs --log-level DEBUG

The server will only access PDF files within the specified directories.
        """
    )
    parser.add_argument(
        'directories',
        nargs='*',
        help='Accessible directories for PDF files (space-separated)'
    )
    parser.add_argument(
        '--allow-dir',
        action='append',
        dest='allowed_dirs',
        help='Add an allowed directory (can be used multiple times)'
    )
    parser.add_argument(
        '--max-file-size',
        type=int,
        default=100 * 1024 * 1024,
        help='Maximum file size in bytes (default: 100MB)'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='INFO',
        help='Set logging level (default: INFO)'
    )

    args = parser.parse_args(argv)
    directories = list(args.directories or []) + list(args.allowed_dirs or [])
    return args, directories


def main(argv=None):
    args, directories = parse_arguments(argv)
    logging.getLogger().setLevel(getattr(logging, args.log_level))

    if not directories:
        print("Error: At least one accessible directory must be specified!", file=sys.stderr)
        return 1
    if not paths.configure(directories, args.max_file_size):
        logger.error("No valid directories found! Server cannot operate.")
        return 1

    logger.info("Starting PDF FreeText MCP Server...")
    logger.info(f"Accessible directories: {paths.SEARCH_DIRECTORIES}")
    logger.info(f"Maximum file size: {paths.MAX_FILE_SIZE // (1024 * 1024)} MB")
    mcp.run(transport="stdio")
    return 0


if __name__ == "__main__":
    sys.exit(main())
