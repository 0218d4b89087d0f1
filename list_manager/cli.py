#!/usr/bin/env python3
"""
Command-line interface for the List Manager.
Handles argument parsing and configuration.
"""

import argparse
import sys
from typing import List, Optional

from list_manager.config import load_config, normalize_order
from list_manager.di import build_container
from list_manager.errors import ListManagerError
from list_manager.models.pagination import PageSpec
from list_manager.models.sorting import ASC, DESC, SortSpec
from list_manager.ui.console import print_page
from list_manager.utils.file_utils import load_records
from simple_logger import Slogger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description='Browse a JSON array of records as a sorted, paginated table'
    )

    parser.add_argument(
        'records',
        help='Path to a JSON file containing an array of objects'
    )

    # Table parameters
    parser.add_argument(
        '--per-page', type=int, default=None,
        help='Rows per page (default: from config, otherwise 10)'
    )
    parser.add_argument(
        '--orderby', default=None,
        help='Field to sort by (default: from config, otherwise id)'
    )
    parser.add_argument(
        '--order', choices=[ASC, DESC], default=None,
        help='Sort direction (default: from config, otherwise asc)'
    )
    parser.add_argument(
        '--page', type=int, default=1,
        help='Page to show with --print (default: 1)'
    )

    # Output mode
    parser.add_argument(
        '--print', dest='print_only', action='store_true',
        help='Print one page to stdout instead of starting the interactive UI'
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    Slogger.log("Starting List Manager...", context={"records": args.records})

    config = load_config()
    table_cfg = config.setdefault("table", {})
    if args.per_page is not None:
        table_cfg["per_page"] = args.per_page
    if args.orderby:
        table_cfg["orderby"] = args.orderby
    if args.order:
        table_cfg["order"] = args.order

    try:
        records = load_records(args.records)
        container = build_container(config, records)
        adapter = container.adapter
    except ListManagerError as e:
        Slogger.exception(e, "Could not start List Manager", {"records": args.records})
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.print_only:
        sort = SortSpec(table_cfg.get("orderby") or "", normalize_order(table_cfg.get("order")))
        result = adapter.prepare_items(sort, PageSpec(args.page))
        print_page(
            result,
            adapter.columns,
            adapter.current_sort,
            date_format=config.get("ui", {}).get("date_format", "%Y-%m-%d"),
        )
        return 0

    # Imported here so --print works without a terminal UI
    from list_manager.ui.app import ListManagerApp

    app = ListManagerApp(config, records, adapter.columns)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
