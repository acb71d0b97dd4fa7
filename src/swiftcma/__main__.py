from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Optional, Sequence

from swiftcma.comps import build_report, export_comps, suggest_mapping
from swiftcma.errors import SwiftCMAError
from swiftcma.ingest import read_table
from swiftcma.logging_config import configure_logging


def _load_json(path: Optional[str]) -> Any:
    if not path:
        return None
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='swiftcma', description='Map an MLS comps export and summarize the market.')
    p.add_argument('file', help='CSV or XLSX export')
    p.add_argument('--suggest', action='store_true', help='only print headers and the suggested mapping')
    p.add_argument('--mapping', help='JSON file with an edited header -> field mapping')
    p.add_argument('--subject', help='JSON file describing the subject property and branding')
    p.add_argument('--export', choices=['csv', 'xlsx'], help='also write the normalized comps')
    p.add_argument('--out-dir', help='export directory (default: SWIFTCMA_EXPORT_DIR)')
    p.add_argument('--log-level', help='override SWIFTCMA_LOG_LEVEL')
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level:
        configure_logging(args.log_level, force=True)
    try:
        table = read_table(args.file)
        if args.suggest:
            payload: Any = {'headers': table.headers, 'suggested_map': suggest_mapping(table.headers),
                            'row_count': len(table.rows)}
        else:
            payload = build_report(table, mapping=_load_json(args.mapping), subject=_load_json(args.subject))
            if args.export:
                payload['export_path'] = export_comps(payload['comps'], out_dir=args.out_dir,
                                                      fmt=args.export, label=payload['report_id'])
    except SwiftCMAError as e:
        msg = f"error: {e}"
        if e.hint:
            msg += f" ({e.hint})"
        print(msg, file=sys.stderr)
        return 2
    except json.JSONDecodeError as e:
        print(f"error: invalid JSON in --mapping/--subject file: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    json.dump(payload, sys.stdout, indent=2)
    sys.stdout.write('\n')
    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
