"""Command line driver: extract key/value records from text files."""

import argparse
import json
import sys
from pathlib import Path

from .config import load_config
from .errors import UnsupportedFormatError, UpstreamReadError
from .io.writers import write_json, write_record_csv, write_summary
from .log import configure_logging
from .pipeline.extract import extract_file
from .pipeline.schemas import FORMATS
from .regex.engine import load_rules


def main() -> None:
    parser = argparse.ArgumentParser(description="Extract flat key/value pairs from JSON, XML or CSV text.")
    sub = parser.add_subparsers(dest="cmd")

    extract = sub.add_parser("extract", help="Extract records from one or more files")
    extract.add_argument("paths", nargs="*", help="Files to scan")
    extract.add_argument("--format", dest="fmt", choices=FORMATS, default=None, help="Force a format for every file")
    extract.add_argument("--output", type=Path, default=None, help="Write JSON output to file")
    extract.add_argument("--summary", type=Path, default=None, help="Write a combined plain-text summary")
    extract.add_argument("--csv-out", type=Path, default=None, help="Write the merged record as key,value CSV")
    extract.add_argument("--rules", type=Path, default=None, help="YAML file with extra key/value scan rules")
    extract.add_argument("--config", type=Path, default=None, help="YAML file overriding the packaged defaults")
    extract.add_argument("--log-dir", default=None, help="Directory for the append-only log file")

    # Allow `textscrape data.json` as shorthand for `textscrape extract data.json`
    if len(sys.argv) > 1 and sys.argv[1] not in {"extract"} and not sys.argv[1].startswith("-"):
        sys.argv.insert(1, "extract")

    args = parser.parse_args()

    if args.cmd is None:
        args.cmd = "extract"
    if args.cmd != "extract":
        raise SystemExit(f"Unsupported command: {args.cmd}")
    if not getattr(args, "paths", None):
        raise SystemExit("Provide at least one file path")

    config = load_config(args.config)
    io_cfg = config.get("io", {})
    log_cfg = config.get("logging", {})
    configure_logging(
        "textscrape",
        args.log_dir or log_cfg.get("dir", "logs"),
        level=log_cfg.get("level", "INFO"),
        fmt=log_cfg.get("format", "%(asctime)s - %(message)s"),
    )

    rules = load_rules(args.rules) if args.rules else None

    results = []
    for path in args.paths:
        try:
            result = extract_file(
                Path(path),
                args.fmt,
                encoding=io_cfg.get("encoding", "utf-8"),
                extensions=io_cfg.get("extensions", {}),
                rules=rules,
            )
        except (UpstreamReadError, UnsupportedFormatError) as exc:
            raise SystemExit(str(exc)) from exc
        results.append(result)

    data = [result.to_dict() for result in results]

    if args.summary:
        write_summary(args.summary, results)
    if args.csv_out:
        merged = {}
        for result in results:
            merged.update(result.record)
        write_record_csv(args.csv_out, merged)

    if args.output:
        write_json(args.output, data)
    else:
        print(json.dumps(data, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
