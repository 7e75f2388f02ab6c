from __future__ import annotations

import argparse
import importlib
import json
import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from dotenv import load_dotenv

from clubhive.container import build_container
from clubhive.settings import get_settings_module
from clubhive.storage import build_store


def main() -> None:
    parser = argparse.ArgumentParser(description="Write an event's attendee report as JSON.")
    parser.add_argument("event_id")
    parser.add_argument("--out-dir", default=".", help="directory for the report file")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(build_store(settings))

    report = container.report_service.build_report(args.event_id)
    if not report:
        print(f"ERROR: event {args.event_id!r} not found", file=sys.stderr)
        sys.exit(1)

    target = Path(args.out_dir) / report.export_filename
    target.write_text(json.dumps(report.to_document(), indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"OK: Wrote {report.total_registrations} attendees -> {target}")


if __name__ == "__main__":
    main()
