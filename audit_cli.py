from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import config
from engine import run_audit
from measurement import MeasurementError, RawMeasurement
from run_result import RunResult, error_report
from score_policy import POLICIES, resolve_policy
from ui import console

logger = logging.getLogger(__name__)

SUMMARY_FIELDS = ["source", "url", "mode", "score", "band", "error"]


def save_json(data: Any, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")


def load_record(path: Path) -> Dict[str, Any]:
    """
    Read one capture file. Accepts a bare measurement, a
    {"url", "mode", "measurement"} record or a driver {"error", "details"} report.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise MeasurementError("(record)", "expected a JSON object")
    if "error" in data:
        return {"url": data.get("url"), "error": str(data["error"]), "details": str(data.get("details") or "")}
    if "measurement" in data:
        return {"url": data.get("url"), "mode": data.get("mode"), "measurement": data["measurement"]}
    return {"url": None, "mode": None, "measurement": data}


def score_record(
    record: Dict[str, Any],
    mode_override: Optional[str],
    policy: str,
) -> Tuple[Optional[RunResult], Optional[Dict[str, str]]]:
    if "error" in record:
        return None, error_report(record["error"], record.get("details", ""))
    raw = RawMeasurement.from_dict(record["measurement"])
    mode = mode_override or record.get("mode") or config.DEFAULT_MODE
    return run_audit(raw, mode, policy=policy), None


def _summary_row(source: str, url: Optional[str], result: Optional[RunResult], report: Optional[dict]) -> dict:
    if result is None:
        return {"source": source, "url": url or "", "mode": "", "score": "", "band": "",
                "error": (report or {}).get("error", "")}
    return {"source": source, "url": url or "", "mode": result.mode, "score": result.score,
            "band": result.band, "error": ""}


def write_summary_csv(rows: List[dict], path: str) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=SUMMARY_FIELDS)
        writer.writeheader()
        writer.writerows(rows)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score captured page measurements.")
    parser.add_argument("--measurement", action="append", required=True,
                        help="capture JSON file (repeatable)")
    parser.add_argument("--mode", default=None, help="desktop or mobile (overrides the file)")
    parser.add_argument("--policy", default=None, choices=sorted(POLICIES),
                        help=f"score policy (default: {config.SCORE_POLICY})")
    parser.add_argument("--json", action="store_true", help="print JSON instead of the console view")
    parser.add_argument("--out-dir", default=None)
    parser.add_argument("--summary-csv", default=None)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        policy = resolve_policy(args.policy)
    except ValueError as e:
        print(f"FATAL: {e}")
        return 2

    out_dir = None
    if args.out_dir:
        out_dir = Path(args.out_dir).expanduser().resolve()
        out_dir.mkdir(parents=True, exist_ok=True)

    rows = []
    failures = 0
    total = len(args.measurement)
    for i, source in enumerate(args.measurement, 1):
        path = Path(source)
        logger.info(f"[{i}/{total}] Scoring: {path}")
        url = None
        try:
            record = load_record(path)
            url = record.get("url")
            result, report = score_record(record, args.mode, policy)
        except (OSError, json.JSONDecodeError, MeasurementError) as e:
            logger.error(f"  Could not read {path}: {e}")
            result, report = None, error_report("Invalid measurement", str(e))

        payload = result.to_dict() if result is not None else report
        if result is None:
            failures += 1

        if args.json:
            print(json.dumps(payload, indent=2))
        elif result is not None:
            console.render_result(result, heading=url or path.stem)
        else:
            console.error(f"{path}: {report['error']} ({report['details']})")

        if out_dir:
            json_path = out_dir / f"{path.stem}.result.json"
            save_json(payload, str(json_path))
            logger.info(f"  Saved JSON: {json_path}")

        rows.append(_summary_row(str(path), url, result, report))

    if args.summary_csv:
        write_summary_csv(rows, args.summary_csv)
        logger.info(f"Saved summary CSV: {args.summary_csv}")

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
