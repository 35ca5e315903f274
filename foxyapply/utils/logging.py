"""Logging utilities"""

import json
from datetime import datetime
from zoneinfo import ZoneInfo

import foxyapply.config as config


def _timestamp():
    return datetime.now(ZoneInfo(config.TIMEZONE)).isoformat()


def _append(path, record):
    with open(path, "a", encoding="utf-8") as f:
        f.write(json.dumps(record, ensure_ascii=False) + "\n")


def log_result(job_id, status, reason=""):
    """Log application result to JSONL file"""
    result = {
        "timestamp": _timestamp(),
        "job_id": job_id,
        "job_url": config.JOB_VIEW_URL.format(job_id=job_id),
        "status": status,
    }
    if reason:
        result["reason"] = reason

    _append(config.LOG_FILE, result)

    print(f"[{status}] job {job_id}")
    if reason:
        print(f"  Reason: {reason}")


def log_field(label, value, ok=True, error=""):
    """Log one filled (or failed) wizard field to JSONL file"""
    record = {
        "timestamp": _timestamp(),
        "label": label,
        "value": value,
        "ok": ok,
    }
    if error:
        record["error"] = error

    _append(config.FIELD_LOG_FILE, record)

    if ok:
        print(f"  ✓ Filled '{label}': {value}")
    else:
        print(f"  ⚠️ Failed to fill '{label}': {error}")
