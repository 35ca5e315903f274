"""
Debug-only unresolved field collector

Read-only observability into fields that no heuristic matched and that were
answered with the default (years of experience). It does NOT change which
value gets typed.

Usage:
    1. Enable with --debug-unresolved CLI flag (calls enable())
    2. resolve_field_value() calls record_unresolved_field() on the default path
    3. The campaign calls flush_unresolved_fields() after each job

Output:
    debug_unresolved.jsonl - one JSON object per unresolved field
"""

import json
from datetime import datetime
from zoneinfo import ZoneInfo
from typing import Dict, List

import foxyapply.config as config

_unresolved_buffer: List[Dict] = []
_enabled = False


def enable(value=True):
    global _enabled
    _enabled = value


def is_enabled():
    return _enabled


def record_unresolved_field(*, label_text: str, input_type: str, answer: str):
    """
    Record an unresolved field to the in-memory buffer. No-op unless enabled.

    Args:
        label_text: Label resolved for the input (may be empty)
        input_type: The input's type attribute
        answer: The default answer that was typed
    """
    if not _enabled:
        return
    _unresolved_buffer.append(
        {
            "timestamp": datetime.now(ZoneInfo(config.TIMEZONE)).isoformat(),
            "label": label_text,
            "input_type": input_type,
            "answer": answer,
        }
    )


def pending():
    return list(_unresolved_buffer)


def flush_unresolved_fields(job_id=None):
    """
    Flush all buffered unresolved fields to debug_unresolved.jsonl.

    Append-only. One JSON object per line, tagged with ``job_id``.
    """
    if not _unresolved_buffer:
        return

    with open(config.DEBUG_UNRESOLVED_FILE, "a", encoding="utf-8") as f:
        for record in _unresolved_buffer:
            record = dict(record, job_id=job_id)
            f.write(json.dumps(record, ensure_ascii=False) + "\n")

    _unresolved_buffer.clear()
