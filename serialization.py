"""Serialization of crossing reports for JSON output."""

from __future__ import annotations
from typing import Any, Dict

from core import Pos
from crossings import CrossingReport


# ===== Basic Types =====


def serialize_pos(pos: Pos) -> Dict[str, int]:
    return {"x": pos.x, "y": pos.y}


# ===== Reports =====


def serialize_report(report: CrossingReport) -> Dict[str, Any]:
    return {
        "crossings": [
            serialize_pos(p) for p in sorted(report.crossings, key=lambda p: (p.x, p.y))
        ],
        "closest": serialize_pos(report.closest) if report.closest is not None else None,
        "distance": report.distance,
    }
