"""Metric collection around a workload and JSON serialisation of snapshots."""

from __future__ import annotations

import enum
import json
import math
import os
import threading
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Iterable, Mapping, TypeVar, Union

from .config import setup_tracing

R = TypeVar("R")

Labels = Union[Mapping[str, Any], Iterable[tuple]]


class MetricKind(enum.Enum):
    """Kind of a recorded metric."""

    GAUGE = "gauge"
    COUNTER = "counter"
    HISTOGRAM = "histogram"


@dataclass(frozen=True)
class MetricEntry:
    """One metric of a snapshot."""

    kind: MetricKind
    name: str
    labels: tuple[tuple[str, str], ...] = ()
    value: Union[int, float] = 0


def _normalize_labels(labels: Labels) -> tuple[tuple[str, str], ...]:
    pairs = labels.items() if isinstance(labels, Mapping) else labels
    return tuple((str(key), str(value)) for key, value in pairs)


def _format_float(value: float) -> str:
    """Shortest round-trip decimal form, never in exponent notation."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _serialize_metric(entry: MetricEntry) -> dict[str, Any]:
    if entry.kind is MetricKind.GAUGE:
        value = _format_float(float(entry.value))
    elif entry.kind is MetricKind.COUNTER:
        value = str(int(entry.value))
    else:
        raise ValueError("Histograms not supported yet.")
    return {
        "metric": entry.name,
        "labels": [[key, label] for key, label in entry.labels],
        "value": value,
    }


def serialize_metric_snapshot(snapshot: Iterable[MetricEntry]) -> dict[str, list[dict[str, Any]]]:
    """Group metrics by kind under ``"counter"`` and ``"gauge"``, keys sorted.

    Each metric becomes ``{"metric": name, "labels": [[key, value], ...], "value": text}``.
    Histograms raise ``ValueError``.
    """
    grouped: dict[str, list[dict[str, Any]]] = {}
    for entry in snapshot:
        if entry.kind is MetricKind.HISTOGRAM:
            raise ValueError("Histograms not supported yet.")
        grouped.setdefault(entry.kind.value, []).append(_serialize_metric(entry))
    return dict(sorted(grouped.items()))


class _Recorder:
    """Collects gauges (last value wins) and counters (values add up)."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._values: dict[tuple[MetricKind, str, tuple[tuple[str, str], ...]], Union[int, float]] = {}

    def gauge(self, name: str, value: float, labels: Labels = ()) -> None:
        key = (MetricKind.GAUGE, name, _normalize_labels(labels))
        with self._lock:
            self._values[key] = float(value)

    def increment_counter(self, name: str, value: int = 1, labels: Labels = ()) -> None:
        if value < 0:
            raise ValueError("counters only increase")
        key = (MetricKind.COUNTER, name, _normalize_labels(labels))
        with self._lock:
            self._values[key] = self._values.get(key, 0) + int(value)

    def snapshot(self) -> list[MetricEntry]:
        with self._lock:
            items = list(self._values.items())
        return [
            MetricEntry(kind=kind, name=name, labels=labels, value=value)
            for (kind, name, labels), value in items
        ]


def run_with_metric_collection(output_path_envar: str, func: Callable[[Any], R]) -> R:
    """Run ``func`` with a fresh metric recorder and return its result.

    ``func`` receives the recorder, which offers ``gauge(name, value, labels)``
    and ``increment_counter(name, value, labels)``. When the environment
    variable named ``output_path_envar`` is set, the file it names is created
    first and the serialised snapshot is written to it afterwards.
    """
    path = os.environ.get(output_path_envar)
    handle = open(path, "w", encoding="utf-8") if path is not None else None
    try:
        setup_tracing()
        recorder = _Recorder()
        result = func(recorder)
        if handle is not None:
            json.dump(serialize_metric_snapshot(recorder.snapshot()), handle, indent=2)
    finally:
        if handle is not None:
            handle.close()
    return result