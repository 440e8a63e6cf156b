from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Iterable, Sequence

from . import config
from .question_bank import DIMENSIONS, load_bank
from .sequencer import has_adjacent_repeat, shuffle_questions
from .types import Dimension, Question

DEFAULT_OUT = Path("/tmp/bank_audit.json")


def _blank_dimension() -> dict[str, int]:
    return {"total": 0, "reversed": 0, "forward": 0}


def audit_items(items: Iterable[Question]) -> dict[str, object]:
    coverage: dict[str, dict[str, int]] = {d.value: _blank_dimension() for d in DIMENSIONS}
    unknown: list[str] = []
    seen: set[str] = set()
    duplicates: list[str] = []
    bank = list(items)

    for item in bank:
        if item.id in seen:
            duplicates.append(item.id)
        seen.add(item.id)
        dim = Dimension.parse(item.dimension)
        if dim is None:
            unknown.append(item.id)
            continue
        row = coverage[dim.value]
        row["total"] += 1
        row["reversed" if item.is_reversed else "forward"] += 1

    warnings: list[str] = []
    for name, row in coverage.items():
        if row["total"] < config.BANK_MIN_PER_DIMENSION:
            warnings.append(f"{name} has {row['total']} question(s) (<{config.BANK_MIN_PER_DIMENSION})")
        if row["reversed"] < config.BANK_MIN_REVERSED_PER_DIMENSION:
            warnings.append(
                f"{name} has {row['reversed']} reversed question(s) (<{config.BANK_MIN_REVERSED_PER_DIMENSION})"
            )
    for iid in unknown:
        warnings.append(f"question {iid} names an unknown function")
    for iid in duplicates:
        warnings.append(f"duplicate question id {iid}")

    # a single dimension holding more than half the bank (rounded up) cannot avoid neighbours
    largest = max((row["total"] for row in coverage.values()), default=0)
    known = sum(row["total"] for row in coverage.values())
    if known and largest > (known + 1) // 2:
        warnings.append("no ordering without adjacent repeats exists for this bank")
    elif len(bank) > 1 and has_adjacent_repeat(shuffle_questions(bank, config.make_rng({"SEED": 0}))):
        warnings.append("shuffle fell back to an ordering with adjacent repeats")

    return {
        "coverage": coverage,
        "totals": {"questions": len(bank), "unknown_function": len(unknown), "duplicates": len(duplicates)},
        "warnings": warnings,
    }


def write_summary(summary: dict[str, object], path: Path = DEFAULT_OUT) -> str:
    text = json.dumps(summary, indent=2, sort_keys=True)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n", encoding="utf-8")
    return text


def _print_summary(summary: dict[str, object]) -> None:
    coverage = summary["coverage"]  # type: ignore[index]
    for name, row in coverage.items():  # type: ignore[union-attr]
        print(f"{name}: total={row['total']:2d} forward={row['forward']:2d} reversed={row['reversed']:2d}")
    warnings = summary["warnings"]  # type: ignore[index]
    if warnings:
        print("\nWarnings:")
        for w in warnings:  # type: ignore[union-attr]
            print(f"  - {w}")
    else:
        print("\nNo coverage warnings.")


def main(argv: Sequence[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Audit question bank coverage")
    ap.add_argument("--bank", type=Path, default=None)
    ap.add_argument("--out", type=Path, default=DEFAULT_OUT)
    a = ap.parse_args(argv)
    summary = audit_items(load_bank(a.bank))
    _print_summary(summary)
    write_summary(summary, a.out)
    return 2 if summary["warnings"] else 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
