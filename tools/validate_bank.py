from __future__ import annotations
from collections import defaultdict
import os
from type_core.question_bank import load_bank, DIMENSIONS
from type_core.typology import FUNCTION_INFO
from type_core.scoring import score_item
from type_core import config

# Configurable targets; defaults follow the bank audit minima
TARGETS = {
    "per_dim_min": int(os.getenv("TARGET_PER_DIM_MIN", config.BANK_MIN_PER_DIMENSION)),
    "reversed_min": int(os.getenv("TARGET_REVERSED_MIN", config.BANK_MIN_REVERSED_PER_DIMENSION)),
}

def main():
    items = load_bank()
    by_dim = defaultdict(list)
    for it in items:
        by_dim[it.dimension].append(it)

    print(f"Targets per function: >={TARGETS['per_dim_min']} questions, >={TARGETS['reversed_min']} reversed.\n")
    for d in DIMENSIONS:
        qs = by_dim[d]
        rev = sum(1 for it in qs if it.is_reversed)
        # strongest possible raw score if every item is answered at the extreme
        ceiling = sum(score_item(1 if it.is_reversed else 5, it.is_reversed) for it in qs)
        print(f"{d.value} ({FUNCTION_INFO[d]['full_name']}): {len(qs)} questions, {rev} reversed, max raw {ceiling:+.2f}")

        need = max(0, TARGETS["per_dim_min"] - len(qs))
        need_rev = max(0, TARGETS["reversed_min"] - rev)
        if need or need_rev:
            print(f"  -> Add: {need} question(s), {need_rev} reversed\n")
        else:
            print("  ok\n")

    stray = [it.id for it in items if it.dimension not in DIMENSIONS]
    if stray:
        print(f"Unknown function on: {', '.join(stray)}")

if __name__ == "__main__":
    main()
