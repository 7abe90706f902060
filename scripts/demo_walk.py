# scripts/demo_walk.py
from __future__ import annotations

import pandas as pd
from sympy import QQ

from groebnerwalk import STRATEGIES, polynomial_ring, run_walk


def main() -> None:
    # 0) A small ideal and its degrevlex generators
    R, x, y, z = polynomial_ring("x,y,z", QQ, "degrevlex")
    ideal = [x**2 + y - z, y**2 + z - x, z**2 + x - y]

    # 1) One verbose walk, so the crossed weights are visible
    print("─" * 72)
    result = run_walk(ideal, "degrevlex", "lex", strategy="standard", verbosity=1)
    print("\nlex basis:")
    for g in result.basis.gens:
        print("  ", g.as_expr())

    # 2) Every strategy on the same input
    rows = []
    for name in sorted(STRATEGIES):
        res = run_walk(ideal, "degrevlex", "lex", strategy=name)
        rows.append({
            "strategy": name,
            "steps": res.steps,
            "outcome": res.outcome.value,
            "leads": list(res.basis.leading_monomials()),
        })
    print("─" * 72)
    print(pd.DataFrame(rows).to_string(index=False))

    # 3) Trace of the standard walk as a frame
    print("─" * 72)
    print(result.trace.to_frame().to_string(index=False))


if __name__ == "__main__":
    main()
