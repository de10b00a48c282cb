#!/usr/bin/env python3
"""Run a predefined scenario under every distance mode and output results."""

import argparse
import dataclasses
import json
import logging
import os
import sys
import time

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "backend"))

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("scenario")


def main():
    import pandas as pd
    from mobility.core.config import DISTANCE_MODES
    from mobility.core.engine import run_detailed
    from mobility.core.errors import FeasibilityError
    from mobility.integration.metrics import mode_share
    from mobility.scenarios.registry import SCENARIOS, build_scenario

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("scenario", choices=sorted(SCENARIOS))
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--output", help="Directory for CSV/JSON results")
    args = parser.parse_args()

    logger.info("Running scenario: %s", args.scenario)
    plan, config = build_scenario(args.scenario, seed=args.seed)
    world = plan.snapshot()
    logger.info(
        "Plan: %dx%d grid, %d roads, capacity %d, %d workplaces, %d food places, budget %.0f/%.0f spent",
        plan.grid.rows, plan.grid.cols, len(plan.roads), plan.total_housing_capacity,
        plan.total_workplaces, plan.total_food_places,
        plan.budget.budget_spent, plan.budget.budget_total + plan.budget.revenue,
    )

    rows = []
    legs_by_mode = {}
    for mode in DISTANCE_MODES:
        mode_config = dataclasses.replace(config, distance_mode=mode)
        start = time.time()
        try:
            result = run_detailed(world, mode_config)
        except FeasibilityError as e:
            logger.error("Scenario infeasible: %s", e.message)
            sys.exit(2)
        logger.info("Mode %s completed in %.2fs", mode, time.time() - start)
        rows.append({"distance_mode": mode, **result.metrics.snapshot(), **mode_share(result.legs)})
        legs_by_mode[mode] = result.legs

    summary = pd.DataFrame(rows).set_index("distance_mode")
    logger.info("=== Summary ===\n%s", summary.round(2).to_string())

    if args.output:
        os.makedirs(args.output, exist_ok=True)
        summary.to_csv(os.path.join(args.output, "summary.csv"))
        for mode, legs in legs_by_mode.items():
            legs.to_csv(os.path.join(args.output, f"legs_{mode}.csv"), index=False)
        with open(os.path.join(args.output, "config.json"), "w") as f:
            json.dump(dataclasses.asdict(config), f, indent=2)
        logger.info("Results saved to %s/", args.output)


if __name__ == "__main__":
    main()
