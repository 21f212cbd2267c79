#!/usr/bin/env python3
"""
Ten-year projection for one set of tax rates, outside the dashboard.

Usage:
  python scripts/run_projection.py --federal 28 --corporate 23 --capital-gains 18 --seed 7
  python scripts/run_projection.py --suggested

Outputs:
- reports/projection/projection.csv  (one row per year)
- reports/projection/projection.png  (indicator lines)
- reports/projection/rates.png       (rate comparison bars)
"""

import argparse
import logging
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from tax_impact_sim.config.rates import START_YEAR
from tax_impact_sim.sim.projection import generate_projection, projection_frame
from tax_impact_sim.sim.policy import RateInputs, reference_rates, suggest_optimal_rates
from tax_impact_sim.report.metrics import summary_cards
from tax_impact_sim.report.formatting import format_card_value, fmt_trend
from tax_impact_sim.report.charts import plot_projection, plot_rate_comparison

# --- Config ---
OUT_DIR = Path("reports/projection")
# -------------

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    ref_fed, ref_corp, ref_cg = reference_rates().as_percent()
    parser = argparse.ArgumentParser(description="Run the synthetic tax impact projection.")
    parser.add_argument("--federal", type=float, default=ref_fed, help="Federal income tax rate in percent")
    parser.add_argument("--corporate", type=float, default=ref_corp, help="Corporate tax rate in percent")
    parser.add_argument("--capital-gains", type=float, default=ref_cg, help="Capital gains tax rate in percent")
    parser.add_argument("--suggested", action="store_true", help="Use the suggested 'optimal' rates instead")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible noise")
    parser.add_argument("--start-year", type=int, default=START_YEAR)
    parser.add_argument("--out-dir", type=Path, default=OUT_DIR)
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def save_figure(fig, out_path: Path):
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path)
    plt.close(fig)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.suggested:
        rates = suggest_optimal_rates()
    else:
        rates = RateInputs.from_percent(args.federal, args.corporate, args.capital_gains)
    logger.info("Rates: federal=%.3f corporate=%.3f capital_gains=%.3f", *rates.as_tuple())

    records = generate_projection(*rates.as_tuple(), seed=args.seed, start_year=args.start_year)
    df = projection_frame(records)

    out_dir = args.out_dir
    out_dir.mkdir(parents=True, exist_ok=True)
    csv_path = out_dir / "projection.csv"
    df.to_csv(csv_path, index=False)

    save_figure(plot_projection(df), out_dir / "projection.png")
    save_figure(plot_rate_comparison(rates), out_dir / "rates.png")

    print("\n=== Economic Projection ===")
    print(df.to_string(index=False, float_format=lambda v: f"{v:.3f}"))
    print(f"\n=== {records[0].year} Summary ===")
    for card in summary_cards(records):
        print(f"{card.title:<26} {format_card_value(card.value, card.unit):>12}  {fmt_trend(card.trend)}")
    print(f"\n✅ Saved table + charts to: {out_dir}\n")
    return df


if __name__ == "__main__":
    main()
