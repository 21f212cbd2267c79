from tax_impact_sim.report.metrics import MetricCard, calculate_trend, summary_cards
from tax_impact_sim.report.charts import plot_projection, plot_rate_comparison

__all__ = ["MetricCard", "calculate_trend", "summary_cards", "plot_projection", "plot_rate_comparison"]
