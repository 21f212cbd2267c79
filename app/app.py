# app/app.py
# ------------------------------------------------------------
# Tax Impact Sim: Streamlit UI (rate sliders, cards, charts)
# ------------------------------------------------------------
# IMPORTANT: keep this path hack at the very top so local src/ imports work
import sys
from pathlib import Path
sys.path.append(str((Path(__file__).resolve().parents[1] / "src").resolve()))

import logging

import matplotlib.pyplot as plt
import pandas as pd
import streamlit as st

from tax_impact_sim.config.rates import FEDERAL_SLIDER, CORPORATE_SLIDER, CAPITAL_GAINS_SLIDER
from tax_impact_sim.sim.projection import generate_projection, projection_frame
from tax_impact_sim.sim.policy import RateInputs, reference_rates, suggest_optimal_rates
from tax_impact_sim.report.metrics import summary_cards
from tax_impact_sim.report.formatting import format_card_value, fmt_currency, fmt_pct_val, fmt_num
from tax_impact_sim.report.charts import plot_projection, plot_rate_comparison

logger = logging.getLogger(__name__)

# ------------------------------------------------------------
# Streamlit page config
# ------------------------------------------------------------
st.set_page_config(page_title="Tax Impact Sim", layout="wide")

# ------------------------------------------------------------
# Session state (slider values live here so the button can move them)
# ------------------------------------------------------------
SLIDER_KEYS = ("federal_pct", "corporate_pct", "capital_gains_pct")

def _store_rates(rates: RateInputs):
    for key, pct in zip(SLIDER_KEYS, rates.as_percent()):
        st.session_state[key] = round(pct, 1)

if any(k not in st.session_state for k in SLIDER_KEYS):
    _store_rates(reference_rates())

def apply_suggested_rates():
    """Button callback: jump the sliders to the fixed suggested rates."""
    _store_rates(suggest_optimal_rates())
    logger.debug("Applied suggested rates")

# ------------------------------------------------------------
# Sidebar: simulation knobs
# ------------------------------------------------------------
st.sidebar.header("Simulation")
fix_seed = st.sidebar.checkbox("Fix random seed", value=False,
                               help="Off: every rerun draws fresh noise. On: the projection is reproducible.")
SEED = int(st.sidebar.number_input("Random seed", value=2023, step=1)) if fix_seed else None

# ------------------------------------------------------------
# Header + sliders
# ------------------------------------------------------------
st.title("US Tax Policy and Economic Impact Simulator")

c1, c2, c3 = st.columns(3)
with c1:
    st.subheader(f"Federal Income Tax Rate: {st.session_state.federal_pct:.1f}%")
    lo, hi, step = FEDERAL_SLIDER
    st.slider("Federal income tax (%)", lo, hi, step=step, key="federal_pct", label_visibility="collapsed")
with c2:
    st.subheader(f"Corporate Tax Rate: {st.session_state.corporate_pct:.1f}%")
    lo, hi, step = CORPORATE_SLIDER
    st.slider("Corporate tax (%)", lo, hi, step=step, key="corporate_pct", label_visibility="collapsed")
with c3:
    st.subheader(f"Capital Gains Tax Rate: {st.session_state.capital_gains_pct:.1f}%")
    lo, hi, step = CAPITAL_GAINS_SLIDER
    st.slider("Capital gains tax (%)", lo, hi, step=step, key="capital_gains_pct", label_visibility="collapsed")

st.button("Find Optimal Tax Rates", type="primary", on_click=apply_suggested_rates)

rates = RateInputs.from_percent(
    st.session_state.federal_pct, st.session_state.corporate_pct, st.session_state.capital_gains_pct,
)

# ------------------------------------------------------------
# Projection (regenerated on every rerun)
# ------------------------------------------------------------
try:
    records = generate_projection(*rates.as_tuple(), seed=SEED)
except Exception as e:
    st.error("Projection failed. Details below.")
    st.exception(e)
    st.stop()

df = projection_frame(records)

# ------------------------------------------------------------
# Summary cards
# ------------------------------------------------------------
cols = st.columns(4)
for col, card in zip(cols, summary_cards(records)):
    with col:
        st.metric(
            card.title,
            format_card_value(card.value, card.unit),
            delta=f"{card.trend:.2f}%",
        )

# ------------------------------------------------------------
# Charts
# ------------------------------------------------------------
st.markdown("### 10-Year Economic Projections")
fig = plot_projection(df)
st.pyplot(fig)
plt.close(fig)

st.markdown("### Tax Rate Comparison")
fig = plot_rate_comparison(rates)
st.pyplot(fig)
plt.close(fig)

with st.expander("🔎 Projection table"):
    table = pd.DataFrame({
        "Year": df["year"],
        "Revenue (trillion)": df["revenue"].apply(fmt_currency),
        "Growth": df["growth"].apply(lambda x: fmt_pct_val(x, 1)),
        "Compliance": df["compliance"].apply(lambda x: fmt_pct_val(x, 1)),
        "Mobility index": df["mobility"].apply(lambda x: fmt_num(x, 2)),
    })
    st.dataframe(table, use_container_width=True, hide_index=True)

st.markdown("""
This interactive dashboard simulates the complex relationships between various US tax rates and key economic
indicators. Adjust the tax rate sliders to see how different policies might affect government revenue, economic
growth, tax compliance, and economic mobility over a 10-year period. The **Find Optimal Tax Rates** button suggests
rates that may maximize overall economic benefit based on our simplified model.
""")
st.caption(
    "Note: This simulation uses simplified models and hypothetical data. Real-world economic systems are far more "
    "complex and influenced by numerous factors beyond tax rates. For accurate and up-to-date information on US tax "
    "policies and economic data, please refer to official sources such as the IRS (www.irs.gov), the US Treasury "
    "(www.treasury.gov), and the Bureau of Economic Analysis (www.bea.gov)."
)
