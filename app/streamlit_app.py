"""
Cashflow Projector: Rent Escalation Dashboard
==============================================

Interactive front end over the rent-escalation sample:
  1. Inputs:   floor area, price per m², monthly index, horizon, start date
  2. Results:  per-period table for the chosen projection (current / sum / average)
  3. Checks:   post-run consistency validation

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
import streamlit as st

try:
    import altair as alt
    _HAS_ALTAIR = True
except ImportError:
    alt = None
    _HAS_ALTAIR = False

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.errors import CashflowError
from core.schema import PROJECTIONS, TOTAL
from reporting.frame import results_to_frame
from reporting.validators import validate_results
from samples.rent_escalation import build_rent_escalation_engine


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _fmt_money(val):
    """Format amount with commas."""
    return f"{val:,.0f}"


def _plot_multi_line(df, *, ys, title, y_title, height=320):
    if not isinstance(df, pd.DataFrame) or len(df) == 0 or any(y not in df.columns for y in ys):
        st.info("No data to plot.")
        return
    if not _HAS_ALTAIR:
        st.markdown(f"**{title}**")
        st.line_chart(df[ys])
        return
    d = df[ys].reset_index()
    long = d.melt(id_vars=["period"], value_vars=ys, var_name="series", value_name="value")
    chart = (
        alt.Chart(long).mark_line()
        .encode(
            x=alt.X("period:Q", title="Period"),
            y=alt.Y("value:Q", title=y_title, axis=alt.Axis(format=",.0f")),
            color=alt.Color("series:N", title="Series"),
        )
        .properties(title=title, height=height)
    )
    st.altair_chart(chart, use_container_width=True)


@st.cache_data(show_spinner="Running projection...")
def _run(periods, square_meter_value, total_meters, monthly_index, start_date):
    engine = build_rent_escalation_engine(
        periods=periods,
        square_meter_value=square_meter_value,
        total_meters=total_meters,
        monthly_index=monthly_index,
        start_date=start_date,
    )
    return engine.run()


# ═══════════════════════════════════════════════════════════════════════════
# PAGE CONFIG
# ═══════════════════════════════════════════════════════════════════════════
st.set_page_config(page_title="Cashflow Projector", layout="wide")
st.title("Cashflow Projector")
st.caption("Rent escalation schedule: equal monthly take-up, linearly indexed price")

# ═══════════════════════════════════════════════════════════════════════════
# SIDEBAR: Inputs
# ═══════════════════════════════════════════════════════════════════════════
with st.sidebar:
    st.header("Inputs")
    periods = st.number_input("Periods (months)", min_value=1, max_value=600, value=18, step=1)
    total_meters = st.number_input("Total area (m²)", min_value=0.0, value=6000.0, step=100.0)
    square_meter_value = st.number_input("Value per m²", min_value=0.0, value=1600000.0, step=10000.0)
    monthly_index = st.number_input("Monthly index", value=0.005, step=0.001, format="%.4f")
    start_date = st.date_input("Start date", value=pd.Timestamp("2018-03-01"))
    projection = st.radio("Projection", options=list(PROJECTIONS), index=0, horizontal=True)
    show_hidden = st.checkbox("Show hidden variables", value=False)

# ═══════════════════════════════════════════════════════════════════════════
# RUN
# ═══════════════════════════════════════════════════════════════════════════
try:
    store = _run(int(periods), float(square_meter_value), float(total_meters),
                 float(monthly_index), str(start_date))
except CashflowError as exc:
    st.error(f"Projection failed: {exc}")
    st.stop()

frame = results_to_frame(store, projection=projection, include_hidden=show_hidden)

c1, c2, c3 = st.columns(3)
c1.metric("Periods", f"{store.periods_evaluated}")
c2.metric("Total (all periods)", _fmt_money(store.total[-1].sum))
c3.metric("Average per period", _fmt_money(store.total[-1].average))

# ═══════════════════════════════════════════════════════════════════════════
# RESULTS
# ═══════════════════════════════════════════════════════════════════════════
st.subheader("Schedule")
_plot_multi_line(
    frame,
    ys=["monthlyMeterIndexedCost", TOTAL],
    title=f"Indexed cost ({projection})",
    y_title="Amount",
)
st.dataframe(frame, use_container_width=True)

vr = validate_results(store)
if not vr.is_valid:
    st.error("Result validation failed:\n" + vr.summary())
else:
    st.success(vr.summary())
