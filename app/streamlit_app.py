"""
AI-Driven Fertility Policy Simulator — Dashboard
================================================

Adjust four AI policy levers and see the projected impact on the total
fertility rate (TFR), cost, ROI and population for South Korea and Japan:
  1. Single country:  pick a country, tune sliders, run
  2. Preset scenarios: Low Investment / Balanced / Aggressive
  3. Compare mode:    same policy mix applied to both countries side by side

Run: streamlit run app/streamlit_app.py   (or the `fertility-sim` console script)
"""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import DEFAULT_CONFIG
from core.logging_config import configure_logging
from core.schema import INTENSITY_STEP, POLICY_IDS

from profiles.countries import COUNTRY_PROFILES, get_country_profile
from profiles.interventions import INTERVENTIONS, get_intervention
from profiles.validators import validate_interventions, validate_profiles

from scenarios.presets import PRESETS

from session.state import SimulatorSession

from reporting.metrics import build_metric_cards, economic_summary, format_millions
from reporting.frames import (
    barrier_frame,
    country_overview_frame,
    impact_breakdown_frame,
    policy_cost_lines,
    trajectory_frame,
)
from reporting.summary import comparison_frame, summary_flags

configure_logging(logging.INFO)
logger = logging.getLogger("app.streamlit_app")

COLORS = ["#3b82f6", "#10b981", "#ef4444", "#f59e0b"]
SESSION_KEY = "simulator_session"


# ---------------------------------------------------------------------------
# Session container
# ---------------------------------------------------------------------------
def _get_session() -> SimulatorSession:
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = SimulatorSession()
    return st.session_state[SESSION_KEY]


def _slider_key(policy_id: str) -> str:
    return f"slider_{policy_id}"


def _sync_sliders_from_session(session: SimulatorSession) -> None:
    """Push the session vector into the slider widgets (after preset / reset)."""
    for pid in POLICY_IDS:
        st.session_state[_slider_key(pid)] = session.intensities[pid]


def _on_preset(name: str) -> None:
    session = _get_session()
    session.apply_preset(name)
    _sync_sliders_from_session(session)


def _on_reset() -> None:
    session = _get_session()
    session.reset()
    _sync_sliders_from_session(session)


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _plot_trajectory(df: pd.DataFrame, *, title: str, height: int = 300) -> None:
    if len(df) == 0:
        st.info("No data to plot.")
        return
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=df["year"], y=df["baseline"], name="Current Baseline",
        line=dict(color="#ef4444", dash="dash"),
    ))
    fig.add_trace(go.Scatter(
        x=df["year"], y=df["projected"], name="With AI Interventions",
        line=dict(color="#3b82f6", width=3),
    ))
    fig.add_trace(go.Scatter(
        x=df["year"], y=df["target"], name=f"Replacement Level ({DEFAULT_CONFIG.target_rate})",
        line=dict(color="#10b981", dash="dashdot"),
    ))
    fig.update_layout(
        title=title, height=height, yaxis=dict(range=[0, DEFAULT_CONFIG.rate_ceiling], title="TFR"),
        xaxis=dict(title="Year"), margin=dict(l=10, r=10, t=40, b=10),
    )
    st.plotly_chart(fig, use_container_width=True)


def _plot_barriers(df: pd.DataFrame, *, height: int = 250) -> None:
    long = df.melt(id_vars=["name"], value_vars=["before", "after"], var_name="series", value_name="score")
    long["series"] = long["series"].map({"before": "Before AI", "after": "After AI"})
    fig = px.bar(
        long, x="name", y="score", color="series", barmode="group",
        color_discrete_map={"Before AI": "#ef4444", "After AI": "#10b981"},
        labels={"name": "", "score": "Barrier score", "series": ""},
        title="Barrier Reduction Impact", height=height,
    )
    st.plotly_chart(fig, use_container_width=True)


def _plot_impact_pie(df: pd.DataFrame, *, height: int = 250) -> None:
    if len(df) == 0:
        return
    fig = px.pie(
        df, values="value", names="name", color_discrete_sequence=COLORS,
        title="TFR Impact Breakdown by Policy", height=height,
    )
    st.plotly_chart(fig, use_container_width=True)


# ---------------------------------------------------------------------------
# Shared results display — single country and compare mode
# ---------------------------------------------------------------------------
def _display_results(country_id: str, result, *, compact: bool = False) -> None:
    profile = get_country_profile(country_id)
    chart_height = 250 if compact else 300

    # --- 1. Metric cards ---
    cards = build_metric_cards(result).as_list()
    cols = st.columns(2 if compact else 4)
    for i, card in enumerate(cards):
        cols[i % len(cols)].metric(card.label, card.value)
        cols[i % len(cols)].caption(card.caption)

    # --- 2. Flags ---
    for flag in summary_flags(result):
        st.caption(flag)

    # --- 3. Trajectory ---
    _plot_trajectory(trajectory_frame(result), title="20-Year TFR Projection", height=chart_height)

    # --- 4. Barriers + impact pie ---
    _plot_barriers(barrier_frame(profile, result), height=chart_height - 50)
    _plot_impact_pie(impact_breakdown_frame(result), height=chart_height - 50)

    # --- 5. Economic summary ---
    summary = economic_summary(result)
    benefit = summary["economic_benefit"].replace("$", "\\$")
    st.markdown("**Economic Impact Summary**")
    left, right = st.columns(2)
    with left:
        st.markdown(
            f"- Estimated population increase: **{summary['population_increase']}** people over 20 years\n"
            f"- Economic benefit: **{benefit}** over lifetime\n"
            f"- ROI: **{summary['roi']}**"
        )
    with right:
        lines = policy_cost_lines(result)
        if lines:
            st.markdown("\n".join(f"- {name}: \\${cost:,.1f}M" for name, cost in lines))
        else:
            st.markdown("- No policy active")


# ═══════════════════════════════════════════════════════════════════════════
# STARTUP CHECKS
# ═══════════════════════════════════════════════════════════════════════════
st.set_page_config(page_title="AI Fertility Policy Simulator", layout="wide")

_table_check = validate_profiles(COUNTRY_PROFILES).merge(validate_interventions(INTERVENTIONS))
if not _table_check.is_valid:
    logger.error("Static tables failed validation:\n%s", _table_check.summary())
    st.error(_table_check.summary())
    st.stop()

session = _get_session()

st.title("AI-Driven Fertility Policy Simulator")
st.caption(
    "Explore how AI-powered interventions can address demographic challenges in East Asia. "
    "Adjust policy parameters and see projected impacts on Total Fertility Rate (TFR)."
)

# ═══════════════════════════════════════════════════════════════════════════
# SIDEBAR — Policy Controls
# ═══════════════════════════════════════════════════════════════════════════
with st.sidebar:
    st.header("Policy Controls")

    country_ids = list(COUNTRY_PROFILES)
    compare = st.checkbox("Compare both countries", value=session.compare_mode)
    session.set_compare_mode(compare)

    selected = st.selectbox(
        "Select Country",
        options=country_ids,
        index=country_ids.index(session.selected_country),
        format_func=lambda cid: f"{COUNTRY_PROFILES[cid].name} (TFR: {COUNTRY_PROFILES[cid].baseline_rate:.2f})",
        disabled=compare,
    )
    session.select_country(selected)
    if compare:
        st.caption("Policies applied to both countries for comparison")

    for pid in POLICY_IDS:
        iv = get_intervention(pid)
        key = _slider_key(pid)
        if key not in st.session_state:
            st.session_state[key] = session.intensities[pid]
        value = st.slider(iv.name, min_value=0, max_value=100, step=INTENSITY_STEP, key=key)
        session.set_intensity(pid, value)
        st.caption(iv.description)
        st.caption("Cost: " + format_millions(iv.cost_per_point * value).replace("$", "\\$"))

    st.markdown("**Preset Scenarios**")
    preset_cols = st.columns(len(PRESETS))
    for col, (name, preset) in zip(preset_cols, PRESETS.items()):
        col.button(preset.label, key=f"preset_{name}", on_click=_on_preset, args=(name,), help=preset.description)

    run_clicked = st.button("Run Simulation", type="primary", use_container_width=True)
    st.button("Reset", on_click=_on_reset, use_container_width=True)

# ═══════════════════════════════════════════════════════════════════════════
# RUN — cosmetic delay, superseded runs are dropped by the session
# ═══════════════════════════════════════════════════════════════════════════
if run_clicked:
    ticket = session.begin_run()
    with st.spinner("Simulating..."):
        if session.config.simulate_delay_seconds > 0:
            time.sleep(session.config.simulate_delay_seconds)
        session.finish_run(ticket)

# ═══════════════════════════════════════════════════════════════════════════
# RESULTS
# ═══════════════════════════════════════════════════════════════════════════
results = session.results
if not results:
    st.info(
        "Adjust the policy parameters and click **Run Simulation** to see the projected "
        "impact on fertility rates and economic outcomes."
    )
elif len(results) == 1:
    (only_id, only_result), = results.items()
    _display_results(only_id, only_result)
else:
    st.markdown("**Country Comparison**")
    st.dataframe(comparison_frame(results).round(3), use_container_width=True, hide_index=True)
    cols = st.columns(len(results))
    for col, (cid, res) in zip(cols, results.items()):
        with col:
            st.subheader(f"{COUNTRY_PROFILES[cid].name} Results")
            _display_results(cid, res, compact=True)

# ═══════════════════════════════════════════════════════════════════════════
# COUNTRY OVERVIEW
# ═══════════════════════════════════════════════════════════════════════════
with st.expander("Country Overview", expanded=False):
    shown = country_ids if session.compare_mode else [session.selected_country]
    overview_cols = st.columns(len(shown))
    for col, cid in zip(overview_cols, shown):
        with col:
            st.markdown(f"**{COUNTRY_PROFILES[cid].name}**")
            st.dataframe(country_overview_frame(COUNTRY_PROFILES[cid]), use_container_width=True, hide_index=True)

st.caption(
    "Research prototype for demonstration purposes. Actual policy impacts may vary "
    "based on numerous factors not captured in this simplified model."
)
