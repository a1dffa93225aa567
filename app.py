"""SEIRSim — Main Streamlit application.

Pick a scenario, run the SEIR simulator, and see when the outbreak plateaus.
"""

import streamlit as st
import plotly.graph_objects as go

from seirsim.core.formatting import describe_scenario
from seirsim.core.model_spec import ModelParameters, SimulationError
from seirsim.core.palette import palette_for
from seirsim.core.presets import PRESET_LABELS, PRESETS, classify_beta
from seirsim.core.seir_model import run

st.set_page_config(
    page_title="SEIR Simulator",
    page_icon="🦠",
    layout="centered",
)

# ---------------------------------------------------------------------------
# Styling
# ---------------------------------------------------------------------------
st.markdown("""
<style>
    .main .block-container { max-width: 800px; padding-top: 2rem; }
    .scenario { font-size: 1.1rem; font-style: italic; text-align: center; }
    .stMetric { border-radius: 8px; padding: 12px; }
</style>
""", unsafe_allow_html=True)

# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------
st.title("SEIR Simulator")
st.divider()

# ---------------------------------------------------------------------------
# Session state init
# ---------------------------------------------------------------------------
for key, default in (("S", 990.0), ("E", 5.0), ("beta", 0.3), ("result", None)):
    if key not in st.session_state:
        st.session_state[key] = default


def _apply_preset() -> None:
    st.session_state.beta = PRESETS[st.session_state.preset]


# ---------------------------------------------------------------------------
# Scenario inputs
# ---------------------------------------------------------------------------
preset_names = list(PRESETS)
st.selectbox(
    "Virus",
    preset_names,
    index=preset_names.index(classify_beta(st.session_state.beta)),
    format_func=lambda name: PRESET_LABELS[name],
    key="preset",
    on_change=_apply_preset,
)

col1, col2, col3 = st.columns(3)
col1.number_input("Susceptible individuals", min_value=0.0, step=1.0, key="S")
col2.number_input("Exposed individuals", min_value=0.0, step=1.0, key="E")
col3.number_input(
    "Transmissibility (β)",
    min_value=0.0,
    max_value=1.0,
    step=0.01,
    key="beta",
    help="Transmission rate (β): how quickly the disease spreads (typically ranges from 0.1 to 1.0)",
)

if st.button("Simulate", type="primary", use_container_width=True):
    try:
        params = ModelParameters(S0=st.session_state.S, E0=st.session_state.E, beta=st.session_state.beta)
        st.session_state.result = run(params)
    except SimulationError as e:
        st.session_state.result = None
        st.error(f"Simulation failed: {e}")

# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------
result = st.session_state.result

if result is not None:
    st.markdown(
        f'<p class="scenario">{describe_scenario(result.params, result.plateau)}</p>',
        unsafe_allow_html=True,
    )
    st.caption(
        "Plateauing refers to the point in a disease outbreak where the number of "
        "infectious individuals stabilizes — meaning the rate of new infections "
        "balances with the rate of recoveries."
    )

    colors = palette_for(st.context.theme.type)
    arrays = result.trajectory.as_arrays()
    t = arrays["t"]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=t, y=arrays["I"],
        mode="lines",
        name="Infectious I(t)",
        line=dict(width=2, color=colors["infectious"], shape="spline"),
        fill="tozeroy",
        fillcolor=colors["infectious_fill"],
    ))
    fig.add_trace(go.Scatter(
        x=t, y=arrays["R"],
        mode="lines",
        name="Recovered R(t)",
        line=dict(width=2, color=colors["recovered"], shape="spline"),
        fill="tozeroy",
        fillcolor=colors["recovered_fill"],
    ))
    if result.plateau.reached:
        fig.add_trace(go.Scatter(
            x=[result.plateau.day], y=[result.plateau.value],
            mode="markers",
            name="Plateau",
            marker=dict(size=10, color=colors["plateau"]),
        ))
    fig.update_layout(
        xaxis_title="Time (days)",
        yaxis_title="Population count",
        font=dict(family="Georgia"),
        hovermode="x unified",
        legend=dict(orientation="h", y=1.12),
        margin=dict(t=40, b=40),
        height=450,
    )
    st.plotly_chart(fig, use_container_width=True)

    # Key metrics
    summary = result.summary
    m1, m2, m3 = st.columns(3)
    m1.metric("Peak Day", f"{summary.peak_day}")
    m2.metric("Peak Cases", f"{summary.peak_infectious:,.0f}")
    m3.metric("Attack Rate", f"{summary.attack_rate * 100:.1f}%")
