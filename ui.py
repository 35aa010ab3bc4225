import streamlit as st
import plotly.graph_objects as go

from messages import AHEAD, ON_TRACK, WARNING_TIERS

CSS = """
<style>
.card {border:1px solid #fef3c7; background:#fffbeb; border-radius:12px; padding:12px 16px;}
.kpi {font-size:1.4rem; font-weight:700;}
.caption {color:#94a3b8; font-size:0.75rem; text-transform:uppercase;}
</style>
"""


def inject_css():
    st.markdown(CSS, unsafe_allow_html=True)


def app_header(title: str, subtitle: str = ""):
    st.markdown(f"## {title}")
    if subtitle:
        st.caption(subtitle)


def format_currency(val) -> str:
    """Axis/legend style: $1.5M, $650K, $420. Missing values show as $0."""
    if val is None or val != val:
        return "$0"
    if val >= 1_000_000:
        return f"${val / 1_000_000:.1f}M"
    if val >= 1_000:
        return f"${val / 1_000:.0f}K"
    return f"${val:.0f}"


def format_currency_full(val) -> str:
    if val is None or val != val:
        return "$0"
    return f"${val:,.0f}" if val >= 0 else f"-${-val:,.0f}"


def advisor_mood(projected: float, target: float) -> str:
    ratio = projected / target if target > 0 else 0
    if ratio > 1.15:
        return "😎"
    if ratio >= 0.95:
        return "🙂"
    if ratio >= 0.75:
        return "🤔"
    return "😨"


def trajectory_figure(result, retire_age: int) -> go.Figure:
    df = result.to_frame()
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=df["age"], y=df["projected_balance"], mode="lines",
                             name="Projected", fill="tozeroy", line=dict(color="#f97316")))
    fig.add_trace(go.Scatter(x=df["age"], y=df["recommended_balance"], mode="lines",
                             name="Recommended", line=dict(dash="dash", color="#64748b")))
    fig.add_vline(x=retire_age, line_dash="dot", line_color="green")
    fig.update_layout(
        xaxis_title="Age", yaxis_title="Balance",
        hovermode="x unified", margin=dict(l=30, r=20, t=30, b=30)
    )
    return fig


def advisor_card(message, mood: str):
    st.markdown(f"### {mood} {message.title}")
    st.write(message.body)
    if message.severity in WARNING_TIERS:
        for i, action in enumerate(message.actions, start=1):
            st.markdown(f"**{i}. {action.text}**  \n{action.impact}")
    elif message.severity == ON_TRACK:
        st.info(message.bonus)
    elif message.severity == AHEAD:
        st.markdown("**Your options:**")
        for option in message.options:
            st.markdown(f"- {option}")
