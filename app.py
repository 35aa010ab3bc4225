# app.py
import streamlit as st

from config import APP_NAME, DEFAULTS, INPUT_RANGES, configure_logging
from rates import PRESETS
from projection import UserProfile, safe_project
from advice import advise
from solvers import monthly_goal
from scenarios import what_ifs
from exporters import export_series, export_advice
from ui import (inject_css, app_header, format_currency, format_currency_full,
                advisor_mood, trajectory_figure, advisor_card)

logger = configure_logging()

# ------------- Page setup -------------
st.set_page_config(page_title=APP_NAME, page_icon="📈", layout="wide")
inject_css()
app_header(APP_NAME, "Real-time simulation based on current inputs.")

if "error" not in st.session_state:
    st.session_state.error = None

if st.session_state.error:
    st.error("Something went wrong")
    st.write(st.session_state.error)
    if st.button("Try Again"):
        st.session_state.error = None
        st.rerun()
    st.stop()

# ------------- Sidebar (inputs) -------------
def slider(label, key, min_value=None, help=None):
    lo, hi, step = INPUT_RANGES[key]
    lo = lo if min_value is None else min_value
    value = min(max(DEFAULTS[key], lo), hi)
    return st.sidebar.slider(label, lo, hi, value, step, help=help, key=f"in_{key}")


st.sidebar.header("Your profile")
current_age = slider("Age", "current_age")
current_savings = slider("Current savings", "current_savings")
retire_age = slider("Retire age", "retire_age", min_value=current_age + 1)
income = slider("Income (per year)", "income")
monthly_savings = slider("Monthly savings", "monthly_savings")
retirement_expenses = slider("Retirement expenses (per year)", "retirement_expenses",
                             help="What you expect to spend each year once retired, in today's money.")

rate_preset = st.sidebar.selectbox(
    "Return assumptions", list(PRESETS.keys()),
    index=list(PRESETS.keys()).index(DEFAULTS["rate_preset"]),
    help="Fixed long-run rates. Baseline = 6% working, 4% retired, 3% inflation."
)

profile = UserProfile.from_inputs(
    current_age=current_age,
    current_savings=current_savings,
    retire_age=retire_age,
    income=income,
    monthly_savings=monthly_savings,
    retirement_expenses=retirement_expenses,
)
st.sidebar.caption(f"Saving {profile.savings_rate:.0f}% of income • "
                   f"retirement budget {profile.expenses_ratio:.0f}% of income")


@st.cache_data(show_spinner=False)
def run_cached(profile_dict, preset):
    return safe_project(UserProfile(**profile_dict), PRESETS[preset])


try:
    result = run_cached(profile.__dict__, rate_preset)
    rates = PRESETS[rate_preset]
    message = advise(profile, result, rates)

    # ------------- Trajectory -------------
    st.markdown("### Your trajectory")
    st.plotly_chart(trajectory_figure(result, profile.retire_age), use_container_width=True)

    c1, c2, c3 = st.columns(3)
    c1.markdown(
        f"<div class='card'><div class='caption'>Projected at {profile.retire_age}</div>"
        f"<div class='kpi'>{format_currency(result.projected_at_retire)}</div></div>",
        unsafe_allow_html=True)
    c2.markdown(
        f"<div class='card'><div class='caption'>Target nest egg</div>"
        f"<div class='kpi'>{format_currency(result.target_nest_egg)}</div></div>",
        unsafe_allow_html=True)
    goal = monthly_goal(profile.current_age, profile.retire_age, profile.current_savings,
                        result.target_nest_egg, rates.growth)
    c3.markdown(
        f"<div class='card'><div class='caption'>Monthly goal</div>"
        f"<div class='kpi'>{format_currency_full(goal)}</div></div>",
        unsafe_allow_html=True)

    # ------------- Advisor -------------
    st.markdown("---")
    advisor_card(message, advisor_mood(result.projected_at_retire, result.target_nest_egg))

    # ------------- Quick what-ifs -------------
    st.markdown("### Quick what-ifs")
    a, b, c = st.columns(3)
    more_saving = a.slider("Add to monthly saving", 0, 2000, 200, 50)
    retire_later = b.slider("Retire later (years)", 0, 10, 2, 1)
    cut_spend = c.slider("Cut retirement spending (%)", 0, 50, 10, 1)
    if st.button("Run what-ifs"):
        rows = what_ifs(profile, more_saving, retire_later, cut_spend, rates)
        st.write({name: f"{format_currency(r['projected_at_retire'])} vs "
                        f"{format_currency(r['target_nest_egg'])} ({r['severity']})"
                  for name, r in rows.items()})

    # ------------- Export -------------
    st.markdown("### Export")
    name_csv, data_csv = export_series(result)
    st.download_button("⬇️ Download trajectory (CSV)", data_csv, file_name=name_csv, mime="text/csv")
    name_json, data_json = export_advice(profile, result, message)
    st.download_button("⬇️ Download advice (JSON)", data_json, file_name=name_json, mime="application/json")
except Exception as err:
    logger.exception("page render failed")
    st.session_state.error = str(err)
    st.rerun()

st.markdown("---")
st.caption("Fixed-rate, deterministic projection. A planning tool, not personal advice.")
