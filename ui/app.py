import streamlit as st
import requests
import pandas as pd
from typing import Dict, Any, Optional

from ecopulse.config.settings import get_settings

# Configure Streamlit page
st.set_page_config(
    page_title="EcoPulse AI Sustainability Analyst",
    page_icon="🌿",
    layout="wide",
    initial_sidebar_state="collapsed"
)

# Configuration
FASTAPI_BASE_URL = get_settings().api_url
REFRESH_TIMEOUT = 180


def check_api_health() -> bool:
    """Check if the FastAPI backend is running"""
    try:
        response = requests.get(f"{FASTAPI_BASE_URL}/health", timeout=5)
        return response.status_code == 200
    except requests.exceptions.RequestException:
        return False


def get_dashboard_state() -> Optional[Dict[str, Any]]:
    """Fetch the current dashboard snapshot"""
    try:
        response = requests.get(f"{FASTAPI_BASE_URL}/api/dashboard", timeout=10)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.RequestException as e:
        st.error(f"Error reaching API: {str(e)}")
        return None


def refresh_dashboard() -> Optional[Dict[str, Any]]:
    """Run one refresh cycle on the backend"""
    try:
        response = requests.post(f"{FASTAPI_BASE_URL}/api/dashboard/refresh", timeout=REFRESH_TIMEOUT)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.RequestException as e:
        st.error(f"Error refreshing dashboard: {str(e)}")
        return None


def get_policies() -> Dict[str, Any]:
    try:
        response = requests.get(f"{FASTAPI_BASE_URL}/api/policies", timeout=5)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.RequestException:
        return {"policies": [], "grid_reduction_target_percent": 35}


def render_metrics(analysis: Dict[str, Any], target_percent: int):
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        score = analysis.get("sustainabilityScore", 0)
        st.metric("Sustainability Score", f"{score:g} / 100")
        st.progress(min(max(int(score), 0), 100))
    with col2:
        st.metric("Wastage Detected", f"{analysis.get('wastageDetected', 0):g} kW")
        st.caption("Potentially optimizable")
    with col3:
        st.metric("Grid Reduction", f"{analysis.get('gridReductionPercent', 0):g}%")
        st.caption(f"Target: {target_percent}%")
    with col4:
        st.metric("Current Status", "Optimizing")
        st.caption(f"\"{analysis.get('summary', '')}\"")


def render_energy_balance(balance: list):
    st.subheader("Energy Consumption vs Generation")
    st.caption("Hourly balance for the next 24 hours")
    if not balance:
        st.info("No energy data available")
        return
    # integer hour index keeps the x axis in hour order
    df = pd.DataFrame(balance).set_index("hour")
    chart = df[["renewablesKW", "demandKW"]].rename(
        columns={"renewablesKW": "Renewable Gen (kW)", "demandKW": "Demand (kW)"}
    )
    st.area_chart(chart, height=350)


def render_forecast(forecast: list):
    st.subheader("Next-Day Forecast")
    st.caption("Predicted wind and solar generation")
    if not forecast:
        st.info("No forecast available")
        return
    df = pd.DataFrame(forecast)
    chart = df.set_index("hour")[["solarForecast", "windForecast"]].rename(
        columns={"solarForecast": "Solar (Forecast)", "windForecast": "Wind (Forecast)"}
    )
    st.bar_chart(chart, height=250)


def main():
    st.title("🌿 EcoPulse")
    st.markdown("**AI Sustainability Analyst** · Campus Mode: Active")

    if not check_api_health():
        st.error("❌ API is not accessible")
        st.markdown(f"Make sure FastAPI is running at: `{FASTAPI_BASE_URL}`")
        return

    state = get_dashboard_state()
    if state is None:
        return

    if st.button("🔄 Recalculate Data", type="primary") or state.get("status") == "idle":
        with st.spinner("Running AI Sustainability Models..."):
            state = refresh_dashboard() or state

    if state.get("error"):
        st.error(f"**Error Detected:** {state['error']}")
        if st.button("Try Reconnecting"):
            with st.spinner("Running AI Sustainability Models..."):
                refresh_dashboard()
            st.rerun()

    analysis = state.get("analysis")
    if not analysis:
        st.warning("No analysis available yet")
        return

    policies = get_policies()
    render_metrics(analysis, policies.get("grid_reduction_target_percent", 35))

    left, right = st.columns([2, 1])
    with left:
        render_energy_balance(state.get("balance", []))
    with right:
        st.subheader("⚡ Daily AI Recommendations")
        for rec in analysis.get("recommendations", []):
            st.markdown(f"→ {rec}")

        st.subheader("ℹ️ Optimal Load Shifting")
        st.caption("Transfer heavy electricity usage to these windows to minimize wastage:")
        for window in analysis.get("loadShiftWindows", []):
            st.info(f"**{window}** · High Solar")

    left, right = st.columns([1, 2])
    with left:
        st.subheader("🛡️ ESG & Policy Insights")
        for insight in analysis.get("esgInsights", []):
            st.markdown(f"🌿 {insight}")
        if policies.get("policies"):
            with st.expander("Policy references"):
                for policy in policies["policies"]:
                    st.markdown(f"- {policy}")
    with right:
        render_forecast(state.get("forecast", []))

    # Footer
    st.markdown("---")
    st.markdown("Supporting SDG 7: Affordable and Clean Energy.")
    if state.get("updatedAt"):
        st.caption(f"Last updated: {state['updatedAt']}")


if __name__ == "__main__":
    main()
