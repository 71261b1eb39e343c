"""Main Streamlit application for the website status checker."""
import streamlit as st
from dotenv import load_dotenv

from src.checker.session import CheckSession
from src.checker.status_client import StatusCheckClient
from src.utils.config import CheckerConfig, ConfigError, load_config
from src.utils.display import (
    format_checked_datetime,
    format_checked_time,
    format_response_time,
    status_color,
    status_headline,
    status_icon,
)
from src.utils.logger import setup_logger

# Load environment variables from .env file
load_dotenv()

logger = setup_logger()

st.set_page_config(
    page_title="Is It Down?",
    page_icon="🌐",
    layout="centered"
)


def get_config() -> CheckerConfig:
    """Get settings from environment, falling back to Streamlit secrets."""
    secrets = {}
    try:
        secrets = dict(st.secrets)
    except Exception as e:
        # No secrets.toml is fine for local runs
        logger.debug(f"No Streamlit secrets available: {e}")

    return load_config(fallback=secrets)


def initialize_session_state(config: CheckerConfig):
    """Initialize session state variables."""
    if 'checker' not in st.session_state:
        client = StatusCheckClient(str(config.endpoint), timeout=config.timeout)
        st.session_state.checker = CheckSession(client, history_size=config.history_size)


def render_result(session: CheckSession):
    """Render the latest check result card."""
    result = session.result
    if result is None:
        return

    with st.container(border=True):
        color = status_color(result)
        st.markdown(f"### {status_icon(result)} :{color}[{status_headline(result)}]")
        st.caption(result.url)

        col1, col2 = st.columns(2)
        with col1:
            st.markdown(f"⏱️ {format_response_time(result)}")
        with col2:
            st.markdown(f"Checked: {format_checked_time(result.timestamp)}")

        if result.status_code:
            st.caption(f"HTTP status code: {result.status_code}")
        if result.message:
            st.caption(result.message)


def render_history(session: CheckSession):
    """Render the recent checks list."""
    history = session.history
    if not history:
        return

    st.subheader("Recent Checks")

    for entry in history:
        with st.container(border=True):
            col1, col2 = st.columns([4, 1])
            with col1:
                st.markdown(f"{status_icon(entry)} **{entry.url}**")
                st.caption(format_checked_datetime(entry.timestamp))
            with col2:
                st.markdown(f":{status_color(entry)}[**{entry.status}**]")

    if st.button("🔄 Clear History", type="secondary"):
        session.clear_history()
        st.rerun()


def main():
    """Main application function."""
    try:
        config = get_config()
    except ConfigError as e:
        logger.error(str(e))
        st.error(f"❌ {e}")
        return

    initialize_session_state(config)
    session = st.session_state.checker

    st.title("🌐 Is It Down?")
    st.markdown("Check if any website is up or down from our cloud servers")

    # A form submits on Enter as well as on the button
    with st.form("check_form"):
        url = st.text_input(
            "Website URL",
            placeholder="Enter website (e.g., google.com)"
        )
        submitted = st.form_submit_button("Check Status", type="primary")

    if submitted:
        with st.spinner("Checking..."):
            try:
                session.check(url)
            except Exception as e:
                logger.exception(f"Unexpected error checking {url}: {str(e)}")
                st.error(f"❌ Unexpected error: {str(e)}")
                with st.expander("Error Details"):
                    import traceback
                    st.code(traceback.format_exc())

    if session.error:
        st.error(f"⚠️ {session.error}")

    render_result(session)

    st.markdown("---")
    render_history(session)

    st.caption("Checks are performed from AWS cloud servers for accurate global results")


if __name__ == "__main__":
    main()
