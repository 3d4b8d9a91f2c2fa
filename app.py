# ClearMind: entry point, config, CSS, auth gate, tab routing.
import logging
from pathlib import Path

import streamlit as st

import auth
import config
import db

APP_NAME = "ClearMind AI"
TAGLINE = "Your safe space for mental health support"
FOOTER_TEXT = "This app is a supportive tool and not a substitute for professional mental health care."
NAV_TABS = ["Mood", "Journal", "Insights", "Mindfulness", "Help", "Settings"]
NAV_ICONS = {"Mood": "💜", "Journal": "📖", "Insights": "📊", "Mindfulness": "🧠", "Help": "📞", "Settings": "⚙️"}
# darkMode preference; applied over the base theme
DARK_CSS = """
.stApp { background: #111827; color: #F3F4F6; }
.stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp label { color: #F3F4F6; }
.st-key-auth_card { background: rgba(255, 255, 255, 0.04); }
"""

config.setup_logging()
logger = logging.getLogger("ClearMind.App")

st.set_page_config(
    page_title=APP_NAME,
    page_icon="💜",
    layout="centered",
    initial_sidebar_state="collapsed",
)
_css_path = Path(__file__).resolve().parent / "styles.css"
if _css_path.exists():
    st.markdown(f"<style>\n{_css_path.read_text()}\n</style>", unsafe_allow_html=True)

if "page" not in st.session_state:
    st.session_state.page = "Mood"


def _render_header():
    top_col1, top_col2 = st.columns([3, 1])
    with top_col1:
        st.markdown(f"# {APP_NAME}")
    with top_col2:
        if st.button("Sign out", key="sign_out_btn"):
            auth.end_session()
            st.rerun()
    with st.container(key="nav_tabs"):
        tab_cols = st.columns(len(NAV_TABS))
        for i, tab in enumerate(NAV_TABS):
            with tab_cols[i]:
                is_active = st.session_state.page == tab
                label = f"{NAV_ICONS[tab]} {tab}"
                if st.button(label, key=f"nav_{tab}", type="primary" if is_active else "secondary"):
                    st.session_state.page = tab
                    st.rerun()
    st.markdown('<hr class="nav-tabs-separator" />', unsafe_allow_html=True)


def main():
    if not auth.is_signed_in():
        st.markdown(f"# {APP_NAME}")
        st.markdown(f"**{TAGLINE}**")
        try:
            auth.get_client()
        except config.ConfigError as e:
            st.error(str(e))
            return
        with st.container(key="auth_card"):
            auth.render()
        st.caption(FOOTER_TEXT)
        return

    if "profile" not in st.session_state:
        try:
            st.session_state.profile = auth.current_store().get_profile()
        except Exception as e:
            logger.warning(f"Could not load profile: {e}")
            st.session_state.profile = None

    if db.preferences_of(st.session_state.profile).get("darkMode"):
        st.markdown(f"<style>\n{DARK_CSS}\n</style>", unsafe_allow_html=True)
    _render_header()
    page = st.session_state.page
    if page == "Mood":
        from pages import mood
        mood.render()
    elif page == "Journal":
        from pages import journal
        journal.render()
    elif page == "Insights":
        from pages import insights
        insights.render()
    elif page == "Mindfulness":
        from pages import mindfulness
        mindfulness.render()
    elif page == "Help":
        from pages import resources
        resources.render()
    else:
        from pages import settings
        settings.render()
    st.caption(FOOTER_TEXT)


if __name__ == "__main__":
    main()
