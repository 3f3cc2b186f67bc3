"""
Main Streamlit application — single-page layout.
"""

import logging
import os

import streamlit as st
from dotenv import load_dotenv

from ui import home

load_dotenv()
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())


# Page configuration
st.set_page_config(
    page_title="Excel Auto Filler",
    page_icon="📊",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Custom CSS
st.markdown("""
<style>
    /* Compact sidebar */
    [data-testid="stSidebar"] {
        min-width: 240px;
        max-width: 300px;
    }

    /* Larger touch targets */
    .stButton > button {
        min-height: 40px;
        font-size: 15px;
    }

    /* Tighter spacing */
    .block-container {
        padding-top: 1.5rem;
        padding-bottom: 1rem;
    }
</style>
""", unsafe_allow_html=True)


def render_sidebar_stats(fields):
    """Show field counts in the sidebar."""
    enabled = [f for f in fields if f.is_runnable]
    custom = [f for f in enabled if f.search_query]

    st.markdown("---")
    st.markdown("#### 📋 Fields")

    col_a, col_b = st.columns(2)
    with col_a:
        st.metric("Total", len(fields))
    with col_b:
        st.metric("Enabled", len(enabled))

    st.caption(f"🔍 Custom queries: {len(custom)}")


def main():
    """Main application entrypoint."""
    home.init_state()

    with st.sidebar:
        st.markdown("### 📊 Excel Auto Filler")

        uploaded_file = st.file_uploader(
            "📤 Upload Excel Template",
            type=["xlsx", "xls"],
            key="template_uploader",
        )
        if uploaded_file is not None:
            home.handle_upload(uploaded_file)
        else:
            home.clear_upload()

        render_sidebar_stats(st.session_state.fields)

    home.render()


if __name__ == "__main__":
    main()
