# -*- coding: utf-8 -*-
from datetime import datetime

import streamlit as st

from utils import settings

# -------------------- App Config --------------------
st.set_page_config(
    page_title="Bible Study · Genealogy & Books",
    page_icon="📖",
    layout="wide",
    initial_sidebar_state="expanded",
)

# -------------------- Router helpers --------------------
def navigate(key: str):
    """Update the query string (call at button top level to trigger a rerun)."""
    st.query_params.update({"page": key})

def get_page_from_query() -> str:
    q = st.query_params
    if not q or "page" not in q:
        return "home"
    v = q.get("page")
    return v if isinstance(v, str) else (v[0] if v else "home")

page = get_page_from_query()

# -------------------- Sidebar --------------------
with st.sidebar:
    st.markdown("## Navigation")

def nav_button(label: str, page_key: str, icon: str):
    if st.sidebar.button(f"{icon} {label}", use_container_width=True, key=f"nav_{page_key}"):
        navigate(page_key)

for label, key, icon in [
    ("Home", "home", "🏠"),
    ("Genealogy", "genealogy", "🌳"),
    ("Book details", "books", "📚"),
]:
    nav_button(label, key, icon)

st.sidebar.markdown("---")

# -------------------- Pages --------------------
def render_home():
    st.markdown("### Bible study data · English / తెలుగు")
    c1, c2 = st.columns(2)
    with c1:
        st.markdown("🌳 **Genealogy**\n\nSearch the bilingual family tree by English or Telugu name.")
        if st.button("Open genealogy", use_container_width=True):
            navigate("genealogy")
    with c2:
        st.markdown("📚 **Book details**\n\nCheck which events still lack a real Telugu translation.")
        if st.button("Open book details", use_container_width=True):
            navigate("books")

    st.divider()
    st.caption(f"Data directory: `{settings.DATA_DIR}` · {datetime.now().strftime('%Y/%m/%d')}")

def _safe_import_and_render(module_name: str):
    try:
        mod = __import__(module_name, fromlist=['render'])
    except ImportError as e:
        st.error(f"Failed to load `{module_name}`: {e}")
        return
    if hasattr(mod, "render"):
        mod.render()
    else:
        st.warning(f"Module `{module_name}` has no `render()`.")

# -------------------- Routes --------------------
def _page_genealogy(): _safe_import_and_render("pages_genealogy")
def _page_books(): _safe_import_and_render("pages_books")

_ROUTES = {
    "home": render_home,
    "genealogy": _page_genealogy,
    "books": _page_books,
}

_ROUTES.get(page, render_home)()
