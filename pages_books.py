# pages_books.py

import json

import pandas as pd
import streamlit as st

from bilingual.book_details import backfill_translations, reorder_books
from bilingual.errors import BibleDataError
from bilingual.translation_audit import audit_translations
from utils import settings
from utils.json_store import dumps, load_json

# ------------------------------------------------------------
# Helpers
# ------------------------------------------------------------

def _init_state():
    if "books_json" not in st.session_state:
        st.session_state.books_json = None

def _load_configured():
    try:
        data = load_json(settings.BOOK_DETAILS_PATH, expect=list)
    except BibleDataError as e:
        st.info(f"No book details loaded ({e}). Upload a file below.")
        return
    st.session_state.books_json = json.dumps(data, ensure_ascii=False)

@st.cache_data(show_spinner=False)
def _audit_frames(books_json: str):
    """(counts, issues) DataFrames for the audit, keyed on the JSON text."""
    report = audit_translations(json.loads(books_json))
    counts = pd.DataFrame(sorted(report.counts().items()), columns=["issue", "count"])
    issues = pd.DataFrame(report.to_records(), columns=["book", "kind", "index", "title"])
    return report.books_scanned, counts, issues

# ------------------------------------------------------------
# Streamlit UI
# ------------------------------------------------------------

def _upload():
    uploaded = st.file_uploader("⬆️ book-details.json", type=["json"], key="books_uploader")
    if uploaded is None:
        return
    try:
        data = json.loads(uploaded.read().decode("utf-8"))
    except ValueError as e:
        st.error(f"Import failed: {e}")
        return
    if not isinstance(data, list):
        st.error("Import failed: expected a JSON array of books")
        return
    st.session_state.books_json = json.dumps(data, ensure_ascii=False)
    st.success(f"Loaded {len(data)} books")

def _audit_panel(books_json: str):
    st.subheader("🔎 Translation audit")
    scanned, counts, issues = _audit_frames(books_json)
    st.caption(f"Total books scanned: {scanned}")
    if issues.empty:
        st.success("Every book has Telugu text.")
        return
    st.dataframe(counts, hide_index=True)
    kinds = ["(all)"] + counts["issue"].tolist()
    pick = st.selectbox("Show", kinds)
    shown = issues if pick == "(all)" else issues[issues["kind"] == pick]
    st.dataframe(shown, hide_index=True)

def _tools_panel(books_json: str):
    st.subheader("🛠️ Prepare")
    books = json.loads(books_json)
    localize = st.checkbox("Use Telugu book names in placeholder references", value=False)
    reorder = st.checkbox("Sort into canonical order", value=True)

    result = backfill_translations(books, localize_references=localize)
    out = reorder_books(result.books) if reorder else result.books
    st.caption(
        f"{result.event_fields_filled} event fields, {result.persons_filled} person names "
        f"and {result.book_names_filled} book names would be filled."
    )
    st.download_button(
        label="⬇️ Download prepared JSON",
        data=dumps(out).encode("utf-8"),
        file_name="book-details.json",
        mime="application/json",
    )

# ------------------------------------------------------------
# Page entry
# ------------------------------------------------------------

def main():
    _init_state()
    st.title("📚 Book details")

    if st.session_state.books_json is None:
        _load_configured()
    with st.expander("Load another file", expanded=st.session_state.books_json is None):
        _upload()

    if not st.session_state.books_json:
        return
    _audit_panel(st.session_state.books_json)
    st.markdown("---")
    _tools_panel(st.session_state.books_json)

def render():
    """Render entry used by app.py."""
    main()

if __name__ == "__main__":
    main()
