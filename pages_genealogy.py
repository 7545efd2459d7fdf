# pages_genealogy.py

import json
from typing import Iterable, List, Optional

import graphviz
import pandas as pd
import streamlit as st

from bilingual.errors import BibleDataError
from bilingual.identifiers import annotate
from bilingual.person_node import PersonNode, count_nodes, walk
from bilingual.search import SearchResult, display_field, display_name, search
from utils import settings
from utils.json_store import dumps, load_json

RESULT_COLUMNS = ["name", "nameEn", "nameTe", "spouse", "birth", "path", "detail", "id"]

# ------------------------------------------------------------
# Helpers: Session, Loading
# ------------------------------------------------------------

def _init_state():
    if "genealogy_json" not in st.session_state:
        st.session_state.genealogy_json = None
    if "genealogy_lang" not in st.session_state:
        st.session_state.genealogy_lang = settings.DISPLAY_LANGUAGE
    if "genealogy_source" not in st.session_state:
        st.session_state.genealogy_source = ""

def _load_configured():
    try:
        data = load_json(settings.GENEALOGY_BILINGUAL_PATH, expect=dict)
    except BibleDataError as e:
        st.info(f"No bilingual tree loaded ({e}). Upload one from the sidebar.")
        return
    st.session_state.genealogy_json = json.dumps(data, ensure_ascii=False)
    st.session_state.genealogy_source = settings.GENEALOGY_BILINGUAL_PATH

@st.cache_data(show_spinner=False)
def _parse_tree(tree_json: str) -> PersonNode:
    """Parse once per distinct JSON text; ids are (re)assigned unless every person has one."""
    tree = PersonNode.from_dict(json.loads(tree_json))
    return tree if all(n.id for n, _ in walk(tree)) else annotate(tree)

# ------------------------------------------------------------
# Rendering (Graphviz)
# ------------------------------------------------------------

def render_graph(tree: PersonNode, language: str = "en", highlight: Iterable[str] = (),
                 max_depth: Optional[int] = 3) -> graphviz.Digraph:
    """Top-down tree of ``tree`` down to ``max_depth``; ``highlight`` holds node ids to colour."""
    marked = set(highlight)
    g = graphviz.Digraph("G", engine="dot")
    g.attr(rankdir="TB", nodesep="0.3", ranksep="0.5")
    g.attr("node", shape="box", style="rounded,filled", fillcolor="white", fontsize="11")

    for node, ancestors in walk(tree):
        depth = len(ancestors)
        if max_depth is not None and depth > max_depth:
            continue
        label = display_name(node, language) or "?"
        spouse = display_field(node, "spouse", language)
        if isinstance(spouse, list):
            spouse = ", ".join(str(s) for s in spouse)
        if spouse:
            label += f"\n⚭ {spouse}"
        fill = "#FFF3B0" if node.id in marked else "white"
        g.node(node.id, label=label, fillcolor=fill)
        if ancestors:
            parent = ancestors[-1]
            hidden = any(c is node for c in (parent.hidden_children or []))
            # collapsed branches are dashed, as in the chart
            g.edge(parent.id, node.id, style="dashed" if hidden else "solid")
    return g

def _results_frame(results: List[SearchResult]) -> pd.DataFrame:
    if not results:
        return pd.DataFrame(columns=RESULT_COLUMNS)
    rows = []
    for r in results:
        d = r.to_dict()
        d["path"] = " › ".join(d["path"])
        rows.append(d)
    return pd.DataFrame(rows)[RESULT_COLUMNS]

# ------------------------------------------------------------
# Streamlit UI
# ------------------------------------------------------------

def _sidebar_controls():
    st.sidebar.header("📦 Data")

    uploaded = st.sidebar.file_uploader("⬆️ Bilingual genealogy JSON", type=["json"], key="genealogy_uploader")
    if uploaded is not None:
        try:
            text = uploaded.read().decode("utf-8")
            PersonNode.from_dict(json.loads(text))
            st.session_state.genealogy_json = text
            st.session_state.genealogy_source = uploaded.name
            st.sidebar.success("Tree loaded")
        except (ValueError, BibleDataError) as e:
            st.sidebar.error(f"Import failed: {e}")

    st.session_state.genealogy_lang = st.sidebar.radio(
        "Display language", ["en", "te"],
        index=0 if st.session_state.genealogy_lang != "te" else 1,
        format_func=lambda x: "English" if x == "en" else "తెలుగు",
    )

    if st.session_state.genealogy_json:
        tree = _parse_tree(st.session_state.genealogy_json)
        st.sidebar.download_button(
            label="⬇️ Export JSON (with ids)",
            data=dumps(tree.to_dict()).encode("utf-8"),
            file_name="genealogy-bilingual.json",
            mime="application/json",
        )

def _search_panel(tree: PersonNode, language: str) -> List[SearchResult]:
    st.subheader("🔍 Search")
    c1, c2 = st.columns([3, 1])
    with c1:
        query = st.text_input("Name (English or Telugu)", key="genealogy_query")
    with c2:
        cap = st.number_input("Max results (0 = all)", min_value=0, value=settings.search_max_results(), step=5)
    results = search(tree, query, language, int(cap))
    if query.strip():
        st.caption(f"{len(results)} match(es)")
        st.dataframe(_results_frame(results), hide_index=True)
    return results

def _viewer(tree: PersonNode, language: str, results: List[SearchResult]):
    st.subheader("🌳 Family tree")
    depth = st.slider("Generations to draw", min_value=1, max_value=12, value=3)
    g = render_graph(tree, language, highlight=[r.id for r in results if r.id], max_depth=depth)
    st.graphviz_chart(g)

# ------------------------------------------------------------
# Page entry
# ------------------------------------------------------------

def main():
    _init_state()
    st.title("🌳 Genealogy")

    if st.session_state.genealogy_json is None:
        _load_configured()
    _sidebar_controls()

    if not st.session_state.genealogy_json:
        return
    tree = _parse_tree(st.session_state.genealogy_json)
    language = st.session_state.genealogy_lang
    st.caption(f"{st.session_state.genealogy_source} · {count_nodes(tree)} people")

    results = _search_panel(tree, language)
    _viewer(tree, language, results)

def render():
    """Render entry used by app.py."""
    main()

if __name__ == "__main__":
    main()
