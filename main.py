from __future__ import annotations
import streamlit as st
import re
import pandas as pd
import numpy as np
import matplotlib.pyplot as plt
import networkx as nx
import io
import logging

from text_summary import Language, Summarizer, SummaryError, load_config
from text_summary.summarize import select_by_count, select_by_ratio, assemble, utf8_length, check_ratio
from text_summary.logging_utils import setup_logging, log_event

logger = logging.getLogger("text_summary.app")

AGNOSTIC_LABEL = "Language agnostic"

def extract_rtf_text(rtf_content):
    """Extract plain text from RTF content."""
    text = re.sub(r'\\[a-z]+\d*', '', rtf_content)
    text = re.sub(r'[{}]', '', text)
    text = re.sub(r'\\\*.*?;', '', text)
    text = re.sub(r'\\[^a-z]', '', text)
    text = re.sub(r'[ \t]+', ' ', text)
    return text.strip()

def extract_markdown_text(md_content):
    """Extract plain text from Markdown content."""
    text = re.sub(r'```.*?```', '', md_content, flags=re.DOTALL)
    text = re.sub(r'^#{1,6}\s+', '', text, flags=re.MULTILINE)
    text = re.sub(r'\*{1,2}(.*?)\*{1,2}', r'\1', text)
    text = re.sub(r'\[([^\]]+)\]\([^)]+\)', r'\1', text)
    text = re.sub(r'`([^`]+)`', r'\1', text)
    text = re.sub(r'^-{3,}$', '', text, flags=re.MULTILINE)
    text = re.sub(r'\n\s*\n', '\n\n', text)
    return text.strip()

def load_text_from_file(uploaded_file):
    """Load text content from uploaded file based on file type."""
    file_extension = uploaded_file.name.lower().split('.')[-1]
    content = uploaded_file.read().decode("utf-8")

    if file_extension == 'rtf':
        return extract_rtf_text(content)
    elif file_extension == 'md':
        return extract_markdown_text(content)
    else:  # txt and other formats
        return content

def preview(text: str, width: int = 80) -> str:
    text = text.strip()
    return text[:width] + "..." if len(text) > width else text

def draw_core_graph(ranking, selected):
    """Star graph around the core sentence; edge width is similarity to the core."""
    G = nx.Graph()
    core = ranking.core
    for i in range(len(ranking.sentences)):
        G.add_node(i)
    for i, sim in enumerate(ranking.core_similarity):
        if i != core and sim > 0:
            G.add_edge(core, i, weight=sim)

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(16, 8))

    ax1.set_title("Similarity to the Core Sentence", fontsize=14, fontweight='bold')
    pos = nx.spring_layout(G, k=2, iterations=50, seed=42)
    colors = ['gold' if i == core else 'lightgreen' if i in selected else 'lightblue' for i in G.nodes()]
    nx.draw_networkx_nodes(G, pos, ax=ax1, node_color=colors, node_size=800, alpha=0.8)
    edges = G.edges(data=True)
    if edges:
        weights = [d['weight'] for _, _, d in edges]
        max_weight = max(weights)
        nx.draw_networkx_edges(G, pos, ax=ax1,
                               width=[3 * (w / max_weight) for w in weights],
                               alpha=0.6,
                               edge_color='gray')
    labels = {i: f"S{i+1}" for i in G.nodes()}
    nx.draw_networkx_labels(G, pos, labels, ax=ax1, font_size=10, font_weight='bold')
    if len(G.nodes) <= 10:
        edge_labels = {(u, v): f"{d['weight']:.2f}" for u, v, d in G.edges(data=True)}
        nx.draw_networkx_edge_labels(G, pos, edge_labels, ax=ax1, font_size=8)
    ax1.set_aspect('equal')
    ax1.axis('off')

    ax2.set_title("Similarity by Sentence", fontsize=14, fontweight='bold')
    x = np.arange(len(ranking.sentences))
    ax2.bar(x - 0.2, ranking.document_similarity, width=0.4, label='to document')
    ax2.bar(x + 0.2, ranking.core_similarity, width=0.4, label='to core')
    ax2.set_xticks(x)
    ax2.set_xticklabels([f"S{i+1}" for i in x], rotation=90 if len(x) > 20 else 0)
    ax2.set_ylim(0, 1.05)
    ax2.legend(loc='upper right')

    plt.tight_layout()

    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close()

    return buf

def create_sidebar_controls(cfg):
    """Create sidebar controls for parameters."""
    st.sidebar.header("Parameters")
    names = [AGNOSTIC_LABEL] + [lang.name.title() for lang in Language]
    default = AGNOSTIC_LABEL if cfg.language is None else cfg.language.name.title()
    language_name = st.sidebar.selectbox("Language", names, index=names.index(default),
                                         help="Selects the stemmer and stopword list")
    mode = st.sidebar.radio("Summary size", ["ratio", "sentences"], index=["ratio", "sentences"].index(cfg.mode),
                            format_func=lambda m: "By length ratio" if m == "ratio" else "By sentence count")
    if mode == "ratio":
        size = st.sidebar.slider(
            "Length ratio",
            min_value=0.0,
            max_value=1.0,
            value=cfg.ratio,
            step=0.05,
            help="Share of the document's length to keep"
        )
    else:
        size = int(st.sidebar.number_input("Sentences", min_value=1, value=cfg.sentences, step=1))

    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=True, help="Show detailed pipeline steps")

    language = None if language_name == AGNOSTIC_LABEL else Language.from_name(language_name)
    return language, mode, size, debug_mode

def select(ranking, text, mode, size):
    if mode == "ratio":
        return select_by_ratio(ranking, check_ratio(size), utf8_length(text))
    return select_by_count(ranking, size)

def selection_shares(ranking, selected, text):
    """Share of sentences kept, and share of the text's UTF-8 bytes kept."""
    kept_bytes = sum(utf8_length(ranking.sentences[i].text) for i in selected)
    return len(selected) / len(ranking.sentences), kept_bytes / utf8_length(text)

def debug_pipeline(summarizer: Summarizer, text: str, mode: str, size):
    """Run the pipeline with detailed debugging information."""

    # Step 1: Segmentation and normalization
    st.header("Step 1: Segmentation")
    with st.expander("Segmentation Details", expanded=True):
        st.write("**Running:** Unicode sentence segmentation, stopword removal, stemming")

        with st.spinner("Processing text..."):
            ranking = summarizer.rank(text)

        if ranking is None:
            st.warning("No sentences found")
            return []

        doc = ranking.document
        st.success(f"Segmented {len(doc.sentences)} sentences")

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Total Sentences", len(doc.sentences))
            st.metric("Document Bytes", utf8_length(text))
        with col2:
            total_terms = sum(len(s.terms) for s in doc.sentences)
            st.metric("Terms (after stopwords)", total_terms)
        with col3:
            st.metric("Unique Terms", len(ranking.idf))

        sentences_df = pd.DataFrame([{
            "Sentence #": s.idx + 1,
            "Span": f"{s.start}-{s.end}",
            "Text": preview(s.text),
            "Terms": ", ".join(s.terms[:8]) + ("..." if len(s.terms) > 8 else ""),
        } for s in doc.sentences])
        st.dataframe(sentences_df, use_container_width=True)

    # Step 2: TF-IDF
    st.header("Step 2: TF-IDF Vectors")
    with st.expander("TF-IDF Details", expanded=False):
        st.subheader("IDF Scores")
        st.write("**IDF = log2(sentences / sentences containing the term); 0 for terms in every sentence**")
        df = {term: sum(1 for s in doc.sentences if term in s.terms) for term in ranking.idf}
        idf_df = pd.DataFrame([
            {"Term": term, "Sentences": df[term], "IDF Score": f"{score:.4f}"}
            for term, score in sorted(ranking.idf.items(), key=lambda x: (-x[1], x[0]))
        ])
        st.dataframe(idf_df, use_container_width=True, height=200)

        st.subheader("Unit TF-IDF Vectors by Sentence")
        vectors_df = pd.DataFrame([{
            "Sentence #": s.idx + 1,
            "Text": preview(s.text, 60),
            "Vector": ", ".join(
                f"{term}:{w:.3f}"
                for term, w in sorted(s.tf_idf_vector.items(), key=lambda x: x[1], reverse=True)
            ) or "zero vector (stopwords or terms in every sentence)",
        } for s in doc.sentences])
        st.dataframe(vectors_df, use_container_width=True)

    # Step 3: Core sentence
    st.header("Step 3: Core Sentence")
    with st.expander("Core Selection Details", expanded=True):
        st.write("**Running:** Cosine similarity of each sentence to the whole document")
        st.success(f"Core sentence: S{ranking.core+1}")
        st.info(doc.sentences[ranking.core].text.strip())

        weights = np.array(ranking.document_similarity)
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Max Similarity", f"{weights.max():.3f}")
        with col2:
            st.metric("Mean Similarity", f"{weights.mean():.3f}")
        with col3:
            st.metric("Std Similarity", f"{weights.std():.3f}")

    # Step 4: Ranking
    selected = select(ranking, text, mode, size)
    st.header("Step 4: Ranking")
    with st.expander("Ranking Details", expanded=True):
        st.write("**Running:** Sorting sentences by similarity to the core sentence")
        rank_df = pd.DataFrame([{
            "Rank": r + 1,
            "Sentence #": i + 1,
            "To Core": f"{ranking.core_similarity[i]:.3f}",
            "To Document": f"{ranking.document_similarity[i]:.3f}",
            "Selected": "yes" if i in selected else "no",
            "Text": preview(doc.sentences[i].text),
        } for r, i in enumerate(ranking.order)])
        st.dataframe(rank_df, use_container_width=True)

        if len(doc.sentences) <= 50:
            try:
                with st.spinner("Generating graph visualization..."):
                    image = draw_core_graph(ranking, set(selected))
                st.image(image, caption="Core sentence (gold) and selected sentences (green)", use_container_width=True)
            except Exception as e:
                st.error(f"Could not generate graph visualization: {str(e)}")
        else:
            st.info(f"Graph too large to visualize ({len(doc.sentences)} nodes).")

    # Step 5: Selection
    st.header("Step 5: Summary Generation")
    with st.expander("Selection Details", expanded=True):
        target = f"ratio {size:.2f}" if mode == "ratio" else f"{size} sentences"
        st.write(f"**Running:** Taking top ranked sentences for {target}, then restoring document order")
        sentence_share, byte_ratio = selection_shares(ranking, selected, text)
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Selected", len(selected))
        with col2:
            st.metric("Sentence Share", f"{sentence_share:.2%}")
        with col3:
            st.metric("Byte Ratio", f"{byte_ratio:.2%}")

    return assemble(ranking, selected)

def main():
    setup_logging()
    cfg = load_config()

    st.title("Core-sentence Summarizer")
    st.write("Upload a text file to extract the sentences closest to its most representative sentence")

    language, mode, size, debug_mode = create_sidebar_controls(cfg)
    summarizer = Summarizer.new(language) if language is not None else Summarizer.language_agnostic()

    uploaded_file = st.file_uploader(
        "Choose a text file",
        type=['txt', 'rtf', 'md'],
        help="Upload a text file to summarize (supports .txt, .rtf, .md formats)"
    )

    if uploaded_file is not None:
        text = load_text_from_file(uploaded_file)
        file_extension = uploaded_file.name.lower().split('.')[-1]

        st.subheader(f"Original Text ({file_extension.upper()} format)")
        st.text_area("Content", text, height=200, disabled=True)

        if st.button("Generate Summary", type="primary"):
            try:
                if debug_mode:
                    st.markdown("---")
                    st.title("Pipeline Debug Mode")
                    sentences = debug_pipeline(summarizer, text, mode, size)
                else:
                    with st.spinner("Generating summary..."):
                        if mode == "ratio":
                            sentences = summarizer.summarize_ratio(text, size)
                        else:
                            sentences = summarizer.summarize_sentences(text, size)
            except SummaryError as e:
                log_event(logger, "warning", "summarize", "summary rejected", error=str(e))
                st.error(f"Error generating summary: {str(e)}")
                return

            result = "".join(sentences).strip()
            log_event(logger, "info", "summarize", "summary generated",
                      mode=mode, sentences=len(sentences), chars=len(text))

            st.markdown("---")
            st.header("Final Summary")
            st.text_area("Generated Summary", result, height=150, disabled=True)

            col1, col2, col3 = st.columns(3)
            with col1:
                st.metric("Original Length", len(text.split()))
            with col2:
                st.metric("Summary Length", len(result.split()) if result else 0)
            with col3:
                compression = len(result.split()) / len(text.split()) if text.split() and result else 0
                st.metric("Actual Compression", f"{compression:.2%}")

if __name__ == "__main__":
    main()
