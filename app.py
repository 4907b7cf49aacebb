import streamlit as st
import pandas as pd
import numpy as np
import plotly.express as px

from components.bench import run_benchmark, summarize, trie_shape, make_workloads
from components.config import BenchConfig, STRUCTURES, TRIE_STRUCTURES
from components.work_loads.key_generator import KEY_ORDERS

# Configure page
st.set_page_config(
    page_title="StructBench",
    page_icon="🌳",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Main title
st.title("🌳 StructBench: Classic Data Structure Benchmarks")
st.markdown("---")

defaults = BenchConfig.from_env()

# Sidebar
with st.sidebar:
    st.header("Workload")
    structures = st.multiselect("Structures", list(STRUCTURES), default=list(defaults.structures))
    size = st.slider("Items per run", min_value=100, max_value=20_000, value=min(defaults.size, 20_000), step=100)
    repeat = st.number_input("Repeats", min_value=1, max_value=20, value=defaults.repeat)
    seed = st.number_input("Seed", min_value=0, value=defaults.seed or 0)

    st.subheader("Keys (BST / heaps)")
    key_kind = st.radio("Key type", ["int", "ip"], horizontal=True)
    key_order = st.selectbox("Insertion order", list(KEY_ORDERS))

    st.subheader("Words (tries)")
    prefix_freq = st.slider("Prefix frequency", min_value=0.0, max_value=0.95, value=defaults.prefix_freq, step=0.05)

    st.markdown("---")
    run = st.button("▶️ Run benchmark")

if not structures:
    st.info("👈 Select at least one structure to benchmark")
    st.stop()

config = BenchConfig(
    structures=tuple(structures),
    size=int(size),
    repeat=int(repeat),
    key_kind=key_kind,
    key_order=key_order,
    prefix_freq=float(prefix_freq),
    seed=int(seed),
)

if run:
    with st.spinner("Generating workloads and timing structures..."):
        try:
            data = make_workloads(config)
            results = run_benchmark(config, data)
        except ValueError as e:
            st.error(f"❌ Invalid workload: {e}")
            st.stop()
    st.session_state['results'] = results
    st.session_state['data'] = data
    st.session_state['config'] = config

if 'results' not in st.session_state:
    st.info("Configure a workload in the sidebar and press **Run benchmark**")
    st.stop()

results = st.session_state['results']
data = st.session_state['data']
ran_with = st.session_state['config']

# Headline metrics
col1, col2, col3, col4 = st.columns(4)
with col1:
    st.metric("Structures", len(ran_with.structures))
with col2:
    st.metric("Items per run", f"{ran_with.size:,}")
with col3:
    st.metric("Repeats", ran_with.repeat)
with col4:
    fastest = results.loc[results["ops_per_s"].idxmax()]
    st.metric("Fastest phase", f"{fastest['structure']} / {fastest['phase']}")

tab1, tab2, tab3 = st.tabs(["Throughput", "Timings", "Trie Shape"])

with tab1:
    st.subheader("Operations per second")
    fig = px.bar(
        results,
        x="structure",
        y="ops_per_s",
        color="phase",
        barmode="group",
        log_y=True,
        title=f"Throughput by phase ({ran_with.key_order} {ran_with.key_kind} keys)"
    )
    fig.update_layout(xaxis_title="Structure", yaxis_title="ops / s (log)")
    st.plotly_chart(fig, use_container_width=True)
    st.dataframe(summarize(results).style.format("{:,.0f}"))

with tab2:
    st.subheader("Wall-clock seconds per phase")
    fig_t = px.bar(
        results,
        x="phase",
        y="mean_s",
        error_y="std_s",
        color="structure",
        barmode="group",
        title="Mean time per phase (± std)"
    )
    st.plotly_chart(fig_t, use_container_width=True)
    st.dataframe(results, use_container_width=True)

with tab3:
    if "words" in data and any(s in TRIE_STRUCTURES for s in ran_with.structures):
        words = data["words"]
        shape = trie_shape(words)
        st.dataframe(shape)

        lengths = pd.Series([len(w) for w in words], name="length")
        fig_len = px.histogram(lengths, x="length", nbins=int(np.ptp(lengths.values)) + 1,
                               title="Word length distribution")
        st.plotly_chart(fig_len, use_container_width=True)

        prefixes = pd.Series([w[:2] for w in words]).value_counts().head(20)
        fig_pre = px.bar(x=prefixes.index, y=prefixes.values, title="Top two-letter prefixes")
        fig_pre.update_layout(xaxis_title="Prefix", yaxis_title="Words")
        st.plotly_chart(fig_pre, use_container_width=True)
    else:
        st.info("Select a trie to see its shape")

# Footer
st.markdown("---")
st.markdown(
    """
    <div style='text-align: center; color: #B0B0B0; padding: 1rem;'>
        Built with Streamlit 🚀 | StructBench
    </div>
    """,
    unsafe_allow_html=True
)
