from __future__ import annotations

import streamlit as st

from charts import step_chart
from d2d import SCHEMES, encode_all
from logger import get_logger
from settings import get_settings
from utils import NON_BINARY_MSG, bits_to_string, gen_random_bits, is_binary_draft

log = get_logger(__name__)
settings = get_settings()

st.set_page_config(layout="wide", page_title="Digital Signal Encoding")

st.markdown(
    """
    <style>
    [data-testid="InputInstructions"] {
        display: none !important;
    }
    </style>
    """,
    unsafe_allow_html=True,
)


def empty_state(message: str = "Enter a bitstring and click **Encode** to see the waveforms."):
    st.markdown(
        """
        <div style="text-align:center; padding: 6rem 1rem; opacity: 0.95;">
            <div style="font-size: 4rem; line-height: 1;">📈</div>
            <div style="font-size: 1.05rem; margin-top: 0.5rem;">
        """
        + message +
        """
            </div>
        </div>
        """,
        unsafe_allow_html=True,
    )


st.title("Digital Signal Encoding")

if "bitstr" not in st.session_state:
    st.session_state["bitstr"] = settings.default_bits
if "result" not in st.session_state:
    st.session_state["result"] = None

with st.sidebar:
    st.header("Controls")

    append_final = st.checkbox(
        "Append final state",
        value=settings.append_final_state,
        help="Repeat the last level so the chart draws the final bit's segment.",
    )
    show_grid = st.checkbox("Show grid", value=True)

    st.divider()
    st.subheader("Random input")
    st.slider("Random bits N", 1, settings.random_bits_max, min(8, settings.random_bits_max), key="rand_n")
    st.text_input("Seed (optional)", value="", key="rand_seed")

    seed_txt = st.session_state.get("rand_seed", "").strip()
    seed_invalid = seed_txt != "" and (seed_txt == "-" or not seed_txt.lstrip("-").isdigit())
    if seed_invalid:
        st.error("Seed must be an integer.")

    def _gen_bits_cb():
        seed_txt = st.session_state.get("rand_seed", "").strip()
        s = int(seed_txt) if seed_txt else None
        n = int(st.session_state.get("rand_n", 8))
        st.session_state["bitstr"] = bits_to_string(gen_random_bits(n, seed=s))
        log.info("random_bits_generated", n=n, seed=s)

    st.button("Generate random bits", on_click=_gen_bits_cb, disabled=seed_invalid)


with st.form("encode_form"):
    st.text_input("Binary data", key="bitstr", placeholder="Enter binary data (e.g., 1011001)")
    submitted = st.form_submit_button("Encode", type="primary")

if not submitted and not is_binary_draft(st.session_state["bitstr"]):
    st.error(NON_BINARY_MSG)

if submitted:
    try:
        st.session_state["result"] = encode_all(st.session_state["bitstr"], append_final=append_final)
    except ValueError as e:
        log.warning("invalid_input", bitstr=st.session_state["bitstr"], error=str(e))
        st.session_state["result"] = None
        st.error(str(e))

res = st.session_state["result"]

# Toggling the sidebar option re-encodes the last accepted input.
if res is not None and res.meta["append_final_state"] != append_final:
    res = encode_all(res.bitstr, append_final=append_final)
    st.session_state["result"] = res

st.markdown(
    "<h5 style='color: red; font-size: 15px; font-weight: normal; margin: 10px 0;'>"
    "Note: Binary digit label is positioned at the beginning of every transition"
    "</h5>",
    unsafe_allow_html=True,
)

if res is None:
    empty_state()
else:
    cols = st.columns(2)
    for idx, (name, scheme) in enumerate(SCHEMES.items()):
        with cols[idx % 2]:
            with st.container(border=True):
                st.subheader(name)
                st.plotly_chart(
                    step_chart(res.signals[name], res.labels[name], name, levels=scheme.levels, grid=show_grid),
                    width="stretch",
                )
                st.code(" ".join(str(v) for v in res.signals[name]))
