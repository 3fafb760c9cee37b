import logging
import os

import streamlit as st

logger = logging.getLogger(__name__)

STYLESHEET = os.path.join(os.path.dirname(__file__), "assets", "styles.css")


def inject_css(path: str = STYLESHEET):
    try:
        with open(path, "r", encoding="utf-8") as f:
            st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)
    except OSError as e:
        logger.warning("stylesheet not loaded from %s: %s", path, e)


def app_header(title: str, subtitle: str = ""):
    st.markdown(f"## {title}")
    if subtitle:
        st.caption(subtitle)


def section_header(step: int, title: str, explainer: str):
    st.markdown(f"### {step}) {title}")
    st.write(explainer)


def kpi_card(col, caption: str, value: str, note: str = ""):
    html = f"<div class='card'><div class='caption'>{caption}</div><div class='kpi'>{value}</div>"
    if note:
        html += f"<div class='caption'>{note}</div>"
    col.markdown(html + "</div>", unsafe_allow_html=True)


def small_help(text: str):
    st.caption(text)
