"""
AI Wage Signal System - Streamlit chat frontend.
No business logic in layout; the pipeline is stateless and this page owns the profile.
"""

from typing import Any, Dict, List

import streamlit as st

from agents.wage_prediction_agent import run_turn_sync
from config import OPENAI_API_KEY, REQUIRED_FIELDS

FIELD_LABELS = {
    "age": "Age",
    "years_experience": "Years of experience",
    "education": "Education",
    "gender": "Gender",
    "country": "Country",
    "industry": "Industry",
}


def _format_assistant_reply(response: Dict[str, Any]) -> str:
    """Markdown for one pipeline response."""
    lines = [response.get("message") or ""]
    if response.get("status") == "success":
        if response.get("explanation"):
            lines.append("")
            lines.append(response["explanation"])
        factors: List[str] = response.get("keyFactors") or []
        if factors:
            lines.append("")
            lines.extend(f"{i}. {f}" for i, f in enumerate(factors, start=1))
    return "\n".join(lines)


def _render_profile(profile: Dict[str, Any]) -> None:
    """Sidebar view of the profile collected so far."""
    st.sidebar.subheader("Your profile")
    if profile.get("error"):
        st.sidebar.warning("Last answer could not be understood.")
    for field in REQUIRED_FIELDS:
        value = profile.get(field)
        st.sidebar.markdown(f"**{FIELD_LABELS[field]}:** {value or '-'}")
    if st.sidebar.button("Start over", key="reset_btn"):
        st.session_state["profile"] = {}
        st.session_state["messages"] = []
        st.rerun()


def render_layout() -> None:
    """Chat page; the profile in session_state is sent back as currentState each turn."""
    st.set_page_config(page_title="AI Wage Signal System", layout="centered")
    st.title("AI Wage Signal System")
    st.markdown("*Tell me about yourself in any language and I'll estimate your annual wage.*")

    if "messages" not in st.session_state:
        st.session_state["messages"] = []
    if "profile" not in st.session_state:
        st.session_state["profile"] = {}

    _render_profile(st.session_state["profile"])

    for msg in st.session_state["messages"]:
        with st.chat_message(msg["role"]):
            st.markdown(msg["content"])

    prompt = st.chat_input("e.g. I'm 28, a software engineer in Berlin with 3 years of experience")
    if not prompt:
        return
    if not OPENAI_API_KEY:
        st.error("OPENAI_API_KEY is not set. Add it to your .env file.")
        return

    st.session_state["messages"].append({"role": "user", "content": prompt})
    with st.chat_message("user"):
        st.markdown(prompt)

    with st.chat_message("assistant"):
        with st.spinner("Thinking…"):
            response = run_turn_sync(prompt, st.session_state["profile"] or None)
        reply = _format_assistant_reply(response)
        if response.get("status") == "error":
            st.error(reply)
        else:
            st.markdown(reply)

    st.session_state["messages"].append({"role": "assistant", "content": reply})
    structured = response.get("structuredData") or {}
    # Keep the last good profile when the model output could not be parsed
    if not structured.get("error"):
        st.session_state["profile"] = structured
    st.rerun()


if __name__ == "__main__":
    render_layout()
