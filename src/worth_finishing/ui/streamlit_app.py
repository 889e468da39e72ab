from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

SRC_PATH = Path(__file__).resolve().parents[2]
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from worth_finishing.core.decision_engine import DecisionEngine
from worth_finishing.core.errors import InvalidInput
from worth_finishing.ui.rendering import breakdown_rows, recommendation_icon


APP_TITLE = "Is It Worth Finishing?"


def _reset_form() -> None:
    st.session_state.hours_played = 0.0
    st.session_state.hours_remaining = 0.0
    st.session_state.enjoyment = 5
    st.session_state.backlog = 5
    st.session_state.completionist = False


def main() -> None:
    st.set_page_config(page_title=APP_TITLE, layout="centered")
    st.title(APP_TITLE)
    st.caption("A deterministic score for whether the game in front of you deserves more of your time.")

    if "enjoyment" not in st.session_state:
        _reset_form()

    c1, c2 = st.columns([1, 1])
    hours_played = c1.number_input("Hours played", min_value=0.0, step=0.5, key="hours_played")
    hours_remaining = c2.number_input("Hours remaining (estimate)", min_value=0.0, step=0.5, key="hours_remaining")

    enjoyment = st.slider("Enjoyment", min_value=1, max_value=10, key="enjoyment")
    backlog = st.slider("Backlog pressure", min_value=1, max_value=10, key="backlog")
    completionist = st.checkbox("I'm a completionist", key="completionist")

    b1, b2 = st.columns([1, 1])
    run = b1.button("Calculate")
    b2.button("Reset", on_click=_reset_form)

    if not run:
        return

    try:
        result = DecisionEngine().evaluate(
            {
                "hoursPlayed": float(hours_played),
                "hoursRemaining": float(hours_remaining),
                "enjoyment": int(enjoyment),
                "backlogPressure": int(backlog),
                "completionist": bool(completionist),
            }
        )
    except InvalidInput as e:
        for err in e.errors:
            st.error(f"{err['field']}: {err['message']}")
        return

    st.divider()
    col_a, col_b = st.columns([1, 2])
    with col_a:
        st.metric("Worth score", result.score)
    with col_b:
        st.subheader(f"{recommendation_icon(result.recommendation)} {result.recommendation.value}")

    st.write(result.explanation)

    st.divider()
    st.subheader("Score breakdown")
    st.dataframe(breakdown_rows(result), width="stretch")


if __name__ == "__main__":
    main()
