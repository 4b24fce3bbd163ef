import json
from decimal import Decimal
import io
from contextlib import redirect_stdout

import streamlit as st

from matrixgame import GameError, solve_game
from matrixgame.display import DECIMAL, FRACTION, fmt_num, print_history
from matrixgame.payoff import validate_payoff
from matrixgame.plot import plot_solution

st.set_page_config(page_title="Matrix Game Simplex", layout="wide")
st.title("Zero-Sum Matrix Game — Simplex Tableaux")

# Sidebar options
with st.sidebar:
    st.header("Options")
    style = st.selectbox("Number format", [FRACTION, DECIMAL], index=0)
    show_graph = st.checkbox("Show graph", value=True)

# Matching pennies
default_json = {
    "payoff": [[1, -1], [-1, 1]]
}

st.subheader("Payoff matrix (row player)")
json_text = st.text_area("Edit payoff JSON here", json.dumps(default_json, indent=2), height=220)

col_run, col_reset = st.columns([1, 1])
run = col_run.button("Solve")
if col_reset.button("Reset to template"):
    st.rerun()


if run:
    try:
        cfg = json.loads(json_text, parse_float=Decimal)
    except Exception as e:
        st.error(f"Invalid JSON: {e}")
    else:
        try:
            payoff = validate_payoff(cfg.get("payoff", []) if isinstance(cfg, dict) else cfg)
            res = solve_game(payoff)
        except GameError as e:
            st.error(f"{type(e).__name__}: {e}")
        else:
            buf = io.StringIO()
            with redirect_stdout(buf):
                print_history(res.history, style=style)
            text_out = buf.getvalue()

            st.subheader("Iterations / Tableaux")
            st.code(text_out)
            st.subheader("Result")
            st.json({
                "value": fmt_num(res.value, style),
                "player1": [fmt_num(p, style) for p in res.player1],
                "player2": [fmt_num(q, style) for q in res.player2],
                "iterations": res.iterations,
                "shift": fmt_num(res.shift, style),
            })

            if show_graph:
                st.subheader("Graph")
                st.pyplot(plot_solution(res))
