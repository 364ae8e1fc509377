# app.py

import os
import sys

import streamlit as st
from dotenv import load_dotenv
from loguru import logger

from tic_tac_toe import create_new_game

load_dotenv()

logger.remove()
logger.add(sys.stderr, level=os.getenv("TIC_TAC_TOE_LOG_LEVEL", "INFO"))

st.set_page_config(
    page_title=os.getenv("TIC_TAC_TOE_PAGE_TITLE", "Tic-Tac-Toe"), layout="wide"
)

# --- Session State Initialization ---
if "game" not in st.session_state:
    st.session_state.game = create_new_game()
    logger.info("Started a new game session")

game = st.session_state.game


# --- Sidebar ---
with st.sidebar:
    st.header("🎮 Tic-Tac-Toe")

    st.subheader("Game Status")
    st.write(f"**Status:** {game.get_status_message()}")
    st.write(f"**Move:** {game.current_move} / {len(game.history) - 1}")


# --- Main Game Interface ---
st.title("🎮 Tic-Tac-Toe")

# Board on the left, move timeline on the right
col1, col2 = st.columns([1, 1])

with col1:
    st.subheader("🎯 Game Board")

    # Status line above the board
    st.write(f"**{game.get_status_message()}**")

    board = game.current_board

    # 3x3 grid of buttons; illegal clicks are ignored by game.play
    for i in range(0, 9, 3):
        cols = st.columns(3)
        for j in range(3):
            idx = i + j
            with cols[j]:
                if st.button(board[idx] or " ", key=f"cell_{idx}"):
                    game.play(idx)
                    st.rerun()

    with st.expander("📋 Board State (Text)", expanded=False):
        st.text(game.get_board_display())

with col2:
    st.subheader("🕒 Move History")

    for move, description in enumerate(game.get_move_descriptions()):
        if st.button(description, key=f"move_{move}"):
            game.jump_to(move)
            st.rerun()
