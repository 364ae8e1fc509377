"""
tic_tac_toe_checker.py - Win detection for Tic-Tac-Toe

This file contains:
- Player marks and the empty cell value
- The 8 winning lines (rows, columns, diagonals)
- calculate_winner(), a pure check over a single board
"""

from typing import List, Optional, Sequence

X = "X"
O = "O"
EMPTY = ""

BOARD_SIZE = 9

WINNING_LINES: List[List[int]] = [
    [0, 1, 2],
    [3, 4, 5],
    [6, 7, 8],  # Rows
    [0, 3, 6],
    [1, 4, 7],
    [2, 5, 8],  # Columns
    [0, 4, 8],
    [2, 4, 6],  # Diagonals
]


def calculate_winner(board: Sequence[str]) -> Optional[str]:
    """
    Return the mark that owns a complete line on the board.

    Lines are checked in WINNING_LINES order and the first match wins.
    A full board with no line returns None; there is no draw result.
    """
    for a, b, c in WINNING_LINES:
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return board[a]
    return None
