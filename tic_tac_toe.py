"""
tic_tac_toe.py - Tic-Tac-Toe Game Logic

This file contains:
- Game state management (board history and move cursor)
- Move validation
- Time travel through earlier board states
- Status and move-list text for the UI
"""

from typing import Dict, Any, List, Optional

from loguru import logger

from tic_tac_toe_checker import BOARD_SIZE, EMPTY, O, X, calculate_winner


class TicTacToeGame:
    """
    Tic-Tac-Toe game logic and state management.

    The whole game is the pair (history, current_move). Whose turn it is
    follows from the cursor: X on even moves, O on odd ones.
    """

    def __init__(self):
        self.history: List[List[str]] = [[EMPTY] * BOARD_SIZE]
        self.current_move = 0

    @property
    def current_board(self) -> List[str]:
        """Board shown at the current move."""
        return self.history[self.current_move].copy()

    @property
    def x_is_next(self) -> bool:
        return self.current_move % 2 == 0

    @property
    def current_player(self) -> str:
        return X if self.x_is_next else O

    def get_state(self) -> Dict[str, Any]:
        """Get current game state."""
        return {
            "board": self.current_board,
            "history": [board.copy() for board in self.history],
            "current_move": self.current_move,
            "current_player": self.current_player,
            "winner": self.get_winner(),
        }

    def is_valid_move(self, position: int) -> bool:
        """Check if a move is valid."""
        if not 0 <= position < BOARD_SIZE:
            return False
        board = self.history[self.current_move]
        return calculate_winner(board) is None and board[position] == EMPTY

    def play(self, position: int) -> bool:
        """
        Place the current player's mark.

        Any moves after the current one are dropped, so playing from a
        rewound position starts a new line of history.

        Args:
            position: Position to place the mark (0-8)

        Returns:
            True if the move was made, False if it was ignored
        """
        if not self.is_valid_move(position):
            return False

        player = self.current_player
        next_board = self.history[self.current_move].copy()
        next_board[position] = player

        self.history = self.history[: self.current_move + 1] + [next_board]
        self.current_move = len(self.history) - 1

        logger.info(f"Move #{self.current_move}: {player} at position {position}")
        return True

    def jump_to(self, move: int) -> bool:
        """
        Show the board as it was after the given move.

        History is left as is. Returns False for a move outside the history.
        """
        if not 0 <= move < len(self.history):
            logger.warning(
                f"Ignoring jump to move {move}, history has {len(self.history)} entries"
            )
            return False

        self.current_move = move
        logger.info(f"Jumped to move #{move}")
        return True

    def get_available_moves(self) -> List[int]:
        """Get list of available move positions."""
        return [i for i, cell in enumerate(self.history[self.current_move]) if cell == EMPTY]

    def get_winner(self) -> Optional[str]:
        """Get the winner on the current board, if any."""
        return calculate_winner(self.history[self.current_move])

    def get_move_descriptions(self) -> List[str]:
        """Labels for the move list, one per history entry."""
        return [
            f"Go to move #{move}" if move > 0 else "Go to game start"
            for move in range(len(self.history))
        ]

    def get_board_display(self) -> str:
        """Get a string representation of the board."""
        board = self.history[self.current_move]
        display = ""
        for i in range(0, BOARD_SIZE, 3):
            row = " | ".join([board[i + j] if board[i + j] else " " for j in range(3)])
            display += f"{row}\n"
            if i < 6:
                display += "---------\n"
        return display

    def get_status_message(self) -> str:
        """Get a human-readable status message."""
        winner = self.get_winner()
        if winner:
            return f"Winner: {winner}"
        return f"Next player: {self.current_player}"


def create_new_game() -> TicTacToeGame:
    """Create a new tic-tac-toe game."""
    return TicTacToeGame()
