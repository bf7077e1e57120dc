"""
Game state controller for Tic-Tac-Toe.

Holds the linear move history, the pointer to the displayed move, the move
list order flag, and the cached winning result. Every operation mutates this
single instance; the web layer loads it from the session, runs one operation
and stores it back.
"""
from app.projects.tic_tac_toe.core.constants import (
    BOARD_SIZE,
    LABEL_CURRENT,
    LABEL_GO_TO,
    LABEL_START,
    MARK_O,
    MARK_X,
    STATUS_NEXT,
    STATUS_TIE,
    STATUS_WINNER,
)
from app.projects.tic_tac_toe.core.rules import EMPTY, evaluate, is_filled, square_location


class Game:
    def __init__(self):
        self.history = [{"squares": [EMPTY] * BOARD_SIZE, "location": None}]
        self.current_move = 0
        self.ascending = True
        self.winner = None

    # --- Derived state ---

    @property
    def board(self):
        return self.history[self.current_move]["squares"]

    @property
    def current_mark(self):
        return MARK_X if self.current_move % 2 == 0 else MARK_O

    @property
    def winning_indices(self):
        return list(self.winner["indices"]) if self.winner else []

    @property
    def is_over(self):
        return self.winner is not None or is_filled(self.board)

    @property
    def status(self):
        if self.winner:
            return STATUS_WINNER.format(mark=self.winner["mark"])
        if is_filled(self.board):
            return STATUS_TIE
        return STATUS_NEXT.format(mark=self.current_mark)

    # --- Operations ---

    def apply_move(self, square: int) -> bool:
        """
        Place the current player's mark on a square.

        Rejected without any state change when the square is off the board,
        already taken, or the displayed board already has a winner.

        Returns:
            bool: True if the move was played
        """
        if not 0 <= square < BOARD_SIZE:
            return False
        squares = self.board
        if squares[square] or evaluate(squares):
            return False

        next_squares = list(squares)
        next_squares[square] = self.current_mark

        # Playing from an earlier move abandons the moves that followed it
        self.history = self.history[: self.current_move + 1]
        self.history.append({"squares": next_squares, "location": square_location(square)})
        self.current_move = len(self.history) - 1
        self.winner = evaluate(next_squares)
        return True

    def jump_to(self, move: int) -> bool:
        """Display an earlier (or later) move without touching the history."""
        if not 0 <= move < len(self.history):
            return False
        self.current_move = move
        self.winner = evaluate(self.board)
        return True

    def toggle_order(self):
        self.ascending = not self.ascending

    # --- Presentation data ---

    def move_list(self):
        """
        Build the move list entries in display order.

        Returns:
            list: dicts with move, label, location and is_current
        """
        moves = []
        for move, step in enumerate(self.history):
            location = step["location"]
            is_current = move == self.current_move
            if move == 0:
                label = LABEL_START
            elif is_current:
                label = LABEL_CURRENT.format(move=move)
                if location:
                    label += f" ({location})"
            else:
                label = f"{LABEL_GO_TO.format(move=move)} ({location})"
            moves.append({
                "move": move,
                "label": label,
                "location": location,
                "is_current": is_current,
            })

        if not self.ascending:
            moves.reverse()
        return moves

    def snapshot(self):
        """Read-only view of the game for rendering."""
        return {
            "board": list(self.board),
            "current_mark": self.current_mark,
            "status": self.status,
            "moves": self.move_list(),
            "winning_indices": self.winning_indices,
            "current_move": self.current_move,
            "ascending": self.ascending,
        }

    # --- Session storage ---

    def to_dict(self):
        return {
            "history": [
                {"squares": list(step["squares"]), "location": step["location"]}
                for step in self.history
            ],
            "current_move": self.current_move,
            "ascending": self.ascending,
        }

    @classmethod
    def from_dict(cls, data):
        """
        Rebuild a game from its stored form.

        The winning result is not stored; it is recomputed from the board
        at the current move.

        Raises:
            ValueError: if the data does not describe a valid game
        """
        if not isinstance(data, dict):
            raise ValueError("Game data must be a dict")

        history = data.get("history")
        if not isinstance(history, list) or not history:
            raise ValueError("Game history must be a non-empty list")

        steps = []
        for step in history:
            if not isinstance(step, dict):
                raise ValueError("History entries must be dicts")
            squares = step.get("squares")
            if (
                not isinstance(squares, list)
                or len(squares) != BOARD_SIZE
                or any(s not in (EMPTY, MARK_X, MARK_O) for s in squares)
            ):
                raise ValueError(f"Invalid board in history: {squares!r}")
            location = step.get("location")
            if location is not None and not isinstance(location, str):
                raise ValueError(f"Invalid location in history: {location!r}")
            steps.append({"squares": list(squares), "location": location})

        if any(steps[0]["squares"]) or steps[0]["location"] is not None:
            raise ValueError("History must start with an empty board")

        # Each later step places exactly one mark, alternating X then O
        for move in range(1, len(steps)):
            before = steps[move - 1]["squares"]
            after = steps[move]["squares"]
            changed = [i for i in range(BOARD_SIZE) if before[i] != after[i]]
            mark = MARK_X if (move - 1) % 2 == 0 else MARK_O
            if len(changed) != 1 or before[changed[0]] != EMPTY or after[changed[0]] != mark:
                raise ValueError(f"Move #{move} must place one {mark} on an empty square")
            if evaluate(before):
                raise ValueError(f"Move #{move} was played after the game was won")
            if steps[move]["location"] != square_location(changed[0]):
                raise ValueError(f"Move #{move} has the wrong location")

        current_move = data.get("current_move")
        if isinstance(current_move, bool) or not isinstance(current_move, int):
            raise ValueError("current_move must be an integer")
        if not 0 <= current_move < len(steps):
            raise ValueError(f"current_move {current_move} is outside the history")

        ascending = data.get("ascending", True)
        if not isinstance(ascending, bool):
            raise ValueError("ascending must be a boolean")

        game = cls()
        game.history = steps
        game.current_move = current_move
        game.ascending = ascending
        game.winner = evaluate(game.board)
        return game
