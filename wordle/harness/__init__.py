from .core import MAX_TURNS, run_game, run_batch, scripted
from .io import write_csv, read_games

__all__ = ["MAX_TURNS", "run_game", "run_batch", "scripted", "write_csv", "read_games"]
