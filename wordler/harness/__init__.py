from .core import play_game, run_case, run_batch, summarize
from .io import write_csv, write_manifest, write_report

__all__ = ["play_game", "run_case", "run_batch", "summarize", "write_csv", "write_manifest", "write_report"]
