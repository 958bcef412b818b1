from .core import run_case, run_batch, WORDLE_MAX_TURNS
from .io import write_csv, write_manifest, summarize

__all__ = ["run_case", "run_batch", "write_csv", "write_manifest", "summarize", "WORDLE_MAX_TURNS"]
