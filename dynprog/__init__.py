"""Classic dynamic programming problems, each solved with several approaches."""

__version__ = "0.1.0"
__all__ = [
    "alternating_sum",
    "falling_path",
    "frog_jump",
    "house_robber",
    "path_sum",
    "unique_paths",
]