"""File and directory management utilities."""

import os
import re
from datetime import datetime
from config.settings import Config

def make_run_dirs(base_dir=Config.DEFAULT_RUNS_DIR):
    """
    Create a unique run folder: runs/YYYYmmdd_HHMMSS/
    with a nested logs/ folder.
    Returns (run_dir, log_path).
    """
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = os.path.join(base_dir, ts)
    log_dir = os.path.join(run_dir, "logs")
    os.makedirs(log_dir, exist_ok=True)
    
    log_path = os.path.join(log_dir, "helix.log")
    return run_dir, log_path

def output_stem(n: int, path: str) -> str:
    """File stem for the n-th request of a run, e.g. 001-games_top."""
    return f"{n:03d}-{re.sub(r'[^A-Za-z0-9]+', '_', path)}"
