"""File storage module for Helix responses."""

import os
import json
import pandas as pd
from typing import Any, Optional
from utils.logger import setup_logger

class FileWriter:
    """Handles writing response bodies to files."""
    
    def __init__(self, output_dir: str, logger=None):
        self.output_dir = output_dir
        self.logger = logger or setup_logger()
    
    def write_json(self, stem: str, body: Any) -> str:
        """Write a response body to JSON."""
        filepath = os.path.join(self.output_dir, f"{stem}.json")
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(body, f, indent=2)
        self.logger.info("  ✓ body → %s", filepath)
        return filepath
    
    def write_rows(self, stem: str, body: Any) -> Optional[str]:
        """Write the ``data`` rows of a response body to CSV."""
        rows = body.get("data") if isinstance(body, dict) else None
        if not rows:
            return None
        
        df = pd.DataFrame(rows)
        filepath = os.path.join(self.output_dir, f"{stem}.csv")
        df.to_csv(filepath, index=False)
        self.logger.info("  ✓ rows → %s (%d rows)", filepath, len(df))
        return filepath
