"""Main CLI interface for Twitch Helix requests."""

import logging
import pandas as pd
from typing import Any, Dict, List, Tuple

from config.settings import Config
from core.errors import TransportError
from core.helix_client import HelixClient
from storage.file_writer import FileWriter
from utils.logger import setup_logger, add_file_handler, remove_file_handler
from utils.file_utils import make_run_dirs, output_stem

Request = Tuple[str, Dict[str, Any]]


def parse_opts(pairs: List[str]) -> Dict[str, Any]:
    """Turn ``key=value`` strings into an options mapping.

    Repeating a key collects its values into a list.
    """
    options: Dict[str, Any] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep:
            raise ValueError(f"Expected key=value, got: {pair}")
        if key in options:
            if not isinstance(options[key], list):
                options[key] = [options[key]]
            options[key].append(value)
        else:
            options[key] = value
    return options


def read_batch(csv_path: str) -> List[Request]:
    """Read requests from a CSV with a ``resource`` column."""
    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    if "resource" not in df.columns:
        raise ValueError(f"{csv_path} has no 'resource' column")

    batch = []
    for row in df.to_dict(orient="records"):
        resource = row.pop("resource")
        batch.append((resource, {k: v for k, v in row.items() if v}))
    return batch


class HelixCLI:
    """Main CLI application."""

    def __init__(self, client_id: str, bearer_token: str):
        self.logger = setup_logger()
        self.client = HelixClient(client_id, bearer_token, self.logger)

    def run(self, batch: List[Request], base_dir: str = Config.DEFAULT_RUNS_DIR,
            want_csv: bool = False) -> Dict[str, int]:
        """Execute each request and write its body into a run directory."""
        run_dir, log_path = make_run_dirs(base_dir)
        add_file_handler(self.logger, log_path)
        stats = {"total": len(batch), "success": 0, "failed": 0}

        try:
            writer = FileWriter(run_dir, self.logger)

            self.logger.info("=" * 80)
            self.logger.info("Helix batch started")
            self.logger.info("requests  : %d", len(batch))
            self.logger.info("csv       : %s", want_csv)
            self.logger.info("batch dir : %s", run_dir)
            self.logger.info("=" * 80)

            for n, (resource, options) in enumerate(batch, 1):
                self.logger.info("----- [%d / %d] %s %s", n, len(batch), resource, options)
                try:
                    body = self.client.call(resource, **options)
                    stem = output_stem(n, resource)
                    writer.write_json(stem, body)
                    if want_csv:
                        writer.write_rows(stem, body)
                    stats["success"] += 1
                except (TransportError, ValueError, OSError) as e:
                    self.logger.error("❌ Request %d (%s) failed: %s", n, resource, str(e)[:500])
                    stats["failed"] += 1

            self.logger.info("=" * 80)
            self.logger.info("BATCH SUMMARY:")
            self.logger.info("  Total     : %d", stats["total"])
            self.logger.info("  ✅ Success : %d", stats["success"])
            self.logger.info("  ❌ Failed  : %d", stats["failed"])
            self.logger.info("=" * 80)
            self.logger.info("Batch complete. Logs → %s", log_path)
        finally:
            remove_file_handler(self.logger, log_path)
            self.client.close()

        print(f"\n📊 Batch Summary:")
        print(f"  • Completed: {stats['success']}/{stats['total']} requests")
        print(f"  • Output: {run_dir}")
        print(f"  • Logs: {log_path}")

        return stats


def main(argv=None):
    """Entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Twitch Helix client")
    parser.add_argument("input", help="Resource path (e.g. clips) or batch CSV file")
    parser.add_argument("--opt", action="append", default=[], metavar="KEY=VALUE",
                        help="Query option; repeat a key for multiple values")
    parser.add_argument("--client-id", default=Config.CLIENT_ID)
    parser.add_argument("--token", default=Config.BEARER_TOKEN)
    parser.add_argument("--out", default=Config.DEFAULT_RUNS_DIR)
    parser.add_argument("--csv", action="store_true")
    parser.add_argument("--debug", action="store_true")

    args = parser.parse_args(argv)

    if not args.client_id or not args.token:
        parser.error("client id and bearer token are required "
                     "(--client-id/--token or TWITCH_CLIENT_ID/TWITCH_BEARER_TOKEN)")

    # Parse input
    if args.input.endswith(".csv") and args.opt:
        parser.error("--opt cannot be combined with a batch CSV; put options in its columns")
    try:
        if args.input.endswith(".csv"):
            batch = read_batch(args.input)
        else:
            batch = [(args.input, parse_opts(args.opt))]
    except ValueError as e:
        parser.error(str(e))

    cli = HelixCLI(args.client_id, args.token)

    # Configure logging level
    if args.debug:
        logging.getLogger(Config.LOGGER_NAME).setLevel(logging.DEBUG)

    stats = cli.run(batch, base_dir=args.out, want_csv=args.csv)
    return 0 if stats["failed"] == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
