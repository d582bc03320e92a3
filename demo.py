#!/usr/bin/env python3
"""
Complete demo of vector projection and rejection.
Runs every scenario and displays the results recorded by this run.
"""

import os
from vecproj.cli.demo import RESULTS_FILE, project_cmd, reject_cmd
from vecproj.cli.config import load_config
from vecproj.lib.utils import read_jsonl

def main(config_path: str = "configs/demo.yaml"):
    cfg = load_config(config_path)
    results_path = os.path.join(cfg.paths.output_dir, RESULTS_FILE) if cfg.paths.output_dir else None
    # the CLI appends, so drop rows left over from earlier runs
    if results_path and os.path.exists(results_path):
        os.remove(results_path)

    print("=== Projection ===")
    project_cmd(config_path)

    print("\n=== Rejection ===")
    reject_cmd(config_path)

    print("\n=== Recorded Results ===")
    rows = read_jsonl(results_path) if results_path else []
    if not rows:
        print("No results found at", results_path)
        return
    for row in rows:
        print(f"{row['scenario']}: seed={row['seed']}")

if __name__ == "__main__":
    main()
