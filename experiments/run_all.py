#!/usr/bin/env python3
"""
All-in-one script to run the shuttle simulator and visualize its transfer log.
"""

import argparse
import os
import subprocess
import sys
from pathlib import Path

_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def run_command(cmd, description):
    """Run a command and print status."""
    print("\n" + "=" * 70)
    print(f"🔹 {description}")
    print("=" * 70)
    print(f"Running: {' '.join(cmd)}")
    result = subprocess.run(cmd, cwd=_ROOT)
    if result.returncode != 0:
        print(f"❌ Error in {description}")
        return False
    print(f"✅ {description} completed successfully")
    return True


def latest_log(log_dir: Path):
    if not log_dir.exists():
        return None
    csv_files = sorted(log_dir.glob("transfers_*.csv"), key=lambda p: p.stat().st_mtime, reverse=True)
    return csv_files[0] if csv_files else None


def main():
    parser = argparse.ArgumentParser(description="All-in-one script: simulate the shuttle and visualize the log")
    parser.add_argument("--run-sim", action="store_true", help="Run the shuttle simulator")
    parser.add_argument("--visualize", action="store_true", help="Visualize the latest transfer log")
    parser.add_argument("--horizon", type=float, default=500.0, help="Simulation horizon")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--truck-capacity", type=int, default=100, help="Truck capacity")
    args = parser.parse_args()

    # Default to everything if nothing specified
    if not (args.run_sim or args.visualize):
        args.run_sim = True
        args.visualize = True

    print("\n" + "=" * 70)
    print("🚚 Truck Yard - Shuttle Pipeline")
    print("=" * 70)

    success = True
    log_dir = Path(_ROOT) / "data" / "logs"

    if args.run_sim:
        cmd = [
            sys.executable,
            "-m",
            "yard.shuttle",
            "--horizon", str(args.horizon),
            "--seed", str(args.seed),
            "--truck-capacity", str(args.truck_capacity),
            "--log-dir", str(log_dir),
        ]
        success = run_command(cmd, "Running Shuttle Simulator") and success

    if args.visualize:
        log = latest_log(log_dir)
        if log is not None:
            cmd = [
                sys.executable,
                "dashboard/visualize_logs.py",
                "--log", str(log),
                "--outdir", str(log_dir),
            ]
            success = run_command(cmd, "Visualizing Transfer Log") and success
        else:
            print("⚠️  No transfer logs found, skipping visualization")

    print("\n" + "=" * 70)
    if success:
        print("✅ All operations completed successfully!")
        print(f"  • Open visualizations: {log_dir}/*.html")
    else:
        print("⚠️  Some operations had errors. Check output above.")
    print("=" * 70)


if __name__ == "__main__":
    main()
