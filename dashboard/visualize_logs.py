from __future__ import annotations

import argparse
from pathlib import Path

import pandas as pd
import plotly.express as px


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Visualize shuttle simulator transfer logs with Plotly.")
    p.add_argument("--log", type=str, required=True, help="Path to transfers_*.csv")
    p.add_argument("--outdir", type=str, default="data/logs", help="Directory to write HTML plots")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    log_path = Path(args.log)
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    df = pd.read_csv(log_path)
    df_moves = df[(df["ok"] == 1) & (df["event"].isin(["pick_up", "drop_off"]))].copy()

    # Weight distribution of moved loads
    fig_weight = px.histogram(
        df_moves[df_moves["event"] == "pick_up"],
        x="weight",
        nbins=30,
        title="Weight of loads picked up",
    )
    weight_out = outdir / f"{log_path.stem}_weight_hist.html"
    fig_weight.write_html(weight_out)

    # Occupancy over time
    df_occ = df.melt(
        id_vars=["time"],
        value_vars=["truck_weight", "origin_weight", "destination_weight"],
        var_name="container",
        value_name="current_weight",
    )
    fig_occ = px.line(
        df_occ,
        x="time",
        y="current_weight",
        color="container",
        line_shape="hv",
        title="Container occupancy over time",
    )
    occ_out = outdir / f"{log_path.stem}_occupancy.html"
    fig_occ.write_html(occ_out)

    # Refused transfers by event
    df_refused = df[df["ok"] == 0].groupby("event", as_index=False).size()
    fig_refused = px.bar(
        df_refused,
        x="event",
        y="size",
        title="Refused transfers by event",
    )
    refused_out = outdir / f"{log_path.stem}_refused.html"
    fig_refused.write_html(refused_out)

    print(f"wrote={weight_out}")
    print(f"wrote={occ_out}")
    print(f"wrote={refused_out}")


if __name__ == "__main__":
    main()
