from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from gradfit.classic.linear.cost import compute_cost
from gradfit.classic.linear.gradient_descent import descend
from gradfit.classic.linear.predict import predict as predict_one
from gradfit.config import RunConfig
from gradfit.core.errors import GradfitError
from gradfit.core.io import ensure_dir, save_json
from gradfit.core.logs import setup_logging
from gradfit.core.manifest import write_manifest
from gradfit.core.timers import timed
from gradfit.data.design import build_design_matrix
from gradfit.data.loader import load_dataset
from gradfit.linalg.matrix import Matrix

VERSION = "0.1.0"

app = typer.Typer(add_completion=False)


def _parse_features(raw: str) -> List[float]:
    return [float(v) for v in raw.split(",") if v.strip()]


@app.command()
def main(
    data: Optional[Path] = typer.Argument(None, help="Headerless CSV, label in the last column"),
    config: Optional[Path] = typer.Option(None, help="YAML run config"),
    alpha: Optional[float] = typer.Option(None, help="Learning rate"),
    iterations: Optional[int] = typer.Option(None, help="Number of full-batch updates"),
    tol: Optional[float] = typer.Option(None, help="Stop early once the cost changes by less than this"),
    delimiter: Optional[str] = typer.Option(None, help="Field delimiter"),
    label_column: Optional[int] = typer.Option(None, help="Index of the label column"),
    theta0: Optional[List[float]] = typer.Option(None, help="Initial theta entry (repeat per entry)"),
    predict: Optional[List[str]] = typer.Option(None, help="Comma-separated features to score (repeatable)"),
    scale: Optional[float] = typer.Option(None, help="Multiply printed predictions by this"),
    out: Optional[Path] = typer.Option(None, help="Write result.json and manifest.json here"),
    log_level: Optional[str] = typer.Option(None, help="DEBUG / INFO / WARNING"),
):
    """Fit a linear model by batch gradient descent and report cost, theta and predictions."""
    try:
        cfg = RunConfig.from_yaml(config) if config else RunConfig()
        cfg = cfg.override(
            data=str(data) if data else None,
            alpha=alpha,
            iterations=iterations,
            tol=tol,
            delimiter=delimiter,
            label_column=label_column,
            theta0=list(theta0) if theta0 else None,
            predict=[_parse_features(p) for p in predict] if predict else None,
            scale=scale,
            log_level=log_level,
        ).validate()
    except (GradfitError, OSError, ValueError) as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)

    log = setup_logging(cfg.log_level, cfg.log_file)
    if not cfg.data:
        typer.echo("error: no data file; pass DATA or set `data` in the config", err=True)
        raise typer.Exit(code=1)

    try:
        with timed("linreg"):
            ds = load_dataset(cfg.data, delimiter=cfg.delimiter)
            X, y = build_design_matrix(ds, label_column=cfg.label_column)
            theta_init = Matrix.column(cfg.theta0) if cfg.theta0 is not None else Matrix.zeros(X.cols)
            initial_cost = compute_cost(X, y, theta_init)
            res = descend(
                X, y, theta_init, cfg.alpha, cfg.policy(), record_cost=True, log_every=cfg.log_every
            )
            final_cost = res.final_cost if res.cost_history else initial_cost
            predictions = [predict_one(res.theta, feats) * cfg.scale for feats in cfg.predict]
    except (GradfitError, OSError) as e:
        log.error(str(e))
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"With theta = {theta_init.tolist()}")
    typer.echo(f"Computed cost = {initial_cost:.6f}")
    typer.echo(f"Theta found by gradient descent: {res.theta.tolist()}")
    typer.echo(f"Final cost = {final_cost:.6f} after {res.iterations_run} iterations")
    for feats, p in zip(cfg.predict, predictions):
        typer.echo(f"Prediction for {feats}: {p:.6f}")

    if out is not None:
        out_dir = ensure_dir(out)
        result_path = out_dir / "result.json"
        save_json(
            result_path,
            {
                "theta": res.theta.tolist(),
                "initial_cost": initial_cost,
                "final_cost": final_cost,
                "iterations_run": res.iterations_run,
                "converged": res.converged,
                "cost_history": list(res.cost_history),
                "predictions": [
                    {"features": feats, "value": p} for feats, p in zip(cfg.predict, predictions)
                ],
            },
        )
        write_manifest(
            out_dir,
            "classic/linreg",
            VERSION,
            str(config) if config else None,
            [cfg.data],
            {"result_json": str(result_path)},
        )
        typer.echo(f"[classic/linreg] wrote {result_path} and manifest.json")


if __name__ == "__main__":
    app()
