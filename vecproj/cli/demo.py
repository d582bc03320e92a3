from __future__ import annotations
import os
from typing import List, Optional, Tuple
import typer
from .config import Config, load_config
from ..lib.linalg import DegenerateBasisError, Vector, decompose, project, vector_type
from ..lib.utils import make_rng, write_jsonl
from ..lib.utils.demo_data import RandomSource, random_vector

app = typer.Typer(
    no_args_is_help=True,
    help="Vector projection and rejection demo CLI",
)

RESULTS_FILE = "results.jsonl"


def _setup(config: Optional[str], seed: Optional[int]) -> Tuple[Config, RandomSource]:
    cfg = load_config(config) if config else Config()
    if seed is not None:
        cfg = cfg.model_copy(update={"seed": seed})
    return cfg, make_rng(cfg.seed)


def projection_scenario(cfg: Config, rng: RandomSource) -> dict:
    """Project two random vectors onto each other to show order matters."""
    cls = vector_type(cfg.dimension)
    lo, hi = cfg.projection.low, cfg.projection.high
    a = random_vector(rng, cls, lo, hi)
    b = random_vector(rng, cls, lo, hi)
    proj_b_a = project(a, b)
    proj_a_b = project(b, a)
    typer.echo(f"a = {a}, b = {b}\nproj_b(a) = {proj_b_a}\nproj_a(b) = {proj_a_b}")
    return {
        "scenario": "projection",
        "a": a.to_list(),
        "b": b.to_list(),
        "proj_b_a": proj_b_a.to_list(),
        "proj_a_b": proj_a_b.to_list(),
    }


def force_scenario(cfg: Config, rng: RandomSource) -> dict:
    """Net force on a cart that can only move along its track."""
    cls = vector_type(cfg.dimension)
    f_push = random_vector(rng, cls, cfg.force.low, cfg.force.high)
    d = cls(*cfg.track_direction())
    f_net = project(f_push, d)
    typer.echo(f"Fpush: {f_push}\nF = proj_d(Fpush) = {f_net}")
    return {
        "scenario": "force",
        "f_push": f_push.to_list(),
        "track": d.to_list(),
        "f_net": f_net.to_list(),
    }


def rejection_scenario(cfg: Config, rng: RandomSource) -> dict:
    """Split a random vector into parts parallel and perpendicular to another."""
    cls = vector_type(cfg.dimension)
    lo, hi = cfg.rejection.low, cfg.rejection.high
    a: Vector = random_vector(rng, cls, lo, hi)
    b: Vector = random_vector(rng, cls, lo, hi)
    a_parallel, a_perp = decompose(a, b)
    recombined = a_parallel + a_perp
    # exact equality only holds by luck after rounding
    matches = recombined.approx_equal(a, cfg.tolerance)
    typer.echo(f"a = {a}, b = {b}\naParallel = {a_parallel}, aPerp = {a_perp}")
    if matches:
        typer.echo(f"Hence {a_parallel} + {a_perp} = {a}")
    else:
        typer.echo(f"{a_parallel} + {a_perp} = {recombined} differs from a beyond tolerance {cfg.tolerance:g}")
    return {
        "scenario": "rejection",
        "a": a.to_list(),
        "b": b.to_list(),
        "a_parallel": a_parallel.to_list(),
        "a_perp": a_perp.to_list(),
        "matches": bool(matches),
    }


def _write_records(cfg: Config, records: List[dict]) -> None:
    if not cfg.paths.output_dir:
        return
    outp = os.path.join(cfg.paths.output_dir, RESULTS_FILE)
    for r in records:
        r["seed"] = cfg.seed
    write_jsonl(outp, records, append=True)
    typer.echo(f"Wrote {outp}")


def _run_scenarios(config: Optional[str], seed: Optional[int], scenarios) -> List[dict]:
    cfg, rng = _setup(config, seed)
    records: List[dict] = []
    try:
        for scenario in scenarios:
            records.append(scenario(cfg, rng))
    except DegenerateBasisError as exc:
        typer.echo(f"Degenerate basis: {exc}", err=True)
        raise typer.Exit(code=2)
    _write_records(cfg, records)
    return records


@app.command("project")
def project_cmd(config: Optional[str] = None, seed: Optional[int] = None):
    """Projection and the cart-on-a-track force example."""
    _run_scenarios(config, seed, [projection_scenario, force_scenario])


@app.command("reject")
def reject_cmd(config: Optional[str] = None, seed: Optional[int] = None):
    """Decompose a vector into projection and rejection."""
    _run_scenarios(config, seed, [rejection_scenario])


@app.command("run")
def run(config: Optional[str] = None, seed: Optional[int] = None):
    """Every scenario, in tutorial order."""
    _run_scenarios(config, seed, [projection_scenario, force_scenario, rejection_scenario])


if __name__ == "__main__":
    app()
