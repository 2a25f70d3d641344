"""Crank sweep CLI.

Usage:
    python -m prbmech.cli.run_sweep --step 1 --half-range 180 --outdir outputs/sweep

Outputs the sweep summary as JSON to stdout and optionally saves the archive.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from pydantic import ValidationError

from .common import add_config_args, fail, resolve_config


def main(argv: list[str] | None = None) -> int:
    """Run a crank sweep.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success, 2 = invalid input).
    """
    parser = argparse.ArgumentParser(description="Sweep the crank angle around theta20")
    parser.add_argument("--step", type=float, default=None, help="Angular step (deg)")
    parser.add_argument("--half-range", type=float, default=None, help="Half sweep width (deg)")
    parser.add_argument("--valid-only", action="store_true", help="Drop unassemblable points")
    parser.add_argument("--outdir", type=str, default=None, help="Directory for sweep archive")
    parser.add_argument("--records", action="store_true", help="Include per-point records")
    add_config_args(parser)

    args = parser.parse_args(argv)

    from ..analysis.sweep import crank_sweep_angles, run_sweep
    from ..analysis.sweep_io import save_sweep
    from ..core.config import merge_config
    from ..core.logging import get_logger, set_log_level

    set_log_level(args.log_level)
    logger = get_logger(__name__)

    overrides: dict[str, object] = {}
    if args.step is not None:
        overrides["step_deg"] = args.step
    if args.half_range is not None:
        overrides["half_range_deg"] = args.half_range
    if args.valid_only:
        overrides["valid_only"] = True

    try:
        config = resolve_config(args)
        if overrides:
            config = merge_config(config, {"sweep": overrides})
        params = config.to_params()
    except (FileNotFoundError, ValidationError, ValueError, KeyError) as exc:
        return fail(str(exc))

    angles = crank_sweep_angles(params, config.sweep.half_range_deg, config.sweep.step_deg)
    result = run_sweep(params, angles)
    if config.sweep.valid_only:
        result = result.valid()

    summary = result.summary()
    logger.info("sweep complete", n_points=summary["n_points"], n_valid=summary["n_valid"])

    if args.outdir is not None:
        outdir = Path(args.outdir)
        save_sweep(outdir, result, params)
        logger.info("sweep archive saved", outdir=str(outdir))

    output: dict[str, object] = {"params": params.to_dict(), "summary": summary}
    if args.records:
        output["records"] = result.to_records()

    print(json.dumps(output, indent=2))

    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main())
