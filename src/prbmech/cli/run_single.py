"""Single crank angle evaluation CLI.

Usage:
    python -m prbmech.cli.run_single --theta2 -90 --joints

Outputs JSON with the mechanism state (and joint positions) to stdout.
"""

from __future__ import annotations

import argparse
import json

from pydantic import ValidationError

from .common import add_config_args, fail, resolve_config


def main(argv: list[str] | None = None) -> int:
    """Run single crank angle evaluation.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success, 2 = invalid input).
    """
    parser = argparse.ArgumentParser(description="Evaluate the PRB mechanism at one crank angle")
    parser.add_argument("--theta2", type=float, default=None, help="Crank angle (deg), default theta20")
    parser.add_argument("--joints", action="store_true", help="Include joint positions")
    add_config_args(parser)

    args = parser.parse_args(argv)

    from ..core.evaluator import evaluate
    from ..core.logging import get_logger, set_log_level
    from ..core.projection import project

    set_log_level(args.log_level)
    logger = get_logger(__name__)

    try:
        config = resolve_config(args)
        params = config.to_params()
    except (FileNotFoundError, ValidationError, ValueError, KeyError) as exc:
        return fail(str(exc))

    theta2 = params.theta20 if args.theta2 is None else args.theta2
    state = evaluate(theta2, params)
    if not state.is_valid:
        logger.warn("mechanism cannot assemble at this crank angle", theta2=theta2)

    output = {
        "params": params.to_dict(),
        "state": state.to_dict(),
    }
    if args.joints and state.is_valid:
        output["joints"] = project(state, params).to_dict()

    print(json.dumps(output, indent=2))

    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main())
