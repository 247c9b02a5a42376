"""
CLI entry point. Run as:

    python -m tworld DIM TX TY NUM_STEPS STEPS_FILE [--states FILE]
    python -m tworld --scenario cross
"""

import argparse
import sys

from .core.errors import ConfigurationError, ProtocolError, QueryTimeoutError
from .core.formula import DEFAULT_SOLVER
from .domains import SCENARIOS, load_steps, load_states
from .runner import run_steps_sequence, verify_steps_sequence
from .visualization import print_state, print_history


def build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Treasure World finder")
    parser.add_argument("world", nargs="*", metavar="ARG",
                        help="DIM TX TY NUM_STEPS STEPS_FILE")
    parser.add_argument("--scenario", choices=list(SCENARIOS.keys()), default=None,
                        help="Run a built-in scenario instead")
    parser.add_argument("--states",  type=str,   default=None,
                        help="Expected-state file; verify every step against it")
    parser.add_argument("--timeout", type=float, default=None,
                        help="Seconds allowed per entailment query")
    parser.add_argument("--solver",  type=str,   default=DEFAULT_SOLVER,
                        help="PySAT solver name")
    parser.add_argument("--save",    type=str,   default=None,
                        help="Checkpoint state to file after each step")
    parser.add_argument("--quiet",   action="store_true", help="Less output")
    return parser


def parse_world(parser, args):
    if args.scenario:
        if args.world:
            parser.error("give either --scenario or DIM TX TY NUM_STEPS STEPS_FILE")
        scenario = SCENARIOS[args.scenario]
        steps = scenario["steps"]
        return scenario["dim"], scenario["treasure"], len(steps), steps
    if not args.world:
        scenario = SCENARIOS["tworld1"]
        return scenario["dim"], scenario["treasure"], len(scenario["steps"]), scenario["steps"]
    if len(args.world) != 5:
        parser.error("expected DIM TX TY NUM_STEPS STEPS_FILE")
    try:
        dim, tx, ty, num_steps = (int(v) for v in args.world[:4])
    except ValueError:
        parser.error("DIM TX TY NUM_STEPS must be integers")
    return dim, (tx, ty), num_steps, load_steps(args.world[4], num_steps)


def main(argv=None):
    parser = build_argparser()
    args = parser.parse_args(argv)
    verbose = not args.quiet

    try:
        dim, treasure, num_steps, steps = parse_world(parser, args)
        print(f"Treasure World {dim}x{dim}, treasure at {treasure}, {num_steps} steps")

        if args.states:
            expected = load_states(args.states, dim, num_steps)
            state, mismatches = verify_steps_sequence(
                dim, treasure, steps, expected,
                timeout=args.timeout, solver_name=args.solver, verbose=verbose,
            )
            print_state(state)
            print_history(state)
            if mismatches:
                print(f"\nMismatching steps: {mismatches}")
                return 1
            print(f"\nAll {len(expected)} steps match the expected states.")
            return 0

        state = run_steps_sequence(
            dim, treasure, steps, num_steps=num_steps,
            timeout=args.timeout, solver_name=args.solver,
            save_path=args.save, verbose=verbose,
        )
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    except (ConfigurationError, ProtocolError, QueryTimeoutError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if not verbose:
        print_state(state)
    print_history(state)
    if args.save:
        print(f"State saved to {args.save}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
