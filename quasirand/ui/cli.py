"""Command-line demonstration of the quasirand generators."""

import argparse
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from quasirand.engine import QuasiRandom
from quasirand.foundation import (
    DEFAULT_SEED, GeneratorConfig, discrepancy, load_config
)
from quasirand.foundation.logging_config import get_logger, setup_logging
from quasirand.plugins.samplers import get_sampler, list_samplers

logger = get_logger(__name__)
console = Console()


def print_output(text: str, style: Optional[str] = None):
    """Print with rich markup when a style is given."""
    if style:
        console.print(f"[{style}]{escape(text)}[/{style}]")
    else:
        console.print(text)


def create_table(title: str, columns: List[str]) -> Table:
    """Create a rich table with the given columns."""
    table = Table(title=title)
    for col in columns:
        table.add_column(col)
    return table


def _build_config(args) -> GeneratorConfig:
    if args.config:
        config = load_config(args.config)
    else:
        config = GeneratorConfig()

    if args.dim is not None:
        config.dimension = args.dim
    if args.seed is not None:
        config.seed = args.seed
    if args.dtype is not None:
        config.dtype = args.dtype
    return config


def _format_point(point) -> List[str]:
    return [f"{float(c):.6f}" for c in point]


def cmd_generate(args):
    """Print the first points of the sequence, then one point by index."""
    config = _build_config(args)
    qrng = QuasiRandom.from_config(config)
    logger.info(f"Generating {args.count} points: dim={qrng.dim}, seed={float(qrng.seed)}")

    if args.plain:
        for _ in range(args.count):
            print("\t".join(_format_point(qrng.step())))
        print("\t".join(_format_point(qrng.evaluate(args.index))))
        return

    table = create_table(
        f"R-sequence, dim={qrng.dim}, seed={float(qrng.seed)}",
        ["n"] + [f"x{i}" for i in range(qrng.dim)],
    )
    for n in range(1, args.count + 1):
        table.add_row(str(n), *_format_point(qrng.step()))
    console.print(table)

    print_output(f"\nPoint {args.index}: " + "  ".join(_format_point(qrng.evaluate(args.index))), "bold")


def cmd_compare(args):
    """Compare the uniformity of the registered samplers."""
    table = create_table(
        f"Discrepancy ({args.method}), d={args.dim}, n={args.count}",
        ["Sampler", "Discrepancy"],
    )
    for name in list_samplers():
        sampler = get_sampler(name)
        params = {}
        if name != "r_sequence" and args.rng_seed is not None:
            params['seed'] = args.rng_seed
        sample = sampler.generate(args.dim, args.count, **params)
        table.add_row(name, f"{discrepancy(sample, method=args.method):.6g}")
    console.print(table)


def cmd_plugins(args):
    """List available samplers."""
    print_output("\nAvailable samplers", "bold blue")
    print("-" * 50)
    for name in list_samplers():
        print(f"  • {name}: {get_sampler(name).description}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog='quasirand',
        description='Quasi-random (low-discrepancy) point generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print 100 points in 2 dimensions, then the 500th point
  quasirand generate --dim 2 --count 100 --index 500

  # Use settings from a YAML file
  quasirand generate --config configs/presets/default_generator.yaml

  # Compare samplers
  quasirand compare --dim 3 --count 256
        """
    )

    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: WARNING)')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    parser_generate = subparsers.add_parser('generate', help='Print points of the sequence')
    parser_generate.add_argument('--config', help='Path to YAML generator config')
    parser_generate.add_argument('--dim', type=int, help='Number of dimensions (default: 2)')
    parser_generate.add_argument('--seed', type=float,
                                 help=f'Seed in [0.0, 1.0) (default: {DEFAULT_SEED})')
    parser_generate.add_argument('--dtype', choices=['float32', 'float64', 'longdouble'],
                                 help='Floating point precision (default: float64)')
    parser_generate.add_argument('--count', type=int, default=100, help='Points to print')
    parser_generate.add_argument('--index', type=int, default=500,
                                 help='Index of the point evaluated directly')
    parser_generate.add_argument('--plain', action='store_true',
                                 help='Tab separated output without formatting')
    parser_generate.set_defaults(func=cmd_generate)

    parser_compare = subparsers.add_parser('compare', help='Compare sampler discrepancy')
    parser_compare.add_argument('--dim', type=int, default=2, help='Number of dimensions')
    parser_compare.add_argument('--count', type=int, default=256, help='Number of points')
    parser_compare.add_argument('--method', choices=['CD', 'WD', 'MD', 'L2-star'],
                                default='CD', help='Discrepancy measure')
    parser_compare.add_argument('--rng-seed', type=int, default=None,
                                help='Scrambling seed for Halton and Sobol')
    parser_compare.set_defaults(func=cmd_compare)

    parser_plugins = subparsers.add_parser('plugins', help='List available samplers')
    parser_plugins.set_defaults(func=cmd_plugins)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(level=args.log_level)

    try:
        args.func(args)
    except ValueError as e:
        logger.error(f"Invalid arguments: {e}")
        print_output(f"✗ {e}", "red")
        return 2

    return 0


if __name__ == '__main__':
    sys.exit(main())
