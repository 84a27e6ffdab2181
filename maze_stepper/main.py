import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'maze_stepper' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_stepper.maze import Maze
from maze_stepper.core.complexity import MazeAnalyzer

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Stepper: step-by-step perfect maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--width", type=int, default=100, help="Maze Width")
    gen_parser.add_argument("--height", type=int, default=100, help="Maze Height")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed (omit for entropy)")
    gen_parser.add_argument("--limit", type=int, default=None, help="Maximum number of steps")
    gen_parser.add_argument("--batch", type=int, default=None, help="Generate in batches of N steps, logging progress")
    gen_parser.add_argument("--stats", action="store_true", help="Print structural stats after generation")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time a full generation")
    bench_parser.add_argument("--size", type=int, default=500, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser

def cmd_generate(args, logger) -> int:
    if args.width <= 0 or args.height <= 0:
        logger.error(f"Width and height must be positive, got {args.width}x{args.height}")
        return 2
    if args.limit is not None and args.limit < 0:
        logger.error(f"Step limit must be non-negative, got {args.limit}")
        return 2
    if args.batch is not None and args.batch <= 0:
        logger.error(f"Batch size must be positive, got {args.batch}")
        return 2
    if args.seed is not None and not 0 <= args.seed < 2 ** 64:
        logger.error(f"Seed must be an unsigned 64-bit integer, got {args.seed}")
        return 2

    logger.info(f"Generating {args.width}x{args.height} maze (seed={args.seed})...")
    if args.seed is None:
        maze = Maze.new(args.width, args.height)
    else:
        maze = Maze.from_seed(args.width, args.height, args.seed)

    if args.batch:
        done = False
        remaining = args.limit
        while not done:
            budget = args.batch if remaining is None else min(args.batch, remaining)
            done = maze.generate(budget)
            if remaining is not None:
                remaining -= budget
                if remaining <= 0:
                    break
            logger.debug(f"Step {maze.step_count}: cursor={tuple(maze.cursor)} tail={len(maze.tail)}")
    else:
        done = maze.generate(args.limit)

    if done:
        print(f"Done in {maze.step_count} steps.")
    else:
        print(f"Paused after {maze.step_count} steps (limit reached).")

    if args.stats:
        stats = MazeAnalyzer.calculate_stats(maze.grid)
        logger.info(f"Stats: {stats}")
        print(f"Perfect: {MazeAnalyzer.is_perfect(maze.grid)}")
    return 0

def cmd_benchmark(args, logger) -> int:
    logger.info(f"Running benchmark (Size: {args.size}x{args.size})...")
    t0 = time.time()
    maze = Maze.from_seed(args.size, args.size, args.seed)
    maze.generate()
    duration = time.time() - t0

    cells = args.size * args.size
    print(f"{'CELLS':<12} | {'STEPS':<12} | {'TIME (s)':<10} | {'CELLS/SEC':<12}")
    print("-" * 54)
    print(f"{cells:<12} | {maze.step_count:<12} | {duration:<10.4f} | {cells / duration if duration else 0:<12,.0f}")
    return 0

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_stepper")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        return cmd_generate(args, logger)
    elif args.command == "benchmark":
        return cmd_benchmark(args, logger)
    return 0

if __name__ == "__main__":
    sys.exit(main())
