# src/objectlessons/cli.py
"""
Command-line interface for the objectlessons package
"""

import argparse
import logging
import os
import platform
import sys

import psutil
import torch

from .config import LessonConfig
from .registry import LESSONS
from .runner import LessonRunner
from . import __version__


def format_bytes(bytes_value):
    """Format bytes to human-readable string."""
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if bytes_value < 1024.0:
            return f"{bytes_value:.2f} {unit}"
        bytes_value /= 1024.0
    return f"{bytes_value:.2f} PB"


def print_system_info():
    """Print the interpreter and process details the lessons depend on."""
    print(f"objectlessons v{__version__} - System Information")
    print("=" * 50)

    print("\nInterpreter:")
    print(f"  Python: {platform.python_version()} ({platform.python_implementation()})")
    print(f"  Platform: {platform.platform()}")
    if platform.python_implementation() != "CPython":
        print("  Note: string-identity results assume CPython constant interning")

    print("\nLibraries:")
    print(f"  PyTorch: {torch.__version__}")
    print(f"  psutil: {psutil.__version__}")

    process = psutil.Process(os.getpid())
    mem = process.memory_info()
    print("\nProcess:")
    print(f"  PID: {process.pid}")
    print(f"  RSS: {format_bytes(mem.rss)}")
    print(f"  VMS: {format_bytes(mem.vms)}")


def print_lessons():
    """Print one line per registered lesson."""
    width = max(len(name) for name in LESSONS)
    for name, info in LESSONS.items():
        marker = " [terminates]" if info.terminates else ""
        print(f"{name:<{width}}  {info.topic.value:<20}  {info.summary}{marker}")


def print_stats(stats):
    print("\n" + "=" * 50)
    print("Lesson Statistics:")
    for name, s in stats['lesson_stats'].items():
        print(f"  {name}: {s['total_memory']:+.2f} MB, {s['total_time'] * 1000:.2f} ms")
    print(f"  Peak memory delta: {stats['peak_memory_mb']:.2f} MB")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="objectlessons",
        description="objectlessons: small programs that demonstrate object semantics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  objectlessons list                           # Show every lesson
  objectlessons run list-of-objects            # Run one lesson
  objectlessons run all --include-terminating  # Run everything, stop at the first raise
  objectlessons run exit-in-handler --hard-exit
  objectlessons info                           # Show interpreter information
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'objectlessons v{__version__}'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('list', help='List available lessons')
    subparsers.add_parser('info', help='Show interpreter and process information')

    run_parser = subparsers.add_parser('run', help='Run one or more lessons')
    run_parser.add_argument(
        'lessons',
        nargs='+',
        metavar='LESSON',
        help="Lesson names, or 'all'"
    )
    run_parser.add_argument('-v', '--verbose', action='store_true', help='Log lesson diagnostics')
    run_parser.add_argument('--profile', action='store_true', help='Record memory and time per lesson')
    run_parser.add_argument(
        '--include-terminating',
        action='store_true',
        help="With 'all', also run lessons that end by raising or exiting"
    )
    run_parser.add_argument('--hard-exit', action='store_true', help='exit-in-handler uses os._exit')
    run_parser.add_argument('--exit-code', type=int, default=0, metavar='N', help='Exit status for exit-in-handler')
    run_parser.add_argument('--resource', metavar='PATH', help='File read by with-resource')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == 'list':
        print_lessons()
        return 0

    if args.command == 'info':
        print_system_info()
        return 0

    logging.basicConfig(format="%(levelname)s: %(message)s")

    config = LessonConfig(
        verbose=args.verbose,
        enable_profiling=args.profile,
        include_terminating=args.include_terminating,
        hard_exit=args.hard_exit,
        exit_code=args.exit_code,
        resource_path=args.resource,
    )
    if 'all' in args.lessons and len(args.lessons) > 1:
        parser.error("'all' runs every lesson and cannot be combined with lesson names")

    runner = LessonRunner(config)

    if args.lessons == ['all']:
        runner.run_all()
    else:
        unknown = [name for name in args.lessons if name not in LESSONS]
        if unknown:
            parser.error(f"unknown lesson(s): {', '.join(unknown)} (see 'objectlessons list')")
        runner.run_many(args.lessons)

    if config.enable_profiling:
        print_stats(runner.get_stats())
    return 0


if __name__ == "__main__":
    sys.exit(main())
