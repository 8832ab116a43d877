# examples/basic_example.py
"""
Basic example of running objectlessons from Python
"""

from objectlessons import LessonConfig, LessonRunner, LESSONS
from objectlessons.copying import list_of_objects
from objectlessons.exceptions import try_without_except


def direct_call_example():
    """Every lesson is a plain function."""
    print("=== Direct Call Example ===")
    observed = list_of_objects()
    print(f"✓ Shallow copy shares elements: {observed['shallow_shares_elements']}")
    print(f"✓ Deep copy shares elements: {observed['deep_shares_elements']}")


def runner_example():
    """Run every non-terminating lesson with profiling."""
    print("\n=== Runner Example ===")
    config = LessonConfig(enable_profiling=True)
    runner = LessonRunner(config)
    runner.run_all()

    stats = runner.get_stats()
    print(f"\n✓ Completed {len(stats['completed'])} of {len(LESSONS)} lessons")
    print(f"  Peak memory delta: {stats['peak_memory_mb']:.2f} MB")


def propagation_example():
    """Terminating lessons raise to their caller."""
    print("\n=== Propagation Example ===")
    try:
        try_without_except()
    except ZeroDivisionError as e:
        print(f"✓ Caller received {type(e).__name__}: {e}")


def main():
    direct_call_example()
    runner_example()
    propagation_example()


if __name__ == "__main__":
    main()
