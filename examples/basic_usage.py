#!/usr/bin/env python3
"""
Basic usage examples for lazyseq.
"""

import logging

from lazyseq import (
    AlreadyConsumedError,
    NumericKind,
    Seq,
    SeqConfig,
    seq,
    of,
)


def example_pipeline():
    """Example: Filter and transform records lazily."""
    print("\n=== Pipeline Example ===")

    # Create sample data
    data = [
        {'name': 'Alice', 'age': 25, 'score': 85},
        {'name': 'Bob', 'age': 30, 'score': 90},
        {'name': 'Charlie', 'age': 25, 'score': 78},
        {'name': 'David', 'age': 30, 'score': 92},
        {'name': 'Eve', 'age': 25, 'score': 88},
    ]

    # Nothing is evaluated until to_list() pulls
    result = seq(data) \
        .filter(lambda x: x['age'] == 25) \
        .map(lambda x: {'name': x['name'], 'grade': 'A' if x['score'] >= 85 else 'B'}) \
        .to_list()

    print("Filtered and transformed data:")
    for item in result:
        print(f"  {item}")


def example_infinite_source():
    """Example: Take a finite prefix of an endless sequence."""
    print("\n=== Infinite Source Example ===")

    def naturals():
        n = 0
        while True:
            yield n
            n += 1

    squares = Seq(naturals).map(lambda n: n * n)
    print(f"First odd squares: {squares.filter(lambda n: n % 2).take(5).to_list()}")
    print(f"Squares 10..12: {squares.drop(10).take(3).to_list()}")


def example_reductions():
    """Example: Reduce a sequence to numbers."""
    print("\n=== Reductions Example ===")

    words = seq(["one", "two", "three", "four", "five"])
    print(f"Longest word: {words.max(len, NumericKind.INT)} letters")
    print(f"Average length: {words.average(len):.2f}")
    print(f"Statistics: {words.statistics(len)}")
    print(f"Empty minimum: {seq([]).min_optional()}")
    print(f"Concatenated: {words.take(3).fold('', lambda acc, w: acc + w[0])}")


def example_single_use():
    """Example: Sequences over iterators can only be consumed once."""
    print("\n=== Single-use Example ===")

    lines = seq(iter(["alpha", "beta", "alpha"]))
    print(f"Distinct lines: {lines.distinct().to_list()}")
    try:
        lines.count()
    except AlreadyConsumedError as e:
        print(f"Second pass refused: {e}")


def example_indexed():
    """Example: Indexed operations."""
    print("\n=== Indexed Example ===")

    letters = of("a", "b", "c", "d")
    print(f"Numbered: {letters.map_indexed(lambda i, x: f'{i}:{x}').to_list()}")
    print(f"Even positions: {letters.filter_indexed(lambda i, x: i % 2 == 0).to_list()}")


def main():
    """Run all examples."""
    print("=== lazyseq Examples ===")

    # Show every iterator the examples create
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    SeqConfig.set_defaults(trace_iterators=True)

    example_pipeline()
    example_infinite_source()
    example_reductions()
    example_single_use()
    example_indexed()

    print("\n=== All examples completed! ===")


if __name__ == "__main__":
    main()
