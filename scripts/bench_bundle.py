#!/usr/bin/env python3
"""
Bundle Benchmark

Times a locale bundle on a single input. The default input is the last
alternative of the Russian bundle, so every alternative before it is tried.

Usage:
    python scripts/bench_bundle.py
    python scripts/bench_bundle.py --locale en --order mdy --text Sunday
"""

import sys
import argparse
import timeit
from pathlib import Path

# Add project to path
project_dir = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_dir))

from date_fragments.i18n import LOCALES, ORDERS, get_bundle


def bench(locale: str, order: str, text: str, number: int, repeat: int) -> float:
    """Return the best time per call in microseconds"""
    bundle = get_bundle(locale, order)
    timings = timeit.repeat(lambda: bundle(text), number=number, repeat=repeat)
    return min(timings) / number * 1e6


def main():
    parser = argparse.ArgumentParser(description='Benchmark a date bundle parser')
    parser.add_argument('--locale', choices=LOCALES, default='ru')
    parser.add_argument('--order', choices=ORDERS, default='dmy')
    parser.add_argument('--text', default='Воскресенье')
    parser.add_argument('--number', type=int, default=10000)
    parser.add_argument('--repeat', type=int, default=5)
    args = parser.parse_args()

    best = bench(args.locale, args.order, args.text, args.number, args.repeat)
    print(f"{args.locale} bundle_{args.order}({args.text!r}): {best:.2f} us per call")


if __name__ == "__main__":
    main()
