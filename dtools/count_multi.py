#!/usr/bin/env python3

"""
Single-threaded duplicate counting, one pass over the symbols.
Also used as the reference result for the parallel aggregator.
"""

import argparse
from dtools.countTable import default_min_count

def arg_parser():
    parser = argparse.ArgumentParser(description='Analyze symbols that appeared more than once')
    parser.add_argument('symbols', type=str, nargs='+',
                        help='symbols to count, each argument is one symbol')
    parser.add_argument('-m', dest='min_count', type=int, default=default_min_count,
                        help='report symbols appearing at least this many times')
    args = parser.parse_args()
    return args

def count_symbols(symbols):
    counts = {}
    for s in symbols:
        if s in counts.keys():
            counts[s] += 1
        else:
            counts[s] = 1
    return counts

def count_multi(symbols, min_count = default_min_count):
    if min_count < 1:
        raise ValueError('min_count must be at least 1, got ' + str(min_count))
    counts = count_symbols(symbols)
    results = set()
    for i in counts.keys():
        if counts[i] >= min_count:
            results.add(i)
    return results

def main():
    args = arg_parser()
    print(sorted(count_multi(args.symbols, args.min_count)))

if __name__ == '__main__':
    main()
