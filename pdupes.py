#!/usr/bin/env python3

import argparse, sys, time
import numpy
from tabulate import tabulate
from dtools import AggregationError, aggregate_counts, count_multi, count_symbols
from dtools.countTable import default_min_count

default_example = ['c', 'a', 'i', 'o', 'p', 'a']
long_example_size = 10000000
alphabet_size = 26

def arg_parser():
    parser = argparse.ArgumentParser(description='find symbols appearing at least twice, counted in parallel')
    parser.add_argument('symbols', type=str, nargs='*',
                        help='input text, all arguments are joined and every character is one symbol')
    parser.add_argument('-w', dest='workers', type=int, default=None,
                        help='number of worker threads (default: number of cpus, capped by input length)')
    parser.add_argument('-m', dest='min_count', type=int, default=default_min_count,
                        help='report symbols appearing at least this many times')
    parser.add_argument('-n', dest='long_size', type=int, default=long_example_size,
                        help='length of the long cyclic example, 0 to skip it')
    parser.add_argument('-s', dest='simple', action='store_true', default=False,
                        help='use the single-threaded version')
    parser.add_argument('-c', dest='show_counts', action='store_true', default=False,
                        help='print a table with the count of every reported symbol')
    parser.add_argument('-p', dest='progress', action='store_true', default=False,
                        help='show a progress bar over the dispatched chunks')
    parser.add_argument('-v', dest='verbose', action='store_true', default=False,
                        help='print progress messages')
    args = parser.parse_args()
    return args;

def print_progress(msg):
    print('[PROGRESS] '+msg)

def elapsed_millis(start, end):
    return int((end - start) * 1000)

def cyclic_alphabet(size, letters = alphabet_size):
    codes = (numpy.arange(size, dtype=numpy.int64) % letters + ord('a')).astype(numpy.uint8)
    return codes.tobytes().decode('ascii')

def format_duplicates(duplicates):
    return '{' + ', '.join("'" + str(s) + "'" for s in sorted(duplicates)) + '}'

def printCounts(counts, duplicates):
    rows = [(s, counts[s]) for s in sorted(duplicates)]
    print(tabulate(rows, ['Symbol', 'Count']))

def find_duplicates(sequence, args):
    if args.simple:
        counts = count_symbols(sequence)
        duplicates = count_multi(sequence, args.min_count)
    else:
        counts = aggregate_counts(sequence, args.workers, args.progress)
        duplicates = set(s for s in counts.keys() if counts[s] >= args.min_count)
    return counts, duplicates

def run_example(name, sequence, args):
    version = 'Single Thread' if args.simple else 'Thread Pool'
    if args.verbose:
        print_progress('counting %d symbols' % len(sequence))
    start = time.perf_counter()
    counts, duplicates = find_duplicates(sequence, args)
    end = time.perf_counter()
    print('Symbols appearing at least %d times (%s): %s' % (args.min_count, version, format_duplicates(duplicates)))
    if args.show_counts:
        printCounts(counts, duplicates)
    print('%s execution time for %d symbols - %d Millis\n' % (name, len(sequence), elapsed_millis(start, end)))

def main():
    args = arg_parser()
    if args.min_count < 1:
        print('min count must be at least 1', file=sys.stderr)
        return 2
    if args.workers is not None and args.workers < 1:
        print('worker count must be at least 1', file=sys.stderr)
        return 2

    if len(args.symbols) > 0:
        example1 = ''.join(args.symbols)
    else:
        example1 = default_example

    try:
        print('--- Example_1 ---')
        run_example('Example_1', example1, args)
        if args.long_size > 0:
            print('--- Example_2: %d symbols cycling through %d letters ---' % (args.long_size, alphabet_size))
            if args.verbose:
                print_progress('generating input')
            run_example('Example_2', cyclic_alphabet(args.long_size), args)
    except AggregationError as e:
        print('Error during parallel counting: ' + str(e), file=sys.stderr)
        return 1
    return 0

if __name__ == '__main__' :
    sys.exit(main())
