import sys
import argparse
import logging

import numpy as np
from . import Permutation, Combination, BaseN, PowerSet, CartesianProduct, CombinatoricsError

logger = logging.getLogger(__name__)

KINDS = {
    'permutation': Permutation,
    'combination': Combination,
    'base-n': BaseN,
    'power-set': PowerSet,
}

INDEX_TYPES = {
    'int': int,
    'int64': np.int64,
}


def create_cli_interface() -> argparse.ArgumentParser:
    """build the argument parser for the demo cli"""
    parser = argparse.ArgumentParser(
        prog='combidex',
        description='print the size of a combinatorial structure and one of its elements',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
examples:
  python -m combidex permutation abcd --size 2 --rank 0
  python -m combidex permutation --range 100
  python -m combidex product ab xyz --rank 5
        '''
    )

    parser.add_argument('kind', choices=[*KINDS, 'product'], help='structure to build')
    parser.add_argument('seed', nargs='*',
                        help='seed characters; for product, one string per component')
    parser.add_argument('--range', type=int, dest='range_size', help='use 0..N-1 as the seed instead')
    parser.add_argument('--size', type=int, help='selection size (default: seed length)')
    parser.add_argument('--rank', type=int, help='rank to show (default: the last one)')
    parser.add_argument('--index-type', choices=list(INDEX_TYPES), default='int',
                        help='integer type for counts and ranks (default: int)')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')

    return parser


def build(args: argparse.Namespace):
    index_type = INDEX_TYPES[args.index_type]
    if args.kind == 'product':
        return CartesianProduct(*args.seed, index_type=index_type)

    seed = range(args.range_size) if args.range_size is not None else ''.join(args.seed)
    if args.kind == 'power-set':
        return PowerSet(seed, index_type=index_type)
    return KINDS[args.kind](seed, args.size, index_type)


def main(argv=None) -> int:
    """main entry point for the demo cli"""
    parser = create_cli_interface()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(message)s')

    try:
        structure = build(args)
        rank = structure.count - 1 if args.rank is None else args.rank
        element = structure[rank]
    except (CombinatoricsError, OverflowError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    print(f"count == {structure.count}")
    print(f"[{rank}] == {element}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
