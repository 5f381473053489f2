import argparse
import sys

from ._dok import SparseMatrix
from ._errors import SparseMatrixError
from ._io import load_txt, save_txt

OPERATIONS = {
    "add": SparseMatrix.add,
    "subtract": SparseMatrix.subtract,
    "multiply": SparseMatrix.multiply,
}


def _build_parser():
    p = argparse.ArgumentParser(
        prog="sparsemat",
        description="Add, subtract or multiply two sparse matrices stored in the entry-list text format.",
    )
    p.add_argument("operation", nargs="?", help="One of: add, subtract, multiply. Prompted for if omitted.")
    p.add_argument("first", nargs="?", help="Path to the first matrix file. Prompted for if omitted.")
    p.add_argument("second", nargs="?", help="Path to the second matrix file. Prompted for if omitted.")
    p.add_argument("-o", "--output", help="Write the result to this file instead of printing it")
    p.add_argument(
        "--sum-duplicates",
        action="store_true",
        help="Sum repeated coordinates in the input files instead of keeping the last value",
    )
    return p


def _print_result(result, file):
    print(f"Result matrix ({result.num_rows} x {result.num_cols}):", file=file)
    for row, col, value in result.entries():
        print(f"({row}, {col}, {value})", file=file)


def main(argv=None):
    args = _build_parser().parse_intermixed_args(argv)

    try:
        operation = args.operation or input("Choose operation (add, subtract, multiply): ")
        first = args.first or input("Enter path to first matrix file: ")
        second = args.second or input("Enter path to second matrix file: ")

        func = OPERATIONS.get(operation.strip().lower())
        if func is None:
            raise ValueError("Invalid operation. Choose add, subtract, or multiply.")

        a = load_txt(first.strip(), sum_duplicates=args.sum_duplicates)
        b = load_txt(second.strip(), sum_duplicates=args.sum_duplicates)
        result = func(a, b)

        if args.output:
            save_txt(args.output, result)
        else:
            _print_result(result, sys.stdout)
    except (SparseMatrixError, OSError, ValueError, EOFError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0
