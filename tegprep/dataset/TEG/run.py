import sys
from typing import List, Optional

from .errors import TEGError
from .preprocessor import InsertedDeletionsPreprocessor


def main(argv: Optional[List[str]] = None) -> int:
    parser = InsertedDeletionsPreprocessor.get_parser()
    args = parser.parse_args(argv)

    preprocessor = InsertedDeletionsPreprocessor(seed=args.seed, show_progress=not args.no_progress)
    try:
        result = preprocessor.process(args.input, args.output)
    except TEGError as e:
        print(f"ERROR: {type(e).__name__}: {e}", flush=True)
        return 1
    except OSError as e:
        print(f"ERROR: I/O failure: {e}", flush=True)
        return 1

    print(f"INFO: {result.num_lines_written} edges with deletions written to {result.output_path} in {result.elapsed_s: .4f}s.", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
