import argparse
from importlib import import_module
import inspect
import sys
from typing import List, Optional, Type

from .adapter import RawAdapter
from ..TEG.errors import TEGError


ADAPTERS = ["dblp", "imdb", "wiki"]


def find_adapter_class(module_name) -> Type[RawAdapter]:
    module = import_module(module_name)
    target = None

    # Return the last class in the module file that is the subclass of `RawAdapter`.
    for _, obj in inspect.getmembers(module):
        if inspect.isclass(obj) and issubclass(obj, RawAdapter) and obj.__module__ == module_name:
            target = obj

    assert target is not None, f"No `RawAdapter` subclass is defined in `{module_name}`."
    return target


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if len(argv) == 0 or argv[0] not in ADAPTERS:
        print(f"usage: python -m tegprep.dataset.adapters.run {{{','.join(ADAPTERS)}}} input [-o OUTPUT] [--simplify] [--no-progress]", flush=True)
        return 2

    script_name = argv.pop(0)
    module_name = f"{__package__}.{script_name}"
    cls_adapter = find_adapter_class(module_name)

    parser = argparse.ArgumentParser(f"*** {cls_adapter.__name__} ***", parents=[cls_adapter.get_parser()])
    args = parser.parse_args(argv)

    adapter: RawAdapter = cls_adapter(show_progress=not args.no_progress)
    try:
        written = adapter.create_data(args.input, args.output, args.simplify)
    except TEGError as e:
        print(f"ERROR: {type(e).__name__}: {e}", flush=True)
        return 1
    except OSError as e:
        print(f"ERROR: I/O failure: {e}", flush=True)
        return 1

    for path, num_lines in written.items():
        print(f"INFO: {num_lines} lines written to {path}.", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
