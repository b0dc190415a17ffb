from typing import Set, Tuple

from .errors import IdSpaceError


def check_zero_based(ids: Set[int], kind: str) -> None:
    if len(ids) == 0:
        raise IdSpaceError(f"No {kind} ids were found; the {kind} id space is empty.")

    min_id = min(ids)
    if min_id != 0:
        raise IdSpaceError(f"The {kind} id space is not zero-based: min {kind} id is {min_id}.")


def check_dense(ids: Set[int], kind: str) -> int:
    """ Verifies `max - min + 1 == len(ids)` and returns the size of the id space. """
    min_id, max_id = min(ids), max(ids)
    if max_id - min_id + 1 != len(ids):
        raise IdSpaceError(
            f"The {kind} id space is not dense: max {kind} id is {max_id} but only {len(ids)} distinct ids exist.")

    return len(ids)


def validate_id_spaces(vertices: Set[int], timestamps: Set[int]) -> Tuple[int, int]:
    """ Returns `(num_vertices, num_snapshots)`.

    Both id spaces are checked for zero-basedness before either is checked for density,
    so `({0, 2}, {3})` is reported as a timestamp zero-based violation.
    """
    id_spaces = (("vertex", vertices), ("timestamp", timestamps))
    for kind, ids in id_spaces:
        check_zero_based(ids, kind)

    num_vertices, num_snapshots = (check_dense(ids, kind) for kind, ids in id_spaces)
    return num_vertices, num_snapshots
