from typing import Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


def move(items: Sequence[T], from_index: int, to_index: int) -> Tuple[T, ...]:
    """
    Array move: the element at from_index lands at to_index and every
    element between the two positions shifts by one slot.
    """
    moved = list(items)
    moved.insert(to_index, moved.pop(from_index))
    return tuple(moved)


def reorder_selection(
    selection: Optional[int], from_index: int, to_index: int
) -> Optional[int]:
    """Where the selected position ends up after a move, in either direction."""
    if selection is None:
        return None

    if selection == from_index:
        return to_index

    if from_index < selection <= to_index:
        return selection - 1

    if to_index <= selection < from_index:
        return selection + 1

    return selection


def reorder(
    items: Sequence[T],
    from_index: int,
    to_index: int,
    selection: Optional[int],
) -> Tuple[Tuple[T, ...], Optional[int]]:
    return (
        move(items, from_index, to_index),
        reorder_selection(selection, from_index, to_index),
    )
