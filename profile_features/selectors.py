"""Column selectors for the continuous ('cont') and discrete ('disc') roles.

A selector picks columns of a table either by name or by 1-based column
number. Raw caller input is turned into a ``NameSelector`` or an
``IndexSelector`` once by ``as_selector``; ``resolve_selector`` then maps
either kind onto the column names of a table.
"""

from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any, Optional, Sequence, Tuple, Union

import numpy as np

from .exceptions import SelectorNameError, SelectorRangeError, SelectorTypeError, format_values


@dataclass(frozen=True)
class NameSelector:
    """Columns picked by name."""

    names: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.names)


@dataclass(frozen=True)
class IndexSelector:
    """Columns picked by 1-based column number.

    Fractional entries are kept as given so resolution can report them.
    """

    indices: Tuple[Real, ...]

    def __len__(self) -> int:
        return len(self.indices)


ColumnSelector = Union[NameSelector, IndexSelector]


def _is_number(value: Any) -> bool:
    # bool is a Real, but True/False are not column numbers
    return isinstance(value, Real) and not isinstance(value, (bool, np.bool_))


def _as_index(value: Real) -> Real:
    # whole-valued floats are column numbers; anything else is left for the range check
    if isinstance(value, Integral):
        return int(value)
    value = float(value)
    return int(value) if value.is_integer() else value


def as_selector(raw: Any, name: str = 'cont') -> Optional[ColumnSelector]:
    """Convert caller input into a selector.

    Args:
        raw: ``None``, a column name, a column number, a sequence of either,
            or an existing selector
        name: Parameter name used in error messages

    Returns:
        A ``NameSelector`` or ``IndexSelector``, or ``None`` when no columns
        were given

    Raises:
        SelectorTypeError: If the entries are neither all names nor all
            numbers
    """
    if raw is None:
        return None

    if isinstance(raw, (NameSelector, IndexSelector)):
        return raw if len(raw) else None

    if isinstance(raw, str) or _is_number(raw):
        entries = [raw]
    elif isinstance(raw, (bytes, dict)) or not hasattr(raw, '__iter__'):
        raise SelectorTypeError(
            f"'{name}' must be column names or column numbers of 'data', got {type(raw).__name__}",
            parameter=name,
            values=raw,
        )
    else:
        entries = list(raw)

    if not entries:
        return None

    if all(isinstance(v, str) for v in entries):
        return NameSelector(tuple(str(v) for v in entries))

    if all(_is_number(v) for v in entries):
        return IndexSelector(tuple(_as_index(v) for v in entries))

    if any(isinstance(v, str) for v in entries):
        offending = [v for v in entries if not isinstance(v, str)]
        raise SelectorTypeError(
            f"'{name}' mixes column names with other values: {format_values(offending)}",
            parameter=name,
            values=offending,
        )

    offending = [v for v in entries if not _is_number(v)]
    raise SelectorTypeError(
        f"Non-character entries to '{name}' must be numeric, indicating the column "
        f"numbers of 'data': {format_values(offending)}",
        parameter=name,
        values=offending,
    )


def resolve_selector(
    selector: Any,
    column_names: Sequence[Any],
    name: str = 'cont'
) -> Optional[Tuple[Any, ...]]:
    """Resolve a selector to column names of a table.

    Order is preserved and repeated entries are kept as given.

    Args:
        selector: A selector or raw selector input (see ``as_selector``)
        column_names: Column names of the table, in table order
        name: Parameter name used in error messages

    Returns:
        Tuple of column names, or ``None`` if the selector is absent

    Raises:
        SelectorTypeError: If the entries are neither names nor column numbers
        SelectorRangeError: If a column number is not a whole number in
            [1, len(column_names)]
        SelectorNameError: If a name is not among ``column_names``
    """
    selector = as_selector(selector, name)
    if selector is None:
        return None

    column_names = list(column_names)

    if isinstance(selector, IndexSelector):
        n_cols = len(column_names)
        outside = list(dict.fromkeys(
            i for i in selector.indices if not (isinstance(i, Integral) and 1 <= i <= n_cols)
        ))
        if outside:
            raise SelectorRangeError(
                f"The following column indexes provided to '{name}' are outside the "
                f"range of the columns of 'data' (1-{n_cols}): {format_values(outside)}",
                parameter=name,
                values=outside,
            )
        return tuple(column_names[i - 1] for i in selector.indices)

    known = set(column_names)
    missing = list(dict.fromkeys(v for v in selector.names if v not in known))
    if missing:
        raise SelectorNameError(
            f"Invalid values for '{name}': {format_values(missing)} "
            f"are not in the column names of 'data'",
            parameter=name,
            values=missing,
        )
    return selector.names
