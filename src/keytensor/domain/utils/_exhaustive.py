"""
Load-time exhaustiveness checks for mappings keyed by enumerations.

Python has no compiler-enforced exhaustive ``match``. Tables that map every
member of an enumeration (or a filtered subset of it) to a value are therefore
checked once, when their defining module is imported: adding an enumerant
without extending every such table fails at import instead of surfacing later
as a silent gap.
"""

from enum import Enum
from typing import Callable, Iterable, Mapping, Optional, Type, TypeVar

E = TypeVar("E", bound=Enum)


def assert_exhaustive(
    table: Mapping[E, object],
    enum_cls: Type[E],
    *,
    name: str,
    include: Optional[Callable[[E], bool]] = None,
) -> None:
    """
    Verify that `table` is keyed by exactly the selected members of `enum_cls`.

    Parameters
    ----------
    table : Mapping[E, object]
        The mapping under test.
    enum_cls : Type[E]
        The enumeration the mapping must cover.
    name : str
        Human-readable table name used in the error message.
    include : Optional[Callable[[E], bool]]
        Predicate selecting which members must be present. Defaults to all.

    Raises
    ------
    RuntimeError
        If any selected member is missing or any key is not a selected member.
    """
    required = {m for m in enum_cls if include is None or include(m)}
    keys = set(table)
    missing = required - keys
    extra = keys - required
    if missing or extra:
        raise RuntimeError(
            f"{name} is not exhaustive over {enum_cls.__name__}: "
            f"missing={_names(missing)} unexpected={_names(extra)}"
        )


def _names(members: Iterable[object]) -> list[str]:
    return sorted(getattr(m, "name", repr(m)) for m in members)
