# shopapp/services/mapping.py
from typing import Iterable

from pydantic import BaseModel


def apply_fields(
    source: BaseModel,
    target,
    skip: Iterable[str] = ("id",),
    exclude_unset: bool = True,
    exclude_none: bool = True,
):
    """Copy the payload's fields onto an ORM object that has attributes of the same name.

    Fields listed in ``skip`` and fields the target does not define are left alone.
    Returns the target so calls can be chained.
    """
    values = source.model_dump(exclude_unset=exclude_unset, exclude_none=exclude_none)
    skipped = set(skip)
    for field, value in values.items():
        if field in skipped or not hasattr(type(target), field):
            continue
        setattr(target, field, value)
    return target
