from enum import Enum
from typing import Optional, Type, TypeVar, Union

T = TypeVar('T')
E = TypeVar('E', bound=Enum)

def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default

def enum_or_default(value: Union[E, str, None], enum_cls: Type[E], default: E) -> E:
    """Coerce an enum member or its string value; None gives the default.

    Raises:
        ValueError: if the string is not a value of enum_cls
    """
    if value is None:
        return default
    if isinstance(value, enum_cls):
        return value
    return enum_cls(str(value).lower())
