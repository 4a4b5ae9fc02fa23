import copy
import datetime
import json
import math
import warnings
from enum import Enum
from typing import Any, ClassVar, Dict, Iterable, List, Union

import numpy as np

NumOrString = Union[int, float, str]


class TruthyEnum:
    """
    Wraps an enum member for fields where plotly.js overloads one key to mean
    either a named mode or "disabled".

    Every member serializes to its string value, except a member whose value is
    "false", which serializes as the JSON boolean `false`.
    """

    __slots__ = ("value",)

    def __init__(self, value: Enum):
        self.value = value

    def for_json(self) -> Union[str, bool]:
        if self.value.value == "false":
            return False
        return self.value.value

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, TruthyEnum) and self.value == other.value

    def __repr__(self) -> str:
        return f"TruthyEnum({self.value!r})"


def num_or_string(value: Any) -> NumOrString:
    """
    Accepts a value for fields that take either a coordinate or a
    category/date label. Numbers stay numbers and strings stay strings.
    """
    if isinstance(value, np.datetime64):
        return str(np.datetime_as_string(value, unit="auto"))
    if isinstance(value, np.generic) and not isinstance(value, np.bool_):
        value = value.item()
    if isinstance(value, bool):
        raise TypeError("Expected a number or a string, got bool")
    if isinstance(value, (int, float, str)):
        return value
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    raise TypeError(f"Expected a number or a string, got {type(value).__name__}")


def num_or_string_array(values: Iterable[Any]) -> List[NumOrString]:
    return [num_or_string(v) for v in values]


def to_array(values: Any) -> Any:
    # numpy arrays are copied as arrays and flattened to lists during serialization
    if isinstance(values, np.ndarray):
        if values.dtype.kind == "M":
            return np.datetime_as_string(values, unit="auto")
        return values.copy()
    return list(values)


def to_json(data: Any) -> Any:
    """Convert configuration objects and values into plain JSON-compatible data."""
    if isinstance(data, Enum):
        return to_json(data.value)

    # datetime64 item() gives integers for ns precision
    if isinstance(data, np.datetime64):
        return str(np.datetime_as_string(data, unit="auto"))

    if isinstance(data, np.generic):
        return to_json(data.item())

    # Non-finite floats have no JSON representation
    if isinstance(data, float):
        if not math.isfinite(data):
            raise ValueError(f"Out of range float values are not JSON compliant: {data!r}")
        return data

    if isinstance(data, (str, int, bool)):
        return data

    if data is None:
        return None

    if isinstance(data, np.ndarray):
        if data.dtype.kind == "M":
            return np.datetime_as_string(data, unit="auto").tolist()
        return to_json(data.tolist())

    if isinstance(data, (datetime.date, datetime.datetime)):
        return data.isoformat()

    # Handle objects with custom serialization
    if hasattr(data, "for_json"):
        return to_json(data.for_json())

    if isinstance(data, dict):
        return {str(k): to_json(v) for k, v in data.items()}

    if isinstance(data, (list, tuple)):
        return [to_json(x) for x in data]

    if isinstance(data, Iterable):
        if not hasattr(data, "__len__") and not hasattr(data, "__getitem__"):
            warnings.warn(
                "Potentially exhaustible iterator encountered: generator", UserWarning
            )
        return [to_json(x) for x in data]

    raise TypeError(f"Object of type {type(data)} is not JSON serializable")


def dumps(data: Any) -> str:
    return json.dumps(to_json(data), allow_nan=False, separators=(",", ":"))


class PlotlyObject:
    """
    Base class for plotly.js configuration objects.

    A new instance has no fields set. Every setter returns a copy with one more
    field set and leaves the receiver untouched, so objects can be built by
    chaining and shared between parents:

        Margin().left(20).right(20)

    Only fields that were set are serialized, under the wire key given in
    `_aliases` (or the field name itself when it has no alias).
    """

    _aliases: ClassVar[Dict[str, str]] = {}

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}

    def _set(self, field: str, value: Any):
        new = copy.copy(self)
        new._values = {**self._values, field: value}
        return new

    def for_json(self) -> Dict[str, Any]:
        return {self._aliases.get(k, k): to_json(v) for k, v in self._values.items()}

    def to_json(self) -> str:
        """Serialize to a standalone JSON object."""
        return dumps(self)

    def __eq__(self, other: Any) -> bool:
        return type(self) is type(other) and self.for_json() == other.for_json()

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"{type(self).__name__}({fields})"
