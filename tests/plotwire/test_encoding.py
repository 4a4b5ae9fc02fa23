# %%
import datetime
import json

import numpy as np
import pytest

from plotwire.encoding import TruthyEnum, dumps, num_or_string, to_json
from plotwire.layout import HoverMode, Margin, UniformTextMode


def test_num_or_string_keeps_kind():
    assert num_or_string(2) == 2 and isinstance(num_or_string(2), int)
    assert num_or_string(2.0) == 2.0 and isinstance(num_or_string(2.0), float)
    assert num_or_string("2") == "2"
    assert json.dumps([num_or_string(3), num_or_string("3")]) == '[3, "3"]'


def test_num_or_string_conversions():
    assert num_or_string(np.int64(3)) == 3
    assert type(num_or_string(np.float32(1.5))) is float
    assert num_or_string(datetime.date(2020, 1, 2)) == "2020-01-02"
    assert num_or_string(datetime.datetime(2020, 1, 2, 3, 4)) == "2020-01-02T03:04:00"
    assert num_or_string(np.datetime64("2020-01-02", "ns")) == "2020-01-02"


def test_num_or_string_rejects_other_types():
    with pytest.raises(TypeError):
        num_or_string(True)
    with pytest.raises(TypeError):
        num_or_string([1])
    with pytest.raises(TypeError):
        num_or_string(None)


def test_truthy_enum():
    assert TruthyEnum(HoverMode.FALSE).for_json() is False
    assert TruthyEnum(HoverMode.CLOSEST).for_json() == "closest"
    assert TruthyEnum(HoverMode.X_UNIFIED).for_json() == "x unified"
    assert TruthyEnum(UniformTextMode.FALSE).for_json() is False
    assert TruthyEnum(UniformTextMode.HIDE).for_json() == "hide"
    assert dumps({"hovermode": TruthyEnum(HoverMode.FALSE)}) == '{"hovermode":false}'


def test_to_json_numpy():
    assert to_json(np.array([1, 2, 3])) == [1, 2, 3]
    assert to_json(np.array([[0.5], [1.5]])) == [[0.5], [1.5]]
    assert to_json(np.float64(0.25)) == 0.25
    assert to_json({"a": (1, 2)}) == {"a": [1, 2]}
    assert to_json(np.array(["2020-01-01"], dtype="datetime64[ns]")) == ["2020-01-01"]
    assert to_json(np.datetime64("2020-01-01T06:00", "ns")) == "2020-01-01T06:00"


def test_non_finite_floats_raise():
    with pytest.raises(ValueError, match="nan"):
        dumps({"y": [1.0, float("nan")]})
    with pytest.raises(ValueError):
        to_json(np.array([1.0, np.inf]))


def test_unserializable_object():
    with pytest.raises(TypeError, match="not JSON serializable"):
        to_json(object())


def test_generator_warns():
    with pytest.warns(UserWarning, match="exhaustible"):
        assert to_json(x for x in range(3)) == [0, 1, 2]


def test_setters_copy():
    margin = Margin()
    left = margin.left(10)
    both = left.right(20)
    assert margin.for_json() == {}
    assert left.for_json() == {"l": 10}
    assert both.for_json() == {"l": 10, "r": 20}


def test_equality_and_repr():
    assert Margin().left(1) == Margin().left(1)
    assert Margin().left(1) != Margin().left(2)
    assert Margin().left(1) != Margin().right(1)
    assert repr(Margin().left(1)) == "Margin(left=1)"


def test_compact_json():
    assert Margin().left(1).top(2).to_json() == '{"l":1,"t":2}'
    assert Margin().to_json() == "{}"
