import copy
import json
import pickle
import msgpack
import pytest
import optionvalue
from optionvalue import Option


values = [optionvalue.of(5), optionvalue.of("text"), optionvalue.of([1, 2]), optionvalue.of({"k": 1}), optionvalue.absent()]


@pytest.mark.parametrize("opt", values)
def test_pickle(opt):
    for protocol in range(pickle.HIGHEST_PROTOCOL + 1):
        restored = pickle.loads(pickle.dumps(opt, protocol))
        assert restored == opt
        assert restored.is_present == opt.is_present


def test_pickle_keeps_canonical_absent():
    assert pickle.loads(pickle.dumps(optionvalue.absent())) is optionvalue.absent()


def test_copy():
    inner = [1, 2]
    opt = optionvalue.of(inner)
    assert copy.copy(opt).get() is inner
    deep = copy.deepcopy(opt)
    assert deep == opt
    assert deep.get() is not inner
    assert copy.deepcopy(optionvalue.absent()) is optionvalue.absent()


def test_to_dict():
    assert optionvalue.of(3).to_dict() == dict(present=True, value=3)
    assert optionvalue.absent().to_dict() == dict(present=False)
    assert Option.from_dict(dict(present=True, value=3)) == optionvalue.of(3)
    assert Option.from_dict(dict(present=False)) is optionvalue.absent()


@pytest.mark.parametrize("data", [
    None,
    [],
    {},
    dict(present=True),
    dict(present=True, value=None),
    dict(present="yes", value=1),
])
def test_from_dict_rejects_malformed(data):
    with pytest.raises(optionvalue.InvalidArgumentError):
        Option.from_dict(data)


@pytest.mark.parametrize("dumps, loads", [
    (json.dumps, json.loads),
    (msgpack.packb, msgpack.unpackb),
])
def test_codecs(dumps, loads):
    for opt in values:
        data = opt.to_data(dumps)
        assert Option.from_data(data, loads) == opt
