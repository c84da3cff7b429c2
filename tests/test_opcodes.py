import pytest

from lightir.opcodes import OpID, op_name
from lightir.types import IRError


@pytest.mark.parametrize(
    "op, name",
    [
        (OpID.RET, "ret"),
        (OpID.GE, "sge"),
        (OpID.LT, "slt"),
        (OpID.FGE, "uge"),
        (OpID.FNE, "une"),
        (OpID.GETELEMENTPTR, "getelementptr"),
        (OpID.BITCAST, "bitcast"),
    ],
)
def test_known_names(op, name):
    assert op_name(op) == name


def test_every_op_has_a_distinct_name():
    names = [op_name(op) for op in OpID]
    assert len(set(names)) == len(list(OpID))
    assert all(names)


def test_integer_compare_names_are_signed():
    for op in (OpID.GE, OpID.GT, OpID.LE, OpID.LT):
        assert op_name(op).startswith("s")


def test_float_compare_names_are_unordered():
    for op in (OpID.FGE, OpID.FGT, OpID.FLE, OpID.FLT, OpID.FEQ, OpID.FNE):
        assert op_name(op).startswith("u")


@pytest.mark.parametrize("bad", ["add", 3, None])
def test_unknown_op_raises(bad):
    with pytest.raises(IRError):
        op_name(bad)