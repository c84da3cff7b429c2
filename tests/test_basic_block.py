import pytest

from lightir.basic_block import BasicBlock
from lightir.function import Function
from lightir.module import Module
from lightir.opcodes import OpID
from lightir.types import IRError
from lightir.value import Value


class _FakeInst(Value):
    def __init__(self, ty, op_id, text):
        super().__init__(ty, "")
        self.op_id = op_id
        self._text = text

    def is_void(self):
        return True

    def __str__(self):
        return self._text


@pytest.fixture
def module():
    return Module()


@pytest.fixture
def func(module):
    ft = module.get_function_type(module.void_type, [])
    return Function.create(ft, "f", module)


def test_block_joins_parent(module, func):
    bb = BasicBlock(module, "entry", func)
    assert func.basic_blocks == [bb]
    assert bb.parent is func
    assert bb.module is module
    assert bb.type is module.label_type


def test_block_without_parent_raises(module):
    with pytest.raises(IRError):
        BasicBlock(module, "orphan", None)


def test_empty_block_is_not_terminated(module, func):
    bb = BasicBlock(module, "entry", func)
    assert bb.is_terminated() is False
    with pytest.raises(IRError):
        bb.terminator()


def test_terminator_and_no_insert_after(module, func):
    bb = BasicBlock(module, "entry", func)
    store = _FakeInst(module.void_type, OpID.STORE, "store")
    ret = _FakeInst(module.void_type, OpID.RET, "ret void")
    bb.add_instruction(store)
    assert not bb.is_terminated()
    bb.add_instruction(ret)
    assert bb.is_terminated()
    assert bb.terminator() is ret
    with pytest.raises(IRError):
        bb.add_instruction(_FakeInst(module.void_type, OpID.STORE, "store"))
    assert bb.instructions == [store, ret]


def test_branch_terminates(module, func):
    bb = BasicBlock(module, "entry", func)
    bb.add_instruction(_FakeInst(module.void_type, OpID.BR, "br"))
    assert bb.is_terminated()


def test_edge_lists(module, func):
    a = BasicBlock(module, "a", func)
    b = BasicBlock(module, "b", func)
    b.add_pre_basic_block(a)
    b.add_pre_basic_block(a)
    a.add_succ_basic_block(b)
    b.remove_pre_basic_block(a)
    a.remove_succ_basic_block(b)
    assert b.pre_basic_blocks == []
    assert a.succ_basic_blocks == []


def test_erase_from_parent(module, func):
    a = BasicBlock(module, "a", func)
    b = BasicBlock(module, "b", func)
    a.add_succ_basic_block(b)
    b.add_pre_basic_block(a)
    b.erase_from_parent()
    assert func.basic_blocks == [a]
    assert a.succ_basic_blocks == []


def test_print_without_preds(module, func):
    bb = BasicBlock(module, "entry", func)
    bb.add_instruction(_FakeInst(module.void_type, OpID.RET, "ret void"))
    assert str(bb) == "entry:\n  ret void\n"


def test_print_with_preds(module, func):
    a = BasicBlock(module, "a", func)
    b = BasicBlock(module, "b", func)
    c = BasicBlock(module, "c", func)
    c.add_pre_basic_block(a)
    c.add_pre_basic_block(b)
    text = str(c)
    assert text.startswith("c:")
    assert text.endswith("; preds = %a, %b\n")
    assert text.count("\n") == 1