import pytest

from lightir.basic_block import BasicBlock
from lightir.function import Argument, Function
from lightir.module import Module
from lightir.opcodes import OpID
from lightir.value import Value, print_as_op


class _FakeInst(Value):
    def __init__(self, ty, op_id, void):
        super().__init__(ty, "")
        self.op_id = op_id
        self._void = void

    def is_void(self):
        return self._void

    def __str__(self):
        return f"fake %{self.name}"


@pytest.fixture
def module():
    return Module()


@pytest.fixture
def func(module):
    ft = module.get_function_type(module.int32_type, [module.int32_type, module.float_type])
    return Function.create(ft, "foo", module)


def test_function_registered_and_args_built(module, func):
    assert module.functions == [func]
    assert func.num_of_args == 2
    assert [a.type for a in func.args] == [module.int32_type, module.float_type]
    assert [a.arg_no for a in func.args] == [0, 1]
    assert all(a.parent is func for a in func.args)


def test_return_type(module, func):
    assert func.return_type is module.int32_type
    assert func.function_type.params == (module.int32_type, module.float_type)


def test_declaration_print(func):
    assert func.is_declaration
    assert str(func) == "declare i32 @foo(i32, float)\n"


def test_definition_print(module, func):
    BasicBlock(module, "", func)
    assert not func.is_declaration
    assert str(func) == "define i32 @foo(i32 %arg0, float %arg1) {\nlabel2:\n}"


def test_operand_text(func):
    assert print_as_op(func, False) == "@foo"


def test_argument_print(module):
    arg = Argument(module.int32_type, "x")
    assert str(arg) == "i32 %x"


def test_set_instr_name_skips_void_and_named(module, func):
    bb = BasicBlock(module, "entry", func)
    value = _FakeInst(module.int32_type, OpID.ADD, False)
    void = _FakeInst(module.void_type, OpID.STORE, True)
    bb.add_instruction(value)
    bb.add_instruction(void)
    func.set_instr_name()
    assert [a.name for a in func.args] == ["arg0", "arg1"]
    assert bb.name == "entry"
    assert value.name == "op2"
    assert void.name == ""


def test_set_instr_name_is_stable(module, func):
    bb = BasicBlock(module, "", func)
    func.set_instr_name()
    names = [bb.name] + [a.name for a in func.args]
    func.set_instr_name()
    assert [bb.name] + [a.name for a in func.args] == names


def test_counter_continues_for_new_values(module, func):
    first = BasicBlock(module, "", func)
    func.set_instr_name()
    second = BasicBlock(module, "", func)
    func.set_instr_name()
    assert first.name != second.name
    assert second.name.startswith("label")


def test_remove_unlinks_edges(module, func):
    a = BasicBlock(module, "a", func)
    b = BasicBlock(module, "b", func)
    c = BasicBlock(module, "c", func)
    a.add_succ_basic_block(b)
    b.add_pre_basic_block(a)
    b.add_succ_basic_block(c)
    c.add_pre_basic_block(b)
    func.remove(b)
    assert func.basic_blocks == [a, c]
    assert func.num_basic_blocks == 2
    assert a.succ_basic_blocks == []
    assert c.pre_basic_blocks == []