import pytest

from lightir.constant import ConstantInt, ConstantZero
from lightir.global_variable import GlobalVariable
from lightir.module import Module
from lightir.types import IRError
from lightir.value import Use, print_as_op


@pytest.fixture
def module():
    return Module()


def test_create_gives_pointer_type(module):
    gv = GlobalVariable.create("g", module, module.int32_type, False, ConstantInt.get(0, module))
    assert gv.type is module.get_pointer_type(module.int32_type)
    assert gv.type.pointer_element_type() is module.int32_type


def test_registered_in_module(module):
    gv = GlobalVariable.create("g", module, module.int32_type, False, ConstantInt.get(1, module))
    assert module.global_variables == [gv]


def test_initialiser_is_operand(module):
    init = ConstantInt.get(7, module)
    gv = GlobalVariable.create("g", module, module.int32_type, False, init)
    assert gv.operands == [init]
    assert Use(gv, 0) in init.uses


def test_print_global(module):
    gv = GlobalVariable.create("g", module, module.int32_type, False, ConstantInt.get(0, module))
    assert str(gv) == "@g = global i32 0"


def test_print_constant_array_zero(module):
    arr = module.get_array_type(module.int32_type, 4)
    gv = GlobalVariable.create("a", module, arr, True, ConstantZero.get(arr, module))
    assert str(gv) == "@a = constant [4 x i32] zeroinitializer"


def test_operand_text_uses_at_sign(module):
    gv = GlobalVariable.create("x", module, module.float_type, False, ConstantZero.get(module.float_type, module))
    assert print_as_op(gv, False) == "@x"
    assert print_as_op(gv, True) == "float* @x"


def test_print_without_initialiser_raises(module):
    gv = GlobalVariable.create("g", module, module.int32_type, False)
    assert gv.operands == []
    with pytest.raises(IRError):
        str(gv)