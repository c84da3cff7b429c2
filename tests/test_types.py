import pytest

from lightir.module import Module
from lightir.types import (
    ArrayType,
    FloatType,
    FunctionType,
    IRError,
    PointerType,
    TypeID,
)


@pytest.fixture
def module():
    return Module()


def test_basic_type_names(module):
    assert str(module.void_type) == "void"
    assert str(module.label_type) == "label"
    assert str(module.float_type) == "float"
    assert str(module.int32_type) == "i32"


def test_integer_widths(module):
    widths = [
        ty.num_bits
        for ty in (
            module.int1_type,
            module.int8_type,
            module.int32_type,
            module.int64_type,
        )
    ]
    assert widths == [1, 8, 32, 64]


def test_integer_predicates(module):
    assert module.int1_type.is_int1_type()
    assert not module.int1_type.is_int32_type()
    assert module.int8_type.is_int8_type()
    assert module.int32_type.is_int32_type()
    assert module.int64_type.is_int64_type()
    assert not module.float_type.is_int32_type()
    assert module.int64_type.is_integer_type()


def test_type_ids(module):
    assert module.void_type.type_id is TypeID.VOID
    assert module.label_type.type_id is TypeID.LABEL
    assert module.float_type.is_float_type()
    assert module.void_type.is_void_type()
    assert module.label_type.is_label_type()


def test_pointer_type(module):
    ptr = PointerType.get(module.int32_type)
    assert ptr is module.get_pointer_type(module.int32_type)
    assert ptr.is_pointer_type()
    assert ptr.pointer_element_type() is module.int32_type
    assert str(ptr) == str(module.int32_type) + "*"


def test_pointer_to_pointer(module):
    inner = PointerType.get(module.float_type)
    outer = PointerType.get(inner)
    assert outer.pointer_element_type() is inner
    assert str(outer) == str(inner) + "*"


def test_pointer_to_void_rejected(module):
    with pytest.raises(IRError):
        PointerType(module.void_type)


def test_pointer_element_type_of_non_pointer(module):
    with pytest.raises(IRError):
        module.int32_type.pointer_element_type()


def test_array_element_type(module):
    arr = ArrayType.get(module.float_type, 3)
    assert arr.array_element_type() is module.float_type
    with pytest.raises(IRError):
        module.float_type.array_element_type()


def test_array_type(module):
    arr = ArrayType.get(module.int32_type, 4)
    assert arr is module.get_array_type(module.int32_type, 4)
    assert arr.is_array_type()
    assert arr.num_of_elements == 4
    assert str(arr) == "[4 x i32]"
    assert arr.module is module


def test_nested_array(module):
    inner = ArrayType.get(module.float_type, 2)
    outer = ArrayType.get(inner, 3)
    assert outer.array_element_type() is inner
    assert str(outer).startswith("[3 x ")
    assert str(outer).endswith(str(inner) + "]")


def test_array_of_void_rejected(module):
    with pytest.raises(IRError):
        ArrayType(module.void_type, 2)


def test_function_type(module):
    ft = FunctionType.get(module.int32_type, [module.int32_type, module.float_ptr_type])
    assert ft is FunctionType.get(
        module.int32_type, (module.int32_type, module.float_ptr_type)
    )
    assert ft.is_function_type()
    assert ft.return_type is module.int32_type
    assert ft.param_type(1) is module.float_ptr_type
    assert len(ft.params) == 2
    assert str(ft) == "i32 (i32, float*)"
    assert ft.module is None


def test_function_type_without_params(module):
    ft = FunctionType.get(module.void_type, [])
    assert str(ft).startswith(str(module.void_type))
    assert str(ft).endswith("()")
    assert ft.params == ()


def test_function_type_rejects_label_return(module):
    with pytest.raises(IRError):
        FunctionType(module.label_type, [])


def test_function_type_rejects_label_argument(module):
    with pytest.raises(IRError):
        FunctionType(module.int32_type, [module.label_type])


def test_function_type_argument_rules(module):
    assert FunctionType.is_valid_argument_type(module.void_type)
    assert FunctionType.is_valid_argument_type(module.int32_ptr_type)
    assert not FunctionType.is_valid_return_type(module.int32_ptr_type)
    assert not ArrayType.is_valid_element_type(module.int32_ptr_type)


def test_sizes(module):
    assert module.int1_type.size() == 1
    assert module.int32_type.size() == 4
    assert module.float_type.size() == 4
    assert module.int32_ptr_type.size() == 8
    arr = ArrayType.get(module.int32_type, 6)
    assert arr.size() == arr.num_of_elements * module.int32_type.size()


@pytest.mark.parametrize(
    "pick",
    [
        lambda m: m.int8_type,
        lambda m: m.int64_type,
        lambda m: m.void_type,
        lambda m: m.label_type,
        lambda m: FunctionType.get(m.void_type, []),
    ],
)
def test_size_errors(module, pick):
    with pytest.raises(IRError):
        pick(module).size()


def test_float_type_get(module):
    assert FloatType.get(module) is module.float_type