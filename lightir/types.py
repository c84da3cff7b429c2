"""Types of the intermediate representation."""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .module import Module


class IRError(Exception):
    """Raised when the IR is built or used in a way it does not allow."""


class TypeID(Enum):
    VOID = auto()
    LABEL = auto()
    INTEGER = auto()
    FUNCTION = auto()
    ARRAY = auto()
    POINTER = auto()
    FLOAT = auto()


class Type:
    """A type owned by a module; types are interned, so identity is equality."""

    def __init__(self, tid: TypeID, module: Module | None) -> None:
        self.type_id = tid
        self.module = module

    def is_void_type(self) -> bool:
        return self.type_id is TypeID.VOID

    def is_label_type(self) -> bool:
        return self.type_id is TypeID.LABEL

    def is_integer_type(self) -> bool:
        return self.type_id is TypeID.INTEGER

    def is_function_type(self) -> bool:
        return self.type_id is TypeID.FUNCTION

    def is_array_type(self) -> bool:
        return self.type_id is TypeID.ARRAY

    def is_pointer_type(self) -> bool:
        return self.type_id is TypeID.POINTER

    def is_float_type(self) -> bool:
        return self.type_id is TypeID.FLOAT

    def _has_bits(self, bits: int) -> bool:
        return isinstance(self, IntegerType) and self.num_bits == bits

    def is_int1_type(self) -> bool:
        return self._has_bits(1)

    def is_int8_type(self) -> bool:
        return self._has_bits(8)

    def is_int32_type(self) -> bool:
        return self._has_bits(32)

    def is_int64_type(self) -> bool:
        return self._has_bits(64)

    def pointer_element_type(self) -> Type:
        raise IRError("pointer_element_type() called on non-pointer type")

    def array_element_type(self) -> Type:
        raise IRError("array_element_type() called on non-array type")

    def size(self) -> int:
        """Size in bytes of a value of this type."""
        raise IRError(f"type {self} has no size")

    def __str__(self) -> str:
        return {TypeID.VOID: "void", TypeID.LABEL: "label"}.get(self.type_id, "")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


class IntegerType(Type):
    def __init__(self, num_bits: int, module: Module | None) -> None:
        super().__init__(TypeID.INTEGER, module)
        self.num_bits = num_bits

    def size(self) -> int:
        if self.num_bits == 1:
            return 1
        if self.num_bits == 32:
            return 4
        raise IRError(f"unexpected integer width {self.num_bits} for size()")

    def __str__(self) -> str:
        return f"i{self.num_bits}"


class FunctionType(Type):
    def __init__(self, result: Type, params: Iterable[Type]) -> None:
        if not self.is_valid_return_type(result):
            raise IRError("invalid return type for function")
        params = tuple(params)
        for param in params:
            if not self.is_valid_argument_type(param):
                raise IRError("not a valid type for function argument")
        super().__init__(TypeID.FUNCTION, None)
        self.return_type = result
        self.params = params

    @staticmethod
    def is_valid_return_type(ty: Type) -> bool:
        return ty.is_integer_type() or ty.is_void_type() or ty.is_float_type()

    @staticmethod
    def is_valid_argument_type(ty: Type) -> bool:
        return (
            ty.is_integer_type()
            or ty.is_pointer_type()
            or ty.is_float_type()
            or ty.is_void_type()
        )

    @staticmethod
    def get(result: Type, params: Iterable[Type]) -> FunctionType:
        return result.module.get_function_type(result, params)

    def param_type(self, i: int) -> Type:
        return self.params[i]

    def __str__(self) -> str:
        args = ", ".join(str(p) for p in self.params)
        return f"{self.return_type} ({args})"


class ArrayType(Type):
    def __init__(self, contained: Type, num_elements: int) -> None:
        if not self.is_valid_element_type(contained):
            raise IRError("not a valid type for array element")
        super().__init__(TypeID.ARRAY, contained.module)
        self.element_type = contained
        self.num_of_elements = num_elements

    @staticmethod
    def is_valid_element_type(ty: Type) -> bool:
        return ty.is_integer_type() or ty.is_array_type() or ty.is_float_type()

    @staticmethod
    def get(contained: Type, num_elements: int) -> ArrayType:
        return contained.module.get_array_type(contained, num_elements)

    def array_element_type(self) -> Type:
        return self.element_type

    def size(self) -> int:
        return self.element_type.size() * self.num_of_elements

    def __str__(self) -> str:
        return f"[{self.num_of_elements} x {self.element_type}]"


_POINTEE_IDS = frozenset(
    {TypeID.INTEGER, TypeID.FLOAT, TypeID.ARRAY, TypeID.POINTER}
)


class PointerType(Type):
    def __init__(self, contained: Type) -> None:
        if contained.type_id not in _POINTEE_IDS:
            raise IRError(f"type {contained} is not allowed as a pointee")
        super().__init__(TypeID.POINTER, contained.module)
        self.element_type = contained

    @staticmethod
    def get(contained: Type) -> PointerType:
        return contained.module.get_pointer_type(contained)

    def pointer_element_type(self) -> Type:
        return self.element_type

    def size(self) -> int:
        return 8

    def __str__(self) -> str:
        return f"{self.element_type}*"


class FloatType(Type):
    def __init__(self, module: Module | None) -> None:
        super().__init__(TypeID.FLOAT, module)

    @staticmethod
    def get(module: Module) -> FloatType:
        return module.float_type

    def size(self) -> int:
        return 4

    def __str__(self) -> str:
        return "float"