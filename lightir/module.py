"""The module: owner of types, global variables and functions."""

from __future__ import annotations

from typing import Any, Iterable

from .types import (
    ArrayType,
    FloatType,
    FunctionType,
    IntegerType,
    PointerType,
    Type,
    TypeID,
)


class Module:
    """A translation unit of IR, which interns its types."""

    def __init__(self) -> None:
        self.void_type = Type(TypeID.VOID, self)
        self.label_type = Type(TypeID.LABEL, self)
        self.int1_type = IntegerType(1, self)
        self.int8_type = IntegerType(8, self)
        self.int32_type = IntegerType(32, self)
        self.int64_type = IntegerType(64, self)
        self.float_type = FloatType(self)
        self.functions: list[Any] = []
        self.global_variables: list[Any] = []
        # Interned constants, keyed by kind and value.
        self.constants: dict[tuple, Any] = {}
        self._pointer_types: dict[Type, PointerType] = {}
        self._array_types: dict[tuple[Type, int], ArrayType] = {}
        self._function_types: dict[tuple[Type, tuple[Type, ...]], FunctionType] = {}

    @property
    def int8_ptr_type(self) -> PointerType:
        return self.get_pointer_type(self.int8_type)

    @property
    def int32_ptr_type(self) -> PointerType:
        return self.get_pointer_type(self.int32_type)

    @property
    def float_ptr_type(self) -> PointerType:
        return self.get_pointer_type(self.float_type)

    def get_pointer_type(self, contained: Type) -> PointerType:
        ptr = self._pointer_types.get(contained)
        if ptr is None:
            ptr = self._pointer_types[contained] = PointerType(contained)
        return ptr

    def get_array_type(self, contained: Type, num_elements: int) -> ArrayType:
        key = (contained, num_elements)
        arr = self._array_types.get(key)
        if arr is None:
            arr = self._array_types[key] = ArrayType(contained, num_elements)
        return arr

    def get_function_type(self, retty: Type, args: Iterable[Type]) -> FunctionType:
        params = tuple(args)
        key = (retty, params)
        func = self._function_types.get(key)
        if func is None:
            func = self._function_types[key] = FunctionType(retty, params)
        return func

    def add_function(self, f: Any) -> None:
        self.functions.append(f)

    def add_global_variable(self, g: Any) -> None:
        self.global_variables.append(g)

    def set_print_name(self) -> None:
        """Give every unnamed argument, block and instruction a name."""
        for func in self.functions:
            func.set_instr_name()

    def __str__(self) -> str:
        self.set_print_name()
        items = [*self.global_variables, *self.functions]
        return "".join(f"{item}\n" for item in items)