"""Constants: integers, floats, arrays and zero initialisers."""

from __future__ import annotations

import math
import struct
from typing import Callable, Sequence, TypeVar

from .module import Module
from .types import ArrayType, Type
from .value import User

_C = TypeVar("_C", bound="Constant")


def _interned(module: Module, key: tuple, factory: Callable[[], _C]) -> _C:
    constant = module.constants.get(key)
    if constant is None:
        constant = module.constants[key] = factory()
    return constant


def _to_float32(val: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", val))[0]
    except OverflowError:
        return math.copysign(math.inf, val)


class Constant(User):
    """A value known at compile time; it prints itself as an operand."""

    def operand_text(self) -> str:
        return str(self)


class ConstantInt(Constant):
    def __init__(self, ty: Type, value: int) -> None:
        super().__init__(ty, "")
        self.value = value

    @staticmethod
    def get(val: int, module: Module) -> ConstantInt:
        """The interned i32 constant ``val``."""
        return _interned(
            module, ("i32", val), lambda: ConstantInt(module.int32_type, val)
        )

    @staticmethod
    def get_bool(val: bool, module: Module) -> ConstantInt:
        """The interned i1 constant for ``val``."""
        flag = bool(val)
        return _interned(
            module, ("i1", flag), lambda: ConstantInt(module.int1_type, int(flag))
        )

    @staticmethod
    def get_int64(val: int, module: Module) -> ConstantInt:
        """The interned i64 constant ``val``."""
        return _interned(
            module, ("i64", val), lambda: ConstantInt(module.int64_type, val)
        )

    def __str__(self) -> str:
        if self.type.is_int1_type():
            return "false" if self.value == 0 else "true"
        return str(self.value)


class ConstantArray(Constant):
    def __init__(self, ty: ArrayType, values: Sequence[Constant]) -> None:
        super().__init__(ty, "")
        self.elements = list(values)
        for value in self.elements:
            self.add_operand(value)

    @staticmethod
    def get(ty: ArrayType, values: Sequence[Constant]) -> ConstantArray:
        return ConstantArray(ty, values)

    def get_element_value(self, index: int) -> Constant:
        return self.elements[index]

    def __str__(self) -> str:
        parts = []
        for element in self.elements:
            if not isinstance(element, ConstantArray):
                parts.append(str(element.type))
            parts.append(str(element))
            parts.append(", ")
        return f"{self.type} [{''.join(parts)}]"


class ConstantFP(Constant):
    def __init__(self, ty: Type, value: float) -> None:
        super().__init__(ty, "")
        self.value = value

    @staticmethod
    def get(val: float, module: Module) -> ConstantFP:
        """The interned float constant, rounded to single precision."""
        single = _to_float32(val)
        return _interned(
            module, ("float", single), lambda: ConstantFP(module.float_type, single)
        )

    def __str__(self) -> str:
        (bits,) = struct.unpack("<Q", struct.pack("<d", self.value))
        return f"0x{bits:x}"


class ConstantZero(Constant):
    def __init__(self, ty: Type) -> None:
        super().__init__(ty, "")

    @staticmethod
    def get(ty: Type, module: Module) -> ConstantZero:
        return _interned(module, ("zero", ty), lambda: ConstantZero(ty))

    def __str__(self) -> str:
        return "zeroinitializer"