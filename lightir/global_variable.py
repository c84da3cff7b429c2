"""Global variables of a module."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .types import IRError, PointerType, Type
from .value import User

if TYPE_CHECKING:
    from .constant import Constant
    from .module import Module


class GlobalVariable(User):
    """A module-level variable; its only operand is its initialiser."""

    def __init__(
        self,
        name: str,
        module: Module,
        ty: Type,
        is_const: bool,
        init: Constant | None = None,
    ) -> None:
        super().__init__(ty, name)
        self.is_const = is_const
        self.init = init
        module.add_global_variable(self)
        if init is not None:
            self.add_operand(init)

    @staticmethod
    def create(
        name: str,
        module: Module,
        ty: Type,
        is_const: bool,
        init: Constant | None = None,
    ) -> GlobalVariable:
        """Create a global holding a value of ``ty``; its own type is a pointer."""
        return GlobalVariable(name, module, PointerType.get(ty), is_const, init)

    def operand_text(self) -> str:
        return f"@{self.name}"

    def __str__(self) -> str:
        if self.init is None:
            raise IRError(f"global variable @{self.name} has no initialiser")
        kind = "constant " if self.is_const else "global "
        return (
            f"{self.operand_text()} = {kind}"
            f"{self.type.pointer_element_type()} {self.init}"
        )