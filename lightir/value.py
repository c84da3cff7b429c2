"""Values, users and the use lists that connect them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .types import IRError, Type


@dataclass(frozen=True)
class Use:
    """The operand slot ``arg_no`` of ``user``."""

    user: User
    arg_no: int


class Value:
    """Anything that has a type and can be used as an operand."""

    def __init__(self, ty: Type, name: str = "") -> None:
        self.type = ty
        self.name = name
        self.uses: list[Use] = []

    def set_name(self, name: str) -> bool:
        """Name the value unless it already has a name; report whether it did."""
        if self.name == "":
            self.name = name
            return True
        return False

    def add_use(self, user: User, arg_no: int) -> None:
        self.uses.append(Use(user, arg_no))

    def remove_use(self, user: User, arg_no: int) -> None:
        target = Use(user, arg_no)
        self.uses[:] = [use for use in self.uses if use != target]

    def replace_all_use_with(self, new_val: Value) -> None:
        if new_val is self:
            return
        while self.uses:
            use = self.uses[0]
            use.user.set_operand(use.arg_no, new_val)

    def replace_use_with_if(
        self, new_val: Value, should_replace: Callable[[Use], bool]
    ) -> None:
        if new_val is self:
            return
        for use in list(self.uses):
            if should_replace(use):
                use.user.set_operand(use.arg_no, new_val)

    def operand_text(self) -> str:
        """How the value is written when it appears as an operand."""
        return f"%{self.name}"


class User(Value):
    """A value that holds other values as operands."""

    def __init__(self, ty: Type, name: str = "") -> None:
        super().__init__(ty, name)
        self.operands: list[Value | None] = []

    def _check_index(self, i: int, what: str) -> None:
        if not 0 <= i < len(self.operands):
            raise IndexError(f"{what} out of index")

    def set_operand(self, i: int, v: Value | None) -> None:
        self._check_index(i, "set_operand")
        old = self.operands[i]
        if old is not None:
            old.remove_use(self, i)
        if v is not None:
            v.add_use(self, i)
        self.operands[i] = v

    def add_operand(self, v: Value) -> None:
        if v is None:
            raise IRError("bad use: add_operand(None)")
        v.add_use(self, len(self.operands))
        self.operands.append(v)

    def remove_all_operands(self) -> None:
        for i, op in enumerate(self.operands):
            if op is not None:
                op.remove_use(self, i)
        self.operands.clear()

    def remove_operand(self, idx: int) -> None:
        self._check_index(idx, "remove_operand")
        for i, op in enumerate(self.operands[idx + 1 :], start=idx + 1):
            if op is not None:
                op.remove_use(self, i)
                op.add_use(self, i - 1)
        removed = self.operands[idx]
        if removed is not None:
            removed.remove_use(self, idx)
        del self.operands[idx]


def print_as_op(v: Value, print_ty: bool) -> str:
    """Render ``v`` as an operand, optionally preceded by its type."""
    text = v.operand_text()
    return f"{v.type} {text}" if print_ty else text