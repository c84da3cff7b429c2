"""Basic blocks: straight-line instruction sequences inside a function."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .opcodes import OpID
from .types import IRError
from .value import Value, print_as_op

if TYPE_CHECKING:
    from .function import Function
    from .module import Module

_TERMINATORS = frozenset({OpID.RET, OpID.BR})
_PREDS_PAD = " " * 48


class BasicBlock(Value):
    """A labelled block of instructions ending in at most one terminator."""

    def __init__(
        self, module: Module, name: str = "", parent: Function | None = None
    ) -> None:
        if parent is None:
            raise IRError("a basic block needs a parent function")
        super().__init__(module.label_type, name)
        self.parent = parent
        self.instructions: list[Any] = []
        self.pre_basic_blocks: list[BasicBlock] = []
        self.succ_basic_blocks: list[BasicBlock] = []
        parent.add_basic_block(self)

    @property
    def module(self) -> Module:
        return self.parent.parent

    def erase_from_parent(self) -> None:
        self.parent.remove(self)

    def is_terminated(self) -> bool:
        return bool(self.instructions) and self.instructions[-1].op_id in _TERMINATORS

    def terminator(self) -> Any:
        if not self.is_terminated():
            raise IRError("trying to get terminator from a block that is not terminated")
        return self.instructions[-1]

    def add_instruction(self, instr: Any) -> None:
        if self.is_terminated():
            raise IRError("inserting instruction into a terminated block")
        self.instructions.append(instr)

    def add_pre_basic_block(self, bb: BasicBlock) -> None:
        self.pre_basic_blocks.append(bb)

    def add_succ_basic_block(self, bb: BasicBlock) -> None:
        self.succ_basic_blocks.append(bb)

    def remove_pre_basic_block(self, bb: BasicBlock) -> None:
        self.pre_basic_blocks[:] = [b for b in self.pre_basic_blocks if b is not bb]

    def remove_succ_basic_block(self, bb: BasicBlock) -> None:
        self.succ_basic_blocks[:] = [b for b in self.succ_basic_blocks if b is not bb]

    def __str__(self) -> str:
        parts = [f"{self.name}:"]
        if self.pre_basic_blocks:
            parts.append(f"{_PREDS_PAD}; preds = ")
            first = self.pre_basic_blocks[0]
            for bb in self.pre_basic_blocks:
                if bb is not first:
                    parts.append(", ")
                parts.append(print_as_op(bb, False))
        if self.parent is None:
            parts.append("\n; Error: Block without parent!")
        parts.append("\n")
        parts.extend(f"  {instr}\n" for instr in self.instructions)
        return "".join(parts)