"""Functions and their formal arguments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .types import FunctionType, Type
from .value import Value

if TYPE_CHECKING:
    from .basic_block import BasicBlock
    from .module import Module


class Argument(Value):
    """A formal argument of a function."""

    def __init__(
        self, ty: Type, name: str = "", parent: Function | None = None, arg_no: int = 0
    ) -> None:
        super().__init__(ty, name)
        self.parent = parent
        self.arg_no = arg_no

    def __str__(self) -> str:
        return f"{self.type} %{self.name}"


class Function(Value):
    """A function: a declaration, or a definition once it has basic blocks."""

    def __init__(self, ty: FunctionType, name: str, parent: Module) -> None:
        super().__init__(ty, name)
        self.parent = parent
        self.basic_blocks: list[BasicBlock] = []
        self._seq_cnt = 0
        parent.add_function(self)
        self.args = [
            Argument(param, "", self, i) for i, param in enumerate(ty.params)
        ]

    @staticmethod
    def create(ty: FunctionType, name: str, parent: Module) -> Function:
        return Function(ty, name, parent)

    @property
    def function_type(self) -> FunctionType:
        return self.type

    @property
    def return_type(self) -> Type:
        return self.type.return_type

    @property
    def num_of_args(self) -> int:
        return len(self.type.params)

    @property
    def num_basic_blocks(self) -> int:
        return len(self.basic_blocks)

    @property
    def is_declaration(self) -> bool:
        return not self.basic_blocks

    def remove(self, bb: BasicBlock) -> None:
        """Drop ``bb`` from the function and from its neighbours' edge lists."""
        self.basic_blocks.remove(bb)
        for pre in list(bb.pre_basic_blocks):
            pre.remove_succ_basic_block(bb)
        for succ in list(bb.succ_basic_blocks):
            succ.remove_pre_basic_block(bb)

    def add_basic_block(self, bb: BasicBlock) -> None:
        self.basic_blocks.append(bb)

    def set_instr_name(self) -> None:
        """Name unnamed arguments, blocks and non-void instructions in order."""
        seq: dict[int, int] = {}

        def name(value: Value, prefix: str) -> None:
            if id(value) in seq:
                return
            seq_num = len(seq) + self._seq_cnt
            if value.set_name(f"{prefix}{seq_num}"):
                seq[id(value)] = seq_num

        for arg in self.args:
            name(arg, "arg")
        for bb in self.basic_blocks:
            name(bb, "label")
            for instr in bb.instructions:
                if not instr.is_void():
                    name(instr, "op")
        self._seq_cnt += len(seq)

    def operand_text(self) -> str:
        return f"@{self.name}"

    def __str__(self) -> str:
        self.set_instr_name()
        head = "declare" if self.is_declaration else "define"
        if self.is_declaration:
            params = ", ".join(str(p) for p in self.type.params)
            return f"{head} {self.return_type} {self.operand_text()}({params})\n"
        params = ", ".join(str(arg) for arg in self.args)
        body = "".join(str(bb) for bb in self.basic_blocks)
        return f"{head} {self.return_type} {self.operand_text()}({params}) {{\n{body}}}"