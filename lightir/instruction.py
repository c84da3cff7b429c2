"""Instructions of the intermediate representation and their textual form."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .opcodes import OpID, op_name
from .types import FunctionType, IRError, PointerType, Type, TypeID
from .value import User, Value, print_as_op

if TYPE_CHECKING:
    from .basic_block import BasicBlock
    from .function import Function
    from .module import Module

_ICMP_OPS = frozenset({OpID.GE, OpID.GT, OpID.LE, OpID.LT, OpID.EQ, OpID.NE})
_FCMP_OPS = frozenset(
    {OpID.FGE, OpID.FGT, OpID.FLE, OpID.FLT, OpID.FEQ, OpID.FNE}
)
_IBINARY_OPS = frozenset({OpID.ADD, OpID.SUB, OpID.MUL, OpID.SDIV})
_FBINARY_OPS = frozenset({OpID.FADD, OpID.FSUB, OpID.FMUL, OpID.FDIV})
_ALLOCA_IDS = frozenset(
    {TypeID.INTEGER, TypeID.FLOAT, TypeID.ARRAY, TypeID.POINTER}
)


class Instruction(User):
    """An operation inside a basic block; it is appended to ``parent`` if given."""

    def __init__(
        self, ty: Type, op_id: OpID, parent: BasicBlock | None = None
    ) -> None:
        super().__init__(ty, "")
        self.op_id = op_id
        self.parent = parent
        if parent is not None:
            parent.add_instruction(self)

    @property
    def function(self) -> Function:
        return self.parent.parent

    @property
    def module(self) -> Module:
        return self.parent.module

    @property
    def instr_op_name(self) -> str:
        return op_name(self.op_id)

    def is_void(self) -> bool:
        """Whether the instruction produces no value."""
        return self.type.is_void_type()

    def is_cmp(self) -> bool:
        return self.op_id in _ICMP_OPS

    def is_fcmp(self) -> bool:
        return self.op_id in _FCMP_OPS

    def _result(self) -> str:
        return f"%{self.name} = {self.instr_op_name}"


def _two_operand_text(inst: Instruction) -> str:
    lhs, rhs = inst.operands[0], inst.operands[1]
    return (
        f"{lhs.type} {print_as_op(lhs, False)}, "
        f"{print_as_op(rhs, lhs.type is not rhs.type)}"
    )


def _cast_text(inst: Instruction) -> str:
    val = inst.operands[0]
    return f"{inst._result()} {val.type} {print_as_op(val, False)} to {inst.type}"


class IBinaryInst(Instruction):
    """Integer arithmetic on two i32 values."""

    def __init__(self, op_id: OpID, v1: Value, v2: Value, bb: BasicBlock) -> None:
        if op_id not in _IBINARY_OPS:
            raise IRError(f"{op_id!r} is not an integer binary operation")
        if not (v1.type.is_int32_type() and v2.type.is_int32_type()):
            raise IRError("IBinaryInst operands are not both i32")
        super().__init__(bb.module.int32_type, op_id, bb)
        self.add_operand(v1)
        self.add_operand(v2)

    @staticmethod
    def create_add(v1: Value, v2: Value, bb: BasicBlock) -> IBinaryInst:
        return IBinaryInst(OpID.ADD, v1, v2, bb)

    @staticmethod
    def create_sub(v1: Value, v2: Value, bb: BasicBlock) -> IBinaryInst:
        return IBinaryInst(OpID.SUB, v1, v2, bb)

    @staticmethod
    def create_mul(v1: Value, v2: Value, bb: BasicBlock) -> IBinaryInst:
        return IBinaryInst(OpID.MUL, v1, v2, bb)

    @staticmethod
    def create_sdiv(v1: Value, v2: Value, bb: BasicBlock) -> IBinaryInst:
        return IBinaryInst(OpID.SDIV, v1, v2, bb)

    def __str__(self) -> str:
        return f"{self._result()} {_two_operand_text(self)}"


class FBinaryInst(Instruction):
    """Floating-point arithmetic on two float values."""

    def __init__(self, op_id: OpID, v1: Value, v2: Value, bb: BasicBlock) -> None:
        if op_id not in _FBINARY_OPS:
            raise IRError(f"{op_id!r} is not a float binary operation")
        if not (v1.type.is_float_type() and v2.type.is_float_type()):
            raise IRError("FBinaryInst operands are not both float")
        super().__init__(bb.module.float_type, op_id, bb)
        self.add_operand(v1)
        self.add_operand(v2)

    @staticmethod
    def create_fadd(v1: Value, v2: Value, bb: BasicBlock) -> FBinaryInst:
        return FBinaryInst(OpID.FADD, v1, v2, bb)

    @staticmethod
    def create_fsub(v1: Value, v2: Value, bb: BasicBlock) -> FBinaryInst:
        return FBinaryInst(OpID.FSUB, v1, v2, bb)

    @staticmethod
    def create_fmul(v1: Value, v2: Value, bb: BasicBlock) -> FBinaryInst:
        return FBinaryInst(OpID.FMUL, v1, v2, bb)

    @staticmethod
    def create_fdiv(v1: Value, v2: Value, bb: BasicBlock) -> FBinaryInst:
        return FBinaryInst(OpID.FDIV, v1, v2, bb)

    def __str__(self) -> str:
        return f"{self._result()} {_two_operand_text(self)}"


class ICmpInst(Instruction):
    """Signed comparison of two i32 values, giving an i1."""

    def __init__(self, op_id: OpID, lhs: Value, rhs: Value, bb: BasicBlock) -> None:
        if op_id not in _ICMP_OPS:
            raise IRError(f"{op_id!r} is not an integer comparison")
        if not (lhs.type.is_int32_type() and rhs.type.is_int32_type()):
            raise IRError("CmpInst operands are not both i32")
        super().__init__(bb.module.int1_type, op_id, bb)
        self.add_operand(lhs)
        self.add_operand(rhs)

    @staticmethod
    def create_ge(v1: Value, v2: Value, bb: BasicBlock) -> ICmpInst:
        return ICmpInst(OpID.GE, v1, v2, bb)

    @staticmethod
    def create_gt(v1: Value, v2: Value, bb: BasicBlock) -> ICmpInst:
        return ICmpInst(OpID.GT, v1, v2, bb)

    @staticmethod
    def create_le(v1: Value, v2: Value, bb: BasicBlock) -> ICmpInst:
        return ICmpInst(OpID.LE, v1, v2, bb)

    @staticmethod
    def create_lt(v1: Value, v2: Value, bb: BasicBlock) -> ICmpInst:
        return ICmpInst(OpID.LT, v1, v2, bb)

    @staticmethod
    def create_eq(v1: Value, v2: Value, bb: BasicBlock) -> ICmpInst:
        return ICmpInst(OpID.EQ, v1, v2, bb)

    @staticmethod
    def create_ne(v1: Value, v2: Value, bb: BasicBlock) -> ICmpInst:
        return ICmpInst(OpID.NE, v1, v2, bb)

    def __str__(self) -> str:
        return (
            f"%{self.name} = icmp {self.instr_op_name} {_two_operand_text(self)}"
        )


class FCmpInst(Instruction):
    """Unordered comparison of two float values, giving an i1."""

    def __init__(self, op_id: OpID, lhs: Value, rhs: Value, bb: BasicBlock) -> None:
        if op_id not in _FCMP_OPS:
            raise IRError(f"{op_id!r} is not a float comparison")
        if not (lhs.type.is_float_type() and rhs.type.is_float_type()):
            raise IRError("FCmpInst operands are not both float")
        super().__init__(bb.module.int1_type, op_id, bb)
        self.add_operand(lhs)
        self.add_operand(rhs)

    @staticmethod
    def create_fge(v1: Value, v2: Value, bb: BasicBlock) -> FCmpInst:
        return FCmpInst(OpID.FGE, v1, v2, bb)

    @staticmethod
    def create_fgt(v1: Value, v2: Value, bb: BasicBlock) -> FCmpInst:
        return FCmpInst(OpID.FGT, v1, v2, bb)

    @staticmethod
    def create_fle(v1: Value, v2: Value, bb: BasicBlock) -> FCmpInst:
        return FCmpInst(OpID.FLE, v1, v2, bb)

    @staticmethod
    def create_flt(v1: Value, v2: Value, bb: BasicBlock) -> FCmpInst:
        return FCmpInst(OpID.FLT, v1, v2, bb)

    @staticmethod
    def create_feq(v1: Value, v2: Value, bb: BasicBlock) -> FCmpInst:
        return FCmpInst(OpID.FEQ, v1, v2, bb)

    @staticmethod
    def create_fne(v1: Value, v2: Value, bb: BasicBlock) -> FCmpInst:
        return FCmpInst(OpID.FNE, v1, v2, bb)

    def __str__(self) -> str:
        return (
            f"%{self.name} = fcmp {self.instr_op_name} {_two_operand_text(self)}"
        )


class CallInst(Instruction):
    """A call; operand 0 is the callee, the rest are the arguments."""

    def __init__(self, func: Function, args: Sequence[Value], bb: BasicBlock) -> None:
        if not func.type.is_function_type():
            raise IRError("not a function")
        args = list(args)
        if func.num_of_args != len(args):
            raise IRError("wrong number of args")
        for i, arg in enumerate(args):
            if func.type.param_type(i) is not arg.type:
                raise IRError("CallInst: wrong arg type")
        super().__init__(func.return_type, OpID.CALL, bb)
        self.add_operand(func)
        for arg in args:
            self.add_operand(arg)

    @staticmethod
    def create_call(func: Function, args: Sequence[Value], bb: BasicBlock) -> CallInst:
        return CallInst(func, args, bb)

    @property
    def function_type(self) -> FunctionType:
        return self.operands[0].type

    def __str__(self) -> str:
        callee = self.operands[0]
        prefix = "" if self.is_void() else f"%{self.name} = "
        args = ", ".join(
            f"{arg.type} {print_as_op(arg, False)}" for arg in self.operands[1:]
        )
        return (
            f"{prefix}{self.instr_op_name} {self.function_type.return_type} "
            f"{print_as_op(callee, False)}({args})"
        )


class BranchInst(Instruction):
    """An unconditional or conditional jump; it links the blocks' edges."""

    def __init__(
        self,
        cond: Value | None,
        if_true: BasicBlock,
        if_false: BasicBlock | None,
        bb: BasicBlock,
    ) -> None:
        if cond is None:
            if if_false is not None:
                raise IRError("given false block on conditionless jump")
        else:
            if not cond.type.is_int1_type():
                raise IRError("BranchInst condition is not i1")
            if if_false is None:
                raise IRError("conditional jump needs a false block")
        super().__init__(bb.module.void_type, OpID.BR, bb)
        if cond is None:
            self.add_operand(if_true)
            if_true.add_pre_basic_block(bb)
            bb.add_succ_basic_block(if_true)
        else:
            self.add_operand(cond)
            self.add_operand(if_true)
            self.add_operand(if_false)
            if_true.add_pre_basic_block(bb)
            if_false.add_pre_basic_block(bb)
            bb.add_succ_basic_block(if_true)
            bb.add_succ_basic_block(if_false)

    @staticmethod
    def create_cond_br(
        cond: Value, if_true: BasicBlock, if_false: BasicBlock, bb: BasicBlock
    ) -> BranchInst:
        return BranchInst(cond, if_true, if_false, bb)

    @staticmethod
    def create_br(if_true: BasicBlock, bb: BasicBlock) -> BranchInst:
        return BranchInst(None, if_true, None, bb)

    def is_cond_br(self) -> bool:
        return len(self.operands) == 3

    def __str__(self) -> str:
        return f"{self.instr_op_name} " + ", ".join(
            print_as_op(op, True) for op in self.operands
        )


class ReturnInst(Instruction):
    """A return, with or without a value."""

    def __init__(self, val: Value | None, bb: BasicBlock) -> None:
        ret_ty = bb.parent.return_type
        if val is None:
            if not ret_ty.is_void_type():
                raise IRError("non-void function returning without a value")
        else:
            if ret_ty.is_void_type():
                raise IRError("void function returning a value")
            if ret_ty is not val.type:
                raise IRError("ReturnInst type is different from function return type")
        super().__init__(bb.module.void_type, OpID.RET, bb)
        if val is not None:
            self.add_operand(val)

    @staticmethod
    def create_ret(val: Value, bb: BasicBlock) -> ReturnInst:
        return ReturnInst(val, bb)

    @staticmethod
    def create_void_ret(bb: BasicBlock) -> ReturnInst:
        return ReturnInst(None, bb)

    def is_void_ret(self) -> bool:
        return not self.operands

    def __str__(self) -> str:
        if self.is_void_ret():
            return f"{self.instr_op_name} void"
        val = self.operands[0]
        return f"{self.instr_op_name} {val.type} {print_as_op(val, False)}"


class GetElementPtrInst(Instruction):
    """Address arithmetic into a pointer or array."""

    def __init__(self, ptr: Value, idxs: Sequence[Value], bb: BasicBlock) -> None:
        idxs = list(idxs)
        element = self.element_type_of(ptr, idxs)
        for idx in idxs:
            if not idx.type.is_integer_type():
                raise IRError("index is not integer")
        super().__init__(PointerType.get(element), OpID.GETELEMENTPTR, bb)
        self.add_operand(ptr)
        for idx in idxs:
            self.add_operand(idx)

    @staticmethod
    def element_type_of(ptr: Value, idxs: Sequence[Value]) -> Type:
        """The type addressed by indexing ``ptr`` with ``idxs``."""
        if not ptr.type.is_pointer_type():
            raise IRError("GetElementPtrInst ptr is not a pointer")
        ty = ptr.type.pointer_element_type()
        if not (ty.is_array_type() or ty.is_integer_type() or ty.is_float_type()):
            raise IRError("GetElementPtrInst ptr is wrong type")
        if ty.is_array_type():
            arr_ty = ty
            last = len(idxs) - 1
            for i in range(1, len(idxs)):
                ty = arr_ty.element_type
                if i < last and not ty.is_array_type():
                    raise IRError("index error")
                if ty.is_array_type():
                    arr_ty = ty
        return ty

    @staticmethod
    def create_gep(
        ptr: Value, idxs: Sequence[Value], bb: BasicBlock
    ) -> GetElementPtrInst:
        return GetElementPtrInst(ptr, idxs, bb)

    @property
    def element_type(self) -> Type:
        return self.type.pointer_element_type()

    def __str__(self) -> str:
        base = self.operands[0].type.pointer_element_type()
        ops = ", ".join(
            f"{op.type} {print_as_op(op, False)}" for op in self.operands
        )
        return f"{self._result()} {base}, {ops}"


class StoreInst(Instruction):
    """Write a value through a pointer."""

    def __init__(self, val: Value, ptr: Value, bb: BasicBlock) -> None:
        if ptr.type.pointer_element_type() is not val.type:
            raise IRError("StoreInst ptr is not a pointer to val type")
        super().__init__(bb.module.void_type, OpID.STORE, bb)
        self.add_operand(val)
        self.add_operand(ptr)

    @staticmethod
    def create_store(val: Value, ptr: Value, bb: BasicBlock) -> StoreInst:
        return StoreInst(val, ptr, bb)

    def __str__(self) -> str:
        val, ptr = self.operands
        return (
            f"{self.instr_op_name} {val.type} {print_as_op(val, False)}, "
            f"{print_as_op(ptr, True)}"
        )


class LoadInst(Instruction):
    """Read a scalar or pointer value through a pointer."""

    def __init__(self, ptr: Value, bb: BasicBlock) -> None:
        ty = ptr.type.pointer_element_type()
        if not (ty.is_integer_type() or ty.is_float_type() or ty.is_pointer_type()):
            raise IRError("should not load value with type except int/float/pointer")
        super().__init__(ty, OpID.LOAD, bb)
        self.add_operand(ptr)

    @staticmethod
    def create_load(ptr: Value, bb: BasicBlock) -> LoadInst:
        return LoadInst(ptr, bb)

    def __str__(self) -> str:
        ptr = self.operands[0]
        return (
            f"{self._result()} {ptr.type.pointer_element_type()}, "
            f"{print_as_op(ptr, True)}"
        )


class AllocaInst(Instruction):
    """Reserve stack space for a value of the given type."""

    def __init__(self, ty: Type, bb: BasicBlock) -> None:
        if ty.type_id not in _ALLOCA_IDS:
            raise IRError(f"type {ty} is not allowed for alloca")
        super().__init__(PointerType.get(ty), OpID.ALLOCA, bb)

    @staticmethod
    def create_alloca(ty: Type, bb: BasicBlock) -> AllocaInst:
        return AllocaInst(ty, bb)

    @property
    def alloca_type(self) -> Type:
        return self.type.pointer_element_type()

    def __str__(self) -> str:
        return f"{self._result()} {self.alloca_type}"


class ZextInst(Instruction):
    """Zero-extend an integer to a wider integer type."""

    def __init__(self, val: Value, ty: Type, bb: BasicBlock) -> None:
        if not val.type.is_integer_type():
            raise IRError("ZextInst operand is not integer")
        if not ty.is_integer_type():
            raise IRError("ZextInst destination type is not integer")
        if val.type.num_bits >= ty.num_bits:
            raise IRError(
                "ZextInst operand bit size is not smaller than destination bit size"
            )
        super().__init__(ty, OpID.ZEXT, bb)
        self.add_operand(val)

    @staticmethod
    def create_zext(val: Value, ty: Type, bb: BasicBlock) -> ZextInst:
        return ZextInst(val, ty, bb)

    @staticmethod
    def create_zext_to_i32(val: Value, bb: BasicBlock) -> ZextInst:
        return ZextInst(val, bb.module.int32_type, bb)

    @property
    def dest_type(self) -> Type:
        return self.type

    def __str__(self) -> str:
        return _cast_text(self)


class FpToSiInst(Instruction):
    """Convert a float to a signed integer."""

    def __init__(self, val: Value, ty: Type, bb: BasicBlock) -> None:
        if not val.type.is_float_type():
            raise IRError("FpToSiInst operand is not float")
        if not ty.is_integer_type():
            raise IRError("FpToSiInst destination type is not integer")
        super().__init__(ty, OpID.FPTOSI, bb)
        self.add_operand(val)

    @staticmethod
    def create_fptosi(val: Value, ty: Type, bb: BasicBlock) -> FpToSiInst:
        return FpToSiInst(val, ty, bb)

    @staticmethod
    def create_fptosi_to_i32(val: Value, bb: BasicBlock) -> FpToSiInst:
        return FpToSiInst(val, bb.module.int32_type, bb)

    @property
    def dest_type(self) -> Type:
        return self.type

    def __str__(self) -> str:
        return _cast_text(self)


class SiToFpInst(Instruction):
    """Convert a signed integer to a float."""

    def __init__(self, val: Value, ty: Type, bb: BasicBlock) -> None:
        if not val.type.is_integer_type():
            raise IRError("SiToFpInst operand is not integer")
        if not ty.is_float_type():
            raise IRError("SiToFpInst destination type is not float")
        super().__init__(ty, OpID.SITOFP, bb)
        self.add_operand(val)

    @staticmethod
    def create_sitofp(val: Value, bb: BasicBlock) -> SiToFpInst:
        return SiToFpInst(val, bb.module.float_type, bb)

    @property
    def dest_type(self) -> Type:
        return self.type

    def __str__(self) -> str:
        return _cast_text(self)


class PhiInst(Instruction):
    """A phi node; it belongs to ``bb`` but is not appended to its instructions."""

    def __init__(
        self,
        ty: Type,
        vals: Sequence[Value],
        val_bbs: Sequence[BasicBlock],
        bb: BasicBlock,
    ) -> None:
        vals, val_bbs = list(vals), list(val_bbs)
        if len(vals) != len(val_bbs):
            raise IRError("unmatched vals and bbs")
        for val in vals:
            if val.type is not ty:
                raise IRError("bad type for phi")
        super().__init__(ty, OpID.PHI, None)
        for val, val_bb in zip(vals, val_bbs):
            self.add_operand(val)
            self.add_operand(val_bb)
        self.parent = bb

    @staticmethod
    def create_phi(
        ty: Type,
        bb: BasicBlock,
        vals: Sequence[Value] = (),
        val_bbs: Sequence[BasicBlock] = (),
    ) -> PhiInst:
        return PhiInst(ty, vals, val_bbs, bb)

    def __str__(self) -> str:
        pairs = [
            f"[ {print_as_op(val, False)}, {print_as_op(val_bb, False)} ]"
            for val, val_bb in zip(self.operands[0::2], self.operands[1::2])
        ]
        text = f"{self._result()} {self.type} " + ", ".join(pairs)
        preds = self.parent.pre_basic_blocks
        if len(self.operands) // 2 < len(preds):
            for pre_bb in preds:
                if all(op is not pre_bb for op in self.operands):
                    text += f", [ undef, {print_as_op(pre_bb, False)} ]"
        return text


class BitCastInst(Instruction):
    """Reinterpret a pointer as a pointer of another type."""

    def __init__(self, val: Value, ty: Type, bb: BasicBlock) -> None:
        if not val.type.is_pointer_type():
            raise IRError("BitCastInst operand is not pointer")
        if not ty.is_pointer_type():
            raise IRError("BitCastInst destination type is not pointer")
        super().__init__(ty, OpID.BITCAST, bb)
        self.add_operand(val)

    @staticmethod
    def create_bitcast(val: Value, ty: Type, bb: BasicBlock) -> BitCastInst:
        return BitCastInst(val, ty, bb)

    @property
    def dest_type(self) -> Type:
        return self.type

    def __str__(self) -> str:
        return (
            f"{self._result()} {print_as_op(self.operands[0], True)} to {self.type}"
        )