"""Operation codes of instructions and their textual names."""

from __future__ import annotations

from enum import Enum, auto

from .types import IRError


class OpID(Enum):
    RET = auto()
    BR = auto()
    ADD = auto()
    SUB = auto()
    MUL = auto()
    SDIV = auto()
    FADD = auto()
    FSUB = auto()
    FMUL = auto()
    FDIV = auto()
    ALLOCA = auto()
    LOAD = auto()
    STORE = auto()
    GE = auto()
    GT = auto()
    LE = auto()
    LT = auto()
    EQ = auto()
    NE = auto()
    FGE = auto()
    FGT = auto()
    FLE = auto()
    FLT = auto()
    FEQ = auto()
    FNE = auto()
    PHI = auto()
    CALL = auto()
    GETELEMENTPTR = auto()
    ZEXT = auto()
    FPTOSI = auto()
    SITOFP = auto()
    BITCAST = auto()


_NAMES = {
    OpID.RET: "ret",
    OpID.BR: "br",
    OpID.ADD: "add",
    OpID.SUB: "sub",
    OpID.MUL: "mul",
    OpID.SDIV: "sdiv",
    OpID.FADD: "fadd",
    OpID.FSUB: "fsub",
    OpID.FMUL: "fmul",
    OpID.FDIV: "fdiv",
    OpID.ALLOCA: "alloca",
    OpID.LOAD: "load",
    OpID.STORE: "store",
    OpID.GE: "sge",
    OpID.GT: "sgt",
    OpID.LE: "sle",
    OpID.LT: "slt",
    OpID.EQ: "eq",
    OpID.NE: "ne",
    OpID.FGE: "uge",
    OpID.FGT: "ugt",
    OpID.FLE: "ule",
    OpID.FLT: "ult",
    OpID.FEQ: "ueq",
    OpID.FNE: "une",
    OpID.PHI: "phi",
    OpID.CALL: "call",
    OpID.GETELEMENTPTR: "getelementptr",
    OpID.ZEXT: "zext",
    OpID.FPTOSI: "fptosi",
    OpID.SITOFP: "sitofp",
    OpID.BITCAST: "bitcast",
}


def op_name(op_id: OpID) -> str:
    """The mnemonic written for ``op_id`` in textual IR."""
    try:
        return _NAMES[op_id]
    except (KeyError, TypeError):
        raise IRError(f"unknown operation {op_id!r}") from None