# lightir

`lightir` builds programs in a small LLVM-style intermediate representation
and prints them as LLVM-style text. It is meant to be the back end of a small
compiler. A front end emits functions, basic blocks and instructions into a
`Module`. Calling `str()` on the module gives the IR text.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Concepts

- **Module** (`lightir.module.Module`) owns the types. It has one shared
  instance each of `void_type`, `label_type`, `int1_type`, `int8_type`,
  `int32_type`, `int64_type` and `float_type`. It also has the properties
  `int8_ptr_type`, `int32_ptr_type` and `float_ptr_type`.
  `get_pointer_type`, `get_array_type` and `get_function_type` create types
  and cache them. Two types are therefore equal exactly when they are the
  same object. The module keeps its functions in `functions` and its
  globals in `global_variables`.
- **Types** (`lightir.types`) are `Type`, `IntegerType`, `FloatType`,
  `PointerType`, `ArrayType` and `FunctionType`. Each is identified by a
  `TypeID`. `str()` gives the LLVM spelling, for example `i32*`,
  `[4 x float]` or `i32 (i32, float)`. `Type.size()` gives the size in
  bytes of `i1`, `i32`, `float`, pointer and array types.
- **Values and users** (`lightir.value`). Every `Value` keeps a list of
  `Use` records. `User.set_operand`, `add_operand`, `remove_operand`,
  `remove_all_operands`, `Value.replace_all_use_with` and
  `Value.replace_use_with_if` keep the def-use chains consistent.
  `print_as_op` renders a value as an operand.
- **Constants** (`lightir.constant`):
  - `ConstantInt.get` gives an i32 constant. `get_bool` gives an i1 and
    `get_int64` gives an i64.
  - `ConstantFP.get` rounds its value to single precision. It prints as the
    hexadecimal bit pattern of the double.
  - `ConstantArray` holds an array of constants.
  - `ConstantZero` prints as `zeroinitializer`.

  Integer, float and zero constants are interned per module.
- **Globals, functions and blocks**:
  - `GlobalVariable.create` (`lightir.global_variable`) creates a global.
    Its type is a pointer to the given type.
  - `Function.create` (`lightir.function`) creates a function whose formal
    arguments are in `args`. A function without basic blocks prints as a
    `declare`.
  - `BasicBlock` (`lightir.basic_block`) is a block in a function. It
    records its predecessors in `pre_basic_blocks` and its successors in
    `succ_basic_blocks`.
- **Instructions** (`lightir.instruction`) are built with factory methods:
  - arithmetic: `IBinaryInst.create_add`/`create_sub`/`create_mul`/`create_sdiv`
    and `FBinaryInst.create_fadd`/`create_fsub`/`create_fmul`/`create_fdiv`;
  - comparison: `ICmpInst.create_ge`/`create_gt`/`create_le`/`create_lt`/`create_eq`/`create_ne`
    and the `FCmpInst` counterparts `create_fge` to `create_fne`;
  - control flow: `BranchInst.create_br`, `BranchInst.create_cond_br`,
    `ReturnInst.create_ret` and `ReturnInst.create_void_ret`;
  - memory: `AllocaInst.create_alloca`, `LoadInst.create_load`,
    `StoreInst.create_store` and `GetElementPtrInst.create_gep`;
  - calls: `CallInst.create_call`;
  - casts: `ZextInst.create_zext`, `ZextInst.create_zext_to_i32`,
    `FpToSiInst.create_fptosi`, `FpToSiInst.create_fptosi_to_i32`,
    `SiToFpInst.create_sitofp` and `BitCastInst.create_bitcast`;
  - `PhiInst.create_phi`.

  A `PhiInst` belongs to its block but is not appended to the block's
  `instructions`. When it is printed, it adds `[ undef, ... ]` for every
  predecessor block that it does not name.
- **Operation codes** (`lightir.opcodes`): `OpID` enumerates the operations.
  `op_name` gives the mnemonic of an operation, such as `sge` for `OpID.GE`.

## Example

This example builds a function that adds two integers:

```python
from lightir.module import Module
from lightir.function import Function
from lightir.basic_block import BasicBlock
from lightir.instruction import IBinaryInst, ReturnInst

m = Module()
i32 = m.int32_type
fn_ty = m.get_function_type(i32, [i32, i32])
add = Function.create(fn_ty, "add", m)

entry = BasicBlock(m, "entry", add)
a, b = add.args
total = IBinaryInst.create_add(a, b, entry)
ReturnInst.create_ret(total, entry)

print(m)
```

The output is:

```
define i32 @add(i32 %arg0, i32 %arg1) {
entry:
  %op2 = add i32 %arg0, %arg1
  ret i32 %op2
}
```

When the module is printed, unnamed arguments, blocks and non-void
instructions are named `argN`, `labelN` and `opN`.

## Errors

Misuse of the builder raises `lightir.types.IRError`. Examples:

- adding an instruction to a block that already ends in `ret` or `br`;
- giving operands of the wrong type;
- calling a function with the wrong number or types of arguments;
- returning a value of the wrong type;
- asking for the pointee of a type that is not a pointer.

An operand index that is out of range raises `IndexError`.

## What it does not do

`lightir` only builds and prints IR. It has no lexer, parser or syntax tree
for a source language. It has no command-line tool, and it does not check,
optimise, run or compile the IR it prints.

## Running the tests

```
pytest
```