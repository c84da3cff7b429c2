"""An LLVM-style intermediate representation: types, values, constants,
functions, basic blocks, instructions and their textual form."""

__version__ = "0.1.0"