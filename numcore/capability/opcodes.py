"""Opcodes for the operations probed by capability predicates."""
import operator
from enum import Enum

# Opcode definitions.
BinOpcode = Enum('BinOpcode', 'ADD SUB MUL DIV')
CmpOpcode = Enum('CmpOpcode', 'LT GT')

# Opcodes to operator functions.
BIN_OPCODE_TO_FN = {
    BinOpcode.ADD: operator.add,
    BinOpcode.SUB: operator.sub,
    BinOpcode.MUL: operator.mul,
    BinOpcode.DIV: operator.truediv,
}
CMP_OPCODE_TO_FN = {
    CmpOpcode.LT: operator.lt,
    CmpOpcode.GT: operator.gt,
}
OPCODE_TO_FN = {**BIN_OPCODE_TO_FN, **CMP_OPCODE_TO_FN}

# Opcodes to abbreviated "magic method" names (e.g. __add__)
BIN_OPCODE_TO_METHOD_NAME = {
    BinOpcode.ADD: 'add',
    BinOpcode.SUB: 'sub',
    BinOpcode.MUL: 'mul',
    BinOpcode.DIV: 'truediv',
}
CMP_OPCODE_TO_METHOD_NAME = {
    CmpOpcode.LT: 'lt',
    CmpOpcode.GT: 'gt',
}
OPCODE_TO_METHOD_NAME = {
    **BIN_OPCODE_TO_METHOD_NAME,
    **CMP_OPCODE_TO_METHOD_NAME
}

# Opcodes to human-readable operator representations.
BIN_OPCODE_TO_REPR = {
    BinOpcode.ADD: '+',
    BinOpcode.SUB: '-',
    BinOpcode.MUL: '*',
    BinOpcode.DIV: '/',
}
CMP_OPCODE_TO_REPR = {
    CmpOpcode.LT: '<',
    CmpOpcode.GT: '>',
}
OPCODE_TO_REPR = {**BIN_OPCODE_TO_REPR, **CMP_OPCODE_TO_REPR}
