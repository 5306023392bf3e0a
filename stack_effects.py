"""
Resolution of variable-argument stack effects.

Opcodes taking an argument list are preceded by a push of the list length:

    push <fixed args popped after the list>   (pop_after of them)
    push <list values>                        (count of them)
    push <count>
    push <fixed args popped before the list>  (pop_before of them)
    <opcode>

The count is found by walking back past pop_before loads, and must be pushed
as a constant.
"""

from opcodes_v6 import LOAD, is_variable_effect
from script_exceptions import MalformedVariableArgumentException

# pushByte, pushWord
literal_push_opcodes = (0x00, 0x01)


def find_count_push(instructions, index):
    instruction = instructions[index]
    remaining_loads = instruction.stack_change.pop_before

    scan = index - 1
    while remaining_loads != 0:
        if scan < 0:
            raise MalformedVariableArgumentException(instruction.address, instruction.mnemonic,
                                                     "ran out of instructions looking for pushed arguments")
        if instructions[scan].category == LOAD:
            remaining_loads -= 1
        scan -= 1

    if scan < 0:
        raise MalformedVariableArgumentException(instruction.address, instruction.mnemonic,
                                                 "no argument count pushed before the call")

    return instructions[scan]

def read_argument_count(instruction, count_push):
    if count_push.category != LOAD or count_push.opcode not in literal_push_opcodes:
        raise MalformedVariableArgumentException(instruction.address, instruction.mnemonic,
                                                 f"argument count comes from {count_push.mnemonic} at 0x{count_push.address:04X}")

    count = count_push.params[0].value
    if count < 0:
        raise MalformedVariableArgumentException(instruction.address, instruction.mnemonic,
                                                 f"negative argument count {count}")

    return count

def resolve_stack_effect(instructions, index):
    instruction = instructions[index]
    effect = instruction.stack_change

    count = read_argument_count(instruction, find_count_push(instructions, index))

    # the count itself is popped along with the values it describes
    instruction.stack_change = effect.base_delta() - (count + 1)

def resolve_stack_effects(instructions):
    for index, instruction in enumerate(instructions):
        if is_variable_effect(instruction.stack_change):
            resolve_stack_effect(instructions, index)

    return instructions
