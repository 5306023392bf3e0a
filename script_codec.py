import sys, json
from pathlib import Path

from opcodes_v6 import is_variable_effect
from resource_header import script_types
from script_decoder import disassemble
from string_format import render_string

# file name markers of extracted script resources, checked in order
script_file_markers = {
    "SCRP_": "global",
    "LSCR_": "local",
    "ENCD": "enter",
    "EXCD": "exit",
    "VERB": "object",
}


def identify_script_type(script_path):
    for marker, script_type in script_file_markers.items():
        if marker in script_path.name:
            return script_type

    return "unknown"

def is_script_file(file_path):
    return file_path.suffix == ".dmp" and identify_script_type(file_path) != "unknown"

def parameter_to_json(param):
    if param.is_string():
        return {"kind": param.kind, "value": render_string(param.value)}

    return {"kind": param.kind, "value": param.value}

def instruction_to_json(instruction):
    entry = {}

    entry["address"] = instruction.address
    entry["opcode"] = instruction.opcode
    if instruction.group_opcode is not None:
        entry["group_opcode"] = instruction.group_opcode
    entry["mnemonic"] = instruction.mnemonic
    entry["category"] = instruction.category
    entry["stack_change"] = repr(instruction.stack_change) if is_variable_effect(instruction.stack_change) else instruction.stack_change
    entry["params"] = [parameter_to_json(param) for param in instruction.params]
    if instruction.operator is not None:
        entry["operator"] = instruction.operator
    if instruction.jump_target is not None:
        entry["jump_target"] = instruction.jump_target

    return entry

def script_to_json(script):
    header = script.header

    output_info = {}
    output_info["kind"] = header.kind
    output_info["script_type"] = script_types[header.kind]
    output_info["block_size"] = header.block_size
    output_info["code_offset"] = header.code_offset
    if header.script_number is not None:
        output_info["script_number"] = header.script_number
    if header.verb_offsets:
        output_info["verbs"] = [{"verb": verb, "offset": offset} for verb, offset in header.verb_offsets]
    output_info["instructions"] = [instruction_to_json(instruction) for instruction in script.instructions]

    return output_info

def format_listing(script):
    lines = []

    for verb, offset in script.verb_offsets:
        lines.append(f"verb {verb:02X} - {offset:04X}")

    for instruction in script.instructions:
        params = ", ".join(render_string(param.value) if param.is_string() else str(param.value) for param in instruction.params)
        lines.append(f"[{instruction.address:04X}] ({instruction.full_opcode:02X}) {instruction.mnemonic}({params}) ; stack {instruction.stack_change:+d}")

    return "\n".join(lines) + "\n"

def read_script(bytecode_file_path):
    bytecode_file = open(bytecode_file_path, 'rb')
    bytecode = bytecode_file.read()
    bytecode_file.close()

    return disassemble(bytecode)

def decode(bytecode_file_path):
    print(f"Decoding {bytecode_file_path}")

    script = read_script(bytecode_file_path)

    json_file_path = Path(bytecode_file_path.parent, bytecode_file_path.name.replace(".dmp", ".json"))

    json_file = open(json_file_path, 'w')
    json_file.write(json.dumps(script_to_json(script), indent=4))
    json_file.close()

    return json_file_path

if __name__ == "__main__":
    if sys.argv[1] == 'decode':
        decode(Path(sys.argv[2]).resolve())
    elif sys.argv[1] == 'list':
        print(format_listing(read_script(Path(sys.argv[2]).resolve())), end="")
