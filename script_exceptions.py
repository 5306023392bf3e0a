class ScriptDecodeException(Exception):
    # instructions decoded before the failure, for diagnostics only
    partial_instructions = None


class UnknownOpcodeException(ScriptDecodeException):
    def __init__(self, opcode, address, table_name):
        self.opcode = opcode
        self.address = address
        self.table_name = table_name

        location = "unknown address" if address is None else f"0x{address:04X}"
        super().__init__(f"Unknown opcode 0x{opcode:02X} in table {table_name} at {location}")


class MalformedVariableArgumentException(ScriptDecodeException):
    def __init__(self, address, mnemonic, reason):
        self.address = address
        self.mnemonic = mnemonic
        self.reason = reason

        super().__init__(f"Malformed variable argument sequence for {mnemonic} at 0x{address:04X}: {reason}")


class TruncatedInputException(ScriptDecodeException):
    def __init__(self, position, needed, available):
        self.position = position
        self.needed = needed
        self.available = available

        super().__init__(f"Input truncated at 0x{position:04X}: need {needed} byte(s), {available} available")


class UnrecognizedResourceTagException(ScriptDecodeException):
    def __init__(self, tag):
        self.tag = tag

        super().__init__(f"Unrecognized resource tag {tag!r}")
