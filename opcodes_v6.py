"""
SCUMM v6 opcode tables

Every opcode byte maps to one OpcodeDescriptor. Group opcodes (cursorCommand,
actorOps, the print family...) carry a second table keyed by the byte that
follows them in the bytecode. The same byte value means different things in
different sub-tables, so lookups are always scoped to one OpcodeTable.

Parameter format codes are described in parameter_decoder.py. Signatures are
the code generation hints kept for printers:
    p = popped argument, r = pushes a result, l = argument list,
    z = actor/object pair, s = string parameter, v = variable parameter,
    w = word parameter, j = jump target
"""

from script_exceptions import UnknownOpcodeException

# Instruction categories
LOAD = "load"
STORE = "store"
DUP = "dup"
UNARY_OP = "unary_op"
BINARY_OP = "binary_op"
COMPARISON = "comparison"
STACK_ADJUST = "stack_adjust"
COND_JUMP_RELATIVE = "cond_jump_relative"
JUMP_RELATIVE = "jump_relative"
SPECIAL_CALL = "special_call"
GROUP_DISPATCH = "group_dispatch"

categories = [
    LOAD, STORE, DUP, UNARY_OP, BINARY_OP, COMPARISON, STACK_ADJUST,
    COND_JUMP_RELATIVE, JUMP_RELATIVE, SPECIAL_CALL, GROUP_DISPATCH
]

# Legacy packed stack effects at or above this value are variable-argument codes
VARIABLE_ARGS_THRESHOLD = 0x1000


class VariableArgs:
    """Stack effect of an opcode that pops a counted argument list.

    pop_before: values pushed after the list (popped before it)
    pop_after: values pushed before the list (popped after it)
    push_total: values pushed back
    """

    def __init__(self, pop_before, pop_after, push_total):
        for field in (pop_before, pop_after, push_total):
            if not 0 <= field <= 0xF:
                raise ValueError(f"Variable argument fields are 4-bit, got {field}")

        self.pop_before = pop_before
        self.pop_after = pop_after
        self.push_total = push_total

    def base_delta(self):
        return -self.pop_before - self.pop_after + self.push_total

    def pack(self):
        return VARIABLE_ARGS_THRESHOLD | (self.pop_before << 8) | (self.pop_after << 4) | self.push_total

    def __eq__(self, other):
        if not isinstance(other, VariableArgs):
            return NotImplemented
        return (self.pop_before, self.pop_after, self.push_total) == (other.pop_before, other.pop_after, other.push_total)

    def __hash__(self):
        return hash((self.pop_before, self.pop_after, self.push_total))

    def __repr__(self):
        return f"VariableArgs({self.pop_before}, {self.pop_after}, {self.push_total})"


def stack_effect_from_code(code):
    if code >= VARIABLE_ARGS_THRESHOLD:
        return VariableArgs((code >> 8) & 0xF, (code >> 4) & 0xF, code & 0xF)
    return code

def is_variable_effect(stack_effect):
    return isinstance(stack_effect, VariableArgs)


class OpcodeDescriptor:
    def __init__(self, opcode, mnemonic, category, stack_effect, param_format = "", operator = None, signature = None, sub_table = None):
        if category not in categories:
            raise ValueError(f"Unknown category {category!r} for {mnemonic}")
        if (category == GROUP_DISPATCH) != (sub_table is not None):
            raise ValueError(f"Only group opcodes carry a sub-table ({mnemonic})")

        self.opcode = opcode
        self.mnemonic = mnemonic
        self.category = category
        self.stack_effect = stack_effect
        self.param_format = param_format
        self.operator = operator
        self.signature = signature
        self.sub_table = sub_table

    def __repr__(self):
        return f"OpcodeDescriptor(0x{self.opcode:02X}, {self.mnemonic!r}, {self.category}, {self.stack_effect!r})"


class OpcodeTable:
    def __init__(self, name, descriptors):
        self.name = name
        self._entries = {}

        for descriptor in descriptors:
            if descriptor.opcode in self._entries:
                raise ValueError(f"Duplicate opcode 0x{descriptor.opcode:02X} in table {name}")
            self._entries[descriptor.opcode] = descriptor

    def lookup(self, value, address = None):
        if value not in self._entries:
            raise UnknownOpcodeException(value, address, self.name)
        return self._entries[value]

    def get(self, value):
        return self._entries.get(value)

    def __contains__(self, value):
        return value in self._entries

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(sorted(self._entries.values(), key = lambda descriptor: descriptor.opcode))

    def __repr__(self):
        return f"OpcodeTable({self.name!r}, {len(self)} entries)"


def op(opcode, mnemonic, category, stack_effect, param_format = "", operator = None):
    return OpcodeDescriptor(opcode, mnemonic, category, stack_effect, param_format, operator)

def call(opcode, mnemonic, stack_effect, signature = None, params = ""):
    return OpcodeDescriptor(opcode, mnemonic, SPECIAL_CALL, stack_effect, params, signature = signature)

def group(opcode, sub_table):
    return OpcodeDescriptor(opcode, sub_table.name, GROUP_DISPATCH, 0, sub_table = sub_table)


cursor_command = OpcodeTable("cursorCommand", [
    call(0x90, "cursorCmd_CursorOn", 0),
    call(0x91, "cursorCmd_CursorOff", 0),
    call(0x92, "cursorCmd_UserputOn", 0),
    call(0x93, "cursorCmd_UserputOff", 0),
    call(0x94, "cursorCmd_SoftOn", 0),
    call(0x95, "cursorCmd_SoftOff", 0),
    call(0x96, "cursorCmd_UserputSoftOn", 0),
    call(0x97, "cursorCmd_UserputSoftOff", 0),
    call(0x99, "cursorCmd_Image", -2, "z"),
    call(0x9A, "cursorCmd_Hotspot", -2, "pp"),
    call(0x9C, "cursorCmd_CharsetSet", -1, "p"),
    call(0x9D, "cursorCmd_CharsetColors", VariableArgs(0, 0, 0), "l"),
    call(0xD6, "cursorCmd_Transparent", -1, "p"),
])

resource_routines = OpcodeTable("resourceRoutines", [
    call(0x64, "resRoutine_loadScript", -1, "p"),
    call(0x65, "resRoutine_loadSound", -1, "p"),
    call(0x66, "resRoutine_loadCostume", -1, "p"),
    call(0x67, "resRoutine_loadRoom", -1, "p"),
    call(0x68, "resRoutine_nukeScript", -1, "p"),
    call(0x69, "resRoutine_nukeSound", -1, "p"),
    call(0x6A, "resRoutine_nukeCostume", -1, "p"),
    call(0x6B, "resRoutine_nukeRoom", -1, "p"),
    call(0x6C, "resRoutine_lockScript", -1, "p"),
    call(0x6D, "resRoutine_lockSound", -1, "p"),
    call(0x6E, "resRoutine_lockCostume", -1, "p"),
    call(0x6F, "resRoutine_lockRoom", -1, "p"),
    call(0x70, "resRoutine_unlockScript", -1, "p"),
    call(0x71, "resRoutine_unlockSound", -1, "p"),
    call(0x72, "resRoutine_unlockCostume", -1, "p"),
    call(0x73, "resRoutine_unlockRoom", -1, "p"),
    call(0x75, "resRoutine_loadCharset", -1, "p"),
    call(0x76, "resRoutine_nukeCharset", -1, "p"),
    call(0x77, "resRoutine_loadFlObject", -2, "pp"),
])

room_ops = OpcodeTable("roomOps", [
    call(0xAC, "roomOp_roomScroll", -2, "pp"),
    call(0xAE, "roomOp_setScreen", -2, "pp"),
    call(0xAF, "roomOp_setPalColor", -4, "pppp"),
    call(0xB0, "roomOp_shakeOn", 0),
    call(0xB1, "roomOp_shakeOff", 0),
    call(0xB3, "roomOp_darkenPalette", -3, "ppp"),
    call(0xB4, "roomOp_saveLoadRoom", -2, "pp"),
    call(0xB5, "roomOp_screenEffect", -1, "p"),
    call(0xB6, "roomOp_darkenPaletteRGB", -5, "ppppp"),
    call(0xB7, "roomOp_setupShadowPalette", -5, "ppppp"),
    call(0xBA, "roomOp_palManipulate", -4, "pppp"),
    call(0xBB, "roomOp_colorCycleDelay", -2, "pp"),
    call(0xD5, "roomOp_setPalette", -1, "p"),
    call(0xDC, "roomOp_copyPalColor", -2, "pp"),
])

actor_ops = OpcodeTable("actorOps", [
    call(0x4C, "actorOp_setCostume", -1, "p"),
    call(0x4D, "actorOp_setWalkSpeed", -2, "pp"),
    call(0x4E, "actorOp_setSound", VariableArgs(0, 0, 0), "l"),
    call(0x4F, "actorOp_setWalkFrame", -1, "p"),
    call(0x50, "actorOp_setTalkFrame", -2, "pp"),
    call(0x51, "actorOp_setStandFrame", -1, "p"),
    call(0x52, "actorOp_82?", -3, "ppp"),
    call(0x53, "actorOp_init", 0),
    call(0x54, "actorOp_setElevation", -1, "p"),
    call(0x55, "actorOp_setDefAnim", 0),
    call(0x56, "actorOp_setPalette", -2, "pp"),
    call(0x57, "actorOp_setTalkColor", -1, "p"),
    call(0x58, "actorOp_setName", 0, "s", params = "c"),
    call(0x59, "actorOp_setInitFrame", -1, "p"),
    call(0x5B, "actorOp_setWidth", -1, "p"),
    call(0x5C, "actorOp_setScale", -1, "p"),
    call(0x5D, "actorOp_setNeverZClip", 0),
    call(0x5E, "actorOp_setAlwaysZClip", -1, "p"),
    call(0x5F, "actorOp_setIgnoreBoxes", 0),
    call(0x60, "actorOp_setFollowBoxes", 0),
    call(0x61, "actorOp_setAnimSpeed", -1, "p"),
    call(0x62, "actorOp_setShadowMode", -1, "p"),
    call(0x63, "actorOp_setTalkPos", -2, "pp"),
    call(0xC5, "actorOp_setCurActor", -1, "p"),
    call(0xC6, "actorOp_setAnimVar", -2, "pp"),
    call(0xD7, "actorOp_setIgnoreTurnsOn", 0),
    call(0xD8, "actorOp_setIgnoreTurnsOff", 0),
    call(0xD9, "actorOp_initLittle", 0),
    call(0xE1, "actorOp_setAlwaysZClip?", -1, "p"),
    call(0xE3, "actorOp_setLayer", -1, "p"),
    call(0xE4, "actorOp_setWalkScript", -1, "p"),
    call(0xE5, "actorOp_setStanding", 0),
    call(0xE6, "actorOp_setDirection", -1, "p"),
    call(0xE7, "actorOp_turnToDirection", -1, "p"),
    call(0xE9, "actorOp_freeze", 0),
    call(0xEA, "actorOp_unfreeze", 0),
    call(0xEB, "actorOp_setTalkScript", -1, "p"),
])

verb_ops = OpcodeTable("verbOps", [
    call(0x7C, "verbOp_loadImg", -1, "p"),
    call(0x7D, "verbOp_loadString", 0, "s", params = "c"),
    call(0x7E, "verbOp_setColor", -1, "p"),
    call(0x7F, "verbOp_setHiColor", -1, "p"),
    call(0x80, "verbOp_setXY", -2, "pp"),
    call(0x81, "verbOp_setOn", 0),
    call(0x82, "verbOp_setOff", 0),
    call(0x83, "verbOp_kill", 0),
    call(0x84, "verbOp_init", 0),
    call(0x85, "verbOp_setDimColor", -1, "p"),
    call(0x86, "verbOp_setDimmed", 0),
    call(0x87, "verbOp_setKey", -1, "p"),
    call(0x88, "verbOp_setCenter", 0),
    call(0x89, "verbOp_setToString", -1, "p"),
    call(0x8B, "verbOp_setToObject", -2, "pp"),
    call(0x8C, "verbOp_setBkColor", -1, "p"),
    call(0xC4, "verbOp_setCurVerb", -1, "p"),
    call(0xFF, "verbOp_redraw", 0),
])

array_ops = OpcodeTable("arrayOps", [
    call(0xCD, "arrayOp_assignString", -1, params = "wc"),
    call(0xD0, "arrayOp_assignIntList", VariableArgs(1, 0, 0), params = "w"),
    call(0xD4, "arrayOp_assign2DimList", VariableArgs(1, 0, 0), params = "w"),
])

save_restore_verbs = OpcodeTable("saveRestoreVerbs", [
    call(0x8D, "srVerb_saveVerbs", -3, "ppp"),
    call(0x8E, "srVerb_restoreVerbs", -3, "ppp"),
    call(0x8F, "srVerb_deleteVerbs", -3, "ppp"),
])

wait_ops = OpcodeTable("wait", [
    call(0xA8, "waitForActor", -1, "pj", params = "s"),
    call(0xA9, "waitForMessage", 0),
    call(0xAA, "waitForCamera", 0),
    call(0xAB, "waitForSentence", 0),
    call(0xE2, "waitUntilActorDrawn", -1, "pj", params = "s"),
    call(0xE8, "waitUntilActorTurned", -1, "pj", params = "s"),
])

system_ops = OpcodeTable("systemOps", [
    call(0x9E, "systemOp_restartGame", 0),
    call(0x9F, "systemOp_pauseGame", 0),
    call(0xA0, "systemOp_shutDown", 0),
])

print_line = OpcodeTable("printLine", [
    call(0x41, "printLineXY", -2, "pp"),
    call(0x42, "printLineColor", -1, "p"),
    call(0x43, "printLineRight", -1, "p"),
    call(0x45, "printLineCenter", 0),
    call(0x47, "printLineLeft", 0),
    call(0x48, "printLineOverhead", 0),
    call(0x4A, "printLineMumble", 0),
    call(0x4B, "printLineMsg", 0, "s", params = "c"),
    call(0xFE, "printLineBegin", 0),
    call(0xFF, "printLineEnd", 0),
])

print_text = OpcodeTable("printText", [
    call(0x41, "printTextXY", -2, "pp"),
    call(0x42, "printTextColor", -1, "p"),
    call(0x43, "printTextRight", -1, "p"),
    call(0x45, "printTextCenter", 0),
    call(0x47, "printTextLeft", 0),
    call(0x48, "printTextOverhead", 0),
    call(0x4A, "printTextMumble", 0),
    call(0x4B, "printTextMsg", 0, "s", params = "c"),
    call(0xFE, "printTextBegin", 0),
    call(0xFF, "printTextEnd", 0),
])

print_debug = OpcodeTable("printDebug", [
    call(0x41, "printDebugXY", -2, "pp"),
    call(0x42, "printDebugColor", -1, "p"),
    call(0x43, "printDebugRight", -1, "p"),
    call(0x45, "printDebugCenter", 0),
    call(0x47, "printDebugLeft", 0),
    call(0x48, "printDebugOverhead", 0),
    call(0x4A, "printDebugMumble", 0),
    call(0x4B, "printDebugMsg", 0, "s", params = "c"),
    call(0xFE, "printDebugBegin", 0),
    call(0xFF, "printDebugEnd", 0),
])

print_system = OpcodeTable("printSystem", [
    call(0x41, "printSystemXY", -2, "pp"),
    call(0x42, "printSystemColor", -1, "p"),
    call(0x43, "printSystemRight", -1, "p"),
    call(0x45, "printSystemCenter", 0),
    call(0x47, "printSystemLeft", 0),
    call(0x48, "printSystemOverhead", 0),
    call(0x4A, "printSystemMumble", 0),
    call(0x4B, "printSystemMsg", 0, "s", params = "c"),
    call(0xFE, "printSystemBegin", 0),
    call(0xFF, "printSystemEnd", 0),
])

print_actor = OpcodeTable("printActor", [
    call(0x41, "printActorXY", -2, "pp"),
    call(0x42, "printActorColor", -1, "p"),
    call(0x43, "printActorRight", -1, "p"),
    call(0x45, "printActorCenter", 0),
    call(0x47, "printActorLeft", 0),
    call(0x48, "printActorOverhead", 0),
    call(0x4A, "printActorMumble", 0),
    call(0x4B, "printActorMsg", 0, "s", params = "c"),
    call(0xFE, "printActorBegin", -1, "p"),
    call(0xFF, "printActorEnd", 0),
])

print_ego = OpcodeTable("printEgo", [
    call(0x41, "printEgoXY", -2, "pp"),
    call(0x42, "printEgoColor", -1, "p"),
    call(0x43, "printEgoRight", -1, "p"),
    call(0x45, "printEgoCenter", 0),
    call(0x47, "printEgoLeft", 0),
    call(0x48, "printEgoOverhead", 0),
    call(0x4A, "printEgoMumble", 0),
    call(0x4B, "printEgoMsg", 0, "s", params = "c"),
    call(0xFE, "printEgoBegin", 0),
    call(0xFF, "printEgoEnd", 0),
])

dim_array = OpcodeTable("dimArray", [
    call(0xC7, "dimArrayInt", -1, "pv", params = "w"),
    call(0xC8, "dimArrayBit", -1, "pv", params = "w"),
    call(0xC9, "dimArrayNibble", -1, "pv", params = "w"),
    call(0xCA, "dimArrayByte", -1, "pv", params = "w"),
    call(0xCB, "dimArrayString", -1, "pv", params = "w"),
    call(0xCC, "dimArray_nukeArray", 0, "v", params = "w"),
])

dim_2dim_array = OpcodeTable("dim2DimArray", [
    call(0xC7, "dim2DimArrayInt", -2, "ppv", params = "w"),
    call(0xC8, "dim2DimArrayBit", -2, "ppv", params = "w"),
    call(0xC9, "dim2DimArrayNibble", -2, "ppv", params = "w"),
    call(0xCA, "dim2DimArrayByte", -2, "ppv", params = "w"),
    call(0xCB, "dim2DimArrayString", -2, "ppv", params = "w"),
])

SCUMM_V6_OPCODES = OpcodeTable("v6", [
    op(0x00, "pushByte", LOAD, 1, "B"),
    op(0x01, "pushWord", LOAD, 1, "s"),
    op(0x02, "pushByteVar", LOAD, 1, "B"),
    op(0x03, "pushWordVar", LOAD, 1, "w"),
    op(0x06, "byteArrayRead", LOAD, 0, "B"),
    op(0x07, "wordArrayRead", LOAD, 0, "w"),
    op(0x0A, "byteArrayIndexedRead", LOAD, -1, "B"),
    op(0x0B, "wordArrayIndexedRead", LOAD, -1, "w"),
    op(0x0C, "dup", DUP, 1),
    op(0x0D, "not", UNARY_OP, 0, operator = "!"),
    op(0x0E, "eq", COMPARISON, -1, operator = "=="),
    op(0x0F, "neq", COMPARISON, -1, operator = "!="),
    op(0x10, "gt", COMPARISON, -1, operator = ">"),
    op(0x11, "lt", COMPARISON, -1, operator = "<"),
    op(0x12, "le", COMPARISON, -1, operator = "<="),
    op(0x13, "ge", COMPARISON, -1, operator = ">="),
    op(0x14, "add", BINARY_OP, -1, operator = "+"),
    op(0x15, "sub", BINARY_OP, -1, operator = "-"),
    op(0x16, "mul", BINARY_OP, -1, operator = "*"),
    op(0x17, "div", BINARY_OP, -1, operator = "/"),
    op(0x18, "land", BINARY_OP, -1, operator = "&&"),
    op(0x19, "lor", BINARY_OP, -1, operator = "||"),
    op(0x1A, "pop", STACK_ADJUST, -1),
    op(0x42, "writeByteVar", STORE, -1, "B"),
    op(0x43, "writeWordVar", STORE, -1, "w"),
    op(0x46, "byteArrayWrite", STORE, -2, "B"),
    op(0x47, "wordArrayWrite", STORE, -2, "w"),
    op(0x4A, "byteArrayIndexedWrite", STORE, -3, "B"),
    op(0x4B, "wordArrayIndexedWrite", STORE, -3, "w"),
    op(0x4E, "byteVarInc", UNARY_OP, 0, "B", operator = "++"),
    op(0x4F, "wordVarInc", UNARY_OP, 0, "w", operator = "++"),
    op(0x52, "byteArrayInc", UNARY_OP, -1, "B", operator = "++"),
    op(0x53, "wordArrayInc", UNARY_OP, -1, "w", operator = "++"),
    op(0x56, "byteVarDec", UNARY_OP, 0, "B", operator = "--"),
    op(0x57, "wordVarDec", UNARY_OP, 0, "w", operator = "--"),
    op(0x5A, "byteArrayDec", UNARY_OP, -1, "B", operator = "--"),
    op(0x5B, "wordArrayDec", UNARY_OP, -1, "w", operator = "--"),
    op(0x5C, "jumpTrue", COND_JUMP_RELATIVE, -1, "s"),
    op(0x5D, "jumpFalse", COND_JUMP_RELATIVE, -1, "s"),
    call(0x5E, "startScript", VariableArgs(0, 2, 0), "lpp"),
    call(0x5F, "startScriptQuick", VariableArgs(0, 1, 0), "lp"),
    call(0x60, "startObject", VariableArgs(0, 3, 0), "lppp"),
    call(0x61, "drawObject", -2, "pp"),
    call(0x62, "drawObjectAt", -3, "ppp"),
    call(0x63, "drawBlastObject", -5, "ppppp"),
    call(0x64, "setBlastObjectWindow", -4, "pppp"),
    call(0x65, "stopObjectCodeA", 0),
    call(0x66, "stopObjectCodeB", 0),
    call(0x67, "endCutscene", 0),
    call(0x68, "beginCutscene", VariableArgs(0, 0, 0), "l"),
    call(0x69, "stopMusic", 0),
    call(0x6A, "freezeUnfreeze", -1, "p"),
    group(0x6B, cursor_command),
    call(0x6C, "breakHere", 0),
    call(0x6D, "ifClassOfIs", VariableArgs(0, 1, 1), "rlp"),
    call(0x6E, "setClass", VariableArgs(0, 1, 0), "lp"),
    call(0x6F, "getState", 0, "rp"),
    call(0x70, "setState", -2, "pp"),
    call(0x71, "setOwner", -2, "pp"),
    call(0x72, "getOwner", 0, "rp"),
    op(0x73, "jump", JUMP_RELATIVE, 0, "s"),
    call(0x74, "startSound", -1, "p"),
    call(0x75, "stopSound", -1, "p"),
    call(0x76, "startMusic", -1, "p"),
    call(0x77, "stopObjectScript", -1, "p"),
    call(0x78, "panCameraTo", -1, "p"),
    call(0x79, "actorFollowCamera", -1, "p"),
    call(0x7A, "setCameraAt", -1, "p"),
    call(0x7B, "loadRoom", -1, "p"),
    call(0x7C, "stopScript", -1, "p"),
    call(0x7D, "walkActorToObj", -3, "ppp"),
    call(0x7E, "walkActorTo", -3, "ppp"),
    call(0x7F, "putActorAtXY", -4, "pppp"),
    call(0x80, "putActorAtObject", -3, "zp"),
    call(0x81, "faceActor", -2, "pp"),
    call(0x82, "animateActor", -2, "pp"),
    call(0x83, "doSentence", -4, "pppp"),
    call(0x84, "pickupObject", -2, "z"),
    call(0x85, "loadRoomWithEgo", -4, "ppz"),
    call(0x87, "getRandomNumber", 0, "rp"),
    call(0x88, "getRandomNumberRange", -1, "rpp"),
    call(0x8A, "getActorMoving", 0, "rp"),
    call(0x8B, "isScriptRunning", 0, "rp"),
    call(0x8C, "getActorRoom", 0, "rp"),
    call(0x8D, "getObjectX", 0, "rp"),
    call(0x8E, "getObjectY", 0, "rp"),
    call(0x8F, "getObjectDir", 0, "rp"),
    call(0x90, "getActorWalkBox", 0, "rp"),
    call(0x91, "getActorCostume", 0, "rp"),
    call(0x92, "findInventory", -1, "rpp"),
    call(0x93, "getInventoryCount", 0, "rp"),
    call(0x94, "getVerbFromXY", -1, "rpp"),
    call(0x95, "beginOverride", 0),
    call(0x96, "endOverride", 0),
    call(0x97, "setObjectName", -1, "ps", params = "c"),
    call(0x98, "isSoundRunning", 0, "rp"),
    call(0x99, "setBoxFlags", VariableArgs(1, 0, 0), "pl"),
    call(0x9A, "createBoxMatrix", 0),
    group(0x9B, resource_routines),
    group(0x9C, room_ops),
    group(0x9D, actor_ops),
    group(0x9E, verb_ops),
    call(0x9F, "getActorFromXY", -1, "rpp"),
    call(0xA0, "findObject", -1, "rpp"),
    call(0xA1, "pseudoRoom", VariableArgs(0, 1, 0), "lp"),
    call(0xA2, "getActorElevation", 0, "rp"),
    call(0xA3, "getVerbEntrypoint", -1, "rpp"),
    group(0xA4, array_ops),
    group(0xA5, save_restore_verbs),
    call(0xA6, "drawBox", -5, "ppppp"),
    op(0xA7, "pop", STACK_ADJUST, -1),
    call(0xA8, "getActorWidth", 0, "rp"),
    group(0xA9, wait_ops),
    call(0xAA, "getActorScaleX", 0, "rp"),
    call(0xAB, "getActorAnimCounter", 0, "rp"),
    call(0xAC, "soundKludge", VariableArgs(0, 0, 0), "l"),
    call(0xAD, "isAnyOf", VariableArgs(0, 1, 1), "rlp"),
    group(0xAE, system_ops),
    call(0xAF, "isActorInBox", -1, "rpp"),
    call(0xB0, "delay", -1, "p"),
    call(0xB1, "delaySeconds", -1, "p"),
    call(0xB2, "delayMinutes", -1, "p"),
    call(0xB3, "stopSentence", 0),
    group(0xB4, print_line),
    group(0xB5, print_text),
    group(0xB6, print_debug),
    group(0xB7, print_system),
    group(0xB8, print_actor),
    group(0xB9, print_ego),
    call(0xBA, "talkActor", -1, "ps", params = "c"),
    call(0xBB, "talkEgo", 0, "s", params = "c"),
    group(0xBC, dim_array),
    call(0xBE, "startObjectQuick", VariableArgs(0, 2, 0), "lpp"),
    call(0xBF, "startScriptQuick2", VariableArgs(0, 1, 0), "lp"),
    group(0xC0, dim_2dim_array),
    call(0xC4, "abs", 0, "rp"),
    call(0xC5, "getDistObjObj", -1, "rpp"),
    call(0xC6, "getDistObjPt", -2, "rppp"),
    call(0xC7, "getDistPtPt", -3, "rpppp"),
    call(0xC8, "kernelGetFunctions", VariableArgs(0, 0, 0), "l"),
    call(0xC9, "kernelSetFunctions", VariableArgs(0, 0, 0), "l"),
    call(0xCA, "delayFrames", -1, "p"),
    call(0xCB, "pickOneOf", VariableArgs(0, 1, 1), "rlp"),
    call(0xCC, "pickOneOfDefault", VariableArgs(1, 1, 1), "rplp"),
    call(0xCD, "stampObject", -4, "pppp"),
    call(0xD0, "getDateTime", 0),
    call(0xD1, "stopTalking", 0),
    call(0xD2, "getAnimateVariable", -1, "rpp"),
    call(0xD4, "shuffle", -2, "vpp", params = "w"),
    call(0xD5, "jumpToScript", VariableArgs(0, 2, 0), "lpp"),
    op(0xD6, "band", BINARY_OP, -1, operator = "&"),
    op(0xD7, "bor", BINARY_OP, -1, operator = "|"),
    call(0xD8, "isRoomScriptRunning", 0, "rp"),
    call(0xDD, "findAllObjects", 0, "rp"),
    call(0xE1, "getPixel", -1, "rpp"),
    call(0xE3, "pickVarRandom", VariableArgs(0, 0, 1), "rlw", params = "w"),
    call(0xE4, "setBoxSet", -1, "p"),
    call(0xEC, "getActorLayer", 0, "rp"),
    call(0xED, "getObjectNewDir", 0, "rp"),
])
