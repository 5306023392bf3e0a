import io, json, tempfile
from contextlib import redirect_stdout
from pathlib import Path

import script_codec
from tests.base_test import BaseScriptTest, push_byte, push_word


class TestScriptCodec(BaseScriptTest):
    def test_identify_script_type(self):
        self.assertEqual(script_codec.identify_script_type(Path("ROOM_0012/LSCR_0200.dmp")), "local")
        self.assertEqual(script_codec.identify_script_type(Path("SCRP_0001.dmp")), "global")
        self.assertEqual(script_codec.identify_script_type(Path("ROOM_0012/ENCD.dmp")), "enter")
        self.assertEqual(script_codec.identify_script_type(Path("OBCD_0100/VERB.dmp")), "object")
        self.assertEqual(script_codec.identify_script_type(Path("ROOM_0012/BOXD.dmp")), "unknown")

    def test_is_script_file(self):
        self.assertTrue(script_codec.is_script_file(Path("EXCD.dmp")))
        self.assertFalse(script_codec.is_script_file(Path("EXCD.json")))
        self.assertFalse(script_codec.is_script_file(Path("ZP01.dmp")))

    def test_listing(self):
        script = self.disassemble_code(push_byte(5) + push_byte(1) + [0x68, 0x6B, 0x90])

        self.assertEqual(script_codec.format_listing(script),
                         "[0008] (00) pushByte(5) ; stack +1\n"
                         "[000A] (00) pushByte(1) ; stack +1\n"
                         "[000C] (68) beginCutscene() ; stack -2\n"
                         "[000D] (6B90) cursorCmd_CursorOn() ; stack +0\n")

    def test_listing_verbs_and_strings(self):
        script = self.disassemble_code([0xBB] + list(b"Yo\xff\x01\x00"), tag="VERB")

        self.assertEqual(script_codec.format_listing(script),
                         "[0009] (BB) talkEgo(\"Yo\":newline:) ; stack +0\n")

    def test_script_to_json(self):
        script = self.disassemble_code(push_word(-3) + [0x73, 0x00, 0x00])
        output = script_codec.script_to_json(script)

        self.assertEqual(output["kind"], "SCRP")
        self.assertEqual(output["script_type"], "global")
        self.assertEqual(output["code_offset"], 8)
        self.assertNotIn("verbs", output)
        self.assertEqual(output["instructions"][0], {
            "address": 8,
            "opcode": 0x01,
            "mnemonic": "pushWord",
            "category": "load",
            "stack_change": 1,
            "params": [{"kind": "signed_word", "value": -3}],
        })
        self.assertEqual(output["instructions"][1]["jump_target"], 14)

    def test_decode_writes_json(self):
        with tempfile.TemporaryDirectory() as folder:
            script_path = Path(folder, "LSCR_0201.dmp")
            script_path.write_bytes(self.make_resource(push_byte(2) + [0x66], tag="LSCR", script_number=201))

            with redirect_stdout(io.StringIO()):
                json_path = script_codec.decode(script_path)

            self.assertEqual(json_path, Path(folder, "LSCR_0201.json"))
            output = json.loads(json_path.read_text())

        self.assertEqual(output["script_number"], 201)
        self.assertEqual([entry["mnemonic"] for entry in output["instructions"]], ["pushByte", "stopObjectCodeB"])
