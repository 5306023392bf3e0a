import io, tempfile
from contextlib import redirect_stdout
from pathlib import Path

from descummer import main
from tests.base_test import BaseScriptTest, push_byte


class TestDescummer(BaseScriptTest):
    def setUp(self):
        self.temporary_directory = tempfile.TemporaryDirectory()
        self.folder = Path(self.temporary_directory.name)

        room_folder = Path(self.folder, "ROOM_0001")
        room_folder.mkdir()
        Path(self.folder, "SCRP_0001.dmp").write_bytes(self.make_resource(push_byte(1) + [0x1A, 0x66]))
        Path(room_folder, "ENCD.dmp").write_bytes(self.make_resource([0x65], tag="ENCD"))
        Path(room_folder, "BOXD.dmp").write_bytes(b"BOXD\x00\x00\x00\x08")

    def tearDown(self):
        self.temporary_directory.cleanup()

    def run_main(self, argv):
        output = io.StringIO()
        with redirect_stdout(output):
            return_code = main(argv)

        return return_code, output.getvalue()

    def add_broken_script(self):
        Path(self.folder, "LSCR_0000.dmp").write_bytes(self.make_resource([0x04], tag="LSCR"))

    def test_no_arguments(self):
        return_code, _ = self.run_main([])

        self.assertEqual(return_code, 1)

    def test_invalid_path(self):
        return_code, output = self.run_main([str(Path(self.folder, "missing"))])

        self.assertEqual(return_code, 1)
        self.assertIn("Invalid path", output)

    def test_folder(self):
        return_code, output = self.run_main([str(self.folder)])

        self.assertEqual(return_code, 0)
        self.assertIn("2 script(s) disassembled", output)
        self.assertTrue(Path(self.folder, "SCRP_0001.json").is_file())
        self.assertTrue(Path(self.folder, "ROOM_0001", "ENCD.json").is_file())
        self.assertFalse(Path(self.folder, "ROOM_0001", "BOXD.json").exists())

    def test_broken_script_continues(self):
        self.add_broken_script()

        return_code, output = self.run_main([str(self.folder)])

        self.assertEqual(return_code, 2)
        self.assertIn("LSCR_0000.dmp", output)
        self.assertIn("1 script(s) failed to decode", output)
        self.assertTrue(Path(self.folder, "SCRP_0001.json").is_file())
        self.assertTrue(Path(self.folder, "ROOM_0001", "ENCD.json").is_file())

    def test_broken_script_strict(self):
        self.add_broken_script()

        return_code, _ = self.run_main(["-s", str(self.folder)])

        self.assertEqual(return_code, 2)
        self.assertFalse(Path(self.folder, "ROOM_0001", "ENCD.json").exists())

    def test_print_listing(self):
        return_code, output = self.run_main(["-p", str(Path(self.folder, "SCRP_0001.dmp"))])

        self.assertEqual(return_code, 0)
        self.assertIn("[000A] (1A) pop() ; stack -1", output)
        self.assertFalse(Path(self.folder, "SCRP_0001.json").exists())
