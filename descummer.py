"""
Descummer

Disassembles SCUMM v6 script resources (SCRP, LSCR, ENCD, EXCD and VERB
blocks) that have already been extracted from the game's resource files.
Every script is written out as a .json listing next to its .dmp file.
"""

import sys, time, math
from optparse import OptionParser
from pathlib import Path

import script_codec
from script_exceptions import ScriptDecodeException


class FileCrawler:
    strict = False
    print_listing = False

    decoded_count = 0
    failed_paths = []

    def __init__(self, strict, print_listing):
        self.strict = strict
        self.print_listing = print_listing
        self.decoded_count = 0
        self.failed_paths = []

    def crawl_folder(self, folder_path):
        for entry in sorted(folder_path.iterdir()):
            if entry.is_dir():
                self.crawl_folder(entry)
            elif entry.is_file() and script_codec.is_script_file(entry):
                self.process_file(entry)

    def process_file(self, file_path):
        try:
            if self.print_listing:
                print(f"; {file_path}")
                print(script_codec.format_listing(script_codec.read_script(file_path)))
            else:
                script_codec.decode(file_path)
        except ScriptDecodeException as e:
            self.failed_paths.append(file_path)
            print(f"Error decoding {file_path}: {e}")

            if self.strict:
                raise
            return

        self.decoded_count += 1


def main(argv = None):
    oparser = OptionParser(usage="%prog [options] path1 path2...",
                           version="Descummer 1.0",
                           description="Disassembles extracted SCUMM v6 script resources.")
    oparser.add_option("-s", "--strict", action="store_true",
                       dest="strict", default=False,
                       help="Stop at the first script that fails to decode.")
    oparser.add_option("-p", "--print", action="store_true",
                       dest="print_listing", default=False,
                       help="Print a listing of each script instead of writing .json files.")

    options, args = oparser.parse_args(argv)

    if len(args) == 0:
        print("Please give a directory or at least one script file as the argument to Descummer.")
        oparser.print_help()
        return 1

    start_time = time.time()

    file_crawler = FileCrawler(options.strict, options.print_listing)

    for arg in args:
        path = Path(arg).resolve()

        try:
            if path.is_dir():
                file_crawler.crawl_folder(path)
            elif path.is_file():
                file_crawler.process_file(path)
            else:
                print(f"Invalid path: {arg}")
                return 1
        except ScriptDecodeException:
            return 2

    total_time = time.time() - start_time

    if not options.print_listing:
        print(f"{file_crawler.decoded_count} script(s) disassembled in {math.floor(total_time)} seconds")

    if file_crawler.failed_paths:
        print(f"{len(file_crawler.failed_paths)} script(s) failed to decode")
        return 2

    return 0

if __name__ == "__main__":
    sys.exit(main())
