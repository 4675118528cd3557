#!/usr/bin/env python
from httpfs.commands.runner import Command
import shutil
import sys


class HTTPFSCat(Command):

    usage = """httpfscat [OPTION]... BASE FILE...
Concatenate FILE(s) served beneath the BASE url"""

    version = "1.0"

    def do_run(self, options, args):
        fs, paths = self.get_resources(args, options)
        count = 0
        for path in paths:
            self.output(fs.desc(path) + '\n', verbose=True)
            with fs.read_stream(path) as f:
                shutil.copyfileobj(f, self.output_file)
            count += 1
        if self.is_terminal() and count:
            self.output('\n')


def run(argv=None):
    return HTTPFSCat().run(argv)


if __name__ == "__main__":
    sys.exit(run())
