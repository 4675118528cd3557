#!/usr/bin/env python
from httpfs.commands.runner import Command
import sys
from datetime import datetime


class HTTPFSInfo(Command):

    usage = """httpfsinfo [OPTION]... BASE PATH...
Display information regarding resources served beneath the BASE url"""

    version = "1.0"

    def get_optparse(self):
        optparse = super(HTTPFSInfo, self).get_optparse()
        optparse.add_option('-k', '--key', dest='keys', action='append', default=[],
                            help='display KEYS only')
        optparse.add_option('-s', '--simple', dest='simple', action='store_true', default=False,
                            help='info displayed in simple format (no table)')
        optparse.add_option('-o', '--omit', dest='omit', action='store_true', default=False,
                            help='omit path name from output')
        return optparse

    def do_run(self, options, args):

        def wrap_value(val):
            if val.rstrip() == '\0':
                return self.wrap_error('... missing ...')
            return val

        def make_printable(value):
            if isinstance(value, datetime):
                return value.isoformat()
            return str(value)

        keys = options.keys or None
        fs, paths = self.get_resources(args, options)
        for path in paths:
            if not options.omit:
                if options.simple:
                    file_line = '%s\n' % self.wrap_filename(path)
                else:
                    file_line = '[%s] %s\n' % (self.wrap_filename(path), self.wrap_faded(fs.display_url(path)))
                self.output(file_line)
            info = fs.getinfo(path)
            info['url'] = fs.display_url(path)

            if keys:
                table = [(k, make_printable(info.get(k, '\0'))) for k in keys]
            else:
                table = [(k, make_printable(info[k])) for k in sorted(info.keys())]

            if options.simple:
                for row in table:
                    self.output(row[-1] + '\n')
            else:
                self.output_table(table, {0: self.wrap_table_header, 1: wrap_value})


def run(argv=None):
    return HTTPFSInfo().run(argv)


if __name__ == "__main__":
    sys.exit(run())
