import logging
import sys
from optparse import OptionParser
from collections import defaultdict

from httpfs.httpfs import HTTPFS
from httpfs.errors import FSError, ResourceError
from httpfs.path import relpath, iswildcard


class Command(object):

    usage = ''
    version = ''

    def __init__(self, usage='', version=''):
        self.output_file = getattr(sys.stdout, 'buffer', sys.stdout)
        self.error_file = getattr(sys.stderr, 'buffer', sys.stderr)
        self.encoding = getattr(sys.stdout, 'encoding', 'utf-8') or 'utf-8'
        self.terminal_colors = not sys.platform.startswith('win') and self.is_terminal()
        self.name = self.__class__.__name__.lower()

    def is_terminal(self):
        try:
            return self.output_file.isatty()
        except AttributeError:
            return False

    def wrap_error(self, msg):
        if not self.terminal_colors:
            return msg
        return '\x1b[31m%s\x1b[0m' % msg

    def wrap_filename(self, fname):
        if not self.terminal_colors:
            return fname
        return '\x1b[1m%s\x1b[0m' % fname

    def wrap_faded(self, text):
        if not self.terminal_colors:
            return text
        return '\x1b[2m%s\x1b[0m' % text

    def wrap_table_header(self, name):
        if not self.terminal_colors:
            return name
        return '\x1b[1;32m%s\x1b[0m' % name

    def make_context(self, options):
        headers = list(options.headers or [])
        context = {'http': {'header': headers}}
        if options.timeout is not None:
            context['http']['timeout'] = options.timeout
        if options.insecure:
            context['ssl'] = {'verify_peer': False,
                              'verify_peer_name': False}
        return context

    def open_fs(self, base, options):
        return HTTPFS(base,
                      supports_head=not options.no_head,
                      context=self.make_context(options))

    def get_resources(self, args, options):
        """Open the FS named by the first argument and pair it with the
        paths that follow.

        """
        if not args:
            raise FSError("no base URL given")
        fs = self.open_fs(args[0], options)
        paths = args[1:]
        for path in paths:
            if iswildcard(path):
                raise ResourceError(path, msg="%(path)s: wildcards need a directory listing, which HTTP can't provide")
        return fs, [relpath(path) for path in paths]

    def text_encode(self, text):
        if isinstance(text, bytes):
            return text
        return text.encode(self.encoding, 'replace')

    def output(self, msgs, verbose=False):
        if verbose and not self.options.verbose:
            return
        if isinstance(msgs, (str, bytes)):
            msgs = (msgs,)
        for msg in msgs:
            self.output_file.write(self.text_encode(msg))

    def output_table(self, table, col_process=None, verbose=False):
        if verbose and not self.options.verbose:
            return
        if col_process is None:
            col_process = {}

        max_row_widths = defaultdict(int)

        for row in table:
            for col_no, col in enumerate(row):
                max_row_widths[col_no] = max(max_row_widths[col_no], len(col))

        for row in table:
            out_col = []
            for col_no, col in enumerate(row):
                td = col.ljust(max_row_widths[col_no])
                if col_no in col_process:
                    td = col_process[col_no](td)
                out_col.append(td)
            self.output_file.write(self.text_encode('%s\n' % '  '.join(out_col).rstrip()))

    def error(self, *msgs):
        for msg in msgs:
            self.error_file.write("{}: {}".format(self.name, msg).encode(self.encoding, 'replace'))

    def get_optparse(self):
        optparse = OptionParser(usage=self.usage, version=self.version)
        optparse.add_option('--debug', dest='debug', action="store_true", default=False,
                            help="Show debug information", metavar="DEBUG")
        optparse.add_option('-v', '--verbose', dest='verbose', action="store_true", default=False,
                            help="make output verbose", metavar="VERBOSE")
        optparse.add_option('--no-head', dest='no_head', action="store_true", default=False,
                            help="probe with GET, for servers that reject HEAD requests")
        optparse.add_option('--insecure', dest='insecure', action="store_true", default=False,
                            help="don't verify TLS certificates")
        optparse.add_option('-H', '--header', dest='headers', action='append', default=[],
                            help="send an extra request header, e.g. -H 'Accept: text/plain'",
                            metavar="HEADER")
        optparse.add_option('--timeout', dest='timeout', type="float", default=None,
                            help="network timeout in seconds", metavar="SECONDS")
        return optparse

    def run(self, argv=None):
        parser = self.get_optparse()
        options, args = parser.parse_args(argv)
        self.options = options

        if options.debug:
            logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

        try:
            return self.do_run(options, args) or 0
        except FSError as e:
            self.error(self.wrap_error(str(e)) + '\n')
            if options.debug:
                raise
            return 1
        except KeyboardInterrupt:
            if self.is_terminal():
                self.output("\n")
            return 0
        except Exception as e:
            self.error(self.wrap_error('Error - %s\n' % e))
            if options.debug:
                raise
            return 1
