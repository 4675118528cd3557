"""

  httpfs.tests:  testcases for the httpfs module

This module provides a small HTTP server that the network tests run
against. It serves a fixed tree of files from memory on an ephemeral port of
127.0.0.1, and records every request it receives.

"""

import os
import threading
import unittest
from unittest import mock
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit, unquote

from httpfs.request import basic_authorization


LAST_MODIFIED = 'Wed, 21 Oct 2015 07:28:00 GMT'
LAST_MODIFIED_TIMESTAMP = 1445412480

#: path -> (body, headers). A header value of None means "don't send it",
#: Content-Length is added from the body otherwise.
FILES = {
    'hello.txt': (b'Hello, World!',
                  {'Content-Type': 'text/plain; charset=utf-8',
                   'Last-Modified': LAST_MODIFIED}),
    'data.json': (b'{"answer": 42}',
                  {'Content-Type': 'application/json; charset=utf-8',
                   'Last-Modified': LAST_MODIFIED}),
    'docs/my file.txt': (b'caf\xc3\xa9\nline two\n',
                         {'Content-Type': 'text/plain'}),
    'nested/deep/bytes.bin': (bytes(range(256)),
                              {'Content-Type': 'application/octet-stream'}),
    'bare.txt': (b'no metadata here',
                 {'Content-Length': None}),
    'odd.txt': (b'',
                {'Content-Length': 'abc',
                 'Last-Modified': 'the day before yesterday',
                 'Content-Type': ' ; charset=utf-8'}),
    'dir/': (b'<html><body>index</body></html>',
             {'Content-Type': 'text/html'}),
}

#: path -> status for resources that exist but answer with something other than 200
STATUSES = {
    'empty/': 204,
    'created.txt': 201,
}


class FixtureRequestHandler(BaseHTTPRequestHandler):

    def log_message(self, format, *args):
        pass

    def do_HEAD(self):
        self.server.record(self)
        if self.server.reject_head:
            self.send_error(405)
            return
        self.respond(send_body=False)

    def do_GET(self):
        self.server.record(self)
        self.respond(send_body=True)

    def respond(self, send_body):
        credentials = self.server.credentials
        if credentials is not None and self.headers.get('Authorization') != basic_authorization(*credentials):
            self.send_response(401)
            self.send_header('WWW-Authenticate', 'Basic realm="fixture"')
            self.send_header('Content-Length', '0')
            self.end_headers()
            return

        path = unquote(urlsplit(self.path).path).lstrip('/')

        if path.startswith('redirect/'):
            self.send_response(302)
            self.send_header('Location', '/' + path[len('redirect/'):])
            self.send_header('Content-Length', '0')
            self.end_headers()
            return

        if path.startswith('offsite/') and self.server.offsite_url:
            self.send_response(302)
            self.send_header('Location', '%s/%s' % (self.server.offsite_url, path[len('offsite/'):]))
            self.send_header('Content-Length', '0')
            self.end_headers()
            return

        if path == 'loop':
            self.send_response(302)
            self.send_header('Location', '/loop')
            self.send_header('Content-Length', '0')
            self.end_headers()
            return

        if path in STATUSES:
            self.send_response(STATUSES[path])
            self.send_header('Content-Length', '0')
            self.end_headers()
            return

        if path not in FILES:
            self.send_error(404)
            return

        body, headers = FILES[path]
        self.send_response(200)
        if 'Content-Length' not in headers:
            self.send_header('Content-Length', str(len(body)))
        for name, value in headers.items():
            if value is not None:
                self.send_header(name, value)
        self.end_headers()
        if send_body:
            self.wfile.write(body)


class FixtureServer(ThreadingHTTPServer):

    daemon_threads = True

    def __init__(self, address, reject_head=False, credentials=None):
        ThreadingHTTPServer.__init__(self, address, FixtureRequestHandler)
        self.reject_head = reject_head
        self.credentials = credentials
        # offsite/* redirects here when set
        self.offsite_url = None
        self.requests = []
        self._requests_lock = threading.Lock()

    def record(self, handler):
        with self._requests_lock:
            self.requests.append((handler.command,
                                  unquote(urlsplit(handler.path).path),
                                  handler.headers))


def start_server(**kwargs):
    server = FixtureServer(('127.0.0.1', 0), **kwargs)
    thread = threading.Thread(target=server.serve_forever)
    thread.daemon = True
    thread.start()
    return server, thread


def stop_server(server, thread):
    server.shutdown()
    server.server_close()
    thread.join()


def server_url(server):
    host, port = server.server_address[:2]
    return 'http://%s:%d' % (host, port)


class NetworkTestCase(unittest.TestCase):
    """Base class for tests that make requests.

    Proxies configured in the environment are bypassed for the duration of
    each test.

    """

    def setUp(self):
        patcher = mock.patch.dict(os.environ, {'no_proxy': '*', 'NO_PROXY': '*'})
        patcher.start()
        self.addCleanup(patcher.stop)


class HTTPServerTestCase(NetworkTestCase):
    """Base class for tests that need the fixture server.

    Override `reject_head` or `credentials` in a subclass to change how the
    server behaves.

    """

    reject_head = False
    credentials = None

    def setUp(self):
        super(HTTPServerTestCase, self).setUp()
        self.server, self.server_thread = start_server(reject_head=self.reject_head,
                                                       credentials=self.credentials)

    def tearDown(self):
        stop_server(self.server, self.server_thread)

    def start_other_server(self, **kwargs):
        """Start another fixture server, stopped when the test ends."""
        server, thread = start_server(**kwargs)
        self.addCleanup(stop_server, server, thread)
        return server

    @property
    def server_url(self):
        return server_url(self.server)

    def requests_made(self):
        """List of (method, path) tuples received by the server so far."""
        return [(method, path) for method, path, _headers in self.server.requests]
