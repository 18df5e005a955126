
import sys


class LineReader:
    """ Simple wrapper of source lines.
        Accepts either the whole text or an iterable of lines.
    """

    def __init__(self, src):
        if isinstance(src, str):
            src = src.splitlines()
        self.obj = [line.rstrip('\r\n') for line in src]
        self.ptr = 0

    def pos(self):
        return self.ptr

    def line(self):
        return self.obj[self.ptr]

    def forward(self, c=1):
        self.ptr += c

    def eof(self):
        return self.ptr >= len(self.obj)


class StrWriter:
    """ Writer, output string into screen/file.
    """

    def __init__(self, src=None, sep=' ', sepline='\n'):

        if not src:
            self.obj = sys.stdout
            self.closeable = False
        elif isinstance(src, str):
            self.obj = open(src, 'w')
            self.closeable = True
        elif hasattr(src, 'write'):
            self.obj = src
            self.closeable = False
        else:
            raise TypeError('Cannot write to %r' % src)

        self.sep = sep
        self.sepline = sepline

    def write(self, c):
        self.obj.write(c if isinstance(c, str) else str(c))

    def writeln(self, c=''):
        self.write(c)
        self.obj.write(self.sepline)

    def writeword(self, c):
        self.write(c)
        self.obj.write(self.sep)

    def close(self):

        if self.closeable:
            self.obj.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
