""" Locating and reading source files.
"""

import logging
import os.path

from .errors import ReadError

logger = logging.getLogger(__name__)


class SourceReader:

    def __init__(self, suffix='.dopl', include_paths=None):
        self.suffix = suffix
        self.include_paths = list(include_paths) if include_paths else ['.']

    def check_suffix(self, filename):
        if not filename.endswith(self.suffix):
            raise ReadError('Unrecognised file type: %s' % filename)

    def get_fullname(self, filename):
        # searching full filename
        if os.path.isabs(filename):
            if os.path.isfile(filename):
                return filename
            raise ReadError('File %s does not exist' % filename)

        for path in self.include_paths:
            if os.path.isfile(os.path.join(path, filename)):
                return os.path.abspath(os.path.join(path, filename))

        raise ReadError('File %s does not exist' % filename)

    def process_file(self, filename):
        """ Returns the lines of the file, in order, without line ends.
        """
        self.check_suffix(filename)
        fullname = self.get_fullname(filename)
        logger.debug('Reading %s', fullname)

        try:
            with open(fullname, 'r') as finput:
                return [self.process_line(line) for line in finput]
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError('Cannot read %s: %s' % (filename, e))

    def process_line(self, string):
        """ Process a string in one line
        """
        return string.rstrip('\r\n')

    def list_folder(self, folder):
        """ All source files of a folder, sorted by name.
        """
        if not os.path.isdir(folder):
            raise ReadError('Folder %s does not exist' % folder)
        return sorted(os.path.join(folder, name) for name in os.listdir(folder)
                      if name.endswith(self.suffix) and os.path.isfile(os.path.join(folder, name)))
