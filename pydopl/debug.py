""" Batch checking over folders of sample programs.
"""

import logging

from .parse import Parser
from .preprocess import SourceReader
from .util.ioutil import StrWriter

logger = logging.getLogger(__name__)

SEPARATOR = '\n==============\n'


def check_many(folders, writer=None, reader=None):
    """ Check every source file of every folder, writing one verdict per
        file and a separator after each folder.
        Returns {filename: Verdict}.
    """
    writer = writer or StrWriter()
    reader = reader or SourceReader()
    results = {}

    for folder in folders:
        for filename in reader.list_folder(folder):
            verdict = Parser().check_file(filename, reader)
            logger.debug('%s: %s', filename, verdict)
            results[filename] = verdict
            writer.writeln(verdict)
        writer.writeln(SEPARATOR)

    return results
