"""Tests for source reading, the batch harness and the command line."""

import io
import os

import pytest

from pydopl import debug
from pydopl.__main__ import main
from pydopl.errors import ReadError
from pydopl.parse import Parser, Verdict
from pydopl.preprocess import SourceReader
from pydopl.util.ioutil import StrWriter


@pytest.fixture
def samples(tmp_path):
    good = tmp_path / 'good'
    bad = tmp_path / 'bad'
    good.mkdir()
    bad.mkdir()
    (good / 'assign.dopl').write_text('start\ninteger x ;\nx <- 5 ;\nfinish\n')
    (good / 'minimal.dopl').write_text('start finish\n')
    (good / 'notes.txt').write_text('not a program\n')
    (bad / 'char.dopl').write_text('start integer x ;\r\nx <- "a" ;\r\nfinish\r\n')
    return tmp_path


class TestSourceReader:
    def test_lines_without_line_ends(self, samples):
        reader = SourceReader()
        assert reader.process_file(str(samples / 'bad' / 'char.dopl')) == [
            'start integer x ;', 'x <- "a" ;', 'finish',
        ]

    def test_include_paths(self, samples):
        reader = SourceReader(include_paths=[str(samples / 'bad'), str(samples / 'good')])
        assert reader.process_file('minimal.dopl') == ['start finish']

    def test_wrong_suffix(self, samples):
        with pytest.raises(ReadError):
            SourceReader().process_file(str(samples / 'good' / 'notes.txt'))

    def test_missing_file(self, samples):
        with pytest.raises(ReadError):
            SourceReader().process_file(str(samples / 'nothing.dopl'))

    def test_list_folder(self, samples):
        names = [os.path.basename(f) for f in SourceReader().list_folder(str(samples / 'good'))]
        assert names == ['assign.dopl', 'minimal.dopl']

    def test_list_missing_folder(self, samples):
        with pytest.raises(ReadError):
            SourceReader().list_folder(str(samples / 'nowhere'))

    def test_check_file(self, samples):
        assert Parser().check_file(str(samples / 'good' / 'assign.dopl')) == Verdict.OK
        assert Parser().check_file(str(samples / 'bad' / 'char.dopl')) == Verdict.ERROR


def test_check_many(samples):
    out = io.StringIO()
    results = debug.check_many([str(samples / 'good'), str(samples / 'bad')], writer=StrWriter(out))

    assert [v for v in results.values()] == [Verdict.OK, Verdict.OK, Verdict.ERROR]
    assert out.getvalue() == 'ok\nok\n' + debug.SEPARATOR + '\nerror\n' + debug.SEPARATOR + '\n'


def test_str_writer_to_file(tmp_path):
    path = str(tmp_path / 'out.txt')
    with StrWriter(path) as writer:
        writer.writeword('ok')
        writer.writeln(Verdict.ERROR)
    with open(path) as f:
        assert f.read() == 'ok error\n'


class TestMain:
    def test_ok(self, samples, capsys):
        assert main([str(samples / 'good' / 'assign.dopl')]) == 0
        assert capsys.readouterr().out == 'ok\n'

    def test_error(self, samples, capsys):
        assert main([str(samples / 'bad' / 'char.dopl')]) == 0
        assert capsys.readouterr().out == 'error\n'

    @pytest.mark.parametrize('argv', [[], ['a.dopl', 'b.dopl']])
    def test_usage(self, argv, capsys):
        assert main(argv) == 2
        captured = capsys.readouterr()
        assert captured.out == ''
        assert 'Usage' in captured.err

    def test_wrong_extension(self, samples, capsys):
        path = str(samples / 'good' / 'notes.txt')
        assert main([path]) == 2
        assert capsys.readouterr().err == 'Unrecognised file type: %s\n' % path

    def test_missing_file(self, samples, capsys):
        path = str(samples / 'missing.dopl')
        assert main([path]) == 1
        captured = capsys.readouterr()
        assert captured.out == ''
        assert captured.err.startswith('Exception parsing: %s\n' % path)

    def test_help(self, capsys):
        assert main(['-h']) == 0
        assert 'batch' in capsys.readouterr().out

    def test_verbose(self, samples, capsys):
        assert main(['-v', str(samples / 'bad' / 'char.dopl')]) == 0
        assert capsys.readouterr().out == 'error\n'

    def test_batch(self, samples, capsys):
        assert main(['batch', str(samples / 'good'), str(samples / 'bad')]) == 0
        lines = [l for l in capsys.readouterr().out.splitlines() if l]
        assert lines == ['ok', 'ok', '==============', 'error', '==============']

    def test_batch_without_folders(self, capsys):
        assert main(['batch']) == 2

    def test_batch_missing_folder(self, samples, capsys):
        assert main(['batch', str(samples / 'nowhere')]) == 1
