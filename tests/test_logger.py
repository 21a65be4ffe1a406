import pytest

from drills.logger import Logger, StdoutLogger, VerbosityFilter


class _Recorder(Logger):
    def __init__(self):
        self.records = []

    def log(self, verbosity, message):
        self.records.append((verbosity, message))


def test_stdout_logger_format(capsys):
    StdoutLogger().log(2, "Uhoh")
    assert capsys.readouterr().out == "verbosity=2: Uhoh\n"


def test_filter_drops_verbose_messages(capsys):
    logger = VerbosityFilter(max_verbosity=3, inner=StdoutLogger())
    logger.log(5, "FYI")
    logger.log(2, "Uhoh")
    assert capsys.readouterr().out == "verbosity=2: Uhoh\n"


def test_filter_default_inner_is_stdout(capsys):
    VerbosityFilter(max_verbosity=1).log(1, "hello")
    assert capsys.readouterr().out == "verbosity=1: hello\n"


def test_filter_boundary_is_inclusive():
    recorder = _Recorder()
    logger = VerbosityFilter(max_verbosity=3, inner=recorder)
    logger.log(3, "edge")
    logger.log(4, "over")
    logger.log(0, "quiet")
    assert recorder.records == [(3, "edge"), (0, "quiet")]


def test_filters_can_be_chained():
    recorder = _Recorder()
    logger = VerbosityFilter(5, VerbosityFilter(2, recorder))
    logger.log(4, "middle")
    logger.log(1, "low")
    assert recorder.records == [(1, "low")]


def test_logger_is_abstract():
    with pytest.raises(TypeError):
        Logger()