import io
import re

import pytest

from mipconv.msglog import Level, MessageLogger


def _plain_prefix(stream, level):
    stream.write(f"<{level}>")


def _logger(name=None):
    out = io.StringIO()
    logger = MessageLogger()
    logger.open(out, name)
    logger.set_prefix_func(_plain_prefix)
    return logger, out


def test_default_threshold_filters_info():
    logger, out = _logger()
    logger.log(Level.INFO, "hidden")
    logger.log(Level.NOTICE, "shown")
    assert out.getvalue() == f"<{int(Level.NOTICE)}>shown\n"


@pytest.mark.parametrize(
    "name, shown",
    [
        ("verbose", [Level.INFO, Level.NOTICE, Level.WARN, Level.ERR]),
        ("normal", [Level.NOTICE, Level.WARN, Level.ERR]),
        ("quiet", [Level.WARN, Level.ERR]),
        ("silent", [Level.ERR]),
    ],
)
def test_set_level(name, shown):
    logger, out = _logger()
    logger.set_level(name)
    for level in (Level.INFO, Level.NOTICE, Level.WARN, Level.ERR):
        logger.log(level, "m")
    assert out.getvalue() == "".join(f"<{int(lv)}>m\n" for lv in shown)


def test_unknown_level_name_is_ignored():
    logger, _ = _logger()
    logger.set_level("verbose")
    logger.set_level("nonsense")
    assert logger.level == Level.INFO


def test_default_prefix_format():
    out = io.StringIO()
    logger = MessageLogger(out, "mipconv")
    logger.log(Level.WARN, "careful")
    line = out.getvalue()
    stamp, sep, rest = line.partition("] ")
    assert sep == "] "
    assert rest == "mipconv: WARN: careful\n"
    assert bool(re.fullmatch(r"\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} .*", stamp)) is True


def test_default_prefix_labels():
    out = io.StringIO()
    logger = MessageLogger(out)
    logger.log(Level.ERR, "e")
    logger.log(Level.SYSERR, "s")
    lines = out.getvalue().splitlines()
    assert lines[0].endswith("] ERROR: e")
    assert lines[1].endswith("] ERROR: s")


def test_restore_default_prefix():
    logger, out = _logger("prog")
    logger.set_prefix_func(None)
    logger.log(Level.ERR, "x")
    assert out.getvalue().endswith("prog: ERROR: x\n")


def test_syserr_appends_error_text():
    logger, out = _logger()
    try:
        raise FileNotFoundError(2, "No such file or directory")
    except OSError:
        logger.log(Level.SYSERR, "data.txt")
        logger.log(Level.SYSERR, None)
    assert out.getvalue().splitlines() == [
        f"<{int(Level.SYSERR)}>data.txt: No such file or directory",
        f"<{int(Level.SYSERR)}>No such file or directory",
    ]


def test_no_output_after_close():
    logger, out = _logger()
    logger.close()
    logger.log(Level.ERR, "lost")
    assert out.getvalue() == ""
    assert out.closed is False


def test_open_file_append(tmp_path):
    path = tmp_path / "run.log"
    logger = MessageLogger()
    logger.open_file(path, "first")
    logger.set_prefix_func(_plain_prefix)
    logger.log(Level.ERR, "one")
    logger.close()
    logger.open_file(path, "second", append=True)
    logger.log(Level.ERR, "two")
    logger.close()
    assert path.read_text().splitlines() == [
        f"<{int(Level.ERR)}>one",
        f"<{int(Level.ERR)}>two",
    ]


def test_open_file_truncates(tmp_path):
    path = tmp_path / "run.log"
    path.write_text("old\n")
    with MessageLogger() as logger:
        logger.open_file(path, None, append=False)
        logger.set_prefix_func(_plain_prefix)
        logger.log(Level.WARN, "new")
    assert path.read_text() == f"<{int(Level.WARN)}>new\n"


def test_open_file_missing_directory(tmp_path):
    logger = MessageLogger()
    with pytest.raises(OSError):
        logger.open_file(tmp_path / "missing" / "x.log", "p")


def test_name_is_truncated():
    logger, _ = _logger("n" * 100)
    assert len(logger.name) == 31
    assert logger.name == "n" * 31