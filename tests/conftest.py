import logging
from datetime import datetime

import pytest


SAMPLE_LINE = "S,0012,9,5,0,15,6,2023,1,2,21.5,2,2,65,10,7,0.4"


@pytest.fixture
def logger():
    return logging.getLogger("nesa2csv.tests")


@pytest.fixture
def cutoff():
    return datetime(2023, 6, 1)


@pytest.fixture
def write_log(tmp_path):
    def _write(relative, lines, raw=None):
        path = tmp_path / "logs" / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if raw is not None:
            path.write_bytes(raw)
        else:
            path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


class FailingHandle:
    """File stand-in that yields some lines and then fails like a bad disk."""

    def __init__(self, lines):
        self._lines = lines

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def __iter__(self):
        for line in self._lines:
            yield line + "\n"
        raise OSError("Input/output error")
