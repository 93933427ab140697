import io
import logging
import zipfile

import pytest

from hytale_installer.utils.log import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_installer_logger():
    """setup_logging() attaches handlers and turns propagation off; undo it."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def make_zip(path, entries):
    """Write a zip at *path*; *entries* is a list of (name, bytes or None for a dir)."""
    with zipfile.ZipFile(path, "w") as zf:
        for name, data in entries:
            if data is None:
                zf.writestr(zipfile.ZipInfo(name), b"")
            else:
                zf.writestr(name, data)
    return path


def zip_bytes(entries):
    buf = io.BytesIO()
    make_zip(buf, entries)
    return buf.getvalue()
