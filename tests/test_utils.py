"""Tests for utility helpers."""

import json
import logging

import numpy as np
import pytest
import scipy.sparse

from geigop.core.errors import InvalidDimension
from geigop.utils.checks import require_sparse, require_square
from geigop.utils.logging import log_event


def test_require_square():
    """Square matrices return their dimension."""
    assert require_square(scipy.sparse.eye(5)) == 5
    with pytest.raises(InvalidDimension):
        require_square(scipy.sparse.csr_matrix((2, 3)))


def test_require_sparse():
    """Dense arrays are rejected with the argument name."""
    require_sparse("B", scipy.sparse.eye(2, format="csc"))
    with pytest.raises(TypeError, match="B must be"):
        require_sparse("B", np.eye(2))


def test_log_event_json_payload(caplog):
    """Events are logged as sorted single-line JSON."""
    logger = logging.getLogger("geigop.test")
    with caplog.at_level(logging.DEBUG, logger="geigop.test"):
        log_event(logger, "probe", n=3, ok=True)

    body = json.loads(caplog.records[-1].getMessage())
    assert body == {"event": "probe", "n": 3, "ok": True}


def test_log_event_respects_level(caplog):
    """Nothing is emitted below the logger's level."""
    logger = logging.getLogger("geigop.quiet")
    with caplog.at_level(logging.WARNING, logger="geigop.quiet"):
        log_event(logger, "hidden")

    assert not caplog.records
