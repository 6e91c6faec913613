from __future__ import annotations

"""
Unit tests for call-site capture.
"""

import os
import sys

import pytest

from thelogger.core.callsite import capture_call_site


def _helper():
    return capture_call_site(stacklevel=2)


def test_captures_direct_caller():
    expected_line = sys._getframe().f_lineno + 1
    site = capture_call_site()

    assert site is not None
    assert site.file == os.path.basename(__file__)
    assert site.line == expected_line


def test_stacklevel_skips_helpers():
    expected_line = sys._getframe().f_lineno + 1
    site = _helper()

    assert site.file == os.path.basename(__file__)
    assert site.line == expected_line


def test_full_path_option():
    site = capture_call_site(full_path=True)
    assert os.path.isabs(site.file)


def test_too_deep_stack_returns_none():
    assert capture_call_site(stacklevel=10_000) is None


@pytest.mark.skipif(sys.version_info < (3, 11), reason="column positions need Python 3.11+")
def test_column_is_one_based():
    site = capture_call_site()
    assert site.column == 12
