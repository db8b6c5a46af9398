"""Basic smoke tests for scaffolding."""

from foodlog import __version__
from foodlog.normalize import normalize_response


def test_version_is_set() -> None:
    assert __version__


def test_normalize_response_round_trips_single_item(make_block) -> None:
    block = make_block()
    assert normalize_response(block) == block
