import pytest

from transitnet.algorithms.base import UNREACHABLE, PathResult
from transitnet.algorithms.paths import build_path_result, check_endpoints
from transitnet.exceptions import NegativeCycleError, VertexNotFoundError


def test_build_path_result_walks_back_to_origin():
    pred = {2: 1, 3: 2, 4: 3}
    assert build_path_result(pred, 1, 4, 9, 4) == PathResult(9, (1, 2, 3, 4))


def test_build_path_result_unset_predecessor_is_unreachable():
    assert build_path_result({2: 1}, 1, 3, UNREACHABLE, 3) == PathResult(UNREACHABLE, ())


def test_build_path_result_zero_is_a_real_predecessor():
    assert build_path_result({1: 0}, 0, 1, 2, 2) == PathResult(2, (0, 1))


def test_build_path_result_trivial_path():
    assert build_path_result({}, 5, 5, 0, 1) == PathResult(0, (5,))


def test_build_path_result_detects_loop():
    with pytest.raises(NegativeCycleError):
        build_path_result({2: 3, 3: 2}, 1, 2, -7, 3)


def test_check_endpoints(diamond):
    check_endpoints(diamond, 1, 4, "op")
    with pytest.raises(VertexNotFoundError, match="op: vertex 0 does not exist"):
        check_endpoints(diamond, 0, 4, "op")


def test_path_result_is_frozen():
    result = PathResult(1, (0, 1))
    with pytest.raises(AttributeError):
        result.distance = 0  # type: ignore[misc]
