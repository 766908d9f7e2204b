import pytest

from algokit.trie import OK, REPEAT, WRONG, RollCall, max_xor_path


def test_roll_call_sequence():
    roll = RollCall(["alice", "bob"])
    assert roll.call("alice") == OK
    assert roll.call("alice") == REPEAT
    assert roll.call("bob") == OK
    assert roll.call("carol") == WRONG


def test_roll_call_prefix_is_wrong():
    roll = RollCall(["alice"])
    assert roll.call("ali") == WRONG
    assert roll.call("alice") == OK


def test_max_xor_path_sample():
    assert max_xor_path(4, [(1, 2, 3), (2, 3, 4), (2, 4, 6)]) == 7


def test_single_edge_gives_its_weight():
    assert max_xor_path(2, [(1, 2, 9)]) == 9


def test_equal_weights_cancel_along_path():
    assert max_xor_path(3, [(1, 2, 5), (2, 3, 5)]) == 5


def test_single_vertex():
    assert max_xor_path(1, []) == 0


def test_bad_edges_raise():
    with pytest.raises(ValueError):
        max_xor_path(2, [(1, 3, 1)])
    with pytest.raises(ValueError):
        max_xor_path(2, [(1, 2, -1)])