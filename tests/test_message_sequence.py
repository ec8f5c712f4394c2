import pytest

from rmwtypes.errors import InvalidArgumentError
from rmwtypes.message_sequence import MessageInfoSequence, MessageSequence


def test_zero_initialized():
    for sequence in (MessageSequence(), MessageInfoSequence()):
        assert sequence.data == []
        assert sequence.size == 0
        assert sequence.capacity == 0


def test_init_sets_capacity():
    for sequence in (MessageSequence(), MessageInfoSequence()):
        sequence.init(7)
        assert sequence.capacity == 7
        assert len(sequence.data) == 7
        assert sequence.size == 0


def test_init_zero_size():
    pairs = (
        (MessageSequence(), MessageSequence()),
        (MessageInfoSequence(), MessageInfoSequence()),
    )
    for sequence, empty in pairs:
        sequence.init(0)
        assert sequence == empty


def test_init_rejects_negative():
    with pytest.raises(InvalidArgumentError):
        MessageSequence().init(-3)
    with pytest.raises(InvalidArgumentError):
        MessageInfoSequence().init(-3)


def test_fini_resets():
    pairs = (
        (MessageSequence(), MessageSequence()),
        (MessageInfoSequence(), MessageInfoSequence()),
    )
    for sequence, empty in pairs:
        sequence.init(4)
        sequence.data[0] = object()
        sequence.size = 1
        sequence.fini()
        assert sequence == empty


def test_fini_leaves_messages_alone():
    message = {"field": 1}
    sequence = MessageSequence()
    sequence.init(2)
    sequence.data[0] = message
    sequence.size = 1
    sequence.fini()
    assert message == {"field": 1}
    assert sequence.capacity == 0