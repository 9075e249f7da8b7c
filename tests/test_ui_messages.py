import pytest

from doc_qa.ui.messages import pop_messages, queue_message


def test_queued_messages_are_returned_once_in_order() -> None:
    state = {}
    queue_message(state, "success", "Document deleted!")
    queue_message(state, "error", "Failed to fetch documents.")

    assert pop_messages(state) == [
        ("success", "Document deleted!"),
        ("error", "Failed to fetch documents."),
    ]
    assert pop_messages(state) == []


def test_pop_without_messages_is_empty() -> None:
    assert pop_messages({}) == []


def test_unknown_level_is_rejected() -> None:
    with pytest.raises(ValueError):
        queue_message({}, "balloons", "Done")
