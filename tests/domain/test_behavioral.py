import pytest

from design_patterns.domain.behavioral.iterator import IteratorResult, NumberIterator
from design_patterns.domain.behavioral.mediator import ChatUser, Chatroom


class TestNumberIterator:
    """Test explicit and protocol iteration."""

    def test_yields_numbers_in_order(self):
        iterator = NumberIterator([1, 2, 3, 4, 5])
        values = []

        while iterator.has_next():
            values.append(iterator.next().value)

        assert values == [1, 2, 3, 4, 5]

    def test_exhausted_iterator_reports_done(self):
        iterator = NumberIterator([7])
        iterator.next()

        assert not iterator.has_next()
        assert iterator.next() == IteratorResult(value=None, done=True)

    def test_empty_iterator(self):
        iterator = NumberIterator([])

        assert not iterator.has_next()
        assert iterator.next().done

    def test_supports_python_iteration(self):
        assert list(NumberIterator([3, 1, 2])) == [3, 1, 2]

    def test_source_list_changes_do_not_leak(self):
        numbers = [1, 2]
        iterator = NumberIterator(numbers)
        numbers.append(3)

        assert list(iterator) == [1, 2]

    def test_python_iteration_stops(self):
        iterator = NumberIterator([1])
        next(iterator)

        with pytest.raises(StopIteration):
            next(iterator)


class TestChatroom:
    """Test message relay through the mediator."""

    def test_sender_does_not_receive_own_message(self):
        john_lines, jane_lines = [], []
        chatroom = Chatroom()
        john = ChatUser(chatroom, "John", john_lines.append)
        jane = ChatUser(chatroom, "Jane", jane_lines.append)
        chatroom.add_colleague(john)
        chatroom.add_colleague(jane)

        john.send_message("Hello from User 1!")
        jane.send_message("Hi from User 2!")

        assert jane_lines == ["Received message: Hello from User 1!"]
        assert john_lines == ["Received message: Hi from User 2!"]

    def test_broadcasts_to_all_other_colleagues_in_order(self, lines):
        chatroom = Chatroom()
        users = [ChatUser(chatroom, name, lambda m, n=name: lines.append(f"{n}: {m}"))
                 for name in ("a", "b", "c")]
        for user in users:
            chatroom.add_colleague(user)

        users[1].send_message("hi")

        assert lines == ["a: Received message: hi", "c: Received message: hi"]

    def test_unregistered_colleagues_receive_nothing(self, lines):
        chatroom = Chatroom()
        sender = ChatUser(chatroom, "sender", lines.append)
        ChatUser(chatroom, "outsider", lines.append)
        chatroom.add_colleague(sender)

        sender.send_message("anyone?")

        assert lines == []
