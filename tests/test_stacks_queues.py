import pytest

from dsakit.stacks_queues import (
    ArrayQueue,
    ArrayStack,
    LinkedQueue,
    LinkedStack,
    QueueEmptyError,
    QueueFullError,
    StackOverflowError,
    StackUnderflowError,
)


def test_array_stack_fills_to_size_and_overflows():
    stack = ArrayStack(10)
    values = [10, 20, 30, 40, 50, 60, 70, 80, 90, 100]
    for value in values:
        stack.push(value)
    assert stack.is_full()
    assert not stack.is_empty()
    assert list(stack) == values
    with pytest.raises(StackOverflowError):
        stack.push(110)
    assert len(stack) == 10


def test_array_stack_pops_in_reverse_order():
    stack = ArrayStack(10)
    for value in [10, 20, 30]:
        stack.push(value)
    assert stack.pop() == 30
    assert stack.pop() == 20
    assert list(stack) == [10]
    assert not stack.is_full()


def test_array_stack_underflow():
    stack = ArrayStack(3)
    assert stack.is_empty()
    with pytest.raises(StackUnderflowError):
        stack.pop()


def test_linked_stack_peek_positions_follow_iteration():
    stack = LinkedStack()
    for value in [28, 18, 15, 7]:
        stack.push(value)
    assert list(stack) == [7, 15, 18, 28]
    assert [stack.peek(i) for i in range(1, 5)] == list(stack)
    assert stack.top() == 7
    assert stack.bottom() == 28
    assert len(stack) == 4


def test_linked_stack_peek_out_of_range():
    stack = LinkedStack()
    stack.push(1)
    with pytest.raises(IndexError):
        stack.peek(2)
    with pytest.raises(IndexError):
        stack.peek(0)


def test_linked_stack_pop_and_empty_errors():
    stack = LinkedStack()
    stack.push(5)
    stack.push(6)
    assert stack.pop() == 6
    assert stack.pop() == 5
    assert stack.is_empty()
    with pytest.raises(StackUnderflowError):
        stack.pop()
    with pytest.raises(StackUnderflowError):
        stack.top()
    with pytest.raises(StackUnderflowError):
        stack.bottom()


def test_array_queue_fifo_and_full():
    queue = ArrayQueue(5)
    for value in [1, 2, 3, 4, 5]:
        queue.enqueue(value)
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(6)
    assert queue.dequeue() == 1
    assert list(queue) == [2, 3, 4, 5]
    assert len(queue) == 4


def test_array_queue_slots_not_reused_until_empty():
    queue = ArrayQueue(2)
    queue.enqueue(7)
    queue.enqueue(8)
    assert queue.dequeue() == 7
    with pytest.raises(QueueFullError):
        queue.enqueue(9)
    assert queue.dequeue() == 8
    assert queue.is_empty()
    queue.enqueue(9)
    queue.enqueue(10)
    assert list(queue) == [9, 10]


def test_array_queue_empty_dequeue():
    queue = ArrayQueue(3)
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_linked_queue_fifo():
    queue = LinkedQueue()
    for value in [10, 20, 30]:
        queue.enqueue(value)
    assert queue.dequeue() == 10
    assert queue.dequeue() == 20
    queue.enqueue(40)
    queue.enqueue(50)
    assert queue.dequeue() == 30
    assert queue.dequeue() == 40
    assert list(queue) == [50]
    assert len(queue) == 1


def test_linked_queue_empty():
    queue = LinkedQueue()
    assert queue.is_empty()
    with pytest.raises(QueueEmptyError):
        queue.dequeue()