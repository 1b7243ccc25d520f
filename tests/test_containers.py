import pytest

from infixcalc.containers import Queue, Stack

LETTERS_STACK = [c for c in "a,b,c,d,e,f,g,h,i,j,".split(",") if c]
LETTERS_QUEUE = [c for c in "a,b,c,d,e,f,g,h,i,j,k,".split(",") if c]


@pytest.fixture
def filled_stack():
    stack = Stack()
    for item in LETTERS_STACK:
        stack.push(item)
    return stack


def test_stack_count_after_pushes(filled_stack):
    assert len(filled_stack) == 10


def test_stack_tostring(filled_stack):
    assert str(filled_stack) == "stack: abcdefghij"


def test_stack_peek(filled_stack):
    assert filled_stack.peek() == "j"
    assert len(filled_stack) == 10


def test_stack_pop(filled_stack):
    assert filled_stack.pop() == "j"
    assert len(filled_stack) == 9
    assert str(filled_stack) == "stack: abcdefghi"


def test_stack_iterates_bottom_to_top(filled_stack):
    assert list(filled_stack) == LETTERS_STACK


def test_stack_empty_state():
    stack = Stack()
    assert stack.is_empty()
    stack.push("x")
    assert not stack.is_empty()
    stack.pop()
    assert stack.is_empty()


def test_stack_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_stack_peek_empty_raises():
    with pytest.raises(IndexError):
        Stack().peek()


def test_stack_pops_in_reverse_order(filled_stack):
    popped = [filled_stack.pop() for _ in range(len(filled_stack))]
    assert popped == LETTERS_STACK[::-1]


def test_queue_grows_past_initial_capacity():
    queue = Queue()
    for count, item in enumerate(LETTERS_QUEUE, start=1):
        queue.enqueue(item)
        assert len(queue) == count
        assert str(queue) == " ".join(LETTERS_QUEUE[:count])


def test_queue_dequeues_in_order():
    queue = Queue()
    for item in LETTERS_QUEUE:
        queue.enqueue(item)
    assert [queue.dequeue() for _ in range(len(LETTERS_QUEUE))] == LETTERS_QUEUE
    assert queue.is_empty()


def test_queue_iterates_head_to_tail():
    queue = Queue()
    for item in LETTERS_QUEUE:
        queue.enqueue(item)
    queue.dequeue()
    assert list(queue) == LETTERS_QUEUE[1:]


def test_queue_dequeue_empty_raises():
    with pytest.raises(IndexError):
        Queue().dequeue()