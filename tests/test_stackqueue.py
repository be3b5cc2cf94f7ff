from ticketdesk.stackqueue import Queue, Stack


def test_stack_is_lifo():
    stack = Stack()
    items = ["a", "b", "c"]
    for item in items:
        stack.push(item)
    assert stack.top() == "c"
    popped = [stack.pop() for _ in items]
    assert popped == list(reversed(items))
    assert stack.pop() is None
    assert stack.top() is None


def test_stack_iterates_top_down():
    stack = Stack()
    stack.push(1)
    stack.push(2)
    assert list(stack) == [2, 1]
    assert len(stack) == 2


def test_stack_clean():
    stack = Stack()
    stack.push("x")
    stack.clean()
    assert len(stack) == 0
    assert stack.top() is None


def test_queue_is_fifo():
    queue = Queue()
    items = ["a", "b", "c"]
    for item in items:
        queue.insert(item)
    assert queue.front() == "a"
    removed = [queue.remove() for _ in items]
    assert removed == items
    assert queue.remove() is None
    assert queue.front() is None


def test_queue_iterates_front_to_back():
    queue = Queue()
    queue.insert(1)
    queue.insert(2)
    assert list(queue) == [1, 2]
    assert len(queue) == 2


def test_queue_clean():
    queue = Queue()
    queue.insert("x")
    queue.clean()
    assert len(queue) == 0
    assert queue.remove() is None