# dsakit

A small collection of classic data structures and algorithms, written as
plain Python with no dependencies outside the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `BoundedArray`, `insert_at`, `delete_at`, `bubble_sort`, `linear_search`, `binary_search` |
| `dsakit.basics` | `to_binary`, `factorial`, `digits_to_words`, `count_vowels_consonants`, `christmas_banner`, `register_user`, `UserProfile` |
| `dsakit.linked_lists` | `Node`, `SinglyLinkedList`, `CircularLinkedList` |
| `dsakit.doubly_linked` | `DoublyNode`, `DoublyLinkedList` |
| `dsakit.stacks_queues` | `ArrayStack`, `LinkedStack`, `ArrayQueue`, `LinkedQueue`, `StackOverflowError`, `StackUnderflowError`, `QueueFullError`, `QueueEmptyError` |
| `dsakit.expressions` | `is_operator`, `precedence`, `infix_to_postfix`, `infix_to_prefix`, `postfix_to_infix`, `build_expression_tree`, `inorder`, `preorder`, `postorder`, `ExprNode`, `ExpressionError` |
| `dsakit.trees` | `BinarySearchTree`, `AVLTree`, `TreeNode`, `iterative_inorder`, `iterative_preorder`, `iterative_postorder` |

## Usage

Arrays, sorting and searching. `insert_at` and `delete_at` return new lists;
`insert_at` raises `OverflowError` when the list already fills the capacity
and both raise `IndexError` for a position out of range.

```python
from dsakit.arrays import binary_search, bubble_sort, insert_at

print(bubble_sort([5, 3, 4, 6, 1]))                     # [1, 3, 4, 5, 6]
print(binary_search([1, 2, 3, 4, 5, 6, 7, 8, 9], 6))    # 5
print(insert_at([1, 2, 3, 4, 5], 10, 3, capacity=100))  # [1, 2, 3, 10, 4, 5]
```

Small number and text helpers:

```python
from dsakit.basics import digits_to_words, factorial, to_binary

print(to_binary(10))            # 1010
print(factorial(5))             # 120
print(digits_to_words(305))     # ['THREE', 'ZERO', 'FIVE']
```

`register_user(password, confirmation, user_name, age)` returns a
`UserProfile` when the confirmation matches and raises `ValueError` otherwise.

Linked lists are iterable and keep their length. Positional operations raise
`IndexError` when the position is out of range; `insert_after` raises
`ValueError` for a node from another list.

```python
from dsakit.linked_lists import SinglyLinkedList
from dsakit.doubly_linked import DoublyLinkedList

items = SinglyLinkedList([10, 20, 30, 40])
items.insert_after(items.node_at(1), 69)
print(list(items))          # [10, 20, 69, 30, 40]

both_ways = DoublyLinkedList([10, 20, 30, 40, 50])
both_ways.delete_by_value(40)
print(list(reversed(both_ways)))    # [50, 30, 20, 10]
```

`ArrayStack` and `ArrayQueue` have a fixed size and raise
`StackOverflowError` or `QueueFullError` when full; all stacks and queues
raise `StackUnderflowError` or `QueueEmptyError` when read while empty.
`LinkedStack` and `LinkedQueue` have no size limit.

```python
from dsakit.stacks_queues import ArrayStack, LinkedStack, StackUnderflowError

stack = ArrayStack(10)
stack.push(10)
stack.push(20)
print(stack.pop())    # 20

try:
    ArrayStack(1).pop()
except StackUnderflowError:
    print("nothing to pop")

linked = LinkedStack()
for value in (28, 18, 15, 7):
    linked.push(value)
print(linked.peek(1), linked.bottom())    # 7 28
```

Expression conversion and expression trees work on single-character
operands and the operators `+ - * /`; malformed input raises
`ExpressionError`.

```python
from dsakit.expressions import (
    build_expression_tree,
    infix_to_prefix,
    inorder,
    postfix_to_infix,
)

print(infix_to_prefix("a+b*c"))           # +a*bc
print(postfix_to_infix("ab+c*"))          # ((a+b)*c)
print(inorder(build_expression_tree("ab+c*")))    # ['a', '+', 'b', '*', 'c']
```

Search trees hold distinct keys; `insert` and `delete` return whether the
tree changed.

```python
from dsakit.trees import AVLTree, BinarySearchTree

bst = BinarySearchTree([50, 30, 70, 20, 40])
bst.delete(30)
print(list(bst))          # [20, 40, 50, 70]

avl = AVLTree([10, 20, 30, 40, 50, 25])
print(list(avl))          # [10, 20, 25, 30, 40, 50]
print(avl.root_key())     # 30
```

## What it does not do

dsakit is a library only. It has no command-line program and no interactive
menus: reading values, choosing operations and printing results are left to
the code that uses it. `AVLTree` supports insertion but not deletion.

## Running the tests

Install the package with its `test` extra and run pytest from the project
directory:

```
pip install -e ".[test]"
pytest
```