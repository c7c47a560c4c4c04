"""
Interactive driver for the AVL tree.

Reads whitespace-separated integers the way a scanf loop would: an op code,
followed by a value for the insert and remove operations.

    [1] Insert item
    [2] Remove item
    [3] Print tree
    [4] Print sorted
    [0] Exit
"""

import sys
from typing import Iterator, Optional, TextIO

from avltree.avl_tree import AVLTree
from avltree.results import InsertResult

MENU = [
    "[1] Insert item",
    "[2] Remove item",
    "[3] Print tree",
    "[4] Print sorted",
    "[0] Exit",
]


class InvalidInput(Exception):
    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid input: {token}")
        self.token = token


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> Optional[int]:
    token = next(tokens, None)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        raise InvalidInput(token) from None


def run(stdin: TextIO, stdout: TextIO) -> int:
    tree: AVLTree[int] = AVLTree()
    tokens = _tokens(stdin)

    for line in MENU:
        print(line, file=stdout)
    print(file=stdout)

    try:
        while True:
            op = _next_int(tokens)
            if op is None or op == 0:
                break

            if op == 1:
                print("Insert item: ", end="", file=stdout)
                value = _next_int(tokens)
                if value is None:
                    break
                if tree.insert(value) is InsertResult.DUPLICATE:
                    print("Invalid value.", file=stdout)

            elif op == 2:
                print("Remove item: ", end="", file=stdout)
                value = _next_int(tokens)
                if value is None:
                    break
                tree.remove(value)

            elif op == 3:
                print("Printing tree...", file=stdout)
                print(tree.traverse_debug(), end="", file=stdout)

            elif op == 4:
                print("Printing sorted items...", file=stdout)
                print(tree.traverse_sorted(), file=stdout)
    except InvalidInput as e:
        print(e, file=stdout)
        return 1
    finally:
        tree.destroy()

    return 0


def main() -> int:
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
