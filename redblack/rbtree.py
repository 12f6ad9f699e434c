"""
Implementation of the classic parent-linked Red Black Tree from "Introduction
to Algorithms" (Cormen et al.), chapter 13. Insertion places the key like a
plain binary search tree and then walks back up the tree repairing red-red
violations with recolors and at most two rotations.

This implementation doesn't provide support for node deletion. Keys are never
removed once inserted, so there is no delete fixup.
"""
import logging
import weakref

from .settings import TRACE_FIXUP

logger = logging.getLogger(__name__)

RED = True
BLACK = False

COLOR_NAMES = {RED: "RED", BLACK: "BLACK"}


class InvariantViolation(Exception):
    pass


def describe(node):
    if node is None:
        return "NULL(BLACK)"
    return f"{node.key}({COLOR_NAMES[node.color]})"


class Node:
    __slots__ = ("_key", "color", "left", "right", "_parent", "__weakref__")

    def __init__(self, key, color=RED):
        self._key = key
        self.color = color
        self.left = None
        self.right = None
        self._parent = None

    @property
    def key(self):
        return self._key

    @property
    def parent(self):
        # children own their subtrees, the parent link is only a back-reference
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node):
        self._parent = None if node is None else weakref.ref(node)


class NodeHandle:
    """
    Read-only view of a node in the tree. Returned from `RBTree.search` so the
    caller can inspect a stored key and its neighbours without being able to
    rewire the tree.
    """

    __slots__ = ("_node",)

    def __init__(self, node):
        self._node = node

    @staticmethod
    def _wrap(node):
        if node is None:
            return None
        return NodeHandle(node)

    @property
    def key(self):
        return self._node.key

    @property
    def color(self):
        return self._node.color

    @property
    def parent(self):
        return self._wrap(self._node.parent)

    @property
    def left(self):
        return self._wrap(self._node.left)

    @property
    def right(self):
        return self._wrap(self._node.right)

    def describe(self):
        node = self._node
        return (
            f"[ {describe(node)}"
            f"  P:{describe(node.parent)}"
            f"  L:{describe(node.left)}"
            f"  R:{describe(node.right)} ]"
        )

    def __eq__(self, other):
        return isinstance(other, NodeHandle) and other._node is self._node

    def __hash__(self):
        return id(self._node)

    def __repr__(self):
        return f"NodeHandle({describe(self._node)})"


class RBTree:
    """
    Ordered container of keys. Keys only need to support `<`, or an ordering
    can be supplied with `key`, which works like the `key` argument of
    `sorted`. The ordering must be a strict weak ordering, anything else leaves
    the tree's guarantees undefined.

    Duplicate keys are allowed. An equal key is always placed to the right of
    the keys already stored, so equal keys come out of `traverse` in the order
    they were inserted.

    `trace` receives a description of every fixup decision and is called like
    `logging.Logger.debug`, i.e. `trace(msg, *args)`.
    """

    def __init__(self, key=None, trace=None):
        self._root = None
        self._size = 0
        self._sort_key = key

        if trace is None and TRACE_FIXUP:
            trace = logger.debug
        self._trace = trace

    def __len__(self):
        return self._size

    def __contains__(self, key):
        return self._find(key) is not None

    def __iter__(self):
        return iter([node.key for node in self._inorder()])

    def __repr__(self):
        return f"<RBTree size={self._size} root={describe(self._root)}>"

    @property
    def root(self):
        if self._root is None:
            return None
        return NodeHandle(self._root)

    def _log(self, msg, *args):
        if self._trace is not None:
            self._trace(msg, *args)

    def _less(self, a, b):
        if self._sort_key is None:
            return a < b
        return self._sort_key(a) < self._sort_key(b)

    def _is_red(self, node):
        if node is None:
            return False
        return node.color == RED

    def _replace_child(self, old, new):
        """
        Puts `new` in the position `old` holds under its parent, or makes it
        the root if `old` was the root.
        """
        parent = old.parent
        new.parent = parent

        if parent is None:
            self._root = new
        elif old is parent.left:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, node):
        """
        Rotates the subtree rooted at `node` so that its right child becomes
        the new subtree root and `node` becomes that child's left child.

                 P                  P
                 |                  |
                 X                  Y
                / \\               / \\
              XL   Y     ->       X   YR
                  / \\           / \\
                YL   YR        XL   YL

        Colors are left untouched.
        """
        pivot = node.right
        if pivot is None:
            raise ValueError(f"cannot rotate {describe(node)} left, no right child")

        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node

        self._replace_child(node, pivot)
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node):
        """
        Inverse of `_rotate_left`.
        """
        pivot = node.left
        if pivot is None:
            raise ValueError(f"cannot rotate {describe(node)} right, no left child")

        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node

        self._replace_child(node, pivot)
        pivot.right = node
        node.parent = pivot

    def insert(self, key):
        node = Node(key)
        self._size += 1

        if self._root is None:
            node.color = BLACK
            self._root = node
            self._log("%s inserted as root", describe(node))
            return

        parent = None
        current = self._root
        while current is not None:
            parent = current
            if self._less(key, current.key):
                current = current.left
            else:
                current = current.right

        node.parent = parent
        if self._less(key, parent.key):
            parent.left = node
        else:
            parent.right = node

        self._fix_insert(node)
        self._log("%s inserted (fixed)", describe(node))

    def _fix_insert(self, node):
        """
        Walks up from a freshly inserted red node until there is no red node
        with a red parent left.

        Case 1: the uncle is red. Push the blackness of the grandparent down to
                the parent and uncle and continue from the grandparent.
        Case 2: the uncle is black and the node is an inner grandchild. Rotate
                the parent so the node becomes an outer grandchild, then fall
                through to case 3.
        Case 3: the uncle is black and the node is an outer grandchild. Recolor
                and rotate the grandparent, which ends the walk.
        """
        while node is not self._root and node.parent.color == RED:
            parent = node.parent
            grandparent = parent.parent
            self._log(
                "fixing %s with parent %s and grandparent %s",
                describe(node),
                describe(parent),
                describe(grandparent),
            )

            if parent is grandparent.left:
                uncle = grandparent.right

                if self._is_red(uncle):
                    self._log("case 1: parent and uncle %s are red", describe(uncle))
                    parent.color = BLACK
                    uncle.color = BLACK
                    grandparent.color = RED
                    node = grandparent
                    continue

                if node is parent.right:
                    self._log("case 2: uncle is black, node is a right child")
                    node = parent
                    self._rotate_left(node)
                    parent = node.parent

                self._log("case 3: uncle is black, node is a left child")
                parent.color = BLACK
                grandparent.color = RED
                self._rotate_right(grandparent)
            else:
                uncle = grandparent.left

                if self._is_red(uncle):
                    self._log("case 1b: parent and uncle %s are red", describe(uncle))
                    parent.color = BLACK
                    uncle.color = BLACK
                    grandparent.color = RED
                    node = grandparent
                    continue

                if node is parent.left:
                    self._log("case 2b: uncle is black, node is a left child")
                    node = parent
                    self._rotate_right(node)
                    parent = node.parent

                self._log("case 3b: uncle is black, node is a right child")
                parent.color = BLACK
                grandparent.color = RED
                self._rotate_left(grandparent)

        self._root.color = BLACK

    def _find(self, key):
        current = self._root

        while current is not None:
            if self._less(key, current.key):
                current = current.left
            elif self._less(current.key, key):
                current = current.right
            else:
                return current

        return None

    def search(self, key):
        node = self._find(key)
        if node is None:
            return None
        return NodeHandle(node)

    def _inorder(self):
        stack = []
        current = self._root

        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current
            current = current.right

    def traverse(self):
        """
        Returns the `(key, color)` pairs of the tree in sorted key order.
        """
        return [(node.key, node.color) for node in self._inorder()]

    def preorder(self):
        """
        Returns the `(key, color)` pairs in root, left, right order.
        """
        items = []
        stack = [self._root] if self._root is not None else []

        while stack:
            node = stack.pop()
            items.append((node.key, node.color))
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

        return items

    def height(self):
        """
        Number of nodes on the longest path from the root down to a leaf.
        """
        height = 0
        level = [self._root] if self._root is not None else []

        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]

        return height

    def black_height(self):
        if self._root is None:
            return 0
        # the root itself doesn't count towards its own black height
        return self._check_subtree(self._root) - 1

    def _check_subtree(self, node):
        """
        Returns the number of black nodes on every path from `node` down to an
        absent child, `node` included.
        """
        if node is None:
            return 0

        if node.color not in COLOR_NAMES:
            raise InvariantViolation(f"{node.key!r} has unknown color {node.color!r}")

        for child in (node.left, node.right):
            if child is None:
                continue
            if child.parent is not node:
                raise InvariantViolation(
                    f"{describe(child)} doesn't link back to its parent {describe(node)}"
                )
            if node.color == RED and child.color == RED:
                raise InvariantViolation(
                    f"red node {describe(node)} has red child {describe(child)}"
                )

        left = self._check_subtree(node.left)
        right = self._check_subtree(node.right)
        if left != right:
            raise InvariantViolation(
                f"{describe(node)} has black heights {left} (left) and {right} (right)"
            )

        return left + (1 if node.color == BLACK else 0)

    def validate(self):
        """
        Checks every red black property plus the binary search tree ordering
        and raises `InvariantViolation` on the first one that doesn't hold.
        Meant for tests and debugging, a correct tree never fails this.
        """
        if self._root is None:
            if self._size != 0:
                raise InvariantViolation(f"empty tree reports size {self._size}")
            return

        if self._root.parent is not None:
            raise InvariantViolation(f"root {describe(self._root)} has a parent")
        if self._root.color != BLACK:
            raise InvariantViolation(f"root {describe(self._root)} is not black")

        self._check_subtree(self._root)

        count = 0
        previous = None
        for node in self._inorder():
            if count and self._less(node.key, previous.key):
                raise InvariantViolation(
                    f"{node.key!r} is ordered after {previous.key!r}"
                )
            previous = node
            count += 1

        if count != self._size:
            raise InvariantViolation(f"tree holds {count} nodes but size is {self._size}")
