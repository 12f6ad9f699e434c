"""
An in-memory red black tree, the balanced tree that sits under many key ordered
storage engines (the memtable of an LSM tree, for example).

- An insert walks down from the root like a plain binary search tree and hangs
  a new red node off the first empty child slot it finds.
- If the new node's parent is also red the tree is repaired bottom up: recolor
  while the uncle is red, otherwise rotate once or twice and stop.
- The root is always recolored black at the end, so the tree height stays
  below 2 * log2(n + 1) no matter what order the keys arrive in.
- Lookups walk down from the root and never modify the tree.

TODO:
 - [x] Insert with fixup
 - [x] Search returning read-only handles
 - [x] In-order and pre-order traversal
 - [x] Invariant checks for tests
 - [ ] Delete with the symmetric fixup

 LIMITS:
  Not thread safe. Hold a lock around `insert` if other threads read the tree.
"""
