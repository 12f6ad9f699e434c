# Report every decision the insertion fixup makes (which case was taken, which
# nodes were recolored) through the `redblack.rbtree` logger at DEBUG level.
#
# This is only the default for trees built without an explicit `trace`
# callable. Passing `trace=` to `RBTree` always wins, so a single tree can be
# traced without turning it on for every other tree in the process.
TRACE_FIXUP = False

# Ascending keys. Every insert after the second lands on the right spine, so
# this sequence exercises left rotations and color flips.
SAMPLE_ONE = (10, 20, 30, 40, 50, 60, 70, 80, 90, 100)

# Mixed order keys. 35 and 37 land as inner grandchildren, which exercises the
# double rotation path and right rotations.
SAMPLE_TWO = (40, 20, 70, 10, 30, 35, 37)

# Key the demo looks up after building a sample tree.
DEFAULT_SEARCH_KEY = 20
