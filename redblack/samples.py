"""
Canned insertion sequences that build small, well known trees. Handy for
poking at the fixup cases by hand or from `demo.py`.
"""
from .rbtree import RBTree
from .settings import SAMPLE_ONE, SAMPLE_TWO

SAMPLES = {1: SAMPLE_ONE, 2: SAMPLE_TWO}


def load(keys, trace=None):
    tree = RBTree(trace=trace)
    for key in keys:
        tree.insert(key)
    return tree


def load_sample(number, trace=None):
    try:
        keys = SAMPLES[number]
    except KeyError:
        raise ValueError(f"no sample {number}, pick one of {sorted(SAMPLES)}")
    return load(keys, trace=trace)
