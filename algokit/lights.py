"""Lights-out on a graph solved by meeting in the middle."""


def _subset_effects(masks):
    """Return (xor of chosen masks, number chosen) for every subset."""
    effects, sizes = [0], [0]
    for mask in masks:
        effects += [e ^ mask for e in effects]
        sizes += [s + 1 for s in sizes]
    return zip(effects, sizes)


def min_switches(n, edges):
    """Return the fewest switches to press so that every lamp 1..n is on.

    Pressing a switch toggles its lamp and those of its neighbours.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    masks = [1 << i for i in range(n)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError("edge endpoints must lie in 1..n")
        masks[u - 1] |= 1 << (v - 1)
        masks[v - 1] |= 1 << (u - 1)
    half = n // 2
    cheapest = {}
    for effect, size in _subset_effects(masks[:half]):
        if effect not in cheapest or size < cheapest[effect]:
            cheapest[effect] = size
    full = (1 << n) - 1
    best = None
    for effect, size in _subset_effects(masks[half:]):
        other = cheapest.get(full ^ effect)
        if other is not None and (best is None or other + size < best):
            best = other + size
    if best is None:
        raise ValueError("no combination of switches lights every lamp")
    return best