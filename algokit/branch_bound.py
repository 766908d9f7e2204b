"""Branch and bound searches: 0/1 knapsack and the assignment problem."""


def knapsack_max(capacity, items):
    """Return the best total value of items (time, value) fitting in `capacity`."""
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    goods = [(int(t), int(v)) for t, v in items]
    if any(t <= 0 for t, _ in goods):
        raise ValueError("item times must be positive")
    goods.sort(key=lambda g: g[1] / g[0], reverse=True)
    ratios = [v / t for t, v in goods]
    n = len(goods)
    best = 0

    def bound(start, room):
        total = 0
        for (t, v), ratio in zip(goods[start:], ratios[start:]):
            if room >= t:
                room -= t
                total += v
            else:
                return int(total + room * ratio)
        return total

    def search(index, room, value):
        nonlocal best
        best = max(best, value)
        if index >= n:
            return
        if bound(index + 1, room) + value > best:
            search(index + 1, room, value)
        t, v = goods[index]
        if t <= room:
            search(index + 1, room - t, value + v)

    search(0, capacity, 0)
    return best


def min_assignment_cost(costs):
    """Return the least total cost of giving person i exactly one distinct job j."""
    rows = [list(row) for row in costs]
    n = len(rows)
    if any(len(row) != n for row in rows):
        raise ValueError("cost matrix must be square")
    best = sum(rows[i][i] for i in range(n))
    taken = [False] * n

    def assign(person, spent):
        nonlocal best
        if person == n:
            best = min(best, spent)
            return
        if spent >= best:
            return
        for job, cost in enumerate(rows[person]):
            if not taken[job]:
                taken[job] = True
                assign(person + 1, spent + cost)
                taken[job] = False

    assign(0, 0)
    return best