"""Path enumeration, topological ordering and reachability on directed graphs."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Sequence


def all_paths_source_target(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """Every simple path from node 0 to node ``len(graph) - 1``, in DFS order."""
    n = len(graph)
    if n == 0:
        return []
    target = n - 1
    paths: list[list[int]] = []
    path: list[int] = []
    on_path = [False] * n

    def walk(node: int) -> None:
        path.append(node)
        if node == target:
            paths.append(list(path))
        else:
            on_path[node] = True
            for nbr in graph[node]:
                if not on_path[nbr]:
                    walk(nbr)
            on_path[node] = False
        path.pop()

    walk(0)
    return paths


def _course_order(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """Kahn's algorithm over ``[course, prerequisite]`` pairs; may be partial."""
    dependants: defaultdict[int, list[int]] = defaultdict(list)
    indegree = [0] * num_courses
    for course, prerequisite in prerequisites:
        dependants[prerequisite].append(course)
        indegree[course] += 1

    queue = deque(course for course in range(num_courses) if indegree[course] == 0)
    order: list[int] = []
    while queue:
        course = queue.popleft()
        order.append(course)
        for dependant in dependants[course]:
            indegree[dependant] -= 1
            if indegree[dependant] == 0:
                queue.append(dependant)
    return order


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """True if every course can be taken given ``[course, prerequisite]`` pairs."""
    return len(_course_order(num_courses, prerequisites)) == num_courses


def find_order(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """A valid order to take all courses, or an empty list if none exists."""
    order = _course_order(num_courses, prerequisites)
    return order if len(order) == num_courses else []


def check_if_prerequisite(
    num_courses: int,
    prerequisites: Iterable[Sequence[int]],
    queries: Iterable[Sequence[int]],
) -> list[bool]:
    """For each query ``[u, v]``, whether ``u`` is a direct or indirect prerequisite of ``v``.

    Here each prerequisite pair ``[a, b]`` means ``a`` must come before ``b``.
    """
    following: defaultdict[int, list[int]] = defaultdict(list)
    indegree = [0] * num_courses
    required: list[set[int]] = [set() for _ in range(num_courses)]
    for before, after in prerequisites:
        following[before].append(after)
        indegree[after] += 1

    queue = deque(course for course in range(num_courses) if indegree[course] == 0)
    while queue:
        course = queue.popleft()
        for nbr in following[course]:
            required[nbr].add(course)
            required[nbr] |= required[course]
            indegree[nbr] -= 1
            if indegree[nbr] == 0:
                queue.append(nbr)

    return [u in required[v] for u, v in queries]


def get_ancestors(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Sorted ancestors of every node of a DAG given as ``[from, to]`` edges."""
    children: defaultdict[int, list[int]] = defaultdict(list)
    indegree = [0] * n
    for u, v in edges:
        children[u].append(v)
        indegree[v] += 1

    ancestors: list[set[int]] = [set() for _ in range(n)]
    queue = deque(node for node in range(n) if indegree[node] == 0)
    while queue:
        node = queue.popleft()
        for child in children[node]:
            ancestors[child].add(node)
            ancestors[child] |= ancestors[node]
            indegree[child] -= 1
            if indegree[child] == 0:
                queue.append(child)

    return [sorted(found) for found in ancestors]


def find_all_recipes(
    recipes: Sequence[str],
    ingredients: Sequence[Sequence[str]],
    supplies: Iterable[str],
) -> list[str]:
    """Recipes that can be made from the supplies and from other makeable recipes."""
    available = set(supplies)
    index_of = {recipe: i for i, recipe in enumerate(recipes)}
    users: defaultdict[str, list[str]] = defaultdict(list)
    indegree: dict[str, int] = {}

    for recipe, needed in zip(recipes, ingredients):
        for ingredient in needed:
            if ingredient in index_of:
                users[ingredient].append(recipe)
                indegree[recipe] = indegree.get(recipe, 0) + 1

    queue = deque(recipe for recipe in recipes if recipe not in indegree)
    made: list[str] = []
    while queue:
        dish = queue.popleft()
        if all(ingredient in available for ingredient in ingredients[index_of[dish]]):
            made.append(dish)
            available.add(dish)
            for dependant in users[dish]:
                indegree[dependant] -= 1
                if indegree[dependant] == 0:
                    queue.append(dependant)
    return made


def eventual_safe_nodes(graph: Sequence[Sequence[int]]) -> list[int]:
    """Nodes from which every path ends at a terminal node, in ascending order."""
    n = len(graph)
    # 0: unvisited, 1: in progress or unsafe, 2: safe
    state = [0] * n
    for start in range(n):
        if state[start]:
            continue
        state[start] = 1
        stack = [(start, iter(graph[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nbr in neighbours:
                if state[nbr] == 0:
                    state[nbr] = 1
                    stack.append((nbr, iter(graph[nbr])))
                    break
                if state[nbr] == 1:
                    # Every node on the current path leads into a cycle.
                    stack.clear()
                    break
            else:
                stack.pop()
                state[node] = 2
    return [node for node in range(n) if state[node] == 2]