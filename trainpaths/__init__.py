"""Top-level package for trainpaths.

Shortest paths (Dijkstra, Bellman-Ford) and minimum spanning trees
(Kruskal, eager Prim) over weighted graph views, applied to a small
train network of cities and lines.
"""
