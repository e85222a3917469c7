"""Plan a route and a build order over a small road network.

Run with ``python examples/route_planning.py``.
"""

from pathlib import Path

import wgraph as wg

text = (Path(__file__).parent / "road_network.txt").read_text(encoding="utf-8")
result = wg.deserialize(text, parse_weight=wg.INT_WEIGHTS.parse)
graph = result.graph

route = wg.shortest_path(graph, "Amsterdam", "Eindhoven", weights=wg.INT_WEIGHTS)
print(" → ".join(route), f"({wg.path_weight(graph, route, weights=wg.INT_WEIGHTS)} km)")

# Roads only run one way here, so the network has a valid order
print(", ".join(wg.topological_order(graph)))

print(wg.serialize(graph, arrow=" -> "))
